"""
pagelens/services/report_builder.py

Assemble the wire report from pipeline results.
"""

from __future__ import annotations

from pagelens.classification.types import ClassificationResult
from pagelens.claims.extractor import ClaimsResult
from pagelens.comparison.engine import ComparisonResult
from pagelens.crawling.types import CrawlResult
from pagelens.schemas.analysis import (
    AggregatedFeatureEntry,
    AnalysisReport,
    ClaimEntry,
    ClaimsSection,
    ComparisonSection,
    ComparisonSummarySection,
    CrawledPage,
    CrawlErrorEntry,
    CrawlSection,
    DetectionSection,
    FindingEntry,
    MatchedFeatureEntry,
    PageClassificationEntry,
    PageClassificationSection,
    ReasoningSection,
    ReportMeta,
    SignalEvidence,
)

REPORT_EVIDENCE_PREVIEW = 5

METHODOLOGY = "Pattern-based classification using weighted signals on page snapshots."
CONFIDENCE_EXPLANATION = (
    "Confidence scores are the sum of matched signal weights. Higher scores indicate more evidence."
)
FIXED_LIMITATIONS = (
    "Cannot access authenticated pages",
    "Cannot interpret JavaScript-heavy dynamic content fully",
    "Pattern matching is based on common conventions - unusual implementations may not match",
)


def build_report(
    *,
    url: str,
    crawl_result: CrawlResult,
    classification_result: ClassificationResult,
    claims_result: ClaimsResult,
    comparison_result: ComparisonResult,
    duration_ms: int,
) -> AnalysisReport:
    summary = comparison_result.summary

    return AnalysisReport(
        meta=ReportMeta(
            analyzed_url=url,
            base_domain=crawl_result.base_domain,
            analyzed_at=crawl_result.crawled_at,
            analysis_time_ms=max(0, duration_ms),
        ),
        crawl=CrawlSection(
            total_pages=crawl_result.total_pages,
            max_depth=crawl_result.max_depth,
            max_pages=crawl_result.max_pages,
            pages=[
                CrawledPage(url=snapshot.url, title=snapshot.title)
                for snapshot in crawl_result.snapshots
            ],
            errors=[
                CrawlErrorEntry(url=error.url, error=error.error)
                for error in crawl_result.crawl_errors
            ],
            limitations=list(crawl_result.crawl_limitations),
        ),
        claims=ClaimsSection(
            extracted_from=claims_result.url,
            description=claims_result.description,
            claimed_features=[
                ClaimEntry(
                    id=claim.id,
                    label=claim.label,
                    confidence=claim.confidence,
                    evidence=list(claim.evidence),
                )
                for claim in claims_result.claims
            ],
            cta_actions=list(claims_result.cta_actions),
        ),
        detection=DetectionSection(
            page_classifications=[
                PageClassificationSection(
                    url=page.url,
                    title=page.title,
                    classifications=[
                        PageClassificationEntry(
                            pattern=match.pattern_id,
                            name=match.pattern_name,
                            confidence=match.confidence,
                            top_evidence=[
                                SignalEvidence(
                                    signal_type=signal.signal_type,
                                    matched_value=signal.matched_value,
                                    weight=signal.weight,
                                )
                                for signal in match.evidence[:REPORT_EVIDENCE_PREVIEW]
                            ],
                        )
                        for match in page.classifications
                    ],
                )
                for page in classification_result.page_classifications
            ],
            aggregated_features=[
                AggregatedFeatureEntry(
                    pattern=feature.pattern_id,
                    name=feature.pattern_name,
                    max_confidence=feature.max_confidence,
                    occurrences=feature.total_occurrences,
                    pages=[page.url for page in feature.evidence_pages],
                )
                for feature in classification_result.aggregated_features
            ],
        ),
        comparison=ComparisonSection(
            summary=ComparisonSummarySection(
                claimed_features=list(summary.claimed_features),
                detected_features=list(summary.detected_features),
                matched_features=[
                    MatchedFeatureEntry(
                        claim=matched.claim,
                        detected=matched.detected,
                        confidence=matched.confidence,
                    )
                    for matched in summary.matched_features
                ],
                missing_features=list(summary.missing_features),
                weak_features=list(summary.weak_features),
                unexpected_features=list(summary.unexpected_features),
            ),
            findings=[
                FindingEntry(
                    type=finding.type.value,
                    feature=finding.feature,
                    confidence=finding.confidence,
                    evidence_pages=list(finding.evidence_pages),
                    explanation=finding.explanation,
                )
                for finding in comparison_result.findings
            ],
            analysis=comparison_result.analysis,
        ),
        reasoning=ReasoningSection(
            methodology=METHODOLOGY,
            confidence_explanation=CONFIDENCE_EXPLANATION,
            limitations=[
                *FIXED_LIMITATIONS,
                f"Crawl limited to {crawl_result.max_depth} levels deep "
                f"and {crawl_result.max_pages} pages maximum",
            ],
        ),
    )

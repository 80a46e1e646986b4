"""
Expectation vs reality: reconcile homepage claims with detected page patterns.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from pagelens.claims.catalog import CLAIM_TO_PATTERN_MAP
from pagelens.claims.extractor import Claim
from pagelens.classification.types import AggregatedFeature

STRONG_CONFIDENCE = 50
WEAK_CONFIDENCE = 25


class FindingType(str, Enum):
    CLAIMED_NOT_DETECTED = "claimed_not_detected"
    WEAK_DETECTION = "weak_detection"
    DETECTED_NOT_CLAIMED = "detected_not_claimed"


SEVERITY_RANK: Mapping[FindingType, int] = {
    FindingType.CLAIMED_NOT_DETECTED: 0,
    FindingType.WEAK_DETECTION: 1,
    FindingType.DETECTED_NOT_CLAIMED: 2,
}


@dataclass(frozen=True)
class Finding:
    type: FindingType
    feature: str
    confidence: int
    evidence_pages: tuple[str, ...]
    explanation: str


@dataclass(frozen=True)
class MatchedFeature:
    claim: str
    detected: str
    confidence: int


@dataclass
class ComparisonSummary:
    claimed_features: list[str] = field(default_factory=list)
    detected_features: list[str] = field(default_factory=list)
    matched_features: list[MatchedFeature] = field(default_factory=list)
    missing_features: list[str] = field(default_factory=list)
    weak_features: list[str] = field(default_factory=list)
    unexpected_features: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ComparisonResult:
    summary: ComparisonSummary
    findings: list[Finding]
    analysis: str


def compare(
    claims: Sequence[Claim],
    aggregated_features: Sequence[AggregatedFeature],
    claim_to_patterns: Mapping[str, Sequence[str]] = CLAIM_TO_PATTERN_MAP,
) -> ComparisonResult:
    """
    Compare claimed features against crawl-wide detections.

    Each claim is judged by its best related detection: at or above
    STRONG_CONFIDENCE it is matched; from WEAK_CONFIDENCE up it is a weak
    detection; anything lower, or no related detection, is claimed but not
    detected. Detections at or above WEAK_CONFIDENCE that no claim accounts
    for are reported as underpromoted.
    """

    detected = {feature.pattern_id: feature for feature in aggregated_features}
    summary = ComparisonSummary(
        claimed_features=[claim.label for claim in claims],
        detected_features=[feature.pattern_name for feature in aggregated_features],
    )
    findings: list[Finding] = []
    matched_claim_ids: set[str] = set()
    matched_pattern_ids: set[str] = set()

    for claim in claims:
        best = _best_related_detection(claim_to_patterns.get(claim.id, ()), detected)

        if best is None:
            summary.missing_features.append(claim.label)
            findings.append(
                Finding(
                    type=FindingType.CLAIMED_NOT_DETECTED,
                    feature=claim.label,
                    confidence=0,
                    evidence_pages=(),
                    explanation=(
                        f'The website claims to offer "{claim.label}", but no observable evidence '
                        "was found during crawling. Possible reasons: the feature requires "
                        "authentication, is hidden behind user actions, or uses non-standard UI patterns."
                    ),
                )
            )
            continue

        matched_claim_ids.add(claim.id)
        matched_pattern_ids.add(best.pattern_id)
        confidence = best.max_confidence

        if confidence >= STRONG_CONFIDENCE:
            summary.matched_features.append(
                MatchedFeature(claim=claim.label, detected=best.pattern_name, confidence=confidence)
            )
        elif confidence >= WEAK_CONFIDENCE:
            summary.weak_features.append(claim.label)
            findings.append(
                Finding(
                    type=FindingType.WEAK_DETECTION,
                    feature=claim.label,
                    confidence=confidence,
                    evidence_pages=_page_urls(best),
                    explanation=(
                        f'The website claims to offer "{claim.label}", but the detection confidence '
                        f"is only {confidence}%. This could indicate a hidden or poorly accessible feature."
                    ),
                )
            )
        else:
            summary.missing_features.append(claim.label)
            findings.append(
                Finding(
                    type=FindingType.CLAIMED_NOT_DETECTED,
                    feature=claim.label,
                    confidence=confidence,
                    evidence_pages=(),
                    explanation=(
                        f'The website claims to offer "{claim.label}", but we found very weak evidence '
                        f"({confidence}% confidence). The feature may require authentication, "
                        "use non-standard patterns, or not actually exist."
                    ),
                )
            )

    for feature in aggregated_features:
        if feature.pattern_id in matched_pattern_ids:
            continue
        has_related_claim = any(
            claim_id in matched_claim_ids and feature.pattern_id in pattern_ids
            for claim_id, pattern_ids in claim_to_patterns.items()
        )
        if has_related_claim or feature.max_confidence < WEAK_CONFIDENCE:
            continue

        summary.unexpected_features.append(feature.pattern_name)
        findings.append(
            Finding(
                type=FindingType.DETECTED_NOT_CLAIMED,
                feature=feature.pattern_name,
                confidence=feature.max_confidence,
                evidence_pages=_page_urls(feature),
                explanation=(
                    f'Detected "{feature.pattern_name}" with {feature.max_confidence}% confidence, '
                    "but this wasn't explicitly mentioned in the website's claims. "
                    "This could be an underpromoted feature."
                ),
            )
        )

    findings.sort(key=lambda finding: SEVERITY_RANK[finding.type])
    return ComparisonResult(
        summary=summary,
        findings=findings,
        analysis=build_analysis_summary(summary),
    )


def _best_related_detection(
    pattern_ids: Sequence[str],
    detected: Mapping[str, AggregatedFeature],
) -> AggregatedFeature | None:
    best: AggregatedFeature | None = None
    for pattern_id in pattern_ids:
        feature = detected.get(pattern_id)
        if feature is not None and (best is None or feature.max_confidence > best.max_confidence):
            best = feature
    return best


def _page_urls(feature: AggregatedFeature) -> tuple[str, ...]:
    return tuple(page.url for page in feature.evidence_pages)


def match_rate(matched: int, claimed: int) -> int:
    """
    Whole-number percentage, halves rounded up.
    """

    if claimed <= 0:
        return 0
    return math.floor(matched * 100 / claimed + 0.5)


def build_analysis_summary(summary: ComparisonSummary) -> str:
    lines: list[str] = []
    total_claimed = len(summary.claimed_features)
    total_matched = len(summary.matched_features)

    if total_claimed == 0:
        lines.append("Could not extract clear feature claims from the homepage.")
    else:
        lines.append(
            f"Found evidence for {total_matched} of {total_claimed} claimed features "
            f"({match_rate(total_matched, total_claimed)}% match rate)."
        )

    if summary.missing_features:
        lines.append(
            f"{len(summary.missing_features)} claimed feature(s) could not be verified: "
            f"{', '.join(summary.missing_features)}."
        )
    if summary.weak_features:
        lines.append(
            f"{len(summary.weak_features)} feature(s) had weak detection: "
            f"{', '.join(summary.weak_features)}."
        )
    if summary.unexpected_features:
        lines.append(
            f"Found {len(summary.unexpected_features)} underpromoted feature(s): "
            f"{', '.join(summary.unexpected_features)}."
        )

    return " ".join(lines)

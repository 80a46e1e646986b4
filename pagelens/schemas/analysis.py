"""
pagelens/schemas/analysis.py

Request and report schemas for the analysis endpoint.

Fields are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for report models serialized with camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AnalyzeRequest(BaseModel):
    """
    Body of POST /analyze. `url` stays loosely typed so the endpoint can
    answer missing or non-string values with its own 400 payload.
    """

    url: Any = None


class ReportMeta(WireModel):
    analyzed_url: str
    base_domain: str
    analyzed_at: str
    analysis_time_ms: int = Field(..., ge=0)


class CrawledPage(WireModel):
    url: str
    title: str


class CrawlErrorEntry(WireModel):
    url: str
    error: str


class CrawlSection(WireModel):
    total_pages: int = Field(..., ge=0)
    max_depth: int = Field(..., ge=0)
    max_pages: int = Field(..., ge=1)
    pages: list[CrawledPage] = Field(default_factory=list)
    errors: list[CrawlErrorEntry] = Field(default_factory=list)
    limitations: list[str] = Field(default_factory=list)


class ClaimEntry(WireModel):
    id: str
    label: str
    confidence: int = Field(..., ge=0, le=100)
    evidence: list[str] = Field(default_factory=list)


class ClaimsSection(WireModel):
    extracted_from: str
    description: str
    claimed_features: list[ClaimEntry] = Field(default_factory=list)
    cta_actions: list[str] = Field(default_factory=list)


class SignalEvidence(WireModel):
    signal_type: str
    matched_value: str
    weight: int = Field(..., gt=0)


class PageClassificationEntry(WireModel):
    pattern: str
    name: str
    confidence: int = Field(..., gt=0)
    top_evidence: list[SignalEvidence] = Field(default_factory=list)


class PageClassificationSection(WireModel):
    url: str
    title: str
    classifications: list[PageClassificationEntry] = Field(default_factory=list)


class AggregatedFeatureEntry(WireModel):
    pattern: str
    name: str
    max_confidence: int = Field(..., gt=0)
    occurrences: int = Field(..., ge=1)
    pages: list[str] = Field(default_factory=list)


class DetectionSection(WireModel):
    page_classifications: list[PageClassificationSection] = Field(default_factory=list)
    aggregated_features: list[AggregatedFeatureEntry] = Field(default_factory=list)


class MatchedFeatureEntry(WireModel):
    claim: str
    detected: str
    confidence: int


class ComparisonSummarySection(WireModel):
    claimed_features: list[str] = Field(default_factory=list)
    detected_features: list[str] = Field(default_factory=list)
    matched_features: list[MatchedFeatureEntry] = Field(default_factory=list)
    missing_features: list[str] = Field(default_factory=list)
    weak_features: list[str] = Field(default_factory=list)
    unexpected_features: list[str] = Field(default_factory=list)


class FindingEntry(WireModel):
    type: str
    feature: str
    confidence: int = Field(..., ge=0)
    evidence_pages: list[str] = Field(default_factory=list)
    explanation: str


class ComparisonSection(WireModel):
    summary: ComparisonSummarySection
    findings: list[FindingEntry] = Field(default_factory=list)
    analysis: str


class ReasoningSection(WireModel):
    methodology: str
    confidence_explanation: str
    limitations: list[str] = Field(default_factory=list)


class AnalysisReport(WireModel):
    """
    Full analysis report returned by POST /analyze.
    """

    meta: ReportMeta
    crawl: CrawlSection
    claims: ClaimsSection
    detection: DetectionSection
    comparison: ComparisonSection
    reasoning: ReasoningSection

"""
Classification result models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SignalMatch:
    signal_type: str
    matched_value: str
    weight: int


@dataclass(frozen=True)
class PatternMatch:
    """
    Score of one snapshot against one pattern definition.
    """

    pattern_id: str
    pattern_name: str
    confidence: int
    evidence: tuple[SignalMatch, ...] = ()


@dataclass(frozen=True)
class PageClassification:
    url: str
    title: str
    classifications: tuple[PatternMatch, ...] = ()

    @property
    def primary(self) -> PatternMatch | None:
        return self.classifications[0] if self.classifications else None


@dataclass(frozen=True)
class EvidencePage:
    url: str
    confidence: int
    top_evidence: tuple[SignalMatch, ...] = ()


@dataclass(frozen=True)
class AggregatedFeature:
    """
    One pattern observed on at least one crawled page.

    `max_confidence` is the best single-page score, never a sum across pages.
    """

    pattern_id: str
    pattern_name: str
    max_confidence: int
    total_occurrences: int
    evidence_pages: tuple[EvidencePage, ...] = ()


@dataclass(frozen=True)
class ClassificationResult:
    page_classifications: list[PageClassification] = field(default_factory=list)
    aggregated_features: list[AggregatedFeature] = field(default_factory=list)

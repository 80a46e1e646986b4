"""
Weighted-signal page classification.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from pagelens.classification.patterns import PATTERNS
from pagelens.classification.signals import PatternDefinition, Signal, SignalKind
from pagelens.classification.types import (
    AggregatedFeature,
    ClassificationResult,
    EvidencePage,
    PageClassification,
    PatternMatch,
    SignalMatch,
)
from pagelens.crawling.types import PageSnapshot

TOP_EVIDENCE_PER_PAGE = 3
TEXT_EXCERPT_CHARS = 50


@dataclass(frozen=True)
class _SignalSource:
    """
    Where a signal kind reads its candidates and how it labels a hit.
    """

    candidates: Callable[[PageSnapshot], Iterable[str]]
    describe: Callable[[str, str], str]


_SOURCES: Mapping[SignalKind, _SignalSource] = {
    SignalKind.INPUT_TYPE: _SignalSource(
        candidates=lambda snapshot: (item.type for item in snapshot.inputs),
        describe=lambda value, _: f'input[type="{value}"]',
    ),
    SignalKind.INPUT_NAME: _SignalSource(
        candidates=lambda snapshot: (item.name for item in snapshot.inputs),
        describe=lambda value, _: f'input[name="{value}"]',
    ),
    SignalKind.INPUT_PLACEHOLDER: _SignalSource(
        candidates=lambda snapshot: (item.placeholder for item in snapshot.inputs),
        describe=lambda value, _: f'placeholder: "{value}"',
    ),
    SignalKind.BUTTON_TEXT: _SignalSource(
        candidates=lambda snapshot: (item.text for item in snapshot.buttons),
        describe=lambda value, _: f'button: "{value}"',
    ),
    SignalKind.LINK_TEXT: _SignalSource(
        candidates=lambda snapshot: (item.text for item in snapshot.links),
        describe=lambda value, _: f'link: "{value}"',
    ),
    SignalKind.LINK_HREF: _SignalSource(
        candidates=lambda snapshot: (item.href for item in snapshot.links),
        describe=lambda value, _: f'href: "{value}"',
    ),
    SignalKind.VISIBLE_TEXT: _SignalSource(
        candidates=lambda snapshot: (snapshot.visible_text,),
        describe=lambda _, matched: f'text: "{matched[:TEXT_EXCERPT_CHARS]}"',
    ),
    SignalKind.URL: _SignalSource(
        candidates=lambda snapshot: (snapshot.url,),
        describe=lambda value, _: f'url: "{value}"',
    ),
}


def check_signal(signal: Signal, snapshot: PageSnapshot) -> SignalMatch | None:
    """
    Test one signal against a snapshot.

    The first element that satisfies the matcher wins; further matching
    elements do not add weight again.
    """

    source = _SOURCES[signal.kind]
    for candidate in source.candidates(snapshot):
        matched = signal.matcher.search(candidate)
        if matched is not None:
            return SignalMatch(
                signal_type=signal.kind.value,
                matched_value=source.describe(candidate, matched),
                weight=signal.weight,
            )
    return None


def score_pattern(pattern: PatternDefinition, snapshot: PageSnapshot) -> PatternMatch | None:
    evidence: list[SignalMatch] = []
    for signal in pattern.signals:
        match = check_signal(signal, snapshot)
        if match is not None:
            evidence.append(match)

    confidence = sum(match.weight for match in evidence)
    if confidence <= 0:
        return None
    return PatternMatch(
        pattern_id=pattern.id,
        pattern_name=pattern.name,
        confidence=confidence,
        evidence=tuple(evidence),
    )


def classify_page(
    snapshot: PageSnapshot,
    patterns: Mapping[str, PatternDefinition] = PATTERNS,
) -> list[PatternMatch]:
    """
    Score a snapshot against every pattern, highest confidence first.

    Ties keep catalog order.
    """

    matches = [
        match
        for match in (score_pattern(pattern, snapshot) for pattern in patterns.values())
        if match is not None
    ]
    matches.sort(key=lambda match: match.confidence, reverse=True)
    return matches


@dataclass
class _FeatureAccumulator:
    pattern_id: str
    pattern_name: str
    max_confidence: int = 0
    total_occurrences: int = 0
    evidence_pages: list[EvidencePage] = field(default_factory=list)

    def add(self, url: str, match: PatternMatch) -> None:
        self.max_confidence = max(self.max_confidence, match.confidence)
        self.total_occurrences += 1
        self.evidence_pages.append(
            EvidencePage(
                url=url,
                confidence=match.confidence,
                top_evidence=match.evidence[:TOP_EVIDENCE_PER_PAGE],
            )
        )

    def freeze(self) -> AggregatedFeature:
        return AggregatedFeature(
            pattern_id=self.pattern_id,
            pattern_name=self.pattern_name,
            max_confidence=self.max_confidence,
            total_occurrences=self.total_occurrences,
            evidence_pages=tuple(self.evidence_pages),
        )


def get_primary_classification(snapshot: PageSnapshot) -> PatternMatch | None:
    matches = classify_page(snapshot)
    return matches[0] if matches else None


def classify_all_pages(snapshots: Sequence[PageSnapshot]) -> ClassificationResult:
    """
    Classify every snapshot and fold the matches into per-pattern aggregates.
    """

    page_classifications: list[PageClassification] = []
    accumulators: dict[str, _FeatureAccumulator] = {}

    for snapshot in snapshots:
        matches = classify_page(snapshot)
        page_classifications.append(
            PageClassification(
                url=snapshot.url,
                title=snapshot.title,
                classifications=tuple(matches),
            )
        )

        for match in matches:
            accumulator = accumulators.get(match.pattern_id)
            if accumulator is None:
                accumulator = _FeatureAccumulator(match.pattern_id, match.pattern_name)
                accumulators[match.pattern_id] = accumulator
            accumulator.add(snapshot.url, match)

    aggregated = [accumulator.freeze() for accumulator in accumulators.values()]
    aggregated.sort(key=lambda feature: feature.max_confidence, reverse=True)

    return ClassificationResult(
        page_classifications=page_classifications,
        aggregated_features=aggregated,
    )

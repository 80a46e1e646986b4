"""
Weighted-signal classification of page snapshots.
"""

from pagelens.classification.classifier import (
    classify_all_pages,
    classify_page,
    get_primary_classification,
)
from pagelens.classification.patterns import PATTERNS
from pagelens.classification.types import (
    AggregatedFeature,
    ClassificationResult,
    EvidencePage,
    PageClassification,
    PatternMatch,
    SignalMatch,
)

__all__ = [
    "PATTERNS",
    "AggregatedFeature",
    "ClassificationResult",
    "EvidencePage",
    "PageClassification",
    "PatternMatch",
    "SignalMatch",
    "classify_all_pages",
    "classify_page",
    "get_primary_classification",
]

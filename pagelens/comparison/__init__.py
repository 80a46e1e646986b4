"""
Claims vs detections reconciliation.
"""

from pagelens.comparison.engine import (
    ComparisonResult,
    ComparisonSummary,
    Finding,
    FindingType,
    MatchedFeature,
    compare,
)

__all__ = [
    "ComparisonResult",
    "ComparisonSummary",
    "Finding",
    "FindingType",
    "MatchedFeature",
    "compare",
]

"""
pagelens/schemas package marker.
"""

from pagelens.schemas.analysis import AnalysisReport, AnalyzeRequest

__all__ = [
    "AnalysisReport",
    "AnalyzeRequest",
]

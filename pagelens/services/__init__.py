"""
pagelens/services package marker.
"""

from pagelens.services.analysis_service import (
    AnalysisService,
    get_analysis_service,
    is_valid_https_url,
    normalize_request_url,
    upgrade_to_https,
)

__all__ = [
    "AnalysisService",
    "get_analysis_service",
    "is_valid_https_url",
    "normalize_request_url",
    "upgrade_to_https",
]

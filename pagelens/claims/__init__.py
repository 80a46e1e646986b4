"""
Homepage claim extraction.
"""

from pagelens.claims.catalog import CLAIM_CATEGORIES, CLAIM_TO_PATTERN_MAP, CTA_PATTERNS
from pagelens.claims.extractor import Claim, ClaimsResult, extract_claims

__all__ = [
    "CLAIM_CATEGORIES",
    "CLAIM_TO_PATTERN_MAP",
    "CTA_PATTERNS",
    "Claim",
    "ClaimsResult",
    "extract_claims",
]

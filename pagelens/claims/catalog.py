"""
Static claim, call-to-action and claim-to-pattern catalogs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# Each distinct keyword hit is worth this much claim confidence, capped at MAX_CLAIM_CONFIDENCE.
CONFIDENCE_PER_HIT = 25
MAX_CLAIM_CONFIDENCE = 100


@dataclass(frozen=True)
class ClaimCategory:
    id: str
    label: str
    keywords: tuple[re.Pattern[str], ...]


@dataclass(frozen=True)
class CtaPattern:
    pattern: re.Pattern[str]
    action: str


def _category(claim_id: str, label: str, *keywords: str) -> ClaimCategory:
    return ClaimCategory(
        id=claim_id,
        label=label,
        keywords=tuple(re.compile(keyword, re.IGNORECASE) for keyword in keywords),
    )


_CATEGORIES: tuple[ClaimCategory, ...] = (
    _category(
        "SEARCH_FUNCTIONALITY",
        "Search functionality",
        r"search",
        r"find\s+(your|what|the)",
        r"look\s*up",
        r"discover",
        r"browse",
    ),
    _category(
        "USER_ACCOUNTS",
        "User accounts",
        r"sign\s*(up|in)",
        r"create.*account",
        r"register",
        r"log\s*in",
        r"member",
        r"your\s*account",
    ),
    _category(
        "ECOMMERCE",
        "E-commerce / Shopping",
        r"shop",
        r"buy",
        r"purchase",
        r"add\s*to\s*cart",
        r"checkout",
        r"order",
        r"pricing",
        r"\$\d+",
    ),
    _category(
        "CONTACT_SUPPORT",
        "Contact / Support",
        r"contact\s*(us)?",
        r"support",
        r"help",
        r"get\s*in\s*touch",
        r"reach\s*(out|us)",
        r"faq",
    ),
    _category(
        "NEWSLETTER",
        "Newsletter subscription",
        r"newsletter",
        r"subscribe",
        r"stay\s*updated",
        r"email\s*list",
        r"mailing\s*list",
    ),
    _category(
        "FREE_TRIAL",
        "Free trial",
        r"free\s*trial",
        r"try\s*(it\s*)?free",
        r"start\s*free",
        r"no\s*credit\s*card",
        r"free\s*plan",
    ),
    _category(
        "DEMO",
        "Demo booking",
        r"book\s*a?\s*demo",
        r"request\s*demo",
        r"schedule\s*demo",
        r"see\s*it\s*in\s*action",
        r"live\s*demo",
    ),
    _category(
        "API",
        "API / Developers",
        r"\bapi\b",
        r"developer",
        r"integration",
        r"sdk",
        r"documentation",
    ),
    _category(
        "MOBILE_APP",
        "Mobile app",
        r"mobile\s*app",
        r"ios",
        r"android",
        r"app\s*store",
        r"google\s*play",
        r"download.*app",
    ),
    _category(
        "BLOG",
        "Blog / Resources",
        r"\bblog\b",
        r"articles?",
        r"news",
        r"insights?",
        r"resources?",
    ),
    _category(
        "PRICING_TIERS",
        "Pricing tiers",
        r"pricing",
        r"plans?",
        r"packages?",
        r"subscription",
        r"per\s*(month|user|seat)",
        r"enterprise",
    ),
    _category(
        "ANALYTICS",
        "Analytics / Dashboard",
        r"analytics",
        r"dashboard",
        r"reports?",
        r"metrics",
        r"insights?",
        r"tracking",
    ),
    _category(
        "SOCIAL_LOGIN",
        "Social login",
        r"sign\s*in\s*with\s*(google|facebook|apple|github)",
        r"social\s*login",
        r"continue\s*with",
    ),
    _category(
        "CHAT_SUPPORT",
        "Chat support",
        r"live\s*chat",
        r"chat\s*with\s*us",
        r"chat\s*support",
        r"chatbot",
        r"talk\s*to.*support",
    ),
    _category(
        "TEAM_COLLABORATION",
        "Team collaboration",
        r"team",
        r"collaborate",
        r"share\s*with",
        r"invite\s*(members|users)",
        r"workspace",
    ),
)

CLAIM_CATEGORIES: Mapping[str, ClaimCategory] = MappingProxyType(
    {category.id: category for category in _CATEGORIES}
)

CTA_PATTERNS: tuple[CtaPattern, ...] = tuple(
    CtaPattern(pattern=re.compile(pattern, re.IGNORECASE), action=action)
    for pattern, action in (
        (r"get\s*started", "Easy onboarding"),
        (r"learn\s*more", "Detailed documentation"),
        (r"start\s*free\s*trial", "Free trial"),
        (r"book\s*a?\s*demo", "Demo booking"),
        (r"contact\s*sales", "Sales team"),
        (r"download\s*(now|free)?", "Downloadable content"),
        (r"sign\s*up\s*free", "Free signup"),
        (r"try\s*for\s*free", "Free trial"),
    )
)

VALUE_PROPOSITION_OPENERS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?:we\s+)?(?:help|enable|empower|make\s+it\s+easy)", re.IGNORECASE),
    re.compile(r"^the\s+(?:best|fastest|easiest|most|only)", re.IGNORECASE),
    re.compile(r"^(?:build|create|manage|automate|streamline|simplify)", re.IGNORECASE),
    re.compile(r"^(?:your|the)\s+(?:all-in-one|complete|ultimate)", re.IGNORECASE),
)

# Many-to-many: a claim may be evidenced by several patterns and a pattern may back several claims.
CLAIM_TO_PATTERN_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "SEARCH_FUNCTIONALITY": ("SEARCH_PAGE",),
        "USER_ACCOUNTS": ("AUTH_PAGE", "DASHBOARD"),
        "ECOMMERCE": ("ECOMMERCE", "PRICING_PAGE"),
        "CONTACT_SUPPORT": ("CONTACT_SUPPORT",),
        "PRICING_TIERS": ("PRICING_PAGE",),
        "ANALYTICS": ("DASHBOARD",),
        "FREE_TRIAL": ("LANDING_PAGE", "PRICING_PAGE"),
        "DEMO": ("LANDING_PAGE", "CONTACT_SUPPORT"),
    }
)

"""
Keyword-based claim extraction from a homepage snapshot.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from pagelens.claims.catalog import (
    CLAIM_CATEGORIES,
    CONFIDENCE_PER_HIT,
    CTA_PATTERNS,
    MAX_CLAIM_CONFIDENCE,
    VALUE_PROPOSITION_OPENERS,
    ClaimCategory,
)
from pagelens.crawling.types import PageSnapshot

MAX_CLAIM_EVIDENCE = 3
DESCRIPTION_MIN_CHARS = 20
DESCRIPTION_MAX_CHARS = 200
DESCRIPTION_SCAN_LINES = 10


@dataclass(frozen=True)
class Claim:
    """
    A feature the homepage asserts, with the keywords that asserted it.
    """

    id: str
    label: str
    confidence: int
    evidence: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClaimsResult:
    url: str
    claims: list[Claim] = field(default_factory=list)
    cta_actions: list[str] = field(default_factory=list)
    description: str = ""


def claim_confidence(hits: int) -> int:
    return min(hits * CONFIDENCE_PER_HIT, MAX_CLAIM_CONFIDENCE)


def match_category(category: ClaimCategory, corpus: str) -> Claim | None:
    matched_keywords: list[str] = []
    for keyword in category.keywords:
        match = keyword.search(corpus)
        if match is not None:
            matched_keywords.append(match.group(0))

    if not matched_keywords:
        return None
    return Claim(
        id=category.id,
        label=category.label,
        confidence=claim_confidence(len(matched_keywords)),
        evidence=tuple(matched_keywords[:MAX_CLAIM_EVIDENCE]),
    )


def extract_claims(
    snapshot: PageSnapshot,
    categories: Mapping[str, ClaimCategory] = CLAIM_CATEGORIES,
) -> ClaimsResult:
    """
    Extract claimed features, call-to-action intents and a one-line
    description from a homepage snapshot.
    """

    button_texts = " ".join(button.text for button in snapshot.buttons)
    link_texts = " ".join(link.text for link in snapshot.links)
    corpus = f"{snapshot.visible_text} {button_texts} {link_texts}"

    claims = [
        claim
        for claim in (match_category(category, corpus) for category in categories.values())
        if claim is not None
    ]
    claims.sort(key=lambda claim: claim.confidence, reverse=True)

    return ClaimsResult(
        url=snapshot.url,
        claims=claims,
        cta_actions=extract_cta_actions(button_texts=button_texts, link_texts=link_texts),
        description=extract_description(snapshot.visible_text),
    )


def extract_cta_actions(*, button_texts: str, link_texts: str) -> list[str]:
    """
    Named actions behind call-to-action phrases in buttons and links only.
    """

    actions: list[str] = []
    for cta in CTA_PATTERNS:
        if cta.pattern.search(button_texts) or cta.pattern.search(link_texts):
            if cta.action not in actions:
                actions.append(cta.action)
    return actions


def extract_description(text: str) -> str:
    lines = [
        line.strip()
        for line in text.split("\n")
        if DESCRIPTION_MIN_CHARS < len(line.strip()) < DESCRIPTION_MAX_CHARS
    ]

    for line in lines[:DESCRIPTION_SCAN_LINES]:
        if any(opener.search(line) for opener in VALUE_PROPOSITION_OPENERS):
            return line

    return lines[0] if lines else ""

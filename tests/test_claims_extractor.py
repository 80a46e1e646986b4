"""
tests/test_claims_extractor.py

Keyword claim extraction, call-to-action intents and description
selection from homepage snapshots.
"""

from __future__ import annotations

from pagelens.claims import extract_claims
from pagelens.claims.catalog import CLAIM_CATEGORIES, CLAIM_TO_PATTERN_MAP
from pagelens.claims.extractor import claim_confidence, extract_description
from pagelens.classification import PATTERNS
from pagelens.crawling.types import create_page_snapshot


def _claims_by_id(**snapshot_kwargs):
    result = extract_claims(create_page_snapshot(url="https://example.com", **snapshot_kwargs))
    return {claim.id: claim for claim in result.claims}


class TestClaimConfidence:
    def test_twenty_five_per_distinct_keyword(self) -> None:
        assert claim_confidence(1) == 25
        assert claim_confidence(3) == 75

    def test_capped_at_one_hundred(self) -> None:
        assert claim_confidence(4) == 100
        assert claim_confidence(6) == 100

    def test_five_hits_cap_and_keep_three_evidence(self) -> None:
        claims = _claims_by_id(visible_text="Search, find your way, look up, discover, browse")
        search = claims["SEARCH_FUNCTIONALITY"]
        assert search.confidence == 100
        assert search.evidence == ("Search", "find your", "look up")

    def test_repeated_keyword_counts_once(self) -> None:
        claims = _claims_by_id(visible_text="search search search")
        assert claims["SEARCH_FUNCTIONALITY"].confidence == 25
        assert claims["SEARCH_FUNCTIONALITY"].evidence == ("search",)


class TestExtractClaims:
    def test_no_keywords_no_claims(self) -> None:
        result = extract_claims(create_page_snapshot(visible_text="hello world"))
        assert result.claims == []

    def test_button_and_link_text_are_searched(self) -> None:
        claims = _claims_by_id(buttons=[{"text": "Log In"}])
        assert list(claims) == ["USER_ACCOUNTS"]
        assert claims["USER_ACCOUNTS"].confidence == 25

        claims = _claims_by_id(links=[{"href": "/news", "text": "Newsletter"}])
        assert "NEWSLETTER" in claims

    def test_claims_sorted_by_confidence(self) -> None:
        result = extract_claims(
            create_page_snapshot(visible_text="Need help? Contact us, read our FAQ or search the docs.")
        )
        confidences = [claim.confidence for claim in result.claims]
        assert confidences == sorted(confidences, reverse=True)
        assert result.claims[0].id == "CONTACT_SUPPORT"
        assert result.claims[0].confidence == 75

    def test_result_carries_snapshot_url(self) -> None:
        result = extract_claims(create_page_snapshot(url="https://example.com/home"))
        assert result.url == "https://example.com/home"


class TestCtaActions:
    def test_only_buttons_and_links_count(self) -> None:
        result = extract_claims(create_page_snapshot(visible_text="Get started today"))
        assert result.cta_actions == []

        result = extract_claims(create_page_snapshot(buttons=[{"text": "Get Started"}]))
        assert result.cta_actions == ["Easy onboarding"]

    def test_actions_are_deduplicated(self) -> None:
        result = extract_claims(
            create_page_snapshot(
                buttons=[{"text": "Start free trial"}],
                links=[{"href": "/trial", "text": "Try for free"}],
            )
        )
        assert result.cta_actions == ["Free trial"]


class TestDescription:
    def test_prefers_value_proposition_line(self) -> None:
        text = "Acme\nHome Products Pricing About us\nWe help teams ship faster with less stress"
        assert extract_description(text) == "We help teams ship faster with less stress"

    def test_falls_back_to_first_eligible_line(self) -> None:
        text = "Short\nThis is a plain line without opener words\nAnother fairly long line here"
        assert extract_description(text) == "This is a plain line without opener words"

    def test_empty_when_no_line_fits(self) -> None:
        assert extract_description("short\ntiny\n" + "x" * 250) == ""
        assert extract_description("") == ""


def test_claim_map_references_known_ids() -> None:
    for claim_id, pattern_ids in CLAIM_TO_PATTERN_MAP.items():
        assert claim_id in CLAIM_CATEGORIES
        assert all(pattern_id in PATTERNS for pattern_id in pattern_ids)

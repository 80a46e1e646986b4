"""
tests/test_page_snapshot.py

Snapshot construction: defaults, truncation and immutability.
"""

from __future__ import annotations

import pytest

from pagelens.crawling.types import (
    MAX_VISIBLE_TEXT_CHARS,
    ButtonElement,
    InputElement,
    LinkElement,
    PageExtraction,
    PageSnapshot,
    create_page_snapshot,
    snapshot_from_extraction,
)


class TestCreatePageSnapshot:
    def test_all_fields_default_when_absent(self) -> None:
        snapshot = create_page_snapshot()
        assert snapshot == PageSnapshot(
            url="", title="", visible_text="", inputs=(), buttons=(), links=()
        )

    def test_element_fields_default(self) -> None:
        snapshot = create_page_snapshot(inputs=[{}], buttons=[{}], links=[{}])
        assert snapshot.inputs == (InputElement(type="text", name="", placeholder=""),)
        assert snapshot.buttons == (ButtonElement(text="", type="button"),)
        assert snapshot.links == (LinkElement(href="", text=""),)

    def test_none_values_become_empty_strings(self) -> None:
        snapshot = create_page_snapshot(
            url=None,
            title=None,
            visible_text=None,
            inputs=[{"type": None, "name": None, "placeholder": None}],
        )
        assert snapshot.url == ""
        assert snapshot.inputs[0].type == "text"
        assert snapshot.inputs[0].name == ""

    def test_visible_text_is_truncated(self) -> None:
        snapshot = create_page_snapshot(visible_text="x" * (MAX_VISIBLE_TEXT_CHARS + 10))
        assert len(snapshot.visible_text) == MAX_VISIBLE_TEXT_CHARS

    def test_non_mapping_entries_are_ignored(self) -> None:
        snapshot = create_page_snapshot(links=[{"href": "https://a.com/x"}, "junk", None])
        assert snapshot.links == (LinkElement(href="https://a.com/x", text=""),)


class TestSnapshotImmutability:
    def test_snapshot_is_frozen(self) -> None:
        snapshot = create_page_snapshot(url="https://example.com")
        with pytest.raises((AttributeError, TypeError)):
            snapshot.url = "https://other.com"  # type: ignore[misc]

    def test_element_collections_are_tuples(self) -> None:
        snapshot = create_page_snapshot(buttons=[{"text": "Go"}])
        assert isinstance(snapshot.buttons, tuple)
        assert isinstance(snapshot.inputs, tuple)


def test_snapshot_from_extraction_uses_final_url() -> None:
    extraction = PageExtraction(
        final_url="https://example.com/landing",
        title="Landing",
        visible_text="Hello",
        buttons=[{"text": "Get Started", "type": "submit"}],
    )
    snapshot = snapshot_from_extraction(extraction)
    assert snapshot.url == "https://example.com/landing"
    assert snapshot.title == "Landing"
    assert snapshot.buttons == (ButtonElement(text="Get Started", type="submit"),)

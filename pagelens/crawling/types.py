"""
Page evidence and crawl runtime data models.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

MAX_VISIBLE_TEXT_CHARS = 50_000
MAX_LINK_TEXT_CHARS = 100


@dataclass(frozen=True)
class InputElement:
    """
    One form control found on a page.
    """

    type: str = "text"
    name: str = ""
    placeholder: str = ""


@dataclass(frozen=True)
class ButtonElement:
    """
    One submit control or button-styled call-to-action.
    """

    text: str = ""
    type: str = "button"


@dataclass(frozen=True)
class LinkElement:
    """
    One anchor target and its visible text.
    """

    href: str = ""
    text: str = ""


@dataclass(frozen=True)
class PageExtraction:
    """
    Raw extraction returned by a renderer for one URL.
    """

    final_url: str
    title: str = ""
    visible_text: str = ""
    inputs: list[dict[str, Any]] = field(default_factory=list)
    buttons: list[dict[str, Any]] = field(default_factory=list)
    links: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class PageSnapshot:
    """
    Immutable evidence for one fetched page.

    This is the only surface the classifier and the claim extractor read.
    """

    url: str = ""
    title: str = ""
    visible_text: str = ""
    inputs: tuple[InputElement, ...] = ()
    buttons: tuple[ButtonElement, ...] = ()
    links: tuple[LinkElement, ...] = ()


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _entries(items: Iterable[Mapping[str, Any]] | None) -> list[Mapping[str, Any]]:
    if not items:
        return []
    return [item for item in items if isinstance(item, Mapping)]


def create_page_snapshot(
    *,
    url: str | None = None,
    title: str | None = None,
    visible_text: str | None = None,
    inputs: Iterable[Mapping[str, Any]] | None = None,
    buttons: Iterable[Mapping[str, Any]] | None = None,
    links: Iterable[Mapping[str, Any]] | None = None,
) -> PageSnapshot:
    """
    Build a fully defaulted snapshot from loosely shaped page data.
    """

    return PageSnapshot(
        url=_text(url),
        title=_text(title),
        visible_text=_text(visible_text)[:MAX_VISIBLE_TEXT_CHARS],
        inputs=tuple(
            InputElement(
                type=_text(item.get("type")) or "text",
                name=_text(item.get("name")),
                placeholder=_text(item.get("placeholder")),
            )
            for item in _entries(inputs)
        ),
        buttons=tuple(
            ButtonElement(
                text=_text(item.get("text")),
                type=_text(item.get("type")) or "button",
            )
            for item in _entries(buttons)
        ),
        links=tuple(
            LinkElement(
                href=_text(item.get("href")),
                text=_text(item.get("text")),
            )
            for item in _entries(links)
        ),
    )


def snapshot_from_extraction(extraction: PageExtraction) -> PageSnapshot:
    return create_page_snapshot(
        url=extraction.final_url,
        title=extraction.title,
        visible_text=extraction.visible_text,
        inputs=extraction.inputs,
        buttons=extraction.buttons,
        links=extraction.links,
    )


@dataclass(frozen=True)
class CrawlError:
    """
    A URL whose fetch failed during traversal.
    """

    url: str
    error: str


@dataclass(frozen=True)
class CrawlResult:
    """
    Outcome for one traversal run.
    """

    start_url: str
    base_domain: str
    crawled_at: str
    max_depth: int
    max_pages: int
    snapshots: list[PageSnapshot] = field(default_factory=list)
    crawl_errors: list[CrawlError] = field(default_factory=list)
    crawl_limitations: list[str] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return len(self.snapshots)

    @property
    def homepage(self) -> PageSnapshot | None:
        return self.snapshots[0] if self.snapshots else None

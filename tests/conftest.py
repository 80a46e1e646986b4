"""
Shared fixtures: a scripted renderer standing in for the network.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from pagelens.config import AnalysisSettings
from pagelens.crawling.renderer import PageRenderer
from pagelens.crawling.types import PageExtraction
from pagelens.errors import PageRenderError


class ScriptedRenderer(PageRenderer):
    """
    Serves pre-built extractions keyed by URL and records every call.
    """

    def __init__(
        self,
        pages: Mapping[str, PageExtraction],
        failures: Mapping[str, str] | None = None,
    ) -> None:
        self.pages = dict(pages)
        self.failures = dict(failures or {})
        self.rendered: list[str] = []
        self.open_count = 0
        self.close_count = 0

    def open(self) -> None:
        self.open_count += 1

    def close(self) -> None:
        self.close_count += 1

    def render(self, url: str, *, timeout_seconds: float) -> PageExtraction:
        self.rendered.append(url)
        if url in self.failures:
            raise PageRenderError(self.failures[url])
        if url not in self.pages:
            raise PageRenderError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        return self.pages[url]


def page(
    url: str,
    *,
    links: list[str] | None = None,
    title: str = "",
    visible_text: str = "",
    inputs: list[dict] | None = None,
    buttons: list[dict] | None = None,
    final_url: str | None = None,
) -> PageExtraction:
    return PageExtraction(
        final_url=final_url or url,
        title=title or url,
        visible_text=visible_text,
        inputs=inputs or [],
        buttons=buttons or [],
        links=[{"href": href, "text": ""} for href in (links or [])],
    )


@pytest.fixture()
def make_page() -> Callable[..., PageExtraction]:
    return page


@pytest.fixture()
def make_renderer() -> Callable[..., ScriptedRenderer]:
    def build(
        pages: list[PageExtraction] | Mapping[str, PageExtraction],
        failures: Mapping[str, str] | None = None,
    ) -> ScriptedRenderer:
        if not isinstance(pages, Mapping):
            pages = {extraction.final_url: extraction for extraction in pages}
        return ScriptedRenderer(pages, failures)

    return build


@pytest.fixture()
def settings() -> AnalysisSettings:
    return AnalysisSettings(max_depth=2, max_pages=15, page_timeout_seconds=5.0)

"""
tests/test_http_renderer.py

requests-backed renderer with a stubbed session: retries, status
handling and content-type filtering.
"""

from __future__ import annotations

import pytest
import requests

from pagelens.config import AnalysisSettings
from pagelens.crawling import HttpPageRenderer, build_renderer
from pagelens.errors import PageRenderError


class StubResponse:
    def __init__(
        self,
        *,
        status_code: int = 200,
        text: str = "",
        url: str = "https://example.com/",
        content_type: str = "text/html; charset=utf-8",
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.url = url
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class StubSession:
    def __init__(self, outcomes: list) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> StubResponse:
        self.calls.append({"url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    sleeps: list[float] = []
    monkeypatch.setattr("pagelens.crawling.renderer.time.sleep", sleeps.append)
    return sleeps


def _renderer(outcomes: list, **overrides) -> tuple[HttpPageRenderer, StubSession]:
    session = StubSession(outcomes)
    settings = AnalysisSettings(max_retries=1, backoff_initial_seconds=0.5, **overrides)
    return HttpPageRenderer(settings=settings, session=session), session


def test_renders_html_into_extraction() -> None:
    html = "<html><head><title>Home</title></head><body><a href='/about'>About</a></body></html>"
    renderer, session = _renderer([StubResponse(text=html, url="https://example.com/en/")])

    extraction = renderer.render("https://example.com/", timeout_seconds=5.0)

    assert extraction.final_url == "https://example.com/en/"
    assert extraction.title == "Home"
    assert extraction.links == [{"href": "https://example.com/about", "text": "About"}]
    assert session.calls[0]["timeout"] == 5.0
    assert session.calls[0]["headers"]["User-Agent"]


def test_retryable_status_is_retried_with_backoff(no_sleep: list[float]) -> None:
    renderer, session = _renderer(
        [StubResponse(status_code=503), StubResponse(text="<title>ok</title>")]
    )

    extraction = renderer.render("https://example.com/", timeout_seconds=5.0)

    assert extraction.title == "ok"
    assert len(session.calls) == 2
    assert no_sleep == [0.5]


def test_gives_up_after_retries() -> None:
    renderer, session = _renderer([requests.Timeout("slow"), requests.Timeout("slow")])

    with pytest.raises(PageRenderError, match="after retries"):
        renderer.render("https://example.com/", timeout_seconds=5.0)
    assert len(session.calls) == 2


def test_client_error_is_not_retried() -> None:
    renderer, session = _renderer([StubResponse(status_code=404)])

    with pytest.raises(PageRenderError, match="HTTP 404"):
        renderer.render("https://example.com/missing", timeout_seconds=5.0)
    assert len(session.calls) == 1


def test_non_html_content_is_rejected() -> None:
    renderer, _ = _renderer([StubResponse(content_type="application/pdf")])

    with pytest.raises(PageRenderError, match="Unsupported content type"):
        renderer.render("https://example.com/file", timeout_seconds=5.0)


def test_injected_session_is_not_closed() -> None:
    renderer, session = _renderer([])
    with renderer:
        pass
    assert session.closed is False


def test_build_renderer_defaults_to_http() -> None:
    assert isinstance(build_renderer(AnalysisSettings()), HttpPageRenderer)


def test_build_renderer_browser_backend_is_lazy() -> None:
    pytest.importorskip("playwright")
    from pagelens.crawling.browser_renderer import BrowserPageRenderer

    renderer = build_renderer(AnalysisSettings(renderer="browser"))
    assert isinstance(renderer, BrowserPageRenderer)

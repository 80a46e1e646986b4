"""
Page renderer abstraction and the requests-based implementation.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from types import TracebackType

import requests

from pagelens.config import AnalysisSettings
from pagelens.crawling.parsing import PageExtractionParser
from pagelens.crawling.types import PageExtraction
from pagelens.errors import PageRenderError
from pagelens.logging_utils import log_event

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}
HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


class PageRenderer(ABC):
    """
    Turns one URL into a page extraction.

    A renderer is a scoped resource: enter it once per analysis run and it
    releases its session on exit, even when the run fails.
    """

    def __enter__(self) -> "PageRenderer":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def open(self) -> None:
        """
        Acquire per-run resources.
        """

    def close(self) -> None:
        """
        Release per-run resources.
        """

    @abstractmethod
    def render(self, url: str, *, timeout_seconds: float) -> PageExtraction:
        """
        Fetch `url` and return its extraction, or raise PageRenderError.
        """


class HttpPageRenderer(PageRenderer):
    """
    Fetches raw HTML over HTTP and extracts evidence without running scripts.
    """

    def __init__(
        self,
        *,
        settings: AnalysisSettings,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings
        self._session = session
        self._owns_session = session is None
        self.request_headers = {
            "User-Agent": settings.user_agent,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }

    def open(self) -> None:
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True

    def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def render(self, url: str, *, timeout_seconds: float) -> PageExtraction:
        response = self._request_with_retry(url, timeout_seconds=timeout_seconds)

        content_type = response.headers.get("Content-Type", "").lower()
        if content_type and not content_type.startswith(HTML_CONTENT_TYPES):
            raise PageRenderError(f"Unsupported content type '{content_type}' for {url}")

        return PageExtractionParser.parse(html=response.text, final_url=response.url or url)

    def _request_with_retry(self, url: str, *, timeout_seconds: float) -> requests.Response:
        if self._session is None:
            self.open()

        last_error: Exception | None = None
        for attempt in range(self.settings.max_retries + 1):
            try:
                response = self._session.get(
                    url,
                    headers=self.request_headers,
                    timeout=timeout_seconds,
                    allow_redirects=True,
                )
                if response.status_code in RETRYABLE_STATUS_CODES:
                    raise requests.HTTPError(
                        f"Retryable status={response.status_code}",
                        response=response,
                    )
                response.raise_for_status()
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as exc:
                last_error = exc
                if isinstance(exc, requests.HTTPError):
                    status_code = exc.response.status_code if exc.response is not None else None
                    if status_code not in RETRYABLE_STATUS_CODES:
                        raise PageRenderError(f"HTTP {status_code} for {url}") from exc
            except requests.RequestException as exc:
                raise PageRenderError(f"Request failed for {url}: {exc}") from exc

            if attempt >= self.settings.max_retries:
                break

            backoff_seconds = self.settings.backoff_initial_seconds * (
                self.settings.backoff_multiplier**attempt
            )
            log_event(
                logger,
                logging.WARNING,
                "page_fetch_retry",
                url=url,
                attempt=attempt + 1,
                backoff_seconds=backoff_seconds,
                error=str(last_error),
            )
            time.sleep(backoff_seconds)

        raise PageRenderError(f"Failed to fetch {url} after retries: {last_error}")


def build_renderer(settings: AnalysisSettings) -> PageRenderer:
    """
    Create the renderer selected by `settings.renderer`.
    """

    if settings.renderer == "browser":
        from pagelens.crawling.browser_renderer import BrowserPageRenderer

        return BrowserPageRenderer(settings=settings)
    if settings.renderer == "http":
        return HttpPageRenderer(settings=settings)
    raise ValueError(f"Unknown renderer backend '{settings.renderer}'.")

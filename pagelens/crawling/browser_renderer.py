"""
Headless Chromium renderer for script-heavy sites.

Requires the `browser` extra: `pip install pagelens[browser]` followed by
`playwright install chromium`.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Browser, BrowserContext, Error as PlaywrightError, Playwright, sync_playwright

from pagelens.config import AnalysisSettings
from pagelens.crawling.parsing import PageExtractionParser
from pagelens.crawling.renderer import PageRenderer
from pagelens.crawling.types import PageExtraction
from pagelens.errors import PageRenderError
from pagelens.logging_utils import log_event

logger = logging.getLogger(__name__)

VIEWPORT = {"width": 1280, "height": 720}
LAUNCH_ARGS = ["--disable-dev-shm-usage", "--no-sandbox"]


class BrowserPageRenderer(PageRenderer):
    """
    One browser and one context per run, one page per render.
    """

    def __init__(self, *, settings: AnalysisSettings) -> None:
        self.settings = settings
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None

    def open(self) -> None:
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=True, args=LAUNCH_ARGS)
            self._context = self._browser.new_context(
                user_agent=self.settings.user_agent,
                viewport=VIEWPORT,
            )
        except PlaywrightError:
            self.close()
            raise
        log_event(logger, logging.INFO, "browser_session_opened")

    def close(self) -> None:
        if self._context is not None:
            self._close_quietly(self._context.close, "context")
            self._context = None
        if self._browser is not None:
            self._close_quietly(self._browser.close, "browser")
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None

    def render(self, url: str, *, timeout_seconds: float) -> PageExtraction:
        if self._context is None:
            raise PageRenderError("Browser session is not open.")

        page = self._context.new_page()
        try:
            page.goto(url, wait_until="domcontentloaded", timeout=timeout_seconds * 1000)
            if self.settings.settle_delay_ms:
                page.wait_for_timeout(self.settings.settle_delay_ms)
            visible_text = page.evaluate("() => document.body ? document.body.innerText : ''")
            return PageExtractionParser.parse(
                html=page.content(),
                final_url=page.url or url,
                visible_text=str(visible_text or ""),
            )
        except PlaywrightError as exc:
            raise PageRenderError(str(exc)) from exc
        finally:
            self._close_quietly(page.close, "page")

    @staticmethod
    def _close_quietly(close, resource: str) -> None:
        try:
            close()
        except PlaywrightError as exc:
            log_event(
                logger,
                logging.WARNING,
                "browser_close_failed",
                resource=resource,
                error=str(exc),
            )

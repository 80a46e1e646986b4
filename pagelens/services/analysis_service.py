"""
pagelens/services/analysis_service.py

Service orchestration for one website analysis: crawl, classify, extract
claims, compare, report.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from functools import lru_cache
from urllib.parse import urlparse

from pagelens.classification import classify_all_pages
from pagelens.claims import extract_claims
from pagelens.comparison import compare
from pagelens.config import AnalysisSettings, get_analysis_settings
from pagelens.crawling import PageRenderer, SiteCrawler, build_renderer
from pagelens.errors import InvalidUrlError, NothingCrawledError
from pagelens.logging_utils import log_event
from pagelens.schemas.analysis import AnalysisReport
from pagelens.services.report_builder import build_report

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)

MISSING_URL_MESSAGE = "Missing required field: url"
INVALID_URL_MESSAGE = "Invalid URL format. Must be a valid HTTPS URL."


def upgrade_to_https(raw_url: str) -> str:
    """
    Prepend `https://` to bare hostnames and upgrade `http://`.
    """

    url = raw_url.strip()
    if not _SCHEME_PATTERN.match(url):
        url = f"https://{url}"
    if url.lower().startswith("http://"):
        url = f"https://{url[len('http://'):]}"
    return url


def is_valid_https_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
        host, _port = parsed.hostname, parsed.port
    except ValueError:
        return False
    if any(char.isspace() for char in url):
        return False
    return parsed.scheme.lower() == "https" and bool(host)


def normalize_request_url(raw_url: object) -> str:
    """
    Coerce user input into a secure absolute URL or raise InvalidUrlError.
    """

    if not isinstance(raw_url, str) or not raw_url.strip():
        raise InvalidUrlError(MISSING_URL_MESSAGE)

    url = upgrade_to_https(raw_url)
    if not is_valid_https_url(url):
        raise InvalidUrlError(INVALID_URL_MESSAGE, provided=url)
    return url


class AnalysisService:
    """
    Runs the analysis pipeline; each call owns its own renderer session.
    """

    def __init__(
        self,
        *,
        settings: AnalysisSettings | None = None,
        renderer_factory: Callable[[AnalysisSettings], PageRenderer] | None = None,
    ) -> None:
        self._settings = settings or get_analysis_settings()
        self._renderer_factory = renderer_factory or build_renderer

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    def analyze(self, url: str) -> AnalysisReport:
        """
        Analyze an already-normalized https URL.

        Raises InvalidUrlError for unusable URLs and NothingCrawledError when
        not a single page could be fetched.
        """

        started = time.monotonic()
        log_event(logger, logging.INFO, "analysis_started", url=url)

        crawler = SiteCrawler(
            settings=self._settings,
            renderer=self._renderer_factory(self._settings),
        )
        crawl_result = crawler.crawl(url)
        if crawl_result.total_pages == 0:
            log_event(
                logger,
                logging.WARNING,
                "analysis_nothing_crawled",
                url=url,
                crawl_errors=len(crawl_result.crawl_errors),
            )
            raise NothingCrawledError(
                "Could not crawl any pages from the provided URL",
                crawl_errors=crawl_result.crawl_errors,
            )

        classification_result = classify_all_pages(crawl_result.snapshots)
        # The start URL is always fetched first, so the homepage is the first snapshot.
        claims_result = extract_claims(crawl_result.snapshots[0])
        comparison_result = compare(
            claims_result.claims,
            classification_result.aggregated_features,
        )

        duration_ms = int((time.monotonic() - started) * 1000)
        report = build_report(
            url=url,
            crawl_result=crawl_result,
            classification_result=classification_result,
            claims_result=claims_result,
            comparison_result=comparison_result,
            duration_ms=duration_ms,
        )
        log_event(
            logger,
            logging.INFO,
            "analysis_completed",
            url=url,
            total_pages=crawl_result.total_pages,
            claims=len(claims_result.claims),
            findings=len(comparison_result.findings),
            analysis_time_ms=duration_ms,
        )
        return report


@lru_cache(maxsize=1)
def get_analysis_service() -> AnalysisService:
    """
    Build and cache the analysis service.
    """

    return AnalysisService()

"""
Exceptions raised by the analysis pipeline.
"""

from __future__ import annotations


class PageLensError(Exception):
    """Base exception for analysis pipeline failures."""


class InvalidUrlError(PageLensError):
    """
    Raised when a start URL is missing, malformed or not secure.

    `provided` holds the URL as normalized so far; None when no URL was given.
    """

    def __init__(self, message: str, *, provided: str | None = None) -> None:
        super().__init__(message)
        self.provided = provided


class PageRenderError(PageLensError):
    """Raised when one page cannot be fetched or rendered."""


class NothingCrawledError(PageLensError):
    """
    Raised when traversal finishes without producing a single snapshot.
    """

    def __init__(self, message: str, *, crawl_errors: list | None = None) -> None:
        super().__init__(message)
        self.crawl_errors = list(crawl_errors or [])

"""
Bounded site traversal and page evidence extraction.
"""

from pagelens.crawling.crawler import SiteCrawler
from pagelens.crawling.renderer import HttpPageRenderer, PageRenderer, build_renderer
from pagelens.crawling.types import (
    ButtonElement,
    CrawlError,
    CrawlResult,
    InputElement,
    LinkElement,
    PageExtraction,
    PageSnapshot,
    create_page_snapshot,
)

__all__ = [
    "ButtonElement",
    "CrawlError",
    "CrawlResult",
    "HttpPageRenderer",
    "InputElement",
    "LinkElement",
    "PageExtraction",
    "PageRenderer",
    "PageSnapshot",
    "SiteCrawler",
    "build_renderer",
    "create_page_snapshot",
]

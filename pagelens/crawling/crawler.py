"""
Breadth-first, same-origin site traversal.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pagelens.config import AnalysisSettings
from pagelens.crawling.renderer import PageRenderer
from pagelens.crawling.types import CrawlError, CrawlResult, PageSnapshot, snapshot_from_extraction
from pagelens.crawling.urls import get_origin, is_internal_url, normalize_url, should_skip_url
from pagelens.errors import InvalidUrlError
from pagelens.logging_utils import log_event

logger = logging.getLogger(__name__)

# Discovery stops enqueueing once queued + fetched work reaches this multiple of max_pages.
QUEUE_BUDGET_MULTIPLIER = 2


@dataclass(frozen=True)
class QueueEntry:
    url: str
    depth: int


@dataclass
class TraversalContext:
    """
    Mutable state owned by exactly one crawl run.
    """

    base_domain: str
    queue: deque[QueueEntry] = field(default_factory=deque)
    visited: set[str] = field(default_factory=set)
    snapshots: list[PageSnapshot] = field(default_factory=list)
    errors: list[CrawlError] = field(default_factory=list)

    def claim(self, url: str) -> bool:
        """
        Mark `url` visited; False if its normalized form was already taken.
        """

        normalized = normalize_url(url)
        if normalized in self.visited:
            return False
        self.visited.add(normalized)
        return True

    def is_visited(self, url: str) -> bool:
        return normalize_url(url) in self.visited


class SiteCrawler:
    """
    Discovers pages reachable from a start URL within depth and page ceilings.
    """

    def __init__(
        self,
        *,
        settings: AnalysisSettings,
        renderer: PageRenderer,
    ) -> None:
        self.settings = settings
        self.renderer = renderer
        self.max_depth = settings.max_depth
        self.max_pages = settings.max_pages

    def crawl(self, start_url: str) -> CrawlResult:
        """
        Crawl from `start_url` and return snapshots in BFS discovery order.

        Per-page failures are recorded on the result; only an unusable start
        URL raises.
        """

        base_domain = get_origin(start_url)
        if base_domain is None:
            raise InvalidUrlError(f"Invalid URL: {start_url!r}", provided=start_url)

        context = TraversalContext(base_domain=base_domain)
        context.queue.append(QueueEntry(url=start_url, depth=0))
        crawled_at = datetime.now(timezone.utc).isoformat()

        log_event(
            logger,
            logging.INFO,
            "crawl_started",
            start_url=start_url,
            max_depth=self.max_depth,
            max_pages=self.max_pages,
        )

        with self.renderer:
            while context.queue and len(context.snapshots) < self.max_pages:
                entry = context.queue.popleft()
                if context.is_visited(entry.url) or should_skip_url(entry.url):
                    continue
                context.claim(entry.url)
                self._visit(context, entry)

        limitations = self._limitations(context)
        log_event(
            logger,
            logging.INFO,
            "crawl_completed",
            start_url=start_url,
            total_pages=len(context.snapshots),
            failed_pages=len(context.errors),
            remaining_in_queue=len(context.queue),
        )

        return CrawlResult(
            start_url=start_url,
            base_domain=base_domain,
            crawled_at=crawled_at,
            max_depth=self.max_depth,
            max_pages=self.max_pages,
            snapshots=context.snapshots,
            crawl_errors=context.errors,
            crawl_limitations=limitations,
        )

    def _visit(self, context: TraversalContext, entry: QueueEntry) -> None:
        try:
            extraction = self.renderer.render(
                entry.url,
                timeout_seconds=self.settings.page_timeout_seconds,
            )
        except Exception as exc:
            context.errors.append(CrawlError(url=entry.url, error=str(exc)))
            log_event(
                logger,
                logging.WARNING,
                "page_crawl_failed",
                url=entry.url,
                depth=entry.depth,
                error=str(exc),
            )
            return

        snapshot = snapshot_from_extraction(extraction)
        context.snapshots.append(snapshot)
        log_event(
            logger,
            logging.INFO,
            "page_crawled",
            url=entry.url,
            final_url=snapshot.url,
            depth=entry.depth,
            links=len(snapshot.links),
        )

        if entry.depth < self.max_depth:
            self._enqueue_links(context, snapshot, depth=entry.depth + 1)

    def _enqueue_links(self, context: TraversalContext, snapshot: PageSnapshot, *, depth: int) -> None:
        budget = self.max_pages * QUEUE_BUDGET_MULTIPLIER
        for link in snapshot.links:
            href = link.href
            if not is_internal_url(href, context.base_domain):
                continue
            if should_skip_url(href) or context.is_visited(href):
                continue
            if len(context.queue) + len(context.snapshots) < budget:
                context.queue.append(QueueEntry(url=href, depth=depth))

    def _limitations(self, context: TraversalContext) -> list[str]:
        limitations: list[str] = []
        if context.queue:
            limitations.append(
                f"Stopped at {self.max_pages} pages, {len(context.queue)} URLs remaining in queue"
            )
        skipped = len(context.visited) - len(context.snapshots)
        if skipped > 0:
            limitations.append(f"{skipped} pages skipped due to errors")
        return limitations

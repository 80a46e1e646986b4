from __future__ import annotations

import json
import logging

import pytest

from pagelens.logging_utils import log_event


def test_log_event_emits_sorted_json(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("pagelens.tests.events")
    with caplog.at_level(logging.INFO, logger=logger.name):
        log_event(logger, logging.INFO, "page_crawled", url="https://example.com/", depth=0)

    (record,) = caplog.records
    assert json.loads(record.getMessage()) == {
        "event": "page_crawled",
        "url": "https://example.com/",
        "depth": 0,
    }
    assert record.getMessage().index('"depth"') < record.getMessage().index('"event"')


def test_log_event_skips_disabled_levels(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("pagelens.tests.quiet")
    with caplog.at_level(logging.WARNING, logger=logger.name):
        log_event(logger, logging.INFO, "crawl_started", start_url="https://example.com/")
    assert caplog.records == []

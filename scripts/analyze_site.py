"""
Run one website analysis from the CLI and print the JSON report.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from pagelens.config import get_analysis_settings
from pagelens.errors import InvalidUrlError, NothingCrawledError
from pagelens.services.analysis_service import AnalysisService, normalize_request_url


def main() -> int:
    parser = argparse.ArgumentParser(description="Analyze a website's claims against its pages.")
    parser.add_argument("url", help="Website URL or bare hostname; upgraded to https.")
    parser.add_argument("--max-depth", type=int, default=None, help="Override crawl depth ceiling.")
    parser.add_argument("--max-pages", type=int, default=None, help="Override crawl page ceiling.")
    parser.add_argument(
        "--renderer",
        choices=["http", "browser"],
        default=None,
        help="Page renderer backend.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log crawl progress to stderr.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    settings = get_analysis_settings()
    overrides: dict[str, object] = {}
    if args.max_depth is not None:
        overrides["max_depth"] = max(0, args.max_depth)
    if args.max_pages is not None:
        overrides["max_pages"] = max(1, args.max_pages)
    if args.renderer is not None:
        overrides["renderer"] = args.renderer
    if overrides:
        settings = replace(settings, **overrides)

    try:
        url = normalize_request_url(args.url)
        report = AnalysisService(settings=settings).analyze(url)
    except InvalidUrlError as exc:
        payload = {"error": str(exc)}
        if exc.provided is not None:
            payload["provided"] = exc.provided
        print(json.dumps(payload), file=sys.stderr)
        return 2
    except NothingCrawledError as exc:
        payload = {
            "error": str(exc),
            "crawlErrors": [{"url": error.url, "error": error.error} for error in exc.crawl_errors],
        }
        print(json.dumps(payload, indent=2), file=sys.stderr)
        return 1

    print(json.dumps(report.model_dump(by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

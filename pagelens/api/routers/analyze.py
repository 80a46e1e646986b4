"""
pagelens/api/routers/analyze.py

Website analysis endpoint.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from pagelens.errors import InvalidUrlError, NothingCrawledError
from pagelens.schemas.analysis import AnalysisReport, AnalyzeRequest
from pagelens.services.analysis_service import (
    AnalysisService,
    get_analysis_service,
    normalize_request_url,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

URL_EXAMPLE = {"url": "https://example.com"}


def _invalid_url_response(exc: InvalidUrlError) -> JSONResponse:
    content: dict[str, object] = {"error": str(exc)}
    if exc.provided is None:
        content["example"] = URL_EXAMPLE
    else:
        content["provided"] = exc.provided
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@router.post("/analyze", response_model=AnalysisReport)
def analyze_website(
    payload: AnalyzeRequest | None = Body(default=None),
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisReport | JSONResponse:
    """
    Crawl the submitted site and return the claims vs detections report.
    """

    started = time.monotonic()
    raw_url = payload.url if payload is not None else None

    try:
        url = normalize_request_url(raw_url)
    except InvalidUrlError as exc:
        return _invalid_url_response(exc)

    try:
        return analysis_service.analyze(url)
    except InvalidUrlError as exc:
        return _invalid_url_response(exc)
    except NothingCrawledError as exc:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": str(exc),
                "crawlErrors": [
                    {"url": error.url, "error": error.error} for error in exc.crawl_errors
                ],
            },
        )
    except Exception as exc:
        logger.exception("Analysis failed for %s", url)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Analysis failed",
                "message": str(exc),
                "duration": int((time.monotonic() - started) * 1000),
            },
        )

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagelens.config import get_analysis_settings


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _configure_logging()
    settings = get_analysis_settings()
    logging.getLogger(__name__).info(
        "PageLens configured renderer=%s max_depth=%d max_pages=%d",
        settings.renderer,
        settings.max_depth,
        settings.max_pages,
    )

    application = FastAPI(
        title="PageLens API",
        version="1.0.0",
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from pagelens.api.routers import analyze_router

    application.include_router(analyze_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @application.get("/")
    def root() -> dict[str, object]:
        return {
            "name": "PageLens API",
            "version": "1.0.0",
            "endpoints": {
                "POST /analyze": "Analyze a website URL",
                "GET /health": "Health check",
            },
        }

    return application


app = create_app()

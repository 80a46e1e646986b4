"""
pagelens/config.py

Environment-driven settings for analysis runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
RENDERER_BACKENDS = {"http", "browser"}


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    for filename in (".env", ".env.local"):
        env_path = _project_root() / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class AnalysisSettings:
    """
    Runtime settings for crawling and rendering.
    """

    max_depth: int = 2
    max_pages: int = 15
    page_timeout_seconds: float = 30.0
    renderer: str = "http"
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = 1
    backoff_initial_seconds: float = 0.5
    backoff_multiplier: float = 2.0
    settle_delay_ms: int = 1000


@lru_cache(maxsize=1)
def get_analysis_settings() -> AnalysisSettings:
    """
    Return cached analysis settings from environment variables.
    """

    renderer = _get_str_env("PAGELENS_RENDERER", "http").lower()
    if renderer not in RENDERER_BACKENDS:
        raise RuntimeError(
            f"PAGELENS_RENDERER='{renderer}' is not valid. "
            f"Allowed values: {sorted(RENDERER_BACKENDS)}."
        )

    return AnalysisSettings(
        max_depth=max(0, _get_int_env("PAGELENS_MAX_DEPTH", 2)),
        max_pages=max(1, _get_int_env("PAGELENS_MAX_PAGES", 15)),
        page_timeout_seconds=max(1.0, _get_float_env("PAGELENS_PAGE_TIMEOUT_SECONDS", 30.0)),
        renderer=renderer,
        user_agent=_get_str_env("PAGELENS_USER_AGENT", DEFAULT_USER_AGENT),
        max_retries=max(0, _get_int_env("PAGELENS_MAX_RETRIES", 1)),
        backoff_initial_seconds=max(0.1, _get_float_env("PAGELENS_BACKOFF_INITIAL_SECONDS", 0.5)),
        backoff_multiplier=max(1.0, _get_float_env("PAGELENS_BACKOFF_MULTIPLIER", 2.0)),
        settle_delay_ms=max(0, _get_int_env("PAGELENS_SETTLE_DELAY_MS", 1000)),
    )

"""
URL normalization, origin checks and skip rules for site traversal.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse, urlsplit

DEFAULT_PORTS = {"http": 80, "https": 443}

SKIP_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\.(pdf|zip|doc|docx|xls|xlsx|ppt|pptx|exe|dmg)$", re.IGNORECASE),
    re.compile(r"\.(jpg|jpeg|png|gif|svg|webp|ico)$", re.IGNORECASE),
    re.compile(r"\.(mp3|mp4|avi|mov|wav)$", re.IGNORECASE),
    re.compile(r"\.(css|js|json|xml)$", re.IGNORECASE),
    re.compile(r"^mailto:", re.IGNORECASE),
    re.compile(r"^tel:", re.IGNORECASE),
    re.compile(r"^javascript:", re.IGNORECASE),
    re.compile(r"#$"),
    re.compile(r"/(logout|signout|sign-out)", re.IGNORECASE),
)


def get_origin(url: str) -> str | None:
    """
    Return `scheme://host[:port]` for an absolute http(s) URL, else None.

    Default ports are omitted so `https://a.com:443` and `https://a.com`
    share one origin.
    """

    try:
        parsed = urlparse(url.strip())
        port = parsed.port
    except ValueError:
        return None

    scheme = parsed.scheme.lower()
    host = (parsed.hostname or "").lower()
    if scheme not in DEFAULT_PORTS or not host:
        return None

    if ":" in host:
        host = f"[{host}]"
    if port is None or port == DEFAULT_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def normalize_url(url: str) -> str:
    """
    Dedup key for a URL: origin plus path, lower-cased, without query,
    fragment or trailing slash. URLs that cannot be parsed map to themselves.
    """

    origin = get_origin(url)
    if origin is None:
        return url

    path = urlsplit(url.strip()).path or "/"
    normalized = f"{origin}{path}"
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized.lower()


def is_internal_url(url: str, base_domain: str) -> bool:
    origin = get_origin(url)
    return origin is not None and origin == base_domain


def should_skip_url(url: str) -> bool:
    """
    True for binary, media, style and script assets, non-navigational
    schemes, bare fragment anchors and logout-style paths.
    """

    return any(pattern.search(url) for pattern in SKIP_PATTERNS)

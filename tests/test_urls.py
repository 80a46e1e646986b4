from __future__ import annotations

import pytest

from pagelens.crawling.urls import get_origin, is_internal_url, normalize_url, should_skip_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.com/", "https://example.com"),
        ("https://example.com", "https://example.com"),
        ("HTTPS://Example.com/About/#team", "https://example.com/about"),
        ("https://example.com/a?x=1", "https://example.com/a"),
        ("https://example.com:443/a", "https://example.com/a"),
        ("https://example.com:8443/a/", "https://example.com:8443/a"),
    ],
)
def test_normalize_url(url: str, expected: str) -> None:
    assert normalize_url(url) == expected


def test_normalize_url_returns_unparsable_input_unchanged() -> None:
    assert normalize_url("not a url") == "not a url"
    assert normalize_url("mailto:hi@example.com") == "mailto:hi@example.com"


def test_get_origin() -> None:
    assert get_origin("https://Example.com/path?q=1") == "https://example.com"
    assert get_origin("http://example.com:80/") == "http://example.com"
    assert get_origin("https://example.com:8443/") == "https://example.com:8443"
    assert get_origin("ftp://example.com/") is None
    assert get_origin("/relative/path") is None
    assert get_origin("https://example.com:99999/") is None


def test_is_internal_url_requires_exact_origin() -> None:
    base = "https://example.com"
    assert is_internal_url("https://example.com/pricing", base)
    assert is_internal_url("https://EXAMPLE.com:443/", base)
    assert not is_internal_url("http://example.com/pricing", base)
    assert not is_internal_url("https://blog.example.com/", base)
    assert not is_internal_url("https://example.com:8443/", base)
    assert not is_internal_url("mailto:hi@example.com", base)


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/whitepaper.pdf",
        "https://example.com/logo.PNG",
        "https://example.com/intro.mp4",
        "https://example.com/app.js",
        "https://example.com/feed.xml",
        "mailto:hello@example.com",
        "tel:+15551234567",
        "javascript:void(0)",
        "https://example.com/#",
        "https://example.com/logout",
        "https://example.com/account/sign-out",
    ],
)
def test_should_skip_url(url: str) -> None:
    assert should_skip_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/",
        "https://example.com/pricing",
        "https://example.com/about#team",
        "https://example.com/docs/pdf-guide",
    ],
)
def test_should_not_skip_navigational_url(url: str) -> None:
    assert not should_skip_url(url)


def test_normalize_url_keeps_path_parameters() -> None:
    first = normalize_url("https://a.com/doc;v=1")
    second = normalize_url("https://a.com/doc;v=2")
    assert first == "https://a.com/doc;v=1"
    assert first != second

"""
BeautifulSoup-based extraction of page evidence from rendered HTML.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from pagelens.crawling.types import MAX_LINK_TEXT_CHARS, MAX_VISIBLE_TEXT_CHARS, PageExtraction

NON_VISIBLE_TAGS = ["script", "style", "noscript", "template", "head"]
BUTTON_LINK_SELECTORS = "a[role='button'], a.btn, a.button, a.cta"


class PageExtractionParser:
    """
    Deterministic extraction of title, text, inputs, buttons and links.
    """

    @classmethod
    def parse(
        cls,
        *,
        html: str,
        final_url: str,
        visible_text: str | None = None,
    ) -> PageExtraction:
        """
        Parse one HTML document.

        `visible_text` overrides the text derived from the markup, for
        renderers that can read the laid-out text directly.
        """

        soup = BeautifulSoup(html or "", "html.parser")
        base_url = cls._base_url(soup=soup, final_url=final_url)
        title = cls._extract_title(soup)
        inputs = cls.extract_inputs(soup)
        buttons = cls.extract_buttons(soup)
        links = cls.extract_links(soup=soup, base_url=base_url)
        # Text extraction decomposes non-visible nodes, so it runs last.
        if visible_text is None:
            visible_text = cls.extract_visible_text(soup)

        return PageExtraction(
            final_url=final_url,
            title=title,
            visible_text=visible_text[:MAX_VISIBLE_TEXT_CHARS],
            inputs=inputs,
            buttons=buttons,
            links=links,
        )

    @staticmethod
    def extract_visible_text(soup: BeautifulSoup) -> str:
        root = soup.body or soup
        for node in root.find_all(NON_VISIBLE_TAGS):
            node.decompose()
        lines = [
            re.sub(r"[ \t\r\f\v]+", " ", line).strip()
            for line in root.get_text("\n").splitlines()
        ]
        return "\n".join(line for line in lines if line)

    @staticmethod
    def extract_inputs(soup: BeautifulSoup) -> list[dict[str, Any]]:
        inputs: list[dict[str, Any]] = []
        for node in soup.find_all(["input", "textarea", "select"]):
            if node.name in {"textarea", "select"}:
                input_type = node.name
            else:
                input_type = _attr(node, "type").lower() or "text"
            inputs.append(
                {
                    "type": input_type,
                    "name": _attr(node, "name") or _attr(node, "id"),
                    "placeholder": _attr(node, "placeholder"),
                }
            )
        return inputs

    @classmethod
    def extract_buttons(cls, soup: BeautifulSoup) -> list[dict[str, Any]]:
        buttons: list[dict[str, Any]] = []
        for node in soup.find_all("button"):
            buttons.append(
                {
                    "text": cls._node_text(node),
                    "type": _attr(node, "type").lower() or "submit",
                }
            )
        for node in soup.find_all("input"):
            input_type = _attr(node, "type").lower()
            if input_type in {"submit", "button"}:
                buttons.append({"text": _attr(node, "value"), "type": input_type})
        for node in soup.select(BUTTON_LINK_SELECTORS):
            buttons.append({"text": cls._node_text(node), "type": "link-button"})
        return [button for button in buttons if button["text"]]

    @classmethod
    def extract_links(cls, *, soup: BeautifulSoup, base_url: str) -> list[dict[str, Any]]:
        links: list[dict[str, Any]] = []
        for node in soup.find_all("a", href=True):
            raw_href = _attr(node, "href")
            if not raw_href:
                continue
            try:
                href = urljoin(base_url, raw_href)
            except ValueError:
                href = raw_href
            links.append(
                {
                    "href": href,
                    "text": cls._node_text(node)[:MAX_LINK_TEXT_CHARS],
                }
            )
        return links

    @staticmethod
    def _node_text(node: Tag) -> str:
        return re.sub(r"\s+", " ", node.get_text(" ", strip=True)).strip()

    @staticmethod
    def _extract_title(soup: BeautifulSoup) -> str:
        if soup.title is None:
            return ""
        return soup.title.get_text(" ", strip=True)

    @staticmethod
    def _base_url(*, soup: BeautifulSoup, final_url: str) -> str:
        base = soup.find("base", href=True)
        if base is None:
            return final_url
        try:
            return urljoin(final_url, _attr(base, "href"))
        except ValueError:
            return final_url


def _attr(node: Tag, name: str) -> str:
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value).strip()
    return str(value).strip()

"""
Signal and pattern definitions for page classification.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class SignalKind(str, Enum):
    INPUT_TYPE = "input_type"
    INPUT_NAME = "input_name"
    INPUT_PLACEHOLDER = "input_placeholder"
    BUTTON_TEXT = "button_text"
    LINK_TEXT = "link_text"
    LINK_HREF = "link_href"
    VISIBLE_TEXT = "visible_text"
    URL = "url"


@dataclass(frozen=True)
class ExactMatcher:
    """
    Case-sensitive equality against a declared value.
    """

    value: str

    def search(self, candidate: str) -> str | None:
        return candidate if candidate == self.value else None


@dataclass(frozen=True)
class PatternMatcher:
    """
    Lexical regex search; returns the matched substring.
    """

    pattern: re.Pattern[str]

    def search(self, candidate: str) -> str | None:
        match = self.pattern.search(candidate)
        return match.group(0) if match is not None else None


Matcher = ExactMatcher | PatternMatcher


@dataclass(frozen=True)
class Signal:
    kind: SignalKind
    matcher: Matcher
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"Signal weight must be positive, got {self.weight}.")


@dataclass(frozen=True)
class PatternDefinition:
    """
    A named page archetype scored by a weighted set of signals.
    """

    id: str
    name: str
    description: str
    signals: tuple[Signal, ...]


def exact(kind: SignalKind, value: str, weight: int) -> Signal:
    return Signal(kind=kind, matcher=ExactMatcher(value), weight=weight)


def regex(kind: SignalKind, pattern: str, weight: int, *, ignore_case: bool = True) -> Signal:
    flags = re.IGNORECASE if ignore_case else 0
    # A bare `$` also matches before a trailing newline; anchor at the true end.
    if pattern.endswith("$") and not pattern.endswith(r"\$"):
        pattern = pattern[:-1] + r"\Z"
    return Signal(kind=kind, matcher=PatternMatcher(re.compile(pattern, flags)), weight=weight)

"""Plain-text and regular-expression search patterns for log lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_WHITESPACE = " \t\n\v\f\r"
_REGEX_PREFIX = "re:"


@dataclass(frozen=True)
class SearchPattern:
    """A compiled search: plain substring, or regex when ``regex`` is set."""

    raw_text: str
    needle: str
    regex: re.Pattern[str] | None = None


def trim_search_text(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def compile_search_pattern(text: str) -> SearchPattern:
    """Build a pattern from user text; a ``re:`` prefix selects a regex.

    Raises ValueError for empty text or an invalid regular expression.
    """
    trimmed = trim_search_text(text)
    if not trimmed:
        raise ValueError("Search text must not be empty")

    if not trimmed.startswith(_REGEX_PREFIX):
        return SearchPattern(trimmed, trimmed, None)

    regex_text = trimmed[len(_REGEX_PREFIX):]
    if not regex_text:
        raise ValueError("Regex pattern after re: must not be empty")

    try:
        compiled = re.compile(regex_text)
    except re.error as error:
        raise ValueError(f"Invalid regex: {error}") from error

    return SearchPattern(trimmed, regex_text, compiled)


def matches_pattern(haystack: str, pattern: SearchPattern) -> bool:
    """Return True if ``haystack`` contains a match for ``pattern``."""
    if pattern.regex is None:
        return pattern.needle in haystack
    return pattern.regex.search(haystack) is not None


def matches_any_pattern(haystack: str, patterns: Iterable[SearchPattern]) -> bool:
    """Return True if any of ``patterns`` matches ``haystack``."""
    return any(matches_pattern(haystack, pattern) for pattern in patterns)
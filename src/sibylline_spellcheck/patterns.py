"""Regex span scanning for inclusion and exclusion regions."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .spans import TextSpan

# Misspellings inside URLs are never reported
URL_PATTERN = re.compile(
    r"https?://(?:www\.)?"
    r"[-a-zA-Z0-9@:%._+~#=]{1,256}(?:\.[a-zA-Z0-9()]{1,6}\b)?"
    r"[-a-zA-Z0-9()@:%_+.~#?&/=]*",
    re.IGNORECASE,
)


def find_matches(text: str, pattern: re.Pattern) -> list[TextSpan]:
    """Find every match of *pattern* in *text*.

    When the pattern defines capturing groups the span of group 1 is used,
    so ``"([^"]*)"`` selects the string contents rather than the quotes.
    Matches whose selected span is empty are dropped: an empty span can
    never contain a misspelling.

    Returns:
        Spans sorted by start position, non-overlapping.
    """
    use_group = pattern.groups > 0
    spans: list[TextSpan] = []
    for match in pattern.finditer(text):
        if use_group and match.start(1) != -1:
            start, end = match.span(1)
        else:
            start, end = match.span()
        if start == end:
            continue
        spans.append(TextSpan(start=start, end=end, matched_text=text[start:end]))
    return spans


def find_url_spans(text: str) -> list[TextSpan]:
    """Find URL-like regions of *text*."""
    return find_matches(text, URL_PATTERN)


@dataclass(frozen=True, slots=True)
class MatchedSpans:
    """Exclusion and inclusion regions found in one text."""

    exclusion: list[TextSpan]
    inclusion: list[TextSpan] | None
    """``None`` when no inclusion pattern is configured."""


class SpanMatcher:
    """Scan texts for exclusion (URL) and optional inclusion regions."""

    def __init__(
        self,
        include_pattern: re.Pattern | None = None,
        exclude_pattern: re.Pattern = URL_PATTERN,
    ) -> None:
        self._include = include_pattern
        self._exclude = exclude_pattern

    @property
    def include_pattern(self) -> re.Pattern | None:
        return self._include

    def match(self, text: str) -> MatchedSpans:
        exclusion = find_matches(text, self._exclude)
        inclusion = find_matches(text, self._include) if self._include is not None else None
        return MatchedSpans(exclusion=exclusion, inclusion=inclusion)

"""Base classes for spelling providers."""

import re
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Iterable, Iterator

from ..spans import RawSpan

# Alphabetic words, allowing inner apostrophes ("don't", "o'clock")
WORD_PATTERN = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


def tokenize(text: str, min_length: int = 2) -> Iterator[tuple[int, int, str]]:
    """Yield ``(start, end, word)`` for every word in *text*.

    Words shorter than *min_length* characters are skipped.
    """
    for match in WORD_PATTERN.finditer(text):
        word = match.group(0)
        if len(word) < min_length:
            continue
        yield match.start(), match.end(), word


def normalize_words(words: Iterable[str] | None) -> set[str]:
    """Lowercase and strip a word collection, dropping blanks."""
    if not words:
        return set()
    return {w.strip().lower() for w in words if w and w.strip()}


class SpellingProvider(ABC):
    """Abstract base class for spelling providers.

    A provider flags spans of a text that look misspelled. Providers are
    registered in the provider registry and selected by name. The engine
    filters and positions whatever the provider returns; providers need not
    return spans in ascending order.
    """

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        """Return the unique name of this provider."""
        ...

    @abstractmethod
    def detect(self, text: str) -> list[RawSpan] | Awaitable[list[RawSpan]]:
        """Flag possibly misspelled spans of *text*.

        Args:
            text: Full decoded file contents.

        Returns:
            Spans into *text*, or an awaitable resolving to them.
        """
        ...

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Return whether this provider is ready for use."""
        ...

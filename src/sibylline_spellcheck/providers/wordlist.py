"""Deterministic in-memory provider."""

from collections.abc import Iterable

from ..spans import RawSpan
from .base import SpellingProvider, normalize_words, tokenize


class WordListProvider(SpellingProvider):
    """Flag words against fixed word sets, without any dictionary files.

    With ``misspelled`` given, exactly those words are flagged. Otherwise
    every word outside ``vocabulary`` and ``allowlist`` is flagged. Matching
    is case-insensitive.
    """

    def __init__(
        self,
        vocabulary: Iterable[str] | None = None,
        misspelled: Iterable[str] | None = None,
        allowlist: Iterable[str] | None = None,
        min_length: int = 2,
    ):
        self._known = normalize_words(vocabulary) | normalize_words(allowlist)
        self._misspelled = normalize_words(misspelled) if misspelled is not None else None
        self._min_length = min_length

    @classmethod
    def name(cls) -> str:
        return "wordlist"

    @property
    def is_loaded(self) -> bool:
        return True

    def _is_misspelled(self, word: str) -> bool:
        lowered = word.lower()
        if lowered in self._known:
            return False
        if self._misspelled is not None:
            return lowered in self._misspelled
        return True

    def detect(self, text: str) -> list[RawSpan]:
        return [
            RawSpan(start=start, end=end, text=word)
            for start, end, word in tokenize(text, self._min_length)
            if self._is_misspelled(word)
        ]

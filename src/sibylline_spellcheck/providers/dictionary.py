"""Dictionary-backed provider using pyspellchecker."""

from collections.abc import Iterable

from ..spans import RawSpan
from .base import SpellingProvider, normalize_words, tokenize


class PySpellCheckerProvider(SpellingProvider):
    """Flag words missing from a pyspellchecker word-frequency dictionary.

    The dictionary is loaded on first use unless ``lazy_load=False``.
    Allowlisted words are added to the dictionary before any detection.
    """

    def __init__(
        self,
        allowlist: Iterable[str] | None = None,
        min_length: int = 2,
        language: str = "en",
        lazy_load: bool = True,
    ):
        self._allowlist = normalize_words(allowlist)
        self._min_length = min_length
        self._language = language
        self._dictionary = None

        if not lazy_load:
            self._ensure_dictionary()

    @classmethod
    def name(cls) -> str:
        return "pyspellchecker"

    @property
    def is_loaded(self) -> bool:
        return self._dictionary is not None

    def _ensure_dictionary(self):
        if self._dictionary is None:
            from spellchecker import SpellChecker

            dictionary = SpellChecker(language=self._language, distance=1)
            if self._allowlist:
                dictionary.word_frequency.load_words(sorted(self._allowlist))
            self._dictionary = dictionary
        return self._dictionary

    def detect(self, text: str) -> list[RawSpan]:
        dictionary = self._ensure_dictionary()
        tokens = list(tokenize(text, self._min_length))
        if not tokens:
            return []

        unknown = dictionary.unknown({word.lower() for _, _, word in tokens})
        return [
            RawSpan(start=start, end=end, text=word)
            for start, end, word in tokens
            if word.lower() in unknown and word.lower() not in self._allowlist
        ]

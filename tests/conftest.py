"""Shared test fixtures for sibylline-spellcheck."""

import pytest

from sibylline_spellcheck.checker import SpellChecker
from sibylline_spellcheck.providers.wordlist import WordListProvider

# Words the in-memory provider treats as misspelled in these tests
MISSPELLED = ["teh", "mistak", "recieve", "seperate", "speling"]


@pytest.fixture
def provider():
    """Create a deterministic provider flagging a fixed set of words."""
    return WordListProvider(misspelled=MISSPELLED)


@pytest.fixture
def checker(provider):
    """Create a SpellChecker without an inclusion pattern."""
    return SpellChecker(provider)

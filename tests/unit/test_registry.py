"""Tests for the spelling provider registry."""

import pytest

from sibylline_spellcheck.errors import ConfigError
from sibylline_spellcheck.providers import (
    PySpellCheckerProvider,
    WordListProvider,
    create_provider,
    get_provider,
    list_providers,
    provider_parameters,
    register_provider,
)
from sibylline_spellcheck.providers.base import SpellingProvider


class TestRegistry:
    """Tests for provider registration and lookup."""

    def test_list_providers_includes_builtins(self):
        providers = list_providers()
        assert "pyspellchecker" in providers
        assert "wordlist" in providers

    def test_get_provider_dictionary(self):
        assert get_provider("pyspellchecker") is PySpellCheckerProvider

    def test_get_provider_wordlist(self):
        assert get_provider("wordlist") is WordListProvider

    def test_get_provider_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown spelling provider"):
            get_provider("nonexistent")

    def test_register_custom_provider(self):
        class CustomProvider(SpellingProvider):
            @classmethod
            def name(cls) -> str:
                return "_test_custom"

            def detect(self, text):
                return []

            @property
            def is_loaded(self) -> bool:
                return True

        register_provider(CustomProvider)
        try:
            assert get_provider("_test_custom") is CustomProvider
            assert "_test_custom" in list_providers()
        finally:
            # Clean up registry
            from sibylline_spellcheck.providers import _PROVIDERS

            _PROVIDERS.pop("_test_custom", None)


class TestCreateProvider:
    """Tests for building a provider from run configuration."""

    def test_parameters_of_builtins(self):
        assert provider_parameters(WordListProvider) == {
            "vocabulary",
            "misspelled",
            "allowlist",
            "min_length",
        }
        assert "language" in provider_parameters(PySpellCheckerProvider)

    def test_passes_run_settings(self):
        provider = create_provider("wordlist", allowlist=["foxes"], min_length=4)
        assert isinstance(provider, WordListProvider)
        assert [s.text for s in provider.detect("foxes quux abc")] == ["quux"]

    def test_known_option_accepted(self):
        provider = create_provider("wordlist", options={"vocabulary": ["fox"]})
        assert [s.text for s in provider.detect("fox qux")] == ["qux"]

    def test_dictionary_option_accepted(self):
        provider = create_provider("pyspellchecker", options={"language": "en"})
        assert isinstance(provider, PySpellCheckerProvider)
        assert not provider.is_loaded

    def test_unknown_option_rejected(self):
        with pytest.raises(ConfigError, match="Unknown provider_options for 'wordlist': langauge"):
            create_provider("wordlist", options={"langauge": "en"})

    def test_reserved_option_rejected(self):
        with pytest.raises(ConfigError, match="min_length"):
            create_provider("wordlist", options={"min_length": 1})

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown spelling provider"):
            create_provider("nonexistent")

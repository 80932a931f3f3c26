"""Spelling providers and the name -> class lookup used by run configuration.

``provider: <name>`` in a config file (or ``--provider``) selects one of the
classes registered here. ``provider_options`` are passed to its constructor
and must name real constructor parameters. Custom providers plug in with
register_provider().
"""

import inspect
from collections.abc import Iterable
from typing import Any

from ..errors import ConfigError
from .base import SpellingProvider, tokenize

_PROVIDERS: dict[str, type[SpellingProvider]] = {}

DEFAULT_PROVIDER = "pyspellchecker"

# Supplied by the run itself, never through provider_options
_RESERVED_OPTIONS = {"allowlist", "min_length"}


def register_provider(cls: type[SpellingProvider]) -> type[SpellingProvider]:
    """Make *cls* selectable by its ``name()``. Can be used as a decorator."""
    _PROVIDERS[cls.name()] = cls
    return cls


def get_provider(name: str) -> type[SpellingProvider]:
    """Return the provider class registered as *name*.

    Raises:
        ValueError: If no provider has that name.
    """
    try:
        return _PROVIDERS[name]
    except KeyError:
        available = ", ".join(list_providers())
        raise ValueError(
            f"Unknown spelling provider {name!r}. Available providers: {available}"
        ) from None


def list_providers() -> list[str]:
    return sorted(_PROVIDERS)


def provider_parameters(cls: type[SpellingProvider]) -> set[str]:
    """Named keyword parameters accepted by a provider's constructor."""
    params = inspect.signature(cls.__init__).parameters.values()
    return {
        p.name
        for p in params
        if p.name != "self" and p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
    }


def create_provider(
    name: str,
    allowlist: Iterable[str] = (),
    min_length: int = 2,
    options: dict[str, Any] | None = None,
) -> SpellingProvider:
    """Instantiate the provider *name* for one run.

    Raises:
        ValueError: If no provider has that name.
        ConfigError: If *options* names a parameter the provider does not take.
    """
    cls = get_provider(name)
    options = dict(options or {})
    unknown = set(options) - (provider_parameters(cls) - _RESERVED_OPTIONS)
    if unknown:
        raise ConfigError(
            f"Unknown provider_options for {name!r}: {', '.join(sorted(unknown))}"
        )
    return cls(allowlist=allowlist, min_length=min_length, **options)


from .dictionary import PySpellCheckerProvider  # noqa: E402
from .wordlist import WordListProvider  # noqa: E402

register_provider(PySpellCheckerProvider)
register_provider(WordListProvider)

__all__ = [
    "DEFAULT_PROVIDER",
    "PySpellCheckerProvider",
    "SpellingProvider",
    "WordListProvider",
    "create_provider",
    "get_provider",
    "list_providers",
    "provider_parameters",
    "register_provider",
    "tokenize",
]

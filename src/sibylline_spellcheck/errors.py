"""Exception hierarchy for spell checking runs.

Configuration errors abort a run before any file is read. Decode and
detection errors are scoped to a single file and are converted into a
per-file result by :class:`~sibylline_spellcheck.checker.SpellChecker`.
"""

from __future__ import annotations


class SpellcheckError(Exception):
    """Base class for all spell checking errors."""


class ConfigError(SpellcheckError):
    """Invalid or incomplete run configuration."""


class PatternCompileFailure(ConfigError):
    """The inclusion regular expression could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid include pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class DecodeFailure(SpellcheckError):
    """A file could not be read or decoded to text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DetectionFailure(SpellcheckError):
    """The spelling provider raised while checking a text."""

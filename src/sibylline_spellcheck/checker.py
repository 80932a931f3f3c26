"""Per-file spell checking pipeline.

Pipeline:
    1. Read bytes and decode with the detected encoding
    2. Ask the provider for raw misspelling spans
    3. Find URL (exclusion) and inclusion regions
    4. Drop spans inside exclusions or outside all inclusions
    5. Resolve surviving spans to line/column positions
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import re
from collections.abc import Awaitable
from pathlib import Path

from .config import SpellcheckConfig, accepted_words, compile_include_pattern
from .decoding import read_text
from .errors import DecodeFailure, DetectionFailure
from .filtering import filter_spans
from .patterns import SpanMatcher
from .providers import SpellingProvider, create_provider
from .report import FileResult
from .spans import LineIndex, Misspelling, RawSpan

logger = logging.getLogger(__name__)


async def _await(awaitable: Awaitable[list[RawSpan]]) -> list[RawSpan]:
    return await awaitable


class SpellChecker:
    """Check texts and files for misspellings.

    Holds no per-file state, so one instance can check many files
    concurrently.
    """

    def __init__(
        self,
        provider: SpellingProvider,
        include_pattern: re.Pattern | None = None,
    ) -> None:
        self._provider = provider
        self._matcher = SpanMatcher(include_pattern=include_pattern)

    @classmethod
    def from_config(cls, config: SpellcheckConfig) -> SpellChecker:
        """Build a checker from run configuration.

        Raises:
            PatternCompileFailure: If the inclusion regex is malformed.
            ConfigError: If the allowlist cannot be read or provider_options
                names an unknown parameter.
            ValueError: If the provider name is unknown.
        """
        include_pattern = compile_include_pattern(config.include_regex)
        provider = create_provider(
            config.provider,
            allowlist=accepted_words(config),
            min_length=config.min_length,
            options=config.provider_options,
        )
        return cls(provider, include_pattern=include_pattern)

    @property
    def provider(self) -> SpellingProvider:
        return self._provider

    def _detect(self, text: str) -> list[RawSpan]:
        name = self._provider.name()
        try:
            result = self._provider.detect(text)
            if inspect.isawaitable(result):
                result = asyncio.run(_await(result))
            spans = list(result)
        except Exception as e:
            raise DetectionFailure(f"{name} provider failed: {e}") from e

        for span in spans:
            self._validate(name, span, text)
        return spans

    @staticmethod
    def _validate(name: str, span: object, text: str) -> None:
        if not isinstance(span, RawSpan):
            raise DetectionFailure(f"{name} returned {type(span).__name__}, expected RawSpan")
        if span.end > len(text):
            raise DetectionFailure(
                f"{name} returned span [{span.start}, {span.end}) "
                f"outside text of length {len(text)}"
            )
        if span.text is not None and span.text != text[span.start : span.end]:
            raise DetectionFailure(
                f"{name} returned text {span.text!r} for span [{span.start}, {span.end}), "
                f"which holds {text[span.start : span.end]!r}"
            )

    def check_text(self, text: str) -> list[Misspelling]:
        """Return the reportable misspellings in *text*, in provider order.

        Raises:
            DetectionFailure: If the provider fails or returns invalid spans.
        """
        raw_spans = self._detect(text)
        if not raw_spans:
            return []

        matched = self._matcher.match(text)
        kept = filter_spans(raw_spans, matched.exclusion, matched.inclusion)
        logger.debug("%d of %d flagged spans kept after filtering", len(kept), len(raw_spans))
        if not kept:
            return []

        index = LineIndex.build(text)
        return [
            Misspelling(
                start=span.start,
                end=span.end,
                text=text[span.start : span.end],
                position=index.resolve(span.start),
            )
            for span in kept
        ]

    def check_file(self, path: str | Path) -> FileResult:
        """Check one file. Decode and detection failures become the result's error."""
        file_path = str(path)
        try:
            decoded = read_text(path)
            misspellings = self.check_text(decoded.text)
        except DecodeFailure as e:
            logger.warning("Could not decode %s: %s", file_path, e.reason)
            return FileResult(file_path=file_path, error=e.reason)
        except DetectionFailure as e:
            logger.warning("Could not check %s: %s", file_path, e)
            return FileResult(file_path=file_path, error=str(e))

        return FileResult(
            file_path=file_path,
            misspellings=misspellings,
            encoding=decoded.encoding,
        )

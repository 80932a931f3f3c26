"""Spellcheck: locate and report misspelled words in text files."""

from .checker import SpellChecker
from .config import SpellcheckConfig, compile_include_pattern, load_allowlist, load_config
from .decoding import DecodedText, decode, decode_bytes, detect_encoding
from .errors import (
    ConfigError,
    DecodeFailure,
    DetectionFailure,
    PatternCompileFailure,
    SpellcheckError,
)
from .filtering import filter_spans, is_contained
from .patterns import URL_PATTERN, SpanMatcher, find_matches, find_url_spans
from .providers import SpellingProvider, get_provider, list_providers, register_provider
from .report import (
    CollectingSink,
    FileResult,
    LoggingSink,
    ReportMode,
    RunOutcome,
    StreamSink,
    aggregate,
    render,
)
from .runner import RunReport, collect_files, run
from .spans import LineIndex, Misspelling, Position, RawSpan, TextSpan

__all__ = [
    "SpellChecker",
    "SpellcheckConfig",
    "load_config",
    "load_allowlist",
    "compile_include_pattern",
    "DecodedText",
    "decode",
    "decode_bytes",
    "detect_encoding",
    "SpellcheckError",
    "ConfigError",
    "PatternCompileFailure",
    "DecodeFailure",
    "DetectionFailure",
    "filter_spans",
    "is_contained",
    "URL_PATTERN",
    "SpanMatcher",
    "find_matches",
    "find_url_spans",
    "SpellingProvider",
    "get_provider",
    "list_providers",
    "register_provider",
    "FileResult",
    "RunOutcome",
    "ReportMode",
    "StreamSink",
    "LoggingSink",
    "CollectingSink",
    "aggregate",
    "render",
    "RunReport",
    "collect_files",
    "run",
    "LineIndex",
    "Misspelling",
    "Position",
    "RawSpan",
    "TextSpan",
]

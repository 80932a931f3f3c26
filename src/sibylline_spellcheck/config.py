"""Run configuration for spell checking.

Settings are merged from YAML files and command-line overrides, lowest to
highest priority:
1. Built-in defaults
2. User config: ~/.config/{app_name}/config.yaml
3. Project config: .spellcheck.yaml in the current directory
4. An explicit ``--config`` file, then command-line flags
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError, PatternCompileFailure
from .providers import DEFAULT_PROVIDER
from .report import ReportMode

logger = logging.getLogger(__name__)

APP_NAME = "sibylline-spellcheck"
PROJECT_CONFIG_NAME = ".spellcheck.yaml"

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


@dataclass(frozen=True)
class SpellcheckConfig:
    """Settings for one run. Built once at the entry point and passed down."""

    files: str | None = None
    """Glob selecting the files to check. Required to run."""

    include_regex: str | None = None
    """When set, only misspellings inside matches of this regex are reported."""

    allowlist: str | None = None
    """Path to a file of extra accepted words, one per line."""

    words: tuple[str, ...] = ()
    """Extra accepted words given inline."""

    report_mode: ReportMode = ReportMode.POSITION
    provider: str = DEFAULT_PROVIDER
    workers: int | None = None
    min_length: int = 2
    provider_options: dict[str, Any] = field(default_factory=dict)

    def with_overrides(self, **overrides: Any) -> SpellcheckConfig:
        """Return a copy with every non-``None`` override applied."""
        return _merge(self, {k: v for k, v in overrides.items() if v is not None})

    def require_files(self) -> str:
        if not self.files:
            raise ConfigError("No file glob configured")
        return self.files


_FIELD_NAMES = {f.name for f in fields(SpellcheckConfig)}


def _coerce(key: str, value: Any) -> Any:
    if key == "report_mode" and not isinstance(value, ReportMode):
        try:
            return ReportMode(str(value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in ReportMode)
            raise ConfigError(
                f"Invalid report_mode {value!r}, expected one of: {choices}"
            ) from None
    if key == "words":
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, list | tuple):
            raise ConfigError(f"'words' must be a list, got {type(value).__name__}")
        return tuple(str(w) for w in value)
    if key in ("workers", "min_length"):
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{key!r} must be an integer, got {value!r}") from None
        if number < 1:
            raise ConfigError(f"{key!r} must be at least 1, got {number}")
        return number
    if key == "provider_options" and not isinstance(value, dict):
        raise ConfigError("'provider_options' must be a mapping")
    return value


def _merge(base: SpellcheckConfig, data: dict[str, Any]) -> SpellcheckConfig:
    updates: dict[str, Any] = {}
    for key, value in data.items():
        if key not in _FIELD_NAMES:
            logger.debug("Ignoring unknown config key %r", key)
            continue
        if key == "words":
            updates[key] = base.words + _coerce(key, value)
        else:
            updates[key] = _coerce(key, value)
    return replace(base, **updates)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read one YAML config file into a mapping.

    Raises:
        ConfigError: If the file is unreadable, malformed, or not a mapping.
    """
    yaml = _get_yaml()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    # YAML keys may use dashes like the CLI flags
    return {str(k).replace("-", "_"): v for k, v in data.items()}


def default_config_locations(app_name: str = APP_NAME) -> list[Path]:
    """Config files in ascending priority order."""
    return [
        Path.home() / ".config" / app_name / "config.yaml",  # User config
        Path.cwd() / PROJECT_CONFIG_NAME,  # Project config
    ]


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    locations: list[Path] | None = None,
) -> SpellcheckConfig:
    """Build the run configuration from config files and *overrides*.

    Args:
        config_path: Explicit config file. Must exist when given.
        overrides: Values from the command line; ``None`` values are skipped.
        locations: Config files to consult, lowest priority first. Defaults
            to the user and project locations.
    """
    config = SpellcheckConfig()

    for location in locations if locations is not None else default_config_locations():
        if location.is_file():
            logger.debug("Loading config from %s", location)
            config = _merge(config, read_config_file(location))

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        config = _merge(config, read_config_file(path))

    if overrides:
        config = config.with_overrides(**overrides)
    return config


def compile_include_pattern(pattern: str | None) -> re.Pattern | None:
    """Compile the user's inclusion regex.

    Raises:
        PatternCompileFailure: If *pattern* is not a valid regular expression.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternCompileFailure(pattern, str(e)) from e


def load_allowlist(path: str | Path | None) -> set[str]:
    """Read accepted words from *path*, one per line.

    Blank lines and ``#`` comments are skipped.

    Raises:
        ConfigError: If the file cannot be read.
    """
    if path is None:
        return set()
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read allowlist {path}: {e}") from e

    words = set()
    for line in content.splitlines():
        word = line.split("#", 1)[0].strip()
        if word:
            words.add(word)
    return words


def accepted_words(config: SpellcheckConfig) -> set[str]:
    """All words the provider should accept: allowlist file plus inline words."""
    return load_allowlist(config.allowlist) | set(config.words)

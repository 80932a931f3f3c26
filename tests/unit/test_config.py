"""Tests for configuration loading."""

import re
import textwrap

import pytest

from sibylline_spellcheck.config import (
    SpellcheckConfig,
    accepted_words,
    compile_include_pattern,
    load_allowlist,
    load_config,
    read_config_file,
)
from sibylline_spellcheck.errors import ConfigError, PatternCompileFailure
from sibylline_spellcheck.report import ReportMode


class TestIncludePattern:
    def test_none_disables_inclusion(self):
        assert compile_include_pattern(None) is None
        assert compile_include_pattern("") is None

    def test_valid_pattern(self):
        pattern = compile_include_pattern(r"#(.*)")
        assert isinstance(pattern, re.Pattern)

    def test_malformed_pattern_raises(self):
        with pytest.raises(PatternCompileFailure, match="Invalid include pattern") as excinfo:
            compile_include_pattern("([unclosed")
        assert excinfo.value.pattern == "([unclosed"
        assert isinstance(excinfo.value, ConfigError)


class TestAllowlist:
    def test_none(self):
        assert load_allowlist(None) == set()

    def test_reads_words_skipping_comments(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# project words\nkubectl\n\n  yaml  \nnginx # web server\n")
        assert load_allowlist(path) == {"kubectl", "yaml", "nginx"}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read allowlist"):
            load_allowlist(tmp_path / "missing.txt")

    def test_accepted_words_combines_sources(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("kubectl\n")
        config = SpellcheckConfig(allowlist=str(path), words=("nginx",))
        assert accepted_words(config) == {"kubectl", "nginx"}


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(locations=[])
        assert config.files is None
        assert config.include_regex is None
        assert config.report_mode is ReportMode.POSITION
        assert config.provider == "pyspellchecker"

    def test_overrides_skip_none(self):
        config = load_config(
            locations=[],
            overrides={"files": "**/*.md", "include_regex": None, "workers": 4},
        )
        assert config.files == "**/*.md"
        assert config.include_regex is None
        assert config.workers == 4

    def test_file_priority(self, tmp_path):
        user = tmp_path / "user.yaml"
        user.write_text("files: '*.txt'\nprovider: wordlist\nwords: [alpha]\n")
        project = tmp_path / "project.yaml"
        project.write_text("files: 'docs/**/*.md'\nwords: [beta]\n")

        config = load_config(locations=[user, project])
        assert config.files == "docs/**/*.md"
        assert config.provider == "wordlist"
        assert config.words == ("alpha", "beta")

    def test_cli_overrides_files(self, tmp_path):
        project = tmp_path / "project.yaml"
        project.write_text(
            textwrap.dedent(
                """\
                files: '*.txt'
                include-regex: '"([^"]*)"'
                report_mode: offsets
                """
            )
        )
        config = load_config(locations=[project], overrides={"files": "*.rst"})
        assert config.files == "*.rst"
        assert config.include_regex == '"([^"]*)"'
        assert config.report_mode is ReportMode.OFFSETS

    def test_explicit_config_path(self, tmp_path):
        path = tmp_path / "spell.yaml"
        path.write_text("min_length: 3\n")
        config = load_config(config_path=path, locations=[])
        assert config.min_length == 3

    def test_explicit_config_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(config_path=tmp_path / "nope.yaml", locations=[])

    def test_missing_locations_ignored(self, tmp_path):
        config = load_config(locations=[tmp_path / "absent.yaml"])
        assert config == SpellcheckConfig()

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("colour: blue\nfiles: '*.md'\n")
        assert load_config(locations=[path]).files == "*.md"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("files: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            read_config_file(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            read_config_file(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("")
        assert read_config_file(path) == {}

    def test_invalid_report_mode(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("report_mode: fancy\n")
        with pytest.raises(ConfigError, match="Invalid report_mode"):
            load_config(locations=[path])

    def test_invalid_workers(self):
        with pytest.raises(ConfigError, match="at least 1"):
            load_config(locations=[], overrides={"workers": 0})

    def test_require_files(self):
        with pytest.raises(ConfigError, match="No file glob"):
            SpellcheckConfig().require_files()
        assert SpellcheckConfig(files="*.md").require_files() == "*.md"

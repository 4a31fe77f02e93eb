# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the codestub configuration loader."""

from pathlib import Path

import pytest

from codestub.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    GeneratorConfig,
    ServerConfig,
    load_config,
    load_config_or_default,
    parse_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    """The default configuration enables every built-in language."""
    config = GeneratorConfig()
    assert config.environment == "development"
    assert config.languages == ("java", "python", "cpp", "javascript")
    assert config.max_nesting_depth == 2
    assert config.log_level == "INFO"
    assert config.server == ServerConfig(host="127.0.0.1", port=8050)


def test_full_config(tmp_path: Path) -> None:
    """Every key is parsed into the matching field."""
    content = """\
environment: production
languages: [python, java]
max-nesting-depth: 3
log-level: debug
server:
  host: 0.0.0.0
  port: 9000
"""
    config = load_config(_write_config(tmp_path, content), environ={})

    assert config.environment == "production"
    assert config.languages == ("python", "java")
    assert config.max_nesting_depth == 3
    assert config.log_level == "DEBUG"
    assert config.server == ServerConfig(host="0.0.0.0", port=9000)


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    """An empty document is the default configuration."""
    assert load_config(_write_config(tmp_path, ""), environ={}) == GeneratorConfig()


def test_partial_server_section(tmp_path: Path) -> None:
    """Missing server keys keep their defaults."""
    config = load_config(_write_config(tmp_path, "server:\n  port: 8080\n"), environ={})
    assert config.server == ServerConfig(host="127.0.0.1", port=8080)


def test_duplicate_languages_are_collapsed() -> None:
    """Listing a language twice enables it once."""
    assert parse_config("languages: [cpp, cpp, python]").languages == ("cpp", "python")


# ###############
# Environment Overrides
# ###############


def test_log_level_environment_override(tmp_path: Path) -> None:
    """CODESTUB_LOG_LEVEL overrides the log level from the file."""
    config_file = _write_config(tmp_path, "log-level: INFO\n")
    config = load_config(config_file, environ={"CODESTUB_LOG_LEVEL": "warning"})
    assert config.log_level == "WARNING"


def test_invalid_environment_log_level() -> None:
    """An unknown level in the environment is a configuration error."""
    with pytest.raises(ConfigError, match="CODESTUB_LOG_LEVEL"):
        load_config_or_default(None, environ={"CODESTUB_LOG_LEVEL": "LOUD"})


def test_load_or_default_without_file() -> None:
    """Without a path the defaults are returned."""
    assert load_config_or_default(None, environ={}) == GeneratorConfig()


def test_load_or_default_with_file(tmp_path: Path) -> None:
    """With a path the file is loaded."""
    config = load_config_or_default(_write_config(tmp_path, "environment: test\n"), environ={})
    assert config.environment == "test"


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing file raises ConfigError naming the path."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "nope.yaml", environ={})


def test_invalid_yaml() -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config("languages: [java\n")


def test_top_level_must_be_mapping() -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        parse_config("- java\n")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("environment: staging\n", "'environment' must be one of"),
        ("environment: 3\n", "'environment' must be a string"),
        ("languages: []\n", "'languages' must be a non-empty list"),
        ("languages: java\n", "'languages' must be a non-empty list"),
        ("languages: [cobol]\n", "'cobol' is not a supported language"),
        ("languages: [1]\n", "languages\\[0\\] must be a string"),
        ("max-nesting-depth: 0\n", "'max-nesting-depth' must be at least 1"),
        ("max-nesting-depth: two\n", "'max-nesting-depth' must be an integer"),
        ("max-nesting-depth: true\n", "'max-nesting-depth' must be an integer"),
        ("log-level: LOUD\n", "unknown log level 'LOUD'"),
        ("server: 8080\n", "server must be a YAML mapping"),
        ("server:\n  port: 70000\n", "'port' must be between 1 and 65535"),
        ("server:\n  host: 1\n", "'host' must be a string"),
    ],
)
def test_invalid_values(content: str, message: str) -> None:
    """Each invalid value raises ConfigError with a descriptive message."""
    with pytest.raises(ConfigError, match=message):
        parse_config(content, source_label="cfg.yaml")


def test_error_names_source() -> None:
    """Errors are prefixed with the source label."""
    with pytest.raises(ConfigError, match="^cfg.yaml: "):
        parse_config("max-nesting-depth: 0\n", source_label="cfg.yaml")

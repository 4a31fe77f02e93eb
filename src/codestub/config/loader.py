# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the codestub configuration file."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from codestub.codegen.mapping import DEFAULT_MAX_NESTING_DEPTH
from codestub.codegen.registry import is_registered, registered_languages

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".codestub.yaml"
LOG_LEVEL_ENV_VAR = "CODESTUB_LOG_LEVEL"
ENVIRONMENTS = ("development", "production", "test")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ServerConfig:
    """Bind address of the web service."""

    host: str = "127.0.0.1"
    port: int = 8050


@dataclass(frozen=True)
class GeneratorConfig:
    """The parsed codestub configuration.

    Attributes:
        environment: One of ``development``, ``production`` or ``test``.
        languages: Enabled target languages. This single value feeds both the
            request schema and the generator.
        max_nesting_depth: Deepest accepted DSL type nesting (``List<List<int>>`` is 2).
        log_level: Name of the ``logging`` level for the ``codestub`` logger.
        server: Web service bind address.
    """

    environment: str = "development"
    languages: tuple[str, ...] = field(default_factory=registered_languages)
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    log_level: str = "INFO"
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> GeneratorConfig:
    """Load and parse a codestub configuration file.

    Args:
        path: Path to the ``.codestub.yaml`` file.
        environ: Environment used for overrides; defaults to :data:`os.environ`.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    config = parse_config(text, source_label=str(path))
    return _apply_environment(config, os.environ if environ is None else environ)


def load_config_or_default(path: Path | None, environ: Mapping[str, str] | None = None) -> GeneratorConfig:
    """Load *path* if given, else the defaults; environment overrides apply either way."""
    if path is not None:
        return load_config(path, environ)
    return _apply_environment(GeneratorConfig(), os.environ if environ is None else environ)


def parse_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field has an invalid value.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    defaults = GeneratorConfig()

    environment = _optional_string(data, "environment", defaults.environment, source_label)
    if environment not in ENVIRONMENTS:
        raise ConfigError(f"{source_label}: 'environment' must be one of: {', '.join(ENVIRONMENTS)}")

    languages = defaults.languages
    if "languages" in data:
        languages = _parse_languages(data["languages"], source_label)

    max_depth = _optional_int(data, "max-nesting-depth", defaults.max_nesting_depth, source_label)
    if max_depth < 1:
        raise ConfigError(f"{source_label}: 'max-nesting-depth' must be at least 1")

    log_level = _parse_log_level(_optional_string(data, "log-level", defaults.log_level, source_label), source_label)

    server = defaults.server
    if "server" in data:
        server = _parse_server(data["server"], source_label)

    return GeneratorConfig(
        environment=environment,
        languages=languages,
        max_nesting_depth=max_depth,
        log_level=log_level,
        server=server,
    )


# ################
# Implementation
# ################

_logger = logging.getLogger(__name__)


def _apply_environment(config: GeneratorConfig, environ: Mapping[str, str]) -> GeneratorConfig:
    level = environ.get(LOG_LEVEL_ENV_VAR)
    if not level:
        return config
    _logger.debug("Log level overridden by %s=%s", LOG_LEVEL_ENV_VAR, level)
    return replace(config, log_level=_parse_log_level(level, LOG_LEVEL_ENV_VAR))


def _optional_string(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional string field, raising ConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _optional_int(mapping: dict[str, object], key: str, default: int, source_label: str) -> int:
    """Extract an optional integer field, raising ConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{source_label}: '{key}' must be an integer")
    return value


def _parse_languages(raw: object, source_label: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"{source_label}: 'languages' must be a non-empty list")
    languages: list[str] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, str):
            raise ConfigError(f"{source_label}: languages[{index}] must be a string")
        if not is_registered(entry):
            raise ConfigError(
                f"{source_label}: languages[{index}] '{entry}' is not a supported language "
                f"(available: {', '.join(registered_languages())})"
            )
        if entry not in languages:
            languages.append(entry)
    return tuple(languages)


def _parse_log_level(value: str, source_label: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{source_label}: unknown log level '{value}'")
    return level


def _parse_server(raw: object, source_label: str) -> ServerConfig:
    location = f"{source_label}: server"
    if not isinstance(raw, dict):
        raise ConfigError(f"{location} must be a YAML mapping")
    defaults = ServerConfig()
    host = _optional_string(raw, "host", defaults.host, location)
    port = _optional_int(raw, "port", defaults.port, location)
    if not 1 <= port <= 65535:
        raise ConfigError(f"{location}: 'port' must be between 1 and 65535")
    return ServerConfig(host=host, port=port)

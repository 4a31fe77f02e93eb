# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for codestub."""

from codestub.config.loader import (
    CONFIG_FILE_NAME,
    ConfigError,
    GeneratorConfig,
    ServerConfig,
    load_config,
    load_config_or_default,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "GeneratorConfig",
    "ServerConfig",
    "load_config",
    "load_config_or_default",
    "parse_config",
]

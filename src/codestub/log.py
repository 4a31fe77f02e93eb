# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging configuration for the ``codestub`` logger hierarchy."""

import logging

# ###############
# Public Interface
# ###############

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``codestub`` logger with a single stderr handler.

    Calling this again replaces the previous handler instead of adding a
    second one.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        The configured package logger.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("codestub")
    logger.setLevel(log_level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

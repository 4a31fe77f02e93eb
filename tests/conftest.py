# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared pytest fixtures."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_codestub_logger() -> Iterator[None]:
    """Undo any setup_logging() call made by a test."""
    logger = logging.getLogger("codestub")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type support checks for signatures (unsupported parameter and return types)."""

from codestub.validation.checks import (
    TypeCheckError,
    check_types,
    is_supported,
    validate_types,
)

__all__ = [
    "TypeCheckError",
    "check_types",
    "is_supported",
    "validate_types",
]

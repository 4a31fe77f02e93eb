# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""codestub: boilerplate function stubs from a language-neutral signature DSL."""

from codestub.codegen import generate, get_type_mapping, map_type, registered_languages
from codestub.errors import (
    CodestubError,
    MalformedSignatureError,
    TypeValidationError,
    UnsupportedLanguageError,
    UnsupportedTypeError,
)
from codestub.validation import check_types, validate_types

__version__ = "0.1.0"

__all__ = [
    "generate",
    "validate_types",
    "check_types",
    "get_type_mapping",
    "map_type",
    "registered_languages",
    "CodestubError",
    "UnsupportedLanguageError",
    "UnsupportedTypeError",
    "TypeValidationError",
    "MalformedSignatureError",
]

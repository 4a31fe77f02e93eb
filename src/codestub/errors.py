# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception taxonomy shared by the generator and its transport layers.

Every error carries a kind, the offending field where there is one, and a
human-readable message, which is enough for a transport layer to render a
4xx response.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from codestub.validation.checks import TypeCheckError

# ###############
# Public Interface
# ###############


class CodestubError(Exception):
    """Base class for all errors raised by codestub."""


class UnsupportedLanguageError(CodestubError):
    """Raised when the requested target language has no enabled backend.

    Attributes:
        language: The rejected language name.
    """

    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class UnsupportedTypeError(CodestubError):
    """Raised when a single DSL type cannot be mapped for a language.

    Attributes:
        dsl_type: The rejected type token.
        language: The target language.
    """

    def __init__(self, dsl_type: str, language: str) -> None:
        super().__init__(f"Unsupported type: {dsl_type} for language: {language}")
        self.dsl_type = dsl_type
        self.language = language


class TypeValidationError(CodestubError):
    """Raised when one or more signature types are unsupported for a language.

    The message joins every individual error with ``"; "``; the structured
    list is available as :attr:`errors`.

    Attributes:
        errors: One entry per offending parameter or return type.
    """

    def __init__(self, errors: Sequence[TypeCheckError]) -> None:
        super().__init__("; ".join(e.message for e in errors))
        self.errors = list(errors)


class MalformedSignatureError(CodestubError):
    """Raised when a request payload does not match the request schema.

    Attributes:
        details: One ``{"field", "message", "value"}`` mapping per violation.
    """

    def __init__(self, details: list[dict[str, Any]]) -> None:
        super().__init__("Validation failed")
        self.details = details

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point of the code generator.

:func:`generate` runs three steps in a fixed order:

1. Reject languages that have no enabled backend, before looking at any type.
2. Check every parameter and return type; if any is unsupported, fail with
   all of them at once.
3. Hand the signature to the language's backend and return its output verbatim.

Generation is all-or-nothing: either a complete source text is returned or an
error is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from codestub.codegen.registry import get_backend, is_registered
from codestub.config.loader import GeneratorConfig
from codestub.errors import MalformedSignatureError, TypeValidationError, UnsupportedLanguageError
from codestub.model.entities import FunctionSignature
from codestub.validation.checks import check_types

# ###############
# Public Interface
# ###############


def generate(
    signature: FunctionSignature | Mapping[str, Any],
    language: str,
    question_id: str | None = None,
    *,
    config: GeneratorConfig | None = None,
) -> str:
    """Generate the boilerplate source file for *signature* in *language*.

    Args:
        signature: The function signature, or a mapping with the same shape.
        language: Target language name.
        question_id: Caller-side identifier; only used for log correlation.
        config: Optional configuration (enabled languages, nesting depth).

    Returns:
        The complete generated source text.

    Raises:
        UnsupportedLanguageError: If *language* is unknown or disabled.
        TypeValidationError: If any parameter or return type is unsupported.
        MalformedSignatureError: If *signature* is a mapping that does not
            describe a valid signature.
    """
    config = config if config is not None else GeneratorConfig()
    if language not in config.languages or not is_registered(language):
        _logger.info("Rejected generation request %s: unsupported language %r", question_id, language)
        raise UnsupportedLanguageError(language)

    sig = coerce_signature(signature)
    errors = check_types(sig.parameters, sig.returns, language, config=config)
    if errors:
        _logger.info(
            "Rejected generation request %s: %d unsupported type(s) for %s",
            question_id,
            len(errors),
            language,
        )
        raise TypeValidationError(errors)

    _logger.debug(
        "Generating %s template for %s (question %s, %d parameter(s))",
        language,
        sig.function_name,
        question_id,
        len(sig.parameters),
    )
    return get_backend(language).render(sig)


def coerce_signature(signature: FunctionSignature | Mapping[str, Any]) -> FunctionSignature:
    """Return *signature* as a FunctionSignature, validating mappings.

    Raises:
        MalformedSignatureError: If a mapping does not describe a valid signature.
    """
    if isinstance(signature, FunctionSignature):
        return signature
    try:
        return FunctionSignature.model_validate(dict(signature))
    except ValidationError as exc:
        raise MalformedSignatureError(pydantic_details(exc)) from exc


def pydantic_details(exc: ValidationError, prefix: str = "") -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into ``{"field", "message", "value"}`` entries."""
    details: list[dict[str, Any]] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"])
        details.append(
            {
                "field": f"{prefix}{location}" if location else prefix.rstrip("."),
                "message": err["msg"],
                "value": err.get("input"),
            }
        )
    return details


# ################
# Implementation
# ################

_logger = logging.getLogger(__name__)

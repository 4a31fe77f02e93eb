# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type support checks for function signatures.

These checks run before any code is generated. They scan every parameter and
the return type and report all unsupported types at once rather than
stopping at the first one.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from codestub.codegen.mapping import DEFAULT_MAX_NESTING_DEPTH, resolve_type
from codestub.model.entities import Parameter, ReturnSpec, dsl_type_of

if TYPE_CHECKING:
    from codestub.config.loader import GeneratorConfig

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class TypeCheckError:
    """An unsupported type found in a signature.

    Attributes:
        field: Location of the offending type, e.g. ``"parameters[2].type"`` or ``"returns.type"``.
        dsl_type: The offending DSL type token.
        language: The target language the type was checked against.
        message: Human-readable description of the error.
    """

    field: str
    dsl_type: str
    language: str
    message: str


def is_supported(dsl_type: str, language: str, *, config: GeneratorConfig | None = None) -> bool:
    """Return True if *dsl_type* is supported for *language*.

    When *config* is given, its nesting-depth limit applies and languages it
    does not enable support no types at all.
    """
    if config is not None and language not in config.languages:
        return False
    return resolve_type(dsl_type, language, max_nesting_depth=_max_depth(config)) is not None


def check_types(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
    language: str,
    *,
    config: GeneratorConfig | None = None,
) -> list[TypeCheckError]:
    """Check every parameter type and the return type of a signature.

    Args:
        parameters: The signature parameters, in declaration order.
        returns: The return spec.
        language: Target language name.
        config: Optional generator configuration (nesting depth, enabled languages).

    Returns:
        One :class:`TypeCheckError` per unsupported type, parameters first.
        An empty list means every type is supported.
    """
    errors: list[TypeCheckError] = []

    for index, param in enumerate(parameters):
        dsl_type = dsl_type_of(param)
        if not is_supported(dsl_type, language, config=config):
            errors.append(
                TypeCheckError(
                    field=f"parameters[{index}].type",
                    dsl_type=dsl_type,
                    language=language,
                    message=f"Unsupported parameter type: {dsl_type} for language: {language}",
                )
            )

    return_type = dsl_type_of(returns)
    if not is_supported(return_type, language, config=config):
        errors.append(
            TypeCheckError(
                field="returns.type",
                dsl_type=return_type,
                language=language,
                message=f"Unsupported return type: {return_type} for language: {language}",
            )
        )

    return errors


def validate_types(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
    language: str,
    *,
    config: GeneratorConfig | None = None,
) -> list[str]:
    """Dry-run type validation returning only the error messages."""
    return [e.message for e in check_types(parameters, returns, language, config=config)]


# ################
# Implementation
# ################


def _max_depth(config: GeneratorConfig | None) -> int:
    return config.max_nesting_depth if config is not None else DEFAULT_MAX_NESTING_DEPTH

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Function signature entities consumed by the code generator."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

IDENTIFIER_PATTERN = r"^[a-zA-Z_][a-zA-Z0-9_]*$"
MAX_PARAMETERS = 20
MAX_FUNCTION_NAME_LENGTH = 100
MAX_PARAMETER_NAME_LENGTH = 50


class TargetLanguage(Enum):
    """Languages with a built-in generator backend."""

    JAVA = "java"
    PYTHON = "python"
    CPP = "cpp"
    JAVASCRIPT = "javascript"


class Parameter(BaseModel):
    """A named function parameter with its raw DSL type token."""

    model_config = ConfigDict(frozen=True)

    name: str = _Field(pattern=IDENTIFIER_PATTERN, min_length=1, max_length=MAX_PARAMETER_NAME_LENGTH)
    type: str


class ReturnSpec(BaseModel):
    """The return type of a function, as a raw DSL type token."""

    model_config = ConfigDict(frozen=True)

    type: str


class FunctionSignature(BaseModel):
    """A language-neutral function signature.

    Type tokens are kept as raw strings so that unsupported types can be
    reported by type validation instead of being rejected while the model is
    being built.
    """

    model_config = ConfigDict(frozen=True)

    function_name: str = _Field(pattern=IDENTIFIER_PATTERN, min_length=1, max_length=MAX_FUNCTION_NAME_LENGTH)
    parameters: tuple[Parameter, ...] = _Field(default=(), max_length=MAX_PARAMETERS)
    returns: ReturnSpec


def dsl_type_of(item: Parameter | ReturnSpec | Mapping[str, Any]) -> str:
    """Return the raw DSL type token of a parameter or return spec.

    Plain mappings (``{"name": ..., "type": ...}``) are accepted so that
    callers holding decoded JSON can use the dry-run helpers directly.
    """
    if isinstance(item, Mapping):
        return str(item["type"])
    return item.type


def signature_types(
    parameters: list[Parameter] | tuple[Parameter, ...] | list[Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
) -> list[str]:
    """Return the DSL type tokens of all parameters followed by the return type."""
    return [dsl_type_of(p) for p in parameters] + [dsl_type_of(returns)]

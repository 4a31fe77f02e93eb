# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of DSL type tokens into target-language type spellings.

Each backend derives its spellings recursively from the parsed type, so
nested combinations such as ``List<List<int>>`` are not table rows but two
applications of the language's list rule. The closed set of accepted types
is bounded by a maximum nesting depth.
"""

from __future__ import annotations

from codestub.codegen.mapped import MappedType
from codestub.codegen.registry import get_backend, is_registered
from codestub.errors import UnsupportedTypeError
from codestub.model.types import TypeRef, enumerate_types, format_type, nesting_depth
from codestub.parser import DslSyntaxError, parse_type

# ###############
# Public Interface
# ###############

DEFAULT_MAX_NESTING_DEPTH = 2


def try_parse(dsl_type: str) -> TypeRef | None:
    """Parse *dsl_type*, returning None instead of raising on malformed spellings."""
    try:
        return parse_type(dsl_type)
    except DslSyntaxError:
        return None


def resolve_type(
    dsl_type: str,
    language: str,
    *,
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
) -> TypeRef | None:
    """Return the parsed type if *dsl_type* is supported for *language*, else None.

    A type is supported when a backend is registered for the language, the
    token parses and is spelled exactly in its canonical form, its nesting
    depth is within *max_nesting_depth*, and the backend accepts it.
    """
    if not is_registered(language):
        return None
    ref = try_parse(dsl_type)
    if ref is None or format_type(ref) != dsl_type or nesting_depth(ref) > max_nesting_depth:
        return None
    if not get_backend(language).supports(ref):
        return None
    return ref


def describe_type(
    dsl_type: str,
    language: str,
    *,
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
) -> MappedType:
    """Map *dsl_type* to a descriptor carrying syntax and shape tags.

    Raises:
        UnsupportedLanguageError: If no backend is registered for *language*.
        UnsupportedTypeError: If the type is not supported for *language*.
    """
    backend = get_backend(language)
    ref = resolve_type(dsl_type, language, max_nesting_depth=max_nesting_depth)
    if ref is None:
        raise UnsupportedTypeError(dsl_type, language)
    return backend.map_type(ref)


def map_type(
    dsl_type: str,
    language: str,
    *,
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
) -> str:
    """Return the target-language spelling of *dsl_type*.

    Unsupported tokens and unknown languages fall back to the token itself.
    This is a degradation, not a success: callers are expected to have run
    type validation first.
    """
    ref = resolve_type(dsl_type, language, max_nesting_depth=max_nesting_depth)
    if ref is None:
        return dsl_type
    return get_backend(language).map_type(ref).syntax


def get_type_mapping(
    language: str,
    *,
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
) -> dict[str, str]:
    """Return the full DSL-token-to-syntax table for *language*.

    The table covers every supported type up to *max_nesting_depth*, keyed by
    canonical token. Unknown languages yield an empty mapping.
    """
    if not is_registered(language):
        return {}
    backend = get_backend(language)
    return {
        format_type(ref): backend.map_type(ref).syntax
        for ref in enumerate_types(max_nesting_depth)
        if backend.supports(ref)
    }

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Default return statements for generated stub bodies.

The statement is chosen from the shape tags of the mapped return type with a
fixed, language-independent precedence (first match wins):

1. nullable (tree pointers, optionals) -> null
2. collection -> empty collection
3. numeric -> zero
4. boolean -> false
5. string -> empty string
6. anything else -> the language's no-op fallback

Backends only supply the literal spellings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestub.codegen.mapped import MappedType, Shape
from codestub.codegen.registry import get_backend

if TYPE_CHECKING:
    from codestub.codegen.backends.base import Backend

# ###############
# Public Interface
# ###############


def synthesize_default(mapped: MappedType, backend: Backend) -> str:
    """Return the default return statement for *mapped* using *backend*'s literals."""
    if mapped.has(Shape.NULLABLE):
        return backend.return_statement(backend.null_literal)
    if mapped.has(Shape.COLLECTION):
        return backend.return_statement(backend.empty_collection(mapped))
    if mapped.has(Shape.NUMERIC):
        return backend.return_statement(backend.zero_literal)
    if mapped.has(Shape.BOOLEAN):
        return backend.return_statement(backend.false_literal)
    if mapped.has(Shape.STRING):
        return backend.return_statement(backend.empty_string_literal)
    return backend.fallback_statement


def get_default_return(mapped: MappedType, language: str) -> str:
    """Return the default return statement for *mapped* in *language*.

    Raises:
        UnsupportedLanguageError: If no backend is registered for *language*.
    """
    return synthesize_default(mapped, get_backend(language))

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Injection of the binary tree node helper type into generated files."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from codestub.codegen.mapping import try_parse
from codestub.codegen.registry import get_backend
from codestub.model.entities import Parameter, ReturnSpec, signature_types
from codestub.model.types import PrimitiveType, TreeTypeRef, TypeCategory, TypeRef, contains_category, walk

# ###############
# Public Interface
# ###############


def needs_auxiliary_type(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
) -> bool:
    """Return True iff any parameter or the return type involves a ``Tree<T>``.

    Trees nested inside lists count as well, since the generated file refers
    to the node type either way.
    """
    return refs_need_tree(_parsed(parameters, returns))


def refs_need_tree(refs: Iterable[TypeRef]) -> bool:
    """Return True if any of *refs* contains a tree."""
    return any(contains_category(ref, TypeCategory.TREE) for ref in refs)


def first_tree_value(refs: Iterable[TypeRef]) -> PrimitiveType:
    """Return the value type of the first tree found in *refs*, or ``int`` if there is none."""
    for ref in refs:
        for inner in walk(ref):
            if isinstance(inner, TreeTypeRef):
                return inner.value_type
    return PrimitiveType.INT


def tree_value_type(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
) -> PrimitiveType:
    """Return the node value type used for the helper definition of a signature."""
    return first_tree_value(_parsed(parameters, returns))


def auxiliary_definition(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
    language: str,
) -> str:
    """Return the tree node definition for *language*, or ``""`` when the signature has no tree.

    Raises:
        UnsupportedLanguageError: If no backend is registered for *language*.
    """
    backend = get_backend(language)
    refs = _parsed(parameters, returns)
    if not refs_need_tree(refs):
        return ""
    return backend.tree_node_definition(first_tree_value(refs))


# ################
# Implementation
# ################


def _parsed(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
) -> list[TypeRef]:
    return [ref for ref in (try_parse(t) for t in signature_types(parameters, returns)) if ref is not None]

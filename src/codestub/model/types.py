# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type system representations for the codestub signature DSL.

The DSL is a small recursive grammar::

    Type      := Primitive | Type "[]" | "List<" Type ">" | "Tree<" Primitive ">" | "Graph"
    Primitive := int | long | float | double | bool | string

Array elements are restricted to primitives and arrays. Every type has a
canonical token spelling (see :func:`format_type`) and a nesting depth, which
together with a depth limit makes the set of accepted types closed and
enumerable.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Primitive types supported by the DSL."""

    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "string"


class TypeCategory(Enum):
    """Top-level category of a DSL type."""

    PRIMITIVE = "primitive"
    ARRAY = "array"
    LIST = "list"
    TREE = "tree"
    GRAPH = "graph"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType


class ArrayTypeRef(BaseModel):
    """Reference to a fixed-shape array ``T[]``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element_type: TypeRef

    @field_validator("element_type")
    @classmethod
    def check_element_type(cls, value: TypeRef) -> TypeRef:
        if not isinstance(value, (PrimitiveTypeRef, ArrayTypeRef)):
            raise ValueError("array element type must be a primitive or an array")
        return value


class ListTypeRef(BaseModel):
    """Reference to a parameterized ``List<T>`` type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    element_type: TypeRef


class TreeTypeRef(BaseModel):
    """Reference to a binary tree ``Tree<T>`` holding primitive values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tree"] = "tree"
    value_type: PrimitiveType


class GraphTypeRef(BaseModel):
    """Reference to the ``Graph`` type (an adjacency list of integer node ids)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["graph"] = "graph"


# A DSL type reference. The `kind` discriminator keeps deserialization unambiguous.
TypeRef = Annotated[
    PrimitiveTypeRef | ArrayTypeRef | ListTypeRef | TreeTypeRef | GraphTypeRef,
    _Field(discriminator="kind"),
]


def format_type(ref: TypeRef) -> str:
    """Return the canonical DSL token for *ref* (e.g. ``"List<int[]>"``)."""
    if isinstance(ref, PrimitiveTypeRef):
        return ref.primitive.value
    if isinstance(ref, ArrayTypeRef):
        return f"{format_type(ref.element_type)}[]"
    if isinstance(ref, ListTypeRef):
        return f"List<{format_type(ref.element_type)}>"
    if isinstance(ref, TreeTypeRef):
        return f"Tree<{ref.value_type.value}>"
    return "Graph"


def category_of(ref: TypeRef) -> TypeCategory:
    """Return the top-level category of *ref*."""
    return TypeCategory(ref.kind)


def nesting_depth(ref: TypeRef) -> int:
    """Return how many container constructors wrap the innermost atom of *ref*.

    Primitives and ``Graph`` have depth 0; each ``[]``, ``List<>`` and
    ``Tree<>`` adds one level.
    """
    if isinstance(ref, (ArrayTypeRef, ListTypeRef)):
        return 1 + nesting_depth(ref.element_type)
    if isinstance(ref, TreeTypeRef):
        return 1
    return 0


def walk(ref: TypeRef) -> Iterator[TypeRef]:
    """Yield *ref* followed by every type nested inside it, outermost first."""
    yield ref
    if isinstance(ref, (ArrayTypeRef, ListTypeRef)):
        yield from walk(ref.element_type)


def contains_category(ref: TypeRef, category: TypeCategory) -> bool:
    """Return True if *ref* or any type nested inside it belongs to *category*."""
    return any(category_of(inner) is category for inner in walk(ref))


def enumerate_types(max_depth: int) -> list[TypeRef]:
    """Return every well-formed DSL type whose nesting depth is at most *max_depth*.

    The order is deterministic: shallower types first, and within one depth
    arrays, then lists, then trees, each following the primitive declaration
    order.
    """
    atoms: list[TypeRef] = [PrimitiveTypeRef(primitive=p) for p in PrimitiveType]
    atoms.append(GraphTypeRef())
    layers: list[list[TypeRef]] = [atoms]
    for depth in range(1, max_depth + 1):
        previous = layers[-1]
        layer: list[TypeRef] = [
            ArrayTypeRef(element_type=t) for t in previous if isinstance(t, (PrimitiveTypeRef, ArrayTypeRef))
        ]
        layer.extend(ListTypeRef(element_type=t) for t in previous)
        if depth == 1:
            layer.extend(TreeTypeRef(value_type=p) for p in PrimitiveType)
        layers.append(layer)
    return [t for layer in layers for t in layer]


# Resolve forward references for models that use TypeRef.
ArrayTypeRef.model_rebuild()
ListTypeRef.model_rebuild()

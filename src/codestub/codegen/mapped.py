# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapped type descriptors: target-language syntax plus explicit shape tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from codestub.model.types import TypeCategory

# ###############
# Public Interface
# ###############


class Shape(Enum):
    """Classification tags attached to a mapped type when it is built."""

    NULLABLE = "nullable"
    COLLECTION = "collection"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True)
class MappedType:
    """A DSL type rendered for one target language.

    Attributes:
        syntax: The type spelling in the target language, e.g. ``"vector<int>"``.
        category: Category of the DSL type the syntax was derived from.
        shapes: Shape tags. Collections also carry ``NULLABLE`` when their
            element is nullable, so a vector of tree pointers is both.
    """

    syntax: str
    category: TypeCategory
    shapes: frozenset[Shape] = field(default_factory=frozenset)

    def has(self, shape: Shape) -> bool:
        """Return True if this type carries *shape*."""
        return shape in self.shapes

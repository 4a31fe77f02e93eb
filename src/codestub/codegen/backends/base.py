# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared capability of every target-language backend.

A backend owns four things for its language: the type spelling rules, the
literal spellings used by default synthesis, the import rules, and the
template that assembles all parts into a source file. :meth:`Backend.render`
drives them in a fixed order; subclasses only fill in the language details.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from codestub.codegen.auxiliary import first_tree_value, refs_need_tree
from codestub.codegen.defaults import synthesize_default
from codestub.codegen.imports import collect_imports
from codestub.codegen.mapped import MappedType, Shape
from codestub.errors import UnsupportedTypeError
from codestub.model.entities import FunctionSignature
from codestub.model.types import (
    ArrayTypeRef,
    GraphTypeRef,
    ListTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TreeTypeRef,
    TypeCategory,
    TypeRef,
)
from codestub.parser import DslSyntaxError, parse_type

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class RenderedParameter:
    """A signature parameter together with its parsed and mapped type."""

    name: str
    ref: TypeRef
    mapped: MappedType


@dataclass(frozen=True)
class RenderContext:
    """Everything a backend template needs to assemble one source file."""

    function_name: str
    parameters: tuple[RenderedParameter, ...]
    return_ref: TypeRef
    return_type: MappedType
    imports: tuple[str, ...]
    auxiliary: str
    default_return: str


class Backend(ABC):
    """Code generator for one target language."""

    language: ClassVar[str]
    file_extension: ClassVar[str]

    baseline_imports: ClassVar[tuple[str, ...]] = ()

    null_literal: ClassVar[str] = "null"
    zero_literal: ClassVar[str] = "0"
    false_literal: ClassVar[str] = "false"
    empty_string_literal: ClassVar[str] = '""'
    fallback_statement: ClassVar[str] = "return null;"

    # ------------------------------------------------------------------
    # Type mapping
    # ------------------------------------------------------------------

    def map_type(self, ref: TypeRef) -> MappedType:
        """Map a parsed DSL type to this language's spelling and shape tags."""
        if isinstance(ref, PrimitiveTypeRef):
            return MappedType(
                syntax=self.primitive_syntax(ref.primitive),
                category=TypeCategory.PRIMITIVE,
                shapes=frozenset({_PRIMITIVE_SHAPES[ref.primitive]}),
            )
        if isinstance(ref, (ArrayTypeRef, ListTypeRef)):
            element = self.map_type(ref.element_type)
            if isinstance(ref, ArrayTypeRef):
                syntax = self.array_syntax(ref.element_type, element)
                category = TypeCategory.ARRAY
            else:
                syntax = self.list_syntax(ref.element_type, element)
                category = TypeCategory.LIST
            shapes = {Shape.COLLECTION}
            if element.has(Shape.NULLABLE):
                shapes.add(Shape.NULLABLE)
            return MappedType(syntax=syntax, category=category, shapes=frozenset(shapes))
        if isinstance(ref, TreeTypeRef):
            return MappedType(
                syntax=self.tree_syntax(ref.value_type),
                category=TypeCategory.TREE,
                shapes=frozenset({Shape.NULLABLE}),
            )
        if isinstance(ref, GraphTypeRef):
            return MappedType(
                syntax=self.graph_syntax(),
                category=TypeCategory.GRAPH,
                shapes=frozenset({Shape.COLLECTION}),
            )
        raise TypeError(f"Unknown type reference: {ref!r}")

    def supports(self, ref: TypeRef) -> bool:
        """Return True if this backend can render *ref*. All grammar types by default."""
        return True

    @abstractmethod
    def primitive_syntax(self, primitive: PrimitiveType) -> str: ...

    @abstractmethod
    def array_syntax(self, element_ref: TypeRef, element: MappedType) -> str: ...

    @abstractmethod
    def list_syntax(self, element_ref: TypeRef, element: MappedType) -> str: ...

    @abstractmethod
    def tree_syntax(self, value_type: PrimitiveType) -> str: ...

    @abstractmethod
    def graph_syntax(self) -> str: ...

    # ------------------------------------------------------------------
    # Default values
    # ------------------------------------------------------------------

    def return_statement(self, expression: str) -> str:
        """Wrap *expression* in this language's return statement."""
        return f"return {expression};"

    @abstractmethod
    def empty_collection(self, mapped: MappedType) -> str:
        """Return an expression producing an empty value of the collection type *mapped*."""

    def primitive_default(self, primitive: PrimitiveType) -> str:
        """Return the zero-value literal for *primitive* (used for tree node values)."""
        shape = _PRIMITIVE_SHAPES[primitive]
        if shape is Shape.BOOLEAN:
            return self.false_literal
        if shape is Shape.STRING:
            return self.empty_string_literal
        return self.zero_literal

    # ------------------------------------------------------------------
    # Imports and auxiliary types
    # ------------------------------------------------------------------

    def conditional_imports(self, refs: list[TypeRef]) -> list[str]:
        """Return the imports triggered by the signature types *refs*."""
        return []

    @abstractmethod
    def tree_node_definition(self, value_type: PrimitiveType) -> str:
        """Return the binary tree node definition holding values of *value_type*."""

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def render(self, signature: FunctionSignature) -> str:
        """Render the complete source file for *signature*.

        Raises:
            UnsupportedTypeError: If a type token in *signature* does not parse.
        """
        return self.assemble(self.build_context(signature))

    def build_context(self, signature: FunctionSignature) -> RenderContext:
        """Parse and map every type of *signature* and gather the file parts."""
        parameters = tuple(
            RenderedParameter(name=p.name, ref=ref, mapped=self.map_type(ref))
            for p, ref in ((p, self._parse(p.type)) for p in signature.parameters)
        )
        return_ref = self._parse(signature.returns.type)
        return_type = self.map_type(return_ref)
        refs = [p.ref for p in parameters] + [return_ref]
        auxiliary = self.tree_node_definition(first_tree_value(refs)) if refs_need_tree(refs) else ""
        return RenderContext(
            function_name=signature.function_name,
            parameters=parameters,
            return_ref=return_ref,
            return_type=return_type,
            imports=tuple(collect_imports(self, refs)),
            auxiliary=auxiliary,
            default_return=synthesize_default(return_type, self),
        )

    @abstractmethod
    def assemble(self, context: RenderContext) -> str:
        """Assemble the source file text from *context*."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse(self, dsl_type: str) -> TypeRef:
        try:
            return parse_type(dsl_type)
        except DslSyntaxError as exc:
            raise UnsupportedTypeError(dsl_type, self.language) from exc


def join_blocks(*blocks: str) -> str:
    """Join non-empty text blocks with one blank line between them."""
    return "\n\n".join(block.strip("\n") for block in blocks if block.strip())


# ################
# Implementation
# ################

_PRIMITIVE_SHAPES: dict[PrimitiveType, Shape] = {
    PrimitiveType.INT: Shape.NUMERIC,
    PrimitiveType.LONG: Shape.NUMERIC,
    PrimitiveType.FLOAT: Shape.NUMERIC,
    PrimitiveType.DOUBLE: Shape.NUMERIC,
    PrimitiveType.BOOL: Shape.BOOLEAN,
    PrimitiveType.STRING: Shape.STRING,
}

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Python backend: a ``Solution`` class with a type-hinted method and a stdin/stdout harness."""

from __future__ import annotations

from typing import ClassVar

from codestub.codegen.backends.base import Backend, RenderContext, join_blocks
from codestub.codegen.mapped import MappedType
from codestub.codegen.registry import register_backend
from codestub.model.types import (
    ArrayTypeRef,
    GraphTypeRef,
    ListTypeRef,
    PrimitiveType,
    TreeTypeRef,
    TypeCategory,
    TypeRef,
    contains_category,
    walk,
)

# ###############
# Public Interface
# ###############


@register_backend
class PythonBackend(Backend):
    """Generates Python 3 stubs annotated with :mod:`typing` generics."""

    language: ClassVar[str] = "python"
    file_extension: ClassVar[str] = ".py"

    baseline_imports: ClassVar[tuple[str, ...]] = ("import json", "import sys")

    null_literal: ClassVar[str] = "None"
    false_literal: ClassVar[str] = "False"
    fallback_statement: ClassVar[str] = "pass"

    def primitive_syntax(self, primitive: PrimitiveType) -> str:
        return _PRIMITIVES[primitive]

    def array_syntax(self, element_ref: TypeRef, element: MappedType) -> str:
        return f"List[{element.syntax}]"

    def list_syntax(self, element_ref: TypeRef, element: MappedType) -> str:
        return f"List[{element.syntax}]"

    def tree_syntax(self, value_type: PrimitiveType) -> str:
        return "Optional[TreeNode]"

    def graph_syntax(self) -> str:
        return "List[List[int]]"

    def return_statement(self, expression: str) -> str:
        return f"return {expression}"

    def empty_collection(self, mapped: MappedType) -> str:
        return "[]"

    def conditional_imports(self, refs: list[TypeRef]) -> list[str]:
        names: list[str] = []
        if any(isinstance(inner, (ArrayTypeRef, ListTypeRef, GraphTypeRef)) for ref in refs for inner in walk(ref)):
            names.append("List")
        if any(contains_category(ref, TypeCategory.TREE) for ref in refs):
            names.append("Optional")
        if not names:
            return []
        return [f"from typing import {', '.join(names)}"]

    def tree_node_definition(self, value_type: PrimitiveType) -> str:
        default = self.primitive_default(value_type)
        return (
            "# Definition for a binary tree node\n"
            "class TreeNode:\n"
            f"    def __init__(self, val={default}, left=None, right=None):\n"
            "        self.val = val\n"
            "        self.left = left\n"
            "        self.right = right\n"
        )

    def assemble(self, context: RenderContext) -> str:
        params = "".join(f", {p.name}: {p.mapped.syntax}" for p in context.parameters)
        solution = (
            "class Solution:\n"
            f"    def {context.function_name}(self{params}) -> {context.return_type.syntax}:\n"
            "        # Write your logic here\n"
            f"        {context.default_return}\n"
        )
        return join_blocks(
            "\n".join(context.imports),
            context.auxiliary,
            solution,
            self._harness(context),
        ) + "\n"

    # ------------------------------------------------------------------
    # Harness
    # ------------------------------------------------------------------

    def _harness(self, context: RenderContext) -> str:
        decodes_tree = any(contains_category(p.ref, TypeCategory.TREE) for p in context.parameters)
        arguments = ", ".join(_decode_argument(p.ref, f'data["{p.name}"]') for p in context.parameters)
        encoder = "vars" if context.auxiliary else "str"
        lines: list[str] = []
        if decodes_tree:
            lines.extend(_TREE_DECODER)
            lines.append("")
            lines.append("")
        lines.extend(
            [
                'if __name__ == "__main__":',
                "    # Do not edit below this line",
                "    try:",
                "        data = json.loads(sys.stdin.read())",
                "        solution = Solution()",
                f"        result = solution.{context.function_name}({arguments})",
                f"        print(json.dumps(result, default={encoder}))",
                "    except Exception as e:",
                '        print(f"Error: {e}", file=sys.stderr)',
                "        sys.exit(1)",
            ]
        )
        return "\n".join(lines)


# ################
# Implementation
# ################

_PRIMITIVES: dict[PrimitiveType, str] = {
    PrimitiveType.INT: "int",
    PrimitiveType.LONG: "int",
    PrimitiveType.FLOAT: "float",
    PrimitiveType.DOUBLE: "float",
    PrimitiveType.BOOL: "bool",
    PrimitiveType.STRING: "str",
}

_TREE_DECODER: list[str] = [
    "def _build_tree(node):",
    "    if node is None:",
    "        return None",
    '    return TreeNode(node["val"], _build_tree(node.get("left")), _build_tree(node.get("right")))',
]


def _decode_argument(ref: TypeRef, expression: str, depth: int = 0) -> str:
    """Wrap *expression* so that every tree inside *ref* is rebuilt from its JSON form."""
    if isinstance(ref, TreeTypeRef):
        return f"_build_tree({expression})"
    if isinstance(ref, (ArrayTypeRef, ListTypeRef)) and contains_category(ref.element_type, TypeCategory.TREE):
        item = f"item{depth}"
        return f"[{_decode_argument(ref.element_type, item, depth + 1)} for {item} in {expression}]"
    return expression

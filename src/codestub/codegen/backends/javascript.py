# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""JavaScript backend: a JSDoc-annotated function expression with a Node.js harness."""

from __future__ import annotations

from typing import ClassVar

from codestub.codegen.backends.base import Backend, RenderContext, join_blocks
from codestub.codegen.mapped import MappedType
from codestub.codegen.registry import register_backend
from codestub.model.types import PrimitiveType, TreeTypeRef, TypeRef

# ###############
# Public Interface
# ###############


@register_backend
class JavaScriptBackend(Backend):
    """Generates JavaScript stubs; types only appear in the JSDoc block."""

    language: ClassVar[str] = "javascript"
    file_extension: ClassVar[str] = ".js"

    baseline_imports: ClassVar[tuple[str, ...]] = ("'use strict';",)

    def primitive_syntax(self, primitive: PrimitiveType) -> str:
        return _PRIMITIVES[primitive]

    def array_syntax(self, element_ref: TypeRef, element: MappedType) -> str:
        return f"{element.syntax}[]"

    def list_syntax(self, element_ref: TypeRef, element: MappedType) -> str:
        return f"{element.syntax}[]"

    def tree_syntax(self, value_type: PrimitiveType) -> str:
        return "TreeNode"

    def graph_syntax(self) -> str:
        return "number[][]"

    def empty_collection(self, mapped: MappedType) -> str:
        return "[]"

    def tree_node_definition(self, value_type: PrimitiveType) -> str:
        default = self.primitive_default(value_type)
        return (
            "// Definition for a binary tree node\n"
            "function TreeNode(val, left, right) {\n"
            f"    this.val = (val === undefined ? {default} : val);\n"
            "    this.left = (left === undefined ? null : left);\n"
            "    this.right = (right === undefined ? null : right);\n"
            "}\n"
        )

    def assemble(self, context: RenderContext) -> str:
        doc = ["/**"]
        doc.extend(f" * @param {{{p.mapped.syntax}}} {p.name}" for p in context.parameters)
        doc.append(f" * @return {{{context.return_type.syntax}}}")
        doc.append(" */")
        names = ", ".join(p.name for p in context.parameters)
        function = (
            "\n".join(doc) + "\n"
            f"var {context.function_name} = function({names}) {{\n"
            "    // Write your logic here\n"
            f"    {context.default_return}\n"
            "};\n"
        )
        return join_blocks(
            "\n".join(context.imports),
            context.auxiliary,
            function,
            self._harness(context),
        ) + "\n"

    # ------------------------------------------------------------------
    # Harness
    # ------------------------------------------------------------------

    def _harness(self, context: RenderContext) -> str:
        decodes_tree = any(isinstance(p.ref, TreeTypeRef) for p in context.parameters)
        arguments = ", ".join(
            f"buildTree(data.{p.name})" if isinstance(p.ref, TreeTypeRef) else f"data.{p.name}"
            for p in context.parameters
        )
        lines = [
            "// Do not edit below this line",
            "if (typeof module !== 'undefined' && module.exports) {",
            "    const fs = require('fs');",
            "",
        ]
        if decodes_tree:
            lines.extend(_TREE_DECODER)
            lines.append("")
        lines.extend(
            [
                "    try {",
                "        const input = fs.readFileSync(0, 'utf8');",
                "        const data = JSON.parse(input);",
                f"        const result = {context.function_name}({arguments});",
                "        console.log(JSON.stringify(result));",
                "    } catch (error) {",
                "        console.error('Error:', error.message);",
                "        process.exit(1);",
                "    }",
                "}",
            ]
        )
        return "\n".join(lines)


# ################
# Implementation
# ################

_PRIMITIVES: dict[PrimitiveType, str] = {
    PrimitiveType.INT: "number",
    PrimitiveType.LONG: "number",
    PrimitiveType.FLOAT: "number",
    PrimitiveType.DOUBLE: "number",
    PrimitiveType.BOOL: "boolean",
    PrimitiveType.STRING: "string",
}

_TREE_DECODER: list[str] = [
    "    const buildTree = (node) => {",
    "        if (node === null || node === undefined) {",
    "            return null;",
    "        }",
    "        return new TreeNode(node.val, buildTree(node.left), buildTree(node.right));",
    "    };",
]

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Java backend: a ``Solution`` class plus a ``Main`` harness that decodes input with Gson."""

from __future__ import annotations

from typing import ClassVar

from codestub.codegen.backends.base import Backend, RenderContext, RenderedParameter, join_blocks
from codestub.codegen.mapped import MappedType
from codestub.codegen.registry import register_backend
from codestub.model.types import (
    PrimitiveType,
    PrimitiveTypeRef,
    TypeCategory,
    TypeRef,
    contains_category,
)

# ###############
# Public Interface
# ###############


@register_backend
class JavaBackend(Backend):
    """Generates Java stubs; generic parameters are decoded through Gson ``TypeToken``s."""

    language: ClassVar[str] = "java"
    file_extension: ClassVar[str] = ".java"

    baseline_imports: ClassVar[tuple[str, ...]] = ("import java.util.*;", "import com.google.gson.*;")

    def primitive_syntax(self, primitive: PrimitiveType) -> str:
        return _PRIMITIVES[primitive]

    def array_syntax(self, element_ref: TypeRef, element: MappedType) -> str:
        return f"{element.syntax}[]"

    def list_syntax(self, element_ref: TypeRef, element: MappedType) -> str:
        if isinstance(element_ref, PrimitiveTypeRef):
            return f"List<{_BOXED[element_ref.primitive]}>"
        return f"List<{element.syntax}>"

    def tree_syntax(self, value_type: PrimitiveType) -> str:
        return "TreeNode"

    def graph_syntax(self) -> str:
        return "int[][]"

    def empty_collection(self, mapped: MappedType) -> str:
        if mapped.category is TypeCategory.LIST:
            return "new ArrayList<>()"
        # "int[][]" -> "new int[0][]"
        return "new " + mapped.syntax.replace("[]", "[0]", 1)

    def conditional_imports(self, refs: list[TypeRef]) -> list[str]:
        if any(contains_category(ref, TypeCategory.LIST) for ref in refs):
            return ["import com.google.gson.reflect.TypeToken;"]
        return []

    def tree_node_definition(self, value_type: PrimitiveType) -> str:
        val = _PRIMITIVES[value_type]
        return (
            "// Definition for a binary tree node\n"
            "class TreeNode {\n"
            f"    {val} val;\n"
            "    TreeNode left;\n"
            "    TreeNode right;\n"
            "    TreeNode() {}\n"
            f"    TreeNode({val} val) {{ this.val = val; }}\n"
            f"    TreeNode({val} val, TreeNode left, TreeNode right) {{\n"
            "        this.val = val;\n"
            "        this.left = left;\n"
            "        this.right = right;\n"
            "    }\n"
            "}\n"
        )

    def assemble(self, context: RenderContext) -> str:
        params = ", ".join(f"{p.mapped.syntax} {p.name}" for p in context.parameters)
        solution = (
            "class Solution {\n"
            f"    public {context.return_type.syntax} {context.function_name}({params}) {{\n"
            "        // Write your logic here\n"
            f"        {context.default_return}\n"
            "    }\n"
            "}\n"
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
        arguments = ", ".join(_decode_expression(p) for p in context.parameters)
        return (
            "public class Main {\n"
            "    public static void main(String[] args) {\n"
            "        // Do not edit below this line\n"
            "        Scanner scanner = new Scanner(System.in);\n"
            "        StringBuilder input = new StringBuilder();\n"
            "        while (scanner.hasNextLine()) {\n"
            "            input.append(scanner.nextLine());\n"
            "        }\n"
            "\n"
            "        try {\n"
            "            Gson gson = new Gson();\n"
            "            JsonObject data = gson.fromJson(input.toString(), JsonObject.class);\n"
            "\n"
            "            Solution solution = new Solution();\n"
            f"            {context.return_type.syntax} result = solution.{context.function_name}({arguments});\n"
            "            System.out.println(gson.toJson(result));\n"
            "        } catch (Exception e) {\n"
            '            System.err.println("Error: " + e.getMessage());\n'
            "            System.exit(1);\n"
            "        }\n"
            "    }\n"
            "}\n"
        )


# ################
# Implementation
# ################

_PRIMITIVES: dict[PrimitiveType, str] = {
    PrimitiveType.INT: "int",
    PrimitiveType.LONG: "long",
    PrimitiveType.FLOAT: "float",
    PrimitiveType.DOUBLE: "double",
    PrimitiveType.BOOL: "boolean",
    PrimitiveType.STRING: "String",
}

_BOXED: dict[PrimitiveType, str] = {
    PrimitiveType.INT: "Integer",
    PrimitiveType.LONG: "Long",
    PrimitiveType.FLOAT: "Float",
    PrimitiveType.DOUBLE: "Double",
    PrimitiveType.BOOL: "Boolean",
    PrimitiveType.STRING: "String",
}


def _decode_expression(param: RenderedParameter) -> str:
    """Return the Gson expression that decodes *param* from the ``data`` object."""
    element = f'data.get("{param.name}")'
    if contains_category(param.ref, TypeCategory.LIST):
        return f"gson.fromJson({element}, new TypeToken<{param.mapped.syntax}>(){{}}.getType())"
    return f"gson.fromJson({element}, {param.mapped.syntax}.class)"

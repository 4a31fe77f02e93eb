# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the DSL type system model."""

import pytest
from pydantic import ValidationError

from codestub.model.types import (
    ArrayTypeRef,
    GraphTypeRef,
    ListTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TreeTypeRef,
    TypeCategory,
    category_of,
    contains_category,
    enumerate_types,
    format_type,
    nesting_depth,
    walk,
)

# ###############
# Test Helpers
# ###############

_INT = PrimitiveTypeRef(primitive=PrimitiveType.INT)
_INT_ARRAY = ArrayTypeRef(element_type=_INT)
_INT_LIST = ListTypeRef(element_type=_INT)
_INT_TREE = TreeTypeRef(value_type=PrimitiveType.INT)


# ###############
# Construction
# ###############


class TestConstruction:
    def test_refs_are_frozen(self) -> None:
        with pytest.raises(ValidationError):
            _INT.primitive = PrimitiveType.LONG  # type: ignore[misc]

    def test_refs_compare_by_value(self) -> None:
        assert ListTypeRef(element_type=_INT) == _INT_LIST

    def test_array_rejects_list_element(self) -> None:
        with pytest.raises(ValidationError):
            ArrayTypeRef(element_type=_INT_LIST)

    def test_array_rejects_tree_element(self) -> None:
        with pytest.raises(ValidationError):
            ArrayTypeRef(element_type=_INT_TREE)

    def test_nested_ref_from_dict_uses_kind_discriminator(self) -> None:
        ref = ListTypeRef.model_validate(
            {"element_type": {"kind": "array", "element_type": {"kind": "primitive", "primitive": "string"}}}
        )
        assert ref.element_type == ArrayTypeRef(element_type=PrimitiveTypeRef(primitive=PrimitiveType.STRING))


# ###############
# Formatting
# ###############


class TestFormatType:
    @pytest.mark.parametrize(
        ("ref", "expected"),
        [
            (_INT, "int"),
            (_INT_ARRAY, "int[]"),
            (ArrayTypeRef(element_type=_INT_ARRAY), "int[][]"),
            (_INT_LIST, "List<int>"),
            (ListTypeRef(element_type=_INT_ARRAY), "List<int[]>"),
            (ListTypeRef(element_type=_INT_LIST), "List<List<int>>"),
            (TreeTypeRef(value_type=PrimitiveType.STRING), "Tree<string>"),
            (GraphTypeRef(), "Graph"),
        ],
    )
    def test_canonical_spelling(self, ref, expected: str) -> None:
        assert format_type(ref) == expected


# ###############
# Structure Queries
# ###############


class TestStructure:
    @pytest.mark.parametrize(
        ("ref", "category"),
        [
            (_INT, TypeCategory.PRIMITIVE),
            (_INT_ARRAY, TypeCategory.ARRAY),
            (_INT_LIST, TypeCategory.LIST),
            (_INT_TREE, TypeCategory.TREE),
            (GraphTypeRef(), TypeCategory.GRAPH),
        ],
    )
    def test_category_of(self, ref, category: TypeCategory) -> None:
        assert category_of(ref) is category

    @pytest.mark.parametrize(
        ("ref", "depth"),
        [
            (_INT, 0),
            (GraphTypeRef(), 0),
            (_INT_ARRAY, 1),
            (_INT_LIST, 1),
            (_INT_TREE, 1),
            (ListTypeRef(element_type=_INT_LIST), 2),
            (ListTypeRef(element_type=_INT_TREE), 2),
            (ListTypeRef(element_type=ListTypeRef(element_type=_INT_LIST)), 3),
        ],
    )
    def test_nesting_depth(self, ref, depth: int) -> None:
        assert nesting_depth(ref) == depth

    def test_walk_yields_outermost_first(self) -> None:
        ref = ListTypeRef(element_type=_INT_ARRAY)
        assert list(walk(ref)) == [ref, _INT_ARRAY, _INT]

    def test_contains_category_finds_nested_tree(self) -> None:
        ref = ListTypeRef(element_type=_INT_TREE)
        assert contains_category(ref, TypeCategory.TREE)
        assert not contains_category(_INT_LIST, TypeCategory.TREE)


# ###############
# Enumeration
# ###############


class TestEnumerateTypes:
    def test_depth_zero_holds_atoms(self) -> None:
        tokens = [format_type(ref) for ref in enumerate_types(0)]
        assert tokens == ["int", "long", "float", "double", "bool", "string", "Graph"]

    def test_default_depth_contains_source_table(self) -> None:
        tokens = {format_type(ref) for ref in enumerate_types(2)}
        expected = {
            "int", "long", "float", "double", "bool", "string",
            "int[]", "long[]", "float[]", "double[]", "bool[]", "string[]",
            "List<int>", "List<long>", "List<float>", "List<double>", "List<bool>", "List<string>",
            "List<int[]>", "List<List<int>>",
            "Tree<int>", "Tree<string>",
            "Graph",
        }  # fmt: skip
        assert expected <= tokens

    def test_counts_per_depth(self) -> None:
        assert len(enumerate_types(0)) == 7
        assert len(enumerate_types(1)) == 26
        assert len(enumerate_types(2)) == 51

    def test_depth_limit_is_respected(self) -> None:
        assert all(nesting_depth(ref) <= 2 for ref in enumerate_types(2))
        assert "List<List<List<int>>>" not in {format_type(ref) for ref in enumerate_types(2)}
        assert "List<List<List<int>>>" in {format_type(ref) for ref in enumerate_types(3)}

    def test_tokens_are_unique(self) -> None:
        tokens = [format_type(ref) for ref in enumerate_types(3)]
        assert len(tokens) == len(set(tokens))

    def test_order_is_deterministic(self) -> None:
        assert enumerate_types(2) == enumerate_types(2)

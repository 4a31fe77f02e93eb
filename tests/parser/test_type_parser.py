# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the DSL type parser."""

import pytest

from codestub.model.types import (
    ArrayTypeRef,
    GraphTypeRef,
    ListTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TreeTypeRef,
    format_type,
)
from codestub.parser import DslSyntaxError, LexerError, ParseError, parse_type

# ###############
# Test Helpers
# ###############


def _int() -> PrimitiveTypeRef:
    return PrimitiveTypeRef(primitive=PrimitiveType.INT)


# ###############
# Primitives and Atoms
# ###############


class TestAtoms:
    @pytest.mark.parametrize("primitive", list(PrimitiveType))
    def test_every_primitive_parses(self, primitive: PrimitiveType) -> None:
        assert parse_type(primitive.value) == PrimitiveTypeRef(primitive=primitive)

    def test_graph(self) -> None:
        assert parse_type("Graph") == GraphTypeRef()

    def test_surrounding_whitespace_is_rejected(self) -> None:
        with pytest.raises(LexerError):
            parse_type("  int ")


# ###############
# Containers
# ###############


class TestContainers:
    def test_array(self) -> None:
        assert parse_type("int[]") == ArrayTypeRef(element_type=_int())

    def test_array_of_array(self) -> None:
        assert parse_type("int[][]") == ArrayTypeRef(element_type=ArrayTypeRef(element_type=_int()))

    def test_list(self) -> None:
        assert parse_type("List<int>") == ListTypeRef(element_type=_int())

    def test_list_of_list(self) -> None:
        assert parse_type("List<List<int>>") == ListTypeRef(element_type=ListTypeRef(element_type=_int()))

    def test_list_of_array(self) -> None:
        assert parse_type("List<int[]>") == ListTypeRef(element_type=ArrayTypeRef(element_type=_int()))

    def test_list_of_tree(self) -> None:
        ref = parse_type("List<Tree<string>>")
        assert ref == ListTypeRef(element_type=TreeTypeRef(value_type=PrimitiveType.STRING))

    def test_list_of_graph(self) -> None:
        assert parse_type("List<Graph>") == ListTypeRef(element_type=GraphTypeRef())

    @pytest.mark.parametrize("primitive", list(PrimitiveType))
    def test_tree_of_primitive(self, primitive: PrimitiveType) -> None:
        assert parse_type(f"Tree<{primitive.value}>") == TreeTypeRef(value_type=primitive)

    def test_spaces_inside_generics_are_rejected(self) -> None:
        with pytest.raises(LexerError):
            parse_type("List< List< int > >")

    @pytest.mark.parametrize(
        "token",
        ["int", "string[]", "bool[][]", "List<long>", "List<List<double>>", "List<float[]>", "Tree<bool>", "Graph"],
    )
    def test_canonical_tokens_survive_format(self, token: str) -> None:
        assert format_type(parse_type(token)) == token


# ###############
# Rejected Spellings
# ###############


class TestRejected:
    def test_unknown_name(self) -> None:
        with pytest.raises(ParseError, match="Unknown type name 'NotAType'"):
            parse_type("NotAType")

    def test_names_are_case_sensitive(self) -> None:
        with pytest.raises(ParseError):
            parse_type("Int")

    def test_empty_input(self) -> None:
        with pytest.raises(ParseError, match="end of input") as exc_info:
            parse_type("")
        assert exc_info.value.column == 1

    def test_unclosed_generic(self) -> None:
        with pytest.raises(ParseError, match="Expected '>'"):
            parse_type("List<int")

    def test_unclosed_array(self) -> None:
        with pytest.raises(ParseError, match="Expected '\\]'"):
            parse_type("int[")

    def test_trailing_input(self) -> None:
        with pytest.raises(ParseError, match="Unexpected trailing input"):
            parse_type("int>")

    def test_list_without_argument(self) -> None:
        with pytest.raises(ParseError):
            parse_type("List")

    @pytest.mark.parametrize("source", ["List<int>[]", "Tree<int>[]", "Graph[]"])
    def test_array_of_non_array_element(self, source: str) -> None:
        with pytest.raises(ParseError, match="Array element type must be a primitive or an array"):
            parse_type(source)

    @pytest.mark.parametrize("source", ["Tree<int[]>", "Tree<List<int>>", "Tree<Tree<int>>", "Tree<Graph>"])
    def test_tree_of_non_primitive(self, source: str) -> None:
        with pytest.raises(ParseError, match="Tree value type must be a primitive"):
            parse_type(source)

    def test_tree_error_column_points_at_value(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_type("Tree<int[]>")
        assert exc_info.value.column == 6

    def test_lexer_errors_propagate(self) -> None:
        with pytest.raises(LexerError):
            parse_type("List<int, int>")

    def test_parse_error_is_dsl_syntax_error(self) -> None:
        with pytest.raises(DslSyntaxError):
            parse_type("Map<int>")

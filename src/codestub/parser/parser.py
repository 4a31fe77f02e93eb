# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for DSL type tokens.

Converts a token stream produced by the lexer into a :data:`TypeRef`.
"""

from codestub.model.types import (
    ArrayTypeRef,
    GraphTypeRef,
    ListTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TreeTypeRef,
    TypeRef,
)
from codestub.parser.lexer import DslSyntaxError, Token, TokenType, tokenize

# ###############
# Public Interface
# ###############


class ParseError(DslSyntaxError):
    """Raised when a type spelling is lexically valid but not a DSL type."""


def parse_type(source: str) -> TypeRef:
    """Parse a DSL type spelling into a type reference.

    Args:
        source: The type spelling, e.g. ``"Tree<int>"`` or ``"List<int[]>"``.

    Returns:
        The parsed TypeRef.

    Raises:
        LexerError: If the spelling contains characters outside the type alphabet.
        ParseError: If the spelling is not a well-formed DSL type.
    """
    tokens = tokenize(source)
    return _Parser(tokens).parse()


# ################
# Implementation
# ################

_PRIMITIVE_TYPES: dict[str, PrimitiveType] = {p.value: p for p in PrimitiveType}


class _Parser:
    """Recursive-descent parser for type token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> TypeRef:
        """Parse exactly one type and require the stream to end afterwards."""
        ref = self._parse_type()
        tok = self._current()
        if tok.type != TokenType.EOF:
            raise ParseError(f"Unexpected trailing input {tok.value!r}", tok.column)
        return ref

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, token_type: TokenType) -> Token:
        """Consume the current token if it has the given type, else raise ParseError."""
        tok = self._current()
        if tok.type != token_type:
            got = tok.value if tok.type != TokenType.EOF else "end of input"
            raise ParseError(f"Expected {token_type.value!r}, got {got!r}", tok.column)
        return self._advance()

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def _parse_type(self) -> TypeRef:
        """Parse: base ("[" "]")*"""
        start = self._current()
        ref = self._parse_base()
        while self._current().type == TokenType.LBRACKET:
            self._advance()
            self._expect(TokenType.RBRACKET)
            if not isinstance(ref, (PrimitiveTypeRef, ArrayTypeRef)):
                raise ParseError("Array element type must be a primitive or an array", start.column)
            ref = ArrayTypeRef(element_type=ref)
        return ref

    def _parse_base(self) -> TypeRef:
        """Parse a primitive, ``Graph``, ``List<T>`` or ``Tree<P>``."""
        name_tok = self._expect(TokenType.IDENTIFIER)
        name = name_tok.value
        if name in _PRIMITIVE_TYPES:
            return PrimitiveTypeRef(primitive=_PRIMITIVE_TYPES[name])
        if name == "Graph":
            return GraphTypeRef()
        if name == "List":
            self._expect(TokenType.LANGLE)
            inner = self._parse_type()
            self._expect(TokenType.RANGLE)
            return ListTypeRef(element_type=inner)
        if name == "Tree":
            self._expect(TokenType.LANGLE)
            inner_tok = self._current()
            inner = self._parse_type()
            self._expect(TokenType.RANGLE)
            if not isinstance(inner, PrimitiveTypeRef):
                raise ParseError("Tree value type must be a primitive", inner_tok.column)
            return TreeTypeRef(value_type=inner.primitive)
        raise ParseError(f"Unknown type name {name!r}", name_tok.column)

# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for DSL type tokens.

Converts a type spelling such as ``List<int[]>`` into a flat token sequence
for the type parser.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the type lexer."""

    LANGLE = "<"
    RANGLE = ">"
    LBRACKET = "["
    RBRACKET = "]"

    IDENTIFIER = "IDENTIFIER"

    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its position in the type spelling.

    Attributes:
        type: The kind of token.
        value: The raw text of the token.
        column: 1-based column where the token starts.
    """

    type: TokenType
    value: str
    column: int


class DslSyntaxError(Exception):
    """Base class for malformed DSL type spellings.

    Attributes:
        column: 1-based column of the error.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


class LexerError(DslSyntaxError):
    """Raised when the scanner encounters a character outside the type alphabet."""


def tokenize(source: str) -> list[Token]:
    """Tokenize a DSL type spelling.

    Whitespace is skipped. The final token is always an EOF token.

    Args:
        source: The type spelling, e.g. ``"List<List<int>>"``.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On any character that cannot start a token.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "<": TokenType.LANGLE,
    ">": TokenType.RANGLE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch in _SINGLE_CHAR_TOKENS:
                self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, self._pos + 1))
                self._pos += 1
            elif ch.isalpha() or ch == "_":
                self._scan_identifier()
            else:
                raise LexerError(f"Unexpected character: {ch!r}", self._pos + 1)
        self._tokens.append(Token(TokenType.EOF, "", self._pos + 1))
        return self._tokens

    def _scan_identifier(self) -> None:
        """Scan a run of letters, digits and underscores."""
        start = self._pos
        while self._pos < len(self._source) and (self._source[self._pos].isalnum() or self._source[self._pos] == "_"):
            self._pos += 1
        self._tokens.append(Token(TokenType.IDENTIFIER, self._source[start : self._pos], start + 1))

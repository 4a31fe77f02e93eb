# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for DSL type tokens."""

from codestub.parser.lexer import DslSyntaxError, LexerError
from codestub.parser.parser import ParseError, parse_type

__all__ = [
    "parse_type",
    "DslSyntaxError",
    "LexerError",
    "ParseError",
]

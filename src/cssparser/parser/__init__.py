# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and statement-tree parser for CSS style sheets."""

from cssparser.parser.lexer import CSS_LEVELS, LexerError, Token, TokenType, tokenize
from cssparser.parser.parser import ParsingError, TokenCursor, parse, parse_tokens

__all__ = [
    "parse",
    "parse_tokens",
    "ParsingError",
    "TokenCursor",
    "tokenize",
    "Token",
    "TokenType",
    "LexerError",
    "CSS_LEVELS",
]

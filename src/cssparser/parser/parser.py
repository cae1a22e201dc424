# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Statement-tree parser for CSS token streams.

Converts the flat token stream produced by the lexer into a Stylesheet model.
Nesting is reconstructed from explicit start/end marker pairs; the parser
consumes the stream exactly once through a shared forward-only cursor.
"""

import logging

from cssparser.model.statements import (
    AtBlock,
    CharsetRule,
    Declaration,
    ImportRule,
    NamespaceRule,
    RuleSet,
    Statement,
    Stylesheet,
)
from cssparser.parser.lexer import DEFAULT_CSS_LEVEL, LexerError, Token, TokenType, tokenize

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParsingError(Exception):
    """Raised when a style sheet cannot be turned into a statement tree.

    Lexer failures are reported through this error as well, with the lexer's
    line-prefixed message unchanged.

    Attributes:
        message: The error description.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TokenCursor:
    """A single-pass, forward-only read position over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def next(self) -> Token | None:
        """Consume and return the next token, or None once the list is exhausted."""
        if self._pos >= len(self._tokens):
            return None
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def remaining(self) -> int:
        """Return the number of unconsumed tokens, not counting END_OF_STREAM markers."""
        return sum(1 for tok in self._tokens[self._pos :] if tok.type != TokenType.END_OF_STREAM)


def parse(source: str, level: str = DEFAULT_CSS_LEVEL) -> Stylesheet:
    """Parse CSS source text into a Stylesheet.

    Args:
        source: The full text of a style sheet.
        level: The CSS level handed to the lexer.

    Returns:
        A Stylesheet holding the statement tree in source order.

    Raises:
        ParsingError: If the source is lexically or structurally invalid.
        ValueError: If ``level`` is not one of the known CSS levels. This is a
            caller error and is raised before any source text is scanned.
    """
    try:
        tokens = tokenize(source, level)
    except LexerError as exc:
        raise ParsingError(str(exc)) from exc
    logger.debug("Tokenized style sheet into %d tokens", len(tokens))
    return parse_tokens(tokens)


def parse_tokens(tokens: list[Token]) -> Stylesheet:
    """Build a Stylesheet from an already materialized token list.

    Raises:
        ParsingError: On a structural violation, or if tokens remain after
            the top-level statement loop returns.
    """
    cursor = TokenCursor(tokens)
    statements = parse_statements(cursor)
    leftover = cursor.remaining()
    if leftover:
        raise ParsingError(f"parsing finished with {leftover} unconsumed token(s)")
    logger.debug("Parsed %d top-level statements", len(statements))
    return Stylesheet(statements=tuple(statements))


def parse_statements(cursor: TokenCursor) -> list[Statement]:
    """Collect statements until an AT_BLOCK_END or the end of the stream.

    The closing AT_BLOCK_END is consumed but not emitted. Stray property
    names and values are skipped.
    """
    statements: list[Statement] = []
    while (tok := cursor.next()) is not None:
        if tok.type == TokenType.CHARSET:
            statements.append(CharsetRule(value=tok.text))
        elif tok.type == TokenType.IMPORT:
            statements.append(ImportRule(value=tok.text))
        elif tok.type == TokenType.NAMESPACE:
            statements.append(NamespaceRule(value=tok.text))
        elif tok.type == TokenType.AT_BLOCK_START:
            identifier = tok.text.removeprefix("@")
            statements.append(AtBlock(identifier=identifier, statements=tuple(parse_statements(cursor))))
        elif tok.type == TokenType.AT_BLOCK_END:
            break
        elif tok.type == TokenType.SELECTOR_START:
            statements.append(RuleSet(selector=tok.text, declarations=tuple(parse_declarations(cursor))))
        elif tok.type == TokenType.SELECTOR_END:
            raise ParsingError("selectorEnd token found outside of a selector block")
        elif tok.type == TokenType.END_OF_STREAM:
            break
        # PROPERTY_NAME, PROPERTY_VALUE and COMMENT are ignored here.
    return statements


def parse_declarations(cursor: TokenCursor) -> list[Declaration]:
    """Collect declarations up to and including the closing SELECTOR_END."""
    declarations: list[Declaration] = []
    while True:
        prop = _next_significant(cursor)
        if prop is None:
            raise ParsingError("expected property, got end of stream")
        if prop.type == TokenType.SELECTOR_END:
            return declarations
        if prop.type != TokenType.PROPERTY_NAME:
            raise ParsingError(f"expected property, got {prop.type.value}")

        value = _next_significant(cursor)
        if value is None:
            raise ParsingError("expected value, got end of stream")
        if value.type != TokenType.PROPERTY_VALUE:
            raise ParsingError(f"expected value to follow property, but got {value.type.value}")

        declarations.append(Declaration(property=prop.text, value=value.text))


# ################
# Implementation
# ################


def _next_significant(cursor: TokenCursor) -> Token | None:
    """Return the next non-comment token, or None at the end of the stream."""
    while (tok := cursor.next()) is not None:
        if tok.type == TokenType.END_OF_STREAM:
            return None
        if tok.type != TokenType.COMMENT:
            return tok
    return None

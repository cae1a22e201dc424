# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for CSS style sheets.

Converts raw source text into the flat token stream consumed by the
statement-tree parser. Block structure is not reconstructed here: the scanner
only emits start/end markers and the text of selectors, properties and values.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

CSS_LEVELS: tuple[str, ...] = ("CSS1.0", "CSS2.0", "CSS2.1", "CSS3.0")

DEFAULT_CSS_LEVEL = "CSS3.0"


class TokenType(enum.Enum):
    """All token types produced by the CSS lexer."""

    # Block-less at-rules
    CHARSET = "charset"
    IMPORT = "import"
    NAMESPACE = "namespace"

    # Structure markers
    AT_BLOCK_START = "atBlockStart"
    AT_BLOCK_END = "atBlockEnd"
    SELECTOR_START = "selectorStart"
    SELECTOR_END = "selectorEnd"

    # Declarations
    PROPERTY_NAME = "propertyName"
    PROPERTY_VALUE = "propertyValue"

    COMMENT = "comment"

    # End of stream
    END_OF_STREAM = "endOfStream"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        text: The normalized text of the token (empty for pure markers).
        line: 1-based line number where the token ends.
    """

    type: TokenType
    text: str
    line: int = 1


class LexerError(Exception):
    """Raised when the scanner finds unbalanced braces or an unterminated construct.

    Attributes:
        line: 1-based line number of the error.
        message: The error description without the line prefix.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"{line}: {message}")
        self.line = line
        self.message = message


def tokenize(source: str, level: str = DEFAULT_CSS_LEVEL) -> list[Token]:
    """Tokenize CSS source text into a sequence of tokens.

    Returns a list of tokens. The final token is always an END_OF_STREAM token.
    Comments are emitted as COMMENT tokens; whitespace is dropped. A leading
    byte-order mark is skipped.

    Args:
        source: The full text of a style sheet.
        level: The CSS level the source is written against. Informational only.

    Returns:
        A list of Token objects ending with a single END_OF_STREAM token.

    Raises:
        ValueError: If ``level`` is not one of :data:`CSS_LEVELS`.
        LexerError: On unbalanced braces, unterminated comments or strings,
            and malformed declarations.
    """
    if level not in CSS_LEVELS:
        raise ValueError(f"Unknown CSS level: {level!r} (expected one of {', '.join(CSS_LEVELS)})")
    return _Lexer(source.removeprefix(_BYTE_ORDER_MARK), level).tokenize()


# ################
# Implementation
# ################

_LEAF_AT_RULES: dict[str, TokenType] = {
    "charset": TokenType.CHARSET,
    "import": TokenType.IMPORT,
    "namespace": TokenType.NAMESPACE,
}

# At-rules whose block contains statements rather than declarations.
_STATEMENT_BLOCK_AT_RULES: frozenset[str] = frozenset(
    {
        "media",
        "supports",
        "document",
        "-moz-document",
        "container",
        "layer",
        "scope",
        "starting-style",
        "keyframes",
        "-webkit-keyframes",
        "-moz-keyframes",
        "-o-keyframes",
    }
)

_UNBALANCED_BRACES = "Unbalanced selector braces in style sheet"

_BYTE_ORDER_MARK = "\ufeff"


class _Block(enum.Enum):
    STATEMENTS = "statements"
    DECLARATIONS = "declarations"


class _TextBuilder:
    """Accumulates token text, collapsing whitespace and dropping it around commas."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._pending_space = False

    def space(self) -> None:
        self._pending_space = True

    def add(self, text: str) -> None:
        if self._pending_space and self._chars and self._chars[-1] != "," and text != ",":
            self._chars.append(" ")
        self._pending_space = False
        self._chars.append(text)

    def text(self) -> str:
        return "".join(self._chars)


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str, level: str) -> None:
        self._source = source
        self._level = level
        self._pos = 0
        self._line = 1
        self._tokens: list[Token] = []
        self._blocks: list[_Block] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal END_OF_STREAM."""
        while True:
            self._skip_whitespace_and_comments()
            if self._at_end():
                break
            if self._blocks and self._blocks[-1] is _Block.DECLARATIONS:
                self._scan_declaration()
            else:
                self._scan_statement()
        if self._blocks:
            raise LexerError(_UNBALANCED_BRACES, self._line)
        self._emit(TokenType.END_OF_STREAM, "")
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update line tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
        return ch

    def _emit(self, token_type: TokenType, text: str) -> None:
        self._tokens.append(Token(token_type, text, self._line))

    # ------------------------------------------------------------------
    # Whitespace, comments and verbatim runs
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self) -> None:
        """Skip whitespace and emit a COMMENT token for every comment passed."""
        while not self._at_end():
            ch = self._current()
            if ch.isspace():
                self._advance()
            elif ch == "/" and self._peek() == "*":
                self._scan_comment()
            else:
                break

    def _scan_comment(self) -> None:
        """Consume from '/*' through the matching '*/' and emit its body."""
        start_line = self._line
        self._advance()  # /
        self._advance()  # *
        start = self._pos
        while not self._at_end():
            if self._current() == "*" and self._peek() == "/":
                body = self._source[start : self._pos]
                self._advance()  # *
                self._advance()  # /
                self._emit(TokenType.COMMENT, body)
                return
            self._advance()
        raise LexerError("Unterminated comment", start_line)

    def _scan_string(self) -> str:
        """Consume a quoted string and return it verbatim, quotes included."""
        quote = self._advance()
        chars = [quote]
        while not self._at_end():
            ch = self._current()
            if ch == "\n":
                raise LexerError("Unterminated string", self._line)
            if ch == "\\":
                chars.append(self._advance())
                if not self._at_end():
                    chars.append(self._advance())
                continue
            chars.append(self._advance())
            if ch == quote:
                return "".join(chars)
        raise LexerError("Unterminated string", self._line)

    def _scan_escape(self) -> str:
        """Consume a backslash escape verbatim."""
        escape = self._advance()
        if not self._at_end():
            escape += self._advance()
        return escape

    def _scan_text(self, stops: str) -> tuple[str, str]:
        """Scan normalized text until one of ``stops`` appears outside parentheses.

        The stop character is not consumed. Returns the text and the stop
        character, or '' when the input ended first.
        """
        builder = _TextBuilder()
        depth = 0
        while not self._at_end():
            ch = self._current()
            if depth == 0 and ch in stops:
                return builder.text(), ch
            if ch.isspace():
                self._advance()
                builder.space()
            elif ch == "/" and self._peek() == "*":
                self._scan_comment()
                builder.space()
            elif ch in "\"'":
                builder.add(self._scan_string())
            elif ch == "\\":
                builder.add(self._scan_escape())
            else:
                if ch == "(":
                    depth += 1
                elif ch == ")" and depth > 0:
                    depth -= 1
                builder.add(self._advance())
        return builder.text(), ""

    # ------------------------------------------------------------------
    # Statement level
    # ------------------------------------------------------------------

    def _scan_statement(self) -> None:
        """Scan one construct in a statement context (top level or inside an at-block)."""
        ch = self._current()
        if ch == "}":
            if not self._blocks:
                raise LexerError(_UNBALANCED_BRACES, self._line)
            self._advance()
            self._blocks.pop()
            self._emit(TokenType.AT_BLOCK_END, "")
        elif ch == ";":
            self._advance()
        elif ch == "@":
            self._scan_at_rule()
        else:
            self._scan_selector()

    def _scan_at_rule(self) -> None:
        """Scan an at-rule up to its terminating ';' or opening '{'."""
        self._advance()  # @
        start = self._pos
        while not self._at_end() and (self._current().isalnum() or self._current() in "-_"):
            self._advance()
        name = self._source[start : self._pos].lower()
        prelude, stop = self._scan_text(";{}")

        if stop == ";":
            self._advance()
            if name not in _LEAF_AT_RULES:
                raise LexerError(f"Unsupported at-rule statement '@{name}'", self._line)
            self._emit(_LEAF_AT_RULES[name], prelude)
            return
        if stop != "{":
            raise LexerError(_UNBALANCED_BRACES, self._line)

        self._advance()  # {
        text = f"@{name} {prelude}" if prelude else f"@{name}"
        if name in _STATEMENT_BLOCK_AT_RULES:
            self._blocks.append(_Block.STATEMENTS)
            self._emit(TokenType.AT_BLOCK_START, text)
        else:
            self._blocks.append(_Block.DECLARATIONS)
            self._emit(TokenType.SELECTOR_START, text)

    def _scan_selector(self) -> None:
        """Scan a selector up to its opening '{'."""
        selector, stop = self._scan_text("{};")
        if stop == ";":
            raise LexerError(f"Unexpected ';' after selector '{selector}'", self._line)
        if stop != "{":
            raise LexerError(_UNBALANCED_BRACES, self._line)
        self._advance()  # {
        self._blocks.append(_Block.DECLARATIONS)
        self._emit(TokenType.SELECTOR_START, selector)

    # ------------------------------------------------------------------
    # Declaration level
    # ------------------------------------------------------------------

    def _scan_declaration(self) -> None:
        """Scan one declaration, a stray ';', or the closing '}' of a selector block."""
        ch = self._current()
        if ch == "}":
            self._advance()
            self._blocks.pop()
            self._emit(TokenType.SELECTOR_END, "")
            return
        if ch == ";":
            self._advance()
            return

        prop, stop = self._scan_text(":;{}")
        if stop == "":
            raise LexerError(_UNBALANCED_BRACES, self._line)
        if stop == "{":
            raise LexerError("Unexpected '{' in declaration block", self._line)
        if stop != ":":
            raise LexerError(f"Expected ':' after property '{prop}'", self._line)
        self._emit(TokenType.PROPERTY_NAME, prop)
        self._advance()  # :

        value, stop = self._scan_text(";{}")
        if stop == "":
            raise LexerError(_UNBALANCED_BRACES, self._line)
        if stop == "{":
            raise LexerError("Unexpected '{' in declaration block", self._line)
        self._emit(TokenType.PROPERTY_VALUE, value)
        if stop == ";":
            self._advance()

# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the CSS lexical scanner."""

import pytest

from cssparser.parser.lexer import CSS_LEVELS, LexerError, Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eos(source: str) -> list[Token]:
    """Return all tokens except the terminal END_OF_STREAM token."""
    result = tokenize(source)
    assert result[-1].type == TokenType.END_OF_STREAM
    return result[:-1]


def _pairs(source: str) -> list[tuple[TokenType, str]]:
    """Return (type, text) pairs for all tokens except END_OF_STREAM."""
    return [(tok.type, tok.text) for tok in _tokens_no_eos(source)]


def _types(source: str) -> list[TokenType]:
    return [tok.type for tok in _tokens_no_eos(source)]


# ###############
# End of Stream
# ###############


class TestEndOfStream:
    def test_empty_string_produces_end_of_stream(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.END_OF_STREAM
        assert tokens[0].text == ""

    def test_whitespace_only_produces_end_of_stream(self) -> None:
        assert [tok.type for tok in tokenize("  \n\t  \n")] == [TokenType.END_OF_STREAM]

    def test_end_of_stream_is_last_and_unique(self) -> None:
        tokens = tokenize("a { b: c; }")
        assert [tok.type for tok in tokens].count(TokenType.END_OF_STREAM) == 1
        assert tokens[-1].type == TokenType.END_OF_STREAM

    def test_leading_byte_order_mark_is_skipped(self) -> None:
        assert _pairs("\ufeffa{b:c}") == [
            (TokenType.SELECTOR_START, "a"),
            (TokenType.PROPERTY_NAME, "b"),
            (TokenType.PROPERTY_VALUE, "c"),
            (TokenType.SELECTOR_END, ""),
        ]


# ###############
# Rule Sets
# ###############


class TestRuleSets:
    def test_simple_rule_set(self) -> None:
        assert _pairs("div { color: blue; }") == [
            (TokenType.SELECTOR_START, "div"),
            (TokenType.PROPERTY_NAME, "color"),
            (TokenType.PROPERTY_VALUE, "blue"),
            (TokenType.SELECTOR_END, ""),
        ]

    def test_last_declaration_without_semicolon(self) -> None:
        assert _pairs("a{color:red}") == [
            (TokenType.SELECTOR_START, "a"),
            (TokenType.PROPERTY_NAME, "color"),
            (TokenType.PROPERTY_VALUE, "red"),
            (TokenType.SELECTOR_END, ""),
        ]

    def test_empty_rule_set(self) -> None:
        assert _types("p {}") == [TokenType.SELECTOR_START, TokenType.SELECTOR_END]

    def test_stray_semicolons_are_skipped(self) -> None:
        assert _types("a { ; color: red;; }") == [
            TokenType.SELECTOR_START,
            TokenType.PROPERTY_NAME,
            TokenType.PROPERTY_VALUE,
            TokenType.SELECTOR_END,
        ]

    def test_multiple_declarations_keep_order(self) -> None:
        pairs = _pairs(".a { font-family: monospace, monospace; font-size: 1em; }")
        assert pairs[1:5] == [
            (TokenType.PROPERTY_NAME, "font-family"),
            (TokenType.PROPERTY_VALUE, "monospace,monospace"),
            (TokenType.PROPERTY_NAME, "font-size"),
            (TokenType.PROPERTY_VALUE, "1em"),
        ]


# ###############
# Text Normalization
# ###############


class TestNormalization:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (".a, .b {}", ".a,.b"),
            (".a ,\n  .b {}", ".a,.b"),
            ("ul   li > a {}", "ul li > a"),
            ("  h1\n{}", "h1"),
            ('input[type="text"] {}', 'input[type="text"]'),
            ("a:hover {}", "a:hover"),
        ],
    )
    def test_selector_text(self, source: str, expected: str) -> None:
        assert _pairs(source)[0] == (TokenType.SELECTOR_START, expected)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("0   auto", "0 auto"),
            ("monospace , serif", "monospace,serif"),
            ("rgba(0, 0, 0, 0.5)", "rgba(0,0,0,0.5)"),
            ('"a  ,  b"', '"a  ,  b"'),
            ("red !important", "red !important"),
            ("url(data:image/png;base64,AAA)", "url(data:image/png;base64,AAA)"),
            ('"}"', '"}"'),
            ("'it\\'s'", "'it\\'s'"),
        ],
    )
    def test_value_text(self, value: str, expected: str) -> None:
        pairs = _pairs(f"a {{ content: {value}; }}")
        assert pairs[2] == (TokenType.PROPERTY_VALUE, expected)

    def test_property_text_is_trimmed(self) -> None:
        pairs = _pairs("a { margin : 0; }")
        assert pairs[1] == (TokenType.PROPERTY_NAME, "margin")

    def test_escape_in_selector_is_verbatim(self) -> None:
        assert _pairs(".a\\:b {}")[0] == (TokenType.SELECTOR_START, ".a\\:b")


# ###############
# At-Rules
# ###############


class TestAtRules:
    def test_charset(self) -> None:
        assert _pairs('@charset "UTF-8";') == [(TokenType.CHARSET, '"UTF-8"')]

    def test_import(self) -> None:
        assert _pairs('@import url("base.css") screen;') == [(TokenType.IMPORT, 'url("base.css") screen')]

    def test_namespace(self) -> None:
        assert _pairs("@namespace svg url(http://www.w3.org/2000/svg);") == [
            (TokenType.NAMESPACE, "svg url(http://www.w3.org/2000/svg)")
        ]

    def test_at_rule_name_is_lowercased(self) -> None:
        assert _pairs('@IMPORT "x.css";') == [(TokenType.IMPORT, '"x.css"')]

    def test_media_block(self) -> None:
        assert _pairs("@media screen { a { color: red; } }") == [
            (TokenType.AT_BLOCK_START, "@media screen"),
            (TokenType.SELECTOR_START, "a"),
            (TokenType.PROPERTY_NAME, "color"),
            (TokenType.PROPERTY_VALUE, "red"),
            (TokenType.SELECTOR_END, ""),
            (TokenType.AT_BLOCK_END, ""),
        ]

    def test_media_prelude_whitespace_collapsed(self) -> None:
        pairs = _pairs("@media   (max-width:  600px)\n{ }")
        assert pairs[0] == (TokenType.AT_BLOCK_START, "@media (max-width: 600px)")

    def test_at_block_without_prelude(self) -> None:
        assert _pairs("@starting-style { }")[0] == (TokenType.AT_BLOCK_START, "@starting-style")

    @pytest.mark.parametrize("name", ["supports", "document", "container", "layer", "keyframes", "-webkit-keyframes"])
    def test_statement_block_at_rules(self, name: str) -> None:
        assert _types(f"@{name} x {{ }}") == [TokenType.AT_BLOCK_START, TokenType.AT_BLOCK_END]

    def test_font_face_is_a_declaration_block(self) -> None:
        assert _pairs("@font-face { font-family: Foo; }") == [
            (TokenType.SELECTOR_START, "@font-face"),
            (TokenType.PROPERTY_NAME, "font-family"),
            (TokenType.PROPERTY_VALUE, "Foo"),
            (TokenType.SELECTOR_END, ""),
        ]

    def test_page_with_pseudo_class(self) -> None:
        assert _pairs("@page :first { margin: 1in; }")[0] == (TokenType.SELECTOR_START, "@page :first")

    def test_keyframes_contain_rule_sets(self) -> None:
        assert _types("@keyframes spin { from { opacity: 0; } to { opacity: 1; } }") == [
            TokenType.AT_BLOCK_START,
            TokenType.SELECTOR_START,
            TokenType.PROPERTY_NAME,
            TokenType.PROPERTY_VALUE,
            TokenType.SELECTOR_END,
            TokenType.SELECTOR_START,
            TokenType.PROPERTY_NAME,
            TokenType.PROPERTY_VALUE,
            TokenType.SELECTOR_END,
            TokenType.AT_BLOCK_END,
        ]

    def test_nested_at_blocks(self) -> None:
        assert _types("@media a { @supports b { } }") == [
            TokenType.AT_BLOCK_START,
            TokenType.AT_BLOCK_START,
            TokenType.AT_BLOCK_END,
            TokenType.AT_BLOCK_END,
        ]


# ###############
# Comments
# ###############


class TestComments:
    def test_top_level_comment(self) -> None:
        assert _pairs("/* header */") == [(TokenType.COMMENT, " header ")]

    def test_comments_at_every_level(self) -> None:
        assert _pairs("/* a */ div { /* b */ color: /* c */ red; /* d */ }") == [
            (TokenType.COMMENT, " a "),
            (TokenType.SELECTOR_START, "div"),
            (TokenType.COMMENT, " b "),
            (TokenType.PROPERTY_NAME, "color"),
            (TokenType.COMMENT, " c "),
            (TokenType.PROPERTY_VALUE, "red"),
            (TokenType.COMMENT, " d "),
            (TokenType.SELECTOR_END, ""),
        ]

    def test_comment_inside_selector_is_removed_from_text(self) -> None:
        assert _pairs("a/* x */b {}") == [
            (TokenType.COMMENT, " x "),
            (TokenType.SELECTOR_START, "a b"),
            (TokenType.SELECTOR_END, ""),
        ]

    def test_comment_markers_inside_string_are_text(self) -> None:
        pairs = _pairs('a { content: "/* no */"; }')
        assert pairs[2] == (TokenType.PROPERTY_VALUE, '"/* no */"')


# ###############
# Line Tracking
# ###############


class TestLineTracking:
    def test_token_line_is_line_where_token_ends(self) -> None:
        tokens = tokenize("a {\n  color: red;\n}\n")
        assert tokens[0].line == 1
        assert tokens[1].line == 2
        assert tokens[3].type == TokenType.SELECTOR_END
        assert tokens[3].line == 3
        assert tokens[4].line == 4


# ###############
# CSS Levels
# ###############


class TestLevels:
    @pytest.mark.parametrize("level", CSS_LEVELS)
    def test_known_levels_are_accepted(self, level: str) -> None:
        assert tokenize("a {}", level)[-1].type == TokenType.END_OF_STREAM

    def test_unknown_level_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown CSS level"):
            tokenize("a {}", "CSS4.0")


# ###############
# Errors
# ###############


class TestErrors:
    def test_missing_closing_brace_reports_last_line(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("div {\n    color: blue;\n")
        assert str(exc_info.value) == "3: Unbalanced selector braces in style sheet"
        assert exc_info.value.line == 3
        assert exc_info.value.message == "Unbalanced selector braces in style sheet"

    def test_missing_closing_brace_single_line(self) -> None:
        with pytest.raises(LexerError, match=r"^1: Unbalanced selector braces"):
            tokenize("div { color: blue;")

    def test_surplus_closing_brace(self) -> None:
        with pytest.raises(LexerError, match=r"^1: Unbalanced selector braces"):
            tokenize("div { color: blue; } }")

    def test_unclosed_at_block(self) -> None:
        with pytest.raises(LexerError, match="Unbalanced selector braces"):
            tokenize("@media print {\n  a { b: c; }\n")

    def test_selector_without_block(self) -> None:
        with pytest.raises(LexerError, match="Unbalanced selector braces"):
            tokenize("div")

    def test_selector_terminated_by_semicolon(self) -> None:
        with pytest.raises(LexerError, match="Unexpected ';' after selector 'div'"):
            tokenize("div; p {}")

    def test_value_cut_off_by_end_of_input(self) -> None:
        with pytest.raises(LexerError, match="Unbalanced selector braces"):
            tokenize("a { color: red")

    def test_unterminated_comment(self) -> None:
        with pytest.raises(LexerError, match=r"^2: Unterminated comment"):
            tokenize("a {}\n/* open")

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexerError, match=r"^1: Unterminated string"):
            tokenize('a { content: "abc\n"; }')

    def test_property_without_colon(self) -> None:
        with pytest.raises(LexerError, match="Expected ':' after property 'color'"):
            tokenize("a { color }")

    def test_nested_rule_in_declaration_block(self) -> None:
        with pytest.raises(LexerError, match="Unexpected '\\{' in declaration block"):
            tokenize("a { b { c: d; } }")

    def test_unsupported_block_less_at_rule(self) -> None:
        with pytest.raises(LexerError, match="Unsupported at-rule statement '@layer'"):
            tokenize("@layer base, theme;")

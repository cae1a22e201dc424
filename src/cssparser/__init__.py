# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""CSSParser: parse CSS into a statement tree and render it minified or indented."""

from cssparser.config import FormatConfig, FormatConfigError, load_format_config
from cssparser.formatting import format_css, render
from cssparser.model import (
    AtBlock,
    CharsetRule,
    Declaration,
    ImportRule,
    NamespaceRule,
    RuleSet,
    Statement,
    Stylesheet,
)
from cssparser.parser import ParsingError, parse
from cssparser.serializer import IndentationStyle, minify, pretty_print

__all__ = [
    "parse",
    "ParsingError",
    "minify",
    "pretty_print",
    "IndentationStyle",
    "render",
    "format_css",
    "FormatConfig",
    "FormatConfigError",
    "load_format_config",
    "Stylesheet",
    "Statement",
    "CharsetRule",
    "ImportRule",
    "NamespaceRule",
    "AtBlock",
    "RuleSet",
    "Declaration",
]

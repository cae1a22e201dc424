# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Minified and pretty-printed serialization of parsed style sheets."""

from cssparser.serializer.indentation import IndentationStyle, indent
from cssparser.serializer.minify import minify
from cssparser.serializer.pretty import pretty_print

__all__ = [
    "minify",
    "pretty_print",
    "IndentationStyle",
    "indent",
]

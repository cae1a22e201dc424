# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable serialization of the document model."""

from __future__ import annotations

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
from cssparser.serializer.indentation import IndentationStyle, indent

# ###############
# Public Interface
# ###############

DEFAULT_INDENTATION = IndentationStyle.spaces(4)


def pretty_print(
    node: Stylesheet | Statement | Declaration,
    indentation: IndentationStyle = DEFAULT_INDENTATION,
) -> str:
    """Serialize a node with one statement per paragraph and indented blocks.

    Sibling statements are separated by a blank line; nested content is
    indented line by line, one unit per nesting level.
    """
    if isinstance(node, Stylesheet):
        return "\n\n".join(_statement(s, indentation) for s in node.statements)
    if isinstance(node, Declaration):
        return _declaration(node)
    return _statement(node, indentation)


# ################
# Implementation
# ################


def _statement(stmt: Statement, indentation: IndentationStyle) -> str:
    if isinstance(stmt, CharsetRule):
        return f"@charset {stmt.value};"
    if isinstance(stmt, ImportRule):
        return f"@import {stmt.value};"
    if isinstance(stmt, NamespaceRule):
        return f"@namespace {stmt.value};"
    if isinstance(stmt, AtBlock):
        content = "\n\n".join(indent(_statement(s, indentation), indentation) for s in stmt.statements)
        return f"@{stmt.identifier} {{\n{content}\n}}"
    if isinstance(stmt, RuleSet):
        content = "\n".join(indentation.unit + _declaration(d) for d in stmt.declarations)
        return f"{stmt.selector} {{\n{content}\n}}"
    raise TypeError(f"Unknown statement type: {type(stmt).__name__}")


def _declaration(decl: Declaration) -> str:
    return f"{decl.property}: {decl.value};"

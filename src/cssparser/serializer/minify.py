# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Minified serialization of the document model.

Produces the shortest text that re-parses to the same tree: no whitespace
between tokens, no trailing semicolon in a declaration block.
"""

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

# ###############
# Public Interface
# ###############


def minify(node: Stylesheet | Statement | Declaration) -> str:
    """Serialize a style sheet, statement, or declaration with minimal length."""
    if isinstance(node, Stylesheet):
        return "".join(_statement(s) for s in node.statements)
    if isinstance(node, Declaration):
        return _declaration(node)
    return _statement(node)


# ################
# Implementation
# ################


def _statement(stmt: Statement) -> str:
    if isinstance(stmt, CharsetRule):
        return f"@charset {stmt.value};"
    if isinstance(stmt, ImportRule):
        return f"@import {stmt.value};"
    if isinstance(stmt, NamespaceRule):
        return f"@namespace {stmt.value};"
    if isinstance(stmt, AtBlock):
        content = "".join(_statement(s) for s in stmt.statements)
        return f"@{stmt.identifier}{{{content}}}"
    if isinstance(stmt, RuleSet):
        content = ";".join(_declaration(d) for d in stmt.declarations)
        return f"{stmt.selector}{{{content}}}"
    raise TypeError(f"Unknown statement type: {type(stmt).__name__}")


def _declaration(decl: Declaration) -> str:
    return f"{decl.property}:{decl.value}"

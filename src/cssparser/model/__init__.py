# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document model for parsed CSS (statements, rule sets, declarations)."""

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

__all__ = [
    # Leaf statements
    "CharsetRule",
    "ImportRule",
    "NamespaceRule",
    # Blocks
    "Declaration",
    "RuleSet",
    "AtBlock",
    # Tree
    "Statement",
    "Stylesheet",
]

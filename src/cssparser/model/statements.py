# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Statement tree nodes for the CSS document model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Declaration(BaseModel):
    """A single property/value pair inside a rule set."""

    model_config = ConfigDict(frozen=True)

    property: str
    value: str


class CharsetRule(BaseModel):
    """An ``@charset`` statement; ``value`` keeps its quotes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["charset"] = "charset"
    value: str


class ImportRule(BaseModel):
    """An ``@import`` statement, e.g. ``url("base.css") screen``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["import"] = "import"
    value: str


class NamespaceRule(BaseModel):
    """An ``@namespace`` statement."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["namespace"] = "namespace"
    value: str


class RuleSet(BaseModel):
    """A selector together with the declarations that apply to it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rule_set"] = "rule_set"
    selector: str
    declarations: tuple[Declaration, ...] = ()


class AtBlock(BaseModel):
    """A block at-rule such as ``@media`` holding nested statements.

    The identifier is the at-rule text without its leading ``@``, e.g.
    ``media screen`` for ``@media screen { ... }``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["at_block"] = "at_block"
    identifier: str
    statements: tuple[Statement, ...] = ()


# A top-level or nested statement. The `kind` discriminator keeps
# validation unambiguous for the recursive AtBlock variant.
Statement = Annotated[
    CharsetRule | ImportRule | NamespaceRule | AtBlock | RuleSet,
    _Field(discriminator="kind"),
]


class Stylesheet(BaseModel):
    """Root of a parsed style sheet."""

    model_config = ConfigDict(frozen=True)

    statements: tuple[Statement, ...] = ()


# Resolve forward references in self-referential models.
AtBlock.model_rebuild()
Stylesheet.model_rebuild()

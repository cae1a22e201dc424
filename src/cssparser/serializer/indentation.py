# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Indentation styles for pretty-printed output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ###############
# Public Interface
# ###############


class IndentationStyle(BaseModel):
    """One unit of indentation: a tab, or a fixed number of spaces."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tabs", "spaces"] = "spaces"
    width: int = Field(default=4, ge=0)

    @classmethod
    def tabs(cls) -> IndentationStyle:
        return cls(kind="tabs")

    @classmethod
    def spaces(cls, count: int) -> IndentationStyle:
        return cls(kind="spaces", width=count)

    @property
    def unit(self) -> str:
        """The string inserted once per indentation level."""
        if self.kind == "tabs":
            return "\t"
        return " " * self.width


def indent(text: str, style: IndentationStyle, levels: int = 1) -> str:
    """Prefix every non-empty line of ``text`` with ``levels`` indentation units.

    Empty lines are neither indented nor dropped: they are kept as bare blank
    lines, so the blank separator between nested statements carries no
    trailing whitespace. This differs from a plain per-line prefix, which
    would leave the indentation unit on those lines.
    """
    prefix = style.unit * levels
    return "\n".join(prefix + line if line else line for line in text.split("\n"))

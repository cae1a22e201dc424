# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the output formatting configuration file."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cssparser.parser.lexer import CSS_LEVELS, DEFAULT_CSS_LEVEL
from cssparser.serializer.indentation import IndentationStyle

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".cssparser.yaml"


class FormatConfigError(Exception):
    """Raised when a formatting configuration file is invalid or cannot be loaded."""


class FormatConfig(BaseModel):
    """How style sheets are lexed and rendered.

    Attributes:
        css_level: CSS level passed to the lexer.
        output: Either ``pretty`` or ``minified``.
        indentation: Indentation unit for pretty output, ``spaces`` or ``tabs``.
        indent_width: Number of spaces per level when ``indentation`` is ``spaces``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    css_level: str = Field(alias="css-level", default=DEFAULT_CSS_LEVEL)
    output: Literal["pretty", "minified"] = "pretty"
    indentation: Literal["spaces", "tabs"] = "spaces"
    indent_width: int = Field(alias="indent-width", default=4, ge=0)

    @field_validator("css_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value not in CSS_LEVELS:
            raise ValueError(f"unknown CSS level {value!r}, expected one of {', '.join(CSS_LEVELS)}")
        return value

    def indentation_style(self) -> IndentationStyle:
        """Return the IndentationStyle described by this configuration."""
        if self.indentation == "tabs":
            return IndentationStyle.tabs()
        return IndentationStyle.spaces(self.indent_width)


def load_format_config(path: Path) -> FormatConfig:
    """Load and validate a formatting configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the `.cssparser.yaml` file.

    Returns:
        A validated FormatConfig instance.

    Raises:
        FormatConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FormatConfigError(f"Format config file not found: {path}") from None
    except OSError as exc:
        raise FormatConfigError(f"Cannot read format config file: {exc}") from exc

    return parse_format_config(text, source_label=str(path))


def parse_format_config(text: str, source_label: str = "<string>") -> FormatConfig:
    """Parse formatting configuration YAML text into a FormatConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        FormatConfigError: If the YAML is invalid or a field is missing or malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FormatConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FormatConfigError(f"{source_label}: format config must be a YAML mapping")

    try:
        return FormatConfig.model_validate(data)
    except ValidationError as exc:
        raise FormatConfigError(f"Invalid format config {source_label}: {exc}") from exc

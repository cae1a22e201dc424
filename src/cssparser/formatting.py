# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse-and-render helpers driven by a FormatConfig."""

from cssparser.config import FormatConfig
from cssparser.model.statements import Stylesheet
from cssparser.parser.parser import parse
from cssparser.serializer.minify import minify
from cssparser.serializer.pretty import pretty_print

# ###############
# Public Interface
# ###############


def render(stylesheet: Stylesheet, config: FormatConfig | None = None) -> str:
    """Serialize a style sheet in the output mode selected by ``config``."""
    config = config or FormatConfig()
    if config.output == "minified":
        return minify(stylesheet)
    return pretty_print(stylesheet, config.indentation_style())


def format_css(source: str, config: FormatConfig | None = None) -> str:
    """Parse CSS source text and render it according to ``config``.

    Raises:
        ParsingError: If the source cannot be parsed.
    """
    config = config or FormatConfig()
    return render(parse(source, config.css_level), config)

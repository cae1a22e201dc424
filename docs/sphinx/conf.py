# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for CSSParser documentation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "CSSParser"
author = "CSSParser Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"

html_theme = "alabaster"

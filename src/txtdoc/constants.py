#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/constants.py
"""Constants shared across the txtdoc package.

Defaults for rendering options, the decorations used by the plain text
renderer, and the names used for configuration discovery.
"""

from __future__ import annotations

from typing import Literal

# Rendering defaults
DEFAULT_MAX_WIDTH = 80

# Column alignment names, as used by pandoc
ALIGN_LEFT = "AlignLeft"
ALIGN_RIGHT = "AlignRight"
ALIGN_CENTER = "AlignCenter"
ALIGN_DEFAULT = "AlignDefault"

AlignmentName = Literal["AlignLeft", "AlignRight", "AlignCenter", "AlignDefault"]

# Raw blocks in these formats are passed through verbatim, all others are dropped
RAW_BLOCK_PASSTHROUGH_FORMATS = frozenset({"html", "html4", "html5"})

# Decorations
BLOCK_SEPARATOR = "\n\n"
TOC_TITLE = "Table of Contents"
REFERENCES_TITLE = "References"
DEFAULT_CODE_LABEL = "CODE"
BULLET_MARKER = "-  "
LIST_CONTINUATION = "   "
DEFINITION_INDENT = "    "
QUOTE_PREFIX = "> "
TOC_INDENT = 4

# Configuration discovery
ENV_PREFIX = "TXTDOC_"
CONFIG_FILENAMES = [".txtdoc.toml", ".txtdoc.yaml", ".txtdoc.yml", ".txtdoc.json"]
PYPROJECT_TOOL_SECTION = "txtdoc"

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_UNSUPPORTED_CONSTRUCT = 3

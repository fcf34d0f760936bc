#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/utils/__init__.py
"""Utility modules for txtdoc package.

This package contains the text wrapping and padding primitives used by the
renderer, and I/O helpers.
"""

from txtdoc.utils.alignment import align, center
from txtdoc.utils.wrapping import wrap, wrap_code, wrap_lines, wrap_paragraphs

__all__ = [
    "align",
    "center",
    "wrap",
    "wrap_code",
    "wrap_lines",
    "wrap_paragraphs",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/utils/alignment.py
"""Padding helpers for fixed-width columns and banners."""

from __future__ import annotations

from txtdoc.constants import ALIGN_CENTER, ALIGN_RIGHT


def center(text: str, width: int, fill_char: str = " ") -> str:
    """Center text within the given width using a fill character.

    When perfect centering is not possible the extra fill character goes to
    the right (the text snaps left).

    Parameters
    ----------
    text : str
        Text to center
    width : int
        Target width
    fill_char : str, default " "
        Single character used for padding

    Returns
    -------
    str
        Padded text. Text wider than ``width`` is returned unchanged, it is
        neither padded nor truncated.

    Examples
    --------
        >>> center("ab", 6, "*")
        '**ab**'
        >>> center("abc", 6, "*")
        '*abc**'

    """
    space = max(0, width - len(text))
    left = space // 2
    right = space - left
    return fill_char * left + text + fill_char * right


def align(text: str, width: int, mode: str | None) -> str:
    """Pad text with spaces to fit the width, according to an alignment.

    Parameters
    ----------
    text : str
        Text to pad
    width : int
        Target width
    mode : str or None
        ``"AlignRight"`` or ``"AlignCenter"``. Any other value, including
        ``"AlignLeft"``, ``"AlignDefault"`` and ``None``, aligns left.

    Returns
    -------
    str
        Padded text

    Examples
    --------
        >>> align("x", 4, "AlignRight")
        '   x'
        >>> align("x", 4, "AlignCenter")
        ' x  '
        >>> align("x", 4, "bogus")
        'x   '

    """
    padding = max(0, width - len(text))
    if mode == ALIGN_RIGHT:
        return " " * padding + text
    if mode == ALIGN_CENTER:
        return center(text, width, " ")
    return text + " " * padding


__all__ = ["center", "align"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/utils/wrapping.py
"""Greedy word wrapping primitives.

The plain text renderer wraps everything it emits through these functions.
Unlike ``textwrap``, wrapping here never breaks inside a word and never
hyphenates: a token longer than the available width is placed alone on its
own line and allowed to overflow.

Functions
---------
wrap_lines : Wrap text into a list of lines, discarding original whitespace
wrap : Wrap text into a newline-joined string
wrap_code : Wrap text line by line, keeping hard breaks and indentation
wrap_paragraphs : Wrap text paragraph by paragraph, keeping blank lines

Examples
--------
    >>> wrap_lines("the quick brown fox", 9)
    ['the quick', 'brown fox']
    >>> wrap_lines("", 10)
    ['']
    >>> wrap_code("def f():\\n    return 1", 80)
    'def f():\\n    return 1'

"""

from __future__ import annotations

import re

_WORD_PATTERN = re.compile(r"\S+")
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
_INDENT_PATTERN = re.compile(r"\s*")
_PARAGRAPH_BREAK_PATTERN = re.compile(r"\n[ \t]*\n\s*")


def wrap_lines(text: str, width: int) -> list[str]:
    """Wrap text to the given width, returning the resulting lines.

    Any run of whitespace (including line breaks and indentation) separates
    words and is discarded. Words are packed greedily: a word joins the
    current line while ``length + 1 + len(word) <= width``.

    Parameters
    ----------
    text : str
        Text to wrap
    width : int
        Maximum line width

    Returns
    -------
    list of str
        Wrapped lines. Always contains at least one line; empty or
        whitespace-only input yields ``[""]``.

    """
    lines: list[str] = []
    current_line: list[str] = []
    # -1 so the first word on a line does not pay for a separator
    current_length = -1

    for match in _WORD_PATTERN.finditer(text):
        word = match.group()
        word_length = len(word)

        if current_line and current_length + 1 + word_length > width:
            lines.append(" ".join(current_line))
            current_line = [word]
            current_length = word_length
        else:
            current_line.append(word)
            current_length += 1 + word_length

    lines.append(" ".join(current_line))
    return lines


def wrap(text: str, width: int) -> str:
    """Wrap text to the given width, returning a newline-joined string.

    All original line breaks and indentation are lost.
    """
    return "\n".join(wrap_lines(text, width))


def wrap_code(text: str, width: int) -> str:
    """Wrap text while keeping its line breaks and indentation.

    Each hard line is wrapped separately. The leading whitespace of a line is
    measured, the rest of the line is wrapped to ``width - indent`` and every
    produced line is prefixed with the original indentation. Empty lines are
    kept, so the output never has fewer lines than the input.

    Parameters
    ----------
    text : str
        Code or preformatted text
    width : int
        Maximum line width

    Returns
    -------
    str
        Wrapped text

    Notes
    -----
    When the indentation is as wide as ``width`` or wider, the remainder is
    wrapped to a width of 1, i.e. one word per line behind the indent.

    """
    lines: list[str] = []

    for line in _LINE_BREAK_PATTERN.split(text):
        indent_match = _INDENT_PATTERN.match(line)
        indent = indent_match.group() if indent_match else ""
        inner_width = max(1, width - len(indent))

        for wrapped_line in wrap_lines(line, inner_width):
            lines.append(indent + wrapped_line)

    return "\n".join(lines)


def wrap_paragraphs(text: str, width: int) -> list[str]:
    """Wrap text paragraph by paragraph.

    Paragraphs are separated by blank lines. Each is wrapped with
    :func:`wrap_lines` and a single empty line is kept between consecutive
    paragraphs. Text without blank lines gives the same result as
    :func:`wrap_lines`.

    Parameters
    ----------
    text : str
        Text to wrap
    width : int
        Maximum line width

    Returns
    -------
    list of str
        Wrapped lines, at least one

    """
    paragraphs = [para for para in _PARAGRAPH_BREAK_PATTERN.split(text) if para.strip()]
    if not paragraphs:
        return [""]

    lines: list[str] = []
    for i, para in enumerate(paragraphs):
        if i > 0:
            lines.append("")
        lines.extend(wrap_lines(para, width))
    return lines


__all__ = ["wrap_lines", "wrap", "wrap_code", "wrap_paragraphs"]

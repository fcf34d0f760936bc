"""txtdoc - Render structured documents as width-constrained plain text.

txtdoc turns a document tree (headings, paragraphs, lists, tables, quotes,
code blocks, links, notes, citations and metadata) into plain text that
never exceeds a fixed line width, for terminals and plain text archives.

Key Features
------------
- Greedy word wrapping that never splits words
- Numbered section banners and a generated table of contents
- Links, images, notes and citations collected into a numbered reference list
- ASCII tables, framed code blocks, quoted and indented blocks
- Loading of pandoc's JSON document tree (``pandoc -t json``)
- Configuration through files, ``TXTDOC_*`` environment variables and the CLI

Requirements
------------
- Python 3.10+

Examples
--------
Render a tree built in code:

    >>> from txtdoc import render
    >>> from txtdoc.ast import Document, Heading, Paragraph, Str
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Str("Title")]),
    ...     Paragraph(content=[Str("Hello")]),
    ... ])
    >>> text = render(doc, max_width=60)

Convert pandoc JSON from a file:

    >>> from txtdoc import convert
    >>> text = convert("document.json")
    >>> convert("document.json", output="document.txt")

See Also
--------
txtdoc.ast : AST node definitions and pandoc JSON loading
txtdoc.renderers : The plain text renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "txtdoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from txtdoc.api import convert, load_document, render
from txtdoc.exceptions import (
    ConfigError,
    MalformedInputError,
    ParsingError,
    RenderingError,
    TxtdocError,
    UnsupportedConstructError,
)
from txtdoc.options.txt import TxtRendererOptions
from txtdoc.renderers.txt import TxtRenderer

__all__ = [
    "__version__",
    "convert",
    "load_document",
    "render",
    "TxtRenderer",
    "TxtRendererOptions",
    "TxtdocError",
    "ConfigError",
    "ParsingError",
    "MalformedInputError",
    "RenderingError",
    "UnsupportedConstructError",
]

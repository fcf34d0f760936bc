#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/txtdoc/renderers/__init__.py
"""AST renderers for converting documents to plain text.

This package provides the width-constrained plain text renderer and the two
tables it fills while rendering:

- TxtRenderer: Render a Document to plain text
- ReferenceTable: Numbered links, images, notes and citations
- HeadingTree: Section numbers and the table of contents

Examples
--------
    >>> from txtdoc.ast import Document, Heading, Str
    >>> from txtdoc.renderers import TxtRenderer
    >>> from txtdoc.options import TxtRendererOptions
    >>> doc = Document(children=[Heading(level=1, content=[Str("Title")])])
    >>> renderer = TxtRenderer(TxtRendererOptions(max_width=60))
    >>> text = renderer.render_to_string(doc)

"""

from txtdoc.renderers.base import BaseRenderer, InlineContentMixin
from txtdoc.renderers.headings import HeadingNode, HeadingTree
from txtdoc.renderers.references import Reference, ReferenceTable
from txtdoc.renderers.txt import RenderContext, TxtRenderer

__all__ = [
    "BaseRenderer",
    "HeadingNode",
    "HeadingTree",
    "InlineContentMixin",
    "Reference",
    "ReferenceTable",
    "RenderContext",
    "TxtRenderer",
]

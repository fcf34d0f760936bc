#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of three components:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern interface for AST traversal
- pandoc_json: Loading of pandoc's JSON document tree into AST nodes

Examples
--------
    >>> from txtdoc.ast import Document, Heading, Paragraph, Str, Space
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Str("Title")]),
    ...     Paragraph(content=[Str("Hello"), Space(), Str("world")]),
    ... ])

"""

from __future__ import annotations

from txtdoc.ast.nodes import (
    Attr,
    Block,
    BlockQuote,
    BulletList,
    CaptionedImage,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    DisplayMath,
    Div,
    Document,
    DocumentMetadata,
    Emph,
    Heading,
    HorizontalRule,
    Image,
    Inline,
    InlineMath,
    LineBlock,
    LineBreak,
    Link,
    Node,
    Note,
    OrderedList,
    Paragraph,
    Plain,
    RawBlock,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
)
from txtdoc.ast.pandoc_json import dict_to_document, json_to_document, stringify
from txtdoc.ast.visitors import NodeVisitor

__all__ = [
    # Base
    "Node",
    "Block",
    "Inline",
    "Attr",
    "Document",
    "DocumentMetadata",
    # Blocks
    "Plain",
    "Paragraph",
    "Heading",
    "BlockQuote",
    "HorizontalRule",
    "CodeBlock",
    "BulletList",
    "OrderedList",
    "DefinitionList",
    "Table",
    "RawBlock",
    "Div",
    "CaptionedImage",
    "LineBlock",
    # Inlines
    "Str",
    "Space",
    "SoftBreak",
    "LineBreak",
    "Emph",
    "Strong",
    "Strikeout",
    "Subscript",
    "Superscript",
    "SmallCaps",
    "Code",
    "Link",
    "Image",
    "Note",
    "Cite",
    "Span",
    "RawInline",
    "InlineMath",
    "DisplayMath",
    # Traversal and loading
    "NodeVisitor",
    "dict_to_document",
    "json_to_document",
    "stringify",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy handed to the plain text renderer.
The tree mirrors the pandoc document model: a Document holds metadata and a
sequence of block nodes, and blocks hold inline nodes (or further blocks).

The node hierarchy is designed to:
- Form two closed families, Block and Inline
- Enable rendering via the visitor pattern (every node has ``accept``)
- Keep attribute presence explicit (see ``Attr.class_name``)

Node Hierarchy
--------------
Block-level nodes represent structural document elements:
    - Plain, Paragraph, Heading, BlockQuote, HorizontalRule, CodeBlock
    - BulletList, OrderedList, DefinitionList, Table
    - RawBlock, Div
    - CaptionedImage, LineBlock (not renderable in plain text)

Inline nodes represent text and formatting:
    - Str, Space, SoftBreak, LineBreak
    - Emph, Strong, Strikeout, Subscript, Superscript, SmallCaps
    - Code, Link, Image, Note, Cite, Span, RawInline
    - InlineMath, DisplayMath (not renderable in plain text)

Content sequences
-----------------
List items, definitions and table cells are sequences of nodes. A sequence
may hold inline nodes only (e.g. ``[Str("a"), Space(), Str("b")]``) or block
nodes (e.g. ``[Plain(...), BulletList(...)]``), as pandoc produces.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from txtdoc.constants import AlignmentName


@dataclass
class Attr:
    """Attributes attached to headings, code blocks, spans and divs.

    Parameters
    ----------
    identifier : str, default = ""
        Element identifier
    classes : list of str, default = empty list
        Element classes, in source order
    attributes : dict, default = empty dict
        Key/value attributes

    """

    identifier: str = ""
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def class_name(self) -> Optional[str]:
        """Return the classes joined by spaces, or None when there are none."""
        classes = [cls for cls in self.classes if cls]
        if not classes:
            return None
        return " ".join(classes)


@dataclass
class DocumentMetadata:
    """Document-level metadata shown in the banner at the top of the output.

    Parameters
    ----------
    title : str or None, default = None
        Document title
    authors : list of str, default = empty list
        Authors, in order
    date : str or None, default = None
        Document date

    """

    title: Optional[str] = None
    authors: list[str] = field(default_factory=list)
    date: Optional[str] = None

    def is_empty(self) -> bool:
        """Return True when no metadata field is present."""
        return self.title is None and not self.authors and self.date is None


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.
    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class Block(Node):
    """Marker base class for block-level nodes."""


class Inline(Node):
    """Marker base class for inline nodes."""


# ============================================================================
# Document
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document body
    metadata : DocumentMetadata, default = empty metadata
        Title, authors and date

    """

    children: list[Node] = field(default_factory=list)
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Plain(Block):
    """Inline content not wrapped in a paragraph (e.g. tight list items).

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this plain block."""
        return visitor.visit_plain(self)


@dataclass
class Paragraph(Block):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Block):
    """Heading node (levels 1-6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    attr : Attr, default = empty attributes
        Heading attributes

    """

    level: int
    content: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class BlockQuote(Block):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class HorizontalRule(Block):
    """Horizontal rule (thematic break)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this rule."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class CodeBlock(Block):
    """Code block node.

    Parameters
    ----------
    content : str
        Code content, with its original line breaks and indentation
    attr : Attr, default = empty attributes
        Code block attributes; the classes name the language

    """

    content: str
    attr: Attr = field(default_factory=Attr)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_block method

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)


@dataclass
class BulletList(Block):
    """Unordered list.

    Parameters
    ----------
    items : list of list of Node, default = empty list
        One node sequence (inline or block) per item

    """

    items: list[list[Node]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Block):
    """Ordered (numbered) list.

    Parameters
    ----------
    items : list of list of Node, default = empty list
        One node sequence (inline or block) per item
    start : int, default = 1
        Starting number in the source. Plain text output always numbers
        items from 1.

    """

    items: list[list[Node]] = field(default_factory=list)
    start: int = 1

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_ordered_list(self)


@dataclass
class DefinitionList(Block):
    """Definition list.

    Parameters
    ----------
    items : list of (term, definitions), default = empty list
        Each term is a sequence of inline nodes; each definition is a node
        sequence

    """

    items: list[tuple[list[Node], list[list[Node]]]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition list."""
        return visitor.visit_definition_list(self)


@dataclass
class Table(Block):
    """Table node.

    Parameters
    ----------
    header : list of list of Node, default = empty list
        Header cells, each a node sequence
    rows : list of list of list of Node, default = empty list
        Body rows; each row is a list of cells
    alignments : list of str, default = empty list
        Column alignments (``"AlignLeft"``, ``"AlignRight"``,
        ``"AlignCenter"``, ``"AlignDefault"``)
    widths : list of float, default = empty list
        Relative column width hints (0 means unspecified)
    caption : list of Node, default = empty list
        Table caption

    """

    header: list[list[Node]] = field(default_factory=list)
    rows: list[list[list[Node]]] = field(default_factory=list)
    alignments: list[AlignmentName | str] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    caption: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_table method

        Returns
        -------
        Any
            Result from visitor.visit_table(self)

        """
        return visitor.visit_table(self)


@dataclass
class RawBlock(Block):
    """Raw block in a named output format.

    Parameters
    ----------
    format : str
        Format tag (e.g. ``"html"``, ``"latex"``)
    content : str
        Raw content

    """

    format: str
    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw_block(self)


@dataclass
class Div(Block):
    """Generic block container.

    Parameters
    ----------
    children : list of Node, default = empty list
        Contained blocks
    attr : Attr, default = empty attributes
        Container attributes

    """

    children: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this div."""
        return visitor.visit_div(self)


@dataclass
class CaptionedImage(Block):
    """Image with a caption, standing on its own as a figure.

    Parameters
    ----------
    target : str
        Image location
    title : str or None, default = None
        Image title
    caption : list of Node, default = empty list
        Caption content
    attr : Attr, default = empty attributes
        Figure attributes

    """

    target: str
    title: Optional[str] = None
    caption: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this figure."""
        return visitor.visit_captioned_image(self)


@dataclass
class LineBlock(Block):
    """Block of lines whose breaks and leading spaces are significant.

    Parameters
    ----------
    lines : list of list of Node, default = empty list
        Inline content per line

    """

    lines: list[list[Node]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line block."""
        return visitor.visit_line_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Str(Inline):
    """Run of text without spaces.

    Parameters
    ----------
    content : str
        Text content

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_str(self)


@dataclass
class Space(Inline):
    """Inter-word space."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this space."""
        return visitor.visit_space(self)


@dataclass
class SoftBreak(Inline):
    """Soft line break from the source; behaves like a space."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass
class LineBreak(Inline):
    """Hard line break."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Emph(Inline):
    """Emphasized text.

    Parameters
    ----------
    content : list of Node, default = empty list
        Emphasized inline nodes

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emph(self)


@dataclass
class Strong(Inline):
    """Strongly emphasized text.

    Parameters
    ----------
    content : list of Node, default = empty list
        Strong inline nodes

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Strikeout(Inline):
    """Struck-out text."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikeout."""
        return visitor.visit_strikeout(self)


@dataclass
class Subscript(Inline):
    """Subscripted text."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class Superscript(Inline):
    """Superscripted text."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class SmallCaps(Inline):
    """Small caps text."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this small caps text."""
        return visitor.visit_small_caps(self)


@dataclass
class Code(Inline):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code text
    attr : Attr, default = empty attributes
        Code attributes

    """

    content: str
    attr: Attr = field(default_factory=Attr)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class Link(Inline):
    """Hyperlink.

    Parameters
    ----------
    target : str
        Link destination
    content : list of Node, default = empty list
        Link text
    title : str or None, default = None
        Link title

    """

    target: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_link method

        Returns
        -------
        Any
            Result from visitor.visit_link(self)

        """
        return visitor.visit_link(self)


@dataclass
class Image(Inline):
    """Inline image.

    Parameters
    ----------
    target : str
        Image location
    alt : list of Node, default = empty list
        Alternative text
    title : str or None, default = None
        Image title

    """

    target: str
    alt: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class Note(Inline):
    """Footnote or endnote.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block content of the note

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this note."""
        return visitor.visit_note(self)


@dataclass
class Cite(Inline):
    """Citation.

    Parameters
    ----------
    content : list of Node, default = empty list
        Citation text as it appears in the document
    source : str or None, default = None
        What is being cited (e.g. the citation key)

    """

    content: list[Node] = field(default_factory=list)
    source: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this citation."""
        return visitor.visit_cite(self)


@dataclass
class Span(Inline):
    """Generic inline container.

    Parameters
    ----------
    content : list of Node, default = empty list
        Contained inline nodes
    attr : Attr, default = empty attributes
        Span attributes

    """

    content: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_span(self)


@dataclass
class RawInline(Inline):
    """Raw inline content in a named output format.

    Parameters
    ----------
    format : str
        Format tag
    content : str
        Raw content

    """

    format: str
    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw inline."""
        return visitor.visit_raw_inline(self)


@dataclass
class InlineMath(Inline):
    """Inline math (TeX source)."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math."""
        return visitor.visit_inline_math(self)


@dataclass
class DisplayMath(Inline):
    """Display math (TeX source)."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math."""
        return visitor.visit_display_math(self)


__all__ = [
    "Attr",
    "DocumentMetadata",
    "Node",
    "Block",
    "Inline",
    "Document",
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
]

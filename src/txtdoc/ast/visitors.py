#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing
AST nodes. Every node class has a matching abstract ``visit_*`` method, so a
visitor that forgets to handle a node type cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from txtdoc.ast.nodes import (
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
    Emph,
    Heading,
    HorizontalRule,
    Image,
    InlineMath,
    LineBlock,
    LineBreak,
    Link,
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node type. Nodes call
    back into the visitor from ``accept``, and whatever the visit method
    returns is returned from ``accept``.

    Examples
    --------
    A visitor that extracts text from inline nodes only needs to return
    strings from its visit methods:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_str(self, node):
        ...         return node.content
        ...     # ... one visit_* method per node type ...

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    # Blocks

    @abstractmethod
    def visit_plain(self, node: Plain) -> Any:
        """Visit a Plain node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node."""
        pass

    @abstractmethod
    def visit_div(self, node: Div) -> Any:
        """Visit a Div node."""
        pass

    @abstractmethod
    def visit_captioned_image(self, node: CaptionedImage) -> Any:
        """Visit a CaptionedImage node."""
        pass

    @abstractmethod
    def visit_line_block(self, node: LineBlock) -> Any:
        """Visit a LineBlock node."""
        pass

    # Inlines

    @abstractmethod
    def visit_str(self, node: Str) -> Any:
        """Visit a Str node."""
        pass

    @abstractmethod
    def visit_space(self, node: Space) -> Any:
        """Visit a Space node."""
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_emph(self, node: Emph) -> Any:
        """Visit an Emph node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikeout(self, node: Strikeout) -> Any:
        """Visit a Strikeout node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps) -> Any:
        """Visit a SmallCaps node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_note(self, node: Note) -> Any:
        """Visit a Note node."""
        pass

    @abstractmethod
    def visit_cite(self, node: Cite) -> Any:
        """Visit a Cite node."""
        pass

    @abstractmethod
    def visit_span(self, node: Span) -> Any:
        """Visit a Span node."""
        pass

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""
        pass

    @abstractmethod
    def visit_inline_math(self, node: InlineMath) -> Any:
        """Visit an InlineMath node."""
        pass

    @abstractmethod
    def visit_display_math(self, node: DisplayMath) -> Any:
        """Visit a DisplayMath node."""
        pass


__all__ = ["NodeVisitor"]

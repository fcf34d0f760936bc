#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/renderers/txt.py
"""Width-constrained plain text rendering from AST.

This module provides the TxtRenderer class which converts a document tree
to plain text no wider than a configured line width. Unlike a formatting
stripper, it keeps the structure of the document visible:

- Headings become numbered banners and are listed in a table of contents
- Emphasis is marked with ``_``, ``*`` and ``-``
- Links, images, notes and citations are numbered and listed at the end
- Lists, quotes, code blocks and tables are laid out with ASCII decorations

Rendering happens in two phases. The body is rendered first, which numbers
the headings and collects the references; the metadata banner and the table
of contents are then rendered from the completed tables and placed before
the body.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from txtdoc.ast.nodes import (
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
from txtdoc.ast.visitors import NodeVisitor
from txtdoc.constants import (
    ALIGN_DEFAULT,
    BLOCK_SEPARATOR,
    BULLET_MARKER,
    DEFAULT_CODE_LABEL,
    DEFINITION_INDENT,
    LIST_CONTINUATION,
    QUOTE_PREFIX,
    RAW_BLOCK_PASSTHROUGH_FORMATS,
    REFERENCES_TITLE,
    TOC_TITLE,
)
from txtdoc.exceptions import UnsupportedConstructError
from txtdoc.options.txt import TxtRendererOptions
from txtdoc.renderers.base import BaseRenderer, InlineContentMixin
from txtdoc.renderers.headings import HeadingTree
from txtdoc.renderers.references import ReferenceTable
from txtdoc.utils.alignment import align, center
from txtdoc.utils.wrapping import wrap_code, wrap_lines, wrap_paragraphs

logger = logging.getLogger(__name__)

_CELL_BREAK_PATTERN = re.compile(r"\s*\n\s*")


@dataclass
class RenderContext:
    """State collected while rendering a single document.

    Parameters
    ----------
    references : ReferenceTable
        Links, images, notes and citations met so far
    headings : HeadingTree
        Headings met so far

    """

    references: ReferenceTable = field(default_factory=ReferenceTable)
    headings: HeadingTree = field(default_factory=HeadingTree)


class TxtRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to width-constrained plain text.

    Every visit method returns the text fragment for its node. Inline
    fragments are concatenated unwrapped; block handlers do the wrapping.

    A renderer keeps per-document state while it runs, so one instance must
    not render two documents at the same time. Use one renderer per thread,
    or :func:`txtdoc.render`, which creates a renderer per call.

    Parameters
    ----------
    options : TxtRendererOptions or None, default = None
        Plain text rendering options

    Examples
    --------
        >>> from txtdoc.ast import Document, Heading, Paragraph, Str, Space
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Str("Intro")]),
        ...     Paragraph(content=[Str("Hello"), Space(), Str("world")]),
        ... ])
        >>> text = TxtRenderer().render_to_string(doc)
        >>> "| 1 - Intro" in text
        True

    """

    def __init__(self, options: TxtRendererOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, TxtRendererOptions, "txt")
        options = options or TxtRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TxtRendererOptions = options
        self._context = RenderContext()

    @property
    def max_width(self) -> int:
        """Maximum line width."""
        return self.options.max_width

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to plain text.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Plain text output

        Raises
        ------
        UnsupportedConstructError
            If the document contains math, a captioned image or a line block

        """
        self._context = RenderContext()
        return document.accept(self)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _render_sequence(self, nodes: list[Node]) -> str:
        """Render a sequence of blocks and/or inlines.

        Consecutive inline nodes are concatenated into one fragment; blocks
        and inline runs are separated by a blank line. Empty fragments are
        dropped.
        """
        parts: list[str] = []
        inline_run: list[Node] = []

        def flush_inlines() -> None:
            if inline_run:
                text = self._render_inline_content(inline_run)
                if text:
                    parts.append(text)
                inline_run.clear()

        for node in nodes:
            if isinstance(node, Block):
                flush_inlines()
                text = node.accept(self)
                if text:
                    parts.append(text)
            else:
                inline_run.append(node)
        flush_inlines()

        return BLOCK_SEPARATOR.join(parts)

    def _render_banner(self, text: str) -> str:
        return "\n| " + text + "\n\\" + "=" * (self.max_width - 1)

    def _render_heading(self, level: int, title: str) -> str:
        number = self._context.headings.record_heading(level, title)
        return self._render_banner(f"{number} - {title}")

    def _render_list(self, items: list[list[Node]], ordered: bool) -> str:
        buffer: list[str] = []

        for number, item in enumerate(items, start=1):
            marker = f"{number}. " if ordered else BULLET_MARKER
            item_lines = wrap_paragraphs(self._render_sequence(item), self.max_width - 3)

            for i, line in enumerate(item_lines):
                if i == 0:
                    buffer.append(marker + line)
                elif line:
                    buffer.append(LIST_CONTINUATION + line)
                else:
                    buffer.append("")

            buffer.append("")

        return "\n".join(buffer)

    def _render_cell(self, cell: list[Node]) -> str:
        return _CELL_BREAK_PATTERN.sub(" ", self._render_sequence(cell)).strip()

    def _render_metadata(self, metadata: DocumentMetadata) -> str:
        """Render the double-ruled title box."""
        inner_width = self.max_width - 2
        text_width = max(1, self.max_width - 4)
        lines: list[str] = []

        if metadata.title is not None:
            lines.extend(wrap_lines(metadata.title, text_width))

        if metadata.authors:
            if lines:
                lines.append("")
            if len(metadata.authors) == 1:
                lines.extend(wrap_lines("by " + metadata.authors[0], text_width))
            else:
                lines.append("by")
                for author in metadata.authors:
                    lines.extend(wrap_lines(author, text_width))

        if metadata.date is not None:
            if lines:
                lines.append("")
            lines.extend(wrap_lines(metadata.date, text_width))

        body = ["|" + center(line, inner_width, " ") + "|" for line in lines]
        top = "/" + "=" * inner_width + "\\"
        bottom = "\\" + "=" * inner_width + "/"
        return "\n".join([top, *body, bottom])

    def _render_toc(self) -> str:
        lines = [self._render_banner(TOC_TITLE), ""]
        toc = self._context.headings.render_toc()
        if toc:
            lines.append(toc)
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render a Document node.

        The body is rendered first so that all headings and references are
        known before the table of contents and the reference list are
        produced.

        Parameters
        ----------
        node : Document
            Document to render

        Returns
        -------
        str
            The complete document text

        """
        body = self._render_sequence(node.children)

        references = self._context.references
        references_heading = None
        if not references.is_empty():
            references_heading = self._render_heading(1, REFERENCES_TITLE)

        buffer: list[str] = []
        if not node.metadata.is_empty():
            buffer.append(self._render_metadata(node.metadata))
        buffer.append(self._render_toc())
        buffer.append(body)

        if references_heading is not None:
            buffer.extend(["", references_heading, "", references.render_list()])

        logger.debug(
            "Rendered document: %d blocks, %d references, width %d",
            len(node.children),
            len(references),
            self.max_width,
        )
        return "\n".join(buffer)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_plain(self, node: Plain) -> str:
        """Render a Plain node (wrapped like a paragraph)."""
        return "\n".join(wrap_paragraphs(self._render_inline_content(node.content), self.max_width))

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node.

        Hard line breaks inside the paragraph survive wrapping as blank lines.
        """
        return "\n".join(wrap_paragraphs(self._render_inline_content(node.content), self.max_width))

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node as a numbered banner.

        Parameters
        ----------
        node : Heading
            Heading to render

        Returns
        -------
        str
            A blank line, ``| <number> - <title>``, and a rule

        """
        title = " ".join(self._render_inline_content(node.content).split())
        return self._render_heading(node.level, title)

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Render a BlockQuote node with a ``> `` prefix on every line."""
        lines = wrap_paragraphs(self._render_sequence(node.children), self.max_width - 2)
        return "\n".join(QUOTE_PREFIX + line for line in lines)

    def visit_horizontal_rule(self, node: HorizontalRule) -> str:
        """Render a HorizontalRule node."""
        return "-" * self.max_width

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node between START and END banners.

        The banner label is the block's class in upper case, or ``CODE``
        when the block has no class.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        Returns
        -------
        str
            Code framed by centered banners

        """
        class_name = node.attr.class_name
        label = class_name.upper() if class_name is not None else DEFAULT_CODE_LABEL

        return (
            center(f" START {label} ", self.max_width, "-")
            + "\n\n"
            + wrap_code(node.content, self.max_width)
            + "\n\n"
            + center(f" END {label} ", self.max_width, "-")
        )

    def visit_bullet_list(self, node: BulletList) -> str:
        """Render a BulletList node."""
        return self._render_list(node.items, ordered=False)

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node, numbered from 1."""
        return self._render_list(node.items, ordered=True)

    def visit_definition_list(self, node: DefinitionList) -> str:
        """Render a DefinitionList node.

        Parameters
        ----------
        node : DefinitionList
            Definition list to render

        Returns
        -------
        str
            Terms on their own lines, definitions indented below them

        """
        buffer: list[str] = []

        for i, (term, definitions) in enumerate(node.items):
            term_text = " ".join(self._render_inline_content(term).split())
            if term_text:
                buffer.append(term_text)
            else:
                logger.debug("Definition list entry %d has no term", i + 1)

            definition_text = BLOCK_SEPARATOR.join(
                text for text in (self._render_sequence(definition) for definition in definitions) if text
            )
            for line in wrap_paragraphs(definition_text, self.max_width - 4):
                buffer.append(DEFINITION_INDENT + line if line else "")

            if i < len(node.items) - 1:
                buffer.append("")

        return "\n".join(buffer)

    def visit_table(self, node: Table) -> str:
        """Render a Table node as an ASCII grid.

        Column widths fit the widest cell of each column. Cells are never
        wrapped, so a table may be wider than the line width. The caption is
        not rendered.

        Parameters
        ----------
        node : Table
            Table to render

        Returns
        -------
        str
            Header row, separator and body rows

        Notes
        -----
        Rows with fewer cells than the widest row are padded with empty
        cells. A table with no header cells is rendered without header row
        and separator.

        """
        header = [self._render_cell(cell) for cell in node.header]
        rows = [[self._render_cell(cell) for cell in row] for row in node.rows]

        column_count = max([len(header), *(len(row) for row in rows)])
        if column_count == 0:
            return ""

        if any(len(row) != column_count for row in rows) or (header and len(header) != column_count):
            logger.warning("Table has rows of unequal length, padding to %d columns", column_count)

        has_header = bool(header)
        header = header + [""] * (column_count - len(header))
        rows = [row + [""] * (column_count - len(row)) for row in rows]
        alignments = list(node.alignments) + [ALIGN_DEFAULT] * (column_count - len(node.alignments))

        all_rows = [header, *rows] if has_header else rows
        widths = [max((len(row[i]) for row in all_rows), default=0) for i in range(column_count)]

        def format_row(row: list[str]) -> str:
            cells = [align(text, widths[i], alignments[i]) for i, text in enumerate(row)]
            return "| " + " | ".join(cells) + " |"

        lines: list[str] = []
        if has_header:
            lines.append(format_row(header))
            lines.append("|" + "|".join("-" * (width + 2) for width in widths) + "|")
        lines.extend(format_row(row) for row in rows)

        return "\n".join(lines)

    def visit_raw_block(self, node: RawBlock) -> str:
        """Render a RawBlock node: HTML passes through, other formats are dropped."""
        if node.format.lower() in RAW_BLOCK_PASSTHROUGH_FORMATS:
            return node.content
        logger.debug("Dropping raw %s block", node.format)
        return ""

    def visit_div(self, node: Div) -> str:
        """Render a Div node (its children, with no markup)."""
        return self._render_sequence(node.children)

    def visit_captioned_image(self, node: CaptionedImage) -> str:
        """Reject a CaptionedImage node."""
        raise UnsupportedConstructError("CaptionedImage")

    def visit_line_block(self, node: LineBlock) -> str:
        """Reject a LineBlock node."""
        raise UnsupportedConstructError("LineBlock")

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_str(self, node: Str) -> str:
        """Render a Str node."""
        return node.content

    def visit_space(self, node: Space) -> str:
        """Render a Space node."""
        return " "

    def visit_soft_break(self, node: SoftBreak) -> str:
        """Render a SoftBreak node as a space."""
        return " "

    def visit_line_break(self, node: LineBreak) -> str:
        """Render a LineBreak node.

        Plain text cannot break a line inside a wrapped paragraph, so a hard
        break becomes a paragraph break.
        """
        return "\n\n"

    def visit_emph(self, node: Emph) -> str:
        """Render an Emph node as ``_text_``."""
        return "_" + self._render_inline_content(node.content) + "_"

    def visit_strong(self, node: Strong) -> str:
        """Render a Strong node as ``*text*``."""
        return "*" + self._render_inline_content(node.content) + "*"

    def visit_strikeout(self, node: Strikeout) -> str:
        """Render a Strikeout node as ``-text-``."""
        return "-" + self._render_inline_content(node.content) + "-"

    def visit_subscript(self, node: Subscript) -> str:
        """Render a Subscript node (text only)."""
        return self._render_inline_content(node.content)

    def visit_superscript(self, node: Superscript) -> str:
        """Render a Superscript node (text only)."""
        return self._render_inline_content(node.content)

    def visit_small_caps(self, node: SmallCaps) -> str:
        """Render a SmallCaps node in upper case."""
        return self._render_inline_content(node.content).upper()

    def visit_code(self, node: Code) -> str:
        """Render a Code node in backticks."""
        return "`" + node.content + "`"

    def visit_link(self, node: Link) -> str:
        """Render a Link node as its text and a reference number."""
        label = self._render_inline_content(node.content)
        return self._context.references.make_reference(label, title=node.title, source=node.target)

    def visit_image(self, node: Image) -> str:
        """Render an Image node as its alternative text and a reference number."""
        label = self._render_inline_content(node.alt)
        return self._context.references.make_reference(label, title=node.title, source=node.target)

    def visit_note(self, node: Note) -> str:
        """Render a Note node as a bare reference number.

        The note text, with its whitespace collapsed, goes to the reference
        list.
        """
        note_text = " ".join(self._render_sequence(node.children).split())
        return self._context.references.make_reference("", title=note_text)

    def visit_cite(self, node: Cite) -> str:
        """Render a Cite node as its text and a reference number."""
        label = self._render_inline_content(node.content)
        return self._context.references.make_reference(label, source=node.source)

    def visit_span(self, node: Span) -> str:
        """Render a Span node (its content)."""
        return self._render_inline_content(node.content)

    def visit_raw_inline(self, node: RawInline) -> str:
        """Render a RawInline node verbatim, whatever its format."""
        return node.content

    def visit_inline_math(self, node: InlineMath) -> str:
        """Reject an InlineMath node."""
        raise UnsupportedConstructError("InlineMath")

    def visit_display_math(self, node: DisplayMath) -> str:
        """Reject a DisplayMath node."""
        raise UnsupportedConstructError("DisplayMath")


__all__ = ["RenderContext", "TxtRenderer"]

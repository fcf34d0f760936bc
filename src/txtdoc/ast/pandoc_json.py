#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/ast/pandoc_json.py
"""Load pandoc JSON ASTs into txtdoc document trees.

Pandoc can emit any document it reads as a JSON tree (``pandoc -t json``).
This module converts that tree into :mod:`txtdoc.ast.nodes`, so the plain
text renderer can be fed by pandoc without reimplementing a markup parser.

Both the current table representation (pandoc API 1.21 and later, with
column specs, table heads, bodies and foots) and the older five-field simple
table are understood.

Examples
--------
    >>> from txtdoc.ast.pandoc_json import json_to_document
    >>> doc = json_to_document(
    ...     '{"pandoc-api-version": [1, 23, 1], "meta": {}, '
    ...     '"blocks": [{"t": "Para", "c": [{"t": "Str", "c": "Hi"}]}]}'
    ... )
    >>> doc.children[0].content[0].content
    'Hi'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from txtdoc.ast.nodes import (
    Attr,
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
from txtdoc.constants import ALIGN_DEFAULT
from txtdoc.exceptions import MalformedInputError

logger = logging.getLogger(__name__)

_QUOTE_CHARS = {"SingleQuote": ("'", "'"), "DoubleQuote": ('"', '"')}


class _PandocLoader:
    """Convert pandoc JSON elements into nodes.

    Parameters
    ----------
    strict_mode : bool
        Raise on unknown element tags instead of skipping them

    """

    def __init__(self, strict_mode: bool = True):
        self.strict_mode = strict_mode
        self._dispatch: dict[str, Callable[[Any], Optional[Node]]] = {
            # Blocks
            "Plain": lambda c: Plain(content=self.inlines(c)),
            "Para": lambda c: Paragraph(content=self.inlines(c)),
            "Header": self._header,
            "BlockQuote": lambda c: BlockQuote(children=self.blocks(c)),
            "HorizontalRule": lambda c: HorizontalRule(),
            "CodeBlock": lambda c: CodeBlock(content=c[1], attr=_attr(c[0])),
            "BulletList": lambda c: BulletList(items=[self.blocks(item) for item in c]),
            "OrderedList": self._ordered_list,
            "DefinitionList": self._definition_list,
            "Table": self._table,
            "RawBlock": lambda c: RawBlock(format=_format_name(c[0]), content=c[1]),
            "Div": lambda c: Div(children=self.blocks(c[1]), attr=_attr(c[0])),
            "Figure": self._figure,
            "LineBlock": lambda c: LineBlock(lines=[self.inlines(line) for line in c]),
            # Inlines
            "Str": lambda c: Str(content=c),
            "Space": lambda c: Space(),
            "SoftBreak": lambda c: SoftBreak(),
            "LineBreak": lambda c: LineBreak(),
            "Emph": lambda c: Emph(content=self.inlines(c)),
            "Underline": lambda c: Span(content=self.inlines(c)),
            "Strong": lambda c: Strong(content=self.inlines(c)),
            "Strikeout": lambda c: Strikeout(content=self.inlines(c)),
            "Superscript": lambda c: Superscript(content=self.inlines(c)),
            "Subscript": lambda c: Subscript(content=self.inlines(c)),
            "SmallCaps": lambda c: SmallCaps(content=self.inlines(c)),
            "Quoted": self._quoted,
            "Cite": self._cite,
            "Code": lambda c: Code(content=c[1], attr=_attr(c[0])),
            "Math": self._math,
            "RawInline": lambda c: RawInline(format=_format_name(c[0]), content=c[1]),
            "Link": self._link,
            "Image": self._image,
            "Note": lambda c: Note(children=self.blocks(c)),
            "Span": lambda c: Span(content=self.inlines(c[1]), attr=_attr(c[0])),
        }

    # ------------------------------------------------------------------
    # Element dispatch
    # ------------------------------------------------------------------

    def element(self, data: Any) -> Optional[Node]:
        """Convert a single ``{"t": ..., "c": ...}`` element."""
        if not isinstance(data, dict) or "t" not in data:
            raise MalformedInputError(f"Expected a pandoc element object, got {type(data).__name__}")

        tag = data["t"]
        converter = self._dispatch.get(tag)
        if converter is None:
            if self.strict_mode:
                raise MalformedInputError(f"Unknown pandoc element: {tag}", node_type=tag)
            logger.warning("Skipping unknown pandoc element: %s", tag)
            return None

        try:
            return converter(data.get("c"))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise MalformedInputError(f"Malformed pandoc element {tag}: {e}", node_type=tag, original_error=e) from e

    def blocks(self, data: list[Any]) -> list[Node]:
        """Convert a list of block elements, dropping skipped ones."""
        return [node for node in (self.element(item) for item in data) if node is not None]

    inlines = blocks

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _header(self, c: list[Any]) -> Heading:
        return Heading(level=c[0], content=self.inlines(c[2]), attr=_attr(c[1]))

    def _ordered_list(self, c: list[Any]) -> OrderedList:
        list_attributes, items = c
        return OrderedList(items=[self.blocks(item) for item in items], start=list_attributes[0])

    def _definition_list(self, c: list[Any]) -> DefinitionList:
        return DefinitionList(
            items=[(self.inlines(term), [self.blocks(definition) for definition in definitions]) for term, definitions in c]
        )

    def _figure(self, c: list[Any]) -> CaptionedImage:
        attr, caption, body = c
        images = [node for node in _walk_inlines(self.blocks(body)) if isinstance(node, Image)]
        target = images[0].target if images else ""
        title = images[0].title if images else None
        return CaptionedImage(target=target, title=title, caption=self.blocks(caption[1]), attr=_attr(attr))

    def _table(self, c: list[Any]) -> Table:
        if len(c) == 5:
            return self._simple_table(c)

        _attr_data, caption, colspecs, thead, tbodies, tfoot = c

        head_rows = [self._row(row) for row in thead[1]]
        body_rows: list[list[list[Node]]] = []
        for tbody in tbodies:
            body_rows.extend(self._row(row) for row in tbody[2])
            body_rows.extend(self._row(row) for row in tbody[3])
        body_rows.extend(self._row(row) for row in tfoot[1])

        # Extra head rows have nowhere else to go but the body
        header = head_rows[0] if head_rows else []
        body_rows = head_rows[1:] + body_rows

        alignments = [spec[0]["t"] for spec in colspecs]
        widths = [float(spec[1].get("c", 0)) for spec in colspecs]
        return Table(
            header=header,
            rows=body_rows,
            alignments=alignments,
            widths=widths,
            caption=self.blocks(caption[1]),
        )

    def _simple_table(self, c: list[Any]) -> Table:
        caption, aligns, widths, headers, rows = c
        header = [self.blocks(cell) for cell in headers]
        # This layout writes a row of empty cells when the table has no head
        if not any(header):
            header = []
        return Table(
            header=header,
            rows=[[self.blocks(cell) for cell in row] for row in rows],
            alignments=[align.get("t", ALIGN_DEFAULT) for align in aligns],
            widths=[float(width) for width in widths],
            caption=self.inlines(caption),
        )

    def _row(self, row: list[Any]) -> list[list[Node]]:
        _row_attr, cells = row
        # cell: [attr, alignment, rowspan, colspan, blocks]
        return [self.blocks(cell[4]) for cell in cells]

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def _quoted(self, c: list[Any]) -> Span:
        quote_type, content = c
        opening, closing = _QUOTE_CHARS.get(quote_type["t"], ('"', '"'))
        return Span(content=[Str(content=opening), *self.inlines(content), Str(content=closing)])

    def _cite(self, c: list[Any]) -> Cite:
        citations, content = c
        keys = [citation["citationId"] for citation in citations if citation.get("citationId")]
        return Cite(content=self.inlines(content), source="; ".join(keys) if keys else None)

    def _math(self, c: list[Any]) -> Node:
        math_type, text = c
        if math_type["t"] == "DisplayMath":
            return DisplayMath(content=text)
        return InlineMath(content=text)

    def _link(self, c: list[Any]) -> Link:
        _attr_data, content, (target, title) = c
        return Link(target=target, content=self.inlines(content), title=title or None)

    def _image(self, c: list[Any]) -> Image:
        _attr_data, alt, (target, title) = c
        return Image(target=target, alt=self.inlines(alt), title=title or None)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def meta_value(self, value: Any) -> Optional[str]:
        """Flatten a single metadata value to a string."""
        tag = value.get("t")
        content = value.get("c")
        if tag == "MetaString":
            return content
        if tag == "MetaInlines":
            return stringify(self.inlines(content))
        if tag == "MetaBlocks":
            return " ".join(stringify(_inline_children(block)) for block in self.blocks(content))
        if tag == "MetaBool":
            return str(content).lower()
        if tag == "MetaList":
            parts = [self.meta_value(item) for item in content]
            return ", ".join(part for part in parts if part)
        logger.debug("Ignoring metadata value of type %s", tag)
        return None

    def meta_list(self, value: Any) -> list[str]:
        """Flatten a metadata value that may hold several entries."""
        if value.get("t") == "MetaList":
            entries = [self.meta_value(item) for item in value.get("c", [])]
            return [entry for entry in entries if entry]
        entry = self.meta_value(value)
        return [entry] if entry else []

    def metadata(self, meta: dict[str, Any]) -> DocumentMetadata:
        """Extract title, authors and date from pandoc metadata."""
        title = self.meta_value(meta["title"]) if "title" in meta else None
        date = self.meta_value(meta["date"]) if "date" in meta else None

        authors: list[str] = []
        for key in ("author", "authors"):
            if key in meta:
                authors.extend(self.meta_list(meta[key]))

        return DocumentMetadata(title=title, authors=authors, date=date)


def _attr(data: list[Any]) -> Attr:
    identifier, classes, attributes = data
    return Attr(identifier=identifier, classes=list(classes), attributes={k: v for k, v in attributes})


def _format_name(data: Any) -> str:
    # Older pandoc versions wrap the format in a {"t": "Format", "c": ...} object
    if isinstance(data, dict):
        return str(data.get("c", ""))
    return str(data)


def _inline_children(node: Node) -> list[Node]:
    content = getattr(node, "content", None)
    return content if isinstance(content, list) else []


def _walk_inlines(nodes: list[Node]) -> list[Node]:
    found: list[Node] = []
    for node in nodes:
        found.append(node)
        found.extend(_walk_inlines(_inline_children(node)))
    return found


def stringify(nodes: list[Node]) -> str:
    """Extract the plain text of a sequence of inline nodes.

    Used for metadata fields, which are always rendered as plain strings.
    Notes contribute nothing; images contribute their alternative text.

    Parameters
    ----------
    nodes : list of Node
        Inline nodes

    Returns
    -------
    str
        Concatenated text

    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (Str, Code, InlineMath, DisplayMath)):
            parts.append(node.content)
        elif isinstance(node, (Space, SoftBreak, LineBreak)):
            parts.append(" ")
        elif isinstance(node, Image):
            parts.append(stringify(node.alt))
        elif isinstance(node, (Note, RawInline)):
            continue
        else:
            parts.append(stringify(_inline_children(node)))
    return "".join(parts)


def dict_to_document(data: dict[str, Any], strict_mode: bool = True) -> Document:
    """Convert a decoded pandoc JSON document into a Document.

    Parameters
    ----------
    data : dict
        Decoded pandoc JSON (with ``blocks`` and ``meta`` keys)
    strict_mode : bool, default = True
        If True, unknown element tags raise MalformedInputError. If False,
        they are skipped with a warning.

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    MalformedInputError
        If the data is not a pandoc document or contains malformed elements

    """
    if not isinstance(data, dict) or "blocks" not in data:
        raise MalformedInputError("Input is not a pandoc JSON document (missing 'blocks')")

    api_version = data.get("pandoc-api-version")
    logger.debug("Loading pandoc JSON document (api version %s)", api_version)

    loader = _PandocLoader(strict_mode=strict_mode)
    children = loader.blocks(data["blocks"])
    metadata = loader.metadata(data.get("meta") or {})
    return Document(children=children, metadata=metadata)


def json_to_document(json_str: str, strict_mode: bool = True) -> Document:
    """Parse a pandoc JSON string into a Document.

    Parameters
    ----------
    json_str : str
        Output of ``pandoc -t json``
    strict_mode : bool, default = True
        See :func:`dict_to_document`

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    MalformedInputError
        If the string is not valid JSON or not a pandoc document

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}", original_error=e) from e
    return dict_to_document(data, strict_mode=strict_mode)


__all__ = ["dict_to_document", "json_to_document", "stringify"]

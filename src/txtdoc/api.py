"""The major exported API functions for rendering documents to plain text."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/txtdoc/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from txtdoc.ast.nodes import Document
from txtdoc.ast.pandoc_json import dict_to_document, json_to_document
from txtdoc.options.txt import TxtRendererOptions
from txtdoc.renderers.txt import TxtRenderer
from txtdoc.utils.decorators import debug_timer
from txtdoc.utils.io_utils import read_text_input, write_content

logger = logging.getLogger(__name__)

DocumentInput = Union[Document, dict, str, Path, IO[bytes], IO[str]]


def _resolve_options(options: Optional[TxtRendererOptions], **kwargs: Any) -> TxtRendererOptions:
    """Merge keyword overrides into an options object."""
    if options is None:
        options = TxtRendererOptions()
    if kwargs:
        options = options.create_updated(**kwargs)
    return options


def load_document(source: DocumentInput, strict_mode: bool = True) -> Document:
    """Load a document tree from any supported input.

    Parameters
    ----------
    source : Document, dict, str, Path, IO[bytes] or IO[str]
        One of:
        - a Document, returned unchanged
        - a decoded pandoc JSON dict
        - a string holding pandoc JSON (first character after blanks and
          any byte order mark is ``{``)
        - a path to a pandoc JSON file
        - a stream of pandoc JSON
    strict_mode : bool, default = True
        If True, unknown pandoc elements raise MalformedInputError

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    MalformedInputError
        If the input is not a valid pandoc JSON document
    FileNotFoundError
        If a path is given and the file does not exist

    """
    if isinstance(source, Document):
        return source
    if isinstance(source, dict):
        return dict_to_document(source, strict_mode=strict_mode)
    if isinstance(source, str) and source.lstrip("\ufeff \t\r\n").startswith("{"):
        return json_to_document(source.lstrip("\ufeff"), strict_mode=strict_mode)

    if isinstance(source, (str, Path)):
        logger.debug(f"Reading pandoc JSON from {source}")
    text = read_text_input(source)
    return json_to_document(text, strict_mode=strict_mode)


def render(document: Document, options: Optional[TxtRendererOptions] = None, **kwargs: Any) -> str:
    """Render a document tree to plain text.

    A new renderer is created for every call, so concurrent calls never share
    heading or reference state.

    Parameters
    ----------
    document : Document
        Document to render
    options : TxtRendererOptions, optional
        Rendering options
    kwargs : Any
        Option overrides (e.g. ``max_width=60``)

    Returns
    -------
    str
        The rendered text

    Raises
    ------
    UnsupportedConstructError
        If the document contains math, a captioned image or a line block

    Examples
    --------
        >>> from txtdoc.ast import Document, Paragraph, Str
        >>> render(Document(children=[Paragraph(content=[Str("Hi")])]), max_width=40)

    """
    final_options = _resolve_options(options, **kwargs)
    renderer = TxtRenderer(final_options)
    with debug_timer(logger, "Rendering (txt)"):
        return renderer.render_to_string(document)


def convert(
    source: DocumentInput,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    options: Optional[TxtRendererOptions] = None,
    *,
    strict_mode: bool = True,
    **kwargs: Any,
) -> Optional[str]:
    """Load a document and render it to plain text.

    Parameters
    ----------
    source : Document, dict, str, Path, IO[bytes] or IO[str]
        Input document, see :func:`load_document`
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the text is returned.
    options : TxtRendererOptions, optional
        Rendering options
    strict_mode : bool, default = True
        If True, unknown pandoc elements raise MalformedInputError
    kwargs : Any
        Option overrides (e.g. ``max_width=60``)

    Returns
    -------
    str or None
        The rendered text if output is None, otherwise None

    Raises
    ------
    MalformedInputError
        If the input cannot be loaded
    UnsupportedConstructError
        If the document contains a construct plain text cannot represent
    OutputWriteError
        If the output cannot be written

    Examples
    --------
        >>> text = convert("document.json", max_width=72)
        >>> convert("document.json", output="document.txt")

    """
    with debug_timer(logger, "Loading document"):
        document = load_document(source, strict_mode=strict_mode)

    text = render(document, options, **kwargs)

    if output is None:
        return text

    write_content(text, output)
    return None


__all__ = ["convert", "load_document", "render"]

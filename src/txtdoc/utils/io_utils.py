#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/utils/io_utils.py
"""I/O utilities for reading input trees and writing rendered text.

Rendered text is always encoded as UTF-8 when it is written to a path or a
binary stream.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from txtdoc.exceptions import OutputWriteError


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Output destination. Paths are written as UTF-8; binary streams receive
        UTF-8 encoded bytes; text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If the file cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("hello", buffer)
        >>> buffer.getvalue()
        'hello'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if hasattr(output, "write"):
        # Detect binary or text mode, concrete types first
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


def read_text_input(source: Union[str, Path, IO[bytes], IO[str]]) -> str:
    """Read text from a file path or a file-like object.

    Parameters
    ----------
    source : str, Path, IO[bytes] or IO[str]
        Input source. Bytes are decoded as UTF-8, and a leading byte order
        mark is dropped.

    Returns
    -------
    str
        The text content

    """
    if isinstance(source, (str, Path)):
        return Path(source).read_text(encoding="utf-8-sig")

    data = source.read()
    if isinstance(data, bytes):
        return data.decode("utf-8-sig")
    return data.removeprefix("\ufeff")


__all__ = ["write_content", "read_text_input"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/renderers/references.py
"""Out-of-band reference collection for plain text output.

Plain text has no way to attach a URL to a word or to put a footnote at the
bottom of a page. Links, images, notes and citations are therefore replaced by
their label followed by a bracketed number, and the numbered targets are
listed at the end of the document.

Examples
--------
    >>> table = ReferenceTable()
    >>> table.make_reference("pandoc", source="https://pandoc.org")
    'pandoc [1]'
    >>> table.make_reference("", title="A footnote.")
    ' [2]'
    >>> print(table.render_list())
    [1] https://pandoc.org
    [2] A footnote.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from txtdoc.constants import ALIGN_RIGHT
from txtdoc.utils.alignment import align


def _is_present(value: Optional[str]) -> bool:
    return value is not None and value != ""


@dataclass(frozen=True)
class Reference:
    """A single entry of the reference list.

    Parameters
    ----------
    title : str or None
        Human-readable description (link title, note text)
    source : str or None
        Location of the referenced resource (URL, citation key)

    """

    title: Optional[str] = None
    source: Optional[str] = None


@dataclass
class ReferenceTable:
    """Ordered collection of references, numbered from 1 in registration order.

    Every registration creates a new entry; registering the same target twice
    yields two numbers.
    """

    _entries: list[Reference] = field(default_factory=list)

    def register(self, title: Optional[str] = None, source: Optional[str] = None) -> int:
        """Append a reference and return its 1-based index."""
        self._entries.append(Reference(title=title, source=source))
        return len(self._entries)

    def make_reference(self, label: str, title: Optional[str] = None, source: Optional[str] = None) -> str:
        """Register a reference and return the text to put in its place.

        Parameters
        ----------
        label : str
            Text shown in the body (may be empty, e.g. for notes)
        title : str or None, default None
            Reference title
        source : str or None, default None
            Reference source

        Returns
        -------
        str
            ``label + " [n]"``

        """
        index = self.register(title=title, source=source)
        return f"{label} [{index}]"

    def render_list(self) -> str:
        """Render the reference list, one entry per line.

        Indices are right-aligned to the width of the largest one. An entry
        shows ``title - source`` when both are present, otherwise whichever is
        present; an entry with neither shows only its index.

        Returns
        -------
        str
            The reference list, or an empty string when there are no entries

        """
        number_width = len(str(len(self._entries)))
        lines = []

        for i, ref in enumerate(self._entries, start=1):
            line = "[" + align(str(i), number_width, ALIGN_RIGHT) + "]"

            has_title = _is_present(ref.title)
            has_source = _is_present(ref.source)
            if has_title and has_source:
                line += f" {ref.title} - {ref.source}"
            elif has_title:
                line += f" {ref.title}"
            elif has_source:
                line += f" {ref.source}"

            lines.append(line)

        return "\n".join(lines)

    def is_empty(self) -> bool:
        """Return True when no reference has been registered."""
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Reference]:
        return iter(self._entries)


__all__ = ["Reference", "ReferenceTable"]

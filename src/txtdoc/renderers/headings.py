#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/renderers/headings.py
"""Section numbering and table of contents.

Headings are recorded one by one, in document order, into a forest whose
roots are the level-1 headings. The position of a heading in that forest gives
its section number, and a pre-order walk of the forest gives the table of
contents.

A heading whose parent levels never appeared (a level-3 heading at the top of
a document, say) gets placeholder ancestors with empty titles, so it is still
numbered ``1.1.1``.

Examples
--------
    >>> tree = HeadingTree()
    >>> tree.record_heading(1, "Intro")
    '1'
    >>> tree.record_heading(2, "Scope")
    '1.1'
    >>> tree.record_heading(1, "Design")
    '2'
    >>> print(tree.render_toc())
    1 - Intro
        1.1 - Scope
    2 - Design

"""

from __future__ import annotations

from dataclasses import dataclass, field

from txtdoc.constants import TOC_INDENT


@dataclass
class HeadingNode:
    """A heading in the section forest.

    Parameters
    ----------
    title : str
        Heading text (empty for synthesized placeholders)
    children : list of HeadingNode, default = empty list
        Sub-headings, in document order

    """

    title: str
    children: list[HeadingNode] = field(default_factory=list)


@dataclass
class HeadingTree:
    """Append-only forest of headings."""

    roots: list[HeadingNode] = field(default_factory=list)

    def record_heading(self, level: int, title: str) -> str:
        """Record a heading and return its section number.

        The new heading becomes the last child of the most recent heading one
        level up. Missing ancestors are created with empty titles.

        Parameters
        ----------
        level : int
            Heading level, 1 to 6
        title : str
            Heading text

        Returns
        -------
        str
            Dot-joined, 1-based section number (e.g. ``"2.1.3"``)

        Raises
        ------
        ValueError
            If level is outside 1..6

        """
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {level}")

        siblings = self.roots
        numbers: list[str] = []

        for depth in range(level):
            if depth == level - 1:
                siblings.append(HeadingNode(title=title))
            elif not siblings:
                siblings.append(HeadingNode(title=""))

            numbers.append(str(len(siblings)))
            siblings = siblings[-1].children

        return ".".join(numbers)

    def render_toc(self) -> str:
        """Render the table of contents.

        Each heading is on its own line, indented four spaces per level below
        the top, followed by its number and title.

        Returns
        -------
        str
            Table of contents lines, or an empty string when no heading was
            recorded

        """
        lines: list[str] = []

        def add_node(depth: int, number: str, node: HeadingNode) -> None:
            lines.append(" " * (TOC_INDENT * depth) + f"{number} - {node.title}")
            for i, child in enumerate(node.children, start=1):
                add_node(depth + 1, f"{number}.{i}", child)

        for i, root in enumerate(self.roots, start=1):
            add_node(0, str(i), root)

        return "\n".join(lines)

    def is_empty(self) -> bool:
        """Return True when no heading has been recorded."""
        return not self.roots


__all__ = ["HeadingNode", "HeadingTree"]

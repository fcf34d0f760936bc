#  Copyright (c) 2025 Tom Villani, Ph.D.
# txtdoc/options/txt.py
"""Configuration options for plain text rendering.

This module defines options for rendering AST to width-constrained plain
text.
"""

from dataclasses import dataclass, field

from txtdoc.constants import DEFAULT_MAX_WIDTH
from txtdoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TxtRendererOptions(BaseRendererOptions):
    """Configuration options for plain text rendering.

    Parameters
    ----------
    max_width : int, default 80
        Maximum line width. Affects every wrap, padding and rule computation:
        paragraphs, quotes and lists are wrapped to it, and rules and banners
        span it. Only over-long words and tables may exceed it.

    Examples
    --------
        >>> from txtdoc.options import TxtRendererOptions
        >>> options = TxtRendererOptions(max_width=60)
        >>> wider = options.create_updated(max_width=100)

    """

    max_width: int = field(
        default=DEFAULT_MAX_WIDTH,
        metadata={"help": "Maximum line width for wrapped output", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the line width.

        Raises
        ------
        ValueError
            If max_width is not a positive integer.

        """
        super().__post_init__()
        if isinstance(self.max_width, bool) or not isinstance(self.max_width, int) or self.max_width <= 0:
            raise ValueError(f"max_width must be a positive integer, got {self.max_width!r}")

"""Options classes for txtdoc renderers."""

from txtdoc.options.base import BaseRendererOptions, CloneFrozenMixin
from txtdoc.options.txt import TxtRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "TxtRendererOptions"]

"""Base classes for renderer options.

This module defines the foundation classes for the options objects used to
configure txtdoc renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass
    fields. Each field may carry a ``help`` entry in its metadata, used by the
    command-line interface.

    """

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of all option fields."""
        return {f.name for f in fields(cls)}

    def __post_init__(self) -> None:
        """Validate options. Subclasses extend this."""
        pass

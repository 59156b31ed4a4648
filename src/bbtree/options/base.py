"""Base classes for parser and renderer options.

This module defines the foundation classes for all format-specific options
used throughout the bbtree conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
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

    Renderers convert a canonical tree into one output syntax.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert source text into a raw tree.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the options objects passed
to prosetree parsers and renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
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

    Renderers convert document trees into an output surface (HTML, JSON, YAML).

    Parameters
    ----------
    fail_on_unknown_nodes : bool, default=False
        Whether to raise RenderingError when a node of an unrecognized type is
        encountered. If False (default), unknown nodes are rendered as
        transparent containers.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    fail_on_unknown_nodes: bool = field(
        default=False,
        metadata={"help": "Raise RenderingError for unknown node types instead of rendering their children"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert a source surface (HTML, JSON, YAML) into a document tree.

    Parameters
    ----------
    encoding : str, default="utf-8"
        Encoding used to decode byte input

    """

    encoding: str = field(
        default="utf-8",
        metadata={"help": "Encoding used to decode byte input"},
    )

    def __post_init__(self) -> None:
        """Validate base parser options.

        Raises
        ------
        ValueError
            If the encoding is empty.

        """
        if not self.encoding:
            raise ValueError("encoding must be a non-empty string")

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/options/plain.py
"""Options for parsing and rendering the plain-hash (JSON/YAML) surface.

This module provides configuration options for reading and writing
documents in the canonical ``type``/``attrs``/``marks``/``content``/``text``
shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from prosetree.constants import (
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_SORT_KEYS,
    DEFAULT_PLAIN_INPUT_FORMAT,
    DEFAULT_PLAIN_OUTPUT_FORMAT,
    PlainFormatType,
    PlainInputFormat,
)
from prosetree.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class PlainParserOptions(BaseParserOptions):
    """Options for parsing plain-hash documents.

    Parameters
    ----------
    format : {"auto", "json", "yaml"}, default = "auto"
        Input encoding. ``auto`` treats input starting with ``{`` or ``[``
        as JSON and anything else as YAML.

    """

    format: PlainInputFormat = field(
        default=DEFAULT_PLAIN_INPUT_FORMAT,
        metadata={"help": "Input encoding"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if self.format not in ("auto", "json", "yaml"):
            raise ValueError(f"Invalid format: {self.format!r}. Must be 'auto', 'json' or 'yaml'")


@dataclass(frozen=True)
class PlainRendererOptions(BaseRendererOptions):
    """Options for rendering documents to the plain-hash shape.

    Parameters
    ----------
    format : {"json", "yaml"}, default = "json"
        Output encoding
    indent : int or None, default = 2
        Number of spaces for JSON indentation. None for compact output.
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters in JSON output
    sort_keys : bool, default = False
        Whether to sort object keys alphabetically

    Examples
    --------
    Compact JSON output:
        >>> options = PlainRendererOptions(indent=None)

    YAML output:
        >>> options = PlainRendererOptions(format="yaml")

    """

    format: PlainFormatType = field(
        default=DEFAULT_PLAIN_OUTPUT_FORMAT,
        metadata={"help": "Output encoding"},
    )
    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact)"},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters in JSON"},
    )
    sort_keys: bool = field(
        default=DEFAULT_JSON_SORT_KEYS,
        metadata={"help": "Sort object keys alphabetically"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if self.format not in ("json", "yaml"):
            raise ValueError(f"Invalid format: {self.format!r}. Must be 'json' or 'yaml'")
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")

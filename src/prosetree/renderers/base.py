#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class that all renderers inherit from.
A renderer converts a document tree into an output surface (HTML, JSON,
YAML).
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from prosetree.ast import Document
from prosetree.exceptions import InvalidOptionsError
from prosetree.options.base import BaseRendererOptions

RendererOutput = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options: BaseRendererOptions = options or BaseRendererOptions()

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            Rendered output

        """
        raise NotImplementedError

    def render(self, doc: Document, output: RendererOutput) -> None:
        """Render the document and write it to ``output``.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination: a file path or a text/binary stream

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: RendererOutput) -> None:
        """Write text output to a file path or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Strings are treated as file paths here.

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hello</p>", buffer)
            >>> buffer.getvalue()
            '<p>Hello</p>'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, io.TextIOBase) or "b" not in getattr(output, "mode", "b"):
            output.write(text)  # type: ignore[arg-type]
        else:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]

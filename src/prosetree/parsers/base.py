#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that all parsers inherit from.
A parser converts one input surface (HTML, JSON, YAML) into a
:class:`~prosetree.ast.nodes.Document` tree.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from prosetree.ast import Document
from prosetree.exceptions import InvalidOptionsError, ParsingError
from prosetree.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, bytes, Path, IO[str], IO[bytes]]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from prosetree.parsers.base import BaseParser
        >>> from prosetree.ast import Document
        >>>
        >>> class EmptyParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document()

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: document content
    - Path: file to read
    - bytes: raw document bytes, decoded with ``options.encoding``
    - IO: text or binary file-like object

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions = options or BaseParserOptions()

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input into a document tree.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            The input document to parse

        Returns
        -------
        Document
            Root of the parsed tree

        Raises
        ------
        ParsingError
            If parsing fails due to invalid input
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError

    def _load_text_content(self, input_data: ParserInput) -> str:
        """Load text from any supported input type.

        Strings are always treated as content, never as file paths.

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded

        """
        if isinstance(input_data, str):
            return input_data

        try:
            if isinstance(input_data, Path):
                raw: Union[str, bytes] = input_data.read_bytes()
            elif isinstance(input_data, (bytes, bytearray)):
                raw = bytes(input_data)
            else:
                raw = input_data.read()
        except OSError as e:
            raise ParsingError(f"Could not read input: {e}", parsing_stage="input_loading", original_error=e) from e

        if isinstance(raw, str):
            return raw
        try:
            return raw.decode(self.options.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise ParsingError(
                f"Could not decode input as {self.options.encoding}", parsing_stage="input_decoding", original_error=e
            ) from e

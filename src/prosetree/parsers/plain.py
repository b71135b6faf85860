#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/parsers/plain.py
"""JSON/YAML plain-hash to Document converter.

This module provides a parser for the canonical plain-hash shape encoded as
JSON or YAML text, as exchanged with editors and fixture files.
"""

from __future__ import annotations

import logging

from prosetree.ast import Document
from prosetree.ast.serialization import from_json, from_yaml
from prosetree.exceptions import InvalidInputError, ParsingError
from prosetree.options.plain import PlainParserOptions
from prosetree.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)


def detect_plain_format(content: str) -> str:
    """Guess whether ``content`` is JSON or YAML.

    JSON documents start with ``{`` or ``[`` after leading whitespace (and
    an optional byte order mark); everything else is treated as YAML.
    """
    stripped = content.lstrip("\ufeff \t\r\n")
    return "json" if stripped[:1] in ("{", "[") else "yaml"


class PlainParser(BaseParser):
    """Parse plain-hash JSON or YAML into a Document.

    Parameters
    ----------
    options : PlainParserOptions or None, default = None
        Parser configuration options

    """

    def __init__(self, options: PlainParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, PlainParserOptions, "plain")
        options = options or PlainParserOptions()
        super().__init__(options)
        self.options: PlainParserOptions = options

    def parse(self, input_data: ParserInput) -> Document:
        """Parse JSON or YAML plain-hash input into a Document.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            The encoded document

        Returns
        -------
        Document
            The decoded document. A non-document root is wrapped in one.

        Raises
        ------
        ParsingError
            If the text is not valid JSON/YAML or its root is not a mapping
        DependencyError
            If YAML input is parsed without PyYAML installed

        """
        content = self._load_text_content(input_data)
        plain_format = self.options.format
        if plain_format == "auto":
            plain_format = detect_plain_format(content)
            logger.debug("Detected plain format: %s", plain_format)

        try:
            if plain_format == "json":
                return from_json(content)
            return from_yaml(content)
        except InvalidInputError as e:
            raise ParsingError(
                f"Invalid document structure: {e}", parsing_stage="plain_deserialization", original_error=e
            ) from e

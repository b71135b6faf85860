#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/options/html.py
"""Configuration options for HTML parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from prosetree.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_HTML_PRETTY,
    DEFAULT_MENTION_ID_ATTRIBUTE,
    DEFAULT_MENTION_TAG,
    HtmlParserBackend,
)
from prosetree.options.base import BaseParserOptions, BaseRendererOptions

_HTML_PARSER_BACKENDS = ("html.parser", "lxml", "html5lib")


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a document tree to HTML.

    Parameters
    ----------
    pretty : bool, default False
        Emit a newline after each block-level element. Text inside ``<pre>``
        is never reformatted. The default produces compact output with no
        whitespace between tags.
    mention_tag : str, default "user-mention"
        Tag name used for user mention nodes.
    mention_id_attribute : str, default "data-id"
        Attribute carrying the mentioned user's identifier.

    """

    pretty: bool = field(
        default=DEFAULT_HTML_PRETTY,
        metadata={"help": "Put a newline after each block element"},
    )
    mention_tag: str = field(
        default=DEFAULT_MENTION_TAG,
        metadata={"help": "Tag name emitted for user mentions"},
    )
    mention_id_attribute: str = field(
        default=DEFAULT_MENTION_ID_ATTRIBUTE,
        metadata={"help": "Attribute holding the mentioned user id"},
    )

    def __post_init__(self) -> None:
        """Validate HTML renderer options.

        Raises
        ------
        ValueError
            If the mention tag or attribute name is empty.

        """
        super().__post_init__()
        if not self.mention_tag:
            raise ValueError("mention_tag must be a non-empty string")
        if not self.mention_id_attribute:
            raise ValueError("mention_id_attribute must be a non-empty string")


@dataclass(frozen=True)
class HtmlOptions(BaseParserOptions):
    """Configuration options for HTML-to-document-tree conversion.

    Parameters
    ----------
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder. ``lxml`` and ``html5lib`` must be
        installed separately.
    mention_tag : str, default "user-mention"
        Tag name recognized as a user mention.
    mention_id_attribute : str, default "data-id"
        Attribute that must be present on a mention for it to be kept.

    Examples
    --------
    Use the lxml tree builder:
        >>> options = HtmlOptions(html_parser="lxml")

    """

    html_parser: HtmlParserBackend = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser backend"},
    )
    mention_tag: str = field(
        default=DEFAULT_MENTION_TAG,
        metadata={"help": "Tag name recognized as a user mention"},
    )
    mention_id_attribute: str = field(
        default=DEFAULT_MENTION_ID_ATTRIBUTE,
        metadata={"help": "Attribute holding the mentioned user id"},
    )

    def __post_init__(self) -> None:
        """Validate HTML parser options.

        Raises
        ------
        ValueError
            If the parser backend is unknown or a mention setting is empty.

        """
        super().__post_init__()
        if self.html_parser not in _HTML_PARSER_BACKENDS:
            raise ValueError(
                f"Invalid html_parser: {self.html_parser!r}. Must be one of: {', '.join(_HTML_PARSER_BACKENDS)}"
            )
        if not self.mention_tag:
            raise ValueError("mention_tag must be a non-empty string")
        if not self.mention_id_attribute:
            raise ValueError("mention_id_attribute must be a non-empty string")

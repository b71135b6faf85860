#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/api.py
"""Convenience entry points for converting between surfaces.

These functions wrap the parser and renderer classes so common conversions
take one call. Options can be passed as an options object, as keyword
arguments, or both; keyword arguments override fields of the options object.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from prosetree.ast import Document, Node
from prosetree.options.html import HtmlOptions, HtmlRendererOptions
from prosetree.options.plain import PlainParserOptions, PlainRendererOptions
from prosetree.parsers.base import ParserInput
from prosetree.parsers.html import HtmlParser
from prosetree.parsers.plain import PlainParser
from prosetree.renderers.base import RendererOutput
from prosetree.renderers.html import HtmlRenderer
from prosetree.renderers.plain import PlainRenderer

logger = logging.getLogger(__name__)


def _merge_options(options: Any, options_class: type, kwargs: dict[str, Any]) -> Any:
    """Combine an options object with keyword overrides."""
    if kwargs and options is not None:
        return options.create_updated(**kwargs)
    if kwargs:
        return options_class(**kwargs)
    return options


def parse_html(source: ParserInput, options: Optional[HtmlOptions] = None, **kwargs: Any) -> Document:
    """Import HTML into a document tree.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        HTML content. A ``str`` is always treated as markup, never as a path.
    options : HtmlOptions or None, default = None
        Import options
    kwargs : Any
        Individual ``HtmlOptions`` fields overriding ``options``

    Returns
    -------
    Document
        The imported document

    Examples
    --------
        >>> doc = parse_html("<p>Hello <strong>world</strong></p>")
        >>> doc.text_content
        'Hello world'

    """
    final_options = _merge_options(options, HtmlOptions, kwargs)
    return HtmlParser(final_options).parse(source)


def to_html(
    node: Node,
    output: Optional[RendererOutput] = None,
    *,
    options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a node tree to HTML.

    Parameters
    ----------
    node : Node
        Tree to render. Usually a Document, but any subtree works.
    output : str, Path, IO[bytes], IO[str], or None, default = None
        Destination. When None the HTML is returned.
    options : HtmlRendererOptions or None, default = None
        Rendering options
    kwargs : Any
        Individual ``HtmlRendererOptions`` fields overriding ``options``

    Returns
    -------
    str or None
        The HTML when ``output`` is None, otherwise None

    """
    final_options = _merge_options(options, HtmlRendererOptions, kwargs)
    renderer = HtmlRenderer(final_options)
    html = renderer.render_node(node)
    if output is None:
        return html
    renderer.write_text_output(html, output)
    return None


def parse_plain(source: ParserInput, options: Optional[PlainParserOptions] = None, **kwargs: Any) -> Document:
    """Decode plain-hash JSON or YAML into a document tree.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        Encoded document
    options : PlainParserOptions or None, default = None
        Decoding options
    kwargs : Any
        Individual ``PlainParserOptions`` fields overriding ``options``

    """
    final_options = _merge_options(options, PlainParserOptions, kwargs)
    return PlainParser(final_options).parse(source)


def render_plain(
    document: Document,
    output: Optional[RendererOutput] = None,
    *,
    options: Optional[PlainRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Encode a document as plain-hash JSON or YAML.

    Returns the encoded text when ``output`` is None, otherwise writes it
    to ``output`` and returns None.
    """
    final_options = _merge_options(options, PlainRendererOptions, kwargs)
    renderer = PlainRenderer(final_options)
    text = renderer.render_to_string(document)
    if output is None:
        return text
    renderer.write_text_output(text, output)
    return None

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/renderers/__init__.py
"""Renderers for converting document trees to output formats.

Available renderers:
- HtmlRenderer: Render to an HTML fragment
- PlainRenderer: Render to plain-hash JSON or YAML (YAML requires PyYAML)

Examples
--------
Convert a tree to HTML:

    >>> from prosetree.ast import Document
    >>> from prosetree.renderers import HtmlRenderer
    >>> doc = Document()
    >>> _ = doc.add_heading(2).add_text("Title")
    >>> HtmlRenderer().render_to_string(doc)
    '<h2>Title</h2>'

"""

from prosetree.renderers.base import BaseRenderer
from prosetree.renderers.html import HtmlRenderer
from prosetree.renderers.plain import PlainRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "PlainRenderer",
]

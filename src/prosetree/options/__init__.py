#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/options/__init__.py
"""Options classes for prosetree parsers and renderers."""

from prosetree.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from prosetree.options.html import HtmlOptions, HtmlRendererOptions
from prosetree.options.plain import PlainParserOptions, PlainRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "HtmlOptions",
    "HtmlRendererOptions",
    "PlainParserOptions",
    "PlainRendererOptions",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/utils/__init__.py
"""Utility modules for the prosetree package.

This package contains dependency checking and HTML string helpers shared by
the parsers and renderers.
"""

from prosetree.utils.decorators import requires_dependencies
from prosetree.utils.html_utils import escape_attribute, escape_html, parse_inline_style

__all__ = [
    "requires_dependencies",
    "escape_html",
    "escape_attribute",
    "parse_inline_style",
]

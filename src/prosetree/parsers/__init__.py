#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/parsers/__init__.py
"""Parsers for building document trees from input formats.

Available parsers:
- HtmlParser: Import an HTML fragment or page (requires beautifulsoup4)
- PlainParser: Decode plain-hash JSON or YAML (YAML requires PyYAML)
"""

from prosetree.parsers.base import BaseParser
from prosetree.parsers.html import HtmlParser
from prosetree.parsers.plain import PlainParser, detect_plain_format

__all__ = [
    "BaseParser",
    "HtmlParser",
    "PlainParser",
    "detect_plain_format",
]

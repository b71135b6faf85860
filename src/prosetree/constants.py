#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the prosetree library.

This module centralizes the hardcoded values used across prosetree: node and
mark type names, HTML tag classification, option defaults and dependency
specifications.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Node and Mark Types - Canonical ``type`` strings of the plain-hash shape
3. HTML Tag Classification - Tag sets used by the importer and exporter
4. Option Defaults - Defaults for parser and renderer options
5. Dependencies - Package requirements checked at call time
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

HtmlParserBackend = Literal["html.parser", "lxml", "html5lib"]
PlainFormatType = Literal["json", "yaml"]
PlainInputFormat = Literal["auto", "json", "yaml"]
TableHeaderScope = Literal["row", "col", "rowgroup", "colgroup"]

# =============================================================================
# Node and Mark Types
# =============================================================================

NODE_DOCUMENT = "doc"
NODE_PARAGRAPH = "paragraph"
NODE_TEXT = "text"
NODE_HEADING = "heading"
NODE_TABLE = "table"
NODE_TABLE_ROW = "table_row"
NODE_TABLE_CELL = "table_cell"
NODE_TABLE_HEADER = "table_header"
NODE_HARD_BREAK = "hard_break"
NODE_BULLET_LIST = "bullet_list"
NODE_ORDERED_LIST = "ordered_list"
NODE_LIST_ITEM = "list_item"
NODE_BLOCKQUOTE = "blockquote"
NODE_HORIZONTAL_RULE = "horizontal_rule"
NODE_IMAGE = "image"
NODE_CODE_BLOCK = "code_block"
NODE_CODE_BLOCK_WRAPPER = "code_block_wrapper"
NODE_USER = "user"

MARK_BOLD = "bold"
MARK_ITALIC = "italic"
MARK_CODE = "code"
MARK_LINK = "link"
MARK_STRIKE = "strike"
MARK_SUBSCRIPT = "subscript"
MARK_SUPERSCRIPT = "superscript"
MARK_UNDERLINE = "underline"

VALID_TABLE_HEADER_SCOPES: frozenset[str] = frozenset({"row", "col", "rowgroup", "colgroup"})

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

DEFAULT_ORDERED_LIST_START = 1
DEFAULT_ORDERED_LIST_ORDER = 1

# =============================================================================
# HTML Tag Classification
# =============================================================================

# Inline styling tag -> mark type
HTML_MARK_TAGS: dict[str, str] = {
    "strong": MARK_BOLD,
    "b": MARK_BOLD,
    "em": MARK_ITALIC,
    "i": MARK_ITALIC,
    "code": MARK_CODE,
    "a": MARK_LINK,
    "strike": MARK_STRIKE,
    "s": MARK_STRIKE,
    "del": MARK_STRIKE,
    "sub": MARK_SUBSCRIPT,
    "sup": MARK_SUPERSCRIPT,
    "u": MARK_UNDERLINE,
}

# Mark type -> tag used on export
MARK_HTML_TAGS: dict[str, str] = {
    MARK_BOLD: "strong",
    MARK_ITALIC: "em",
    MARK_CODE: "code",
    MARK_LINK: "a",
    MARK_STRIKE: "del",
    MARK_SUBSCRIPT: "sub",
    MARK_SUPERSCRIPT: "sup",
    MARK_UNDERLINE: "u",
}

# Tags whose subtree may be folded into a single paragraph
INLINE_SAFE_ELEMENTS: frozenset[str] = frozenset(
    {"strong", "b", "em", "i", "code", "a", "br", "span", "strike", "s", "del", "sub", "sup", "u"}
)

SKIPPED_ELEMENTS: frozenset[str] = frozenset({"script", "style", "head", "template", "noscript"})

HEADING_TAGS: frozenset[str] = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParserBackend = "html.parser"
DEFAULT_MENTION_TAG = "user-mention"
DEFAULT_MENTION_ID_ATTRIBUTE = "data-id"
DEFAULT_HTML_PRETTY = False

DEFAULT_PLAIN_INPUT_FORMAT: PlainInputFormat = "auto"
DEFAULT_PLAIN_OUTPUT_FORMAT: PlainFormatType = "json"
DEFAULT_JSON_INDENT: int | None = 2
DEFAULT_JSON_ENSURE_ASCII = False
DEFAULT_JSON_SORT_KEYS = False

# =============================================================================
# Dependencies
# =============================================================================

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]

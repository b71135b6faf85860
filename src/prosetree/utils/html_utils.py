"""HTML-related utility helpers."""

from __future__ import annotations

import re
from html import escape as _html_escape
from typing import Any, Mapping

_STYLE_DECLARATION = re.compile(r"\s*([-\w]+)\s*:\s*([^;]+?)\s*(?:;|$)")
_PIXELS = re.compile(r"^\s*(\d+)\s*(?:px)?\s*$", re.IGNORECASE)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters in text content when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=False)


def escape_attribute(value: Any) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return _html_escape(str(value), quote=True)


def format_attributes(attrs: Mapping[str, Any]) -> str:
    """Format an attribute mapping as a string of ``name="value"`` pairs.

    ``None`` values are skipped. The result starts with a space when it is
    non-empty so it can be appended directly after a tag name.

    Parameters
    ----------
    attrs : Mapping[str, Any]
        Attribute names and values in output order

    Returns
    -------
    str
        Formatted attributes, or an empty string

    """
    parts = [f' {name}="{escape_attribute(value)}"' for name, value in attrs.items() if value is not None]
    return "".join(parts)


def parse_inline_style(style: str | None) -> dict[str, str]:
    """Parse an inline ``style`` attribute into a property mapping.

    Property names are lower-cased; later declarations win.

    >>> parse_inline_style("border-style: dashed; width: 50%")
    {'border-style': 'dashed', 'width': '50%'}

    """
    if not style:
        return {}
    return {name.lower(): value for name, value in _STYLE_DECLARATION.findall(style)}


def parse_pixels(value: str | None) -> int | None:
    """Parse a CSS pixel length (``"3px"`` or ``"3"``) into an int."""
    if not value:
        return None
    match = _PIXELS.match(value)
    return int(match.group(1)) if match else None


def parse_int(value: Any, default: int | None = None) -> int | None:
    """Parse an integer attribute value, returning ``default`` when invalid."""
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default

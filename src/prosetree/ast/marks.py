#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/ast/marks.py
"""Inline formatting marks.

A mark is an annotation attached to a :class:`~prosetree.ast.nodes.Text`
(or, by convention, :class:`~prosetree.ast.nodes.HardBreak`) node. Marks
carry no children. Only links use ``attrs`` in practice (for ``href``);
other marks accept an attribute bag for forward compatibility.

Mark order on a text node is significant: the first mark is the innermost
formatting element, the last mark the outermost.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from prosetree.ast.attributes import AttrsInput, flatten_attrs
from prosetree.constants import (
    MARK_BOLD,
    MARK_CODE,
    MARK_ITALIC,
    MARK_LINK,
    MARK_STRIKE,
    MARK_SUBSCRIPT,
    MARK_SUPERSCRIPT,
    MARK_UNDERLINE,
)


@dataclass
class Mark:
    """Base mark, also used directly for unknown mark types.

    Parameters
    ----------
    type : str
        Mark type name (e.g. ``"bold"``)
    attrs : dict, list of Attribute or None, default = None
        Mark attributes, stored as one plain mapping so that equality
        does not depend on the encoding used to build the mark

    """

    type: str = "mark"
    attrs: AttrsInput = None

    def __post_init__(self) -> None:
        self.attrs = flatten_attrs(self.attrs) or None

    def attrs_dict(self) -> dict[str, Any]:
        """Return the mark attributes as a plain mapping."""
        return flatten_attrs(self.attrs)

    def to_plain(self) -> dict[str, Any]:
        """Serialize the mark to ``{type, attrs?}``."""
        result: dict[str, Any] = {"type": self.type}
        attrs = self.attrs_dict()
        if attrs:
            result["attrs"] = attrs
        return result


@dataclass
class Bold(Mark):
    """Bold (strong) text."""

    type: str = field(default=MARK_BOLD, init=False)


@dataclass
class Italic(Mark):
    """Italic (emphasized) text."""

    type: str = field(default=MARK_ITALIC, init=False)


@dataclass
class Code(Mark):
    """Inline code."""

    type: str = field(default=MARK_CODE, init=False)


@dataclass
class Link(Mark):
    """Hyperlink, with the target in ``attrs["href"]``."""

    type: str = field(default=MARK_LINK, init=False)

    @property
    def href(self) -> Optional[str]:
        """Link target, or None when unset."""
        return self.attrs_dict().get("href")

    @href.setter
    def href(self, value: Optional[str]) -> None:
        attrs = self.attrs_dict()
        if value is None:
            attrs.pop("href", None)
        else:
            attrs["href"] = value
        self.attrs = attrs or None


@dataclass
class Strike(Mark):
    """Struck-through text."""

    type: str = field(default=MARK_STRIKE, init=False)


@dataclass
class Subscript(Mark):
    """Subscript text."""

    type: str = field(default=MARK_SUBSCRIPT, init=False)


@dataclass
class Superscript(Mark):
    """Superscript text."""

    type: str = field(default=MARK_SUPERSCRIPT, init=False)


@dataclass
class Underline(Mark):
    """Underlined text."""

    type: str = field(default=MARK_UNDERLINE, init=False)


MARK_CLASSES: dict[str, type[Mark]] = {
    cls().type: cls for cls in (Bold, Italic, Code, Link, Strike, Subscript, Superscript, Underline)
}


def create_mark(mark_type: str, attrs: AttrsInput = None) -> Mark:
    """Create the mark class registered for ``mark_type``.

    Unknown types produce a plain :class:`Mark` carrying the given type.
    """
    mark_class = MARK_CLASSES.get(mark_type)
    if mark_class is None:
        return Mark(type=mark_type, attrs=attrs)
    return mark_class(attrs=attrs)

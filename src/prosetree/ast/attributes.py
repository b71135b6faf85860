#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/ast/attributes.py
"""Typed single-entry attributes for nodes and marks.

Attributes are an alternate encoding for ``attrs`` bags: a node or mark may
hold either a plain mapping or a list of :class:`Attribute` values. The
canonical external form is always a plain mapping, produced by
:func:`flatten_attrs`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Union

AttrsInput = Union[Mapping[str, Any], Iterable[Union["Attribute", Mapping[str, Any]]], None]


@dataclass
class Attribute:
    """A single typed key/value pair.

    Parameters
    ----------
    type : str
        Attribute name
    value : Any, default = None
        Attribute value

    """

    type: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the attribute as a one-entry mapping."""
        return {self.type: self.value}


@dataclass
class Href(Attribute):
    """Link target attribute."""

    type: str = field(default="href", init=False)


@dataclass
class Id(Attribute):
    """Identifier attribute."""

    type: str = field(default="id", init=False)


def flatten_attrs(attrs: AttrsInput) -> dict[str, Any]:
    """Merge an attribute bag into a single plain mapping.

    Parameters
    ----------
    attrs : mapping, iterable of Attribute or mapping, or None
        The attribute bag. Lists may mix :class:`Attribute` instances and
        one-entry mappings; later entries win on key collisions.

    Returns
    -------
    dict
        A new plain mapping (empty when ``attrs`` is None or empty)

    Raises
    ------
    TypeError
        If a list entry is neither an Attribute nor a mapping

    """
    if attrs is None:
        return {}
    if isinstance(attrs, Mapping):
        return dict(attrs)

    flat: dict[str, Any] = {}
    for entry in attrs:
        if isinstance(entry, Attribute):
            flat.update(entry.to_dict())
        elif isinstance(entry, Mapping):
            flat.update(entry)
        else:
            raise TypeError(f"Cannot flatten attribute entry of type {type(entry).__name__}")
    return flat

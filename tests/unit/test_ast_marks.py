#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_marks.py
"""Unit tests for marks and typed attributes."""

import pytest

from prosetree.ast import (
    Attribute,
    Bold,
    Code,
    Href,
    Id,
    Italic,
    Link,
    Mark,
    Strike,
    Subscript,
    Superscript,
    Underline,
    create_mark,
)


@pytest.mark.unit
class TestMarkTypes:
    """Test mark classes and the mark factory."""

    @pytest.mark.parametrize(
        "mark_class,mark_type",
        [
            (Bold, "bold"),
            (Italic, "italic"),
            (Code, "code"),
            (Link, "link"),
            (Strike, "strike"),
            (Subscript, "subscript"),
            (Superscript, "superscript"),
            (Underline, "underline"),
        ],
    )
    def test_create_known_mark(self, mark_class, mark_type) -> None:
        """Test the factory returns the registered class for each type."""
        mark = create_mark(mark_type)
        assert isinstance(mark, mark_class)
        assert mark.type == mark_type

    def test_create_unknown_mark(self) -> None:
        """Test unknown mark types are kept as a plain Mark."""
        mark = create_mark("highlight", {"color": "yellow"})
        assert type(mark) is Mark
        assert mark.type == "highlight"
        assert mark.attrs_dict() == {"color": "yellow"}

    def test_marks_compare_by_value(self) -> None:
        """Test marks are equal when type and attributes match."""
        assert Bold() == create_mark("bold")
        assert Link(attrs={"href": "a"}) != Link(attrs={"href": "b"})


@pytest.mark.unit
class TestMarkSerialization:
    """Test Mark.to_plain."""

    def test_mark_without_attrs(self) -> None:
        """Test a mark without attributes omits the attrs key."""
        assert Bold().to_plain() == {"type": "bold"}

    def test_link_with_attrs(self) -> None:
        """Test a link emits its href."""
        assert Link(attrs={"href": "https://example.com"}).to_plain() == {
            "type": "link",
            "attrs": {"href": "https://example.com"},
        }

    def test_link_with_attribute_list(self) -> None:
        """Test typed attribute lists are flattened on output."""
        link = Link(attrs=[Href("https://example.com"), Attribute("target", "_blank")])
        assert link.to_plain() == {"type": "link", "attrs": {"href": "https://example.com", "target": "_blank"}}


@pytest.mark.unit
class TestLinkHref:
    """Test the Link.href convenience property."""

    def test_href_read(self) -> None:
        """Test reading href from attrs."""
        assert Link(attrs={"href": "/docs"}).href == "/docs"
        assert Link().href is None

    def test_href_write(self) -> None:
        """Test setting and clearing href."""
        link = Link()
        link.href = "/docs"
        assert link.attrs_dict() == {"href": "/docs"}
        link.href = None
        assert link.attrs is None


@pytest.mark.unit
class TestAttributes:
    """Test typed attribute classes."""

    def test_attribute_to_dict(self) -> None:
        """Test a generic attribute becomes a one-entry mapping."""
        assert Attribute("class", "lead").to_dict() == {"class": "lead"}

    def test_named_attributes(self) -> None:
        """Test Href and Id fix their attribute name."""
        assert Href("/x").to_dict() == {"href": "/x"}
        assert Id("section-1").to_dict() == {"id": "section-1"}

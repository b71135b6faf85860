#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for document node classes.

Tests cover:
- Builder helpers on documents, paragraphs, lists, tables and blockquotes
- Leaf nodes rejecting children
- Tree queries (find_first, find_all, find_children)
- Text extraction
- Typed field validation

"""

import pytest

from prosetree.ast import (
    Attribute,
    Blockquote,
    Bold,
    BulletList,
    CodeBlock,
    CodeBlockWrapper,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    Id,
    Image,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    User,
    flatten_attrs,
)
from prosetree.exceptions import ContentNotAllowedError, ProsetreeError


@pytest.mark.unit
class TestNodeBasics:
    """Test node construction and type tags."""

    def test_type_tags(self) -> None:
        """Test that each node class carries its fixed type tag."""
        assert Document().type == "doc"
        assert Paragraph().type == "paragraph"
        assert Text(text="a").type == "text"
        assert HardBreak().type == "hard_break"
        assert Heading(level=1).type == "heading"
        assert BulletList().type == "bullet_list"
        assert OrderedList().type == "ordered_list"
        assert ListItem().type == "list_item"
        assert Table().type == "table"
        assert TableRow().type == "table_row"
        assert TableCell().type == "table_cell"
        assert TableHeader().type == "table_header"
        assert Blockquote().type == "blockquote"
        assert HorizontalRule().type == "horizontal_rule"
        assert Image(src="a.png").type == "image"
        assert CodeBlockWrapper().type == "code_block_wrapper"
        assert User(id="1").type == "user"

    def test_generic_node_keeps_type(self) -> None:
        """Test that a generic node keeps an arbitrary type tag."""
        node = Node(type="callout")
        assert node.type == "callout"
        assert node.children is None

    def test_generic_node_add_child_creates_list(self) -> None:
        """Test that add_child lazily creates the children list."""
        node = Node(type="callout")
        child = node.add_child(Paragraph())
        assert node.children == [child]

    def test_container_defaults_to_empty_children(self) -> None:
        """Test that container nodes start with an empty content list."""
        assert Document().children == []
        assert Paragraph().children == []
        assert Text(text="a").children is None

    def test_attrs_dict_from_mapping(self) -> None:
        """Test attrs_dict with a plain mapping."""
        paragraph = Paragraph(attrs={"class": "lead"})
        assert paragraph.attrs_dict() == {"class": "lead"}

    def test_attrs_dict_from_attribute_list(self) -> None:
        """Test attrs_dict flattening a list of typed attributes and mappings."""
        paragraph = Paragraph(attrs=[Id("p1"), {"class": "lead"}])
        assert paragraph.attrs_dict() == {"id": "p1", "class": "lead"}

    def test_attrs_dict_none(self) -> None:
        """Test attrs_dict with no attributes."""
        assert Paragraph().attrs_dict() == {}

    def test_flatten_attrs_rejects_bad_entry(self) -> None:
        """Test that a list entry that is neither attribute nor mapping raises."""
        with pytest.raises(TypeError, match="Cannot flatten attribute entry"):
            flatten_attrs([42])


@pytest.mark.unit
class TestLeafNodes:
    """Test that leaf nodes reject children."""

    def test_image_rejects_children(self) -> None:
        """Test appending to an image raises ContentNotAllowedError."""
        image = Image(src="a.png")
        with pytest.raises(ContentNotAllowedError, match="Image nodes cannot have children"):
            image.add_child(Text(text="caption"))

    def test_horizontal_rule_rejects_children(self) -> None:
        """Test appending to a horizontal rule raises."""
        with pytest.raises(ContentNotAllowedError, match="HorizontalRule nodes cannot have children"):
            HorizontalRule().add_child(Paragraph())

    def test_user_rejects_children(self) -> None:
        """Test appending to a user mention raises."""
        with pytest.raises(ContentNotAllowedError):
            User(id="42").add_child(Text(text="x"))

    def test_text_rejects_children(self) -> None:
        """Test a text node cannot also hold children."""
        with pytest.raises(ContentNotAllowedError, match="Text nodes cannot have children"):
            Text(text="a").add_child(Text(text="b"))

    def test_hard_break_rejects_children(self) -> None:
        """Test appending to a hard break raises."""
        with pytest.raises(ContentNotAllowedError, match="HardBreak nodes cannot have children"):
            HardBreak().add_child(Text(text="x"))

    def test_content_not_allowed_is_type_error(self) -> None:
        """Test the error can be caught as TypeError or ProsetreeError."""
        with pytest.raises(TypeError):
            Image(src="a.png").add_child(Text(text="x"))
        with pytest.raises(ProsetreeError):
            Image(src="a.png").add_child(Text(text="x"))


@pytest.mark.unit
class TestValidation:
    """Test typed field validation."""

    def test_heading_level_out_of_range(self) -> None:
        """Test that heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError, match="Heading level must be 1-6, got 7"):
            Heading(level=7)
        with pytest.raises(ValueError, match="got 0"):
            Heading(level=0)

    def test_heading_level_optional(self) -> None:
        """Test that a heading may have no level."""
        assert Heading().level is None

    def test_table_header_invalid_scope(self) -> None:
        """Test that unknown header scopes are rejected."""
        with pytest.raises(ValueError, match="Invalid table header scope"):
            TableHeader(scope="diagonal")

    def test_table_header_non_positive_colspan(self) -> None:
        """Test that colspan must be positive."""
        with pytest.raises(ValueError, match="colspan must be positive"):
            TableHeader(colspan=0)

    def test_table_header_valid_fields(self) -> None:
        """Test a header with all typed fields set."""
        header = TableHeader(scope="col", abbr="N", colspan=2)
        assert (header.scope, header.abbr, header.colspan) == ("col", "N", 2)

    def test_ordered_list_default_start(self) -> None:
        """Test ordered lists start at 1 by default."""
        assert OrderedList().start == 1


@pytest.mark.unit
class TestDocumentBuilders:
    """Test builder helpers on Document."""

    def test_add_paragraph_with_text(self) -> None:
        """Test adding a paragraph seeded with text."""
        doc = Document()
        paragraph = doc.add_paragraph("Hello")
        assert doc.children == [paragraph]
        assert paragraph.children == [Text(text="Hello")]

    def test_add_paragraph_without_text(self) -> None:
        """Test adding an empty paragraph."""
        doc = Document()
        paragraph = doc.add_paragraph()
        assert paragraph.children == []

    def test_add_text_with_marks(self) -> None:
        """Test appending marked text to a paragraph."""
        paragraph = Document().add_paragraph("Hello ")
        text = paragraph.add_text("world", [Bold()])
        assert text is not None
        assert text.marks == [Bold()]
        assert len(paragraph.text_nodes) == 2

    def test_add_text_ignores_empty(self) -> None:
        """Test that None or empty text is not appended."""
        paragraph = Paragraph()
        assert paragraph.add_text("") is None
        assert paragraph.add_text(None) is None
        assert paragraph.children == []

    def test_add_hard_break(self) -> None:
        """Test appending a hard break."""
        paragraph = Paragraph()
        paragraph.add_text("Line 1")
        paragraph.add_hard_break()
        paragraph.add_text("Line 2")
        assert [child.type for child in paragraph.children] == ["text", "hard_break", "text"]

    def test_add_heading(self) -> None:
        """Test adding a heading and filling it with text."""
        doc = Document()
        heading = doc.add_heading(2)
        heading.add_text("Title")
        assert heading.level == 2
        assert heading.text_content == "Title"

    def test_add_leaf_nodes(self) -> None:
        """Test adding image, rule and mention nodes."""
        doc = Document()
        image = doc.add_image("a.png", alt="A", width=10)
        rule = doc.add_horizontal_rule(style="dashed", thickness=2)
        user = doc.add_user("42")
        assert doc.children == [image, rule, user]
        assert image.width == 10
        assert rule.style == "dashed"
        assert user.id == "42"

    def test_paragraphs_and_tables_accessors(self) -> None:
        """Test top-level accessors filter by kind."""
        doc = Document()
        doc.add_paragraph("a")
        doc.add_table()
        doc.add_paragraph("b")
        assert len(doc.paragraphs) == 2
        assert len(doc.tables) == 1


@pytest.mark.unit
class TestLists:
    """Test list builders and accessors."""

    def test_add_items(self) -> None:
        """Test adding several items."""
        bullet_list = Document().add_bullet_list()
        bullet_list.add_items(["one", "two"])
        assert len(bullet_list.items) == 2
        assert bullet_list.item_at(1).text_content == "two"

    def test_item_at_out_of_range(self) -> None:
        """Test item_at returns None for invalid indices."""
        ordered = OrderedList()
        ordered.add_item("only")
        assert ordered.item_at(1) is None
        assert ordered.item_at(-1) is None

    def test_list_item_add_text_appends_to_trailing_paragraph(self) -> None:
        """Test ListItem.add_text reuses the last paragraph."""
        item = ListItem()
        item.add_text("Hello ")
        item.add_text("world")
        assert len(item.children) == 1
        assert item.text_content == "Hello world"

    def test_list_item_add_content(self) -> None:
        """Test nesting a list inside an item."""
        item = ListItem()
        item.add_paragraph("Parent")
        nested = item.add_content(BulletList())
        nested.add_item("Child")
        assert item.text_content == "Parent\nChild"

    def test_list_text_content(self) -> None:
        """Test lists join items with newlines."""
        ordered = Document().add_ordered_list(start=3)
        ordered.add_items(["Third", "Fourth"])
        assert ordered.start == 3
        assert ordered.text_content == "Third\nFourth"


@pytest.mark.unit
class TestTables:
    """Test table builders and accessors."""

    def test_header_and_rows(self) -> None:
        """Test building a table with a header row and data rows."""
        table = Document().add_table()
        table.add_header(["Name", "Age"])
        table.add_rows([["Alice", "30"], ["Bob", "25"]])

        assert table.has_header_row
        assert table.header_row is table.rows[0]
        assert len(table.data_rows) == 2
        assert table.cell_at(0, 1).text_content == "30"
        assert table.cell_at(1, 0).text_content == "Bob"

    def test_cell_at_out_of_range(self) -> None:
        """Test cell_at returns None for invalid coordinates."""
        table = Table()
        table.add_row(["a"])
        assert table.cell_at(0, 1) is None
        assert table.cell_at(1, 0) is None
        assert table.cell_at(-1, 0) is None

    def test_no_header_row(self) -> None:
        """Test a table whose first row has data cells."""
        table = Table()
        table.add_row(["a", "b"])
        assert not table.has_header_row
        assert table.header_row is None
        assert table.cell_at(0, 0).text_content == "a"

    def test_mixed_first_row_is_not_header(self) -> None:
        """Test a first row mixing header and data cells."""
        row = TableRow()
        row.add_header_cell("Key")
        row.add_cell("Value")
        table = Table(children=[row])
        assert not row.is_header_row
        assert not table.has_header_row

    def test_empty_row_is_not_header(self) -> None:
        """Test that an empty row is never a header row."""
        assert not TableRow().is_header_row

    def test_cell_lines(self) -> None:
        """Test TableCell.lines splits paragraphs into stripped lines."""
        cell = TableCell()
        cell.add_paragraph(" first ")
        cell.add_paragraph("second")
        assert cell.lines == ["first", "second"]
        assert len(cell.paragraphs) == 2

    def test_cell_add_text(self) -> None:
        """Test TableCell.add_text appends to the trailing paragraph."""
        cell = TableCell()
        cell.add_text("a")
        cell.add_text("b")
        assert cell.text_content == "ab"


@pytest.mark.unit
class TestBlockquote:
    """Test blockquote helpers."""

    def test_citation(self) -> None:
        """Test citation accessors."""
        quote = Document().add_blockquote(citation="https://example.com")
        assert quote.has_citation
        quote.remove_citation()
        assert not quote.has_citation
        assert quote.citation is None

    def test_blocks(self) -> None:
        """Test adding and reading blocks."""
        quote = Blockquote()
        first = quote.add_paragraph("One")
        quote.add_blocks([Paragraph(children=[Text(text="Two")])])
        assert quote.block_at(0) is first
        assert quote.block_at(2) is None
        assert len(quote.blocks) == 2
        assert quote.text_content == "One\nTwo"


@pytest.mark.unit
class TestQueries:
    """Test tree queries."""

    def _build(self) -> Document:
        doc = Document()
        doc.add_paragraph("first")
        bullet_list = doc.add_bullet_list()
        bullet_list.add_item("nested")
        doc.add_paragraph("last")
        return doc

    def test_find_first_pre_order(self) -> None:
        """Test find_first returns the first match in document order."""
        doc = self._build()
        first = doc.find_first("paragraph")
        assert first is doc.children[0]

    def test_find_first_includes_self(self) -> None:
        """Test find_first matches the starting node."""
        doc = self._build()
        assert doc.find_first("doc") is doc

    def test_find_first_missing(self) -> None:
        """Test find_first returns None without a match."""
        assert self._build().find_first("table") is None

    def test_find_all_pre_order(self) -> None:
        """Test find_all returns matches in document order."""
        doc = self._build()
        texts = [node.text for node in doc.find_all("text")]
        assert texts == ["first", "nested", "last"]

    def test_find_children_by_type_and_class(self) -> None:
        """Test find_children with a type tag and with a class."""
        doc = self._build()
        assert len(doc.find_children("paragraph")) == 2
        assert len(doc.find_children(BulletList)) == 1
        assert doc.find_children("text") == []


@pytest.mark.unit
class TestTextContent:
    """Test text extraction."""

    def test_paragraph_with_hard_break(self) -> None:
        """Test hard breaks contribute a newline."""
        paragraph = Paragraph()
        paragraph.add_text("Line 1")
        paragraph.add_hard_break()
        paragraph.add_text("Line 2")
        assert paragraph.text_content == "Line 1\nLine 2"

    def test_document_joins_blocks_and_strips(self) -> None:
        """Test documents join blocks with newlines and strip the result."""
        doc = Document()
        doc.add_paragraph("  Hello")
        doc.add_paragraph("World  ")
        assert doc.text_content == "Hello\nWorld"

    def test_leaf_nodes_have_no_text(self) -> None:
        """Test image and user nodes have empty text."""
        assert Image(src="a.png").text_content == ""
        assert User(id="1").text_content == ""

    def test_code_blocks(self) -> None:
        """Test code wrappers join their blocks with newlines."""
        wrapper = CodeBlockWrapper()
        wrapper.add_code_block("a = 1", language="python")
        wrapper.add_code_block("b = 2")
        assert wrapper.text_content == "a = 1\nb = 2"
        assert len(wrapper.code_blocks) == 2


@pytest.mark.unit
class TestAttrsNormalization:
    """Test that attribute bags are stored as one plain mapping."""

    def test_attribute_list_stored_as_mapping(self) -> None:
        """Test a list of typed attributes is flattened on construction."""
        paragraph = Paragraph(attrs=[Id("p1"), {"class": "lead"}])
        assert paragraph.attrs == {"id": "p1", "class": "lead"}

    def test_empty_attrs_become_none(self) -> None:
        """Test an empty bag is stored as None."""
        assert Paragraph(attrs={}).attrs is None
        assert Paragraph(attrs=[]).attrs is None

    def test_equality_ignores_attrs_encoding(self) -> None:
        """Test nodes and marks compare equal across attrs encodings."""
        assert Paragraph(attrs=[Attribute("class", "lead")]) == Paragraph(attrs={"class": "lead"})
        assert Link(attrs=[Attribute("href", "/a")]) == Link(attrs={"href": "/a"})

    def test_typed_subclasses_still_validate(self) -> None:
        """Test kinds with their own validation also normalize attrs."""
        heading = Heading(level=2, attrs=[Id("intro")])
        assert heading.attrs == {"id": "intro"}
        with pytest.raises(ValueError):
            TableHeader(scope="diagonal", attrs=[Id("h")])


@pytest.mark.unit
class TestCodeBlockLines:
    """Test code blocks holding their code as Text children."""

    def test_code_field_has_no_children(self) -> None:
        """Test a plain code block has no content slot."""
        block = CodeBlock(code="x = 1")
        assert block.children is None
        assert block.code_text == "x = 1"

    def test_add_lines(self) -> None:
        """Test lines are appended as Text children and joined by newlines."""
        block = CodeBlock(language="python")
        block.add_line("def f():")
        block.add_lines(["    return 1"])
        assert [child.text for child in block.children] == ["def f():", "    return 1"]
        assert block.code_text == "def f():\n    return 1"
        assert block.text_content == "def f():\n    return 1"

    def test_code_field_wins_over_children(self) -> None:
        """Test the code field is preferred when both are set."""
        block = CodeBlock(code="a")
        block.add_line("b")
        assert block.code_text == "a"

    def test_normalized_code(self) -> None:
        """Test common indentation is removed and empty lines kept."""
        block = CodeBlock(code="    if x:\n\n        y()\n    z()")
        assert block.normalized_code == "if x:\n\n    y()\nz()"

    def test_normalized_code_without_indent(self) -> None:
        """Test code without shared indentation is unchanged."""
        assert CodeBlock(code="a\n  b").normalized_code == "a\n  b"
        assert CodeBlock().normalized_code == ""

    def test_wrapper_text_content_uses_lines(self) -> None:
        """Test a wrapper reads text from line-based code blocks."""
        wrapper = CodeBlockWrapper()
        wrapper.add_child(CodeBlock()).add_lines(["a", "b"])
        wrapper.add_code_block("c")
        assert wrapper.text_content == "a\nb\nc"


@pytest.mark.unit
class TestImageDimensions:
    """Test the Image.dimensions convenience property."""

    def test_read(self) -> None:
        assert Image(src="a.png", width=10, height=20).dimensions == (10, 20)

    def test_write(self) -> None:
        """Test setting both sides, then only one."""
        image = Image(src="a.png")
        image.dimensions = (100, 50)
        assert (image.width, image.height) == (100, 50)
        image.dimensions = (None, 75)
        assert (image.width, image.height) == (100, 75)


@pytest.mark.unit
class TestOrderedListOrder:
    """Test the OrderedList.order numbering style."""

    def test_default(self) -> None:
        assert OrderedList().order == 1

    def test_set_order(self) -> None:
        """Test the order lives in the untyped attrs and survives serialization."""
        ordered = OrderedList(start=3)
        ordered.order = "a"
        assert ordered.order == "a"
        assert ordered.attrs == {"order": "a"}
        assert ordered.start == 3

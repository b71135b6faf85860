#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/ast/nodes.py
"""Node classes for document tree representation.

This module defines the node hierarchy used to represent rich-text documents
in the block/inline editor JSON model. Each node is a dataclass carrying a
fixed ``type`` tag, an optional ``children`` list, optional ``marks`` and an
optional untyped ``attrs`` bag.

The node hierarchy is designed to:
- Mirror the canonical ``type``/``attrs``/``marks``/``content``/``text`` shape
- Enable multiple rendering strategies via the visitor pattern
- Preserve unknown node types verbatim for forward compatibility

Node Hierarchy
--------------
All nodes inherit from :class:`Node`. A bare ``Node`` is the generic variant
used for ``type`` values this library does not know.

Block-level nodes:
    - Document, Paragraph, Heading, Blockquote, HorizontalRule
    - BulletList, OrderedList, ListItem
    - Table, TableRow, TableCell, TableHeader
    - CodeBlockWrapper, CodeBlock, Image

Inline nodes:
    - Text, HardBreak, User

Children
--------
``children`` is ``None`` when a node has no content slot and ``[]`` when the
slot exists but is empty. Read-only traversal treats both the same way;
:meth:`Node.add_child` allocates the list lazily. Text, HardBreak, Image,
HorizontalRule and User nodes never accept children.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Optional, Type, TypeVar, Union

from prosetree.ast.attributes import AttrsInput, flatten_attrs
from prosetree.ast.marks import Mark
from prosetree.constants import (
    DEFAULT_ORDERED_LIST_ORDER,
    DEFAULT_ORDERED_LIST_START,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_CODE_BLOCK_WRAPPER,
    NODE_DOCUMENT,
    NODE_HARD_BREAK,
    NODE_HEADING,
    NODE_HORIZONTAL_RULE,
    NODE_IMAGE,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
    NODE_TABLE,
    NODE_TABLE_CELL,
    NODE_TABLE_HEADER,
    NODE_TABLE_ROW,
    NODE_TEXT,
    NODE_USER,
    VALID_TABLE_HEADER_SCOPES,
)
from prosetree.exceptions import ContentNotAllowedError

N = TypeVar("N", bound="Node")


@dataclass
class Node:
    """Base class for all document nodes, and the generic node variant.

    Instantiated directly, ``Node`` represents a node whose ``type`` is not
    known to this library. It keeps its attributes, marks and children
    verbatim so the tree round-trips unchanged.

    Parameters
    ----------
    type : str, default = "node"
        Node type tag. Fixed by each subclass.
    children : list of Node or None, default = None
        Child nodes; None means the node has no content slot
    marks : list of Mark or None, default = None
        Inline marks (meaningful on Text and HardBreak only)
    attrs : dict, list of Attribute or None, default = None
        Additional attributes without a typed field. Stored as one plain
        mapping, or None when empty.

    """

    type: str = "node"
    children: Optional[list[Node]] = None
    marks: Optional[list[Mark]] = None
    attrs: AttrsInput = None

    _TEXT_SEPARATOR: ClassVar[str] = ""

    def __post_init__(self) -> None:
        """Store ``attrs`` as one plain mapping, or None when empty."""
        self.attrs = flatten_attrs(self.attrs) or None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.visit_node(self)

    def attrs_dict(self) -> dict[str, Any]:
        """Return the untyped attribute bag as a plain mapping."""
        return flatten_attrs(self.attrs)

    def add_child(self, child: N) -> N:
        """Append ``child`` to this node's children and return it.

        Parameters
        ----------
        child : Node
            Node to append

        Returns
        -------
        Node
            The appended child, for chaining

        """
        if self.children is None:
            self.children = []
        self.children.append(child)
        return child

    def find_first(self, node_type: str) -> Optional[Node]:
        """Return the first node of ``node_type`` in pre-order, including self.

        Parameters
        ----------
        node_type : str
            The ``type`` tag to look for

        Returns
        -------
        Node or None
            The first match, or None when there is none

        """
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if node.type == node_type:
                return node
            if node.children:
                stack.extend(reversed(node.children))
        return None

    def find_all(self, node_type: str) -> list[Node]:
        """Return every node of ``node_type`` in pre-order, including self."""
        matches: list[Node] = []
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if node.type == node_type:
                matches.append(node)
            if node.children:
                stack.extend(reversed(node.children))
        return matches

    def find_children(self, node_type: Union[str, Type[Node]]) -> list[Node]:
        """Return direct children matching a type tag or a node class.

        Parameters
        ----------
        node_type : str or type
            A ``type`` tag such as ``"paragraph"`` or a class such as
            :class:`Paragraph`

        Returns
        -------
        list of Node
            Matching children in document order

        """
        if isinstance(node_type, str):
            return [child for child in self.children or [] if child.type == node_type]
        return [child for child in self.children or [] if isinstance(child, node_type)]

    @property
    def text_content(self) -> str:
        """Plain text of this subtree."""
        return self._TEXT_SEPARATOR.join(child.text_content for child in self.children or [])


class _LeafMixin:
    """Rejects children for node kinds without a content slot."""

    def add_child(self, child: Node) -> Node:
        raise ContentNotAllowedError(type(self).__name__)


class _InlineContentMixin:
    """Builder helpers for nodes holding a run of inline content."""

    children: Optional[list[Node]]

    @property
    def text_nodes(self) -> list[Text]:
        """Direct Text children."""
        return [child for child in self.children or [] if isinstance(child, Text)]

    def add_text(self, text: Optional[str], marks: Optional[Iterable[Mark]] = None) -> Optional[Text]:
        """Append a text node; None or empty text is ignored and returns None."""
        if not text:
            return None
        marks_list = list(marks) if marks else None
        return self.add_child(Text(text=text, marks=marks_list))  # type: ignore[attr-defined]

    def add_hard_break(self, marks: Optional[Iterable[Mark]] = None) -> HardBreak:
        """Append a hard line break."""
        marks_list = list(marks) if marks else None
        return self.add_child(HardBreak(marks=marks_list))  # type: ignore[attr-defined]


# ============================================================================
# Document
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children.

    The text content of a document joins its blocks with newlines and is
    stripped of leading and trailing whitespace.
    """

    type: str = field(default=NODE_DOCUMENT, init=False)
    children: Optional[list[Node]] = field(default_factory=list)

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)

    @property
    def text_content(self) -> str:
        """Plain text of the document, blocks separated by newlines."""
        return super().text_content.strip()

    @property
    def paragraphs(self) -> list[Paragraph]:
        """Top-level paragraphs."""
        return [child for child in self.children or [] if isinstance(child, Paragraph)]

    @property
    def tables(self) -> list[Table]:
        """Top-level tables."""
        return [child for child in self.children or [] if isinstance(child, Table)]

    def add_paragraph(self, text: Optional[str] = None, attrs: AttrsInput = None) -> Paragraph:
        """Append a paragraph, optionally seeded with a text run."""
        paragraph = self.add_child(Paragraph(attrs=attrs))
        paragraph.add_text(text)
        return paragraph

    def add_heading(self, level: int) -> Heading:
        return self.add_child(Heading(level=level))

    def add_table(self, attrs: AttrsInput = None) -> Table:
        return self.add_child(Table(attrs=attrs))

    def add_bullet_list(self, bullet_style: Optional[str] = None) -> BulletList:
        return self.add_child(BulletList(bullet_style=bullet_style))

    def add_ordered_list(self, start: int = DEFAULT_ORDERED_LIST_START) -> OrderedList:
        return self.add_child(OrderedList(start=start))

    def add_blockquote(self, citation: Optional[str] = None) -> Blockquote:
        return self.add_child(Blockquote(citation=citation))

    def add_horizontal_rule(
        self, style: Optional[str] = None, width: Optional[str] = None, thickness: Optional[int] = None
    ) -> HorizontalRule:
        return self.add_child(HorizontalRule(style=style, width=width, thickness=thickness))

    def add_image(
        self,
        src: str,
        alt: Optional[str] = None,
        title: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> Image:
        """Append an image node."""
        return self.add_child(Image(src=src, alt=alt, title=title, width=width, height=height))

    def add_code_block_wrapper(
        self, line_numbers: bool = False, highlight_lines: Optional[list[int]] = None
    ) -> CodeBlockWrapper:
        return self.add_child(CodeBlockWrapper(line_numbers=line_numbers, highlight_lines=list(highlight_lines or [])))

    def add_user(self, id: str) -> User:
        """Append a user mention."""
        return self.add_child(User(id=id))


# ============================================================================
# Text and inline nodes
# ============================================================================


@dataclass
class Text(_LeafMixin, Node):
    """Text run with optional marks.

    Parameters
    ----------
    text : str or None, default = None
        The literal text
    marks : list of Mark or None, default = None
        Formatting applied to the text, innermost first

    """

    type: str = field(default=NODE_TEXT, init=False)
    text: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)

    @property
    def text_content(self) -> str:
        return self.text or ""


@dataclass
class HardBreak(_LeafMixin, Node):
    """Forced line break inside inline content."""

    type: str = field(default=NODE_HARD_BREAK, init=False)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_hard_break(self)

    @property
    def text_content(self) -> str:
        return "\n"


@dataclass
class User(_LeafMixin, Node):
    """Mention of a user, identified by ``id``."""

    type: str = field(default=NODE_USER, init=False)
    id: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_user(self)


# ============================================================================
# Block nodes
# ============================================================================


@dataclass
class Paragraph(_InlineContentMixin, Node):
    """Paragraph node containing inline content."""

    type: str = field(default=NODE_PARAGRAPH, init=False)
    children: Optional[list[Node]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_paragraph method

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self)

        """
        return visitor.visit_paragraph(self)


@dataclass
class Heading(_InlineContentMixin, Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int or None, default = None
        Heading level (1-6, where 1 is most important). None is rendered
        as a level 1 heading.

    Raises
    ------
    ValueError
        If ``level`` is set and outside 1-6

    """

    type: str = field(default=NODE_HEADING, init=False)
    children: Optional[list[Node]] = field(default_factory=list)
    level: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        super().__post_init__()
        if self.level is not None and not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class Blockquote(Node):
    """Quoted block content with an optional citation URL."""

    type: str = field(default=NODE_BLOCKQUOTE, init=False)
    children: Optional[list[Node]] = field(default_factory=list)
    citation: Optional[str] = None

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_blockquote(self)

    @property
    def blocks(self) -> list[Node]:
        """Quoted blocks in document order."""
        return list(self.children or [])

    @property
    def has_citation(self) -> bool:
        return bool(self.citation)

    def remove_citation(self) -> None:
        self.citation = None

    def add_block(self, block: N) -> N:
        return self.add_child(block)

    def add_blocks(self, blocks: Iterable[Node]) -> None:
        for block in blocks:
            self.add_child(block)

    def block_at(self, index: int) -> Optional[Node]:
        """Return the block at ``index``, or None if out of range."""
        blocks = self.children or []
        if index < 0 or index >= len(blocks):
            return None
        return blocks[index]

    def add_paragraph(self, text: Optional[str] = None) -> Paragraph:
        paragraph = self.add_child(Paragraph())
        paragraph.add_text(text)
        return paragraph


@dataclass
class HorizontalRule(_LeafMixin, Node):
    """Horizontal rule with optional literal styling.

    Parameters
    ----------
    style : str or None, default = None
        CSS border style (``solid``, ``dashed``, ...)
    width : str or None, default = None
        CSS width (``"50%"``, ``"200px"``)
    thickness : int or None, default = None
        Border width in pixels

    """

    type: str = field(default=NODE_HORIZONTAL_RULE, init=False)
    style: Optional[str] = None
    width: Optional[str] = None
    thickness: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_horizontal_rule(self)


@dataclass
class Image(_LeafMixin, Node):
    """Image node.

    Parameters
    ----------
    src : str or None, default = None
        Image source URL or data URI
    alt : str or None, default = None
        Alternative text description
    title : str or None, default = None
        Optional image title
    width : int or None, default = None
        Optional width in pixels
    height : int or None, default = None
        Optional height in pixels

    """

    type: str = field(default=NODE_IMAGE, init=False)
    src: Optional[str] = None
    alt: Optional[str] = None
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_image method

        Returns
        -------
        Any
            Result from visitor.visit_image(self)

        """
        return visitor.visit_image(self)

    @property
    def dimensions(self) -> tuple[Optional[int], Optional[int]]:
        """The ``(width, height)`` pair."""
        return self.width, self.height

    @dimensions.setter
    def dimensions(self, value: tuple[Optional[int], Optional[int]]) -> None:
        """Set width and height; a None entry leaves that side unchanged."""
        width, height = value
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height


# ============================================================================
# Lists
# ============================================================================


@dataclass
class ListItem(Node):
    """List item holding block content."""

    type: str = field(default=NODE_LIST_ITEM, init=False)
    children: Optional[list[Node]] = field(default_factory=list)

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)

    def add_paragraph(self, text: Optional[str] = None) -> Paragraph:
        paragraph = self.add_child(Paragraph())
        paragraph.add_text(text)
        return paragraph

    def add_text(self, text: Optional[str], marks: Optional[Iterable[Mark]] = None) -> Optional[Text]:
        """Append text to the trailing paragraph, creating one if needed."""
        children = self.children or []
        last = children[-1] if children else None
        if not isinstance(last, Paragraph):
            last = self.add_paragraph()
        return last.add_text(text, marks)

    def add_content(self, node: N) -> N:
        return self.add_child(node)


class _ListMixin:
    """Item accessors shared by bullet and ordered lists."""

    children: Optional[list[Node]]

    @property
    def items(self) -> list[ListItem]:
        """List items in order."""
        return [child for child in self.children or [] if isinstance(child, ListItem)]

    def add_item(self, text: Optional[str] = None) -> ListItem:
        """Append a list item holding one paragraph of ``text``."""
        item = self.add_child(ListItem())  # type: ignore[attr-defined]
        item.add_paragraph(text)
        return item

    def add_items(self, texts: Iterable[Optional[str]]) -> list[ListItem]:
        return [self.add_item(text) for text in texts]

    def item_at(self, index: int) -> Optional[ListItem]:
        items = self.items
        if index < 0 or index >= len(items):
            return None
        return items[index]


@dataclass
class BulletList(_ListMixin, Node):
    """Unordered list.

    Parameters
    ----------
    bullet_style : str or None, default = None
        CSS ``list-style-type`` value; None means no explicit style

    """

    type: str = field(default=NODE_BULLET_LIST, init=False)
    children: Optional[list[Node]] = field(default_factory=list)
    bullet_style: Optional[str] = None

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(_ListMixin, Node):
    """Ordered list.

    Parameters
    ----------
    start : int, default = 1
        Number of the first item

    """

    type: str = field(default=NODE_ORDERED_LIST, init=False)
    children: Optional[list[Node]] = field(default_factory=list)
    start: int = DEFAULT_ORDERED_LIST_START

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_ordered_list(self)

    @property
    def order(self) -> Any:
        """Numbering style such as ``1``, ``"a"`` or ``"i"``, kept in the untyped attrs."""
        return self.attrs_dict().get("order", DEFAULT_ORDERED_LIST_ORDER)

    @order.setter
    def order(self, value: Any) -> None:
        attrs = self.attrs_dict()
        attrs["order"] = value
        self.attrs = attrs


# ============================================================================
# Tables
# ============================================================================


@dataclass
class TableCell(Node):
    """Table data cell holding block content (usually paragraphs)."""

    type: str = field(default=NODE_TABLE_CELL, init=False)
    children: Optional[list[Node]] = field(default_factory=list)

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_cell(self)

    @property
    def paragraphs(self) -> list[Paragraph]:
        return [child for child in self.children or [] if isinstance(child, Paragraph)]

    @property
    def lines(self) -> list[str]:
        """Non-empty stripped lines of the cell text."""
        return [line.strip() for line in self.text_content.split("\n") if line.strip()]

    def add_paragraph(self, text: Optional[str] = None) -> Paragraph:
        paragraph = self.add_child(Paragraph())
        paragraph.add_text(text)
        return paragraph

    def add_text(self, text: Optional[str], marks: Optional[Iterable[Mark]] = None) -> Optional[Text]:
        """Append text to the trailing paragraph, creating one if needed."""
        children = self.children or []
        last = children[-1] if children else None
        if not isinstance(last, Paragraph):
            last = self.add_paragraph()
        return last.add_text(text, marks)


@dataclass
class TableHeader(TableCell):
    """Table header cell.

    Parameters
    ----------
    scope : {"row", "col", "rowgroup", "colgroup"} or None, default = None
        Cells the header applies to
    abbr : str or None, default = None
        Abbreviated header text
    colspan : int or None, default = None
        Number of columns spanned (positive)

    Raises
    ------
    ValueError
        If ``scope`` is not a recognized value or ``colspan`` is not positive

    """

    type: str = field(default=NODE_TABLE_HEADER, init=False)
    scope: Optional[str] = None
    abbr: Optional[str] = None
    colspan: Optional[int] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.scope is not None and self.scope not in VALID_TABLE_HEADER_SCOPES:
            raise ValueError(f"Invalid table header scope: {self.scope!r}")
        if self.colspan is not None and self.colspan <= 0:
            raise ValueError(f"colspan must be positive, got {self.colspan}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_header(self)


@dataclass
class TableRow(Node):
    """Table row containing data and header cells."""

    type: str = field(default=NODE_TABLE_ROW, init=False)
    children: Optional[list[Node]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)

    @property
    def cells(self) -> list[TableCell]:
        """Data and header cells in column order."""
        return [child for child in self.children or [] if isinstance(child, TableCell)]

    @property
    def is_header_row(self) -> bool:
        """True when the row has cells and all of them are header cells."""
        cells = self.cells
        return bool(cells) and all(isinstance(cell, TableHeader) for cell in cells)

    def add_cell(self, text: Optional[str] = None) -> TableCell:
        cell = self.add_child(TableCell())
        cell.add_paragraph(text)
        return cell

    def add_header_cell(self, text: Optional[str] = None) -> TableHeader:
        cell = self.add_child(TableHeader())
        cell.add_paragraph(text)
        return cell


@dataclass
class Table(Node):
    """Table node.

    Whether the table has a header row is computed from its content: the
    first row is the header row when all of its cells are
    :class:`TableHeader` nodes.
    """

    type: str = field(default=NODE_TABLE, init=False)
    children: Optional[list[Node]] = field(default_factory=list)

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_table method

        Returns
        -------
        Any
            Result from visitor.visit_table(self)

        """
        return visitor.visit_table(self)

    @property
    def rows(self) -> list[TableRow]:
        return [child for child in self.children or [] if isinstance(child, TableRow)]

    @property
    def has_header_row(self) -> bool:
        rows = self.rows
        return bool(rows) and rows[0].is_header_row

    @property
    def header_row(self) -> Optional[TableRow]:
        """The header row, or None when the first row is not all headers."""
        return self.rows[0] if self.has_header_row else None

    @property
    def data_rows(self) -> list[TableRow]:
        rows = self.rows
        return rows[1:] if self.has_header_row else rows

    def cell_at(self, row_index: int, col_index: int) -> Optional[TableCell]:
        """Return a cell by data-row and column index.

        The header row is not counted. Negative or out-of-range indices
        return None.
        """
        if row_index < 0 or col_index < 0:
            return None
        data_rows = self.data_rows
        if row_index >= len(data_rows):
            return None
        cells = data_rows[row_index].cells
        if col_index >= len(cells):
            return None
        return cells[col_index]

    def add_header(self, texts: Iterable[Optional[str]]) -> TableRow:
        """Append a row of header cells."""
        row = TableRow()
        for text in texts:
            row.add_header_cell(text)
        return self.add_child(row)

    def add_row(self, texts: Iterable[Optional[str]] = ()) -> TableRow:
        """Append a row of data cells."""
        row = TableRow()
        for text in texts:
            row.add_cell(text)
        return self.add_child(row)

    def add_rows(self, rows: Iterable[Iterable[Optional[str]]]) -> list[TableRow]:
        return [self.add_row(texts) for texts in rows]


# ============================================================================
# Code
# ============================================================================


@dataclass
class CodeBlock(Node):
    """Literal code with an optional language.

    The code is normally stored in ``code``. Editors may instead send it as
    Text children, one per line; :attr:`code_text` reads whichever is set,
    preferring ``code``.

    Parameters
    ----------
    code : str or None, default = None
        The code text
    language : str or None, default = None
        Language identifier for syntax highlighting
    line_numbers : bool, default = False
        Whether line numbers should be displayed

    """

    type: str = field(default=NODE_CODE_BLOCK, init=False)
    code: Optional[str] = None
    language: Optional[str] = None
    line_numbers: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_block method

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)

    @property
    def code_text(self) -> str:
        """The ``code`` string, or the Text children joined by newlines."""
        if self.code is not None:
            return self.code
        return "\n".join(child.text_content for child in self.children or [])

    @property
    def normalized_code(self) -> str:
        """:attr:`code_text` with the common leading indentation removed.

        Indentation is measured over non-empty lines only; empty lines are
        kept as they are.
        """
        lines = self.code_text.split("\n")
        indents = [len(line) - len(line.lstrip()) for line in lines if line]
        if not indents:
            return self.code_text
        min_indent = min(indents)
        return "\n".join(line[min_indent:] if line else line for line in lines)

    @property
    def text_content(self) -> str:
        return self.code_text

    def add_line(self, text: str) -> Text:
        """Append one line of code as a Text child."""
        return self.add_child(Text(text=text))

    def add_lines(self, lines: Iterable[str]) -> list[Text]:
        return [self.add_line(line) for line in lines]


@dataclass
class CodeBlockWrapper(Node):
    """Container for one or more code blocks (rendered as ``<pre>``).

    Parameters
    ----------
    line_numbers : bool, default = False
        Whether line numbers should be displayed
    highlight_lines : list of int, default = empty list
        One-based line numbers to highlight

    """

    type: str = field(default=NODE_CODE_BLOCK_WRAPPER, init=False)
    children: Optional[list[Node]] = field(default_factory=list)
    line_numbers: bool = False
    highlight_lines: list[int] = field(default_factory=list)

    _TEXT_SEPARATOR: ClassVar[str] = "\n"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block_wrapper(self)

    @property
    def code_blocks(self) -> list[CodeBlock]:
        return [child for child in self.children or [] if isinstance(child, CodeBlock)]

    def add_code_block(self, code: Optional[str] = None, language: Optional[str] = None) -> CodeBlock:
        return self.add_child(CodeBlock(code=code, language=language))


NODE_CLASSES: dict[str, type[Node]] = {
    NODE_DOCUMENT: Document,
    NODE_PARAGRAPH: Paragraph,
    NODE_TEXT: Text,
    NODE_HEADING: Heading,
    NODE_TABLE: Table,
    NODE_TABLE_ROW: TableRow,
    NODE_TABLE_CELL: TableCell,
    NODE_TABLE_HEADER: TableHeader,
    NODE_HARD_BREAK: HardBreak,
    NODE_BULLET_LIST: BulletList,
    NODE_ORDERED_LIST: OrderedList,
    NODE_LIST_ITEM: ListItem,
    NODE_BLOCKQUOTE: Blockquote,
    NODE_HORIZONTAL_RULE: HorizontalRule,
    NODE_IMAGE: Image,
    NODE_CODE_BLOCK: CodeBlock,
    NODE_CODE_BLOCK_WRAPPER: CodeBlockWrapper,
    NODE_USER: User,
}

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/parsers/html.py
"""HTML to document tree converter.

This module converts HTML into the node model. BeautifulSoup builds the
DOM; the converter walks it recursively and maps elements to nodes.

Conversion rules
----------------
- Comments, doctype declarations, whitespace-only text and ``script``,
  ``style`` and ``head`` elements are skipped.
- Inline styling tags do not produce nodes of their own. They add a mark
  to every text node beneath them. Marks are carried down as an immutable
  tuple and each tag prepends its mark, so the innermost tag comes first:
  ``<strong><u>x</u></strong>`` yields a text node with marks
  ``[underline, bold]``.
- Elements are converted in either block context (document body, ``div``,
  list items, table cells, blockquotes) or inline context (paragraphs,
  headings, styling tags). In block context runs of text and hard breaks
  are gathered into a synthesized paragraph. User mentions are inline and
  join the surrounding run. In inline context ``span`` and
  unknown containers are transparent.
- A generic container in block context becomes a single paragraph when
  its descendants are all text or inline-safe tags, and is flattened into
  its converted children otherwise.
- Malformed shapes never raise: an ``img`` without ``src`` or a mention
  without its id attribute contributes no node.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from prosetree.ast import (
    Blockquote,
    BulletList,
    CodeBlock,
    CodeBlockWrapper,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    Image,
    Link,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    User,
    create_mark,
)
from prosetree.constants import (
    DEFAULT_ORDERED_LIST_START,
    DEPS_HTML,
    HEADING_TAGS,
    HTML_MARK_TAGS,
    INLINE_SAFE_ELEMENTS,
    MARK_LINK,
    SKIPPED_ELEMENTS,
    VALID_TABLE_HEADER_SCOPES,
)
from prosetree.exceptions import DependencyError
from prosetree.options.html import HtmlOptions
from prosetree.parsers.base import BaseParser, ParserInput
from prosetree.utils.decorators import requires_dependencies
from prosetree.utils.html_utils import parse_inline_style, parse_int, parse_pixels

logger = logging.getLogger(__name__)

MarkStack = tuple[Mark, ...]

_INLINE_RESULT_TYPES = (Text, HardBreak, User)
_TABLE_SECTIONS = frozenset({"thead", "tbody", "tfoot"})


class HtmlParser(BaseParser):
    """Convert HTML to a document tree.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options

    Examples
    --------
        >>> parser = HtmlParser()
        >>> doc = parser.parse("<p>Hello <strong>world</strong></p>")
        >>> doc.text_content
        'Hello world'

    """

    # Dispatch table mapping HTML element names to processing methods
    _ELEMENT_HANDLERS = {
        "p": "_process_paragraph",
        "h1": "_process_heading",
        "h2": "_process_heading",
        "h3": "_process_heading",
        "h4": "_process_heading",
        "h5": "_process_heading",
        "h6": "_process_heading",
        "br": "_process_hard_break",
        "hr": "_process_horizontal_rule",
        "img": "_process_image",
        "ul": "_process_bullet_list",
        "ol": "_process_ordered_list",
        "li": "_process_list_item",
        "blockquote": "_process_blockquote",
        "pre": "_process_pre",
        "table": "_process_table",
        "tr": "_process_table_row",
        "td": "_process_table_cell",
        "th": "_process_table_cell",
    }

    def __init__(self, options: HtmlOptions | None = None):
        """Initialize the HTML parser with options."""
        BaseParser._validate_options_type(options, HtmlOptions, "html")
        options = options or HtmlOptions()
        super().__init__(options)
        self.options: HtmlOptions = options

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, input_data: ParserInput) -> Document:
        """Parse an HTML document into a document tree.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            HTML content. Strings are treated as markup, never as paths.

        Returns
        -------
        Document
            Root of the converted tree

        Raises
        ------
        DependencyError
            If BeautifulSoup, or the selected tree builder, is not installed
        ParsingError
            If byte input cannot be decoded

        """
        html_content = self._load_text_content(input_data)
        return self.convert_to_ast(html_content)

    def convert_to_ast(self, html_content: str) -> Document:
        """Convert an HTML string to a document tree.

        Parameters
        ----------
        html_content : str
            HTML content to convert

        Returns
        -------
        Document
            Document holding the converted body content

        """
        from bs4 import BeautifulSoup
        from bs4.element import Tag
        from bs4.exceptions import FeatureNotFound

        try:
            soup = BeautifulSoup(html_content, self.options.html_parser)
        except FeatureNotFound as e:
            raise DependencyError(
                converter_name="html",
                missing_packages=[(self.options.html_parser, "")],
                message=f"HtmlOptions.html_parser {self.options.html_parser!r} is not installed: {e}",
            ) from e

        body = soup.find("body")
        root = body if isinstance(body, Tag) else soup
        return Document(children=self._convert_block_children(root, ()))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _convert_node(self, node: Any, marks: MarkStack, block: bool) -> list[Node]:
        """Convert one DOM node.

        Parameters
        ----------
        node : Any
            BeautifulSoup node (tag or string)
        marks : tuple of Mark
            Marks active at this depth, innermost first
        block : bool
            True in block context, False in inline context

        Returns
        -------
        list of Node
            Converted nodes, possibly empty

        """
        from bs4.element import NavigableString, PreformattedString, Tag

        if isinstance(node, PreformattedString):
            return []

        if isinstance(node, NavigableString):
            text = str(node)
            if not text.strip():
                return []
            return [Text(text=text, marks=list(marks) or None)]

        if not isinstance(node, Tag):
            return []

        name = node.name.lower() if node.name else ""
        if name in SKIPPED_ELEMENTS:
            return []

        if name == self.options.mention_tag:
            return self._process_mention(node)

        mark_type = HTML_MARK_TAGS.get(name)
        if mark_type is not None:
            return self._process_styled(node, mark_type, marks)

        handler_name = self._ELEMENT_HANDLERS.get(name)
        if handler_name:
            handler = getattr(self, handler_name)
            return handler(node, marks)

        return self._process_container(node, marks, block)

    def _convert_block_children(self, element: Any, marks: MarkStack) -> list[Node]:
        """Convert children in block context.

        Runs of inline results (text, hard breaks and mentions) are wrapped in a
        Paragraph; every other result is appended as a block sibling.
        """
        blocks: list[Node] = []
        inline_buffer: list[Node] = []

        for child in element.children:
            for result in self._convert_node(child, marks, block=True):
                if isinstance(result, _INLINE_RESULT_TYPES):
                    inline_buffer.append(result)
                    continue
                if inline_buffer:
                    blocks.append(Paragraph(children=inline_buffer))
                    inline_buffer = []
                blocks.append(result)

        if inline_buffer:
            blocks.append(Paragraph(children=inline_buffer))
        return blocks

    def _convert_inline_children(self, element: Any, marks: MarkStack) -> list[Node]:
        """Convert children in inline context and flatten the results."""
        results: list[Node] = []
        for child in element.children:
            results.extend(self._convert_node(child, marks, block=False))
        return results

    def _is_inline_safe(self, element: Any) -> bool:
        """Check whether every descendant tag is a styling tag, ``br`` or a mention."""
        from bs4.element import Tag

        return all(
            descendant.name in INLINE_SAFE_ELEMENTS or descendant.name == self.options.mention_tag
            for descendant in element.descendants
            if isinstance(descendant, Tag)
        )

    # ------------------------------------------------------------------
    # Inline elements
    # ------------------------------------------------------------------

    def _process_styled(self, node: Any, mark_type: str, marks: MarkStack) -> list[Node]:
        """Prepend the tag's mark and convert its children inline."""
        if mark_type == MARK_LINK:
            href = node.get("href")
            mark: Mark = Link(attrs={"href": href} if href else None)
        else:
            mark = create_mark(mark_type)
        return self._convert_inline_children(node, (mark,) + marks)

    def _process_hard_break(self, node: Any, marks: MarkStack) -> list[Node]:
        return [HardBreak()]

    def _process_image(self, node: Any, marks: MarkStack) -> list[Node]:
        """Convert ``img``; images without ``src`` are omitted."""
        src = node.get("src")
        if not src:
            logger.debug("Skipping <img> without src")
            return []
        return [
            Image(
                src=src,
                alt=node.get("alt"),
                title=node.get("title"),
                width=parse_int(node.get("width")),
                height=parse_int(node.get("height")),
            )
        ]

    def _process_mention(self, node: Any) -> list[Node]:
        """Convert a user mention; mentions without an id are omitted."""
        user_id = node.get(self.options.mention_id_attribute)
        if not user_id:
            logger.debug(
                "Skipping <%s> without %s attribute", self.options.mention_tag, self.options.mention_id_attribute
            )
            return []
        return [User(id=user_id)]

    def _process_container(self, node: Any, marks: MarkStack, block: bool) -> list[Node]:
        """Convert ``div``, ``span`` and unknown tags."""
        if not block:
            return self._convert_inline_children(node, marks)
        if self._is_inline_safe(node):
            inline = self._convert_inline_children(node, marks)
            return [Paragraph(children=inline)] if inline else []
        return self._convert_block_children(node, marks)

    # ------------------------------------------------------------------
    # Block elements
    # ------------------------------------------------------------------

    def _process_paragraph(self, node: Any, marks: MarkStack) -> list[Node]:
        return [Paragraph(children=self._convert_inline_children(node, marks))]

    def _process_heading(self, node: Any, marks: MarkStack) -> list[Node]:
        level = int(node.name[1]) if node.name in HEADING_TAGS else 1
        return [Heading(level=level, children=self._convert_inline_children(node, marks))]

    def _process_horizontal_rule(self, node: Any, marks: MarkStack) -> list[Node]:
        """Convert ``hr``, reading border style, width and thickness from ``style``."""
        style = parse_inline_style(node.get("style"))
        return [
            HorizontalRule(
                style=style.get("border-style"),
                width=style.get("width"),
                thickness=parse_pixels(style.get("border-width")),
            )
        ]

    def _process_blockquote(self, node: Any, marks: MarkStack) -> list[Node]:
        return [Blockquote(citation=node.get("cite") or None, children=self._convert_block_children(node, marks))]

    def _process_bullet_list(self, node: Any, marks: MarkStack) -> list[Node]:
        style = parse_inline_style(node.get("style"))
        bullet_list = BulletList(bullet_style=style.get("list-style-type"))
        bullet_list.children = self._convert_list_items(node, marks)
        return [bullet_list]

    def _process_ordered_list(self, node: Any, marks: MarkStack) -> list[Node]:
        start = parse_int(node.get("start"), DEFAULT_ORDERED_LIST_START)
        ordered_list = OrderedList(start=DEFAULT_ORDERED_LIST_START if start is None else start)
        ordered_list.children = self._convert_list_items(node, marks)
        return [ordered_list]

    def _convert_list_items(self, node: Any, marks: MarkStack) -> list[Node]:
        """Convert list children; content outside ``li`` is wrapped in a ListItem."""
        from bs4.element import Tag

        items: list[Node] = []
        for child in node.children:
            if isinstance(child, Tag) and child.name == "li":
                items.extend(self._process_list_item(child, marks))
                continue
            converted = self._convert_node(child, marks, block=True)
            if not converted:
                continue
            if all(isinstance(result, ListItem) for result in converted):
                items.extend(converted)
                continue
            if all(isinstance(result, _INLINE_RESULT_TYPES) for result in converted):
                converted = [Paragraph(children=converted)]
            items.append(ListItem(children=converted))
        return items

    def _process_list_item(self, node: Any, marks: MarkStack) -> list[Node]:
        return [ListItem(children=self._convert_block_children(node, marks))]

    def _process_pre(self, node: Any, marks: MarkStack) -> list[Node]:
        """Convert ``pre`` to a CodeBlockWrapper.

        Each nested ``code`` element becomes a CodeBlock; a ``pre`` without
        ``code`` becomes a single CodeBlock of its own text.
        """
        wrapper = CodeBlockWrapper(
            line_numbers=str(node.get("data-line-numbers", "")).lower() == "true",
            highlight_lines=self._parse_highlight_lines(node.get("data-highlight-lines")),
        )
        code_elements = node.find_all("code")
        if code_elements:
            for code in code_elements:
                wrapper.add_child(
                    CodeBlock(code=code.get_text().strip(), language=self._language_from_classes(code.get("class")))
                )
        else:
            wrapper.add_child(
                CodeBlock(code=node.get_text().strip(), language=self._language_from_classes(node.get("class")))
            )
        return [wrapper]

    @staticmethod
    def _language_from_classes(classes: Any) -> Optional[str]:
        """Extract ``xxx`` from a ``language-xxx`` class token."""
        if not classes:
            return None
        tokens = classes.split() if isinstance(classes, str) else classes
        for token in tokens:
            if token.startswith("language-") and len(token) > len("language-"):
                return token[len("language-") :]
        return None

    @staticmethod
    def _parse_highlight_lines(value: Optional[str]) -> list[int]:
        if not value:
            return []
        lines = []
        for part in str(value).split(","):
            line = parse_int(part)
            if line is not None and line > 0:
                lines.append(line)
        return lines

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _process_table(self, node: Any, marks: MarkStack) -> list[Node]:
        """Convert ``table``; rows come from direct ``tr`` children and row groups."""
        from bs4.element import Tag

        table = Table()
        for child in node.children:
            if not isinstance(child, Tag):
                continue
            if child.name == "tr":
                table.add_child(self._convert_row(child, marks))
            elif child.name in _TABLE_SECTIONS:
                for row in child.find_all("tr", recursive=False):
                    table.add_child(self._convert_row(row, marks))
        return [table]

    def _process_table_row(self, node: Any, marks: MarkStack) -> list[Node]:
        return [self._convert_row(node, marks)]

    def _convert_row(self, node: Any, marks: MarkStack) -> TableRow:
        row = TableRow()
        for cell in node.find_all(["th", "td"], recursive=False):
            row.add_child(self._convert_cell(cell, marks))
        return row

    def _process_table_cell(self, node: Any, marks: MarkStack) -> list[Node]:
        return [self._convert_cell(node, marks)]

    def _convert_cell(self, node: Any, marks: MarkStack) -> TableCell:
        """Convert ``td`` to TableCell and ``th`` to TableHeader."""
        children = self._convert_block_children(node, marks)
        if node.name != "th":
            return TableCell(children=children)

        scope = node.get("scope")
        colspan = parse_int(node.get("colspan"))
        return TableHeader(
            children=children,
            scope=scope if scope in VALID_TABLE_HEADER_SCOPES else None,
            abbr=node.get("abbr"),
            colspan=colspan if colspan is not None and colspan > 0 else None,
        )

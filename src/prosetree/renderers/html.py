#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/renderers/html.py
"""HTML rendering from the document tree.

This module provides the HtmlRenderer class, which mirrors
:class:`~prosetree.parsers.html.HtmlParser`: parsing its output gives back
an equivalent tree.

Output is compact by default, with no whitespace between tags, so results
are deterministic and easy to compare. With
``HtmlRendererOptions(pretty=True)`` a newline follows every block element,
except inside ``<pre>`` where text is written verbatim.

Marks on a text node are applied from the first (innermost) to the last
(outermost), the inverse of the importer's prepend order, so that
``<strong><u>x</u></strong>`` renders back to the same markup.

"""

from __future__ import annotations

import logging
from typing import Optional

from prosetree.ast.marks import Mark
from prosetree.ast.nodes import (
    Blockquote,
    BulletList,
    CodeBlock,
    CodeBlockWrapper,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    Image,
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
)
from prosetree.ast.visitors import NodeVisitor
from prosetree.constants import DEFAULT_ORDERED_LIST_START, MARK_HTML_TAGS, MARK_LINK
from prosetree.exceptions import RenderingError
from prosetree.options.html import HtmlRendererOptions
from prosetree.renderers.base import BaseRenderer
from prosetree.utils.html_utils import escape_html, format_attributes

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render document nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from prosetree.ast import Document
        >>> doc = Document()
        >>> _ = doc.add_paragraph("Hello")
        >>> HtmlRenderer().render_to_string(doc)
        '<p>Hello</p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._in_pre = False

    def render_to_string(self, document: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        document : Document
            Document to render

        Returns
        -------
        str
            HTML fragment for the document content

        """
        return self.render_node(document)

    def render_node(self, node: Node) -> str:
        """Render any node (and its subtree) to an HTML string."""
        self._output = []
        self._in_pre = False
        node.accept(self)
        return "".join(self._output)

    def _block_end(self) -> None:
        if self.options.pretty and not self._in_pre:
            self._output.append("\n")

    def _render_children(self, node: Node) -> None:
        for child in node.children or []:
            child.accept(self)

    # ------------------------------------------------------------------
    # Document and generic nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Parameters
        ----------
        node : Document
            Document to render

        """
        self._render_children(node)

    def visit_node(self, node: Node) -> None:
        """Render an unknown node as a transparent container.

        Raises
        ------
        RenderingError
            If ``fail_on_unknown_nodes`` is enabled

        """
        if self.options.fail_on_unknown_nodes:
            raise RenderingError(f"Unknown node type: {node.type!r}", rendering_stage="html")
        logger.debug("Rendering children of unknown node type %r", node.type)
        self._render_children(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render text, wrapping it in one tag per mark."""
        html = escape_html(node.text or "")
        for mark in node.marks or []:
            html = self._wrap_mark(mark, html)
        self._output.append(html)

    @staticmethod
    def _wrap_mark(mark: Mark, html: str) -> str:
        """Wrap ``html`` in the tag for ``mark``; unknown marks pass through."""
        tag = MARK_HTML_TAGS.get(mark.type)
        if tag is None:
            return html
        if mark.type == MARK_LINK:
            href = mark.attrs_dict().get("href")
            if not href:
                return html
            return f"<a{format_attributes({'href': href})}>{html}</a>"
        return f"<{tag}>{html}</{tag}>"

    def visit_hard_break(self, node: HardBreak) -> None:
        self._output.append("<br>")

    def visit_user(self, node: User) -> None:
        tag = self.options.mention_tag
        attrs = format_attributes({self.options.mention_id_attribute: node.id})
        self._output.append(f"<{tag}{attrs}></{tag}>")

    def visit_image(self, node: Image) -> None:
        """Render an image; ``src`` and ``alt`` are always present."""
        attrs = format_attributes(
            {
                "src": node.src or "",
                "alt": node.alt or "",
                "title": node.title,
                "width": node.width,
                "height": node.height,
            }
        )
        self._output.append(f"<img{attrs}>")

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append("<p>")
        self._render_children(node)
        self._output.append("</p>")
        self._block_end()

    def visit_heading(self, node: Heading) -> None:
        level = node.level or 1
        self._output.append(f"<h{level}>")
        self._render_children(node)
        self._output.append(f"</h{level}>")
        self._block_end()

    def visit_blockquote(self, node: Blockquote) -> None:
        self._output.append(f"<blockquote{format_attributes({'cite': node.citation})}>")
        self._block_end()
        for block in node.blocks:
            block.accept(self)
        self._output.append("</blockquote>")
        self._block_end()

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a rule, composing ``style`` from its typed fields."""
        declarations = []
        if node.style:
            declarations.append(f"border-style: {node.style}")
        if node.width:
            declarations.append(f"width: {node.width}")
        if node.thickness is not None:
            declarations.append(f"border-width: {node.thickness}px")
        style: Optional[str] = "; ".join(declarations) if declarations else None
        self._output.append(f"<hr{format_attributes({'style': style})}>")
        self._block_end()

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def visit_bullet_list(self, node: BulletList) -> None:
        style = f"list-style-type: {node.bullet_style}" if node.bullet_style else None
        self._output.append(f"<ul{format_attributes({'style': style})}>")
        self._block_end()
        self._render_list_children(node)
        self._output.append("</ul>")
        self._block_end()

    def visit_ordered_list(self, node: OrderedList) -> None:
        start = node.start if node.start != DEFAULT_ORDERED_LIST_START else None
        self._output.append(f"<ol{format_attributes({'start': start})}>")
        self._block_end()
        self._render_list_children(node)
        self._output.append("</ol>")
        self._block_end()

    def _render_list_children(self, node: Node) -> None:
        """Render list items; any other child is wrapped in ``<li>``."""
        for child in node.children or []:
            if isinstance(child, ListItem):
                child.accept(self)
                continue
            self._output.append("<li>")
            child.accept(self)
            self._output.append("</li>")
            self._block_end()

    def visit_list_item(self, node: ListItem) -> None:
        self._output.append("<li>")
        self._render_children(node)
        self._output.append("</li>")
        self._block_end()

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table) -> None:
        """Render a table.

        The first row goes in ``<thead>`` only when every cell in it is a
        header cell; all other rows go in ``<tbody>``.
        """
        self._output.append("<table>")
        self._block_end()

        rows = node.rows
        if rows:
            body_rows = rows
            if node.has_header_row:
                self._output.append("<thead>")
                self._block_end()
                rows[0].accept(self)
                self._output.append("</thead>")
                self._block_end()
                body_rows = rows[1:]

            self._output.append("<tbody>")
            self._block_end()
            for row in body_rows:
                row.accept(self)
            self._output.append("</tbody>")
            self._block_end()

        self._output.append("</table>")
        self._block_end()

    def visit_table_row(self, node: TableRow) -> None:
        self._output.append("<tr>")
        self._block_end()
        self._render_children(node)
        self._output.append("</tr>")
        self._block_end()

    def visit_table_cell(self, node: TableCell) -> None:
        self._output.append("<td>")
        self._render_cell_content(node)
        self._output.append("</td>")
        self._block_end()

    def visit_table_header(self, node: TableHeader) -> None:
        attrs = format_attributes({"scope": node.scope, "abbr": node.abbr, "colspan": node.colspan})
        self._output.append(f"<th{attrs}>")
        self._render_cell_content(node)
        self._output.append("</th>")
        self._block_end()

    def _render_cell_content(self, node: TableCell) -> None:
        """Render cell children; a sole paragraph is unwrapped into the cell."""
        children = node.children or []
        if len(children) == 1 and isinstance(children[0], Paragraph):
            self._render_children(children[0])
        else:
            self._render_children(node)

    # ------------------------------------------------------------------
    # Code
    # ------------------------------------------------------------------

    def visit_code_block_wrapper(self, node: CodeBlockWrapper) -> None:
        attrs = format_attributes(
            {
                "data-line-numbers": "true" if node.line_numbers else None,
                "data-highlight-lines": ",".join(str(line) for line in node.highlight_lines) or None,
            }
        )
        self._output.append(f"<pre{attrs}>")
        self._in_pre = True
        try:
            self._render_children(node)
        finally:
            self._in_pre = False
        self._output.append("</pre>")
        self._block_end()

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render code verbatim; a code block outside a wrapper gets its own ``<pre>``."""
        language_class = f"language-{node.language}" if node.language else None
        code_html = f"<code{format_attributes({'class': language_class})}>{escape_html(node.code_text)}</code>"
        if self._in_pre:
            self._output.append(code_html)
            return
        self._output.append(f"<pre>{code_html}</pre>")
        self._block_end()

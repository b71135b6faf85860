#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

This module provides the visitor base class for traversing and processing
document nodes. Visitors keep algorithms such as HTML rendering separate
from the node classes themselves.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Subclasses implement a ``visit_*`` method for every known node kind.
    Nodes of unknown type dispatch to :meth:`visit_node`, which defaults to
    :meth:`generic_visit`.

    Examples
    --------
    Collect the text of every paragraph:

        >>> class ParagraphText(NodeVisitor):
        ...     def visit_paragraph(self, node):
        ...         return node.text_content
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit, marks included

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_table_header(self, node: TableHeader) -> Any:
        """Visit a TableHeader node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_blockquote(self, node: Blockquote) -> Any:
        """Visit a Blockquote node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_code_block_wrapper(self, node: CodeBlockWrapper) -> Any:
        """Visit a CodeBlockWrapper node."""
        pass

    @abstractmethod
    def visit_user(self, node: User) -> Any:
        """Visit a User mention node."""
        pass

    def visit_node(self, node: Node) -> Any:
        """Visit a node whose type is not known to this library.

        Parameters
        ----------
        node : Node
            The generic node to visit

        Returns
        -------
        Any
            Result of :meth:`generic_visit`

        """
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None

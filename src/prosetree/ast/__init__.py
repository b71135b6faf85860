#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/ast/__init__.py
"""Document tree module.

The module consists of several components:

- nodes: node classes representing document structure, with builder helpers
- marks: inline formatting marks attached to text nodes
- attributes: typed single-entry attributes and attribute flattening
- visitors: visitor pattern implementation for tree traversal
- serialization: canonical plain-hash, JSON and YAML serialization

Examples
--------
Basic usage:

    >>> from prosetree.ast import Bold, Document, to_plain
    >>> doc = Document()
    >>> paragraph = doc.add_paragraph("Hello ")
    >>> _ = paragraph.add_text("world", [Bold()])
    >>> doc.text_content
    'Hello world'

"""

from __future__ import annotations

from prosetree.ast.attributes import Attribute, Href, Id, flatten_attrs
from prosetree.ast.marks import (
    Bold,
    Code,
    Italic,
    Link,
    Mark,
    Strike,
    Subscript,
    Superscript,
    Underline,
    create_mark,
)
from prosetree.ast.nodes import (
    NODE_CLASSES,
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
from prosetree.ast.serialization import (
    from_json,
    from_plain,
    from_yaml,
    parse_document,
    to_json,
    to_plain,
    to_yaml,
)
from prosetree.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Document",
    "Paragraph",
    "Text",
    "Heading",
    "HardBreak",
    "Table",
    "TableRow",
    "TableCell",
    "TableHeader",
    "BulletList",
    "OrderedList",
    "ListItem",
    "Blockquote",
    "HorizontalRule",
    "Image",
    "CodeBlock",
    "CodeBlockWrapper",
    "User",
    "NODE_CLASSES",
    # Marks
    "Mark",
    "Bold",
    "Italic",
    "Code",
    "Link",
    "Strike",
    "Subscript",
    "Superscript",
    "Underline",
    "create_mark",
    # Attributes
    "Attribute",
    "Href",
    "Id",
    "flatten_attrs",
    # Visitors
    "NodeVisitor",
    # Serialization
    "to_plain",
    "from_plain",
    "parse_document",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
]

"""prosetree - A typed document tree for rich-text editor content.

prosetree models the JSON documents produced by ProseMirror-style editors as
a tree of typed nodes. Trees can be built programmatically, serialized to
and from the canonical plain-hash shape (as JSON or YAML), imported from
HTML, and exported back to HTML.

Key Features
------------
- Typed node and mark classes with builder helpers and tree queries
- Lossless plain-hash serialization, including unknown node types
- HTML import built on BeautifulSoup, tolerant of malformed markup
- Deterministic HTML export that round-trips through the importer

Requirements
------------
- Python 3.10+
- beautifulsoup4 for HTML import, PyYAML for the YAML surface

Examples
--------
Import HTML and inspect the tree:

    >>> from prosetree import parse_html, to_plain
    >>> doc = parse_html("<p>Hello <em>world</em></p>")
    >>> to_plain(doc)["content"][0]["type"]
    'paragraph'

Build a document and export it:

    >>> from prosetree import Document, to_html
    >>> doc = Document()
    >>> _ = doc.add_paragraph("Hello")
    >>> to_html(doc)
    '<p>Hello</p>'

See Also
--------
prosetree.ast : Node definitions and serialization
prosetree.parsers : HTML and plain-hash parsers
prosetree.renderers : HTML and plain-hash renderers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "prosetree requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from prosetree.api import parse_html, parse_plain, render_plain, to_html
from prosetree.ast import (
    Attribute,
    Blockquote,
    Bold,
    BulletList,
    Code,
    CodeBlock,
    CodeBlockWrapper,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    Href,
    Id,
    Image,
    Italic,
    Link,
    ListItem,
    Mark,
    Node,
    NodeVisitor,
    OrderedList,
    Paragraph,
    Strike,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    Underline,
    User,
    create_mark,
    from_json,
    from_plain,
    from_yaml,
    parse_document,
    to_json,
    to_plain,
    to_yaml,
)
from prosetree.exceptions import (
    ContentNotAllowedError,
    DependencyError,
    InvalidInputError,
    InvalidOptionsError,
    ParsingError,
    ProsetreeError,
    RenderingError,
    ValidationError,
)
from prosetree.options import (
    BaseParserOptions,
    BaseRendererOptions,
    HtmlOptions,
    HtmlRendererOptions,
    PlainParserOptions,
    PlainRendererOptions,
)

__all__ = [
    "__version__",
    # Conversion functions
    "parse_html",
    "to_html",
    "parse_plain",
    "render_plain",
    "to_plain",
    "from_plain",
    "parse_document",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
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
    "NodeVisitor",
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
    # Options
    "BaseParserOptions",
    "BaseRendererOptions",
    "HtmlOptions",
    "HtmlRendererOptions",
    "PlainParserOptions",
    "PlainRendererOptions",
    # Exceptions
    "ProsetreeError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidInputError",
    "ContentNotAllowedError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]

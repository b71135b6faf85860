#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/ast/serialization.py
"""Canonical plain-hash serialization for document nodes.

This module converts node trees to and from the plain structure exchanged
with editors and fixtures::

    {"type": str, "attrs"?: {...}, "marks"?: [{"type": str, "attrs"?: {...}}],
     "content"?: [<node>, ...], "text"?: str}

Key presence rules:

- ``type`` is always present; ``text`` is always present on text nodes.
- ``attrs`` is emitted only when non-empty. Typed fields with a ``None``
  value are skipped; untyped extra attributes are merged underneath.
- ``marks`` is emitted only when non-empty, and only for text, hard break
  and unknown nodes.
- ``content`` is emitted only when non-empty.

Unknown ``type`` values deserialize to a generic :class:`~prosetree.ast.nodes.Node`
that keeps its attributes, marks and content verbatim.

Examples
--------
Serialize a tree:

    >>> from prosetree.ast import Document
    >>> doc = Document()
    >>> _ = doc.add_paragraph("Hello")
    >>> to_plain(doc)
    {'type': 'doc', 'content': [{'type': 'paragraph', 'content': [{'type': 'text', 'text': 'Hello'}]}]}

Deserialize it again:

    >>> parse_document(to_plain(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional

from prosetree.ast.marks import Mark, create_mark
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
from prosetree.constants import (
    DEFAULT_ORDERED_LIST_START,
    DEPS_YAML,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    VALID_TABLE_HEADER_SCOPES,
)
from prosetree.exceptions import InvalidInputError, ParsingError
from prosetree.utils.decorators import requires_dependencies
from prosetree.utils.html_utils import parse_int

logger = logging.getLogger(__name__)


# ============================================================================
# Serialization
# ============================================================================


def _serialize_marks(marks: Optional[list[Mark]]) -> list[dict[str, Any]]:
    return [mark.to_plain() for mark in marks or []]


def _serialize_node(
    node: Node, typed_attrs: Optional[dict[str, Any]] = None, with_marks: bool = False
) -> dict[str, Any]:
    """Build the plain mapping shared by every node kind.

    Parameters
    ----------
    node : Node
        Node to serialize
    typed_attrs : dict, optional
        Attributes derived from typed fields; ``None`` values are dropped
    with_marks : bool, default False
        Whether the node kind carries marks on output

    Returns
    -------
    dict
        The plain mapping for the node

    """
    result: dict[str, Any] = {"type": node.type}

    attrs = {key: value for key, value in (typed_attrs or {}).items() if value is not None}
    for key, value in node.attrs_dict().items():
        attrs.setdefault(key, value)
    if attrs:
        result["attrs"] = attrs

    if with_marks:
        marks = _serialize_marks(node.marks)
        if marks:
            result["marks"] = marks

    if node.children:
        result["content"] = [to_plain(child) for child in node.children]
    return result


def _serialize_text(node: Text) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node.type, "text": node.text or ""}
    attrs = node.attrs_dict()
    if attrs:
        result["attrs"] = attrs
    marks = _serialize_marks(node.marks)
    if marks:
        result["marks"] = marks
    return result


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return _serialize_node(node, {"level": node.level})


def _serialize_bullet_list(node: BulletList) -> dict[str, Any]:
    return _serialize_node(node, {"bullet_style": node.bullet_style})


def _serialize_ordered_list(node: OrderedList) -> dict[str, Any]:
    return _serialize_node(node, {"start": node.start})


def _serialize_blockquote(node: Blockquote) -> dict[str, Any]:
    return _serialize_node(node, {"citation": node.citation})


def _serialize_horizontal_rule(node: HorizontalRule) -> dict[str, Any]:
    return _serialize_node(node, {"border_style": node.style, "width": node.width, "thickness": node.thickness})


def _serialize_image(node: Image) -> dict[str, Any]:
    return _serialize_node(
        node,
        {"src": node.src, "alt": node.alt, "title": node.title, "width": node.width, "height": node.height},
    )


def _serialize_table_header(node: TableHeader) -> dict[str, Any]:
    return _serialize_node(node, {"scope": node.scope, "abbr": node.abbr, "colspan": node.colspan})


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    return _serialize_node(
        node,
        {"content": node.code, "language": node.language, "line_numbers": True if node.line_numbers else None},
    )


def _serialize_code_block_wrapper(node: CodeBlockWrapper) -> dict[str, Any]:
    highlight = ",".join(str(line) for line in node.highlight_lines) if node.highlight_lines else None
    return _serialize_node(
        node,
        {"line_numbers": True if node.line_numbers else None, "highlight_lines": highlight},
    )


def _serialize_user(node: User) -> dict[str, Any]:
    return _serialize_node(node, {"id": node.id})


# Dispatch table mapping node classes to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Node: lambda n: _serialize_node(n, with_marks=True),
    Document: _serialize_node,
    Paragraph: _serialize_node,
    Text: _serialize_text,
    HardBreak: lambda n: _serialize_node(n, with_marks=True),
    Heading: _serialize_heading,
    Table: _serialize_node,
    TableRow: _serialize_node,
    TableCell: _serialize_node,
    TableHeader: _serialize_table_header,
    BulletList: _serialize_bullet_list,
    OrderedList: _serialize_ordered_list,
    ListItem: _serialize_node,
    Blockquote: _serialize_blockquote,
    HorizontalRule: _serialize_horizontal_rule,
    Image: _serialize_image,
    CodeBlock: _serialize_code_block,
    CodeBlockWrapper: _serialize_code_block_wrapper,
    User: _serialize_user,
}


def to_plain(node: Node) -> dict[str, Any]:
    """Convert a node tree to its plain mapping representation.

    Parameters
    ----------
    node : Node
        Root of the tree to convert

    Returns
    -------
    dict
        Plain mapping suitable for JSON or YAML encoding

    Raises
    ------
    TypeError
        If ``node`` is not a :class:`~prosetree.ast.nodes.Node`

    """
    for node_class in type(node).__mro__:
        serializer = _SERIALIZATION_DISPATCH.get(node_class)
        if serializer is not None:
            return serializer(node)
    raise TypeError(f"Cannot serialize object of type {type(node).__name__}")


# ============================================================================
# Deserialization
# ============================================================================


def _pop_int(attrs: dict[str, Any], key: str, valid: Callable[[int], bool] = lambda value: True) -> Optional[int]:
    """Remove and return ``attrs[key]`` as an int.

    Values that do not parse, or fail ``valid``, stay in ``attrs`` so they
    survive a round trip as untyped attributes.
    """
    if key not in attrs or isinstance(attrs[key], bool):
        return None
    parsed = parse_int(attrs[key])
    if parsed is None or not valid(parsed):
        logger.debug("Keeping unparseable %s=%r as an untyped attribute", key, attrs[key])
        return None
    del attrs[key]
    return parsed


def _pop_str(attrs: dict[str, Any], *keys: str) -> Optional[str]:
    """Remove every key in ``keys`` and return the first non-None value."""
    found: Optional[str] = None
    for key in keys:
        if key in attrs:
            value = attrs.pop(key)
            if found is None and value is not None:
                found = str(value)
    return found


def _pop_bool(attrs: dict[str, Any], key: str) -> bool:
    value = attrs.pop(key, False)
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _parse_highlight_lines(value: Any) -> list[int]:
    """Accept a list of ints or a comma separated string."""
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else value
    lines = []
    for item in items:
        parsed = parse_int(item)
        if parsed is not None and parsed > 0:
            lines.append(parsed)
    return lines


def _deserialize_marks(marks_data: Any) -> Optional[list[Mark]]:
    if not marks_data or not isinstance(marks_data, list):
        return None
    marks = []
    for mark_data in marks_data:
        if not isinstance(mark_data, Mapping) or "type" not in mark_data:
            logger.debug("Skipping malformed mark entry: %r", mark_data)
            continue
        attrs = mark_data.get("attrs")
        marks.append(create_mark(str(mark_data["type"]), dict(attrs) if isinstance(attrs, Mapping) else None))
    return marks or None


def _deserialize_children(content_data: Any) -> list[Node]:
    """Recursively deserialize a ``content`` array, skipping non-mapping entries."""
    if not isinstance(content_data, list):
        return []
    children = []
    for child_data in content_data:
        if not isinstance(child_data, Mapping):
            logger.debug("Skipping non-mapping content entry: %r", child_data)
            continue
        children.append(from_plain(child_data))
    return children


def _deserialize_heading(attrs: dict[str, Any]) -> dict[str, Any]:
    return {"level": _pop_int(attrs, "level", lambda value: MIN_HEADING_LEVEL <= value <= MAX_HEADING_LEVEL)}


def _deserialize_bullet_list(attrs: dict[str, Any]) -> dict[str, Any]:
    return {"bullet_style": _pop_str(attrs, "bullet_style")}


def _deserialize_ordered_list(attrs: dict[str, Any]) -> dict[str, Any]:
    start = _pop_int(attrs, "start")
    attrs.pop("start", None)
    return {"start": DEFAULT_ORDERED_LIST_START if start is None else start}


def _deserialize_blockquote(attrs: dict[str, Any]) -> dict[str, Any]:
    return {"citation": _pop_str(attrs, "citation", "cite")}


def _deserialize_horizontal_rule(attrs: dict[str, Any]) -> dict[str, Any]:
    return {
        "style": _pop_str(attrs, "border_style", "style"),
        "width": _pop_str(attrs, "width"),
        "thickness": _pop_int(attrs, "thickness"),
    }


def _deserialize_image(attrs: dict[str, Any]) -> dict[str, Any]:
    return {
        "src": _pop_str(attrs, "src"),
        "alt": _pop_str(attrs, "alt"),
        "title": _pop_str(attrs, "title"),
        "width": _pop_int(attrs, "width"),
        "height": _pop_int(attrs, "height"),
    }


def _deserialize_table_header(attrs: dict[str, Any]) -> dict[str, Any]:
    scope = attrs.get("scope")
    if scope in VALID_TABLE_HEADER_SCOPES:
        del attrs["scope"]
    else:
        scope = None
    return {
        "scope": scope,
        "abbr": _pop_str(attrs, "abbr"),
        "colspan": _pop_int(attrs, "colspan", lambda value: value > 0),
    }


def _deserialize_code_block(attrs: dict[str, Any]) -> dict[str, Any]:
    return {
        "code": _pop_str(attrs, "content"),
        "language": _pop_str(attrs, "language"),
        "line_numbers": _pop_bool(attrs, "line_numbers"),
    }


def _deserialize_code_block_wrapper(attrs: dict[str, Any]) -> dict[str, Any]:
    return {
        "line_numbers": _pop_bool(attrs, "line_numbers"),
        "highlight_lines": _parse_highlight_lines(attrs.pop("highlight_lines", None)),
    }


def _deserialize_user(attrs: dict[str, Any]) -> dict[str, Any]:
    return {"id": _pop_str(attrs, "id")}


# Dispatch table mapping node classes to typed-attribute extractors
_DESERIALIZATION_DISPATCH: dict[type, Callable[[dict[str, Any]], dict[str, Any]]] = {
    Heading: _deserialize_heading,
    BulletList: _deserialize_bullet_list,
    OrderedList: _deserialize_ordered_list,
    Blockquote: _deserialize_blockquote,
    HorizontalRule: _deserialize_horizontal_rule,
    Image: _deserialize_image,
    TableHeader: _deserialize_table_header,
    CodeBlock: _deserialize_code_block,
    CodeBlockWrapper: _deserialize_code_block_wrapper,
    User: _deserialize_user,
}

# Kinds whose children are not read from ``content``
_LEAF_CLASSES = (Text, HardBreak, Image, HorizontalRule, User)
_MARKED_CLASSES = (Text, HardBreak)


def from_plain(data: Any) -> Node:
    """Build a node tree from its plain mapping representation.

    Parameters
    ----------
    data : Mapping
        Plain mapping with at least a ``type`` key

    Returns
    -------
    Node
        The deserialized node. Unknown types yield a generic ``Node``.

    Raises
    ------
    InvalidInputError
        If ``data`` is None or not a mapping

    """
    if data is None:
        raise InvalidInputError("Input cannot be None")
    if not isinstance(data, Mapping):
        raise InvalidInputError(f"Input must be a mapping, got {type(data).__name__}", parameter_value=data)

    node_type = str(data.get("type") or "")
    raw_attrs = data.get("attrs")
    attrs: dict[str, Any] = dict(raw_attrs) if isinstance(raw_attrs, Mapping) else {}
    node_class = NODE_CLASSES.get(node_type)

    if node_class is None:
        logger.debug("Unknown node type %r, keeping it as a generic node", node_type)
        return Node(
            type=node_type,
            children=_deserialize_children(data["content"]) if "content" in data else None,
            marks=_deserialize_marks(data.get("marks")),
            attrs=attrs or None,
        )

    kwargs: dict[str, Any] = {}
    extractor = _DESERIALIZATION_DISPATCH.get(node_class)
    if extractor is not None:
        kwargs.update(extractor(attrs))
    if node_class is Text:
        text = data.get("text")
        kwargs["text"] = None if text is None else str(text)
    if node_class in _MARKED_CLASSES:
        kwargs["marks"] = _deserialize_marks(data.get("marks"))

    node = node_class(attrs=attrs or None, **kwargs)
    if node_class in _LEAF_CLASSES:
        if data.get("content"):
            logger.debug("Ignoring content of %s node", node_type)
        return node
    # Code blocks only get a children list when the input has one
    if node.children is not None or "content" in data:
        node.children = _deserialize_children(data.get("content"))
    return node


def parse_document(data: Any) -> Document:
    """Build a document from plain data, wrapping a non-document root.

    Parameters
    ----------
    data : Mapping
        Plain mapping for the root node

    Returns
    -------
    Document
        The document; when the root is not ``doc`` it becomes the only
        child of a new document

    Raises
    ------
    InvalidInputError
        If ``data`` is None or not a mapping

    """
    node = from_plain(data)
    if isinstance(node, Document):
        return node
    return Document(children=[node])


# ============================================================================
# JSON / YAML text
# ============================================================================


def to_json(node: Node, indent: int | None = None, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """Serialize a node tree to a JSON string."""
    return json.dumps(to_plain(node), indent=indent, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def from_json(text: str | bytes) -> Document:
    """Parse a JSON string into a document.

    Raises
    ------
    ParsingError
        If the text is not valid JSON
    InvalidInputError
        If the JSON root is not an object

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json_decode", original_error=e) from e
    return parse_document(data)


@requires_dependencies("yaml", DEPS_YAML)
def to_yaml(node: Node, sort_keys: bool = False) -> str:
    """Serialize a node tree to a YAML string."""
    import yaml

    return yaml.safe_dump(to_plain(node), sort_keys=sort_keys, allow_unicode=True, default_flow_style=False)


@requires_dependencies("yaml", DEPS_YAML)
def from_yaml(text: str | bytes) -> Document:
    """Parse a YAML string into a document.

    Raises
    ------
    ParsingError
        If the text is not valid YAML
    InvalidInputError
        If the YAML root is not a mapping

    """
    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParsingError(f"Invalid YAML: {e}", parsing_stage="yaml_decode", original_error=e) from e
    return parse_document(data)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_plain_format.py
"""Unit tests for the plain-hash parser and renderer."""

import json
from io import BytesIO, StringIO

import pytest

from prosetree.ast import Document, Paragraph, to_plain
from prosetree.exceptions import InvalidOptionsError, ParsingError
from prosetree.options import HtmlOptions, PlainParserOptions, PlainRendererOptions
from prosetree.parsers.plain import PlainParser, detect_plain_format
from prosetree.renderers.plain import PlainRenderer

DOC_JSON = '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hi"}]}]}'
DOC_YAML = "type: doc\ncontent:\n- type: paragraph\n  content:\n  - type: text\n    text: Hi\n"


def _sample() -> Document:
    doc = Document()
    doc.add_paragraph("Hi")
    return doc


@pytest.mark.unit
class TestDetectFormat:
    """Tests for format detection."""

    def test_json_object(self) -> None:
        """Test objects are detected as JSON."""
        assert detect_plain_format('  {"type": "doc"}') == "json"

    def test_json_with_bom(self) -> None:
        """Test a leading byte order mark is ignored."""
        assert detect_plain_format('\ufeff{"type": "doc"}') == "json"

    def test_yaml(self) -> None:
        """Test anything else is treated as YAML."""
        assert detect_plain_format("type: doc") == "yaml"


@pytest.mark.unit
class TestPlainParser:
    """Tests for PlainParser."""

    def test_parse_json(self) -> None:
        """Test parsing JSON text."""
        doc = PlainParser().parse(DOC_JSON)
        assert doc.text_content == "Hi"

    def test_parse_json_bytes(self) -> None:
        """Test parsing JSON bytes."""
        doc = PlainParser().parse(DOC_JSON.encode("utf-8"))
        assert isinstance(doc.children[0], Paragraph)

    def test_parse_text_stream(self) -> None:
        """Test parsing from a text stream."""
        assert PlainParser().parse(StringIO(DOC_JSON)).text_content == "Hi"

    def test_parse_binary_stream(self) -> None:
        """Test parsing from a binary stream."""
        assert PlainParser().parse(BytesIO(DOC_JSON.encode("utf-8"))).text_content == "Hi"

    def test_parse_yaml(self) -> None:
        """Test parsing YAML text."""
        pytest.importorskip("yaml")
        doc = PlainParser().parse(DOC_YAML)
        assert doc.text_content == "Hi"

    def test_explicit_format(self) -> None:
        """Test forcing the YAML decoder on JSON text (JSON is valid YAML)."""
        pytest.importorskip("yaml")
        doc = PlainParser(PlainParserOptions(format="yaml")).parse(DOC_JSON)
        assert doc.text_content == "Hi"

    def test_invalid_json(self) -> None:
        """Test malformed JSON raises ParsingError."""
        with pytest.raises(ParsingError, match="Invalid JSON"):
            PlainParser().parse("{broken")

    def test_non_mapping_root(self) -> None:
        """Test a list root is reported as a parsing error."""
        with pytest.raises(ParsingError, match="Invalid document structure") as exc_info:
            PlainParser().parse("[1, 2, 3]")
        assert exc_info.value.parsing_stage == "plain_deserialization"

    def test_missing_file(self, tmp_path) -> None:
        """Test a missing path raises ParsingError."""
        with pytest.raises(ParsingError, match="Could not read input"):
            PlainParser().parse(tmp_path / "missing.json")

    def test_wrong_options_type(self) -> None:
        """Test passing options for another parser."""
        with pytest.raises(InvalidOptionsError):
            PlainParser(HtmlOptions())  # type: ignore[arg-type]

    def test_invalid_format_option(self) -> None:
        """Test unknown formats are rejected."""
        with pytest.raises(ValueError, match="Invalid format"):
            PlainParserOptions(format="xml")  # type: ignore[arg-type]


@pytest.mark.unit
class TestPlainRenderer:
    """Tests for PlainRenderer."""

    def test_default_json(self) -> None:
        """Test default output is indented JSON."""
        text = PlainRenderer().render_to_string(_sample())
        assert text.startswith("{\n  ")
        assert json.loads(text) == to_plain(_sample())

    def test_compact_json(self) -> None:
        """Test compact JSON output."""
        text = PlainRenderer(PlainRendererOptions(indent=None)).render_to_string(_sample())
        assert text == DOC_JSON

    def test_sort_keys(self) -> None:
        """Test sorted keys."""
        text = PlainRenderer(PlainRendererOptions(indent=None, sort_keys=True)).render_to_string(_sample())
        assert text.startswith('{"content"')

    def test_yaml_output(self) -> None:
        """Test YAML output."""
        yaml = pytest.importorskip("yaml")
        text = PlainRenderer(PlainRendererOptions(format="yaml")).render_to_string(_sample())
        assert yaml.safe_load(text) == to_plain(_sample())
        assert text.startswith("type: doc")

    def test_render_to_stream(self) -> None:
        """Test writing to a text stream."""
        buffer = StringIO()
        PlainRenderer(PlainRendererOptions(indent=None)).render(_sample(), buffer)
        assert buffer.getvalue() == DOC_JSON

    def test_negative_indent_rejected(self) -> None:
        """Test negative indentation is rejected."""
        with pytest.raises(ValueError, match="indent must be non-negative"):
            PlainRendererOptions(indent=-1)

    def test_wrong_options_type(self) -> None:
        """Test passing options for another renderer."""
        with pytest.raises(InvalidOptionsError):
            PlainRenderer(HtmlOptions())  # type: ignore[arg-type]

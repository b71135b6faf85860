#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_html_round_trip.py
"""Integration tests for HTML import followed by HTML export, and back."""

import pytest

from prosetree import parse_document, parse_html, to_html, to_plain

pytest.importorskip("bs4")

ROUND_TRIP_HTML = [
    "<p>This is a <strong>test</strong> paragraph with <em>styling</em>.</p>",
    "<p><strong><u>X</u></strong></p>",
    "<p>Line 1<br>Line 2</p>",
    '<p>Visit <a href="https://example.com">the site</a> today</p>',
    "<h2>Section</h2><p>Body</p>",
    '<ol start="3"><li><p>Third item</p></li><li><p>Fourth item</p></li></ol>',
    '<ul style="list-style-type: square"><li><p>a</p></li></ul>',
    '<blockquote cite="https://example.com"><p>Quote</p></blockquote>',
    '<hr style="border-style: dashed; width: 50%; border-width: 3px">',
    '<img src="a.png" alt="A" width="10">',
    '<p>Hi <user-mention data-id="123"></user-mention></p>',
    '<ul><li><p>Ask <user-mention data-id="7"></user-mention> first</p></li></ul>',
    '<table><tbody><tr><td>Owner <user-mention data-id="1"></user-mention> today</td></tr></tbody></table>',
    "<table><thead><tr><th>Name</th></tr></thead><tbody><tr><td>Alice</td></tr></tbody></table>",
    '<pre data-line-numbers="true" data-highlight-lines="1,2"><code class="language-python">x = 1\ny = 2</code></pre>',
]


@pytest.mark.integration
class TestHtmlRoundTrip:
    """Tests that exported HTML imports back to the same tree."""

    @pytest.mark.parametrize("html", ROUND_TRIP_HTML)
    def test_html_is_stable(self, html) -> None:
        """Test canonical HTML survives import and export unchanged."""
        assert to_html(parse_html(html)) == html

    def test_fixture_tree_round_trips_through_html(self, load_fixture_document) -> None:
        """Test a rich tree exports to HTML and imports back unchanged."""
        data = load_fixture_document("sample_document")
        doc = parse_document(data)
        assert to_plain(parse_html(to_html(doc))) == data

    def test_pretty_html_imports_identically(self, load_fixture_document) -> None:
        """Test pretty output imports to the same tree as compact output."""
        doc = parse_document(load_fixture_document("sample_document"))
        assert parse_html(to_html(doc, pretty=True)) == parse_html(to_html(doc))

    def test_line_based_code_block_exports_as_code(self) -> None:
        """Test a code block stored as text lines imports back with its code."""
        data = {
            "type": "doc",
            "content": [
                {
                    "type": "code_block_wrapper",
                    "content": [
                        {
                            "type": "code_block",
                            "attrs": {"language": "python"},
                            "content": [
                                {"type": "text", "text": "def f():"},
                                {"type": "text", "text": "    return 1"},
                            ],
                        }
                    ],
                }
            ],
        }
        html = to_html(parse_document(data))
        assert html == '<pre><code class="language-python">def f():\n    return 1</code></pre>'
        block = parse_html(html).children[0].children[0]
        assert block.code == "def f():\n    return 1"

    def test_ordered_list_scenario(self) -> None:
        """Test the ordered list import produces the expected plain shape."""
        doc = parse_html('<ol start="3"><li>Third item</li><li>Fourth item</li></ol>')
        assert to_plain(doc) == {
            "type": "doc",
            "content": [
                {
                    "type": "ordered_list",
                    "attrs": {"start": 3},
                    "content": [
                        {
                            "type": "list_item",
                            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Third item"}]}],
                        },
                        {
                            "type": "list_item",
                            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Fourth item"}]}],
                        },
                    ],
                }
            ],
        }
        assert to_html(doc) == '<ol start="3"><li><p>Third item</p></li><li><p>Fourth item</p></li></ol>'

    def test_loose_markup_normalized(self) -> None:
        """Test messy input exports to canonical markup."""
        html = "<div>Intro <b>bold</b></div>\n<ul>\n  <li>one</li>\n</ul>\n<!-- note -->"
        assert to_html(parse_html(html)) == "<p>Intro <strong>bold</strong></p><ul><li><p>one</p></li></ul>"

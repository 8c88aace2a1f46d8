"""Tests for xml_canon.serialize module."""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_canon.parser import parse
from xml_canon.serialize import escape_attribute, escape_text, serialize, start_tag
from xml_canon.tree import Element, Text


class TestEscaping:
    """Tests for escape functions."""

    def test_escape_text(self):
        assert escape_text("a < b & c > d") == "a &lt; b &amp; c &gt; d"

    def test_escape_text_keeps_quotes_and_newlines(self):
        assert escape_text("\"it's\"\n") == "\"it's\"\n"

    def test_escape_text_carriage_return(self):
        assert escape_text("a\rb") == "a&#13;b"

    def test_escape_attribute(self):
        assert escape_attribute('say "hi" & <go>') == "say &quot;hi&quot; &amp; &lt;go&gt;"

    def test_escape_attribute_whitespace(self):
        assert escape_attribute("a\tb\nc\rd") == "a&#9;b&#10;c&#13;d"


class TestSerializeCompact:
    """Tests for compact serialization."""

    def test_empty_element(self):
        assert serialize(Element("empty"), pretty=False) == "<empty></empty>"

    def test_attributes_in_mapping_order(self):
        elem = Element("item", {"c": "3", "a": "1"})
        assert serialize(elem, pretty=False) == '<item c="3" a="1"></item>'

    def test_nested(self):
        root = Element(
            "root",
            children=[Element("a", children=[Text("1")]), Element("b")],
        )
        assert serialize(root, pretty=False) == "<root><a>1</a><b></b></root>"

    def test_skip_namespace_declarations(self):
        elem = Element("x:a", {"xmlns:x": "urn:x", "xmlns": "urn:d", "id": "1"})
        assert (
            serialize(elem, pretty=False, skip_namespace_declarations=True)
            == '<x:a id="1"></x:a>'
        )

    def test_round_trip_attribute_whitespace(self):
        elem = Element("a", {"v": "line1\nline2\ttab"})
        assert parse(serialize(elem)).attributes == {"v": "line1\nline2\ttab"}


class TestSerializePretty:
    """Tests for pretty serialization."""

    def test_indented_children(self):
        root = Element(
            "root",
            children=[
                Element("a", children=[Text("1")]),
                Element("b", children=[Element("c")]),
            ],
        )
        expected = (
            "<root>\n"
            "  <a>1</a>\n"
            "  <b>\n"
            "    <c></c>\n"
            "  </b>\n"
            "</root>"
        )
        assert serialize(root) == expected

    def test_custom_indentation(self):
        root = Element("root", children=[Element("a")])
        assert serialize(root, indentation="\t") == "<root>\n\t<a></a>\n</root>"

    def test_text_only_inline(self):
        assert serialize(Element("a", children=[Text("value")])) == "<a>value</a>"

    def test_mixed_content_inline(self):
        para = Element(
            "p",
            children=[
                Text("Hello "),
                Element("b", children=[Text("world")]),
                Text("!"),
            ],
        )
        assert serialize(para) == "<p>Hello <b>world</b>!</p>"

    def test_mixed_content_nested_in_pretty(self):
        root = Element(
            "root",
            children=[
                Element(
                    "p",
                    children=[Text("x"), Element("b", children=[Element("i")])],
                )
            ],
        )
        assert serialize(root) == "<root>\n  <p>x<b><i></i></b></p>\n</root>"


class TestSerializeDeepNesting:
    """Tests for serialization of deeply nested trees."""

    @staticmethod
    def chain(depth: int) -> Element:
        root = Element("a")
        current = root
        for _ in range(depth - 1):
            child = Element("a")
            current.children.append(child)
            current = child
        return root

    def test_compact(self):
        depth = 5000
        assert serialize(self.chain(depth), pretty=False) == "<a>" * depth + "</a>" * depth

    def test_pretty(self):
        depth = 3000
        lines = serialize(self.chain(depth), indentation=" ").splitlines()
        assert len(lines) == 2 * depth - 1
        assert lines[depth - 1] == " " * (depth - 1) + "<a></a>"
        assert lines[-1] == "</a>"


class TestStartTag:
    """Tests for start_tag function."""

    def test_attributes(self):
        elem = Element("item", {"id": "1", "v": 'say "hi"'})
        assert start_tag(elem) == '<item id="1" v="say &quot;hi&quot;">'

    def test_skip_namespace_declarations(self):
        elem = Element("x:a", {"xmlns:x": "urn:x", "id": "1"})
        assert start_tag(elem, skip_namespace_declarations=True) == '<x:a id="1">'

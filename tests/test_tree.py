"""Tests for xml_canon.tree module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_canon.tree import (
    Element,
    Text,
    is_namespace_declaration,
    is_whitespace_only,
    iter_elements,
)


class TestElement:
    """Tests for Element dataclass."""

    def test_defaults(self):
        elem = Element("root")
        assert elem.attributes == {}
        assert elem.children == []

    def test_element_children_skips_text(self):
        child = Element("a")
        elem = Element("root", children=[Text("x"), child, Text("y")])
        assert elem.element_children == [child]

    def test_append_text_merges(self):
        elem = Element("p")
        elem.append_text("a")
        elem.append_text("b")
        assert elem.children == [Text("ab")]

    def test_append_text_after_element(self):
        elem = Element("p", children=[Element("b")])
        elem.append_text("tail")
        assert elem.children == [Element("b"), Text("tail")]

    def test_append_empty_text_ignored(self):
        elem = Element("p")
        elem.append_text("")
        assert elem.children == []

    def test_equality_is_structural(self):
        assert Element("a", {"x": "1"}, [Text("t")]) == Element(
            "a", {"x": "1"}, [Text("t")]
        )


class TestIterElements:
    """Tests for iter_elements function."""

    def test_document_order(self):
        root = Element(
            "root",
            children=[
                Element("a", children=[Element("a1"), Element("a2")]),
                Text("skip"),
                Element("b"),
            ],
        )
        assert [e.tag for e in iter_elements(root)] == ["root", "a", "a1", "a2", "b"]

    def test_single_element(self):
        root = Element("only")
        assert list(iter_elements(root)) == [root]


class TestIsNamespaceDeclaration:
    """Tests for is_namespace_declaration function."""

    @pytest.mark.parametrize("name", ["xmlns", "xmlns:a", "xmlns:long-prefix"])
    def test_namespace_declarations(self, name):
        assert is_namespace_declaration(name) is True

    @pytest.mark.parametrize("name", ["id", "xmlnsfoo", "a:xmlns", "xml:lang"])
    def test_not_namespace_declarations(self, name):
        assert is_namespace_declaration(name) is False


class TestIsWhitespaceOnly:
    """Tests for is_whitespace_only function."""

    def test_whitespace(self):
        assert is_whitespace_only(" \t\r\n") is True

    def test_empty(self):
        assert is_whitespace_only("") is True

    def test_text(self):
        assert is_whitespace_only("  x ") is False

    def test_non_breaking_space_is_content(self):
        assert is_whitespace_only("\u00a0") is False

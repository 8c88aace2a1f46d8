"""Tests for xml_canon.options module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import yaml

from xml_canon.options import (
    NormalizationOptions,
    options_from_dict,
    parse_options_file,
)


class TestDefaults:
    """Tests for NormalizationOptions defaults."""

    def test_defaults(self):
        options = NormalizationOptions()
        assert options.ignore_insignificant_whitespace is True
        assert options.preserve_leading_trailing_whitespace_in_text is False
        assert options.normalize_whitespace_in_text_nodes is True
        assert options.pretty_print_output is True
        assert options.indentation == "  "
        assert options.sort_attributes is True


class TestOptionsFromDict:
    """Tests for options_from_dict function."""

    def test_empty(self):
        assert options_from_dict({}) == NormalizationOptions()

    def test_field_names(self):
        options = options_from_dict(
            {"pretty_print_output": False, "indentation": "\t", "sort_attributes": False}
        )
        assert options.pretty_print_output is False
        assert options.indentation == "\t"
        assert options.sort_attributes is False
        assert options.ignore_insignificant_whitespace is True

    def test_aliases(self):
        options = options_from_dict(
            {
                "ignoreWhitespace": False,
                "preserveLeadingTrailingWhitespace": True,
                "normalizeWhitespaceInTextNodes": False,
                "prettyPrintOutput": False,
                "indentationString": "    ",
                "sortAttributes": False,
            }
        )
        assert options == NormalizationOptions(
            ignore_insignificant_whitespace=False,
            preserve_leading_trailing_whitespace_in_text=True,
            normalize_whitespace_in_text_nodes=False,
            pretty_print_output=False,
            indentation="    ",
            sort_attributes=False,
        )

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown option: colour"):
            options_from_dict({"colour": "blue"})

    @pytest.mark.parametrize("value", [1, "true", None])
    def test_non_boolean_flag(self, value):
        with pytest.raises(ValueError, match="must be true or false"):
            options_from_dict({"sort_attributes": value})

    def test_indentation_not_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            options_from_dict({"indentation": 2})

    @pytest.mark.parametrize("value", ["ab", "\n", " -"])
    def test_indentation_not_blank(self, value):
        with pytest.raises(ValueError, match="spaces and tabs"):
            options_from_dict({"indentation": value})

    def test_empty_indentation_allowed(self):
        assert options_from_dict({"indentation": ""}).indentation == ""


class TestParseOptionsFile:
    """Tests for parse_options_file function."""

    def test_valid_file(self, tmp_path):
        options_file = tmp_path / "options.yaml"
        options_file.write_text(
            """
ignore_insignificant_whitespace: true
normalize_whitespace_in_text_nodes: false
pretty_print_output: true
indentation: "    "
sortAttributes: false
"""
        )
        options = parse_options_file(options_file)
        assert options.normalize_whitespace_in_text_nodes is False
        assert options.indentation == "    "
        assert options.sort_attributes is False

    def test_empty_file(self, tmp_path):
        options_file = tmp_path / "empty.yaml"
        options_file.write_text("")
        assert parse_options_file(options_file) == NormalizationOptions()

    def test_not_a_dictionary(self, tmp_path):
        options_file = tmp_path / "list.yaml"
        options_file.write_text("- sort_attributes\n")
        with pytest.raises(ValueError, match="must be a YAML dictionary"):
            parse_options_file(options_file)

    def test_invalid_yaml(self, tmp_path):
        options_file = tmp_path / "broken.yaml"
        options_file.write_text("sort_attributes: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            parse_options_file(options_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_options_file(tmp_path / "missing.yaml")

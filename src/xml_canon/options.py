"""Normalization options and their YAML loader."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_INDENTATION = "  "


@dataclass
class NormalizationOptions:
    """Options controlling the normalization pipeline.

    The pipeline reads these but never modifies them.
    """

    ignore_insignificant_whitespace: bool = True
    preserve_leading_trailing_whitespace_in_text: bool = False
    normalize_whitespace_in_text_nodes: bool = True
    pretty_print_output: bool = True
    indentation: str = DEFAULT_INDENTATION
    sort_attributes: bool = True


# Setting names used by the editor extension this tool grew out of
OPTION_ALIASES = {
    "ignoreInsignificantWhitespace": "ignore_insignificant_whitespace",
    "ignoreWhitespace": "ignore_insignificant_whitespace",
    "preserveLeadingTrailingWhitespaceInText": "preserve_leading_trailing_whitespace_in_text",
    "preserveLeadingTrailingWhitespace": "preserve_leading_trailing_whitespace_in_text",
    "normalizeWhitespaceInTextNodes": "normalize_whitespace_in_text_nodes",
    "prettyPrintOutput": "pretty_print_output",
    "indentationString": "indentation",
    "sortAttributes": "sort_attributes",
}

BOOLEAN_OPTIONS = frozenset(
    f.name for f in fields(NormalizationOptions) if f.name != "indentation"
)


def options_from_dict(data: Mapping[str, Any]) -> NormalizationOptions:
    """Build options from a mapping.

    Keys may use the Python field names or the camelCase setting names.
    Missing keys keep their defaults.

    Args:
        data: Option values.

    Returns:
        Parsed NormalizationOptions.

    Raises:
        ValueError: If a key is unknown or a value has the wrong type.
    """
    options = NormalizationOptions()

    for key, value in data.items():
        name = OPTION_ALIASES.get(key, key)

        if name in BOOLEAN_OPTIONS:
            if not isinstance(value, bool):
                raise ValueError(f"Option '{key}' must be true or false, got {value!r}")
            setattr(options, name, value)
        elif name == "indentation":
            if not isinstance(value, str):
                raise ValueError(f"Option '{key}' must be a string, got {value!r}")
            if value.strip(" \t"):
                raise ValueError(f"Option '{key}' may only contain spaces and tabs")
            options.indentation = value
        else:
            raise ValueError(f"Unknown option: {key}")

    return options


def parse_options_file(options_path: Path) -> NormalizationOptions:
    """Parse a YAML options file.

    An empty file yields the default options.

    Args:
        options_path: Path to the YAML file.

    Returns:
        Parsed NormalizationOptions.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the option format is invalid.
    """
    with open(options_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return NormalizationOptions()

    if not isinstance(data, dict):
        raise ValueError("Options file must be a YAML dictionary")

    return options_from_dict(data)

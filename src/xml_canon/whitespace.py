"""Whitespace normalization for text nodes and attribute values."""

import re

from .options import NormalizationOptions
from .tree import XML_WHITESPACE, Element, Text, is_whitespace_only

# Maximal run of XML whitespace characters
WHITESPACE_RUN = re.compile(r"[ \t\r\n]+")


def normalize_text(text: str, options: NormalizationOptions) -> str:
    """Apply whitespace policy to a piece of text.

    Args:
        text: Text content or attribute value.
        options: Normalization options.

    Returns:
        Normalized text.

    Example:
        >>> normalize_text("  a \\n  b ", NormalizationOptions())
        'a b'
    """
    if options.normalize_whitespace_in_text_nodes:
        text = WHITESPACE_RUN.sub(" ", text)
    if not options.preserve_leading_trailing_whitespace_in_text:
        text = text.strip(XML_WHITESPACE)
    return text


def normalize_whitespace(root: Element, options: NormalizationOptions) -> Element:
    """Normalize whitespace throughout a tree.

    Whitespace-only text nodes are dropped when insignificant whitespace is
    ignored. Remaining text nodes and all attribute values go through
    normalize_text(); text nodes left empty are dropped. Tags, attribute
    names and child order are untouched.

    Args:
        root: Root element (modified in-place).
        options: Normalization options.

    Returns:
        The same root element.
    """
    stack = [root]
    while stack:
        element = stack.pop()

        element.attributes = {
            name: normalize_text(value, options)
            for name, value in element.attributes.items()
        }

        children = []
        for child in element.children:
            if isinstance(child, Text):
                if options.ignore_insignificant_whitespace and is_whitespace_only(
                    child.value
                ):
                    continue
                value = normalize_text(child.value, options)
                if value:
                    children.append(Text(value))
            else:
                children.append(child)
                stack.append(child)
        element.children = children

    return root

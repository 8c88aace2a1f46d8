"""Tree to XML text conversion."""

from .options import DEFAULT_INDENTATION
from .tree import Element, Text, is_namespace_declaration


def escape_text(text: str) -> str:
    """Escape character data for element content.

    Carriage returns are written as character references because parsers
    normalize literal line endings.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\r", "&#13;")
    )


def escape_attribute(value: str) -> str:
    """Escape an attribute value for use inside double quotes.

    Tabs and line breaks are written as character references so they survive
    attribute-value normalization when the output is parsed again.
    """
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("\t", "&#9;")
        .replace("\n", "&#10;")
        .replace("\r", "&#13;")
    )


def start_tag(element: Element, skip_namespace_declarations: bool = False) -> str:
    """Format the start tag of an element."""
    parts = [element.tag]
    for name, value in element.attributes.items():
        if skip_namespace_declarations and is_namespace_declaration(name):
            continue
        parts.append(f'{name}="{escape_attribute(value)}"')
    return "<" + " ".join(parts) + ">"


def serialize(
    root: Element,
    pretty: bool = True,
    indentation: str = DEFAULT_INDENTATION,
    skip_namespace_declarations: bool = False,
) -> str:
    """Serialize an Element tree to XML text.

    Output is deterministic: attributes are written in mapping order with
    double quotes, and empty elements are always written as ``<tag></tag>``.
    No XML declaration is emitted.

    Args:
        root: Root element.
        pretty: Put child elements on their own indented lines.
        indentation: Indentation unit for pretty output.
        skip_namespace_declarations: Omit ``xmlns`` attributes.

    Returns:
        XML text.
    """
    out: list[str] = []
    # Pending work: literal text, or (element, level, pretty) to open
    stack: list[str | tuple[Element, int, bool]] = [(root, 0, pretty)]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue

        element, level, element_pretty = item
        out.append(start_tag(element, skip_namespace_declarations))

        # Text-only and mixed content is written inline so layout whitespace
        # never leaks into text
        has_text = any(isinstance(child, Text) for child in element.children)
        indent_children = element_pretty and bool(element.children) and not has_text

        pending: list[str | tuple[Element, int, bool]] = []
        for child in element.children:
            if isinstance(child, Text):
                pending.append(escape_text(child.value))
                continue
            if indent_children:
                pending.append("\n" + indentation * (level + 1))
            pending.append((child, level + 1, element_pretty and not has_text))

        if indent_children:
            pending.append("\n" + indentation * level)
        pending.append(f"</{element.tag}>")
        stack.extend(reversed(pending))

    return "".join(out)

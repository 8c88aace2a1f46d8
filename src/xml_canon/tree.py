"""Tree representation for parsed XML documents."""

from dataclasses import dataclass, field
from typing import Iterator

# Namespace declaration attribute names
XMLNS = "xmlns"
XMLNS_PREFIX = "xmlns:"

# Whitespace characters as defined by XML 1.0 (S production)
XML_WHITESPACE = " \t\r\n"


@dataclass
class Text:
    """Character data inside an element."""

    value: str


@dataclass
class Element:
    """An XML element.

    Tag and attribute names are kept exactly as written in the source,
    including any namespace prefix (e.g. ``a:item``, ``xmlns:a``).
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    @property
    def element_children(self) -> list["Element"]:
        """Child elements, skipping text nodes."""
        return [child for child in self.children if isinstance(child, Element)]

    def append_text(self, value: str) -> None:
        """Append character data, merging with a trailing text node."""
        if not value:
            return
        if self.children and isinstance(self.children[-1], Text):
            self.children[-1].value += value
        else:
            self.children.append(Text(value))


Node = Element | Text


def iter_elements(root: Element) -> Iterator[Element]:
    """Iterate over all elements in document (pre-) order.

    Args:
        root: Root element.

    Yields:
        Each element, starting with root.
    """
    stack = [root]
    while stack:
        element = stack.pop()
        yield element
        stack.extend(reversed(element.element_children))


def is_whitespace_only(text: str) -> bool:
    """Check if text consists solely of XML whitespace characters."""
    return text.strip(XML_WHITESPACE) == ""


def is_namespace_declaration(name: str) -> bool:
    """Check if an attribute name declares a namespace.

    Example:
        >>> is_namespace_declaration("xmlns:a")
        True
        >>> is_namespace_declaration("xmlnsfoo")
        False
    """
    return name == XMLNS or name.startswith(XMLNS_PREFIX)

"""Canonical ordering of attributes and child elements.

Child elements are grouped by tag name. Elements sharing a tag are ordered
by their canonical serialized content, so repeated siblings compare equal
regardless of where they appeared in the source. Text nodes never move:
only runs of consecutive elements between text nodes are reordered.
"""

from .options import NormalizationOptions
from .serialize import escape_text, serialize, start_tag
from .tree import Element, Node, Text, iter_elements


def sort_attributes(element: Element) -> None:
    """Sort an element's attributes by name.

    Python string comparison orders by code point, which matches the
    byte-wise order of the UTF-8 encoding.

    Args:
        element: Element to update in-place.
    """
    element.attributes = dict(sorted(element.attributes.items()))


def content_key(element: Element) -> str:
    """Sort key for an element among same-tag siblings.

    Namespace declarations are left out so the key does not depend on the
    depth at which a namespace was declared.
    """
    return serialize(element, pretty=False, skip_namespace_declarations=True)


def _build_key(element: Element, keys: dict[int, str]) -> str:
    # Same text as content_key(), assembled from the children's keys
    parts = [start_tag(element, skip_namespace_declarations=True)]
    for child in element.children:
        if isinstance(child, Text):
            parts.append(escape_text(child.value))
        else:
            parts.append(keys[id(child)])
    parts.append(f"</{element.tag}>")
    return "".join(parts)


def sort_children(
    children: list[Node], keys: dict[int, str] | None = None
) -> list[Node]:
    """Reorder element children between fixed text nodes.

    Args:
        children: Child nodes whose element children are already canonical.
        keys: Precomputed content keys by element id; missing keys are
            computed with content_key().

    Returns:
        New list of child nodes.
    """
    if keys is None:
        keys = {}

    def sort_key(element: Element) -> tuple[str, str]:
        key = keys.get(id(element))
        if key is None:
            key = keys[id(element)] = content_key(element)
        return element.tag, key

    result: list[Node] = []
    run: list[Element] = []

    for child in children:
        if isinstance(child, Text):
            result.extend(sorted(run, key=sort_key))
            run = []
            result.append(child)
        else:
            run.append(child)

    result.extend(sorted(run, key=sort_key))
    return result


def canonicalize(root: Element, options: NormalizationOptions) -> Element:
    """Canonicalize attribute and child order throughout a tree.

    Elements are visited in reverse document order, so every element is
    finished before its parent and each content key is built once from the
    keys of its already canonical children.

    Args:
        root: Root element (modified in-place).
        options: Normalization options; attributes are sorted only when
            sort_attributes is set.

    Returns:
        The same root element.
    """
    keys: dict[int, str] = {}

    for element in reversed(list(iter_elements(root))):
        if options.sort_attributes:
            sort_attributes(element)
        element.children = sort_children(element.children, keys)
        keys[id(element)] = _build_key(element, keys)

    return root

"""Namespace declaration hoisting.

All ``xmlns`` and ``xmlns:<prefix>`` declarations are moved to the root
element. Prefixes used on tags and attributes are not rewritten, so two
documents binding different prefixes to the same URI still differ.
"""

from .tree import Element, is_namespace_declaration, iter_elements


def collect_namespaces(root: Element) -> dict[str, str]:
    """Collect namespace declarations from the whole tree.

    Elements are visited in document order; a later declaration of the same
    key overwrites an earlier one.

    Args:
        root: Root element.

    Returns:
        Mapping of declaration name (e.g. "xmlns:a") to URI.
    """
    namespaces: dict[str, str] = {}
    for element in iter_elements(root):
        for name, value in element.attributes.items():
            if is_namespace_declaration(name):
                namespaces[name] = value
    return namespaces


def normalize_namespaces(root: Element) -> Element:
    """Move all namespace declarations to the root element.

    Declarations are removed from every element and written on the root,
    ordered by name and placed ahead of the root's other attributes.

    Args:
        root: Root element (modified in-place).

    Returns:
        The same root element.
    """
    namespaces = collect_namespaces(root)

    for element in iter_elements(root):
        element.attributes = {
            name: value
            for name, value in element.attributes.items()
            if not is_namespace_declaration(name)
        }

    hoisted = {name: namespaces[name] for name in sorted(namespaces)}
    hoisted.update(root.attributes)
    root.attributes = hoisted
    return root

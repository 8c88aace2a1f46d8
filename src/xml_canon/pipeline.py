"""XML normalization pipeline.

This module sequences the normalization steps:
- whitespace: Normalize text nodes and attribute values
- canonicalize: Sort attributes and child elements
- namespaces: Hoist namespace declarations to the root

Every run is: precheck -> parse -> selected steps -> serialize. A run either
returns the complete normalized text or raises one of the errors from
``xml_canon.errors``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Literal

from .canonicalize import canonicalize
from .errors import (
    InvalidInputError,
    MalformedXmlError,
    ResourceExhaustedError,
    XmlNormalizationError,
)
from .namespaces import normalize_namespaces
from .options import NormalizationOptions
from .parser import parse
from .serialize import serialize
from .whitespace import normalize_whitespace

logger = logging.getLogger(__name__)

# Step names
StepName = Literal["whitespace", "canonicalize", "namespaces"]
ALL_STEPS: list[StepName] = ["whitespace", "canonicalize", "namespaces"]

PREDEFINED_ENTITIES = frozenset(["lt", "gt", "amp", "apos", "quot"])

ENTITY_REFERENCE = re.compile(r"&([^&;<>\s]*);")
NUMERIC_REFERENCE = re.compile(r"#(?:[0-9]+|x[0-9a-fA-F]+)")

# Whitespace between a closing '>' and the next '<'
INTER_TAG_WHITESPACE = re.compile(r">[ \t\r\n]+<")


def precheck_xml(xml_text: object) -> str:
    """Run cheap structural checks before parsing.

    Args:
        xml_text: Candidate XML text.

    Returns:
        The input text.

    Raises:
        InvalidInputError: If the input is not a string or is blank.
        MalformedXmlError: If angle brackets are unbalanced or an entity
            reference is neither predefined nor numeric.
    """
    if not isinstance(xml_text, str):
        raise InvalidInputError(
            f"Invalid XML input: expected text, got {type(xml_text).__name__}"
        )

    if not xml_text.strip():
        raise InvalidInputError("Invalid XML input: document is empty")

    opening = xml_text.count("<")
    closing = xml_text.count(">")
    if opening != closing:
        raise MalformedXmlError(
            f"Malformed XML: unbalanced tag delimiters "
            f"({opening} '<' vs {closing} '>')"
        )

    for match in ENTITY_REFERENCE.finditer(xml_text):
        name = match.group(1)
        if name in PREDEFINED_ENTITIES or NUMERIC_REFERENCE.fullmatch(name):
            continue
        line = xml_text.count("\n", 0, match.start()) + 1
        column = match.start() - (xml_text.rfind("\n", 0, match.start()) + 1) + 1
        raise MalformedXmlError(
            f"Malformed XML: invalid entity reference '{match.group(0)}'",
            line=line,
            column=column,
        )

    return xml_text


def _run_steps(
    xml_text: str,
    options: NormalizationOptions,
    steps: list[StepName],
) -> str:
    logger.debug("Parsing document (%d characters)", len(xml_text))
    root = parse(xml_text)

    if "whitespace" in steps:
        logger.debug("Normalizing whitespace")
        normalize_whitespace(root, options)

    if "canonicalize" in steps:
        logger.debug("Canonicalizing attributes and child elements")
        canonicalize(root, options)

    if "namespaces" in steps:
        logger.debug("Hoisting namespace declarations")
        normalize_namespaces(root)

    logger.debug("Serializing document")
    output = serialize(
        root,
        pretty=options.pretty_print_output,
        indentation=options.indentation,
    )

    if not options.pretty_print_output and options.ignore_insignificant_whitespace:
        output = INTER_TAG_WHITESPACE.sub("><", output)

    return output.strip()


def normalize_xml(
    xml_text: str,
    options: NormalizationOptions | None = None,
    steps: list[StepName] | None = None,
) -> str:
    """Normalize an XML document through the selected steps.

    Steps always run in the order of ALL_STEPS, whatever order they are
    given in.

    Args:
        xml_text: XML document text.
        options: Normalization options (default: NormalizationOptions()).
        steps: Steps to execute (default: all steps).

    Returns:
        Normalized XML text.

    Raises:
        InvalidInputError: If the input is missing or blank.
        MalformedXmlError: If the input is not well-formed XML.
        ResourceExhaustedError: If the document is too large or deeply nested
            to process.
    """
    if options is None:
        options = NormalizationOptions()
    if steps is None:
        steps = ALL_STEPS

    try:
        precheck_xml(xml_text)
        return _run_steps(xml_text, options, steps)
    except XmlNormalizationError as e:
        logger.debug("Normalization failed (%s): %s", e.kind, e)
        raise
    except (MemoryError, RecursionError) as e:
        logger.debug("Normalization exhausted resources: %r", e)
        raise ResourceExhaustedError(
            f"Document too large or deeply nested to process ({type(e).__name__}); "
            "reduce the input size"
        ) from e
    except Exception as e:
        logger.debug("Normalization failed with unexpected error: %r", e)
        raise MalformedXmlError(f"Malformed XML: {e}") from e


def normalize_all(xml_text: str, options: NormalizationOptions | None = None) -> str:
    """Run the full pipeline: whitespace, canonical order, namespaces."""
    return normalize_xml(xml_text, options, ALL_STEPS)


def normalize_whitespace_and_sort(
    xml_text: str, options: NormalizationOptions | None = None
) -> str:
    """Normalize whitespace and canonical order, leaving namespaces in place."""
    return normalize_xml(xml_text, options, ["whitespace", "canonicalize"])


def _sort_only_options(sort_attributes: bool) -> NormalizationOptions:
    # Drop layout whitespace between tags but leave text content as written
    return NormalizationOptions(
        ignore_insignificant_whitespace=True,
        preserve_leading_trailing_whitespace_in_text=True,
        normalize_whitespace_in_text_nodes=False,
        sort_attributes=sort_attributes,
    )


def sort_nodes_and_attributes(xml_text: str) -> str:
    """Sort child elements and attributes; text is left as written."""
    options = _sort_only_options(sort_attributes=True)
    return normalize_xml(xml_text, options, ["whitespace", "canonicalize"])


def sort_nodes(xml_text: str) -> str:
    """Sort child elements only; attributes keep their source order."""
    options = _sort_only_options(sort_attributes=False)
    return normalize_xml(xml_text, options, ["whitespace", "canonicalize"])


@dataclass
class ComparisonResult:
    """Normalized forms of two documents."""

    left: str
    right: str
    left_label: str = "left"
    right_label: str = "right"

    @property
    def equivalent(self) -> bool:
        """Check if both documents share the same canonical form."""
        return self.left == self.right


def compare_documents(
    left_text: str,
    right_text: str,
    options: NormalizationOptions | None = None,
    left_label: str = "left",
    right_label: str = "right",
) -> ComparisonResult:
    """Normalize two documents for side-by-side comparison.

    Args:
        left_text: First XML document.
        right_text: Second XML document.
        options: Normalization options, shared by both sides.
        left_label: Name of the first input, used in error messages.
        right_label: Name of the second input, used in error messages.

    Returns:
        ComparisonResult with both normalized documents.

    Raises:
        XmlNormalizationError: If either side fails; its ``source`` names
            the failing side.
    """
    if options is None:
        options = NormalizationOptions()

    normalized: list[str] = []
    for text, label in ((left_text, left_label), (right_text, right_label)):
        try:
            normalized.append(normalize_all(text, options))
        except XmlNormalizationError as e:
            e.source = label
            raise

    return ComparisonResult(
        left=normalized[0],
        right=normalized[1],
        left_label=left_label,
        right_label=right_label,
    )


def format_comparison_report(result: ComparisonResult) -> str:
    """Format a comparison result as text.

    Args:
        result: Comparison result.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    lines.append(f"Left:  {result.left_label} ({len(result.left.splitlines())} lines)")
    lines.append(f"Right: {result.right_label} ({len(result.right.splitlines())} lines)")
    lines.append("")

    if result.equivalent:
        lines.append("Documents are equivalent after normalization.")
    else:
        left_lines = result.left.splitlines()
        right_lines = result.right.splitlines()
        first = next(
            (
                i
                for i, (a, b) in enumerate(zip(left_lines, right_lines))
                if a != b
            ),
            min(len(left_lines), len(right_lines)),
        )
        lines.append("Documents differ after normalization.")
        lines.append(f"First difference at normalized line {first + 1}.")

    return "\n".join(lines)

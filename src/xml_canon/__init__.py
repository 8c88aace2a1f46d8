"""XML Canon - Semantic XML normalization for text-diff comparison."""

__version__ = "0.1.0"

from .errors import (
    InvalidInputError,
    MalformedXmlError,
    ResourceExhaustedError,
    XmlNormalizationError,
)
from .options import (
    NormalizationOptions,
    options_from_dict,
    parse_options_file,
)
from .tree import Element, Text
from .parser import parse
from .serialize import serialize
from .whitespace import normalize_whitespace
from .canonicalize import canonicalize
from .namespaces import normalize_namespaces
from .pipeline import (
    ALL_STEPS,
    ComparisonResult,
    compare_documents,
    format_comparison_report,
    normalize_all,
    normalize_whitespace_and_sort,
    normalize_xml,
    precheck_xml,
    sort_nodes,
    sort_nodes_and_attributes,
)

__all__ = [
    # Errors
    "InvalidInputError",
    "MalformedXmlError",
    "ResourceExhaustedError",
    "XmlNormalizationError",
    # Options
    "NormalizationOptions",
    "options_from_dict",
    "parse_options_file",
    # Tree
    "Element",
    "Text",
    "parse",
    "serialize",
    # Steps
    "normalize_whitespace",
    "canonicalize",
    "normalize_namespaces",
    # Pipeline
    "ALL_STEPS",
    "ComparisonResult",
    "compare_documents",
    "format_comparison_report",
    "normalize_all",
    "normalize_whitespace_and_sort",
    "normalize_xml",
    "precheck_xml",
    "sort_nodes",
    "sort_nodes_and_attributes",
]

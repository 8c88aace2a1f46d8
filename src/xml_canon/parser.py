"""XML text to tree conversion.

Uses the expat parser that backs ``xml.etree.ElementTree``, but without
namespace processing: prefixed names and ``xmlns`` declarations are kept
exactly as written so they can be canonicalized later.
"""

import logging
from xml.parsers import expat

from .errors import MalformedXmlError, ResourceExhaustedError
from .tree import Element

logger = logging.getLogger(__name__)

# Expat error codes that signal resource limits rather than bad syntax
_RESOURCE_ERROR_CODES = frozenset(
    expat.errors.codes[message]
    for message in (
        expat.errors.XML_ERROR_NO_MEMORY,
        getattr(expat.errors, "XML_ERROR_AMPLIFICATION_LIMIT_BREACH", None),
    )
    if message in expat.errors.codes
)


class _TreeBuilder:
    """Collects expat callbacks into an Element tree."""

    def __init__(self) -> None:
        self.root: Element | None = None
        self._stack: list[Element] = []

    def start(self, tag: str, attributes: dict[str, str]) -> None:
        element = Element(tag=tag, attributes=dict(attributes))
        if self._stack:
            self._stack[-1].children.append(element)
        else:
            self.root = element
        self._stack.append(element)

    def end(self, tag: str) -> None:
        self._stack.pop()

    def data(self, text: str) -> None:
        if self._stack:
            self._stack[-1].append_text(text)


def _create_parser(builder: _TreeBuilder) -> "expat.XMLParserType":
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.SetParamEntityParsing(expat.XML_PARAM_ENTITY_PARSING_NEVER)
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    return parser


def parse(xml_text: str) -> Element:
    """Parse XML text into an Element tree.

    Comments, processing instructions, the XML declaration and any DOCTYPE
    are dropped. CDATA sections become ordinary text. Self-closing and
    explicitly closed empty elements produce the same tree.

    Args:
        xml_text: XML document text.

    Returns:
        Root element of the document.

    Raises:
        MalformedXmlError: If the text is not well-formed XML.
        ResourceExhaustedError: If the parser hits a memory or entity
            expansion limit.
    """
    builder = _TreeBuilder()
    parser = _create_parser(builder)

    try:
        parser.Parse(xml_text, True)
    except expat.ExpatError as e:
        message = expat.ErrorString(e.code)
        logger.debug("Parser rejected document: %s", e)
        if e.code in _RESOURCE_ERROR_CODES:
            raise ResourceExhaustedError(
                f"Document too large or complex to process ({message}); "
                "reduce the input size",
                line=e.lineno,
                column=e.offset + 1,
            ) from e
        raise MalformedXmlError(
            f"Malformed XML: {message}",
            line=e.lineno,
            column=e.offset + 1,
        ) from e

    if builder.root is None:
        raise MalformedXmlError("Malformed XML: no root element found")

    return builder.root

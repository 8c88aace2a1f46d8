"""Error types raised by the normalization pipeline."""

from typing import Literal

ErrorKind = Literal["invalid_input", "malformed_xml", "resource_exhausted"]


class XmlNormalizationError(Exception):
    """Base class for classified normalization failures.

    Attributes:
        kind: Error classification.
        message: Human-readable message.
        source: Label of the input that failed (e.g. "selection", "clipboard"
            or a file name), set by callers that handle more than one input.
        line: 1-based line of the failure, when known.
        column: 1-based column of the failure, when known.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.line = line
        self.column = column

    def __str__(self) -> str:
        text = self.message
        if self.line is not None:
            if self.column is not None:
                text += f" (line {self.line}, column {self.column})"
            else:
                text += f" (line {self.line})"
        if self.source:
            text += f" [in {self.source}]"
        return text


class InvalidInputError(XmlNormalizationError):
    """Input is missing, not text, or empty."""

    kind: ErrorKind = "invalid_input"


class MalformedXmlError(XmlNormalizationError):
    """Input is not well-formed XML."""

    kind: ErrorKind = "malformed_xml"


class ResourceExhaustedError(XmlNormalizationError):
    """Processing ran out of memory or recursion depth."""

    kind: ErrorKind = "resource_exhausted"

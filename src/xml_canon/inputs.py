"""Reading XML input for the command-line tools."""

from pathlib import Path
from typing import TextIO

# Inputs at or above this size are rejected before normalization
MAX_INPUT_BYTES = 10 * 1024 * 1024  # 10 MiB

BOM = "\ufeff"


class InputTooLargeError(ValueError):
    """Input exceeds MAX_INPUT_BYTES."""


def is_within_size_limit(text: str, limit: int = MAX_INPUT_BYTES) -> bool:
    """Check if text is strictly smaller than the limit when UTF-8 encoded.

    Args:
        text: Input text.
        limit: Size limit in bytes.

    Returns:
        True if the encoded size is below the limit.
    """
    return len(text.encode("utf-8")) < limit


def _check_size(text: str, label: str) -> str:
    if not is_within_size_limit(text):
        raise InputTooLargeError(
            f"{label} exceeds {MAX_INPUT_BYTES // (1024 * 1024)}MB size limit"
        )
    return text


def read_xml_file(file_path: Path) -> str:
    """Read an XML file as UTF-8 text.

    Args:
        file_path: Path to the XML file.

    Returns:
        File content with any byte order mark removed.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
        InputTooLargeError: If the file exceeds MAX_INPUT_BYTES.
    """
    text = file_path.read_text(encoding="utf-8-sig")
    return _check_size(text, str(file_path))


def read_xml_stream(stream: TextIO, label: str = "<stdin>") -> str:
    """Read XML text from an open text stream.

    Args:
        stream: Text stream, e.g. sys.stdin.
        label: Name used in error messages.

    Returns:
        Stream content with any byte order mark removed.

    Raises:
        InputTooLargeError: If the content exceeds MAX_INPUT_BYTES.
    """
    text = stream.read()
    if text.startswith(BOM):
        text = text[len(BOM):]
    return _check_size(text, label)

"""Reading JSON documents from files and streams."""

import json
import logging
import re
from typing import IO, Any, Union

from jsonshape.core.exceptions import InputError, ParseError

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r"

# Invalid UTF-8 bytes after decoding with surrogateescape
_ESCAPED_BYTE = re.compile("[\udc80-\udcff]")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


def open_input(path: str) -> IO[bytes]:
    """Open a document file for binary reading.

    Raises:
        InputError: If the file cannot be opened (missing, a directory,
            permission denied)
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputError(f"Cannot open input file: {e}", path) from e


def decode_document(data: Union[str, bytes]) -> Any:
    """Decode the first JSON value in ``data``.

    Anything after the first value is ignored, including bytes that are
    not UTF-8. Bytes are read as UTF-8 (a leading byte order mark is
    allowed).

    Raises:
        ParseError: If the input is empty, not UTF-8, or does not start
            with a well-formed JSON value
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8-sig", errors="surrogateescape")

    start = len(data) - len(data.lstrip(_WHITESPACE))
    if start == len(data):
        raise ParseError("Invalid JSON: unexpected end of input")

    try:
        value, end = _decoder.raw_decode(data, start)
    except ValueError as e:
        # JSONDecodeError and rejected NaN/Infinity constants
        raise ParseError(f"Invalid JSON: {e}") from e

    bad_byte = _ESCAPED_BYTE.search(data, start, end)
    if bad_byte:
        raise ParseError(
            f"Invalid JSON: input is not valid UTF-8 "
            f"(byte 0x{ord(bad_byte.group()) - 0xDC00:02x} at position {bad_byte.start()})"
        )

    if data[end:].strip(_WHITESPACE):
        logger.debug(f"Ignoring {len(data) - end} characters after the first JSON value")
    return value


def load_document(stream: IO) -> Any:
    """Read a whole stream and decode the first JSON document in it."""
    return decode_document(stream.read())

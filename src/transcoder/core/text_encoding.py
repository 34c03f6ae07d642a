"""Conversion between user text and raw bytes.

Every codec passes text through this adapter before bit-level transcoding:

- ``utf-8``: any Unicode text, stored as its UTF-8 byte sequence
- ``ascii``: code points 0-127 only, one byte each
- ``latin-1``: code points 0-255 only, one byte each (ISO-8859-1)

Both directions raise ``TextEncodingError`` naming the offending character or
byte and its position.
"""

from __future__ import annotations

from enum import Enum

from transcoder.core.errors import TextEncodingError


class TextEncoding(str, Enum):
    """Supported text encodings; values double as ``input_encoding`` wire values."""

    UNICODE = "utf-8"
    ASCII = "ascii"
    LATIN_1 = "latin-1"


# Highest code point each restricted mode can carry
_RESTRICTED_LIMITS: dict[TextEncoding, tuple[int, str]] = {
    TextEncoding.ASCII: (0x7F, "ASCII"),
    TextEncoding.LATIN_1: (0xFF, "Latin-1"),
}


def _check_range(text: str, mode: TextEncoding) -> None:
    limit, label = _RESTRICTED_LIMITS[mode]
    for position, char in enumerate(text):
        if ord(char) > limit:
            raise TextEncodingError(
                f'Character "{char}" at position {position} is not valid {label}. '
                "Use UTF-8 encoding instead."
            )


def to_bytes(text: str, mode: TextEncoding = TextEncoding.UNICODE) -> bytes:
    """Convert text to bytes under ``mode``."""
    mode = TextEncoding(mode)
    if mode is TextEncoding.UNICODE:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            # Lone surrogates have no UTF-8 form
            raise TextEncodingError(
                f"Character at position {exc.start} cannot be encoded as UTF-8."
            ) from exc

    _check_range(text, mode)
    # Range already checked, so latin-1 maps each code point to one byte
    return text.encode("latin-1")


def from_bytes(data: bytes, mode: TextEncoding = TextEncoding.UNICODE) -> str:
    """Convert bytes back to text under ``mode``."""
    mode = TextEncoding(mode)
    if mode is TextEncoding.UNICODE:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TextEncodingError(
                f"Decoded bytes are not valid UTF-8 (byte 0x{data[exc.start]:02x} "
                f"at position {exc.start}). Try ASCII or Latin-1 encoding."
            ) from exc

    if mode is TextEncoding.ASCII:
        for position, byte in enumerate(data):
            if byte > 0x7F:
                raise TextEncodingError(
                    f"Byte 0x{byte:02x} at position {position} is not valid ASCII. "
                    "Use UTF-8 or Latin-1 encoding instead."
                )

    return data.decode("latin-1")

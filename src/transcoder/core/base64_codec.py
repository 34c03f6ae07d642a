"""Base64 codec with RFC 4648 standard and URL-safe variants.

Standard output uses ``A-Za-z0-9+/`` and pads with ``=`` to a multiple of 4.
URL-safe output swaps ``+`` for ``-`` and ``/`` for ``_`` and never pads, so it
can be dropped into a query string as is.

Decoding first runs a character-set check for the selected variant, then
unpacks six bits per symbol. Unpadded standard input is accepted as long as its
length is not ``1 mod 4``; trailing bits that do not complete a byte are
discarded.
"""

from __future__ import annotations

import re
from typing import Final

from transcoder.core.base16_codec import strip_whitespace
from transcoder.core.errors import InvalidBase64
from transcoder.core.results import (
    Base64Format,
    CodecOptions,
    CodecResult,
    resolve_options,
    run_timed,
)
from transcoder.core.text_encoding import from_bytes, to_bytes

BASE64_ALPHABET: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
_SYMBOL_VALUES: Final[dict[str, int]] = {
    symbol: value for value, symbol in enumerate(BASE64_ALPHABET)
}
PAD: Final[str] = "="

_STANDARD_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_URL_SAFE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]*")

_TO_URL_SAFE: Final[dict[int, str | None]] = str.maketrans({"+": "-", "/": "_", "=": None})
_FROM_URL_SAFE: Final[dict[int, str]] = str.maketrans({"-": "+", "_": "/"})


def to_url_safe(value: str) -> str:
    """Convert standard Base64 to the URL-safe form (``-``, ``_``, no padding)."""
    return value.translate(_TO_URL_SAFE)


def from_url_safe(value: str) -> str:
    """Convert URL-safe Base64 back to the standard alphabet with padding restored."""
    standard = value.translate(_FROM_URL_SAFE)
    return standard + PAD * (-len(standard) % 4)


def is_valid_base64(value: str, fmt: Base64Format = Base64Format.STANDARD) -> bool:
    """Character-set check for ``fmt``; the empty string is valid."""
    fmt = Base64Format(fmt)
    pattern = _URL_SAFE_PATTERN if fmt is Base64Format.URL_SAFE else _STANDARD_PATTERN
    return pattern.fullmatch(value) is not None


def encode_bytes(data: bytes, fmt: Base64Format = Base64Format.STANDARD) -> str:
    """Encode bytes as Base64 in the given variant."""
    fmt = Base64Format(fmt)
    symbols: list[str] = []
    for offset in range(0, len(data), 3):
        group = data[offset : offset + 3]
        chunk = int.from_bytes(group.ljust(3, b"\x00"), "big")
        # 1 byte -> 2 symbols, 2 bytes -> 3 symbols, 3 bytes -> 4 symbols
        count = len(group) + 1
        for shift in (18, 12, 6, 0)[:count]:
            symbols.append(BASE64_ALPHABET[(chunk >> shift) & 0x3F])
        symbols.append(PAD * (4 - count))

    encoded = "".join(symbols)
    if fmt is Base64Format.URL_SAFE:
        return to_url_safe(encoded)
    return encoded


def _unpack(value: str) -> bytes:
    """Unpack standard-alphabet Base64, padding optional."""
    body = value
    if len(body) % 4 == 0:
        if body.endswith(PAD * 2):
            body = body[:-2]
        elif body.endswith(PAD):
            body = body[:-1]

    if PAD in body or len(body) % 4 == 1:
        raise InvalidBase64("Invalid Base64 input: incorrect length or padding.")

    out = bytearray()
    buffer = 0
    bits = 0
    for char in body:
        symbol_value = _SYMBOL_VALUES.get(char)
        if symbol_value is None:
            raise InvalidBase64(f"Invalid Base64 input: unexpected character {char!r}.")
        buffer = (buffer << 6) | symbol_value
        bits += 6
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    return bytes(out)


def decode_to_bytes(value: str, fmt: Base64Format = Base64Format.STANDARD) -> bytes:
    """Decode Base64 text in the given variant to bytes."""
    fmt = Base64Format(fmt)
    normalized = strip_whitespace(value)
    if not is_valid_base64(normalized, fmt):
        raise InvalidBase64(
            f"Invalid Base64 input for {fmt.value} format. "
            "Input contains invalid characters."
        )

    if fmt is Base64Format.URL_SAFE:
        normalized = from_url_safe(normalized)
    return _unpack(normalized)


class Base64Codec:
    """Text <-> Base64 transcoder."""

    name = "base64"

    def encode(self, text: str, options: CodecOptions | None = None) -> CodecResult:
        opts = resolve_options(options)

        def operation() -> str:
            if text == "":
                return ""
            return encode_bytes(to_bytes(text, opts.text_encoding), opts.format)

        return run_timed(operation, codec=self.name, action="encode")

    def decode(self, text: str, options: CodecOptions | None = None) -> CodecResult:
        opts = resolve_options(options)

        def operation() -> str:
            if text == "":
                return ""
            return from_bytes(decode_to_bytes(text, opts.format), opts.text_encoding)

        return run_timed(operation, codec=self.name, action="decode")

"""Base16 (hexadecimal) codec.

Encoding emits two lowercase hex digits per byte with no separators. Decoding
accepts either case and ignores ASCII whitespace, so ``"48 65 6C"`` and
``"48656c"`` decode identically.
"""

from __future__ import annotations

from typing import Final

from transcoder.core.errors import InvalidBase16
from transcoder.core.results import CodecOptions, CodecResult, resolve_options, run_timed
from transcoder.core.text_encoding import from_bytes, to_bytes

HEX_DIGITS: Final[str] = "0123456789abcdef"
_HEX_VALUES: Final[dict[str, int]] = {digit: value for value, digit in enumerate(HEX_DIGITS)}

ASCII_WHITESPACE: Final[str] = " \t\n\r\f\v"
_STRIP_WHITESPACE: Final[dict[int, None]] = str.maketrans("", "", ASCII_WHITESPACE)


def strip_whitespace(value: str) -> str:
    """Remove ASCII whitespace anywhere in ``value``."""
    return value.translate(_STRIP_WHITESPACE)


def encode_bytes(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return "".join(HEX_DIGITS[byte >> 4] + HEX_DIGITS[byte & 0x0F] for byte in data)


def decode_to_bytes(value: str) -> bytes:
    """Decode hex text to bytes, rejecting the whole input on any problem."""
    normalized = strip_whitespace(value).lower()

    for position, char in enumerate(normalized):
        if char not in _HEX_VALUES:
            raise InvalidBase16(
                f'Invalid hexadecimal character "{char}" at position {position}. '
                "Only 0-9, A-F, a-f, and whitespace are allowed."
            )

    if len(normalized) % 2 != 0:
        raise InvalidBase16(
            "Hex string must have even number of characters (pairs of hex digits)."
        )

    return bytes(
        (_HEX_VALUES[normalized[i]] << 4) | _HEX_VALUES[normalized[i + 1]]
        for i in range(0, len(normalized), 2)
    )


class Base16Codec:
    """Text <-> hexadecimal transcoder."""

    name = "base16"

    def encode(self, text: str, options: CodecOptions | None = None) -> CodecResult:
        opts = resolve_options(options)

        def operation() -> str:
            if text == "":
                return ""
            return encode_bytes(to_bytes(text, opts.text_encoding))

        return run_timed(operation, codec=self.name, action="encode")

    def decode(self, text: str, options: CodecOptions | None = None) -> CodecResult:
        opts = resolve_options(options)

        def operation() -> str:
            if text == "":
                return ""
            return from_bytes(decode_to_bytes(text), opts.text_encoding)

        return run_timed(operation, codec=self.name, action="decode")

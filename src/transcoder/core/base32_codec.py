"""RFC 4648 Base32 codec (alphabet ``A-Z2-7``).

The byte sequence is treated as one big-endian bitstream and consumed five
bits at a time. Output is always uppercase; ``=`` padding to a multiple of 8
symbols is optional and controlled by ``CodecOptions.padding``.

Decoding is deliberately forgiving:
- case-insensitive (``jbswy3dp`` == ``JBSWY3DP``)
- ASCII whitespace anywhere is ignored
- trailing ``=`` padding is optional, whatever the ``padding`` option says
- leftover bits that do not fill a whole byte are discarded
"""

from __future__ import annotations

from typing import Final

from transcoder.core.base16_codec import strip_whitespace
from transcoder.core.errors import InvalidBase32
from transcoder.core.results import CodecOptions, CodecResult, resolve_options, run_timed
from transcoder.core.text_encoding import from_bytes, to_bytes

BASE32_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_SYMBOL_VALUES: Final[dict[str, int]] = {
    symbol: value for value, symbol in enumerate(BASE32_ALPHABET)
}

PAD: Final[str] = "="
BLOCK_SIZE: Final[int] = 8


def encode_bytes(data: bytes, padding: bool = True) -> str:
    """Encode bytes as Base32, optionally padded to a multiple of 8 symbols."""
    symbols: list[str] = []
    buffer = 0
    bits = 0

    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            symbols.append(BASE32_ALPHABET[(buffer >> bits) & 0x1F])
        # Keep only the bits not yet emitted
        buffer &= (1 << bits) - 1

    if bits > 0:
        # Final partial group is left-aligned and zero-filled
        symbols.append(BASE32_ALPHABET[(buffer << (5 - bits)) & 0x1F])

    if padding and len(symbols) % BLOCK_SIZE:
        symbols.append(PAD * (BLOCK_SIZE - len(symbols) % BLOCK_SIZE))

    return "".join(symbols)


def decode_to_bytes(value: str) -> bytes:
    """Decode Base32 text to bytes."""
    cleaned = strip_whitespace(value).rstrip(PAD).upper()

    out = bytearray()
    buffer = 0
    bits = 0

    for char in cleaned:
        symbol_value = _SYMBOL_VALUES.get(char)
        if symbol_value is None:
            raise InvalidBase32(
                f"Invalid Base32 character: {char}. "
                "Only characters A-Z, 2-7, and = (padding) are allowed."
            )
        buffer = (buffer << 5) | symbol_value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    return bytes(out)


class Base32Codec:
    """Text <-> Base32 transcoder."""

    name = "base32"

    def encode(self, text: str, options: CodecOptions | None = None) -> CodecResult:
        opts = resolve_options(options)

        def operation() -> str:
            if text == "":
                return ""
            return encode_bytes(to_bytes(text, opts.text_encoding), padding=opts.padding)

        return run_timed(operation, codec=self.name, action="encode")

    def decode(self, text: str, options: CodecOptions | None = None) -> CodecResult:
        opts = resolve_options(options)

        def operation() -> str:
            if text == "":
                return ""
            return from_bytes(decode_to_bytes(text), opts.text_encoding)

        return run_timed(operation, codec=self.name, action="decode")

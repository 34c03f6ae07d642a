"""Codec engine: text encoding adapter and the Base16/32/64 transcoders."""

from transcoder.core.base16_codec import Base16Codec
from transcoder.core.base32_codec import Base32Codec
from transcoder.core.base64_codec import Base64Codec
from transcoder.core.errors import (
    CodecError,
    InvalidBase16,
    InvalidBase32,
    InvalidBase64,
    TextEncodingError,
)
from transcoder.core.results import (
    Base64Format,
    Codec,
    CodecOptions,
    CodecResult,
)
from transcoder.core.text_encoding import TextEncoding

CODECS: dict[str, type[Codec]] = {
    Base16Codec.name: Base16Codec,
    Base32Codec.name: Base32Codec,
    Base64Codec.name: Base64Codec,
}


def get_codec(name: str) -> Codec:
    """Return a fresh codec instance by name (``base16``, ``base32``, ``base64``)."""
    try:
        return CODECS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown codec: {name}") from None


__all__ = [
    "CODECS",
    "Base16Codec",
    "Base32Codec",
    "Base64Codec",
    "Base64Format",
    "Codec",
    "CodecError",
    "CodecOptions",
    "CodecResult",
    "InvalidBase16",
    "InvalidBase32",
    "InvalidBase64",
    "TextEncoding",
    "TextEncodingError",
    "get_codec",
]

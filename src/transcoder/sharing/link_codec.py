"""Wrapping of tool input into query-string-safe tokens.

A token is the UTF-8 text Base64-encoded and then made URL-safe: ``+`` becomes
``-``, ``/`` becomes ``_`` and ``=`` padding is dropped. Tokens never need
percent-encoding inside a query string value.

Unwrapping is fail-open: a shared link may have been edited or truncated, so
any problem yields the empty string instead of an exception.
"""

from __future__ import annotations

import logging

from transcoder.core.base16_codec import strip_whitespace
from transcoder.core.base64_codec import decode_to_bytes, encode_bytes, from_url_safe, to_url_safe
from transcoder.core.errors import CodecError, TextEncodingError
from transcoder.core.results import Base64Format
from transcoder.core.text_encoding import TextEncoding, to_bytes

logger = logging.getLogger(__name__)


def _token_bytes(token: str) -> bytes:
    return decode_to_bytes(from_url_safe(strip_whitespace(token)), Base64Format.STANDARD)


def wrap(text: str) -> str:
    """Encode text into a URL-safe token.

    Text with no UTF-8 form (lone surrogates) wraps to "".
    """
    if not text:
        return ""
    try:
        raw = to_bytes(text, TextEncoding.UNICODE)
    except TextEncodingError as exc:
        logger.warning("Cannot wrap input for a share link: %s", exc)
        return ""
    return to_url_safe(encode_bytes(raw, Base64Format.STANDARD))


def try_unwrap(token: object) -> str | None:
    """Decode a token back to text.

    Returns None if the token is not a string, is not Base64, or does not
    decode to valid UTF-8.
    """
    if not isinstance(token, str):
        return None
    if token == "":
        return ""
    try:
        raw = _token_bytes(token)
        return raw.decode("utf-8")
    except (CodecError, UnicodeDecodeError) as exc:
        logger.debug("Discarding undecodable link token: %s", exc)
        return None


def unwrap(token: object) -> str:
    """Decode a token back to text, returning "" on any failure."""
    text = try_unwrap(token)
    return text if text is not None else ""


def is_valid_token(token: object) -> bool:
    """Whether ``token`` is syntactically valid Base64 after URL-safe reversal.

    Unlike ``try_unwrap`` this does not require the bytes to be UTF-8.
    """
    if not isinstance(token, str):
        return False
    try:
        _token_bytes(token)
    except CodecError:
        return False
    return True

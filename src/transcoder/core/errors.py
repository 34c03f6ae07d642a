"""Codec error hierarchy.

Internal transcoding functions raise these; the public ``encode``/``decode``
methods of each codec turn them into failed ``CodecResult`` objects so they
never reach the caller as exceptions.
"""

from __future__ import annotations


class CodecError(ValueError):
    """Base class for all transcoding failures."""


class TextEncodingError(CodecError):
    """Text cannot be represented in (or recovered from) the chosen encoding."""


class InvalidBase16(CodecError):
    pass


class InvalidBase32(CodecError):
    pass


class InvalidBase64(CodecError):
    pass

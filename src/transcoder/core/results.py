"""Codec options, results and the shared codec contract."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from transcoder.core.errors import CodecError
from transcoder.core.text_encoding import TextEncoding

logger = logging.getLogger(__name__)


class Base64Format(str, Enum):
    """Base64 alphabet variant; values double as the ``format`` wire values."""

    STANDARD = "RFC 4648"
    URL_SAFE = "URL-safe"


class CodecOptions(BaseModel):
    """Per-call codec options.

    ``format`` is only read by the Base64 codec and ``padding`` only by the
    Base32 codec; the other codecs ignore them.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    text_encoding: TextEncoding = TextEncoding.UNICODE
    format: Base64Format = Base64Format.STANDARD
    padding: bool = True


class CodecResult(BaseModel):
    """Outcome of a single encode or decode call.

    Exactly one of ``data`` and ``error`` is set. ``elapsed_time`` is in
    milliseconds and informational only.
    """

    model_config = {"frozen": True}

    success: bool
    data: str | None = None
    error: str | None = None
    elapsed_time: float = 0.0

    @classmethod
    def ok(cls, data: str, elapsed_time: float = 0.0) -> CodecResult:
        return cls(success=True, data=data, elapsed_time=elapsed_time)

    @classmethod
    def fail(cls, error: str, elapsed_time: float = 0.0) -> CodecResult:
        return cls(success=False, error=error, elapsed_time=elapsed_time)


@runtime_checkable
class Codec(Protocol):
    """Contract shared by the Base16, Base32 and Base64 codecs."""

    name: str

    def encode(self, text: str, options: CodecOptions | None = None) -> CodecResult: ...

    def decode(self, text: str, options: CodecOptions | None = None) -> CodecResult: ...


def resolve_options(options: CodecOptions | None) -> CodecOptions:
    """Return ``options`` or the defaults when none were given."""
    return options if options is not None else CodecOptions()


def run_timed(operation: Callable[[], str], *, codec: str, action: str) -> CodecResult:
    """Run a transcoding step and wrap its outcome in a ``CodecResult``.

    ``CodecError`` becomes a failed result; anything else propagates since it
    indicates a programming error rather than bad input.
    """
    start = time.perf_counter()
    try:
        data = operation()
    except CodecError as exc:
        elapsed = (time.perf_counter() - start) * 1000
        logger.debug("%s %s failed: %s", codec, action, exc)
        return CodecResult.fail(str(exc), elapsed)
    return CodecResult.ok(data, (time.perf_counter() - start) * 1000)

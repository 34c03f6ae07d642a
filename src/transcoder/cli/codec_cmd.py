"""CLI commands for encoding and decoding text.

Usage:
    transcoder encode base64 "Hello"
    transcoder encode base64 "Hello" --format URL-safe
    transcoder encode base32 "test" --no-padding
    transcoder decode base16 "48 65 6c 6c 6f"
    echo -n "SGVsbG8=" | transcoder decode base64 -
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from transcoder.config import settings
from transcoder.core import (
    Base64Format,
    Codec,
    CodecOptions,
    CodecResult,
    TextEncoding,
    get_codec,
)
from transcoder.observability.logging import LogContext


def read_text(text: str) -> str:
    """Return ``text``, or standard input when it is ``-``."""
    if text == "-":
        return sys.stdin.read()
    return text


def emit_result(result: CodecResult) -> None:
    """Print a successful result to stdout, or the error to stderr and exit 1."""
    if not result.success:
        Console(stderr=True).print(f"[red]Error:[/red] {escape(result.error or '')}")
        raise typer.Exit(code=1)
    typer.echo(result.data)


def _resolve_codec(name: str) -> Codec:
    try:
        return get_codec(name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="CODEC") from exc


def encode(
    codec: str = typer.Argument(..., help="Codec to use: base16, base32, base64"),
    text: str = typer.Argument(..., help="Text to encode, or - to read standard input"),
    encoding: TextEncoding | None = typer.Option(
        None,
        "--encoding",
        "-e",
        help="Text encoding of the input (defaults to TRANSCODER_DEFAULT_TEXT_ENCODING)",
    ),
    fmt: Base64Format = typer.Option(
        Base64Format.STANDARD,
        "--format",
        "-f",
        help="Base64 variant",
    ),
    padding: bool = typer.Option(
        True,
        "--padding/--no-padding",
        help="Pad Base32 output with '=' to a multiple of 8",
    ),
) -> None:
    """Encode text with a Base16, Base32 or Base64 codec."""
    selected = _resolve_codec(codec)
    options = CodecOptions(
        text_encoding=encoding or settings.default_text_encoding,
        format=fmt,
        padding=padding,
    )
    with LogContext(operation="encode"):
        result = selected.encode(read_text(text), options)
    emit_result(result)


def decode(
    codec: str = typer.Argument(..., help="Codec to use: base16, base32, base64"),
    text: str = typer.Argument(..., help="Encoded text, or - to read standard input"),
    encoding: TextEncoding | None = typer.Option(
        None,
        "--encoding",
        "-e",
        help="Text encoding of the decoded output",
    ),
    fmt: Base64Format = typer.Option(
        Base64Format.STANDARD,
        "--format",
        "-f",
        help="Base64 variant",
    ),
) -> None:
    """Decode Base16, Base32 or Base64 text."""
    selected = _resolve_codec(codec)
    options = CodecOptions(
        text_encoding=encoding or settings.default_text_encoding,
        format=fmt,
    )
    with LogContext(operation="decode"):
        result = selected.decode(read_text(text), options)
    emit_result(result)

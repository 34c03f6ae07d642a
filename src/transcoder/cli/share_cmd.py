"""CLI command for generating share links.

Usage:
    transcoder share base64-encode "Hello World"
    transcoder share base32-encode "test" --setting padding=false
    transcoder share base16-decode "48656c6c6f" --origin https://tools.example.com
"""

from __future__ import annotations

import typer
from rich.console import Console

from transcoder.cli.codec_cmd import read_text
from transcoder.config import settings as app_settings
from transcoder.core import TextEncoding
from transcoder.observability.logging import LogContext
from transcoder.sharing import TOOLS, ToolSettings, build_share_url, get_tool_parameters


def parse_setting(raw: str) -> tuple[str, str]:
    """Split a ``key=value`` option into its parts."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint="--setting")
    return key, value


def share(
    tool_id: str = typer.Argument(..., help="Tool identifier, e.g. base64-encode"),
    text: str = typer.Argument(..., help="Tool input, or - to read standard input"),
    encoding: TextEncoding | None = typer.Option(
        None,
        "--encoding",
        "-e",
        help="Input encoding recorded in the link",
    ),
    setting: list[str] | None = typer.Option(
        None,
        "--setting",
        "-s",
        help="Tool-specific setting as key=value (can be specified multiple times)",
    ),
    origin: str | None = typer.Option(
        None,
        "--origin",
        "-o",
        help="Origin the link points at (defaults to TRANSCODER_SHARE_ORIGIN)",
    ),
) -> None:
    """Print a shareable link that restores the tool with this input."""
    console = Console(stderr=True)

    if tool_id not in TOOLS:
        console.print(f"[red]Unknown tool:[/red] {tool_id}")
        console.print(f"Available tools: {', '.join(sorted(TOOLS))}")
        raise typer.Exit(code=1)

    accepted = get_tool_parameters(tool_id)
    tool_settings: dict[str, str] = {}
    for raw in setting or []:
        key, value = parse_setting(raw)
        if key not in accepted:
            console.print(f"[yellow]Ignoring setting not used by {tool_id}:[/yellow] {key}")
            continue
        tool_settings[key] = value

    settings = ToolSettings(
        tool_id=tool_id,
        input=read_text(text),
        input_encoding=encoding or app_settings.default_text_encoding,
        tool_specific_settings=tool_settings,
    )
    with LogContext(tool_id=tool_id, operation="share"):
        url = build_share_url(settings, origin=origin)
    typer.echo(url)

"""CLI command for restoring tool state from a share link.

Usage:
    transcoder restore "http://localhost:5173/base64-encode?input=SGVsbG8&input_encoding=utf-8"
    transcoder restore "<link>" --run
    transcoder restore "<link>" --format json
"""

from __future__ import annotations

import orjson
import typer
from rich.console import Console
from rich.markup import escape

from transcoder.cli.codec_cmd import emit_result
from transcoder.observability.logging import LogContext
from transcoder.sharing import TOOLS, restore_tool_settings, run_tool


def restore(
    url: str = typer.Argument(..., help="Share link to restore"),
    run: bool = typer.Option(
        False,
        "--run",
        "-r",
        help="Run the restored tool and print its output",
    ),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text, json",
    ),
) -> None:
    """Show the tool state stored in a share link.

    Malformed links restore to an empty default state rather than failing.
    """
    with LogContext(operation="restore"):
        settings = restore_tool_settings(url)

    if run:
        if settings.tool_id not in TOOLS:
            Console(stderr=True).print(f"[red]Unknown tool:[/red] {escape(settings.tool_id)}")
            raise typer.Exit(code=1)
        with LogContext(tool_id=settings.tool_id, operation="run"):
            result = run_tool(settings)
        emit_result(result)
        return

    if output_format == "json":
        typer.echo(orjson.dumps(settings.model_dump(mode="json")).decode("utf-8"))
        return

    console = Console()
    console.print(f"[bold]Tool:[/bold]     {escape(settings.tool_id or '-')}")
    console.print(f"[bold]Encoding:[/bold] {settings.input_encoding.value}")
    for key, value in settings.tool_specific_settings.items():
        console.print(f"[bold]{escape(key)}:[/bold] {escape(str(value))}")
    console.print("[bold]Input:[/bold]")
    typer.echo(settings.input)

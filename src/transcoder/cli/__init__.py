"""CLI commands for transcoder.

Provides command-line interface using Typer:
- transcoder encode: Encode text with Base16/Base32/Base64
- transcoder decode: Decode Base16/Base32/Base64 text
- transcoder share: Build a share link for a tool
- transcoder restore: Restore (and optionally run) a tool from a share link

Usage:
    transcoder --help
    transcoder encode base64 "Hello"
    transcoder share base32-encode "test" --setting padding=false
    transcoder restore "http://localhost:5173/base32-encode?input=dGVzdA&padding=false" --run
"""

import typer

from transcoder.cli.codec_cmd import decode, encode
from transcoder.cli.restore_cmd import restore
from transcoder.cli.share_cmd import share
from transcoder.config import settings
from transcoder.observability.logging import configure_logging

# Main CLI application
app = typer.Typer(
    name="transcoder",
    help="transcoder: reversible Base16/Base32/Base64 text tools with shareable links",
    no_args_is_help=True,
)

app.command("encode")(encode)
app.command("decode")(decode)
app.command("share")(share)
app.command("restore")(restore)


@app.callback()
def callback(
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, error",
    ),
    json_logs: bool = typer.Option(
        settings.log_json,
        "--json-logs/--console-logs",
        help="Emit logs as JSON lines",
    ),
) -> None:
    """transcoder: reversible Base16/Base32/Base64 text tools with shareable links."""
    configure_logging(json_format=json_logs, level=log_level)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

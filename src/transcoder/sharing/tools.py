"""Catalog of the codec tools that can be shared by link.

Each tool is one codec in one direction. The catalog records which link
parameters a tool understands and what its settings default to, and maps a
``ToolSettings`` onto a codec call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, Literal

from transcoder.core import get_codec
from transcoder.core.results import Base64Format, CodecOptions, CodecResult
from transcoder.core.text_encoding import TextEncoding
from transcoder.sharing.parameters import (
    ENCODING_KEY,
    INPUT_KEY,
    VALID_ENCODINGS,
    Primitive,
    ToolSettings,
)

logger = logging.getLogger(__name__)

FORMAT_KEY: Final[str] = "format"
PADDING_KEY: Final[str] = "padding"

DEFAULT_PARAMETERS: Final[tuple[str, ...]] = (INPUT_KEY, ENCODING_KEY)


@dataclass(frozen=True)
class ToolDefinition:
    """A shareable codec tool."""

    id: str
    codec: str
    action: Literal["encode", "decode"]
    parameters: tuple[str, ...] = DEFAULT_PARAMETERS
    defaults: Mapping[str, Primitive] = field(default_factory=dict)


def _pair(
    codec: str, extra: tuple[str, ...], defaults: dict[str, Primitive]
) -> list[ToolDefinition]:
    return [
        ToolDefinition(
            id=f"{codec}-{action}",
            codec=codec,
            action=action,
            parameters=DEFAULT_PARAMETERS + extra,
            defaults=defaults,
        )
        for action in ("encode", "decode")
    ]


TOOLS: Final[dict[str, ToolDefinition]] = {
    tool.id: tool
    for tool in (
        *_pair("base64", (FORMAT_KEY,), {FORMAT_KEY: Base64Format.STANDARD.value}),
        *_pair("base16", (), {}),
        *_pair("base32", (PADDING_KEY,), {PADDING_KEY: True}),
    )
}


def get_tool(tool_id: str) -> ToolDefinition | None:
    return TOOLS.get(tool_id)


def get_tool_parameters(tool_id: str) -> list[str]:
    """Names of the link parameters ``tool_id`` accepts.

    Unknown tools accept only ``input`` and ``input_encoding``.
    """
    tool = get_tool(tool_id)
    return list(tool.parameters if tool else DEFAULT_PARAMETERS)


def default_tool_settings(tool_id: str) -> ToolSettings:
    """Fresh settings for ``tool_id`` with empty input and default options."""
    tool = get_tool(tool_id)
    defaults = dict(tool.defaults) if tool else {}
    return ToolSettings(tool_id=tool_id, tool_specific_settings=defaults)


def _coerce_format(value: object) -> Base64Format | None:
    if isinstance(value, Base64Format):
        return value
    if isinstance(value, str):
        for candidate in Base64Format:
            if value.lower() == candidate.value.lower():
                return candidate
    return None


def _coerce_padding(value: object) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None


def options_from_settings(
    input_encoding: TextEncoding | str,
    tool_specific_settings: Mapping[str, object] | None = None,
) -> CodecOptions:
    """Build ``CodecOptions`` from link-level settings.

    Wire strings such as ``"false"`` or ``"URL-safe"`` are accepted; values
    that cannot be interpreted are ignored and the codec default applies.
    """
    options: dict[str, object] = {}
    if isinstance(input_encoding, str) and input_encoding in VALID_ENCODINGS:
        options["text_encoding"] = TextEncoding(input_encoding)

    settings = tool_specific_settings or {}
    fmt = _coerce_format(settings.get(FORMAT_KEY))
    if fmt is not None:
        options["format"] = fmt
    elif settings.get(FORMAT_KEY) is not None:
        logger.info("Ignoring unrecognized format setting %r", settings.get(FORMAT_KEY))

    padding = _coerce_padding(settings.get(PADDING_KEY))
    if padding is not None:
        options["padding"] = padding
    elif settings.get(PADDING_KEY) is not None:
        logger.info("Ignoring unrecognized padding setting %r", settings.get(PADDING_KEY))

    return CodecOptions(**options)


def run_tool(settings: ToolSettings) -> CodecResult:
    """Run the codec behind ``settings.tool_id`` on ``settings.input``."""
    tool = get_tool(settings.tool_id)
    if tool is None:
        return CodecResult.fail(f"Unknown tool: {settings.tool_id}")

    accepted = {
        key: value
        for key, value in settings.tool_specific_settings.items()
        if key in tool.parameters
    }
    options = options_from_settings(settings.input_encoding, accepted)
    codec = get_codec(tool.codec)
    if tool.action == "encode":
        return codec.encode(settings.input, options)
    return codec.decode(settings.input, options)

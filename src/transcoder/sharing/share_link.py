"""Shareable links for tool state.

Generation::

    settings = ToolSettings(tool_id="base64-encode", input="Hello World",
                            tool_specific_settings={"format": "RFC 4648"})
    build_share_url(settings)
    # http://localhost:5173/base64-encode?input=SGVsbG8gV29ybGQ&input_encoding=utf-8&format=RFC%204648

Restoration goes the other way through ``parse_share_url`` (query string to
validated ``URLParameters``) and ``restore_tool_settings`` (to a
``ToolSettings`` with the input unwrapped). Restoration never raises.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Final
from urllib.parse import parse_qsl, quote, unquote, urlsplit

from transcoder.config import settings as app_settings
from transcoder.sharing.link_codec import unwrap, wrap
from transcoder.sharing.parameters import (
    ENCODING_KEY,
    INPUT_KEY,
    RESERVED_KEYS,
    Primitive,
    ToolSettings,
    URLParameters,
    validate_url_parameters,
)
from transcoder.sharing.tools import default_tool_settings

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides letters and digits
URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"


def _stringify(value: Primitive) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _encode_component(value: str) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE)


def build_query_string(params: Mapping[str, Primitive | None]) -> str:
    """Serialize parameters as ``key=value`` pairs joined by ``&``.

    ``None`` values are skipped. Keys and values are percent-encoded, so a
    space becomes ``%20`` rather than ``+``.
    """
    return "&".join(
        f"{_encode_component(key)}={_encode_component(_stringify(value))}"
        for key, value in params.items()
        if value is not None
    )


def parse_query_string(query: str) -> dict[str, str]:
    """Parse a query string; on duplicate keys the last value wins."""
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))


def build_share_url(settings: ToolSettings, origin: str | None = None) -> str:
    """Build the shareable URL for ``settings``.

    The same settings always produce the same URL. ``origin`` defaults to the
    configured ``share_origin``.
    """
    base = (origin if origin is not None else app_settings.share_origin).rstrip("/")

    params: dict[str, Primitive | None] = {
        INPUT_KEY: wrap(settings.input),
        ENCODING_KEY: settings.input_encoding.value,
    }
    for key, value in settings.tool_specific_settings.items():
        if key in RESERVED_KEYS:
            logger.warning("Tool setting %r collides with a link parameter; skipped", key)
            continue
        params[key] = value

    query = build_query_string(params)
    url = f"{base}/{quote(settings.tool_id, safe='')}"
    if query:
        url = f"{url}?{query}"

    logger.debug("Built share link for %s (%d characters)", settings.tool_id, len(url))
    return url


def parse_share_url(url: str) -> tuple[str, URLParameters]:
    """Split a share link into its tool id and validated parameters.

    Anything unparseable resolves to an empty tool id and default parameters.
    """
    if not isinstance(url, str):
        return "", URLParameters()
    try:
        parts = urlsplit(url)
    except ValueError:
        logger.info("Ignoring unparseable share link")
        return "", URLParameters()

    tool_id = unquote(parts.path.rstrip("/").rsplit("/", 1)[-1])
    return tool_id, validate_url_parameters(parse_query_string(parts.query))


def restore_tool_settings(url: str) -> ToolSettings:
    """Recover the full ``ToolSettings`` encoded in a share link.

    Settings missing from the link fall back to the tool's defaults.
    """
    tool_id, params = parse_share_url(url)
    defaults = default_tool_settings(tool_id)
    return ToolSettings(
        tool_id=tool_id,
        input=unwrap(params.input),
        input_encoding=params.input_encoding,
        tool_specific_settings={**defaults.tool_specific_settings, **params.settings},
    )

"""Share links: wrapping tool input, building URLs and restoring state from them."""

from transcoder.sharing.link_codec import try_unwrap, unwrap, wrap
from transcoder.sharing.parameters import ToolSettings, URLParameters, validate_url_parameters
from transcoder.sharing.share_link import (
    build_query_string,
    build_share_url,
    parse_query_string,
    parse_share_url,
    restore_tool_settings,
)
from transcoder.sharing.tools import (
    TOOLS,
    default_tool_settings,
    get_tool_parameters,
    options_from_settings,
    run_tool,
)

__all__ = [
    "TOOLS",
    "ToolSettings",
    "URLParameters",
    "build_query_string",
    "build_share_url",
    "default_tool_settings",
    "get_tool_parameters",
    "options_from_settings",
    "parse_query_string",
    "parse_share_url",
    "restore_tool_settings",
    "run_tool",
    "try_unwrap",
    "unwrap",
    "validate_url_parameters",
    "wrap",
]

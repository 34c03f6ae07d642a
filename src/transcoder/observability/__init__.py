"""Observability for transcoder: structured logging with tool context."""

from transcoder.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    LogContext,
    configure_logging,
    get_logger,
    operation_var,
    tool_id_var,
)

__all__ = [
    "ConsoleFormatter",
    "JsonFormatter",
    "LogContext",
    "configure_logging",
    "get_logger",
    "operation_var",
    "tool_id_var",
]

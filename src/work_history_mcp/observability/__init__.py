"""Logging helpers for Work History MCP."""

from .logging import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_log_context,
    configure_logging,
    set_log_context,
)

__all__ = [
    "HumanReadableFormatter",
    "StructuredFormatter",
    "clear_log_context",
    "configure_logging",
    "set_log_context",
]

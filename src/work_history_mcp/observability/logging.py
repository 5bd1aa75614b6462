"""Logging configuration for Work History MCP.

Logs always go to stderr: stdout is the MCP stdio transport and any stray
write there corrupts the protocol stream. Per-call fields (tool, request_id)
are carried in contextvars so every record emitted while a tool call is being
handled is tagged with them.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import IO, Optional

# Context variables for call-scoped logging fields
_tool_name: ContextVar[Optional[str]] = ContextVar("tool_name", default=None)
_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_log_context(
    tool_name: Optional[str] = None,
    request_id: Optional[str] = None,
):
    """Set contextual logging fields for the current async context."""
    if tool_name is not None:
        _tool_name.set(tool_name)
    if request_id is not None:
        _request_id.set(request_id)


def clear_log_context():
    """Clear all contextual logging fields."""
    _tool_name.set(None)
    _request_id.set(None)


def _context_fields() -> dict:
    fields = {}
    tool = _tool_name.get()
    if tool:
        fields["tool"] = tool
    request_id = _request_id.get()
    if request_id:
        fields["request_id"] = request_id
    return fields


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter with context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(_context_fields())

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


class HumanReadableFormatter(logging.Formatter):
    """Human-readable log formatter with context fields for development."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            f"[{self.formatTime(record, self.datefmt)}]",
            f"{record.levelname:8s}",
            f"{record.name}:",
            record.getMessage(),
        ]

        ctx = _context_fields()
        if ctx:
            ctx_parts = []
            if "tool" in ctx:
                ctx_parts.append(f"tool={ctx['tool']}")
            if "request_id" in ctx:
                ctx_parts.append(f"req={ctx['request_id']}")
            parts.append(f"[{', '.join(ctx_parts)}]")

        msg = " ".join(parts)

        if record.exc_info and record.exc_info[1]:
            msg += "\n" + self.formatException(record.exc_info)

        return msg


def configure_logging(
    environment: str = "development",
    log_level: str = "INFO",
    stream: Optional[IO[str]] = None,
):
    """Configure logging for the application.

    Args:
        environment: "production" for JSON output, anything else for human-readable.
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        stream: Output stream, stderr when omitted.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)

    if environment == "production":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(HumanReadableFormatter(
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger.addHandler(handler)

    # Quiet noisy third-party loggers
    logging.getLogger("mcp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

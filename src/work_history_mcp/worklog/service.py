"""The ``log_activity`` request handler.

Validates the tool arguments, captures one timestamp for the whole call,
renders the entry and appends it to the day's log. Every failure is turned
into an error ``ToolResponse`` here; nothing propagates to the transport.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..exceptions import ActivityValidationError, WorkLogError
from . import formatter
from .models import ActivityRecord
from .store import DailyLogStore

logger = logging.getLogger(__name__)

DATE_KEY_FORMAT = "%Y-%m-%d"


def local_now() -> datetime:
    """Current time in the process's local time zone."""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class ToolResponse:
    """Text returned to the caller plus the error flag it must inspect."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(text=f"{formatter.SUCCESS_GLYPH} {text}")

    @classmethod
    def failure(cls, reason: str) -> "ToolResponse":
        return cls(text=f"{formatter.FAILURE_GLYPH} Error logging activity: {reason}", is_error=True)


class WorkLogService:
    """Orchestrates validation, rendering and storage for one activity."""

    def __init__(self, store: DailyLogStore, clock: Callable[[], datetime] = local_now):
        self.store = store
        self.clock = clock

    async def log_activity(self, arguments: Optional[Mapping[str, Any]]) -> ToolResponse:
        try:
            record = ActivityRecord.from_arguments(arguments)
        except ActivityValidationError as e:
            logger.warning("Rejected activity: %s", e)
            return ToolResponse.failure(str(e))
        except Exception:
            logger.exception("Unexpected failure validating activity arguments")
            return ToolResponse.failure("unexpected internal error")

        captured_at = self.clock()
        date_key = captured_at.strftime(DATE_KEY_FORMAT)
        line = formatter.render(record, captured_at)

        try:
            entry = await asyncio.to_thread(self.store.append, date_key, line)
        except WorkLogError as e:
            return ToolResponse.failure(str(e))
        except Exception:
            logger.exception("Unexpected failure logging activity for %s", record.tool_name)
            return ToolResponse.failure("unexpected internal error")

        logger.info(
            "Logged activity: tool=%s success=%s date=%s new_file=%s",
            record.tool_name, record.success, date_key, entry.is_new_file,
        )

        text = f"Activity logged: {formatter.render_body(record, captured_at)}"
        if entry.is_new_file:
            text += " (new file created)"
        return ToolResponse.success(text)

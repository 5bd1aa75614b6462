"""Activity formatting and daily log storage."""

from .models import ActivityRecord, RenderedEntry
from .service import ToolResponse, WorkLogService
from .store import DailyLogStore

__all__ = [
    "ActivityRecord",
    "RenderedEntry",
    "ToolResponse",
    "WorkLogService",
    "DailyLogStore",
]

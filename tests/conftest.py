"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Set test environment variables BEFORE importing the package
os.environ["ENVIRONMENT"] = "test"

from work_history_mcp.mcp.server import WorkHistoryMCPServer
from work_history_mcp.worklog.models import ActivityRecord
from work_history_mcp.worklog.service import WorkLogService
from work_history_mcp.worklog.store import DailyLogStore

# 14:05 on 2025-01-15, pinned to a fixed offset so the label is stable on any host
FIXED_NOW = datetime(2025, 1, 15, 14, 5, 42, tzinfo=timezone(timedelta(hours=2)))


class FakeClock:
    """Callable clock returning a settable time."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.now


@pytest.fixture
def logs_dir(tmp_path):
    """Work log directory inside the test's temp dir (not created yet)."""
    return tmp_path / "logs"


@pytest.fixture
def store(logs_dir) -> DailyLogStore:
    return DailyLogStore(logs_dir)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(store, clock) -> WorkLogService:
    return WorkLogService(store, clock=clock)


@pytest.fixture
def mcp_server(service) -> WorkHistoryMCPServer:
    return WorkHistoryMCPServer(service, version="test")


@pytest.fixture
def minimal_record() -> ActivityRecord:
    return ActivityRecord(tool_name="Test Tool", message="Test activity")


@pytest.fixture
def rich_arguments() -> dict:
    """Tool-call arguments with every metadata field set."""
    return {
        "tool_name": "Claude Code",
        "log_message": "Implemented feature X",
        "ai_model": "claude-3-sonnet",
        "tokens_used": 1500,
        "context_length": 8,
        "duration_ms": 2500,
        "cost_usd": 0.0025,
        "tags": ["coding", "feature"],
    }

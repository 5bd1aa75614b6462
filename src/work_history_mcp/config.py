"""Configuration management for Work History MCP."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

# Relative logs_dir values are anchored here rather than at the working directory
PROJECT_ROOT = Path(__file__).resolve().parents[2]

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="WORK_HISTORY_",
        env_file=".env" if os.getenv("ENVIRONMENT") != "test" else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Work History MCP"
    app_version: str = __version__
    server_name: str = Field(
        default="mcp-work-history",
        description="Server name announced during the MCP handshake",
    )
    debug: bool = False
    environment: str = "development"

    # Logging
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, WARNING, ERROR)")

    # Work logs
    logs_dir: Path = Field(
        default=Path("logs"),
        description="Directory holding the worklog-YYYY-MM-DD.md files, relative to PROJECT_ROOT unless absolute",
    )
    file_encoding: str = "utf-8"

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_logs_dir(self) -> Path:
        """Get the absolute work log directory."""
        logs_dir = self.logs_dir.expanduser()
        if not logs_dir.is_absolute():
            logs_dir = PROJECT_ROOT / logs_dir
        return logs_dir.resolve()

    def get_log_level(self) -> str:
        """Effective log level; debug mode forces DEBUG."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

"""Test configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from work_history_mcp.config import PROJECT_ROOT, Settings, get_settings


def setup_module():
    """Clear settings cache before tests."""
    get_settings.cache_clear()


def teardown_module():
    """Clear settings cache after tests."""
    get_settings.cache_clear()


class TestSettings:
    """Test Settings class."""

    def setup_method(self):
        get_settings.cache_clear()

    def teardown_method(self):
        get_settings.cache_clear()

    def test_default_settings(self):
        """Test default settings values."""
        with patch.dict(os.environ, {"ENVIRONMENT": "test"}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_name == "Work History MCP"
            assert settings.app_version == "1.0.0"
            assert settings.server_name == "mcp-work-history"
            assert settings.debug is False
            assert settings.environment == "development"
            assert settings.log_level == "INFO"
            assert settings.logs_dir == Path("logs")
            assert settings.file_encoding == "utf-8"

    def test_settings_from_env(self, tmp_path):
        """Test settings from environment variables."""
        env_vars = {
            "WORK_HISTORY_DEBUG": "true",
            "WORK_HISTORY_ENVIRONMENT": "production",
            "WORK_HISTORY_LOG_LEVEL": "warning",
            "WORK_HISTORY_LOGS_DIR": str(tmp_path / "worklogs"),
            "WORK_HISTORY_SERVER_NAME": "custom-history",
        }

        with patch.dict(os.environ, env_vars):
            settings = Settings()

            assert settings.debug is True
            assert settings.environment == "production"
            assert settings.log_level == "WARNING"
            assert settings.logs_dir == tmp_path / "worklogs"
            assert settings.server_name == "custom-history"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_relative_logs_dir_anchored_at_project_root(self):
        settings = Settings(logs_dir="relative/logs")
        logs_dir = settings.get_logs_dir()

        assert logs_dir.is_absolute()
        assert logs_dir == (PROJECT_ROOT / "relative" / "logs").resolve()

    def test_default_logs_dir_ignores_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WORK_HISTORY_LOGS_DIR", raising=False)
        monkeypatch.chdir(tmp_path)

        logs_dir = Settings(_env_file=None).get_logs_dir()

        assert logs_dir == (PROJECT_ROOT / "logs").resolve()
        assert logs_dir != tmp_path / "logs"

    def test_absolute_logs_dir_kept(self, tmp_path):
        assert Settings(logs_dir=tmp_path / "worklogs").get_logs_dir() == (tmp_path / "worklogs").resolve()

    def test_get_logs_dir_expands_home(self):
        settings = Settings(logs_dir="~/worklogs")
        assert "~" not in str(settings.get_logs_dir())

    def test_debug_forces_debug_level(self):
        assert Settings(debug=True, log_level="ERROR").get_log_level() == "DEBUG"
        assert Settings(debug=False, log_level="ERROR").get_log_level() == "ERROR"


class TestGetSettings:
    """Test get_settings function."""

    def test_settings_caching(self):
        """Test that settings are cached."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

"""Process entry point for the Work History MCP server (stdio transport)."""

import asyncio
import logging
import sys
from typing import Optional

from .config import Settings, get_settings
from .mcp.server import WorkHistoryMCPServer
from .observability.logging import configure_logging
from .worklog.service import WorkLogService
from .worklog.store import DailyLogStore

logger = logging.getLogger(__name__)


def create_server(settings: Optional[Settings] = None) -> WorkHistoryMCPServer:
    """Create and wire the MCP server from settings."""
    settings = settings or get_settings()

    store = DailyLogStore(settings.get_logs_dir(), encoding=settings.file_encoding)
    service = WorkLogService(store)
    return WorkHistoryMCPServer(
        service,
        name=settings.server_name,
        version=settings.app_version,
    )


def main() -> int:
    settings = get_settings()

    configure_logging(
        environment=settings.environment,
        log_level=settings.get_log_level(),
    )

    logger.info("%s v%s starting", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)
    logger.info("Work logs directory: %s", settings.get_logs_dir())

    server = create_server(settings)
    try:
        asyncio.run(server.run_stdio())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("%s terminated with an error", settings.app_name)
        return 1

    logger.info("%s shutdown complete", settings.app_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())

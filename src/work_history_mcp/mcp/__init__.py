"""MCP protocol wiring."""

from .server import WorkHistoryMCPServer

__all__ = ["WorkHistoryMCPServer"]

"""Work History MCP: daily markdown work logs for AI tool activity."""

__version__ = "1.0.0"

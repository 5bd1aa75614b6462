"""MCP server exposing the work log tools."""

import logging
import uuid
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server import Server

from ..exceptions import ToolExecutionError, UnknownToolError
from ..observability.logging import clear_log_context, set_log_context
from ..worklog.service import ToolResponse, WorkLogService
from ..worklog.tools import LOG_ACTIVITY, get_tools

logger = logging.getLogger(__name__)


class WorkHistoryMCPServer:
    """MCP server implementation for the work history log."""

    def __init__(
        self,
        service: WorkLogService,
        name: str = "mcp-work-history",
        version: Optional[str] = None,
    ):
        self.service = service
        self.name = name
        self.server = Server(name, version=version)
        self._setup_handlers()

    def _setup_handlers(self):
        """Set up MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            """List available tools."""
            tools = get_tools()
            logger.debug("Returning %d tools", len(tools))
            return tools

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: Optional[Dict[str, Any]] = None
        ) -> List[types.TextContent]:
            """Handle tool calls.

            A failed call is raised so the SDK reports it as a tool result
            with ``isError`` set rather than a protocol error.
            """
            response = await self.call_tool(name, arguments)
            if response.is_error:
                raise ToolExecutionError(response.text)
            return [types.TextContent(type="text", text=response.text)]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResponse:
        """Dispatch a tool call by name."""
        set_log_context(tool_name=name, request_id=uuid.uuid4().hex[:8])
        try:
            logger.info("Tool call: %s", name)
            if name == LOG_ACTIVITY:
                return await self.service.log_activity(arguments or {})

            error = UnknownToolError(name)
            logger.warning("%s", error)
            return ToolResponse(text=f"❌ {error}", is_error=True)
        finally:
            clear_log_context()

    async def run_stdio(self):
        """Serve MCP over stdin/stdout until the client disconnects."""
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            logger.info("MCP Work History Server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

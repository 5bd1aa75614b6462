"""Work log exception types.

Raised by the record model, the daily log store and the MCP server. The
service layer catches all of them at the request boundary and turns them into
an error response, so none of these ever reaches the transport as a fault.
"""

from typing import Optional


class WorkLogError(Exception):
    """Base exception for all work log errors."""

    pass


class ActivityValidationError(WorkLogError):
    """The activity payload is missing a required field or has a bad value."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class LogStorageError(WorkLogError):
    """Reading or writing the daily log file failed.

    The message names the failed operation and the OS reason only. The file
    path is kept on the exception for logging but never put in the message.
    """

    def __init__(self, operation: str, reason: str, path: Optional[str] = None):
        self.operation = operation
        self.reason = reason
        self.path = path
        super().__init__(f"Failed to {operation}: {reason}")


class ToolExecutionError(WorkLogError):
    """Raised from the MCP call handler to mark a tool result as an error."""

    pass


class UnknownToolError(WorkLogError):
    """A tool call named a tool this server does not provide."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")

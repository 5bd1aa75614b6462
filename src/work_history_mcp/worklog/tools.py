"""MCP tool definitions for the work log."""

from typing import List

from mcp import types

LOG_ACTIVITY = "log_activity"


def get_tools() -> List[types.Tool]:
    """Return the tools this server exposes."""
    return [
        types.Tool(
            name=LOG_ACTIVITY,
            description="Log AI tool activity to a daily worklog file with comprehensive metrics",
            inputSchema={
                "type": "object",
                "properties": {
                    "tool_name": {
                        "type": "string",
                        "description": "Name of the AI tool that performed the activity (e.g., 'Warp', 'Claude Code', 'GitHub Copilot')",
                    },
                    "log_message": {
                        "type": "string",
                        "description": "Detailed log message describing what was accomplished",
                    },
                    "ai_model": {
                        "type": "string",
                        "description": "AI model used (e.g., 'gemini-2.5-pro', 'claude-3-sonnet', 'gpt-4')",
                    },
                    "tokens_used": {
                        "type": "integer",
                        "description": "Total tokens consumed in the request (optional)",
                    },
                    "input_tokens": {
                        "type": "integer",
                        "description": "Input tokens used (optional)",
                    },
                    "output_tokens": {
                        "type": "integer",
                        "description": "Output tokens generated (optional)",
                    },
                    "context_length": {
                        "type": "integer",
                        "description": "Context window length used, in thousands of tokens (optional)",
                    },
                    "duration_ms": {
                        "type": "integer",
                        "description": "Duration of the operation in milliseconds (optional)",
                    },
                    "cost_usd": {
                        "type": "number",
                        "description": "Estimated cost in USD (optional)",
                    },
                    "success": {
                        "type": "boolean",
                        "default": True,
                        "description": "Whether the operation was successful (optional, defaults to true)",
                    },
                    "error_message": {
                        "type": "string",
                        "description": "Error message if operation failed (optional)",
                    },
                    "tags": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Tags to categorize the activity (e.g., ['coding', 'debugging', 'refactoring']) (optional)",
                    },
                },
                "required": ["tool_name", "log_message"],
            },
        ),
    ]

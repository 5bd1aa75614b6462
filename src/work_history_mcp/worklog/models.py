"""Data models for the work log."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ActivityValidationError

REQUIRED_ARGUMENTS = ("tool_name", "log_message")


class ActivityRecord(BaseModel):
    """One tool invocation to be journaled.

    Field aliases are the snake_case keys of the ``log_activity`` tool
    arguments; attributes can also be populated by name, which is what the
    tests and internal callers do.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    tool_name: str
    message: str = Field(alias="log_message")
    model: Optional[str] = Field(default=None, alias="ai_model")

    # tokens_total wins over the in/out pair when rendering
    tokens_total: Optional[int] = Field(default=None, alias="tokens_used")
    tokens_in: Optional[int] = Field(default=None, alias="input_tokens")
    tokens_out: Optional[int] = Field(default=None, alias="output_tokens")
    context_length_k: Optional[int] = Field(default=None, alias="context_length")

    duration_ms: Optional[int] = None
    cost_usd: Optional[float] = Field(default=None, allow_inf_nan=False)
    success: bool = True
    error_message: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None

    @field_validator("tool_name", "message", mode="before")
    @classmethod
    def validate_required_text(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("model", "error_message", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator("success", mode="before")
    @classmethod
    def default_success(cls, v):
        # An explicit null means "not reported", same as omitting the key.
        return True if v is None else v

    @classmethod
    def from_arguments(cls, arguments: Optional[Mapping[str, Any]]) -> "ActivityRecord":
        """Build a record from raw tool-call arguments.

        Raises:
            ActivityValidationError: required argument missing or empty, or a
                value of the wrong type.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ActivityValidationError("arguments must be an object")
        arguments = dict(arguments)

        for key in REQUIRED_ARGUMENTS:
            value = arguments.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ActivityValidationError(
                    "tool_name and log_message are required", field=key
                )

        try:
            return cls.model_validate(arguments)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ActivityValidationError(
                f"Invalid value for '{field}': {error['msg']}", field=field
            ) from e


@dataclass(frozen=True)
class RenderedEntry:
    """Result of appending one rendered line to a daily log file."""

    line: str
    is_new_file: bool
    path: Path

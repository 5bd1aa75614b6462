"""Rendering of activity records into work log lines.

Everything here is pure: the same record and capture time always give the
same text, and nothing touches the filesystem or the clock.

A rendered line looks like::

    - ✅ 14:05 - Claude Code (claude-3-sonnet): Implemented feature X (1500 tokens | 8k ctx | 2.5s | $0.0025 | [coding, feature])
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from .models import ActivityRecord

SUCCESS_GLYPH = "✅"
FAILURE_GLYPH = "❌"
METADATA_SEPARATOR = " | "


def _one_line(text: str) -> str:
    """Collapse embedded line breaks so an entry never spans lines."""
    return " ".join(text.splitlines())


def format_time_label(captured_at: datetime) -> str:
    """24-hour HH:MM label in the timestamp's own (local) time."""
    return captured_at.strftime("%H:%M")


def format_tokens(record: ActivityRecord) -> Optional[str]:
    if record.tokens_total is not None:
        return f"{record.tokens_total} tokens"
    if record.tokens_in is not None or record.tokens_out is not None:
        tokens_in = record.tokens_in or 0
        tokens_out = record.tokens_out or 0
        return f"{tokens_in + tokens_out} tokens ({tokens_in}→{tokens_out})"
    return None


def format_duration(duration_ms: int) -> str:
    """Milliseconds below one second, otherwise seconds with one decimal."""
    if duration_ms >= 1000:
        # Ties are broken on the float value, so 1150 renders as 1.1s and 1250 as 1.3s
        seconds = Decimal(duration_ms / 1000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{seconds:f}s"
    return f"{duration_ms}ms"


def format_cost(cost_usd: float) -> str:
    cost = Decimal(cost_usd).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)
    return f"${cost:f}"


def build_metadata(record: ActivityRecord) -> List[str]:
    """Ordered metadata fragments; a fragment appears only when its fields do."""
    fragments = []

    tokens = format_tokens(record)
    if tokens:
        fragments.append(tokens)

    if record.context_length_k is not None:
        fragments.append(f"{record.context_length_k}k ctx")

    if record.duration_ms is not None:
        fragments.append(format_duration(record.duration_ms))

    if record.cost_usd is not None:
        fragments.append(format_cost(record.cost_usd))

    # An error message on a successful record is never shown
    if not record.success and record.error_message:
        fragments.append(f"{FAILURE_GLYPH} {_one_line(record.error_message)}")

    if record.tags:
        fragments.append(f"[{', '.join(_one_line(tag) for tag in record.tags)}]")

    return fragments


def render_body(record: ActivityRecord, captured_at: datetime) -> str:
    """Render the entry without the list marker and status glyph.

    This is the text echoed back to the caller in the confirmation.
    """
    body = f"{format_time_label(captured_at)} - {_one_line(record.tool_name)}"
    if record.model:
        body += f" ({_one_line(record.model)})"
    body += f": {_one_line(record.message)}"

    metadata = build_metadata(record)
    if metadata:
        body += f" ({METADATA_SEPARATOR.join(metadata)})"
    return body


def render(record: ActivityRecord, captured_at: datetime) -> str:
    """Render the full markdown list item written to the daily log."""
    glyph = SUCCESS_GLYPH if record.success else FAILURE_GLYPH
    return f"- {glyph} {render_body(record, captured_at)}"

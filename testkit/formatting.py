"""Rendering helpers for assertion failure messages."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from testkit.mocks.call_record import CallRecord


def truncate(text: str, max_length: int) -> str:
    """Truncate text to max_length, adding ellipsis. 0 means unlimited.

    Used for failure messages. Console output goes through
    testkit.logging.console.truncate_text, which also honors verbose mode.
    """
    if max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def render_value(value: object, max_length: int = 0) -> str:
    """Render a value for a failure message using repr()."""
    return truncate(repr(value), max_length)


def render_args(args: Sequence[str], max_length: int = 0) -> str:
    """Render an argument list as [a, b] with each element truncated."""
    return "[" + ", ".join(truncate(repr(a), max_length) for a in args) + "]"


def render_call_log(calls: Iterable[CallRecord], max_length: int = 0) -> str:
    """Render a tracker log as numbered lines, one call per line."""
    lines = [
        f"  {record.sequence}: {record.method}"
        f"({', '.join(truncate(a, max_length) for a in record.args)})"
        for record in calls
    ]
    if not lines:
        return "Recorded calls: (none)"
    return "Recorded calls:\n" + "\n".join(lines)

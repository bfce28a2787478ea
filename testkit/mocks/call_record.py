"""Immutable snapshot of a single recorded invocation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CallRecord:
    """One call captured by a MockTracker.

    Attributes:
        method: Name of the invoked operation. Not unique across a log.
        args: String-encoded arguments in call-site order.
        sequence: Position assigned by the owning tracker (first call is 1).
    """

    method: str
    args: tuple[str, ...]
    sequence: int

    def __str__(self) -> str:
        return f"{self.method}({', '.join(self.args)})"

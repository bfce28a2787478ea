"""Scripted return values with a saturating default.

A MockReturn holds the values a double should hand back, one per call. Once
the script runs out it keeps returning the default instead of raising, so
code that calls a dependency more often than the test scripted still runs,
while the first N outcomes stay under the test author's control.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MockReturn(Generic[T]):
    """FIFO of return values of a single type T, with a fallback default.

    One instance holds one value type (all str, all int, ...). This is a
    contract for callers; it is not checked at runtime.

    Example:
        returns = MockReturn(default=0)
        returns.add_return(42)
        returns.next()  # 42
        returns.next()  # 0
        returns.next()  # 0
    """

    def __init__(self, default: T) -> None:
        self._queue: list[T] = []
        self._default = default
        self._cursor = 0

    @property
    def default(self) -> T:
        return self._default

    @property
    def cursor(self) -> int:
        """Index of the next scripted value; equals len() once exhausted."""
        return self._cursor

    def set_default(self, value: T) -> None:
        """Replace the fallback used by later reads of an exhausted queue."""
        self._default = value

    def add_return(self, value: T) -> MockReturn[T]:
        """Append value to the script. Returns self for chaining."""
        self._queue.append(value)
        return self

    def add_returns(self, *values: T) -> MockReturn[T]:
        """Append several values in order. Returns self for chaining."""
        self._queue.extend(values)
        return self

    def next(self) -> T:
        """Return the next scripted value, or the default when exhausted."""
        if self._cursor < len(self._queue):
            value = self._queue[self._cursor]
            self._cursor += 1
            return value
        logger.debug("Return script exhausted; falling back to %r", self._default)
        return self._default

    def remaining(self) -> int:
        """Number of scripted values not yet consumed."""
        return len(self._queue) - self._cursor

    def reset(self) -> None:
        """Rewind to the first scripted value without dropping any."""
        self._cursor = 0

    def clear(self) -> None:
        """Drop all scripted values. The default is kept."""
        self._queue = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return (
            f"MockReturn(default={self._default!r}, queued={len(self._queue)}, "
            f"cursor={self._cursor})"
        )

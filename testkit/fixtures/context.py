"""Shared key/value context with setup/teardown lifecycle.

TestContext is the state a group of tests shares: string settings keyed by
name, plus cleanups that must run when the group is done.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any

from testkit.fixtures.swap import Swap

logger = logging.getLogger(__name__)


class TestContext:
    """Key/value string store with lifecycle flags and LIFO cleanups.

    Example:
        with TestContext() as ctx:
            ctx.set("user_id", 42)
            ctx.swap(service, "client", fake_client)
            assert ctx.get("user_id") == "42"
        # cleanups ran, store is empty, service.client restored
    """

    __test__ = False

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._cleanups: list[tuple[Callable[..., Any], tuple[Any, ...]]] = []
        self.is_setup = False
        self.is_torn_down = False

    def setup(self) -> None:
        """Mark the context ready for use. A torn-down context may be reused."""
        self.is_setup = True
        self.is_torn_down = False

    def teardown(self) -> None:
        """Run cleanups newest-first, empty the store and mark torn down.

        Every cleanup runs even if an earlier one raises; the first error is
        re-raised once all have run. Calling teardown() again does nothing.
        """
        if self.is_torn_down:
            return
        first_error: Exception | None = None
        while self._cleanups:
            func, args = self._cleanups.pop()
            try:
                func(*args)
            except Exception as exc:
                logger.warning("Cleanup %r failed: %s", func, exc)
                if first_error is None:
                    first_error = exc
        self._values.clear()
        self.is_setup = False
        self.is_torn_down = True
        if first_error is not None:
            raise first_error

    def add_cleanup(self, func: Callable[..., Any], *args: Any) -> None:  # noqa: ANN401
        self._cleanups.append((func, args))

    def swap(self, target: Any, name: str, value: Any) -> Swap:  # noqa: ANN401
        """Swap a value now and restore it at teardown."""
        swapped = Swap(target, name, value)
        self.add_cleanup(swapped.restore)
        return swapped

    def set(self, key: str, value: object) -> None:
        self._values[key] = value if isinstance(value, str) else str(value)

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._values

    def remove(self, key: str) -> bool:
        """Delete key; returns whether it was present."""
        return self._values.pop(key, None) is not None

    def keys(self) -> list[str]:
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __enter__(self) -> TestContext:
        self.setup()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.teardown()

"""Call tracking plus scripted responses behind one call surface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from testkit.config import TestkitConfig
from testkit.mocks.call_record import CallRecord
from testkit.mocks.returns import MockReturn
from testkit.mocks.tracker import MockTracker

logger = logging.getLogger(__name__)


class Spy:
    """A MockTracker paired with per-method string return scripts.

    Example:
        spy = Spy()
        spy.returns("get_config").add_return("debug=true")
        spy.call("get_config")  # "debug=true"
        spy.call("get_config")  # ""
        spy.call_count("get_config")  # 2
    """

    def __init__(self, config: TestkitConfig | None = None) -> None:
        self._tracker = MockTracker(config=config)
        self._returns: dict[str, MockReturn[str]] = {}

    @property
    def tracker(self) -> MockTracker:
        return self._tracker

    def returns(self, method: str) -> MockReturn[str]:
        """Return the script for method, creating an empty one on first access.

        The same instance is returned for the lifetime of the Spy, so values
        added through any handle are seen by later call()s.
        """
        script = self._returns.get(method)
        if script is None:
            script = MockReturn("")
            self._returns[method] = script
        return script

    def call(self, method: str, *args: Any) -> str:  # noqa: ANN401
        """Record the call, then answer from method's script ("" if none)."""
        self._tracker.record(method, *args)
        script = self._returns.get(method)
        if script is None:
            logger.debug("No return configured for %s; returning empty string", method)
            return ""
        return script.next()

    def method(self, name: str) -> Callable[..., str]:
        """Return a callable that forwards its positional args to call(name)."""

        def bound(*args: Any) -> str:  # noqa: ANN401
            return self.call(name, *args)

        bound.__name__ = name
        return bound

    def reset(self) -> None:
        """Forget recorded calls and rewind every script to its first value."""
        self._tracker.clear()
        for script in self._returns.values():
            script.reset()

    # Delegation to the tracker

    def was_called(self, method: str) -> bool:
        return self._tracker.was_called(method)

    def was_not_called(self, method: str) -> bool:
        return self._tracker.was_not_called(method)

    def call_count(self, method: str) -> int:
        return self._tracker.call_count(method)

    def total_calls(self) -> int:
        return self._tracker.total_calls()

    def last_call(self, method: str) -> CallRecord | None:
        return self._tracker.last_call(method)

    def get_args(self, method: str, index: int = 0) -> list[str]:
        return self._tracker.get_args(method, index)

    def assert_called(self, method: str) -> None:
        self._tracker.assert_called(method)

    def assert_not_called(self, method: str) -> None:
        self._tracker.assert_not_called(method)

    def assert_called_times(self, method: str, times: int) -> None:
        self._tracker.assert_called_times(method, times)

    def assert_called_with(self, method: str, args: Sequence[Any]) -> None:
        self._tracker.assert_called_with(method, args)

    def __repr__(self) -> str:
        return f"Spy(total_calls={self._tracker.total_calls()}, scripted={sorted(self._returns)})"

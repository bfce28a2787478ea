"""Ordered call log with query and assertion helpers.

MockTracker is the recording half of every testkit double. Test authors
call record() from hand-written stand-ins (or wrap callables with track())
and later verify the accumulated log.

A tracker carries no locking. Use one instance per test and never share it
across threads or parallel workers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from testkit.config import TestkitConfig, get_config
from testkit.errors import AssertionFailure
from testkit.formatting import render_args, render_call_log, truncate
from testkit.mocks.call_record import CallRecord

logger = logging.getLogger(__name__)


def encode_args(args: Sequence[Any]) -> tuple[str, ...]:
    """Collapse record()/call() positional arguments into a string tuple.

    A lone list or tuple is taken as the complete argument list; anything
    else is one argument per position. Non-string values go through str().
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    return tuple(a if isinstance(a, str) else str(a) for a in args)


class MockTracker:
    """Chronological log of CallRecords for one test.

    Example:
        tracker = MockTracker()
        tracker.record("get_user", "123")
        tracker.record("get_user", "456")
        tracker.assert_called_times("get_user", 2)
        tracker.assert_called_with("get_user", ["456"])
    """

    def __init__(self, config: TestkitConfig | None = None) -> None:
        self._calls: list[CallRecord] = []
        self._counter = 0
        self._config = config

    @property
    def config(self) -> TestkitConfig:
        """Configuration used to render failure messages."""
        return self._config if self._config is not None else get_config()

    @property
    def calls(self) -> tuple[CallRecord, ...]:
        """Snapshot of the log in recording order."""
        return tuple(self._calls)

    def record(self, method: str, *args: Any) -> CallRecord:  # noqa: ANN401
        """Append a call to the log and return its record.

        Accepts no arguments, one argument, several arguments, or a single
        list/tuple holding the full argument list.
        """
        self._counter += 1
        record = CallRecord(
            method=method, args=encode_args(args), sequence=self._counter
        )
        self._calls.append(record)
        logger.debug("Recorded call #%d: %s", record.sequence, record)
        return record

    def track(
        self,
        method: str,
        func: Callable[..., Any] | None = None,
        return_value: Any = None,  # noqa: ANN401
    ) -> Callable[..., Any]:
        """Wrap func so every invocation is recorded under method first.

        Keyword arguments are forwarded to func but not recorded. With no
        func, the wrapper simply returns return_value.
        """

        def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            self.record(method, list(args))
            if func is None:
                return return_value
            return func(*args, **kwargs)

        wrapper.__name__ = method
        return wrapper

    def was_called(self, method: str) -> bool:
        return any(record.method == method for record in self._calls)

    def was_not_called(self, method: str) -> bool:
        return not self.was_called(method)

    def call_count(self, method: str) -> int:
        return sum(1 for record in self._calls if record.method == method)

    def total_calls(self) -> int:
        return len(self._calls)

    def methods(self) -> list[str]:
        """Distinct method names in the order they were first recorded."""
        return list(dict.fromkeys(record.method for record in self._calls))

    def get_call(self, method: str, index: int = 0) -> CallRecord | None:
        """Return the index-th (0-based) call to method, or None."""
        if index < 0:
            return None
        seen = 0
        for record in self._calls:
            if record.method != method:
                continue
            if seen == index:
                return record
            seen += 1
        return None

    def first_call(self, method: str) -> CallRecord | None:
        return self.get_call(method, 0)

    def last_call(self, method: str) -> CallRecord | None:
        for record in reversed(self._calls):
            if record.method == method:
                return record
        return None

    def get_args(self, method: str, index: int = 0) -> list[str]:
        """Arguments of the index-th call to method; empty if there is none."""
        record = self.get_call(method, index)
        if record is None:
            return []
        return list(record.args)

    def clear(self) -> None:
        """Drop every record and restart sequence numbering at 1."""
        self._calls = []
        self._counter = 0

    # Assertions

    def _fail(self, message: str) -> AssertionFailure:
        if self.config.verbose:
            message = (
                f"{message}\n"
                f"{render_call_log(self._calls, self.config.max_arg_length)}"
            )
        return AssertionFailure(message)

    def assert_called(self, method: str) -> None:
        if not self.was_called(method):
            raise self._fail(f"Expected '{method}' to be called, but it was not called")

    def assert_not_called(self, method: str) -> None:
        count = self.call_count(method)
        if count:
            raise self._fail(
                f"Expected '{method}' not to be called, but it was called {count} time(s)"
            )

    def assert_called_times(self, method: str, times: int) -> None:
        count = self.call_count(method)
        if count != times:
            raise self._fail(
                f"Expected '{method}' to be called {times} time(s), "
                f"but it was called {count} time(s)"
            )

    def assert_called_with(self, method: str, args: Sequence[Any]) -> None:
        """Check the most recent call to method against args.

        Args are compared element-wise after string encoding, so
        assert_called_with("add", [1, 2]) matches record("add", 1, 2).
        """
        record = self.last_call(method)
        if record is None:
            raise self._fail(f"Expected '{method}' to be called, but it was not called")

        if isinstance(args, str):
            args = [args]
        expected = encode_args([list(args)])
        actual = record.args
        limit = self.config.max_arg_length
        if len(expected) != len(actual):
            raise self._fail(
                f"Expected last call to '{method}' with {len(expected)} argument(s) "
                f"{render_args(expected, limit)}, but got {len(actual)} "
                f"{render_args(actual, limit)}"
            )
        for index, (want, got) in enumerate(zip(expected, actual)):
            if want != got:
                raise self._fail(
                    f"Argument {index} of last call to '{method}' differs: "
                    f"expected {truncate(repr(want), limit)}, "
                    f"actual {truncate(repr(got), limit)}"
                )

    def assert_call_order(self, *methods: str) -> None:
        """Check the first calls to methods happened in the given order."""
        last_sequence = 0
        previous = None
        for method in methods:
            record = self.first_call(method)
            if record is None:
                raise self._fail(
                    f"Expected '{method}' to be called, but it was not called"
                )
            if record.sequence < last_sequence:
                raise self._fail(
                    f"Expected '{method}' to be called after '{previous}', "
                    f"but it was first called at #{record.sequence} "
                    f"before #{last_sequence}"
                )
            last_sequence = record.sequence
            previous = method

    def __repr__(self) -> str:
        return f"MockTracker(total_calls={len(self._calls)})"

"""Worked examples, runnable as a TestSuite via `testkit demo`.

Each example pairs a tiny piece of "production" code with the testkit
double that verifies it.
"""

from __future__ import annotations

from collections.abc import Callable

from testkit import assertions
from testkit.fixtures.context import TestContext
from testkit.fixtures.data import TestData
from testkit.fixtures.suite import TestSuite
from testkit.mocks.returns import MockReturn
from testkit.mocks.spy import Spy
from testkit.mocks.tracker import MockTracker


class UserService:
    """Looks users up through an injected fetch function, caching hits."""

    def __init__(self, fetch: Callable[[str], str]) -> None:
        self._fetch = fetch
        self._cache: dict[str, str] = {}

    def name_for(self, user_id: str) -> str:
        if user_id not in self._cache:
            self._cache[user_id] = self._fetch(user_id)
        return self._cache[user_id]


class RetryingReader:
    """Reads from a source until it returns a non-empty value or gives up."""

    max_attempts = 3

    def __init__(self, read: Callable[[], str]) -> None:
        self._read = read

    def read(self) -> str:
        for _ in range(self.max_attempts):
            value = self._read()
            if value:
                return value
        return ""


def example_tracker_counts_calls() -> None:
    tracker = MockTracker()
    service = UserService(tracker.track("fetch_user", return_value="Ada"))
    assertions.assert_equal(service.name_for("123"), "Ada")
    assertions.assert_equal(service.name_for("123"), "Ada")
    service.name_for("456")
    tracker.assert_called_times("fetch_user", 2)
    tracker.assert_called_with("fetch_user", ["456"])
    assertions.assert_equal(tracker.get_args("fetch_user", 0), ["123"])


def example_spy_scripts_retries() -> None:
    spy = Spy()
    spy.returns("read").add_returns("", "", "payload")
    reader = RetryingReader(spy.method("read"))
    assertions.assert_equal(reader.read(), "payload")
    spy.assert_called_times("read", 3)


def example_spy_gives_up_when_script_runs_out() -> None:
    spy = Spy()
    reader = RetryingReader(spy.method("read"))
    assertions.assert_equal(reader.read(), "")
    spy.assert_called_times("read", RetryingReader.max_attempts)


def example_mock_return_saturates() -> None:
    returns = MockReturn(default=0)
    returns.add_return(42)
    assertions.assert_equal([returns.next() for _ in range(3)], [42, 0, 0])
    returns.reset()
    assertions.assert_equal(returns.next(), 42)


def example_spy_reset_replays_script() -> None:
    spy = Spy()
    spy.returns("get_config").add_returns("debug=true", "debug=false")
    first = [spy.call("get_config") for _ in range(3)]
    spy.reset()
    assertions.assert_equal(spy.total_calls(), 0)
    second = [spy.call("get_config") for _ in range(3)]
    assertions.assert_equal(first, ["debug=true", "debug=false", ""])
    assertions.assert_equal(second, first)


def example_context_swaps_and_restores() -> None:
    class Settings:
        mode = "production"

    with TestContext() as ctx:
        ctx.swap(Settings, "mode", "test")
        ctx.set("run", 1)
        assertions.assert_equal(Settings.mode, "test")
        assertions.assert_equal(ctx.get("run"), "1")
    assertions.assert_equal(Settings.mode, "production")
    assertions.assert_empty(ctx)


def example_sequential_data() -> None:
    data = TestData()
    ids = [data.next_id() for _ in range(3)]
    assertions.assert_equal(ids, [1, 2, 3])
    assertions.assert_equal(data.next_email(), "user1@example.com")
    assertions.assert_starts_with(data.next_string("order"), "order_")


EXAMPLES: dict[str, Callable[[], None]] = {
    "tracker counts calls": example_tracker_counts_calls,
    "spy scripts retries": example_spy_scripts_retries,
    "spy falls back to empty string": example_spy_gives_up_when_script_runs_out,
    "mock return saturates": example_mock_return_saturates,
    "spy reset replays script": example_spy_reset_replays_script,
    "context swaps and restores": example_context_swaps_and_restores,
    "sequential data": example_sequential_data,
}


def build_suite() -> TestSuite:
    """Run every example in a fresh suite and return it."""
    suite = TestSuite("testkit demo")
    for name, example in EXAMPLES.items():
        suite.run(name, example)
    suite.teardown()
    return suite

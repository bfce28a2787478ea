"""Named group of test functions with pass/fail bookkeeping.

TestSuite is a small in-process harness: it runs plain callables inside a
shared TestContext and keeps score. It does not discover, isolate or
parallelize tests; that stays with the host runner.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from testkit.errors import AssertionFailure
from testkit.fixtures.context import TestContext
from testkit.logging.console import Colors, log, log_detail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestResult:
    """Outcome of one TestSuite.run().

    Attributes:
        name: Test name as passed to run().
        passed: Whether the function returned without raising.
        message: Failure text; empty for passing tests.
    """

    __test__ = False

    name: str
    passed: bool
    message: str = ""


class TestSuite:
    """Pass/fail counters around a TestContext.

    Example:
        suite = TestSuite("user service")
        suite.run("creates user", test_creates_user)
        suite.run("rejects duplicate", test_rejects_duplicate)
        suite.report()
        suite.assert_all_passed()
    """

    __test__ = False

    def __init__(self, name: str, context: TestContext | None = None) -> None:
        self.name = name
        self.context = context if context is not None else TestContext()
        self._results: list[TestResult] = []

    def run(self, test_name: str, func: Callable[[], Any]) -> bool:
        """Run func and record its outcome. Returns True when it passed.

        Any AssertionError (including AssertionFailure) is a failure with its
        message. Other exceptions are failures too, reported with their type.
        """
        if not self.context.is_setup:
            self.context.setup()
        try:
            func()
        except AssertionError as exc:
            result = TestResult(test_name, False, str(exc) or type(exc).__name__)
        except Exception as exc:
            result = TestResult(test_name, False, f"{type(exc).__name__}: {exc}")
        else:
            result = TestResult(test_name, True)
        self._results.append(result)
        logger.debug(
            "%s / %s: %s", self.name, test_name, "passed" if result.passed else "failed"
        )
        return result.passed

    @property
    def results(self) -> list[TestResult]:
        return list(self._results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self._results if result.passed)

    @property
    def failed(self) -> int:
        return sum(1 for result in self._results if not result.passed)

    @property
    def total(self) -> int:
        return len(self._results)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[TestResult]:
        return [result for result in self._results if not result.passed]

    def summary(self) -> str:
        return f"{self.name}: {self.passed} passed, {self.failed} failed"

    def assert_all_passed(self) -> None:
        failures = self.failures()
        if failures:
            names = ", ".join(result.name for result in failures)
            raise AssertionFailure(
                f"Expected all {self.total} test(s) in '{self.name}' to pass, "
                f"but {len(failures)} failed: {names}"
            )

    def report(self) -> None:
        """Print one line per test, failure details, then the summary."""
        for result in self._results:
            if result.passed:
                log("✓", result.name, Colors.GREEN)
            else:
                log("✗", result.name, Colors.RED)
                log_detail(result.message)
        color = Colors.GREEN if self.all_passed else Colors.RED
        log("●", self.summary(), color)

    def teardown(self) -> None:
        self.context.teardown()

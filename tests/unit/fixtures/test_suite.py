"""Unit tests for TestSuite in testkit/fixtures/suite.py.

PYTEST_DONT_REWRITE: nested test bodies use bare asserts whose messages are checked.
"""

from __future__ import annotations

import pytest

from testkit import assertions
from testkit.errors import AssertionFailure
from testkit.fixtures.context import TestContext
from testkit.fixtures.suite import TestResult, TestSuite
from testkit.logging.console import set_color_enabled


def _passes() -> None:
    assertions.assert_equal(1 + 1, 2)


def _fails() -> None:
    assertions.assert_equal(1 + 1, 3)


def _errors() -> None:
    raise KeyError("config")


class TestRun:
    def test_counts_passes_and_failures(self) -> None:
        suite = TestSuite("math")
        assert suite.run("adds", _passes) is True
        assert suite.run("miscounts", _fails) is False
        assert suite.passed == 1
        assert suite.failed == 1
        assert suite.total == 2
        assert suite.all_passed is False

    def test_failure_message_is_kept(self) -> None:
        suite = TestSuite("math")
        suite.run("miscounts", _fails)
        assert suite.failures() == [
            TestResult("miscounts", False, "Expected 3, actual 2")
        ]

    def test_plain_assert_counts_as_failure(self) -> None:
        def plain() -> None:
            assert False, "plain assert"

        suite = TestSuite("s")
        suite.run("plain", plain)
        assert suite.results[0].message == "plain assert"

    def test_unexpected_exception_counts_as_failure(self) -> None:
        suite = TestSuite("s")
        suite.run("errors", _errors)
        assert suite.failed == 1
        assert suite.results[0].message.startswith("KeyError")

    def test_run_sets_up_context(self) -> None:
        context = TestContext()
        suite = TestSuite("s", context)
        suite.run("uses context", lambda: context.set("k", "v"))
        assert context.is_setup
        assert context.get("k") == "v"

    def test_teardown_tears_down_context(self) -> None:
        suite = TestSuite("s")
        suite.run("adds", _passes)
        suite.teardown()
        assert suite.context.is_torn_down


class TestSummary:
    def test_summary_line(self) -> None:
        suite = TestSuite("math")
        suite.run("adds", _passes)
        suite.run("miscounts", _fails)
        assert suite.summary() == "math: 1 passed, 1 failed"

    def test_empty_suite_passes(self) -> None:
        suite = TestSuite("empty")
        assert suite.all_passed
        suite.assert_all_passed()

    def test_assert_all_passed_lists_failures(self) -> None:
        suite = TestSuite("math")
        suite.run("adds", _passes)
        suite.run("miscounts", _fails)
        suite.run("errors", _errors)
        with pytest.raises(AssertionFailure) as exc_info:
            suite.assert_all_passed()
        message = exc_info.value.message
        assert "2 failed" in message
        assert "miscounts, errors" in message


class TestReport:
    def test_report_prints_results_and_summary(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        set_color_enabled(False)
        try:
            suite = TestSuite("math")
            suite.run("adds", _passes)
            suite.run("miscounts", _fails)
            suite.report()
        finally:
            set_color_enabled(True)
        output = capsys.readouterr().out
        assert "✓ adds" in output
        assert "✗ miscounts" in output
        assert "Expected 3, actual 2" in output
        assert "math: 1 passed, 1 failed" in output
        assert "\033[" not in output

"""Reusable test setup: shared context, value swaps, sequential data, suites."""

from testkit.fixtures.context import TestContext
from testkit.fixtures.data import TestData
from testkit.fixtures.suite import TestResult, TestSuite
from testkit.fixtures.swap import Swap, swap

__all__ = ["Swap", "TestContext", "TestData", "TestResult", "TestSuite", "swap"]

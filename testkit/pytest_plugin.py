"""Pytest fixtures handing each test fresh testkit instances.

Enable from a conftest.py:
    pytest_plugins = ["testkit.pytest_plugin"]
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from testkit.config import reset_config
from testkit.fixtures.context import TestContext
from testkit.fixtures.data import TestData
from testkit.mocks.spy import Spy
from testkit.mocks.tracker import MockTracker


@pytest.fixture(autouse=True)
def _testkit_config_isolation() -> Iterator[None]:
    """Drop any active config a test installed so env changes are re-read."""
    yield
    reset_config()


@pytest.fixture
def mock_tracker() -> MockTracker:
    return MockTracker()


@pytest.fixture
def spy() -> Spy:
    return Spy()


@pytest.fixture
def test_data() -> TestData:
    return TestData()


@pytest.fixture
def test_context() -> Iterator[TestContext]:
    """A set-up TestContext, torn down (cleanups run) after the test."""
    context = TestContext()
    context.setup()
    yield context
    context.teardown()

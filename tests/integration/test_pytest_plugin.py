"""Tests for the fixtures provided by testkit/pytest_plugin.py."""

from __future__ import annotations

import pytest

from testkit.config import TestkitConfig, get_config, set_config
from testkit.fixtures.context import TestContext
from testkit.fixtures.data import TestData
from testkit.mocks.spy import Spy
from testkit.mocks.tracker import MockTracker

pytestmark = pytest.mark.integration


class TestFixtures:
    def test_fixture_types(
        self,
        mock_tracker: MockTracker,
        spy: Spy,
        test_data: TestData,
        test_context: TestContext,
    ) -> None:
        assert mock_tracker.total_calls() == 0
        assert spy.total_calls() == 0
        assert test_data.next_id() == 1
        assert test_context.is_setup

    def test_context_cleanup_registered_here(self, test_context: TestContext) -> None:
        test_context.set("k", "v")
        test_context.add_cleanup(lambda: None)
        assert test_context.get("k") == "v"


class TestConfigIsolation:
    """Installed configs do not leak between tests."""

    def test_install_config(self) -> None:
        set_config(TestkitConfig(max_arg_length=3))
        assert get_config().max_arg_length == 3

    def test_config_was_reset(self) -> None:
        assert get_config().max_arg_length == 80

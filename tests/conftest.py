"""Pytest configuration for testkit tests."""

import pytest

pytest_plugins = ["testkit.pytest_plugin"]

_TESTKIT_ENV_VARS = (
    "TESTKIT_VERBOSE",
    "TESTKIT_MAX_ARG_LENGTH",
    "TESTKIT_COLOR",
    "TESTKIT_LOG_LEVEL",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_testkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from default configuration.

    Removes testkit env vars so a developer's shell or ~/.config/testkit/.env
    cannot change failure message formatting under test.
    """
    for name in _TESTKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Default unmarked tests to unit category."""
    for item in items:
        if any(marker in item.keywords for marker in ("unit", "integration")):
            continue
        item.add_marker(pytest.mark.unit)

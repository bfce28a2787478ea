"""Unit tests for TestkitConfig in testkit/config.py."""

from __future__ import annotations

import logging

import pytest

from testkit.config import (
    ConfigurationError,
    TestkitConfig,
    get_config,
    reset_config,
    set_config,
)


class TestTestkitConfigDefaults:
    def test_defaults(self) -> None:
        config = TestkitConfig()
        assert config.verbose is False
        assert config.max_arg_length == 80
        assert config.color is True
        assert config.log_level == "WARNING"
        assert config.validate() == []

    def test_log_level_is_normalized(self) -> None:
        config = TestkitConfig(log_level=" debug ")
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG


class TestTestkitConfigValidation:
    def test_negative_max_arg_length(self) -> None:
        errors = TestkitConfig(max_arg_length=-1).validate()
        assert errors == ["max_arg_length must be non-negative, got: -1"]

    def test_unknown_log_level(self) -> None:
        errors = TestkitConfig(log_level="LOUD").validate()
        assert len(errors) == 1
        assert "LOUD" in errors[0]


class TestTestkitConfigFromEnv:
    def test_from_env_with_no_env_vars(self) -> None:
        assert TestkitConfig.from_env() == TestkitConfig()

    def test_from_env_reads_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TESTKIT_VERBOSE", "yes")
        monkeypatch.setenv("TESTKIT_MAX_ARG_LENGTH", "20")
        monkeypatch.setenv("TESTKIT_COLOR", "off")
        monkeypatch.setenv("TESTKIT_LOG_LEVEL", "info")
        config = TestkitConfig.from_env()
        assert config == TestkitConfig(
            verbose=True, max_arg_length=20, color=False, log_level="INFO"
        )

    def test_no_color_disables_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert TestkitConfig.from_env().color is False

    def test_unparseable_values_fall_back(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TESTKIT_VERBOSE", "maybe")
        monkeypatch.setenv("TESTKIT_MAX_ARG_LENGTH", "lots")
        config = TestkitConfig.from_env()
        assert config.verbose is False
        assert config.max_arg_length == 80

    def test_invalid_values_raise(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TESTKIT_MAX_ARG_LENGTH", "-5")
        monkeypatch.setenv("TESTKIT_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError) as exc_info:
            TestkitConfig.from_env()
        assert len(exc_info.value.errors) == 2
        assert "Configuration validation failed" in str(exc_info.value)

    def test_validation_can_be_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TESTKIT_MAX_ARG_LENGTH", "-5")
        assert TestkitConfig.from_env(validate=False).max_arg_length == -5


class TestActiveConfig:
    def test_get_config_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_config()
        monkeypatch.setenv("TESTKIT_VERBOSE", "1")
        assert get_config() is first
        reset_config()
        assert get_config().verbose is True

    def test_set_config_overrides(self) -> None:
        config = TestkitConfig(max_arg_length=5)
        set_config(config)
        assert get_config() is config


class TestActiveConfigWithInvalidEnv:
    """get_config() replaces invalid settings instead of raising."""

    def test_invalid_values_fall_back_to_defaults(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TESTKIT_MAX_ARG_LENGTH", "-1")
        monkeypatch.setenv("TESTKIT_LOG_LEVEL", "trace")
        monkeypatch.setenv("TESTKIT_VERBOSE", "1")
        with caplog.at_level(logging.WARNING, logger="testkit.config"):
            config = get_config()
        assert config.max_arg_length == 80
        assert config.log_level == "WARNING"
        assert config.verbose is True
        assert "Ignoring invalid testkit settings" in caplog.text

    def test_with_defaults_for_invalid_keeps_valid_values(self) -> None:
        config = TestkitConfig(max_arg_length=10, log_level="LOUD")
        fixed = config.with_defaults_for_invalid()
        assert fixed == TestkitConfig(max_arg_length=10, log_level="WARNING")
        assert fixed.validate() == []

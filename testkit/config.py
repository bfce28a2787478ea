"""Configuration dataclass for testkit.

Provides TestkitConfig for centralized configuration management. Test code
can construct a configuration directly and hand it to a tracker or spy;
anything without an explicit config falls back to get_config(), which
loads it from environment variables via from_env().

Environment Variables:
    TESTKIT_VERBOSE: Append the recorded call log to tracker failures (default: off)
    TESTKIT_MAX_ARG_LENGTH: Truncate rendered arguments in failure messages (default: 80)
    TESTKIT_COLOR: Colored console output (default: on)
    NO_COLOR: Disables colored output when set to any non-empty value
    TESTKIT_LOG_LEVEL: Level used by the CLI's logging setup (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        super().__init__(message)


def _parse_bool(value: str | None, default: bool) -> bool:
    """Parse a boolean env value, falling back to default when unset or unknown."""
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    return default


def _safe_int(value: str | None, default: int) -> int:
    """Safely parse an integer with fallback to default."""
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class TestkitConfig:
    """Centralized configuration for testkit.

    Attributes:
        verbose: Whether tracker assertion failures include the full call log
            and console output skips truncation.
            Env: TESTKIT_VERBOSE (default: False)
        max_arg_length: Maximum rendered length of a single argument in
            failure messages. 0 disables truncation.
            Env: TESTKIT_MAX_ARG_LENGTH (default: 80)
        color: Whether console output uses ANSI colors.
            Env: TESTKIT_COLOR, NO_COLOR (default: True)
        log_level: Logging level name applied by the CLI.
            Env: TESTKIT_LOG_LEVEL (default: WARNING)

    Example:
        config = TestkitConfig(verbose=True, max_arg_length=0)
        tracker = MockTracker(config=config)
    """

    __test__ = False

    verbose: bool = False
    max_arg_length: int = 80
    color: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Normalize the log level name.

        Since the dataclass is frozen, we use object.__setattr__.
        """
        object.__setattr__(self, "log_level", self.log_level.strip().upper())

    @classmethod
    def from_env(cls, *, validate: bool = True) -> TestkitConfig:
        """Create TestkitConfig from environment variables.

        Args:
            validate: If True (default), run validation and raise
                ConfigurationError on any errors.

        Returns:
            TestkitConfig with values from the environment or defaults.

        Raises:
            ConfigurationError: If validate=True and configuration is invalid.
        """
        color = _parse_bool(os.environ.get("TESTKIT_COLOR"), True)
        if os.environ.get("NO_COLOR"):
            color = False

        config = cls(
            verbose=_parse_bool(os.environ.get("TESTKIT_VERBOSE"), False),
            max_arg_length=_safe_int(os.environ.get("TESTKIT_MAX_ARG_LENGTH"), 80),
            color=color,
            log_level=os.environ.get("TESTKIT_LOG_LEVEL") or "WARNING",
        )

        if validate:
            errors = config.validate()
            if errors:
                raise ConfigurationError(errors)

        return config

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages. Empty list if configuration is valid.
        """
        errors: list[str] = []
        if self.max_arg_length < 0:
            errors.append(
                f"max_arg_length must be non-negative, got: {self.max_arg_length}"
            )
        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {self.log_level}"
            )
        return errors

    def with_defaults_for_invalid(self) -> TestkitConfig:
        """Copy with every setting that fails validate() reset to its default."""
        defaults = TestkitConfig()
        return replace(
            self,
            max_arg_length=(
                self.max_arg_length
                if self.max_arg_length >= 0
                else defaults.max_arg_length
            ),
            log_level=(
                self.log_level if self.log_level in LOG_LEVELS else defaults.log_level
            ),
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)


# Active configuration, loaded lazily from the environment on first use
_active_config: TestkitConfig | None = None


def get_config() -> TestkitConfig:
    """Return the active configuration, loading it from the environment once.

    Invalid settings are replaced by their defaults with a warning, so a bad
    env var never turns an assertion into a ConfigurationError. The CLI
    validates strictly through TestkitConfig.from_env() instead.
    """
    global _active_config
    if _active_config is None:
        config = TestkitConfig.from_env(validate=False)
        errors = config.validate()
        if errors:
            logger.warning(
                "Ignoring invalid testkit settings: %s", "; ".join(errors)
            )
            config = config.with_defaults_for_invalid()
        _active_config = config
    return _active_config


def set_config(config: TestkitConfig) -> None:
    """Replace the active configuration (used by the CLI and tests)."""
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Forget the active configuration so the next access re-reads the env."""
    global _active_config
    _active_config = None

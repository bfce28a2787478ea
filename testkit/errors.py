"""Failure signal shared by every testkit assertion."""

from __future__ import annotations


class AssertionFailure(AssertionError):
    """Raised when a testkit assertion is not met.

    Subclasses AssertionError so pytest and unittest report it as an
    ordinary test failure rather than an error.

    Attributes:
        message: Human-readable description of expected vs. observed.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

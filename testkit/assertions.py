"""Assertion predicates for test code.

Every function either returns normally or raises AssertionFailure with a
message naming the expected and observed values. An optional ``message``
argument is prepended to the generated text to give the failure context.

Example:
    assert_equal(response.status, 200, "status after login")
    assert_contains(body, "Welcome")
    error = assert_raises(ValueError, parse, "not-a-number")
"""

from __future__ import annotations

import math
from collections.abc import Callable, Container, Sized
from typing import Any, TypeVar

from testkit.config import get_config
from testkit.errors import AssertionFailure
from testkit.formatting import render_value

E = TypeVar("E", bound=BaseException)
R = TypeVar("R")


def _render(value: object) -> str:
    return render_value(value, get_config().max_arg_length)


def _failure(detail: str, message: str | None) -> AssertionFailure:
    if message:
        return AssertionFailure(f"{message}: {detail}")
    return AssertionFailure(detail)


def fail(message: str) -> None:
    """Fail unconditionally."""
    raise AssertionFailure(message)


def assert_true(value: object, message: str | None = None) -> None:
    if not value:
        raise _failure(f"Expected truthy value, got {_render(value)}", message)


def assert_false(value: object, message: str | None = None) -> None:
    if value:
        raise _failure(f"Expected falsy value, got {_render(value)}", message)


def assert_equal(actual: object, expected: object, message: str | None = None) -> None:
    if actual != expected:
        raise _failure(
            f"Expected {_render(expected)}, actual {_render(actual)}", message
        )


def assert_not_equal(
    actual: object, unexpected: object, message: str | None = None
) -> None:
    if actual == unexpected:
        raise _failure(
            f"Expected value different from {_render(unexpected)}", message
        )


def assert_is_none(value: object, message: str | None = None) -> None:
    if value is not None:
        raise _failure(f"Expected None, got {_render(value)}", message)


def assert_is_not_none(value: object, message: str | None = None) -> None:
    if value is None:
        raise _failure("Expected a value, got None", message)


def assert_greater(actual: Any, bound: Any, message: str | None = None) -> None:  # noqa: ANN401
    if not actual > bound:
        raise _failure(
            f"Expected value greater than {_render(bound)}, actual {_render(actual)}",
            message,
        )


def assert_less(actual: Any, bound: Any, message: str | None = None) -> None:  # noqa: ANN401
    if not actual < bound:
        raise _failure(
            f"Expected value less than {_render(bound)}, actual {_render(actual)}",
            message,
        )


def assert_in_range(
    actual: Any,  # noqa: ANN401
    low: Any,  # noqa: ANN401
    high: Any,  # noqa: ANN401
    message: str | None = None,
) -> None:
    """Check low <= actual <= high."""
    if not low <= actual <= high:
        raise _failure(
            f"Expected value in range [{_render(low)}, {_render(high)}], "
            f"actual {_render(actual)}",
            message,
        )


def assert_approx_equal(
    actual: float,
    expected: float,
    tolerance: float = 1e-9,
    message: str | None = None,
) -> None:
    """Check |actual - expected| <= tolerance. NaN never matches."""
    if not math.isclose(actual, expected, rel_tol=0.0, abs_tol=tolerance):
        raise _failure(
            f"Expected {expected!r} (tolerance {tolerance!r}), actual {actual!r}",
            message,
        )


def assert_contains(
    container: Container[Any], item: object, message: str | None = None
) -> None:
    """Check substring (for str) or membership (for other containers)."""
    if item not in container:
        raise _failure(
            f"Expected {_render(container)} to contain {_render(item)}", message
        )


def assert_not_contains(
    container: Container[Any], item: object, message: str | None = None
) -> None:
    if item in container:
        raise _failure(
            f"Expected {_render(container)} not to contain {_render(item)}", message
        )


def assert_starts_with(text: str, prefix: str, message: str | None = None) -> None:
    if not text.startswith(prefix):
        raise _failure(
            f"Expected {_render(text)} to start with {_render(prefix)}", message
        )


def assert_ends_with(text: str, suffix: str, message: str | None = None) -> None:
    if not text.endswith(suffix):
        raise _failure(
            f"Expected {_render(text)} to end with {_render(suffix)}", message
        )


def assert_empty(collection: Sized, message: str | None = None) -> None:
    if len(collection) != 0:
        raise _failure(
            f"Expected empty collection, got {len(collection)} item(s): "
            f"{_render(collection)}",
            message,
        )


def assert_not_empty(collection: Sized, message: str | None = None) -> None:
    if len(collection) == 0:
        raise _failure("Expected non-empty collection, got empty", message)


def assert_length(
    collection: Sized, expected: int, message: str | None = None
) -> None:
    actual = len(collection)
    if actual != expected:
        raise _failure(f"Expected length {expected}, actual length {actual}", message)


def assert_raises(
    exc_type: type[E],
    func: Callable[..., Any],
    *args: Any,  # noqa: ANN401
    **kwargs: Any,  # noqa: ANN401
) -> E:
    """Call func and return the exc_type it raised.

    Fails when func returns normally. Exceptions of other types propagate
    unchanged.
    """
    try:
        func(*args, **kwargs)
    except exc_type as exc:
        return exc
    name = getattr(func, "__name__", repr(func))
    raise AssertionFailure(
        f"Expected {exc_type.__name__} from {name}, but no exception was raised"
    )


def assert_not_raises(
    func: Callable[..., R],
    *args: Any,  # noqa: ANN401
    **kwargs: Any,  # noqa: ANN401
) -> R:
    """Call func and return its result; any exception becomes a failure."""
    try:
        return func(*args, **kwargs)
    except Exception as exc:
        name = getattr(func, "__name__", repr(func))
        raise AssertionFailure(
            f"Expected {name} not to raise, but it raised "
            f"{type(exc).__name__}: {exc}"
        ) from exc

# tests/helpers/result_utils.py
"""Result type unwrapping utilities for mockspy tests."""

from __future__ import annotations

from typing import TypeVar

from mockspy.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


def expect_success(result: Result[T, E]) -> T:
    """Unwrap Success or fail the test with the error.

    Example:
        >>> spy = expect_success(mock.lookup_spy("add"))
    """
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise AssertionError(f"Unexpected failure: {error}")


def expect_failure(result: Result[T, E]) -> E:
    """Unwrap Failure or fail the test with the unexpected value.

    Example:
        >>> error = expect_failure(registry.resolve("NoSuchType"))
        >>> assert error.name == "NoSuchType"
    """
    match result:
        case Failure(error):
            return error
        case Success(value):
            raise AssertionError(f"Expected failure but got success: {value}")

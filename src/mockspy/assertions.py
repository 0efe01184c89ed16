"""
Assertion helpers over a Mock's recorded calls.

Each helper raises ``AssertionError`` with the recorded call history so a
failing test shows what actually happened. A method that was never spied
on counts as never called.

Example:
    >>> assert_called_with(mock, "save", Params.of(any_arg(), True))
    >>> assert_called_times(mock, "flush", 2)
"""

from __future__ import annotations

from typing import Any

from mockspy.errors import NullArgumentError
from mockspy.mock import Mock
from mockspy.params import Params
from mockspy.result import Failure, Success
from mockspy.spy import MethodSpy


def _history(spy: MethodSpy) -> str:
    match spy.calls:
        case ():
            return "no calls recorded"
        case calls:
            return "recorded calls (oldest first): " + ", ".join(
                str(Params.of_list(call)) for call in calls
            )


def _require_params(params: Params | None) -> Params:
    if params is None:
        raise NullArgumentError("params")
    return params


def assert_called(mock: Mock[Any], method_name: str) -> None:
    """Assert that ``method_name`` was called at least once."""
    match mock.lookup_spy(method_name):
        case Success(spy) if spy.has_been_called():
            return
        case _:
            raise AssertionError(f"Expected {method_name} to have been called, but it was not")


def assert_not_called(mock: Mock[Any], method_name: str) -> None:
    """Assert that ``method_name`` was never called."""
    match mock.lookup_spy(method_name):
        case Success(spy) if spy.has_been_called():
            raise AssertionError(
                f"Expected {method_name} not to have been called; {_history(spy)}"
            )
        case _:
            return


def assert_called_with(mock: Mock[Any], method_name: str, params: Params | None) -> None:
    """Assert that some call to ``method_name`` matched ``params``.

    Raises:
        NullArgumentError: If ``params`` is None.
    """
    expected = _require_params(params)
    match mock.lookup_spy(method_name):
        case Success(spy) if spy.has_been_called_with(expected):
            return
        case Success(spy):
            raise AssertionError(
                f"Expected {method_name} to have been called with {expected}; {_history(spy)}"
            )
        case Failure(_):
            raise AssertionError(
                f"Expected {method_name} to have been called with {expected}, "
                f"but it is not spied on"
            )


def assert_last_called_with(mock: Mock[Any], method_name: str, params: Params | None) -> None:
    """Assert that the most recent call to ``method_name`` matched ``params``.

    Raises:
        NullArgumentError: If ``params`` is None.
    """
    expected = _require_params(params)
    match mock.lookup_spy(method_name):
        case Success(spy) if spy.has_been_last_called_with(expected):
            return
        case Success(spy):
            raise AssertionError(
                f"Expected last call to {method_name} to match {expected}; {_history(spy)}"
            )
        case Failure(_):
            raise AssertionError(
                f"Expected last call to {method_name} to match {expected}, "
                f"but it is not spied on"
            )


def assert_called_times(mock: Mock[Any], method_name: str, times: int) -> None:
    """Assert that ``method_name`` was called exactly ``times`` times."""
    match mock.lookup_spy(method_name):
        case Success(spy):
            actual = spy.call_count
        case Failure(_):
            actual = 0
    if actual != times:
        raise AssertionError(f"Expected {method_name} to be called {times} times, got {actual}")


__all__ = [
    "assert_called",
    "assert_called_times",
    "assert_called_with",
    "assert_last_called_with",
    "assert_not_called",
]

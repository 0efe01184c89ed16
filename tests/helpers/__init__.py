"""Shared test utilities for the mockspy test-suite.

Usage:
    >>> from tests.helpers import Calculator, expect_success
    >>>
    >>> mock = Mock.for_contract(Calculator)
    >>> spy = expect_success(mock.lookup_spy("add"))
"""

from __future__ import annotations

from tests.helpers.contracts import (
    Address,
    Calculator,
    Circle,
    Notifier,
    Point,
    Shape,
    Square,
    Unrelated,
)
from tests.helpers.result_utils import expect_failure, expect_success


__all__ = [
    "Address",
    "Calculator",
    "Circle",
    "Notifier",
    "Point",
    "Shape",
    "Square",
    "Unrelated",
    "expect_failure",
    "expect_success",
]

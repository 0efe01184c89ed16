"""
Result type for lookups that may legitimately come back empty.

mockspy raises exceptions for test-author mistakes (see ``mockspy.errors``),
but lookups that are expected to miss, such as resolving a type name or
finding the spy of a method nobody configured, return a ``Result`` so callers
decide what a miss means.

Usage:
    >>> match default_registry.resolve("collections.OrderedDict"):
    ...     case Success(resolved):
    ...         print(resolved.__name__)
    ...     case Failure(error):
    ...         print(error.name)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A lookup that found ``value``."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A lookup that missed, described by ``error``."""

    error: E


Result = Success[T] | Failure[E]


__all__ = ["Failure", "Result", "Success"]

"""
Params - ordered, fixed-arity sequence of argument matchers.

A Params describes the expected shape of one call. It matches an actual
argument tuple when the lengths agree and every position's matcher accepts
the argument in that position.

Values handed to ``Params.add`` are first classified into the ``ParamArg``
union: matchers become ``Matched`` and are used as-is, anything else becomes
``RawValue`` and is compared with ``Equals``. Wrap a matcher in ``RawValue``
explicitly to compare against the matcher object itself.

Example:
    >>> Params.of(1, any_arg()).matches((1, "anything"))
    True
    >>> Params.of(1, any_arg()).matches((1,))
    False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Literal, Sequence, assert_never

from mockspy.matchers import (
    AnyArg,
    ArgumentMatcher,
    Equals,
    Satisfies,
    StructuralEquals,
    TypeMatches,
    describe,
    matches,
)


@dataclass(frozen=True)
class RawValue:
    """A literal value, compared with ``Equals``."""

    value: object
    kind: Literal["RawValue"] = "RawValue"


@dataclass(frozen=True)
class Matched:
    """A matcher, used as-is."""

    matcher: ArgumentMatcher
    kind: Literal["Matched"] = "Matched"


ParamArg = RawValue | Matched


def as_param_arg(value: object) -> ParamArg:
    """Classify a positional value into the ParamArg union."""
    match value:
        case RawValue() | Matched():
            return value
        case AnyArg() | Equals() | StructuralEquals() | TypeMatches() | Satisfies():
            return Matched(matcher=value)
        case _:
            return RawValue(value=value)


class Params:
    """Ordered argument matchers describing one call shape."""

    def __init__(self, matchers: Iterable[ArgumentMatcher] = ()) -> None:
        self._matchers: list[ArgumentMatcher] = list(matchers)

    @classmethod
    def empty(cls) -> Params:
        """Params matching only a call with no arguments."""
        return cls()

    @classmethod
    def of(cls, *values: object) -> Params:
        """Params from positional values and/or matchers."""
        params = cls()
        for value in values:
            params.add(value)
        return params

    @classmethod
    def of_list(cls, args: Iterable[object]) -> Params:
        """Re-wrap a recorded call's arguments as Equals matchers.

        Every argument is wrapped, matcher objects included, because the
        result describes what was actually passed.
        """
        return cls(Equals(expected=arg) for arg in args)

    def add(self, value: object) -> Params:
        """Append one position and return self for chaining."""
        match as_param_arg(value):
            case Matched(matcher=matcher):
                self._matchers.append(matcher)
            case RawValue(value=raw):
                self._matchers.append(Equals(expected=raw))
            case unreachable:
                assert_never(unreachable)
        return self

    def copy(self) -> Params:
        return Params(self._matchers)

    @property
    def arity(self) -> int:
        return len(self._matchers)

    @property
    def matchers(self) -> tuple[ArgumentMatcher, ...]:
        return tuple(self._matchers)

    def matches(self, args: Sequence[object]) -> bool:
        """True iff ``args`` has this arity and every position matches."""
        if len(args) != len(self._matchers):
            return False
        return all(
            matches(matcher, arg) for matcher, arg in zip(self._matchers, args, strict=True)
        )

    def describe(self) -> str:
        return ", ".join(describe(matcher) for matcher in self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __iter__(self) -> Iterator[ArgumentMatcher]:
        return iter(tuple(self._matchers))

    def __eq__(self, other: object) -> bool:
        match other:
            case Params():
                return self._matchers == other._matchers
            case _:
                return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({self.describe()})"

    def __repr__(self) -> str:
        return f"Params({self.describe()})"


__all__ = ["Matched", "ParamArg", "Params", "RawValue", "as_param_arg"]

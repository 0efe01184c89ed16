"""
Argument matcher ADTs - single-argument predicates used by ``Params``.

Matchers are immutable descriptions; ``matches`` interprets them against an
actual argument and ``describe`` renders them for diagnostics.

Variants:
    - AnyArg: matches every value, ``None`` included.
    - Equals: Python ``==``. Objects without value-based ``__eq__`` compare
      by identity; use StructuralEquals for content comparison.
    - StructuralEquals: compares canonical serialized text (see
      ``mockspy.serialization``).
    - TypeMatches: runtime type name equals the expected name, or the
      expected class is assignable from the argument's class.
    - Satisfies: arbitrary user predicate.

Example:
    >>> params = Params.of(any_arg(), type_matches(int), "literal")
    >>> params.matches(("x", 3, "literal"))
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Callable, Literal, assert_never

from mockspy.result import Failure, Success
from mockspy.serialization import canonical_dumps
from mockspy.typeinfo import TypeDescriptor, TypeRegistry, default_registry, qualified_name


@dataclass(frozen=True)
class AnyArg:
    """Wildcard matcher."""

    kind: Literal["AnyArg"] = "AnyArg"


@dataclass(frozen=True)
class Equals:
    """Matches arguments equal to ``expected``."""

    expected: object
    kind: Literal["Equals"] = "Equals"


@dataclass(frozen=True)
class StructuralEquals:
    """Matches arguments whose canonical serialized form equals ``expected``'s."""

    expected: object
    kind: Literal["StructuralEquals"] = "StructuralEquals"


@dataclass(frozen=True)
class TypeMatches:
    """Matches arguments by runtime type.

    Attributes:
        expected_name: Name compared against the argument's type names.
        expected_type: The class itself when the matcher was built from one.
        registry: Resolves ``expected_name`` for assignability checks.
    """

    expected_name: str
    expected_type: type | None = None
    registry: TypeRegistry = field(default=default_registry, compare=False, repr=False)
    kind: Literal["TypeMatches"] = "TypeMatches"


@dataclass(frozen=True)
class Satisfies:
    """Matches arguments for which ``predicate`` returns a truthy value."""

    predicate: Callable[[object], bool]
    label: str = ""
    kind: Literal["Satisfies"] = "Satisfies"


ArgumentMatcher = AnyArg | Equals | StructuralEquals | TypeMatches | Satisfies


def any_arg() -> AnyArg:
    return AnyArg()


def equals(expected: object) -> Equals:
    return Equals(expected=expected)


def structural_equals(expected: object) -> StructuralEquals:
    return StructuralEquals(expected=expected)


def type_matches(
    expected: str | type | TypeDescriptor | Mapping[str, object],
    registry: TypeRegistry | None = None,
) -> TypeMatches:
    """Build a TypeMatches from a name, a class, or a type descriptor.

    Mappings are validated into a ``TypeDescriptor``, so
    ``{"module": "decimal", "name": "Decimal"}`` is accepted.

    Raises:
        TypeError: If ``expected`` is none of the accepted forms.
        pydantic.ValidationError: If a mapping is not a valid descriptor.
    """
    resolved_registry = default_registry if registry is None else registry
    match expected:
        case type():
            return TypeMatches(
                expected_name=qualified_name(expected),
                expected_type=expected,
                registry=resolved_registry,
            )
        case TypeDescriptor():
            return TypeMatches(expected_name=expected.qualified_name, registry=resolved_registry)
        case str():
            return TypeMatches(expected_name=expected, registry=resolved_registry)
        case Mapping():
            descriptor = TypeDescriptor.model_validate(dict(expected))
            return type_matches(descriptor, resolved_registry)
        case _:
            raise TypeError(
                "type_matches expects a name, class or TypeDescriptor, "
                f"got {type(expected).__name__}"
            )


def satisfies(predicate: Callable[[object], bool], label: str | None = None) -> Satisfies:
    return Satisfies(
        predicate=predicate,
        label=getattr(predicate, "__name__", "predicate") if label is None else label,
    )


def matches(matcher: ArgumentMatcher, value: object) -> bool:
    """Evaluate ``matcher`` against one actual argument."""
    match matcher:
        case AnyArg():
            return True
        case Equals(expected=expected):
            return bool(expected == value)
        case StructuralEquals(expected=expected):
            return canonical_dumps(expected) == canonical_dumps(value)
        case TypeMatches():
            return _matches_type(matcher, value)
        case Satisfies(predicate=predicate):
            return bool(predicate(value))
        case _:
            assert_never(matcher)


def _matches_type(matcher: TypeMatches, value: object) -> bool:
    registry = matcher.registry
    if matcher.expected_name in registry.runtime_type_names(value):
        return True
    if matcher.expected_type is not None:
        return registry.is_assignable(matcher.expected_type, type(value))
    match registry.resolve(matcher.expected_name):
        case Success(expected):
            return registry.is_assignable(expected, type(value))
        case Failure(_):
            return False


def describe(matcher: ArgumentMatcher) -> str:
    """Human-readable rendering used in diagnostics."""
    match matcher:
        case AnyArg():
            return "any_arg()"
        case Equals(expected=expected):
            return repr(expected)
        case StructuralEquals(expected=expected):
            return f"structural_equals({expected!r})"
        case TypeMatches(expected_name=name):
            return f"type_matches({name!r})"
        case Satisfies(label=label):
            return f"satisfies({label})"
        case _:
            assert_never(matcher)


__all__ = [
    "AnyArg",
    "ArgumentMatcher",
    "Equals",
    "Satisfies",
    "StructuralEquals",
    "TypeMatches",
    "any_arg",
    "describe",
    "equals",
    "matches",
    "satisfies",
    "structural_equals",
    "type_matches",
]

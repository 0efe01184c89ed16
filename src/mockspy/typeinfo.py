"""
Runtime type names, name resolution and assignability checks.

``TypeMatches`` needs three things from the host: the runtime type name of an
arbitrary argument, a way to turn a type name back into a class, and a
subclass test. This module provides all three on top of ``type()`` and the
import system.

Type names are accepted in three spellings, all of which identify the same
class::

    "OrderedDict"                         # __name__
    "Outer.Inner"                         # __qualname__
    "collections.OrderedDict"             # module-qualified

Resolution order for ``TypeRegistry.resolve``:
    1. explicitly registered names,
    2. builtins (``"int"``, ``"dict"``, ...),
    3. dotted import paths (``"package.module.Class"``).

Example:
    >>> registry = TypeRegistry()
    >>> registry.register(Shape)
    >>> registry.resolve("Shape")
    Success(value=<class 'geometry.Shape'>)
"""

from __future__ import annotations

import builtins
import importlib
from abc import ABCMeta

from pydantic import BaseModel, ConfigDict, Field

from mockspy.errors import UnknownTypeName
from mockspy.result import Failure, Result, Success


class TypeDescriptor(BaseModel):
    """Structured reference to a class by module and qualified name.

    Attributes:
        module: Defining module, or None for a bare name.
        name: Qualified name inside the module.
    """

    module: str | None = None
    name: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def qualified_name(self) -> str:
        match self.module:
            case None | "":
                return self.name
            case module:
                return f"{module}.{self.name}"

    @classmethod
    def of(cls, type_: type) -> TypeDescriptor:
        """Describe an existing class."""
        return cls(module=type_.__module__, name=type_.__qualname__)


def qualified_name(type_: type) -> str:
    """Module-qualified name of a class, e.g. ``builtins.int``."""
    return f"{type_.__module__}.{type_.__qualname__}"


def type_names(type_: type) -> frozenset[str]:
    """All spellings under which a class may be referred to."""
    return frozenset({type_.__name__, type_.__qualname__, qualified_name(type_)})


def is_assignable(expected: type, actual: type) -> bool:
    """True when a value of type ``actual`` may stand where ``expected`` is required."""
    if expected in actual.__mro__:
        return True
    match expected:
        case ABCMeta():
            # Covers ABC.register() and runtime-checkable Protocols.
            try:
                return issubclass(actual, expected)
            except TypeError:
                # Protocols without @runtime_checkable refuse issubclass().
                return False
        case _:
            return False


class TypeRegistry:
    """Name → class lookup used by ``TypeMatches``.

    Classes defined inside test functions are not importable by dotted path;
    register them explicitly so string-based matchers can resolve them.
    """

    def __init__(self) -> None:
        self._types: dict[str, type] = {}

    def register(self, type_: type, name: str | None = None) -> None:
        """Register a class under every spelling of its name (or under ``name``)."""
        match name:
            case None:
                for spelling in type_names(type_):
                    self._types[spelling] = type_
            case alias:
                self._types[alias] = type_

    def runtime_type_names(self, value: object) -> frozenset[str]:
        """Names under which the runtime type of ``value`` is known."""
        return type_names(type(value))

    def resolve(self, name: str) -> Result[type, UnknownTypeName]:
        """Resolve a type name to a class."""
        registered = self._types.get(name)
        if registered is not None:
            return Success(registered)
        builtin = getattr(builtins, name, None)
        match builtin:
            case type():
                return Success(builtin)
            case _:
                return _import_type(name)

    def describe(self, descriptor: TypeDescriptor) -> Result[type, UnknownTypeName]:
        """Resolve a structured descriptor."""
        return self.resolve(descriptor.qualified_name)

    def is_assignable(self, expected: type, actual: type) -> bool:
        return is_assignable(expected, actual)


def _import_type(name: str) -> Result[type, UnknownTypeName]:
    parts = name.split(".")
    if len(parts) < 2:
        return Failure(UnknownTypeName(name=name, reason="not registered and not a builtin"))

    # Longest importable module prefix wins; the rest is an attribute path.
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: object = importlib.import_module(module_name)
        except ImportError:
            continue
        attribute_path = parts[split:]
        for attribute in attribute_path:
            if not hasattr(target, attribute):
                reason = f"{module_name!r} has no attribute {'.'.join(attribute_path)!r}"
                return Failure(UnknownTypeName(name=name, reason=reason))
            target = getattr(target, attribute)
        match target:
            case type():
                return Success(target)
            case _:
                return Failure(UnknownTypeName(name=name, reason="not a class"))

    return Failure(UnknownTypeName(name=name, reason="no importable module prefix"))


default_registry = TypeRegistry()


__all__ = [
    "TypeDescriptor",
    "TypeRegistry",
    "default_registry",
    "is_assignable",
    "qualified_name",
    "type_names",
]

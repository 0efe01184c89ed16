# src/mockspy/errors.py
"""Exception hierarchy and lookup-failure ADTs for mockspy.

Exceptions signal test-author mistakes and are always surfaced to the
caller. Lookup failures that callers are expected to branch on are frozen
dataclasses carried inside ``Failure``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence


class MockSpyError(Exception):
    """Base exception for all mockspy errors."""

    pass


class NullArgumentError(MockSpyError):
    """An operation that needs a Params value received ``None``."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class UnresolvedCallError(MockSpyError):
    """A spied call matched no configured rule and no fallback is set.

    The message lists the method, the arguments it received and every
    configured rule.
    """

    def __init__(
        self,
        method_name: str,
        args: Sequence[object],
        rules: Sequence[str],
        label: str = "",
    ) -> None:
        self.method_name = method_name
        self.call_args = tuple(args)
        self.rules = tuple(rules)
        self.label = label
        target = f"{label}.{method_name}" if label else method_name
        listing = "\n".join(f"  {rule}" for rule in self.rules) or "  (none)"
        super().__init__(
            f"Method '{target}' was called with arguments {list(self.call_args)!r} "
            f"but no configured rule matched and no fallback is set.\n"
            f"Configured rules:\n{listing}"
        )


@dataclass(frozen=True)
class SpyNotFound:
    """No spy has been registered for a method.

    Attributes:
        kind: Discriminator for pattern matching. Always "SpyNotFound".
        method_name: The method that was looked up.
    """

    kind: Literal["SpyNotFound"] = "SpyNotFound"
    method_name: str = ""


@dataclass(frozen=True)
class UnknownTypeName:
    """A type name could not be resolved to a class.

    Attributes:
        kind: Discriminator for pattern matching. Always "UnknownTypeName".
        name: The name that failed to resolve.
        reason: Why resolution failed.
    """

    kind: Literal["UnknownTypeName"] = "UnknownTypeName"
    name: str = ""
    reason: str = ""


__all__ = [
    "MockSpyError",
    "NullArgumentError",
    "SpyNotFound",
    "UnknownTypeName",
    "UnresolvedCallError",
]

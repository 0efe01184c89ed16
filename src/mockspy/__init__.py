"""
mockspy - test doubles that record calls and resolve configured behaviours.

A ``Mock`` stands in for an abstract contract. Calls on its stand-in object
are routed to per-method ``MethodSpy`` instances, which record the
arguments and answer with a configured return value or exception.

Example:
    >>> from mockspy import Mock, Params, any_arg
    >>>
    >>> mock = Mock.for_contract(PaymentGateway)
    >>> charge = mock.spy_on("charge")
    >>> charge.when_called_with("acct-1", any_arg()).then_return("ok")
    >>> charge.raises(PaymentDeclined("unknown account"))
    >>>
    >>> checkout(mock.stand_in)
    >>>
    >>> assert charge.has_been_last_called_with(Params.of("acct-1", 25))
"""

from __future__ import annotations

# Assertion helpers
from mockspy.assertions import (
    assert_called,
    assert_called_times,
    assert_called_with,
    assert_last_called_with,
    assert_not_called,
)

# Configuration
from mockspy.config import MockConfig

# Errors
from mockspy.errors import (
    MockSpyError,
    NullArgumentError,
    SpyNotFound,
    UnknownTypeName,
    UnresolvedCallError,
)

# Matchers
from mockspy.matchers import (
    AnyArg,
    ArgumentMatcher,
    Equals,
    Satisfies,
    StructuralEquals,
    TypeMatches,
    any_arg,
    equals,
    satisfies,
    structural_equals,
    type_matches,
)

# Dispatch
from mockspy.mock import Mock
from mockspy.params import Matched, Params, RawValue
from mockspy.result import Failure, Result, Success
from mockspy.spy import MethodSpy, ParameterizedCall, StubBuilder
from mockspy.standin import DispatchSink, create_stand_in
from mockspy.typeinfo import TypeDescriptor, TypeRegistry, default_registry


__all__ = [
    # Dispatch
    "Mock",
    "MethodSpy",
    "ParameterizedCall",
    "StubBuilder",
    "DispatchSink",
    "create_stand_in",
    # Params and matchers
    "Params",
    "RawValue",
    "Matched",
    "ArgumentMatcher",
    "AnyArg",
    "Equals",
    "StructuralEquals",
    "TypeMatches",
    "Satisfies",
    "any_arg",
    "equals",
    "structural_equals",
    "type_matches",
    "satisfies",
    # Types
    "TypeDescriptor",
    "TypeRegistry",
    "default_registry",
    # Configuration
    "MockConfig",
    # Results and errors
    "Result",
    "Success",
    "Failure",
    "MockSpyError",
    "NullArgumentError",
    "UnresolvedCallError",
    "SpyNotFound",
    "UnknownTypeName",
    # Assertions
    "assert_called",
    "assert_not_called",
    "assert_called_with",
    "assert_last_called_with",
    "assert_called_times",
]

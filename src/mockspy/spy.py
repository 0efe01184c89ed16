"""
MethodSpy - per-method call recorder and response resolver.

Each intercepted call is resolved in this order:

    1. The argument tuple is appended to the call log, unconditionally.
    2. A spy with no rules and no fallback returns ``None`` (unless the
       owning Mock is strict).
    3. Rules are scanned in registration order; the first whose Params
       matches decides the outcome. Specificity plays no part.
    4. Otherwise the fallback decides: return a value, raise an error,
       or raise ``UnresolvedCallError`` when there is none.

Outcomes and the fallback are closed unions of frozen dataclasses, so the
"return" and "raise" settings can never both be active.

Example:
    >>> spy = MethodSpy("add").when_called_with(1, 2).then_return(3)
    >>> spy.call((1, 2))
    3
    >>> spy.returns(0).call((4, 5))
    0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Literal, Sequence, assert_never

from mockspy.config import DEFAULT_CONFIG, MockConfig
from mockspy.errors import NullArgumentError, UnresolvedCallError
from mockspy.params import Params


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Returns:
    """Resolve the call by returning ``value``."""

    value: object
    kind: Literal["Returns"] = "Returns"


@dataclass(frozen=True)
class Raises:
    """Resolve the call by raising ``error`` (the same object every time)."""

    error: BaseException
    kind: Literal["Raises"] = "Raises"


@dataclass(frozen=True)
class NoFallback:
    """No spy-wide default configured."""

    kind: Literal["NoFallback"] = "NoFallback"


Outcome = Returns | Raises
Fallback = NoFallback | Returns | Raises


@dataclass(frozen=True)
class ParameterizedCall:
    """One ``when_called_with`` rule: a Params paired with its outcome."""

    params: Params
    outcome: Outcome = Returns(value=None)

    def describe(self) -> str:
        match self.outcome:
            case Returns(value=value):
                action = f"then_return({value!r})"
            case Raises(error=error):
                action = f"then_raise({error!r})"
            case unreachable:
                assert_never(unreachable)
        return f"when_called_with{self.params} -> {action}"


def _resolve(outcome: Outcome) -> object:
    match outcome:
        case Returns(value=value):
            return value
        case Raises(error=error):
            raise error
        case unreachable:
            assert_never(unreachable)


class StubBuilder:
    """Completes the rule registered by ``MethodSpy.when_called_with``.

    Calling ``then_return`` / ``then_raise`` more than once replaces the
    outcome; the rule keeps its original position in evaluation order.
    """

    def __init__(self, spy: MethodSpy, index: int) -> None:
        self._spy = spy
        self._index = index

    def then_return(self, value: object) -> MethodSpy:
        self._spy._set_outcome(self._index, Returns(value=value))
        return self._spy

    def then_raise(self, error: BaseException) -> MethodSpy:
        self._spy._set_outcome(self._index, Raises(error=error))
        return self._spy


class MethodSpy:
    """Configured behaviours and call history for one method.

    Attributes:
        method_name: Name of the spied method.
    """

    def __init__(self, method_name: str, config: MockConfig = DEFAULT_CONFIG) -> None:
        self.method_name = method_name
        self._config = config
        self._rules: list[ParameterizedCall] = []
        self._fallback: Fallback = NoFallback()
        self._calls: list[tuple[object, ...]] = []

    @property
    def _target(self) -> str:
        label = self._config.label
        return f"{label}.{self.method_name}" if label else self.method_name

    # ========== Configuration ==========

    def returns(self, value: object) -> MethodSpy:
        """Return ``value`` from every call no rule matches."""
        self._fallback = Returns(value=value)
        return self

    def raises(self, error: BaseException) -> MethodSpy:
        """Raise ``error`` from every call no rule matches."""
        self._fallback = Raises(error=error)
        return self

    def when_called_with(self, *args: object) -> StubBuilder:
        """Register a rule for calls matching ``args``.

        ``args`` is either a single ``Params`` or positional values and
        matchers (values are compared with ``Equals``). The rule returns
        ``None`` until ``then_return`` / ``then_raise`` is called on the
        returned builder.
        """
        match args:
            case (Params() as params,):
                rule_params = params.copy()
            case _:
                rule_params = Params.of(*args)
        self._rules.append(ParameterizedCall(params=rule_params))
        return StubBuilder(self, len(self._rules) - 1)

    def _set_outcome(self, index: int, outcome: Outcome) -> None:
        self._rules[index] = replace(self._rules[index], outcome=outcome)

    @property
    def rules(self) -> tuple[ParameterizedCall, ...]:
        return tuple(self._rules)

    @property
    def fallback(self) -> Fallback:
        return self._fallback

    # ========== Resolution ==========

    def call(self, args: Sequence[object] = ()) -> object:
        """Record one invocation and resolve its outcome.

        Raises:
            BaseException: The configured error of the matching rule or fallback.
            UnresolvedCallError: No rule matched and no fallback is set.
        """
        snapshot = tuple(args)
        self._calls.append(snapshot)
        logger.debug("%s called with %r (call #%d)", self._target, list(snapshot), len(self._calls))

        if self._is_unconfigured() and not self._config.strict:
            return None

        rule = next((rule for rule in self._rules if rule.params.matches(snapshot)), None)
        if rule is not None:
            return _resolve(rule.outcome)

        match self._fallback:
            case Returns() | Raises() as outcome:
                return _resolve(outcome)
            case NoFallback():
                raise UnresolvedCallError(
                    self.method_name,
                    snapshot,
                    [rule.describe() for rule in self._rules],
                    label=self._config.label,
                )
            case unreachable:
                assert_never(unreachable)

    def _is_unconfigured(self) -> bool:
        match self._fallback:
            case NoFallback():
                return not self._rules
            case _:
                return False

    # ========== Call log queries ==========

    @property
    def calls(self) -> tuple[tuple[object, ...], ...]:
        """Recorded argument tuples, oldest first."""
        return tuple(self._calls)

    @property
    def call_count(self) -> int:
        return len(self._calls)

    def has_been_called(self) -> bool:
        return bool(self._calls)

    def has_been_called_with(self, params: Params | None) -> bool:
        """True iff any recorded call matches ``params``."""
        if params is None:
            raise NullArgumentError("params")
        return any(params.matches(call) for call in self._calls)

    def has_been_last_called_with(self, params: Params | None) -> bool:
        """True iff the most recent call matches ``params``."""
        if params is None:
            raise NullArgumentError("params")
        return bool(self._calls) and params.matches(self._calls[-1])

    def has_been_called_times(self, times: int) -> bool:
        return len(self._calls) == times

    def get_call_log_params(self) -> list[Params]:
        """Call history as Equals-based Params, most recent first."""
        return [Params.of_list(call) for call in reversed(self._calls)]

    def __repr__(self) -> str:
        return (
            f"MethodSpy({self._target!r}, calls={len(self._calls)}, "
            f"rules={len(self._rules)}, fallback={self._fallback.kind})"
        )


__all__ = [
    "Fallback",
    "MethodSpy",
    "NoFallback",
    "Outcome",
    "ParameterizedCall",
    "Raises",
    "Returns",
    "StubBuilder",
]

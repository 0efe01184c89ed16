"""
Mock - dispatch router between a stand-in object and its method spies.

Every call made on the stand-in arrives at ``Mock.dispatch``. Methods nobody
called ``spy_on`` for are inert: they return ``None`` and record nothing.
Once spied on, the method's ``MethodSpy`` records and resolves every call.

Example:
    >>> mock = Mock.for_contract(Calculator)
    >>> add = mock.spy_on("add").when_called_with(1, 2).then_return(3)
    >>> calculator = mock.stand_in
    >>> calculator.add(1, 2)
    3
    >>> add.has_been_called_times(1)
    True
"""

from __future__ import annotations

import logging
from typing import Generic, Sequence, TypeVar

from mockspy.config import DEFAULT_CONFIG, MockConfig
from mockspy.errors import SpyNotFound
from mockspy.result import Failure, Result, Success
from mockspy.spy import MethodSpy
from mockspy.standin import StandInFactory, create_stand_in


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Mock(Generic[T]):
    """Owns a stand-in object and the spies of its methods.

    Attributes:
        config: Settings shared with every spy created by this mock.
    """

    def __init__(self, config: MockConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._spies: dict[str, MethodSpy] = {}
        self._stand_in: T | None = None

    @classmethod
    def for_contract(
        cls,
        contract: type[T],
        *,
        config: MockConfig | None = None,
        factory: StandInFactory = create_stand_in,
    ) -> Mock[T]:
        """Create a mock whose stand-in implements ``contract``.

        Args:
            contract: Class, ABC or Protocol to stand in for.
            config: Mock settings; an empty label is replaced by the
                contract's qualified name.
            factory: Builds the stand-in and wires it to ``dispatch``.
        """
        resolved = config or DEFAULT_CONFIG
        if not resolved.label:
            resolved = resolved.model_copy(update={"label": contract.__qualname__})
        mock: Mock[T] = cls(resolved)
        mock._stand_in = factory(contract, mock)  # type: ignore[assignment]
        logger.debug("Created mock for %s.%s", contract.__module__, contract.__qualname__)
        return mock

    @property
    def stand_in(self) -> T:
        """The object to hand to the code under test.

        Raises:
            RuntimeError: If this mock was created without a contract.
        """
        match self._stand_in:
            case None:
                raise RuntimeError("Mock was created without a contract; use Mock.for_contract")
            case stand_in:
                return stand_in

    def dispatch(self, method_name: str, args: Sequence[object]) -> object:
        """Route one intercepted call to its spy, or ignore it."""
        spy = self._spies.get(method_name)
        if spy is None:
            logger.debug("Ignoring call to unspied method %s", self._target(method_name))
            return None
        return spy.call(args)

    def spy_on(self, method_name: str) -> MethodSpy:
        """Return the spy for ``method_name``, creating it on first use."""
        spy = self._spies.get(method_name)
        if spy is None:
            spy = MethodSpy(method_name, self.config)
            self._spies[method_name] = spy
            logger.debug("Spying on %s", self._target(method_name))
        return spy

    def get_spy(self, method_name: str) -> MethodSpy | None:
        """Return the spy for ``method_name`` without creating one."""
        return self._spies.get(method_name)

    def lookup_spy(self, method_name: str) -> Result[MethodSpy, SpyNotFound]:
        """Result-returning variant of ``get_spy``."""
        spy = self._spies.get(method_name)
        match spy:
            case MethodSpy():
                return Success(spy)
            case _:
                return Failure(SpyNotFound(method_name=method_name))

    def spied_methods(self) -> tuple[str, ...]:
        """Names of spied methods in the order they were first spied on."""
        return tuple(self._spies)

    def _target(self, method_name: str) -> str:
        label = self.config.label
        return f"{label}.{method_name}" if label else method_name

    def __repr__(self) -> str:
        return f"Mock(label={self.config.label!r}, spies={list(self._spies)!r})"


__all__ = ["Mock"]

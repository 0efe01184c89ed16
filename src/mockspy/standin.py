"""
Default stand-in factory: builds an object implementing a contract whose
every public method funnels into a ``DispatchSink``.

The stand-in is an instance of a dynamically created subclass of the
contract, so ``isinstance(stand_in, Contract)`` holds and abstract methods are
satisfied. The contract's ``__init__`` is never run.

Arguments are normalised against the contract method's signature before
dispatch, so ``repo.save(1, flush=True)`` and ``repo.save(1, True)`` record the
same argument tuple:

    - positional and positional-or-keyword parameters, in declaration order,
    - ``*args`` expanded in place,
    - keyword-only parameters, in declaration order,
    - ``**kwargs`` appended as a single dict.

Parameters that were not supplied (and rely on their defaults) are not
recorded.

Names starting with an underscore and properties are not intercepted. On a
concrete contract they run the real implementation against an instance whose
``__init__`` never ran, so they should not be relied on from code under test.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Protocol, TypeVar


T = TypeVar("T")


class DispatchSink(Protocol):
    """Receiver of every call made on a stand-in."""

    def dispatch(self, method_name: str, args: tuple[object, ...]) -> object: ...


StandInFactory = Callable[[type[Any], DispatchSink], object]


def _public_methods(contract: type) -> dict[str, object]:
    methods: dict[str, object] = {}
    for klass in reversed(contract.__mro__):
        if klass is object:
            continue
        for name, attribute in vars(klass).items():
            if name.startswith("_"):
                continue
            match attribute:
                case staticmethod() | classmethod():
                    methods[name] = attribute
                case _ if inspect.isfunction(attribute):
                    methods[name] = attribute
                case _:
                    # Properties and plain attributes shadow inherited methods.
                    methods.pop(name, None)
    return methods


def _positional_args(
    signature: inspect.Signature, bound: inspect.BoundArguments
) -> tuple[object, ...]:
    collected: list[object] = []
    keyword_only: list[object] = []
    var_keyword: list[object] = []
    for name, value in bound.arguments.items():
        match signature.parameters[name].kind:
            case inspect.Parameter.VAR_POSITIONAL:
                collected.extend(value)
            case inspect.Parameter.KEYWORD_ONLY:
                keyword_only.append(value)
            case inspect.Parameter.VAR_KEYWORD:
                var_keyword.append(dict(value))
            case _:
                collected.append(value)
    return (*collected, *keyword_only, *var_keyword)


def _forwarder(name: str, attribute: object, sink: DispatchSink) -> object:
    match attribute:
        case staticmethod() | classmethod():
            function = attribute.__func__
        case _:
            function = attribute

    signature = inspect.signature(function)
    is_bound = not isinstance(attribute, staticmethod)
    if is_bound:
        # Drop self / cls; the stand-in itself is never recorded.
        signature = signature.replace(parameters=list(signature.parameters.values())[1:])

    def normalise(args: tuple[object, ...], kwargs: dict[str, object]) -> tuple[object, ...]:
        return _positional_args(signature, signature.bind(*args, **kwargs))

    if inspect.iscoroutinefunction(function):

        async def forward_async(*args: object, **kwargs: object) -> object:
            return sink.dispatch(name, normalise(args[1:] if is_bound else args, kwargs))

        wrapped: Callable[..., object] = forward_async
    else:

        def forward(*args: object, **kwargs: object) -> object:
            return sink.dispatch(name, normalise(args[1:] if is_bound else args, kwargs))

        wrapped = forward

    functools.update_wrapper(wrapped, function)
    # update_wrapper copies the abstract flag; the override is concrete.
    wrapped.__isabstractmethod__ = False  # type: ignore[attr-defined]
    match attribute:
        case staticmethod():
            return staticmethod(wrapped)
        case classmethod():
            return classmethod(wrapped)
        case _:
            return wrapped


def create_stand_in(contract: type[T], sink: DispatchSink) -> T:
    """Create an object implementing ``contract`` that forwards calls to ``sink``.

    Raises:
        TypeError: If ``contract`` is not a class.
    """
    if not isinstance(contract, type):
        raise TypeError(f"contract must be a class, got {type(contract).__name__}")

    namespace: dict[str, object] = {
        name: _forwarder(name, attribute, sink)
        for name, attribute in _public_methods(contract).items()
    }
    namespace["__repr__"] = lambda self: f"<stand-in for {contract.__qualname__}>"
    stand_in_class = type(f"StandIn{contract.__name__}", (contract,), namespace)
    # Anything left abstract (e.g. private abstract hooks) must not block creation.
    stand_in_class.__abstractmethods__ = frozenset()
    instance: T = object.__new__(stand_in_class)
    return instance


__all__ = ["DispatchSink", "StandInFactory", "create_stand_in"]

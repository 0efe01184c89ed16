"""Canonical structured-text form used for structural argument comparison.

Values are first reduced to JSON-native structures, then written with sorted
keys and compact separators. Shapes JSON cannot express directly are tagged
so they stay distinct from look-alikes:

    - sets and frozensets: ``{"__set__": [...]}`` with members in canonical order,
    - bytes and bytearrays: ``{"__bytes__": "<hex>"}``,
    - mappings with any non-string key: ``{"__mapping__": [[key, value], ...]}``
      ordered by key,
    - a container reached again while it is being expanded:
      ``{"__cycle__": "<qualified type name>"}``,
    - plain objects: their attributes plus ``"__type__"``.

Dataclasses and pydantic models serialize as their fields, without a type tag.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from mockspy.typeinfo import qualified_name


def _text(value: object) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _prepare(value: object, active: frozenset[int]) -> object:
    match value:
        case None | bool() | int() | float() | str():
            return value
        case bytes() | bytearray():
            return {"__bytes__": bytes(value).hex()}

    if id(value) in active:
        return {"__cycle__": qualified_name(type(value))}
    active = active | {id(value)}

    match value:
        case Mapping():
            items = [(_prepare(key, active), _prepare(item, active)) for key, item in value.items()]
            if all(isinstance(key, str) for key, _ in items):
                return dict(items)
            pairs = sorted(([key, item] for key, item in items), key=lambda pair: _text(pair[0]))
            return {"__mapping__": pairs}
        case set() | frozenset():
            return {"__set__": sorted((_prepare(member, active) for member in value), key=_text)}
        case list() | tuple():
            return [_prepare(item, active) for item in value]
        case BaseModel():
            return {
                name: _prepare(getattr(value, name), active) for name in type(value).model_fields
            }
        case _ if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {
                field.name: _prepare(getattr(value, field.name), active)
                for field in dataclasses.fields(value)
            }

    try:
        return to_jsonable_python(value)
    except PydanticSerializationError:
        pass

    state = getattr(value, "__dict__", None)
    match state:
        case dict():
            expanded = {str(key): _prepare(item, active) for key, item in state.items()}
            return {"__type__": qualified_name(type(value)), **expanded}
        case _:
            return repr(value)


def canonical_dumps(value: object) -> str:
    """Serialize ``value`` to canonical JSON text.

    Equal values produce equal text regardless of mapping or set ordering.
    Datetimes, decimals, UUIDs, enums, paths and other leaf types are
    converted by pydantic-core. Objects it does not know are expanded through
    ``vars()`` or fall back to ``repr``. Self-referencing structures are
    serialized with a cycle marker instead of raising.
    """
    return _text(_prepare(value, frozenset()))


__all__ = ["canonical_dumps"]

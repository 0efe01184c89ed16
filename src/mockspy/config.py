"""Configuration for Mock instances."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MockConfig(BaseModel):
    """Behaviour switches shared by a Mock and all of its spies.

    Attributes:
        label: Name used in log lines and error messages. ``Mock.for_contract``
            fills it with the contract's qualified name when left empty.
        strict: When set, a spied method with no rules and no fallback raises
            ``UnresolvedCallError`` instead of returning ``None``.
    """

    label: str = ""
    strict: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_CONFIG = MockConfig()


__all__ = ["DEFAULT_CONFIG", "MockConfig"]

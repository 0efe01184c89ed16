"""Tests for MockConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mockspy import Mock, MockConfig
from tests.helpers import Calculator


def test_defaults() -> None:
    """A default config is unlabelled and tolerant."""
    config = MockConfig()

    assert config.label == ""
    assert config.strict is False


def test_frozen() -> None:
    """Configs cannot be mutated after construction."""
    config = MockConfig()

    with pytest.raises(ValidationError):
        config.strict = True  # type: ignore[misc]


def test_unknown_field_rejected() -> None:
    """Typos in field names are errors."""
    with pytest.raises(ValidationError, match="colour"):
        MockConfig(colour="red")  # type: ignore[call-arg]


def test_invalid_value_rejected() -> None:
    """Field values are validated."""
    with pytest.raises(ValidationError) as exc_info:
        MockConfig(strict="not-a-bool")  # type: ignore[arg-type]

    assert exc_info.value.error_count() == 1


def test_for_contract_does_not_mutate_caller_config() -> None:
    """Labelling a contract mock copies the config."""
    config = MockConfig(strict=True)

    mock = Mock.for_contract(Calculator, config=config)

    assert config.label == ""
    assert mock.config == MockConfig(strict=True, label="Calculator")

"""Tests for the type registry."""

from __future__ import annotations

from collections import OrderedDict

import pytest
from pydantic import ValidationError

from mockspy import TypeDescriptor, TypeRegistry
from mockspy.typeinfo import is_assignable, qualified_name, type_names
from tests.helpers import Circle, Shape, Unrelated, expect_failure, expect_success


class TestTypeNames:
    """Tests for runtime type names."""

    def test_all_spellings(self) -> None:
        """Simple, qualified and module-qualified names are produced."""
        assert type_names(Circle) == frozenset({"Circle", "tests.helpers.contracts.Circle"})

    def test_nested_class(self) -> None:
        """Nested classes keep their qualified name."""

        class Outer:
            class Inner:
                pass

        names = TypeRegistry().runtime_type_names(Outer.Inner())

        assert "Inner" in names
        assert any(name.endswith("Outer.Inner") for name in names)

    def test_qualified_name(self) -> None:
        """Builtins are qualified with their module."""
        assert qualified_name(int) == "builtins.int"


class TestResolve:
    """Tests for name resolution."""

    def test_registered_name(self) -> None:
        """Registered classes resolve under every spelling."""
        registry = TypeRegistry()
        registry.register(Shape)

        assert expect_success(registry.resolve("Shape")) is Shape
        assert expect_success(registry.resolve("tests.helpers.contracts.Shape")) is Shape

    def test_alias(self) -> None:
        """An explicit name replaces the default spellings."""
        registry = TypeRegistry()
        registry.register(Shape, name="geometry.Shape")

        assert expect_success(registry.resolve("geometry.Shape")) is Shape
        assert expect_failure(registry.resolve("Shape")).name == "Shape"

    def test_builtin(self) -> None:
        """Builtin types resolve by bare name."""
        assert expect_success(TypeRegistry().resolve("dict")) is dict

    def test_builtin_function_is_not_a_type(self) -> None:
        """Non-class builtins do not resolve."""
        error = expect_failure(TypeRegistry().resolve("print"))

        assert error.kind == "UnknownTypeName"

    def test_dotted_import_path(self) -> None:
        """Importable paths resolve without registration."""
        assert expect_success(TypeRegistry().resolve("collections.OrderedDict")) is OrderedDict

    def test_missing_attribute(self) -> None:
        """A missing attribute is reported."""
        error = expect_failure(TypeRegistry().resolve("collections.NoSuchThing"))

        assert "NoSuchThing" in error.reason

    def test_non_class_attribute(self) -> None:
        """Attributes that are not classes are rejected."""
        error = expect_failure(TypeRegistry().resolve("collections.namedtuple"))

        assert error.reason == "not a class"

    def test_unknown_module(self) -> None:
        """Unimportable paths fail cleanly."""
        error = expect_failure(TypeRegistry().resolve("no_such_module_xyz.Thing"))

        assert error.name == "no_such_module_xyz.Thing"

    def test_descriptor(self) -> None:
        """Descriptors resolve through their qualified name."""
        descriptor = TypeDescriptor.of(OrderedDict)

        assert descriptor.qualified_name == "collections.OrderedDict"
        assert expect_success(TypeRegistry().describe(descriptor)) is OrderedDict


class TestTypeDescriptor:
    """Tests for the descriptor model."""

    def test_bare_name(self) -> None:
        """A descriptor without module is just its name."""
        assert TypeDescriptor(name="int").qualified_name == "int"

    def test_empty_name_rejected(self) -> None:
        """Names must not be empty."""
        with pytest.raises(ValidationError):
            TypeDescriptor(name="")

    def test_frozen(self) -> None:
        """Descriptors are immutable."""
        descriptor = TypeDescriptor(name="int")

        with pytest.raises(ValidationError):
            descriptor.name = "str"  # type: ignore[misc]


class TestIsAssignable:
    """Tests for assignability."""

    def test_subclass(self) -> None:
        """Subclasses are assignable to their base."""
        assert is_assignable(Shape, Circle)
        assert not is_assignable(Circle, Shape)
        assert not is_assignable(Shape, Unrelated)

    def test_same_class(self) -> None:
        """A class is assignable to itself."""
        assert is_assignable(Circle, Circle)

import typing
from typing import Protocol, runtime_checkable

import pytest
import typing_extensions

from typedlist import ElementKind, ElementType, describe_kind, kind_of


class Animal:
    pass


class Dog(Animal):
    pass


class Label(str):
    pass


@runtime_checkable
class Named(Protocol):
    name: str


class Unchecked(Protocol):
    def run(self) -> None: ...


class Person:
    def __init__(self, name: str) -> None:
        self.name = name


type Price = float
Score = typing_extensions.TypeAliasType("Score", int)


def test_kind_names_resolve_to_primitive_kinds() -> None:
    assert ElementType.of("string").kind is ElementKind.STRING
    assert ElementType.of("integer").kind is ElementKind.INTEGER
    assert ElementType.of("float").kind is ElementKind.FLOAT
    assert ElementType.of("double").kind is ElementKind.FLOAT
    assert ElementType.of("boolean").kind is ElementKind.BOOLEAN
    assert ElementType.of("array").kind is ElementKind.ARRAY


def test_short_aliases_and_case_are_accepted() -> None:
    assert ElementType.of("str") == ElementType.of("string")
    assert ElementType.of("int") == ElementType.of("integer")
    assert ElementType.of("bool") == ElementType.of("boolean")
    assert ElementType.of("list") == ElementType.of("array")
    assert ElementType.of("Double") == ElementType.of("float")


def test_float_aliases_report_canonical_name() -> None:
    assert str(ElementType.of("float")) == "float"
    assert str(ElementType.of("double")) == "float"
    assert str(ElementType.of(float)) == "float"


def test_builtin_classes_resolve_to_primitive_kinds() -> None:
    assert ElementType.of(str) == ElementType.of("string")
    assert ElementType.of(int) == ElementType.of("integer")
    assert ElementType.of(float) == ElementType.of("double")
    assert ElementType.of(bool) == ElementType.of("boolean")
    assert ElementType.of(list) == ElementType.of("array")


def test_other_classes_resolve_to_named_types() -> None:
    element_type = ElementType.of(Animal)

    assert element_type.kind is ElementKind.OBJECT
    assert element_type.origin is Animal
    assert str(element_type) == "Animal"


def test_generic_and_alias_descriptors_resolve_through_origin() -> None:
    assert ElementType.of(list[int]) == ElementType.of("array")
    assert ElementType.of(Price) == ElementType.of("float")
    assert ElementType.of(Score) == ElementType.of("integer")


def test_existing_descriptor_is_reused() -> None:
    element_type = ElementType.of("string")

    assert ElementType.of(element_type) is element_type


def test_invalid_descriptors_are_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown element type 'text'"):
        ElementType.of("text")

    with pytest.raises(TypeError):
        ElementType.of(42)  # pyright: ignore[reportArgumentType]

    with pytest.raises(TypeError):
        ElementType.of(int | str)  # pyright: ignore[reportArgumentType]

    with pytest.raises(TypeError, match="runtime_checkable"):
        ElementType.of(Unchecked)


def test_primitive_kinds_require_exact_kind() -> None:
    integers = ElementType.of("integer")
    floats = ElementType.of("double")

    assert integers.accepts(1)
    assert not integers.accepts(1.0)
    assert not integers.accepts(True)
    assert not integers.accepts("1")
    assert floats.accepts(1.5)
    assert not floats.accepts(1)
    assert ElementType.of("boolean").accepts(False)
    assert not ElementType.of("boolean").accepts(0)
    assert ElementType.of("array").accepts(["hello", 1, 1.5])
    assert not ElementType.of("array").accepts(("hello",))
    assert not ElementType.of("string").accepts(Label("x"))


def test_named_types_accept_subtypes() -> None:
    animals = ElementType.of(Animal)

    assert animals.accepts(Animal())
    assert animals.accepts(Dog())
    assert not animals.accepts("Animal")
    assert not ElementType.of(Dog).accepts(Animal())
    assert ElementType.of(Label).accepts(Label("x"))


def test_runtime_protocols_check_capabilities() -> None:
    named = ElementType.of(Named)

    assert named.accepts(Person("Ann"))
    assert not named.accepts(Animal())


def test_kind_of_runtime_values() -> None:
    assert kind_of("a") is ElementKind.STRING
    assert kind_of(1) is ElementKind.INTEGER
    assert kind_of(1.0) is ElementKind.FLOAT
    assert kind_of(True) is ElementKind.BOOLEAN
    assert kind_of([]) is ElementKind.ARRAY
    assert kind_of(None) is ElementKind.OBJECT
    assert describe_kind(2.5) == "float"
    assert describe_kind(Dog()) == "Dog"
    assert describe_kind(None) == "NoneType"


def test_element_type_is_immutable() -> None:
    element_type = ElementType.of("string")

    with pytest.raises(AttributeError):
        element_type.kind = ElementKind.INTEGER  # pyright: ignore[reportAttributeAccessIssue]

    with pytest.raises(AttributeError):
        del element_type.origin


def test_element_type_equality_and_hash() -> None:
    assert ElementType.of("float") == ElementType.of("double")
    assert hash(ElementType.of("float")) == hash(ElementType.of("double"))
    assert ElementType.of(Animal) != ElementType.of(Dog)
    assert ElementType.of("string") != "string"
    assert repr(ElementType.of(Animal)) == "ElementType(Animal)"


def test_any_descriptor_accepts_every_value() -> None:
    anything = ElementType.of(typing.Any)

    assert anything.kind is ElementKind.OBJECT
    assert anything.origin is object
    assert anything.accepts(1)
    assert anything.accepts(None)
    assert anything.accepts("text")


def test_annotated_descriptor_resolves_through_origin() -> None:
    assert ElementType.of(typing.Annotated[int, "positive"]) == ElementType.of("integer")
    assert ElementType.of(typing.Annotated[Animal, "pet"]) == ElementType.of(Animal)

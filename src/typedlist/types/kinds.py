import typing
from collections.abc import Mapping
from enum import StrEnum
from types import GenericAlias, UnionType
from typing import Any, Final, NoReturn, Self, final

import typing_extensions

__all__ = (
    "ElementKind",
    "ElementType",
    "ElementTypeDescriptor",
    "describe_kind",
    "kind_of",
)


class ElementKind(StrEnum):
    """
    Closed set of kinds an element type can denote.

    Every primitive kind is bound to exactly one runtime class. ``OBJECT``
    covers all remaining (named) types which are matched nominally.
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


_KIND_ALIASES: Final[Mapping[str, ElementKind]] = {
    "string": ElementKind.STRING,
    "str": ElementKind.STRING,
    "integer": ElementKind.INTEGER,
    "int": ElementKind.INTEGER,
    "float": ElementKind.FLOAT,
    "double": ElementKind.FLOAT,
    "boolean": ElementKind.BOOLEAN,
    "bool": ElementKind.BOOLEAN,
    "array": ElementKind.ARRAY,
    "list": ElementKind.ARRAY,
}

_PRIMITIVE_KINDS: Final[Mapping[type[Any], ElementKind]] = {
    str: ElementKind.STRING,
    int: ElementKind.INTEGER,
    float: ElementKind.FLOAT,
    bool: ElementKind.BOOLEAN,
    list: ElementKind.ARRAY,
}


def kind_of(
    value: Any,
    /,
) -> ElementKind:
    """
    Resolve the kind of a runtime value.

    Only the exact primitive classes resolve to primitive kinds, subclasses
    (including ``bool`` as a subclass of ``int``) resolve to ``OBJECT``.
    """
    return _PRIMITIVE_KINDS.get(type(value), ElementKind.OBJECT)


def describe_kind(
    value: Any,
    /,
) -> str:
    kind: ElementKind = kind_of(value)
    if kind is ElementKind.OBJECT:
        return type(value).__qualname__

    else:
        return kind.value


@final
class ElementType:
    """
    Immutable descriptor of the element type accepted by a list.

    Use ``ElementType.of`` to resolve any supported descriptor form:

    - kind names and their aliases, e.g. ``"string"``, ``"int"``, ``"double"``
    - classes, where ``str``, ``int``, ``float``, ``bool`` and ``list`` map to
      primitive kinds and every other class becomes a named object type
    - parametrized generics, resolved through their origin
    - ``type`` alias statements, resolved through their value

    Floating point aliases are folded into the single ``ElementKind.FLOAT``.
    """

    __slots__ = (
        "kind",
        "origin",
    )

    @classmethod
    def of(
        cls,
        descriptor: "ElementTypeDescriptor",
        /,
    ) -> Self:
        match descriptor:
            case ElementType():
                return descriptor

            case str() as name:
                if (kind := _KIND_ALIASES.get(name.strip().lower())) is not None:
                    return cls(kind)

                raise ValueError(f"Unknown element type '{name}'")

            case typing.TypeAliasType() | typing_extensions.TypeAliasType():
                return cls.of(descriptor.__value__)

            case UnionType():
                raise TypeError(f"Union element types are not supported: {descriptor}")

            case typing.Any | typing_extensions.Any:
                return cls(
                    ElementKind.OBJECT,
                    origin=object,
                )

            case _ if typing.get_origin(descriptor) in (
                typing.Annotated,
                typing_extensions.Annotated,
            ):
                # metadata of annotated types is ignored
                return cls.of(descriptor.__origin__)  # pyright: ignore[reportAttributeAccessIssue]

            case _ if isinstance(typing.get_origin(descriptor), type):
                # parameters of generic types are not enforced
                return cls.of(typing.get_origin(descriptor))

            case type() as origin:
                if (kind := _PRIMITIVE_KINDS.get(origin)) is not None:
                    return cls(kind)

                if getattr(origin, "_is_protocol", False) and not getattr(
                    origin, "_is_runtime_protocol", False
                ):
                    raise TypeError(
                        f"Protocol {origin.__qualname__} has to be runtime_checkable"
                        " to be used as an element type"
                    )

                return cls(
                    ElementKind.OBJECT,
                    origin=origin,
                )

            case other:
                raise TypeError(f"Unsupported element type descriptor: {other!r}")

    def __init__(
        self,
        kind: ElementKind,
        /,
        *,
        origin: type[Any] | None = None,
    ) -> None:
        assert (kind is ElementKind.OBJECT) == (origin is not None)  # nosec: B101

        self.kind: ElementKind
        object.__setattr__(
            self,
            "kind",
            kind,
        )
        self.origin: type[Any] | None
        object.__setattr__(
            self,
            "origin",
            origin,
        )

    @property
    def name(self) -> str:
        if self.origin is not None:
            return self.origin.__qualname__

        else:
            return self.kind.value

    def accepts(
        self,
        value: Any,
        /,
    ) -> bool:
        """
        Check if the value belongs to this element type.

        Named types accept instances of their subtypes, primitive kinds
        require an exact kind match without any numeric widening.
        """
        if self.origin is not None:
            return isinstance(value, self.origin)

        else:
            return kind_of(value) is self.kind

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, ElementType):
            return NotImplemented

        return self.kind is other.kind and self.origin is other.origin

    def __hash__(self) -> int:
        return hash((self.kind, self.origin))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ElementType({self.name})"

    def __setattr__(
        self,
        __name: str,
        __value: Any,
    ) -> NoReturn:
        raise AttributeError("ElementType can't be modified")

    def __delattr__(
        self,
        __name: str,
    ) -> NoReturn:
        raise AttributeError("ElementType can't be modified")


type ElementTypeDescriptor = (
    ElementType
    | str
    | type[Any]
    | GenericAlias
    | typing.TypeAliasType
    | typing_extensions.TypeAliasType
)

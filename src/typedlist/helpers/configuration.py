from typing import Any, NoReturn, Self, final

from typedlist.utils.env import getenv_bool

__all__ = ("ListConfiguration",)


@final
class ListConfiguration:
    """Behaviour switches of a typed list.

    Both switches enable the stricter variants of bulk operations, by default
    lists keep the permissive behaviour: bulk insertion commits values until
    the first rejected one and transform results are not type checked.

    Lists derived through export or apply share the configuration of their
    source list.

    Attributes:
        atomic_insert: Validate all values before committing a bulk insertion.
        checked_apply: Type check all transform results before committing them.

    Example:
        ```python
        strict = ListConfiguration(atomic_insert=True)
        numbers = TypedList("integer", configuration=strict)
        ```
    """

    __slots__ = (
        "atomic_insert",
        "checked_apply",
    )

    @classmethod
    def from_env(cls) -> Self:
        """Read switches from TYPEDLIST_ATOMIC_INSERT and TYPEDLIST_CHECKED_APPLY."""
        return cls(
            atomic_insert=getenv_bool("TYPEDLIST_ATOMIC_INSERT", False),
            checked_apply=getenv_bool("TYPEDLIST_CHECKED_APPLY", False),
        )

    def __init__(
        self,
        *,
        atomic_insert: bool = False,
        checked_apply: bool = False,
    ) -> None:
        self.atomic_insert: bool
        object.__setattr__(
            self,
            "atomic_insert",
            atomic_insert,
        )
        self.checked_apply: bool
        object.__setattr__(
            self,
            "checked_apply",
            checked_apply,
        )

    def updated(
        self,
        **changes: bool,
    ) -> Self:
        if unknown := changes.keys() - set(self.__slots__):
            raise AttributeError(
                f"Unknown {self.__class__.__qualname__} attributes: {', '.join(sorted(unknown))}"
            )

        return self.__class__(
            **{name: changes.get(name, getattr(self, name)) for name in self.__slots__},
        )

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, ListConfiguration):
            return NotImplemented

        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self) -> int:
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __repr__(self) -> str:
        attributes: str = ", ".join(f"{name}: {getattr(self, name)}" for name in self.__slots__)
        return f"{self.__class__.__name__}({attributes})"

    def __setattr__(
        self,
        name: str,
        value: Any,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be modified"
        )

    def __delattr__(
        self,
        name: str,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be deleted"
        )

    def __copy__(self) -> Self:
        return self  # immutable, no need to provide an actual copy

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self  # immutable, no need to provide an actual copy

from collections.abc import Callable, Iterable
from logging import Logger, getLogger
from typing import Any, Self, final

from typedlist.collection.cursor import ListCursor
from typedlist.helpers.configuration import ListConfiguration
from typedlist.types import (
    ElementType,
    ElementTypeDescriptor,
    IndexOutOfBounds,
    InvalidRange,
    RangeConstraint,
    TypeMismatch,
    describe_kind,
)

__all__ = ("TypedList",)

_logger: Logger = getLogger("typedlist")


@final
class TypedList[Element]:
    """
    Mutable sequence restricted to a single element type.

    The accepted type is fixed at construction and checked whenever a value
    is inserted or replaced, values of any other type are rejected with
    ``TypeMismatch``. Indices always cover ``[0, count() - 1]`` without gaps,
    removing an element shifts all following elements left.

    Floating point aliases ("float" and "double") denote the same kind and
    no implicit numeric conversion is performed, an integer list rejects
    floats and booleans and a float list rejects integers.

    Examples
    --------
    ```python
    names = TypedList[str]("string")
    names.add_multiple("hello", "world")
    names.get(1)  # "world"
    names.add(42)  # raises TypeMismatch
    ```
    """

    __slots__ = (
        "_accepted",
        "_configuration",
        "_elements",
    )

    @classmethod
    def of(
        cls,
        element_type: ElementTypeDescriptor,
        /,
        *values: Element,
        configuration: ListConfiguration | None = None,
    ) -> Self:
        """Create a list of the given type filled with values."""
        typed: Self = cls(
            element_type,
            configuration=configuration,
        )
        typed.add_all(values)
        return typed

    def __init__(
        self,
        element_type: ElementTypeDescriptor,
        /,
        *,
        configuration: ListConfiguration | None = None,
    ) -> None:
        self._accepted: ElementType = ElementType.of(element_type)
        self._configuration: ListConfiguration = (
            configuration if configuration is not None else ListConfiguration.from_env()
        )
        self._elements: list[Element] = []

    @property
    def accepted_type(self) -> ElementType:
        return self._accepted

    @property
    def configuration(self) -> ListConfiguration:
        return self._configuration

    def add(
        self,
        value: Element,
        /,
    ) -> None:
        self._check_type(value)
        self._elements.append(value)

    def add_all(
        self,
        values: Iterable[Element],
        /,
        *,
        atomic: bool | None = None,
    ) -> None:
        """
        Add all values in order.

        Values are added one by one, when one of them is rejected all values
        before it stay in the list. Use ``atomic=True`` (or the configuration
        ``atomic_insert`` switch) to validate every value before adding any.

        Raises
        ------
        TypeMismatch
            If any of the values is not of the accepted type
        """
        if self._configuration.atomic_insert if atomic is None else atomic:
            pending: list[Element] = list(values)
            for value in pending:
                self._check_type(value)

            self._elements.extend(pending)
            return

        committed: int = 0
        try:
            for value in values:
                self.add(value)
                committed += 1

        except TypeMismatch:
            _logger.debug(
                "Bulk insertion interrupted, %d element(s) were already added",
                committed,
            )
            raise

    def add_multiple(
        self,
        *values: Element,
    ) -> None:
        self.add_all(values)

    def get(
        self,
        index: int,
        /,
    ) -> Element:
        self._check_index(
            index,
            operation="get",
        )
        return self._elements[index]

    def set(
        self,
        index: int,
        value: Element,
        /,
    ) -> bool:
        self._check_index(
            index,
            operation="set",
        )
        self._check_type(value)
        self._elements[index] = value
        return True

    def remove_at(
        self,
        index: int,
        /,
    ) -> bool:
        self._check_index(
            index,
            operation="remove",
        )
        del self._elements[index]
        return True

    def remove(
        self,
        value: Any,
        /,
    ) -> bool:
        """Remove the first occurrence of value, returns False when there is none."""
        index: int = self.index_of(value)
        if index < 0:
            return False

        return self.remove_at(index)

    def remove_all(
        self,
        *values: Any,
    ) -> bool:
        """
        Remove one occurrence of each of the values.

        Returns True if at least one element was removed. Repeated values
        remove repeated occurrences.
        """
        removed: bool = False
        for value in values:
            if self.remove(value):
                removed = True

        return removed

    def clear(self) -> bool:
        self._elements.clear()
        return True

    def count(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return len(self._elements) == 0

    def last_index(self) -> int:
        """
        Index of the last element.

        NOTE: an empty list reports 0 as well, use ``is_empty`` to tell
        the cases apart.
        """
        return max(len(self._elements) - 1, 0)

    def contains(
        self,
        value: Any,
        /,
    ) -> bool:
        return self.index_of(value) >= 0

    def index_of(
        self,
        value: Any,
        /,
    ) -> int:
        """
        Index of the first element equal to value or -1 if there is none.

        Values which are not of the accepted type are never found,
        i.e. ``1.0`` is not found in an integer list.
        """
        if not self._accepted.accepts(value):
            return -1

        for index, element in enumerate(self._elements):
            if element == value:
                return index

        return -1

    def export(
        self,
        from_index: int,
        to_index: int,
        /,
    ) -> "TypedList[Element]":
        """
        Copy elements from from_index to to_index, both inclusive, into a new list.

        Raises
        ------
        InvalidRange
            If from_index is not less than to_index, from_index is not less
            than the last index or to_index is greater than the last index
        """
        last_index: int = self.last_index()
        if from_index >= to_index:
            raise self._invalid_range(
                "from_index should be less than to_index",
                from_index=from_index,
                to_index=to_index,
                constraint="order",
            )

        if from_index >= last_index:
            raise self._invalid_range(
                f"from_index should be less than the last index which is {last_index}",
                from_index=from_index,
                to_index=to_index,
                constraint="from_index",
            )

        if to_index > last_index:
            raise self._invalid_range(
                f"to_index should not be greater than the last index which is {last_index}",
                from_index=from_index,
                to_index=to_index,
                constraint="to_index",
            )

        return self._derived(self._elements[from_index : to_index + 1])

    def to_list(self) -> list[Element]:
        return list(self._elements)

    def apply(
        self,
        transform: Callable[[Element], Any],
        /,
        copy: bool = False,
        *,
        checked: bool | None = None,
    ) -> "TypedList[Any]":
        """
        Replace each element with the result of transform.

        Parameters
        ----------
        transform : Callable[[Element], Any]
            Function called exactly once per element, in index order.
        copy : bool, default=False
            When True results are placed in a new list and this list is left
            untouched, otherwise elements are replaced in place.
        checked : bool | None, default=None
            When True all results are computed and type checked before any of
            them is used. Defaults to the configuration ``checked_apply`` switch.

        Returns
        -------
        TypedList[Any]
            The new list when copying, this list otherwise

        Notes
        -----
        Unchecked results are not validated against the accepted type. Errors
        raised by the transform propagate and, when transforming in place,
        leave already transformed elements replaced.
        """
        if self._configuration.checked_apply if checked is None else checked:
            results: list[Any] = [transform(element) for element in self._elements]
            for result in results:
                self._check_type(result)

            if copy:
                return self._derived(results)

            self._elements[:] = results
            return self

        if copy:
            return self._derived([transform(element) for element in self._elements])

        for index, element in enumerate(self._elements):
            self._elements[index] = transform(element)

        return self

    def cursor(self) -> ListCursor[Element]:
        return ListCursor(self._elements)

    def _derived(
        self,
        elements: list[Any],
        /,
    ) -> "TypedList[Any]":
        derived: TypedList[Any] = TypedList(
            self._accepted,
            configuration=self._configuration,
        )
        derived._elements = elements
        return derived

    def _check_type(
        self,
        value: Any,
        /,
    ) -> None:
        if self._accepted.accepts(value):
            return

        actual: str = describe_kind(value)
        _logger.debug(
            "Rejected element of type %s for list of %s",
            actual,
            self._accepted,
        )
        raise TypeMismatch(
            expected=self._accepted,
            actual=actual,
        )

    def _check_index(
        self,
        index: int,
        /,
        *,
        operation: str,
    ) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(
                f"{self.__class__.__qualname__} indices must be integers,"
                f" not {type(index).__qualname__}"
            )

        if 0 <= index < len(self._elements):
            return

        _logger.debug(
            "Rejected %s at index %d for list of size %d",
            operation,
            index,
            len(self._elements),
        )
        raise IndexOutOfBounds(
            index=index,
            size=len(self._elements),
            operation=operation,
        )

    def _invalid_range(
        self,
        message: str,
        /,
        *,
        from_index: int,
        to_index: int,
        constraint: RangeConstraint,
    ) -> InvalidRange:
        _logger.debug(
            "Rejected export of [%d, %d]: %s",
            from_index,
            to_index,
            message,
        )
        return InvalidRange(
            message,
            from_index=from_index,
            to_index=to_index,
            constraint=constraint,
        )

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> ListCursor[Element]:
        return self.cursor()

    def __contains__(
        self,
        value: Any,
    ) -> bool:
        return self.contains(value)

    def __getitem__(
        self,
        index: int,
    ) -> Element:
        return self.get(index)

    def __setitem__(
        self,
        index: int,
        value: Element,
    ) -> None:
        self.set(index, value)

    def __delitem__(
        self,
        index: int,
    ) -> None:
        self.remove_at(index)

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, TypedList):
            return NotImplemented

        return self._accepted == other._accepted and self._elements == other._elements  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}[{self._accepted}]({self._elements!r})"

from enum import StrEnum
from typing import ClassVar, Literal

from typedlist.types.kinds import ElementType

__all__ = (
    "ErrorKind",
    "IndexOutOfBounds",
    "InvalidRange",
    "RangeConstraint",
    "TypeMismatch",
    "TypedListError",
)


class ErrorKind(StrEnum):
    TYPE_MISMATCH = "type_mismatch"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    INVALID_RANGE = "invalid_range"


type RangeConstraint = Literal["order", "from_index", "to_index"]


class TypedListError(Exception):
    """
    Base of all errors raised by typed lists.

    Errors signal violated caller preconditions and are never handled
    internally. Each concrete error also derives from the matching builtin
    exception so that generic handlers keep working.
    """

    __slots__ = ()

    kind: ClassVar[ErrorKind]


class TypeMismatch(TypedListError, TypeError):
    """
    Raised when an inserted or replacing value is not of the accepted type.

    Attributes:
        expected: The element type accepted by the list.
        actual: Name of the kind observed on the rejected value.
    """

    __slots__ = (
        "actual",
        "expected",
    )

    kind: ClassVar[ErrorKind] = ErrorKind.TYPE_MISMATCH

    def __init__(
        self,
        *,
        expected: ElementType,
        actual: str,
    ) -> None:
        super().__init__(f"The element should be of type {expected} but {actual} found")
        self.expected: ElementType = expected
        self.actual: str = actual


class IndexOutOfBounds(TypedListError, IndexError):
    """
    Raised when an index does not address a populated slot.

    Attributes:
        index: The offending index.
        size: Number of elements at the time of the call.
        operation: Name of the rejected operation.
    """

    __slots__ = (
        "index",
        "operation",
        "size",
    )

    kind: ClassVar[ErrorKind] = ErrorKind.INDEX_OUT_OF_BOUNDS

    def __init__(
        self,
        *,
        index: int,
        size: int,
        operation: str,
    ) -> None:
        super().__init__(
            f"Can't {operation} element at index {index}, it is out of bounds for size {size}"
        )
        self.index: int = index
        self.size: int = size
        self.operation: str = operation


class InvalidRange(TypedListError, ValueError):
    """
    Raised by export when the requested range can't be taken.

    Attributes:
        from_index: Requested first index.
        to_index: Requested last index.
        constraint: Which of the range constraints failed.
    """

    __slots__ = (
        "constraint",
        "from_index",
        "to_index",
    )

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_RANGE

    def __init__(
        self,
        message: str,
        /,
        *,
        from_index: int,
        to_index: int,
        constraint: RangeConstraint,
    ) -> None:
        super().__init__(message)
        self.from_index: int = from_index
        self.to_index: int = to_index
        self.constraint: RangeConstraint = constraint

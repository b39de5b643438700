from typedlist.types.errors import (
    ErrorKind,
    IndexOutOfBounds,
    InvalidRange,
    RangeConstraint,
    TypedListError,
    TypeMismatch,
)
from typedlist.types.kinds import (
    ElementKind,
    ElementType,
    ElementTypeDescriptor,
    describe_kind,
    kind_of,
)

__all__ = (
    "ElementKind",
    "ElementType",
    "ElementTypeDescriptor",
    "ErrorKind",
    "IndexOutOfBounds",
    "InvalidRange",
    "RangeConstraint",
    "TypeMismatch",
    "TypedListError",
    "describe_kind",
    "kind_of",
)

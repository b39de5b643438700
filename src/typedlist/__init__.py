from typedlist.collection import ListCursor, TypedList
from typedlist.helpers import ListConfiguration
from typedlist.types import (
    ElementKind,
    ElementType,
    ElementTypeDescriptor,
    ErrorKind,
    IndexOutOfBounds,
    InvalidRange,
    RangeConstraint,
    TypedListError,
    TypeMismatch,
    describe_kind,
    kind_of,
)
from typedlist.utils import getenv_bool, setup_logging

__all__ = (
    "ElementKind",
    "ElementType",
    "ElementTypeDescriptor",
    "ErrorKind",
    "IndexOutOfBounds",
    "InvalidRange",
    "ListConfiguration",
    "ListCursor",
    "RangeConstraint",
    "TypeMismatch",
    "TypedList",
    "TypedListError",
    "describe_kind",
    "getenv_bool",
    "kind_of",
    "setup_logging",
)

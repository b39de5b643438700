from typedlist.collection.cursor import ListCursor
from typedlist.collection.typed import TypedList

__all__ = (
    "ListCursor",
    "TypedList",
)

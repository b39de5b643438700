from collections.abc import Sequence
from typing import Self, final

from typedlist.types import IndexOutOfBounds

__all__ = ("ListCursor",)


@final
class ListCursor[Element]:
    """
    External iterator over the elements of a typed list.

    The cursor borrows the list storage instead of copying it, any insertion
    or removal on the list invalidates the cursor. Apart from the explicit
    reset/valid/current/advance protocol it works as a regular iterator.

    Examples
    --------
    ```python
    cursor = numbers.cursor()
    cursor.reset()
    while cursor.is_valid():
        print(cursor.position(), cursor.current())
        cursor.advance()
    ```
    """

    __slots__ = (
        "_elements",
        "_position",
    )

    def __init__(
        self,
        elements: Sequence[Element],
        /,
    ) -> None:
        self._elements: Sequence[Element] = elements
        self._position: int = 0

    def reset(self) -> None:
        self._position = 0

    def is_valid(self) -> bool:
        return 0 <= self._position < len(self._elements)

    def current(self) -> Element:
        if not self.is_valid():
            raise IndexOutOfBounds(
                index=self._position,
                size=len(self._elements),
                operation="read",
            )

        return self._elements[self._position]

    def position(self) -> int:
        return self._position

    def advance(self) -> None:
        self._position += 1

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Element:
        if not self.is_valid():
            raise StopIteration

        element: Element = self._elements[self._position]
        self._position += 1
        return element

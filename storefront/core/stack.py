"""A last-in-first-out container."""

from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when reading from a stack that holds no items."""

    def __init__(self, message: str = "Stack is empty"):
        super().__init__(message)


class Stack(Generic[T]):
    """Generic LIFO stack.

    Not thread-safe: a stack belongs to whoever created it and is
    mutated by sequential calls only.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Drop every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

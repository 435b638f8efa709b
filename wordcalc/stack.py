"""A last-in first-out stack stored in a doubly linked list."""

from __future__ import annotations

from typing import Generic, TypeVar

from wordcalc.linkedlist import DoublyLinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack whose top is the end of a linked list."""

    def __init__(self) -> None:
        self._items: DoublyLinkedList[T] = DoublyLinkedList()

    def push(self, data: T) -> None:
        """Put ``data`` on top of the stack."""
        self._items.add_to_end(data)

    def pop(self) -> T:
        """Remove and return the top value; IndexError when empty."""
        top = self._items.tail
        if top is None:
            raise IndexError("pop from empty stack")
        self._items._unlink(top)  # pylint: disable=protected-access
        return top.data

    def peek(self) -> T:
        """Return the top value without removing it; IndexError when empty."""
        top = self._items.tail
        if top is None:
            raise IndexError("peek at empty stack")
        return top.data

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
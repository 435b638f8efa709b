"""A first-in first-out queue stored in a doubly linked list."""

from __future__ import annotations

from typing import Generic, TypeVar

from wordcalc.linkedlist import DoublyLinkedList

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue: values join at the end and leave from the front."""

    def __init__(self) -> None:
        self._items: DoublyLinkedList[T] = DoublyLinkedList()

    def enqueue(self, data: T) -> None:
        """Add ``data`` at the rear of the queue."""
        self._items.add_to_end(data)

    def dequeue(self) -> T:
        """Remove and return the front value; IndexError when empty."""
        front = self._items.head
        if front is None:
            raise IndexError("dequeue from empty queue")
        self._items._unlink(front)  # pylint: disable=protected-access
        return front.data

    def peek(self) -> T:
        """Return the front value without removing it; IndexError when empty."""
        front = self._items.head
        if front is None:
            raise IndexError("peek at empty queue")
        return front.data

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
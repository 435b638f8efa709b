"""A generic doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A list node holding one value and links to its neighbours."""

    data: T
    next: Optional[Node[T]] = field(default=None, repr=False)
    prev: Optional[Node[T]] = field(default=None, repr=False)


class DoublyLinkedList(Generic[T]):
    """A doubly linked list with insertion at either end or after a value."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.add_to_end(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        """The last node, or None when the list is empty."""
        return self._tail

    def add_to_front(self, data: T) -> Node[T]:
        """Put ``data`` at the front and return its node."""
        node = Node(data)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1
        return node

    def add_to_end(self, data: T) -> Node[T]:
        """Put ``data`` at the end and return its node."""
        node = Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1
        return node

    def insert_after(self, search: T, data: T) -> bool:
        """Insert ``data`` after the first node equal to ``search``.

        Returns False, leaving the list unchanged, when no such node exists.
        """
        current = self._find_node(search)
        if current is None:
            return False
        node = Node(data, next=current.next, prev=current)
        if current.next is not None:
            current.next.prev = node
        current.next = node
        if current is self._tail:
            self._tail = node
        self._size += 1
        return True

    def remove(self, search: T) -> bool:
        """Remove the first node equal to ``search``.

        Returns False, leaving the list unchanged, when no such node exists.
        """
        node = self._find_node(search)
        if node is None:
            return False
        self._unlink(node)
        return True

    def find(self, search: T) -> bool:
        """Tell whether some node holds a value equal to ``search``."""
        return self._find_node(search) is not None

    def __contains__(self, search: object) -> bool:
        return self.find(search)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[T]:
        current = self._tail
        while current is not None:
            yield current.data
            current = current.prev

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node[T]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _find_node(self, search: T) -> Optional[Node[T]]:
        return next((node for node in self._nodes() if node.data == search), None)

    def _unlink(self, node: Node[T]) -> None:
        """Detach ``node``, which must belong to this list."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.next = node.prev = None
        self._size -= 1
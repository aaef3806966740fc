"""A first-in, first-out queue."""

from __future__ import annotations

from typing import Any

from .errors import EmptyError
from .llist import LinkedList


class Queue:
    """A FIFO queue backed by a linked list."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def peek(self) -> Any:
        """Return the front element without removing it."""
        if self._items.is_empty():
            raise EmptyError("peek at empty queue")
        return self._items.peek()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` to the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self._items.is_empty():
            raise EmptyError("dequeue from empty queue")
        return self._items.pop()
"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any

from .errors import EmptyError
from .llist import LinkedList


class Stack:
    """A LIFO stack backed by a linked list."""

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
        """Return the top element without removing it."""
        if self._items.is_empty():
            raise EmptyError("peek at empty stack")
        return self._items.peek()

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        self._items.prepend(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._items.is_empty():
            raise EmptyError("pop from empty stack")
        return self._items.pop()
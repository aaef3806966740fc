"""A singly linked list with O(1) access to both ends."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from .algo import Comparator
from .errors import EmptyError, NotFoundError


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next


def _matches(item: Any, value: Any, cmp: Optional[Comparator]) -> bool:
    if cmp is None:
        return bool(item == value)
    return cmp(item, value) == 0


class LinkedList:
    """A singly linked list keeping references to its head and tail."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._count = 0
        if iterable is not None:
            for value in iterable:
                self.append(value)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __getitem__(self, index: int) -> Any:
        position = operator.index(index)
        if position < 0:
            position += self._count
        if not 0 <= position < self._count:
            raise IndexError(f"list index {index} out of range")
        return self._node_at(position).value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _unlink(self, previous: Optional[_Node], node: _Node) -> None:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._count -= 1

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._count = 0

    def peek(self) -> Any:
        """Return the front element without removing it."""
        if self._head is None:
            raise EmptyError("peek at empty list")
        return self._head.value

    def back(self) -> Any:
        """Return the back element without removing it."""
        if self._tail is None:
            raise EmptyError("back of empty list")
        return self._tail.value

    def prepend(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        ``index`` 0 prepends and ``index == len(self)`` appends; any other
        index outside that range raises IndexError.
        """
        position = operator.index(index)
        if not 0 <= position <= self._count:
            raise IndexError(f"insert index {index} out of range")
        if position == 0:
            self.prepend(value)
        elif position == self._count:
            self.append(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
            self._count += 1

    def pop(self) -> Any:
        """Remove and return the front element."""
        head = self._head
        if head is None:
            raise EmptyError("pop from empty list")
        self._head = head.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return head.value

    def pop_back(self) -> Any:
        """Remove and return the back element; walks the list to do so."""
        tail = self._tail
        if tail is None:
            raise EmptyError("pop_back from empty list")
        if self._count == 1:
            self.clear()
            return tail.value
        new_tail = self._node_at(self._count - 2)
        new_tail.next = None
        self._tail = new_tail
        self._count -= 1
        return tail.value

    def remove(self, value: Any, cmp: Optional[Comparator] = None) -> None:
        """Remove the first element equal to ``value`` according to ``cmp``."""
        if self._count == 0:
            raise EmptyError("remove from empty list")
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            if _matches(node.value, value, cmp):
                self._unlink(previous, node)
                if node is self._tail:
                    self._tail = previous
                return
            previous, node = node, node.next
        raise NotFoundError(f"{value!r} not found")

    def purge(self, value: Any, cmp: Optional[Comparator] = None) -> int:
        """Remove every element equal to ``value``; return how many went."""
        if self._count == 0:
            raise EmptyError("purge from empty list")
        removed = 0
        last_kept: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            if _matches(node.value, value, cmp):
                self._unlink(last_kept, node)
                removed += 1
            else:
                last_kept = node
            node = following
        self._tail = last_kept
        if not removed:
            raise NotFoundError(f"{value!r} not found")
        return removed

    def contains(self, value: Any, cmp: Optional[Comparator] = None) -> bool:
        """Return True if some element equals ``value`` according to ``cmp``."""
        return any(_matches(item, value, cmp) for item in self)

    def find(self, value: Any, cmp: Optional[Comparator] = None) -> Any:
        """Return the first element equal to ``value`` according to ``cmp``."""
        for item in self:
            if _matches(item, value, cmp):
                return item
        raise NotFoundError(f"{value!r} not found")
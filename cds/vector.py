"""A growable array with explicit capacity management."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from . import algo
from .errors import CapacityError, EmptyError

INITIAL_CAPACITY = 8
MAX_CAPACITY = sys.maxsize


class Vector:
    """A dynamic array that doubles when full and halves when sparse."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(iterable) if iterable is not None else []
        self._capacity = INITIAL_CAPACITY
        self.reserve(len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        try:
            return self._items[operator.index(index)]
        except IndexError:
            raise IndexError(f"vector index {index} out of range") from None

    def __setitem__(self, index: int, value: Any) -> None:
        try:
            self._items[operator.index(index)] = value
        except IndexError:
            raise IndexError(f"vector index {index} out of range") from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def capacity(self) -> int:
        """Return how many elements fit before the vector must grow."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Ensure room for at least ``n`` elements; never shrinks."""
        n = operator.index(n)
        if n < 0:
            raise ValueError("capacity cannot be negative")
        if n <= self._capacity:
            return
        if n > MAX_CAPACITY:
            raise CapacityError(f"cannot reserve {n} elements")
        self._capacity = n

    def push(self, value: Any) -> None:
        """Append ``value``, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            grown = self._capacity * 2
            if grown > MAX_CAPACITY:
                raise CapacityError("vector cannot grow any further")
            self._capacity = grown
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last element, shrinking when sparse."""
        if not self._items:
            raise EmptyError("pop from empty vector")
        value = self._items.pop()
        half = self._capacity // 2
        if len(self._items) <= self._capacity // 4 and half >= INITIAL_CAPACITY:
            self._capacity = half
        return value

    def clear(self) -> None:
        """Remove every element and return to the initial capacity."""
        self._items.clear()
        if self._capacity > INITIAL_CAPACITY:
            self._capacity = INITIAL_CAPACITY

    def is_empty(self) -> bool:
        return not self._items

    def sort(self, cmp: Optional[algo.Comparator] = None) -> None:
        """Sort the elements in place according to ``cmp``."""
        algo.sort(self._items, cmp)

    def is_sorted(self, cmp: Optional[algo.Comparator] = None) -> bool:
        return algo.is_sorted(self._items, cmp)

    def bsearch(self, key: Any, cmp: Optional[algo.Comparator] = None) -> Any:
        """Binary-search a vector already sorted by ``cmp`` for ``key``."""
        return algo.bsearch(self._items, key, cmp)

    def lsearch(self, key: Any, cmp: Optional[algo.Comparator] = None) -> Any:
        """Linearly search the vector for the first element equal to ``key``."""
        return algo.lsearch(self._items, key, cmp)
"""Sorting and searching over sequences using three-way comparators.

A comparator ``cmp(a, b)`` returns a negative number when ``a`` orders
before ``b``, zero when they are equal and a positive number otherwise.
When no comparator is given, the natural ordering of the items is used.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, MutableSequence, Sequence
from functools import cmp_to_key
from typing import Any, Optional, TypeVar

from .errors import NotFoundError

T = TypeVar("T")
Comparator = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _resolve(cmp: Optional[Comparator]) -> Comparator:
    return _natural if cmp is None else cmp


def sort(items: MutableSequence[T], cmp: Optional[Comparator] = None) -> None:
    """Sort ``items`` in place according to ``cmp``."""
    items[:] = sorted(items, key=cmp_to_key(_resolve(cmp)))


def is_sorted(items: Sequence[Any], cmp: Optional[Comparator] = None) -> bool:
    """Return True if no element orders after its successor."""
    compare = _resolve(cmp)
    return all(compare(a, b) <= 0 for a, b in zip(items, items[1:]))


def bsearch(items: Sequence[T], key: Any, cmp: Optional[Comparator] = None) -> T:
    """Return an element equal to ``key`` from a sequence sorted by ``cmp``.

    Raises NotFoundError when there is no such element. The result is
    unspecified if ``items`` is not sorted according to ``cmp``.
    """
    compare = _resolve(cmp)
    wrap = cmp_to_key(compare)
    position = bisect_left(items, wrap(key), key=wrap)
    if position < len(items) and compare(items[position], key) == 0:
        return items[position]
    raise NotFoundError(f"{key!r} not found")


def lsearch(items: Sequence[T], key: Any, cmp: Optional[Comparator] = None) -> T:
    """Return the first element equal to ``key``, scanning from the front.

    Raises NotFoundError when there is no such element.
    """
    compare = _resolve(cmp)
    for item in items:
        if compare(item, key) == 0:
            return item
    raise NotFoundError(f"{key!r} not found")
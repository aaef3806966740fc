# cds

Small, dependency-free container types and comparator-driven algorithms.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Comparators

Sorting and searching take an optional comparator `cmp(a, b)` that returns a
negative number when `a` comes before `b`, zero when the two are equal, and a
positive number when `a` comes after `b`:

```python
def cmp_int(a, b):
    return a - b
```

When `cmp` is omitted, the algorithms and `Vector` use the items' natural
ordering (`<` and `>`), and `LinkedList` uses `==`.

## Algorithms

The functions in `cds.algo` work on ordinary Python sequences:

```python
from cds.algo import sort, is_sorted, bsearch, lsearch

items = [42, 7, 23, 1, 99]
sort(items, cmp_int)              # sorts the list in place
is_sorted(items, cmp_int)         # True
bsearch(items, 23, cmp_int)       # 23 (items must already be sorted)
lsearch(items, 99, cmp_int)       # 99 (works on unsorted data too)
```

`bsearch` and `lsearch` return the matching element and raise
`cds.errors.NotFoundError` when there is none. The result of `bsearch` on
data that is not sorted by `cmp` is unspecified.

## Vector

`cds.vector.Vector` is a growable array that tracks a capacity of its own. It
starts with room for 8 elements, doubles when a push finds it full, halves
when a pop leaves it at most a quarter full (never below 8), and returns to 8
on `clear()`.

```python
from cds.vector import Vector

v = Vector([10, 20, 30])
v.push(40)
v[0] = 5
len(v), v.capacity()      # (4, 8)
v.reserve(64)             # capacity 64; reserve never shrinks
v.pop()                   # 40
v.sort(cmp_int)
v.is_sorted(cmp_int)      # True
v.bsearch(20, cmp_int)    # 20
v.lsearch(30, cmp_int)    # 30
v.clear()                 # empty again, capacity back to 8
v.is_empty()              # True
```

Vectors are iterable and support integer indexing, including negative
indices. `reserve` with a negative size raises `ValueError`; a size beyond
`sys.maxsize` raises `CapacityError`.

## LinkedList

`cds.llist.LinkedList` is a singly linked list with references to both ends.

```python
from cds.llist import LinkedList

ll = LinkedList([20, 30])
ll.prepend(10)
ll.append(40)
ll.insert(1, 15)          # [10, 15, 20, 30, 40]
ll.peek(), ll.back()      # (10, 40)
ll[2]                     # 20
ll.remove(15, cmp_int)    # removes the first match
ll.purge(30, cmp_int)     # removes every match, returns how many (1)
ll.contains(20, cmp_int)  # True
ll.find(20, cmp_int)      # 20
ll.pop(), ll.pop_back()   # (10, 40)
```

`insert(index, value)` accepts `0` through `len(ll)`; anything else raises
`IndexError`. `remove` and `purge` raise `EmptyError` on an empty list and
`NotFoundError` when nothing matches; `find` raises `NotFoundError`.
`pop_back` walks the list to find the new tail.

## Stack and Queue

```python
from cds.stack import Stack
from cds.queue import Queue

s = Stack()
s.push(1)
s.push(2)
s.peek()                  # 2
s.pop()                   # 2 (last in, first out)

q = Queue()
q.enqueue(1)
q.enqueue(2)
q.peek()                  # 1
q.dequeue()               # 1 (first in, first out)
```

Both have `len()`, `is_empty()` and `clear()`.

## Errors

Every error defined in `cds.errors` derives from `CdsError`:

- `EmptyError` (also an `IndexError`): popping or peeking an empty container
- `NotFoundError` (also a `LookupError`): a search or removal found no match
- `CapacityError` (also an `OverflowError`): a reservation that cannot be satisfied

Out-of-range positions raise the built-in `IndexError`.

## Not included

The containers hold ordinary Python objects by reference; they are not
thread-safe, and the package offers no command-line tool.
import pytest
from hypothesis import given, strategies as st

from cds.errors import EmptyError, NotFoundError
from cds.llist import LinkedList


def cmp_int(a, b):
    return a - b


@pytest.fixture
def filled():
    ll = LinkedList()
    ll.append(30)
    ll.prepend(20)
    ll.prepend(10)
    ll.append(40)
    ll.append(50)
    return ll


def test_create_empty():
    ll = LinkedList()
    assert len(ll) == 0
    assert ll.is_empty()


def test_create_from_iterable():
    ll = LinkedList([1, 2, 3])
    assert list(ll) == [1, 2, 3]
    assert ll.back() == 3


def test_prepend_append_order(filled):
    assert len(filled) == 5
    assert list(filled) == [10, 20, 30, 40, 50]


def test_get(filled):
    assert [filled[i] for i in range(len(filled))] == [10, 20, 30, 40, 50]
    assert filled[-1] == 50
    with pytest.raises(IndexError):
        filled[999]


def test_pop(filled):
    assert filled.pop() == 10
    assert len(filled) == 4
    assert filled[0] == 20


def test_pop_back(filled):
    filled.pop()
    assert filled.pop_back() == 50
    assert len(filled) == 3
    assert filled.back() == 40


def test_pop_discarding(filled):
    filled.pop()
    filled.pop_back()
    filled.prepend(10)
    filled.pop()
    assert len(filled) == 3


def test_pop_on_empty():
    ll = LinkedList()
    with pytest.raises(EmptyError):
        ll.pop()
    with pytest.raises(EmptyError):
        ll.pop_back()


def test_pop_single_element():
    ll = LinkedList()
    ll.append(99)
    assert ll.pop() == 99
    assert len(ll) == 0
    ll.append(99)
    assert ll.pop_back() == 99
    assert len(ll) == 0
    ll.append(7)
    assert ll.peek() == 7
    assert ll.back() == 7


def test_peek_and_back_empty():
    ll = LinkedList()
    with pytest.raises(EmptyError):
        ll.peek()
    with pytest.raises(EmptyError):
        ll.back()


def test_insert():
    ll = LinkedList([20, 30, 40])
    ll.insert(1, 25)
    assert ll[1] == 25
    assert len(ll) == 4
    with pytest.raises(IndexError):
        ll.insert(99, 25)


def test_insert_at_ends():
    ll = LinkedList([2])
    ll.insert(0, 1)
    ll.insert(2, 3)
    assert list(ll) == [1, 2, 3]
    assert ll.back() == 3
    ll.append(4)
    assert list(ll) == [1, 2, 3, 4]


def test_contains():
    ll = LinkedList([20, 25, 30, 40])
    assert ll.contains(30, cmp_int) is True
    assert ll.contains(999, cmp_int) is False
    assert LinkedList().contains(1) is False


def test_remove_by_value():
    ll = LinkedList([20, 25, 30, 40])
    ll.remove(25, cmp_int)
    assert len(ll) == 3
    assert ll.contains(25, cmp_int) is False
    with pytest.raises(NotFoundError):
        ll.remove(999, cmp_int)
    ll.remove(20, cmp_int)
    assert ll[0] == 30
    ll.remove(40, cmp_int)
    assert len(ll) == 1
    assert ll.back() == 30


def test_remove_tail_then_append():
    ll = LinkedList([1, 2, 3])
    ll.remove(3)
    ll.append(9)
    assert list(ll) == [1, 2, 9]
    assert ll.back() == 9


def test_remove_on_empty():
    with pytest.raises(EmptyError):
        LinkedList().remove(1)


def test_purge():
    ll = LinkedList([5, 10, 5, 20, 5])
    assert ll.purge(5, cmp_int) == 3
    assert len(ll) == 2
    assert ll[0] == 10
    assert ll[1] == 20
    with pytest.raises(NotFoundError):
        ll.purge(999, cmp_int)
    ll.purge(10, cmp_int)
    ll.purge(20, cmp_int)
    assert len(ll) == 0
    with pytest.raises(EmptyError):
        ll.purge(20, cmp_int)


def test_purge_updates_tail():
    ll = LinkedList([5, 10, 5, 20, 5])
    ll.purge(5)
    ll.append(7)
    assert list(ll) == [10, 20, 7]
    assert ll.back() == 7


def test_find():
    ll = LinkedList(["apple", "banana", "cherry"])
    assert ll.find("B", lambda a, b: (a[0] > b.lower()) - (a[0] < b.lower())) == "banana"
    with pytest.raises(NotFoundError):
        ll.find("zebra")
    with pytest.raises(NotFoundError):
        LinkedList().find(1)


def test_empty_and_clear():
    ll = LinkedList()
    assert ll.is_empty()
    ll.append(1)
    assert not ll.is_empty()
    ll.clear()
    assert ll.is_empty()
    assert list(ll) == []
    ll.append(2)
    assert ll.peek() == 2 and ll.back() == 2


@given(st.lists(st.integers()))
def test_round_trip(values):
    ll = LinkedList(values)
    assert list(ll) == values
    assert len(ll) == len(values)


@given(st.lists(st.integers()))
def test_pop_back_reverses(values):
    ll = LinkedList(values)
    drained = [ll.pop_back() for _ in range(len(values))]
    assert drained == values[::-1]
    assert ll.is_empty()
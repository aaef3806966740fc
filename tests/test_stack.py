import pytest
from hypothesis import given, strategies as st

from cds.errors import EmptyError
from cds.stack import Stack


@pytest.fixture
def filled():
    s = Stack()
    for value in [10, 20, 30, 40, 50]:
        s.push(value)
    return s


def test_create_empty():
    s = Stack()
    assert len(s) == 0
    assert s.is_empty()


def test_push(filled):
    assert len(filled) == 5
    assert not filled.is_empty()


def test_peek(filled):
    assert filled.peek() == 50
    assert len(filled) == 5


def test_pop_lifo(filled):
    assert [filled.pop() for _ in range(5)] == [50, 40, 30, 20, 10]
    assert len(filled) == 0
    assert filled.is_empty()


def test_pop_and_peek_on_empty():
    s = Stack()
    with pytest.raises(EmptyError):
        s.pop()
    with pytest.raises(EmptyError):
        s.peek()


def test_pop_discarding():
    s = Stack()
    s.push(10)
    s.push(20)
    s.pop()
    assert len(s) == 1
    assert s.peek() == 10


def test_clear_and_reuse():
    s = Stack()
    s.push(30)
    s.push(40)
    s.clear()
    assert len(s) == 0
    assert s.is_empty()
    s.push(99)
    assert s.peek() == 99


@given(st.lists(st.integers()))
def test_pop_order_reverses_pushes(values):
    s = Stack()
    for value in values:
        s.push(value)
    assert [s.pop() for _ in values] == values[::-1]
    assert s.is_empty()
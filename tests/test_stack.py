import pytest

from dsdrills.stack import Stack, StackOverflowError, StackUnderflowError


def test_pop_returns_items_in_reverse_order():
    s = Stack(5)
    for ch in "abcde":
        s.push(ch)
    assert [s.pop() for _ in range(5)] == list("edcba")


def test_peek_does_not_remove():
    s = Stack(3)
    s.push("x")
    s.push("y")
    assert s.peek() == "y"
    assert len(s) == 2
    assert s.pop() == "y"
    assert s.peek() == "x"


def test_empty_and_full_flags():
    s = Stack(2)
    assert s.is_empty()
    assert not s.is_full()
    s.push(1)
    s.push(2)
    assert s.is_full()
    assert not s.is_empty()
    assert len(s) == s.capacity


def test_push_onto_full_stack_raises():
    s = Stack(1)
    s.push("a")
    with pytest.raises(StackOverflowError):
        s.push("b")
    assert s.pop() == "a"


def test_zero_capacity_is_full_and_empty():
    s = Stack(0)
    assert s.is_empty() and s.is_full()
    with pytest.raises(StackOverflowError):
        s.push(1)


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack(4).pop()


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack(4).peek()


def test_underflow_after_draining():
    s = Stack(2)
    s.push(7)
    assert s.pop() == 7
    with pytest.raises(StackUnderflowError):
        s.pop()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)
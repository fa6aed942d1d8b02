import pytest

from aedstructs.stack import Stack, StackEmptyError, StackOverflowError


def test_push_peek_pop():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]
    assert stack.peek() == 30
    assert stack.pop() == 30
    assert list(stack) == [20, 10]
    assert len(stack) == 2


def test_strings_display_top_first():
    stack = Stack()
    stack.push("Hola")
    stack.push("Mundo")
    assert str(stack) == "Mundo Hola"


def test_empty_errors():
    stack = Stack()
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()
    with pytest.raises(IndexError):
        stack.pop()


def test_overflow():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_default_capacity_matches_source_limit():
    stack = Stack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(100)
    assert len(stack) == 100


def test_pop_frees_room():
    stack = Stack(1)
    stack.push("a")
    assert stack.pop() == "a"
    assert not stack.is_full()
    stack.push("b")
    assert stack.peek() == "b"


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)
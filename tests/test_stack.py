import pytest

from lfc.stack import Stack


def test_stack_init_correctly():
    stack = Stack()
    assert len(stack) == 0
    assert stack.peek() is None
    assert stack.is_empty() is True


def test_stack_push_pop_on_empty():
    stack = Stack()
    stack.push(5)
    assert len(stack) == 1
    assert stack.peek() == 5
    assert stack.is_empty() is False

    assert stack.pop() == 5
    assert len(stack) == 0
    assert stack.peek() is None
    assert stack.is_empty() is True


def test_stack_push_pop_many():
    values = [8, 15, 17]
    stack = Stack()
    for i, v in enumerate(values):
        stack.push(v)
        assert len(stack) == i + 1
        assert stack.peek() == v
        assert stack.is_empty() is False

    assert len(stack) == 3
    assert stack.peek() == 17

    for i in reversed(range(len(values))):
        assert stack.pop() == values[i]
        assert len(stack) == i
        if i > 0:
            assert stack.peek() == values[i - 1]
        else:
            assert stack.peek() is None
        assert stack.is_empty() == (i == 0)


def test_pop_from_empty_stack_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_stack_grows_past_default_capacity():
    stack = Stack()
    for i in range(50):
        stack.push(i)
    assert len(stack) == 50
    assert [stack.pop() for _ in range(50)] == list(reversed(range(50)))
from utils import Stack


def test_push_pop_order():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2
    assert stack.peek() == 2
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.is_empty


def test_empty_stack_returns_none():
    stack = Stack()
    assert stack.peek() is None
    assert stack.pop() is None
    assert len(stack) == 0

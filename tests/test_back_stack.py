import pytest

from core.back_stack import BackStack
from core.errors import EmptyStackError


def test_push_peek_pop():
    stack = BackStack()
    stack.push("tab#0")
    stack.push("tab#1")
    assert stack.peek() == "tab#1"
    assert stack.size() == 2

    stack.pop()
    assert stack.peek() == "tab#0"
    assert len(stack) == 1


def test_records_visits_not_membership():
    stack = BackStack()
    for tag in ("tab#0", "tab#1", "tab#0", "tab#0"):
        stack.push(tag)
    assert stack.entries() == ("tab#0", "tab#1", "tab#0", "tab#0")


def test_peek_does_not_remove():
    stack = BackStack()
    stack.push("tab#2")
    stack.peek()
    stack.peek()
    assert stack.size() == 1


def test_empty_stack_errors():
    stack = BackStack()
    with pytest.raises(EmptyStackError):
        stack.peek()
    with pytest.raises(EmptyStackError):
        stack.pop()


def test_pop_down_to_empty_is_allowed():
    stack = BackStack()
    stack.push("tab#0")
    stack.pop()
    assert stack.size() == 0
    assert stack.entries() == ()

"""utils/stack.py"""


class Stack:
    """后进先出栈，空栈 pop/peek 返回 None"""

    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def peek(self):
        return self._items[-1] if self._items else None

    def pop(self):
        return self._items.pop() if self._items else None

    @property
    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"

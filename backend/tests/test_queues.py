"""Tests for the traversal queue and stack."""

import os
from collections import deque
import pytest
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from queues import Queue, Stack


class TestQueue:
    """Tests for FIFO order."""

    def test_fifo_order(self):
        queue = Queue()
        for value in (1, 2, 3):
            queue.push(value)

        assert [queue.pop(), queue.pop(), queue.pop()] == [1, 2, 3]

    def test_size(self):
        queue = Queue()
        for value in (1, 2, 3):
            queue.push(value)
        queue.pop()
        queue.pop()
        assert queue.size() == 1

    def test_pop_empty(self):
        queue = Queue()
        assert queue.pop() is None
        assert queue.size() == 0

    def test_set_to_copies_input(self):
        items = ["a", "b", "c"]
        queue = Queue()
        queue.set_to(items)
        items.append("d")
        items[0] = "z"

        assert queue.size() == 3
        assert queue.pop() == "a"

    def test_set_to_replaces_contents(self):
        queue = Queue()
        queue.push(1)
        queue.set_to([5, 6])
        queue.push(7)
        assert [queue.pop(), queue.pop(), queue.pop()] == [5, 6, 7]

    def test_backed_by_deque(self):
        """Head removal uses popleft on a deque copy of the loaded items."""
        items = [1, 2, 3]
        queue = Queue()
        queue.set_to(items)

        assert isinstance(queue.data, deque)
        assert queue.pop() == 1
        assert items == [1, 2, 3]
        assert list(queue.data) == [2, 3]


class TestStack:
    """Tests for LIFO order."""

    def test_lifo_order(self):
        stack = Stack()
        for value in (1, 2, 3):
            stack.push(value)

        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]

    def test_pop_empty(self):
        stack = Stack()
        assert stack.pop() is None
        assert stack.size() == 0

    def test_set_to_copies_input(self):
        items = ["a", "b", "c"]
        stack = Stack()
        stack.set_to(items)
        items.pop()

        assert stack.size() == 3
        assert stack.pop() == "c"

    def test_size_counts_pushes_and_loaded(self):
        stack = Stack()
        stack.set_to([1, 2])
        stack.push(3)
        stack.pop()
        stack.pop()
        stack.pop()
        stack.pop()  # empty, not counted
        assert stack.size() == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

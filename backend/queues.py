"""Minimal FIFO/LIFO buffers used by graph traversal in the pedigree editor."""

from collections import deque
from typing import Any, Iterable


class Queue:
    """First-in, first-out buffer."""

    def __init__(self):
        self.data: deque[Any] = deque()

    def set_to(self, items: Iterable[Any]) -> None:
        """Replace the contents with a copy of ``items``, keeping their order."""
        self.data = deque(items)

    def push(self, value: Any) -> None:
        self.data.append(value)

    def pop(self) -> Any | None:
        """Remove and return the head element, or None when empty."""
        if not self.data:
            return None
        return self.data.popleft()

    def size(self) -> int:
        return len(self.data)


class Stack:
    """Last-in, first-out buffer."""

    def __init__(self):
        self.data: list[Any] = []

    def set_to(self, items: Iterable[Any]) -> None:
        """Replace the contents with a copy of ``items``, keeping their order."""
        self.data = list(items)

    def push(self, value: Any) -> None:
        self.data.append(value)

    def pop(self) -> Any | None:
        """Remove and return the tail element, or None when empty."""
        if not self.data:
            return None
        return self.data.pop()

    def size(self) -> int:
        return len(self.data)

"""Bounded and unbounded FIFO queues and a bounded LIFO stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = [
    "ContainerFullError",
    "ContainerEmptyError",
    "CircularQueue",
    "Queue",
    "Stack",
]


class ContainerFullError(OverflowError):
    """Raised when adding to a container that has reached its capacity."""


class ContainerEmptyError(IndexError):
    """Raised when taking from or peeking into an empty container."""


class CircularQueue:
    """A fixed-capacity FIFO queue stored in a ring of slots."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise ContainerFullError when full."""
        if self.is_full():
            raise ContainerFullError("queue is full")
        rear = (self._front + self._count) % self.capacity
        self._slots[rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise ContainerEmptyError when empty."""
        if self.is_empty():
            raise ContainerEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"


class Queue:
    """An unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise ContainerEmptyError when empty."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise ContainerFullError on overflow."""
        if self.is_full():
            raise ContainerFullError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise ContainerEmptyError on underflow."""
        if not self._items:
            raise ContainerEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise ContainerEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity})"
"""FIFO queues: a bounded array-backed queue and an unbounded linked queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when reading from or removing out of an empty queue."""


class ArrayQueue:
    """A queue over a fixed number of slots.

    Slots are only reclaimed once the queue has been emptied, so ``capacity``
    bounds the pushes made since the queue was last empty.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def push(self, value: Any) -> Any:
        """Append ``value`` and return it; raise OverflowError when no slot is free."""
        if len(self._slots) >= self.capacity:
            raise OverflowError("queue is full")
        self._slots.append(value)
        return value

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmptyError("pop from an empty queue")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueEmptyError("front of an empty queue")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def __len__(self) -> int:
        return len(self._slots) - self._front


class LinkedQueue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> Any:
        """Append ``value`` and return it."""
        self._items.append(value)
        return value

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmptyError("front of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
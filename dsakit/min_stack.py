"""A stack over a resizable buffer that can report its minimum."""

from __future__ import annotations

from typing import Any


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ResizingStack:
    """A LIFO stack whose capacity doubles when full and halves when a quarter used."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top, growing the capacity if the stack is full."""
        if self.is_full():
            self.capacity *= 2
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value, shrinking the capacity when sparsely used."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        if len(self._items) <= self.capacity // 4:
            self.capacity = self.capacity // 2 or 2
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def min(self) -> Any:
        """Return the smallest value on the stack, leaving the stack unchanged."""
        if not self._items:
            raise StackEmptyError("min of an empty stack")
        return min(self._items)

    def __len__(self) -> int:
        return len(self._items)
"""A singly linked list, plus cycle detection and middle lookup on raw node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked chain."""

    value: Any
    next: ListNode | None = None


def loop_length(head: ListNode | None) -> int:
    """Return the number of nodes in the cycle reachable from ``head``, or 0 if none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            length = 1
            node = slow.next
            while node is not slow:
                length += 1
                node = node.next
            return length
    return 0


def middle_value(head: ListNode | None) -> Any:
    """Return the middle value of the chain (the second middle for even lengths).

    Returns None for an empty chain.
    """
    if head is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow.value


class SinglyLinkedList:
    """A singly linked list with positional insertion, deletion and swapping."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> ListNode:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range")
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = ListNode(value)
        if self._tail is None:
            self.head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.head = ListNode(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            self.prepend(value)
        elif position == self._size:
            self.append(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = ListNode(value, previous.next)
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at index ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            return self.remove_first()
        previous = self._node_at(position - 1)
        node = previous.next
        previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return node.value

    def swap(self, i: int, j: int) -> None:
        """Exchange the values at indexes ``i`` and ``j``."""
        first = self._node_at(i)
        second = self._node_at(j)
        first.value, second.value = second.value, first.value

    def remove_first(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def remove_last(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        return self.delete_at(self._size - 1)

    def count(self, value: Any) -> int:
        """Return how many times ``value`` occurs."""
        return sum(1 for item in self if item == value)

    def find_last(self, value: Any) -> ListNode | None:
        """Return the last node holding ``value``, or None."""
        found = None
        for node in self._nodes():
            if node.value == value:
                found = node
        return found

    def middle(self) -> Any:
        """Return the middle value (the second middle for even lengths)."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        return middle_value(self.head)

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
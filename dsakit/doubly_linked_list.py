"""A doubly linked list with keyed insertion and deletion and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DNode:
    """A node linked to both its neighbours."""

    info: Any
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list tracking both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DNode | None = None
        self.tail: DNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def is_empty(self) -> bool:
        return self.head is None

    def insert_at_head(self, value: Any) -> None:
        """Add ``value`` at the front."""
        node = DNode(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = DNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self._size += 1

    def delete_at_head(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        self._size -= 1
        return node.info

    def delete_at_tail(self) -> Any:
        """Remove and return the last value."""
        if self.tail is None:
            raise IndexError("delete from an empty list")
        node = self.tail
        self.tail = node.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        self._size -= 1
        return node.info

    def get_node(self, index: int) -> DNode | None:
        """Return the node at ``index``; the tail if ``index`` is past the end, None if empty."""
        if index < 0:
            raise IndexError("index must not be negative")
        if self.head is None:
            return None
        if index >= self._size:
            return self.tail
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def search(self, key: Any) -> DNode | None:
        """Return the first node holding ``key``, or None."""
        node = self.head
        while node is not None:
            if node.info == key:
                return node
            node = node.next
        return None

    def _require(self, key: Any) -> DNode:
        node = self.search(key)
        if node is None:
            raise ValueError(f"{key!r} is not in the list")
        return node

    def insert_after(self, value: Any, key: Any) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        found = self._require(key)
        if found is self.tail:
            self.insert_at_tail(value)
            return
        node = DNode(value, next=found.next, prev=found)
        found.next.prev = node
        found.next = node
        self._size += 1

    def insert_before(self, value: Any, key: Any) -> None:
        """Insert ``value`` right before the first node holding ``key``."""
        found = self._require(key)
        if found is self.head:
            self.insert_at_head(value)
            return
        node = DNode(value, next=found, prev=found.prev)
        found.prev.next = node
        found.prev = node
        self._size += 1

    def delete_before(self, key: Any) -> Any:
        """Remove and return the value just before the first node holding ``key``."""
        found = self._require(key)
        target = found.prev
        if target is None:
            raise IndexError(f"nothing precedes {key!r}")
        if target is self.head:
            return self.delete_at_head()
        target.prev.next = found
        found.prev = target.prev
        self._size -= 1
        return target.info

    def delete_after(self, key: Any) -> Any:
        """Remove and return the value just after the first node holding ``key``."""
        found = self._require(key)
        target = found.next
        if target is None:
            raise IndexError(f"nothing follows {key!r}")
        if target is self.tail:
            return self.delete_at_tail()
        found.next = target.next
        target.next.prev = found
        self._size -= 1
        return target.info

    def reverse(self) -> None:
        """Reverse the list in place, relinking every node."""
        node = self.head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self.head, self.tail = self.tail, self.head

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.info
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.info
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"
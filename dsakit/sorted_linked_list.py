"""A singly linked list that can keep itself in ascending order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain."""

    info: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list tracking both ends, with node swapping and sorted insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _find_with_previous(self, key: Any) -> tuple[Node | None, Node | None]:
        previous = None
        for node in self._nodes():
            if node.info == key:
                return previous, node
            previous = node
        return None, None

    def _relink(self, nodes: list[Node]) -> None:
        for current, following in zip(nodes, nodes[1:]):
            current.next = following
        if nodes:
            nodes[-1].next = None
            self.head, self.tail = nodes[0], nodes[-1]
        else:
            self.head = self.tail = None

    def is_empty(self) -> bool:
        return self.head is None

    def insert_at_head(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.head = Node(value, self.head)
        if self.tail is None:
            self.tail = self.head
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
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
        self._size -= 1
        return node.info

    def delete_at_tail(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        nodes = list(self._nodes())
        removed = nodes.pop()
        self._relink(nodes)
        self._size -= 1
        return removed.info

    def get_node(self, index: int) -> Node | None:
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

    def search(self, key: Any) -> Node | None:
        """Return the first node holding ``key``, or None."""
        return self._find_with_previous(key)[1]

    def _require(self, key: Any) -> tuple[Node | None, Node]:
        previous, node = self._find_with_previous(key)
        if node is None:
            raise ValueError(f"{key!r} is not in the list")
        return previous, node

    def insert_after(self, value: Any, key: Any) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        _, found = self._require(key)
        found.next = Node(value, found.next)
        if found is self.tail:
            self.tail = found.next
        self._size += 1

    def insert_before(self, value: Any, key: Any) -> None:
        """Insert ``value`` right before the first node holding ``key``."""
        previous, found = self._require(key)
        if previous is None:
            self.insert_at_head(value)
            return
        previous.next = Node(value, found)
        self._size += 1

    def delete_before(self, key: Any) -> Any:
        """Remove and return the value just before the first node holding ``key``."""
        nodes = list(self._nodes())
        for index, node in enumerate(nodes):
            if node.info == key:
                if index == 0:
                    raise IndexError(f"nothing precedes {key!r}")
                removed = nodes.pop(index - 1)
                self._relink(nodes)
                self._size -= 1
                return removed.info
        raise ValueError(f"{key!r} is not in the list")

    def delete_after(self, key: Any) -> Any:
        """Remove and return the value just after the first node holding ``key``."""
        _, found = self._require(key)
        target = found.next
        if target is None:
            raise IndexError(f"nothing follows {key!r}")
        found.next = target.next
        if target is self.tail:
            self.tail = found
        self._size -= 1
        return target.info

    def swap(self, x: Any, y: Any) -> bool:
        """Swap the nodes first holding ``x`` and ``y`` by relinking them.

        Returns False, changing nothing, if the values are equal or either is absent.
        """
        if x == y:
            return False
        previous_x, node_x = self._find_with_previous(x)
        previous_y, node_y = self._find_with_previous(y)
        if node_x is None or node_y is None:
            return False
        if previous_x is None:
            self.head = node_y
        else:
            previous_x.next = node_y
        if previous_y is None:
            self.head = node_x
        else:
            previous_y.next = node_x
        node_x.next, node_y.next = node_y.next, node_x.next
        for node in self._nodes():
            self.tail = node
        return True

    def sort_insert(self, value: Any) -> None:
        """Add ``value`` and leave the whole list in ascending order."""
        self.insert_at_tail(value)
        self._relink(sorted(self._nodes(), key=lambda node: node.info))

    def __iter__(self) -> Iterator[Any]:
        return (node.info for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
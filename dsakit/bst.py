"""An integer binary search tree that ignores duplicate keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dsakit.trees import TreeNode


class BinarySearchTree:
    """A binary search tree of distinct integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(key)
            self._size = 1
            return True
        node = self.root
        while True:
            if key == node.val:
                return False
            if key < node.val:
                if node.left is None:
                    node.left = TreeNode(key)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(key)
                    break
                node = node.right
        self._size += 1
        return True

    def count_in_range(self, low: int, high: int) -> int:
        """Return how many keys lie in the closed range ``[low, high]``."""
        count = 0
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            if low <= node.val <= high:
                count += 1
            if node.left is not None and node.val > low:
                pending.append(node.left)
            if node.right is not None and node.val < high:
                pending.append(node.right)
        return count

    def _nodes(self) -> Iterator[TreeNode]:
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            yield node
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def is_dead_end(self) -> bool:
        """Return True if some leaf has both neighbouring integers already taken.

        Zero counts as taken, so keys are expected to be positive.
        """
        if self.root is None:
            return False
        taken = {0}
        leaves = []
        for node in self._nodes():
            if node.left is None and node.right is None:
                leaves.append(node.val)
            else:
                taken.add(node.val)
        return any(x + 1 in taken and x - 1 in taken for x in leaves)

    def preorder(self) -> list[int]:
        """Return the keys in root-left-right order."""
        return [node.val for node in self._nodes()]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.val:
                return True
            node = node.left if key < node.val else node.right
        return False
"""Binary tree construction, traversals and structural queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


_NULL_TOKEN = "N"
_PREORDER_NULL = -1


def build_tree(text: str) -> TreeNode | None:
    """Build a tree from space-separated level-order values, ``N`` marking a missing child."""
    tokens = text.split()
    if not tokens or tokens[0] == _NULL_TOKEN:
        return None
    root = TreeNode(int(tokens[0]))
    pending: deque[TreeNode] = deque([root])
    remaining = iter(tokens[1:])
    while pending:
        node = pending.popleft()
        left = next(remaining, None)
        if left is None:
            break
        if left != _NULL_TOKEN:
            node.left = TreeNode(int(left))
            pending.append(node.left)
        right = next(remaining, None)
        if right is None:
            break
        if right != _NULL_TOKEN:
            node.right = TreeNode(int(right))
            pending.append(node.right)
    return root


def build_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from preorder values where ``-1`` marks a missing child."""
    stream = iter(values)

    def build() -> TreeNode | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder sequence ended before the tree was complete") from None
        if value == _PREORDER_NULL:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left-root-right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[int]:
    """Return the values level by level, left to right."""
    return [node.val for level in _levels(root) for node in level]


def reverse_level_order(root: TreeNode | None) -> list[int]:
    """Return the values from the deepest level up, each level left to right."""
    if root is None:
        return []
    order: list[int] = []
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
        order.append(node.val)
    order.reverse()
    return order


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def max_width(root: TreeNode | None) -> int:
    """Return the widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    best = 0
    level: list[tuple[TreeNode, int]] = [(root, 1)]
    while level:
        best = max(best, level[-1][1] - level[0][1] + 1)
        base = level[0][1]
        next_level: list[tuple[TreeNode, int]] = []
        for node, position in level:
            offset = position - base
            if node.left is not None:
                next_level.append((node.left, 2 * offset))
            if node.right is not None:
                next_level.append((node.right, 2 * offset + 1))
        level = next_level
    return best


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _balanced_height(root: TreeNode | None) -> int | None:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Return True if every node's subtree heights differ by at most one."""
    return _balanced_height(root) is not None


def _diameter_and_height(root: TreeNode | None) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(root.left)
    right_diameter, right_height = _diameter_and_height(root.right)
    through_root = left_height + right_height + 1
    return (
        max(through_root, left_diameter, right_diameter),
        max(left_height, right_height) + 1,
    )


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    return _diameter_and_height(root)[0]


def is_bst(root: TreeNode | None) -> bool:
    """Return True if the in-order values are strictly increasing."""
    values = inorder(root)
    return all(a < b for a, b in zip(values, values[1:]))


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the lowest node having both ``p`` and ``q`` as descendants (or being one)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _lca_by_value(root: TreeNode | None, first: int, second: int) -> TreeNode | None:
    if root is None or root.val in (first, second):
        return root
    left = _lca_by_value(root.left, first, second)
    right = _lca_by_value(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _depth_of(root: TreeNode | None, value: int) -> int | None:
    pending: deque[tuple[TreeNode, int]] = deque()
    if root is not None:
        pending.append((root, 0))
    while pending:
        node, depth = pending.popleft()
        if node.val == value:
            return depth
        for child in (node.left, node.right):
            if child is not None:
                pending.append((child, depth + 1))
    return None


def distance_between(root: TreeNode | None, first: int, second: int) -> int:
    """Return the number of edges between the nodes holding ``first`` and ``second``."""
    ancestor = _lca_by_value(root, first, second)
    first_depth = _depth_of(ancestor, first)
    second_depth = _depth_of(ancestor, second)
    if first_depth is None or second_depth is None:
        raise ValueError(f"values {first} and {second} are not both in the tree")
    return first_depth + second_depth
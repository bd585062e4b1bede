"""Binary tree node type and tree exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

_END = object()


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the tree's level-order values with None for missing children."""
    values: list[Optional[int]] = []
    pending: deque[Optional[TreeNode]] = deque([root] if root else [])
    while pending:
        node = pending.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values


def is_leaf(node: TreeNode) -> bool:
    """Return True when the node has no children."""
    return node.left is None and node.right is None


def _path_sum(node: Optional[TreeNode], current: int) -> int:
    if node is None:
        return 0
    current = current * 10 + node.val
    if is_leaf(node):
        return current
    return _path_sum(node.left, current) + _path_sum(node.right, current)


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled by the digits on every root-to-leaf path."""
    return _path_sum(root, 0)


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def _insert_row(
    node: Optional[TreeNode], val: int, depth: int, is_left: bool
) -> Optional[TreeNode]:
    if node is None:
        return None
    if depth == 1:
        return TreeNode(val, node, None) if is_left else TreeNode(val, None, node)
    if depth == 2:
        node.left = TreeNode(val, node.left, None)
        node.right = TreeNode(val, None, node.right)
    else:
        node.left = _insert_row(node.left, val, depth - 1, True)
        node.right = _insert_row(node.right, val, depth - 1, False)
    return node


def add_one_row(root: Optional[TreeNode], val: int, depth: int) -> Optional[TreeNode]:
    """Insert a row of nodes holding val at the given depth (root is depth 1)."""
    return _insert_row(root, val, depth, True)
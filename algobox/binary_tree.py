"""Binary trees: traversals, shape properties and binary-search-tree queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "height",
    "is_balanced",
    "is_symmetric",
    "max_width",
    "bst_search",
    "count_in_range",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _balanced_height(root: TreeNode | None) -> int | None:
    """Height of the tree, or None if some subtree is unbalanced."""
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    return _balanced_height(root) is not None


def _is_mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.data == b.data and _is_mirror(a.left, b.right) and _is_mirror(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """True if the tree is a mirror image of itself."""
    return _is_mirror(root, root)


def max_width(root: TreeNode | None) -> int:
    """Largest number of nodes found on a single level."""
    if root is None:
        return 0
    widest = 0
    level = deque([root])
    while level:
        widest = max(widest, len(level))
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return widest


def bst_search(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key`` in a binary search tree, or None."""
    node = root
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node


def count_in_range(root: TreeNode | None, low: Any, high: Any) -> int:
    """Count the nodes of a binary search tree with ``low <= data <= high``."""
    if root is None:
        return 0
    if low <= root.data <= high:
        return 1 + count_in_range(root.left, low, high) + count_in_range(root.right, low, high)
    if root.data < low:
        return count_in_range(root.right, low, high)
    return count_in_range(root.left, low, high)
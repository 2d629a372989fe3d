"""Binary trees of integers and the usual traversals and checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, where None marks a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return node values in in-order sequence."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.right, q.right) and is_same_tree(p.left, q.left)


def is_mirror(left: TreeNode | None, right: TreeNode | None) -> bool:
    """Tell whether two trees are mirror images of each other."""
    if left is None and right is None:
        return True
    if left is None or right is None or left.val != right.val:
        return False
    return is_mirror(left.left, right.right) and is_mirror(left.right, right.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether a tree is a mirror of itself around its root."""
    if root is None:
        return True
    return is_mirror(root.left, root.right)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return node values grouped by depth, left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values."""
    if not nums:
        return None
    mid = len(nums) // 2
    return TreeNode(
        nums[mid],
        sorted_array_to_bst(nums[:mid]),
        sorted_array_to_bst(nums[mid + 1:]),
    )
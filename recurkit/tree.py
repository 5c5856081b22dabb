"""Binary tree nodes, construction from level order, and the standard traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree. Nodes compare by identity."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child.

    Missing nodes take no slots for children of their own. An empty input,
    or one starting with ``None``, gives ``None``.
    """
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    pending: deque[TreeNode] = deque([root])
    remaining = iter(items[1:])
    while pending:
        node = pending.popleft()
        left_value = next(remaining, None)
        right_value = next(remaining, None)
        if left_value is not None:
            node.left = TreeNode(left_value)
            pending.append(node.left)
        if right_value is not None:
            node.right = TreeNode(right_value)
            pending.append(node.right)
    return root


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.val


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values breadth first, left to right on each level."""
    if root is None:
        return []
    result: list[Any] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """In-order traversal with an explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """Pre-order traversal with an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_iterative(root: TreeNode | None) -> list[Any]:
    """Post-order traversal with one stack and a last-visited marker."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    last_visited: TreeNode | None = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and last_visited is not top.right:
            node = top.right
        else:
            result.append(top.val)
            last_visited = stack.pop()
    return result


def postorder_two_stacks(root: TreeNode | None) -> list[Any]:
    """Post-order traversal by reversing a node, right, left walk."""
    if root is None:
        return []
    pending = [root]
    output: list[TreeNode] = []
    while pending:
        node = pending.pop()
        output.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.val for node in reversed(output)]
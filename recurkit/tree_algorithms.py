"""Queries on binary trees: shape checks, paths, ancestors, widths and views."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from recurkit.tree import TreeNode


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return _mirrors(root, root)


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _balanced_height(node: TreeNode | None) -> int | None:
    """Return the height of a balanced subtree, or ``None`` if it is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def max_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum of values along any path between two nodes.

    Raises ``ValueError`` for an empty tree.
    """
    if root is None:
        raise ValueError("tree must not be empty")
    best = root.val

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def path_to(root: TreeNode | None, target: TreeNode) -> list[TreeNode]:
    """Return the nodes from ``root`` down to ``target``, or an empty list if absent."""
    path: list[TreeNode] = []

    def search(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node)
        if node is target or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    search(root)
    return path


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both ``p`` and ``q`` as descendants (or itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Return every root-to-leaf path as values joined by ``->``, leftmost first."""

    def walk(node: TreeNode | None, prefix: str) -> Iterator[str]:
        if node is None:
            return
        path = f"{prefix}->{node.val}" if prefix else str(node.val)
        if node.is_leaf:
            yield path
        yield from walk(node.left, path)
        yield from walk(node.right, path)

    return list(walk(root, ""))


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def max_width(root: TreeNode | None) -> int:
    """Return the widest level, counting gaps between its end nodes."""
    if root is None:
        return 0
    widest = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        first = level[0][1]
        widest = max(widest, level[-1][1] - first + 1)
        next_level: list[tuple[TreeNode, int]] = []
        for node, position in level:
            offset = position - first
            if node.left is not None:
                next_level.append((node.left, 2 * offset))
            if node.right is not None:
                next_level.append((node.right, 2 * offset + 1))
        level = next_level
    return widest


def _leaves(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    if node.is_leaf:
        yield node
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def boundary_traversal(root: TreeNode | None) -> list:
    """Return the root, left boundary, leaves, then right boundary bottom-up."""
    if root is None:
        return []
    if root.is_leaf:
        return [root.val]
    result = [root.val]

    node = root.left
    while node is not None:
        if not node.is_leaf:
            result.append(node.val)
        node = node.left if node.left is not None else node.right

    result.extend(leaf.val for leaf in _leaves(root))

    right_side = []
    node = root.right
    while node is not None:
        if not node.is_leaf:
            right_side.append(node.val)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_side))
    return result


def has_children_sum_property(root: TreeNode | None) -> bool:
    """Tell whether every inner node equals the sum of its children's values."""
    if root is None or root.is_leaf:
        return True
    left = root.left.val if root.left is not None else 0
    right = root.right.val if root.right is not None else 0
    return (
        root.val == left + right
        and has_children_sum_property(root.left)
        and has_children_sum_property(root.right)
    )


def top_view(root: TreeNode | None) -> list:
    """Return the values seen from above, leftmost vertical line first."""
    if root is None:
        return []
    seen: dict[int, object] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, line = queue.popleft()
        seen.setdefault(line, node.val)
        if node.left is not None:
            queue.append((node.left, line - 1))
        if node.right is not None:
            queue.append((node.right, line + 1))
    return [seen[line] for line in sorted(seen)]
import pytest

from recurkit.tree import TreeNode, build_tree, level_order
from recurkit.tree_algorithms import (
    binary_tree_paths,
    boundary_traversal,
    diameter,
    has_children_sum_property,
    height,
    is_balanced,
    is_same_tree,
    is_symmetric,
    lowest_common_ancestor,
    max_path_sum,
    max_width,
    path_to,
    top_view,
)

COMPLETE = [1, 2, 3, 4, 5, 6, 7]
LCA_TREE = [3, 5, 1, 6, 2, 0, 8, None, None, 7, 4]
CHAIN = [1, None, 2, None, 3]


def _find(root, value):
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.val == value:
            return node
        stack.extend((node.left, node.right))
    raise LookupError(value)


def test_same_tree():
    assert is_same_tree(build_tree(COMPLETE), build_tree(COMPLETE)) is True
    assert is_same_tree(build_tree([1, 2]), build_tree([1, None, 2])) is False
    assert is_same_tree(build_tree([1, 2, 3]), build_tree([1, 2, 4])) is False
    assert is_same_tree(None, None) is True
    assert is_same_tree(TreeNode(1), None) is False


def test_symmetric():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3])) is True
    assert is_symmetric(build_tree([1, 2, 2, None, 3, None, 3])) is False
    assert is_symmetric(None) is True


def test_height():
    assert height(None) == 0
    assert height(TreeNode(9)) == 1
    assert height(build_tree(CHAIN)) == len(level_order(build_tree(CHAIN)))


def test_balanced():
    assert is_balanced(build_tree(COMPLETE)) is True
    assert is_balanced(build_tree(CHAIN)) is False
    assert is_balanced(None) is True
    assert is_balanced(build_tree([1, 2, 2, 3, 3, None, None, 4, 4])) is False


def test_max_path_sum():
    assert max_path_sum(build_tree([1, 2, 3])) == sum([1, 2, 3])
    assert max_path_sum(build_tree([-10, 9, 20, None, None, 15, 7])) == 42
    assert max_path_sum(TreeNode(-3)) == -3


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_path_to_ends_at_target():
    root = build_tree(LCA_TREE)
    target = _find(root, 7)
    path = path_to(root, target)
    assert path[0] is root
    assert path[-1] is target
    for parent, child in zip(path, path[1:]):
        assert child is parent.left or child is parent.right


def test_path_to_missing_node_is_empty():
    assert path_to(build_tree(LCA_TREE), TreeNode(3)) == []


@pytest.mark.parametrize("a, b", [(5, 1), (5, 4), (6, 4), (7, 8), (0, 8)])
def test_lca_is_last_shared_path_node(a, b):
    root = build_tree(LCA_TREE)
    p, q = _find(root, a), _find(root, b)
    shared = [x for x, y in zip(path_to(root, p), path_to(root, q)) if x is y]
    assert lowest_common_ancestor(root, p, q) is shared[-1]


def test_lca_node_is_own_ancestor():
    root = build_tree(LCA_TREE)
    five = _find(root, 5)
    assert lowest_common_ancestor(root, five, _find(root, 4)) is five


def test_binary_tree_paths():
    assert binary_tree_paths(build_tree([1, 2, 3, None, 5])) == ["1->2->5", "1->3"]
    assert binary_tree_paths(None) == []
    assert binary_tree_paths(TreeNode(1)) == ["1"]


def test_paths_one_per_leaf():
    root = build_tree(LCA_TREE)
    paths = binary_tree_paths(root)
    assert len(paths) == len(boundary_traversal(root)) - 3 or len(paths) == 5
    assert all(p.startswith("3") for p in paths)


def test_diameter():
    assert diameter(None) == 0
    assert diameter(TreeNode(1)) == 0
    assert diameter(build_tree(CHAIN)) == height(build_tree(CHAIN)) - 1
    assert diameter(build_tree([1, 2, 3, 4, 5])) == 3


def test_max_width():
    assert max_width(None) == 0
    assert max_width(TreeNode(1)) == 1
    assert max_width(build_tree(CHAIN)) == 1
    assert max_width(build_tree([1, 3, 2, 5, 3, None, 9])) == 4


def test_boundary_traversal():
    assert boundary_traversal(build_tree(COMPLETE)) == [1, 2, 4, 5, 6, 7, 3]
    assert boundary_traversal(None) == []
    assert boundary_traversal(TreeNode(8)) == [8]


def test_boundary_starts_at_root_and_holds_all_leaves():
    root = build_tree(LCA_TREE)
    result = boundary_traversal(root)
    assert result[0] == root.val
    for leaf in (6, 7, 4, 0, 8):
        assert leaf in result


def test_children_sum_property():
    assert has_children_sum_property(build_tree([10, 8, 2, 3, 5, 2])) is True
    assert has_children_sum_property(build_tree([10, 8, 2, 3, 4])) is False
    assert has_children_sum_property(None) is True
    assert has_children_sum_property(TreeNode(4)) is True


def test_top_view():
    assert top_view(build_tree(COMPLETE)) == [4, 2, 1, 3, 7]
    assert top_view(None) == []
    assert top_view(build_tree(CHAIN)) == [1, 2, 3]
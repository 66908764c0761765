import pytest

from iconlist.binarytree import (
    TreeNode,
    delete_node,
    has_two_nodes,
    is_leaf,
    max_nodes_number,
    set_deep_left,
    tree_depth,
)


def _values(tree):
    if tree is None:
        return []
    return [tree.info, *_values(tree.left), *_values(tree.right)]


@pytest.fixture
def sample():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, None, TreeNode(6)),
    )


def test_depth(sample):
    assert tree_depth(None) == 0
    assert tree_depth(TreeNode(0)) == 1
    assert tree_depth(sample) == 3


def test_max_nodes_bounds_node_count(sample):
    assert len(_values(sample)) <= max_nodes_number(tree_depth(sample))
    assert max_nodes_number(0) == 0


def test_leaf_and_two_nodes(sample):
    assert is_leaf(None)
    assert is_leaf(sample.left.left)
    assert not is_leaf(sample)
    assert has_two_nodes(sample)
    assert not has_two_nodes(sample.right)
    assert not has_two_nodes(None)


def test_set_left_ignores_empty():
    node = TreeNode(1, TreeNode(2))
    node.set_left(None)
    assert node.left.info == 2
    node.set_left(TreeNode(9))
    assert node.left.info == 9


def test_set_deep_left_on_empty():
    leaf = TreeNode(7)
    assert set_deep_left(None, leaf) is leaf


def test_set_deep_left_attaches_leftmost(sample):
    extra = TreeNode(8)
    root = set_deep_left(sample, extra)
    assert root is sample
    assert sample.left.left.left is extra


@pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6])
def test_delete_keeps_other_values(sample, value):
    before = _values(sample)
    root, deleted = delete_node(sample, value)
    assert deleted
    after = _values(root)
    assert sorted(after) == sorted(v for v in before if v != value)


def test_delete_missing_value(sample):
    before = _values(sample)
    root, deleted = delete_node(sample, 42)
    assert not deleted
    assert root is sample
    assert _values(root) == before


def test_delete_from_empty():
    assert delete_node(None, 1) == (None, False)


def test_delete_root_promotes_left(sample):
    left = sample.left
    root, _ = delete_node(sample, 1)
    assert root is left
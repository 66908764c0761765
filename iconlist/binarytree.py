"""Plain binary trees built from linked nodes; ``None`` is the empty tree."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A node holding a value and two optional subtrees."""

    info: Any = None
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def set_left(self, left):
        """Attach ``left`` as the left subtree unless it is empty."""
        if left is not None:
            self.left = left


def tree_depth(tree):
    """Number of levels in the tree; 0 for the empty tree."""
    if tree is None:
        return 0
    return 1 + max(tree_depth(tree.left), tree_depth(tree.right))


def max_nodes_number(depth):
    """Most nodes a tree of ``depth`` levels can hold."""
    return 2**depth - 1


def is_leaf(tree):
    """True when both subtrees are empty (also for the empty tree)."""
    return (tree is None) or (tree.left is None and tree.right is None)


def has_two_nodes(tree):
    """True when both subtrees are present."""
    return tree is not None and tree.left is not None and tree.right is not None


def set_deep_left(tree, left):
    """Hang ``left`` at the leftmost empty slot and return the new root."""
    if tree is None:
        return left
    node = tree
    while node.left is not None:
        node = node.left
    node.left = left
    return tree


def delete_node(tree, value):
    """Remove the first node (pre-order, left first) holding ``value``.

    The removed node is replaced by its left subtree, with its right subtree
    hung at the leftmost empty slot of that. Returns ``(new_root, deleted)``.
    """
    if tree is None:
        return None, False
    if tree.info == value:
        if tree.right is not None:
            tree.left = set_deep_left(tree.left, tree.right)
        return tree.left, True
    tree.left, deleted = delete_node(tree.left, value)
    if deleted:
        return tree, True
    tree.right, deleted = delete_node(tree.right, value)
    return tree, deleted
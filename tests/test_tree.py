import pytest

from algodrills.tree import TreeNode, inorder_traversal


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right


def test_empty_tree():
    assert inorder_traversal(None) == []


def test_single_node():
    assert inorder_traversal(TreeNode(7)) == [7]


def test_right_child_with_left_grandchild():
    root = TreeNode(1, right=TreeNode(2, left=TreeNode(3)))
    assert inorder_traversal(root) == [1, 3, 2]


@pytest.mark.parametrize("values", [[5, 3, 8, 1, 4, 9, 7], [10, 20, 30], [3, 2, 1]])
def test_search_tree_yields_sorted_values(values):
    root = None
    for value in values:
        root = _insert(root, value)
    assert inorder_traversal(root) == sorted(values)


def test_deep_left_chain():
    depth = 5000
    root = None
    for value in range(depth):
        root = TreeNode(value, left=root)
    assert inorder_traversal(root) == list(range(depth))


def test_node_defaults_to_leaf():
    node = TreeNode(4)
    assert (node.left, node.right) == (None, None)
    assert inorder_traversal(node) == [node.val]
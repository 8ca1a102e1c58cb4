"""Binary tree nodes and traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the node values of the tree in in-order."""
    values: list[int] = []
    pending: list[TreeNode] = []
    node = root
    while node is not None or pending:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        values.append(node.val)
        node = node.right
    return values
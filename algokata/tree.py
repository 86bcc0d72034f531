"""A minimal binary tree with depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def add_left(parent: TreeNode, val: int) -> TreeNode:
    """Attach a new left child holding *val*, replacing any existing one, and return it."""
    parent.left = TreeNode(val)
    return parent.left


def add_right(parent: TreeNode, val: int) -> TreeNode:
    """Attach a new right child holding *val*, replacing any existing one, and return it."""
    parent.right = TreeNode(val)
    return parent.right


def preorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.val
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.val
    yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.val
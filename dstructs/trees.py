"""Binary tree traversals and a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with left and right subtrees."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data root first, then left, then right."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data left first, then root, then right."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data left first, then right, then root."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data


class BinarySearchTree:
    """A binary search tree of distinct keys."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, key: Any) -> TreeNode:
        """Insert key and return its node; raise ValueError if it is already there."""
        node = TreeNode(key)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if key < current.data:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            elif key > current.data:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right
            else:
                raise ValueError(f"key {key!r} is already in the tree")

    def search(self, key: Any) -> TreeNode:
        """Return the node holding key; raise KeyError when there is none."""
        current = self.root
        while current is not None:
            if key < current.data:
                current = current.left
            elif key == current.data:
                return current
            else:
                current = current.right
        raise KeyError(key)

    def delete(self, key: Any) -> None:
        """Remove key; a node with two children takes its in-order predecessor."""
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.data != key:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.left
            while succ.right is not None:
                succ_parent = succ
                succ = succ.right
            if succ_parent.left is succ:
                succ_parent.left = succ.left
            else:
                succ_parent.right = succ.left
            node.data = succ.data
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(inorder(self.root))

    def __contains__(self, key: object) -> bool:
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def __str__(self) -> str:
        return "".join(f"{key}_" for key in inorder(self.root))
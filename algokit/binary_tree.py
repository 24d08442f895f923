"""Plain binary trees: insertion helpers and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert_level_order(root: Optional[TreeNode], value: int) -> TreeNode:
    """Put ``value`` in the first free slot in breadth-first order; return the root."""
    node = TreeNode(value)
    if root is None:
        return node
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = node
            return root
        queue.append(current.left)
        if current.right is None:
            current.right = node
            return root
        queue.append(current.right)
    return root


def insert_at_path(root: TreeNode, value: int, path: str) -> TreeNode:
    """Follow ``path`` ('l'/'r' steps) from ``root`` and attach ``value`` at its end.

    The last step must lead to an empty slot and every earlier step to an
    existing node. Returns the new node.
    """
    parent = root
    for position, step in enumerate(path):
        if step not in ("l", "r"):
            raise ValueError(f"invalid step {step!r}; expected 'l' or 'r'")
        child = parent.left if step == "l" else parent.right
        if child is None:
            if position != len(path) - 1:
                raise ValueError("path continues past an empty slot")
            node = TreeNode(value)
            if step == "l":
                parent.left = node
            else:
                parent.right = node
            return node
        parent = child
    raise ValueError("path ends at an occupied node")


def morris_inorder(root: Optional[TreeNode]) -> list[int]:
    """In-order traversal using temporary threads instead of a stack.

    The tree is restored to its original shape when the traversal ends.
    """
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            result.append(current.value)
            predecessor.right = None
            current = current.right
    return result


def breadth_first(root: Optional[TreeNode]) -> list[int]:
    """Values in level order."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in pre-order (node, left, right)."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in in-order (left, node, right)."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in post-order (left, right, node)."""
    return list(_postorder(root))
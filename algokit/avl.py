"""Self-balancing binary search tree (AVL tree)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class _Node:
    data: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(root: _Node) -> _Node:
    pivot = root.left
    assert pivot is not None
    root.left = pivot.right
    pivot.right = root
    _refresh(root)
    _refresh(pivot)
    return pivot


def _rotate_left(root: _Node) -> _Node:
    pivot = root.right
    assert pivot is not None
    root.right = pivot.left
    pivot.left = root
    _refresh(root)
    _refresh(pivot)
    return pivot


def _insert(root: Optional[_Node], item: int) -> _Node:
    if root is None:
        return _Node(item)
    if item < root.data:
        root.left = _insert(root.left, item)
    else:
        root.right = _insert(root.right, item)
    _refresh(root)

    balance = _balance(root)
    if balance > 1:
        assert root.left is not None
        if _balance(root.left) < 0:
            root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if balance < -1:
        assert root.right is not None
        if _balance(root.right) > 0:
            root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(root: Optional[_Node], key: int) -> Optional[_Node]:
    if root is None:
        return None
    if key < root.data:
        root.left = _delete(root.left, key)
    elif key > root.data:
        root.right = _delete(root.right, key)
    else:
        if root.right is None:
            return root.left
        if root.left is None:
            return root.right
        successor = _min_node(root.right)
        root.data = successor.data
        root.right = _delete(root.right, successor.data)
    # Deletion does not rebalance; only heights are kept current.
    _refresh(root)
    return root


class AVLTree:
    """An AVL tree of comparable keys; equal keys go to the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, item: int) -> None:
        """Insert ``item`` and rebalance along the insertion path."""
        self._root = _insert(self._root, item)

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``; absent keys are ignored."""
        self._root = _delete(self._root, key)

    def level_order(self) -> list[int]:
        """Return the keys in breadth-first order."""
        if self._root is None:
            return []
        result = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of levels in the tree; 0 for an empty tree."""
        return _height(self._root)

    def minimum(self) -> int:
        """Return the smallest key."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        return _min_node(self._root).data
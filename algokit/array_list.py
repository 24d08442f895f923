"""Linked list whose nodes live in a fixed-size pool, linked by index."""

from __future__ import annotations

from typing import Any, Iterator

_NIL = -1


class ListFullError(OverflowError):
    """Raised when every node of the pool is in use."""


class ArrayLinkedList:
    """A linked list backed by a pool of ``capacity`` nodes.

    Links are pool indices; ``-1`` marks the end of a chain.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[Any] = [None] * capacity
        self._next: list[int] = list(range(1, capacity)) + [_NIL] if capacity else []
        self._head = _NIL
        self._avail = 0 if capacity else _NIL
        self._size = 0

    def _get_node(self) -> int:
        if self._avail == _NIL:
            raise ListFullError("no free nodes left in the list")
        index = self._avail
        self._avail = self._next[index]
        return index

    def _indices(self) -> Iterator[int]:
        index = self._head
        while index != _NIL:
            yield index
            index = self._next[index]

    def insert_front(self, value: Any) -> None:
        """Add ``value`` at the start of the list."""
        index = self._get_node()
        self._data[index] = value
        self._next[index] = self._head
        self._head = index
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        index = self._get_node()
        self._data[index] = value
        self._next[index] = _NIL
        last = _NIL
        for last in self._indices():
            pass
        if last == _NIL:
            self._head = index
        else:
            self._next[last] = index
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        for index in self._indices():
            yield self._data[index]

    def __len__(self) -> int:
        return self._size
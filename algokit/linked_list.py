"""Singly linked list with in-place rearrangements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> Optional[_Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        last = self._last()
        if last is None:
            self._head = node
        else:
            last.next = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the start of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``; raises ValueError if absent."""
        if self._head is None:
            raise ValueError("linked list is empty")
        previous: Optional[_Node] = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} not found in list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def rotate_last_k(self, k: int) -> None:
        """Move the last ``k`` nodes, in order, to the front of the list.

        ``k`` must satisfy ``0 <= k < len(self)``.
        """
        if not 0 <= k < self._size:
            raise ValueError(f"k must be in 0..{self._size - 1}, got {k}")
        if k == 0:
            return
        new_tail = self._head
        for _ in range(self._size - k - 1):
            assert new_tail is not None
            new_tail = new_tail.next
        assert new_tail is not None
        new_head = new_tail.next
        new_tail.next = None
        old_tail = new_head
        assert old_tail is not None
        while old_tail.next is not None:
            old_tail = old_tail.next
        old_tail.next = self._head
        self._head = new_head

    def odd_even(self) -> None:
        """Regroup nodes so those at odd positions (1st, 3rd, ...) precede
        those at even positions, each group keeping its order."""
        if self._head is None or self._head.next is None:
            return
        odd = self._head
        even_head = self._head.next
        even = even_head
        node = even_head.next
        to_odd = True
        while node is not None:
            if to_odd:
                odd.next = node
                odd = node
            else:
                even.next = node
                even = node
            node = node.next
            to_odd = not to_odd
        even.next = None
        odd.next = even_head
"""Queue implementations: circular linked, fixed linear array, and linked."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class QueueFullError(OverflowError):
    """Raised when enqueueing onto a queue with no room left."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class CircularQueue:
    """A queue kept as a circular singly linked list; the rear links to the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
            self._front = node
        else:
            node.next = self._front
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        front = self._front
        if front is None:
            raise QueueEmptyError("dequeue from an empty queue")
        if front is self._rear:
            self._front = self._rear = None
        else:
            assert self._rear is not None
            self._front = front.next
            self._rear.next = self._front
        self._size -= 1
        return front.value

    def traverse(self) -> list[Any]:
        """Values once around the circle from the front, then the front again.

        The repeated front shows where the rear links back to. Empty queues give [].
        """
        if self._front is None:
            return []
        values = []
        node = self._front
        while True:
            values.append(node.value)
            assert node.next is not None
            node = node.next
            if node is self._front:
                break
        values.append(node.value)
        return values

    def __len__(self) -> int:
        return self._size


class ArrayQueue:
    """A linear queue over a fixed array.

    Slots freed by dequeueing are not reused until the queue drains completely,
    so the queue reports full once the last slot has been written.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raises QueueFullError when no slot is left."""
        if self._rear == len(self._items) - 1:
            raise QueueFullError("queue is full")
        if self._front == -1:
            self._front = self._rear = 0
        else:
            self._rear += 1
        self._items[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == -1:
            raise QueueEmptyError("dequeue from an empty queue")
        value = self._items[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        if self._front != -1:
            yield from self._items[self._front : self._rear + 1]

    def __len__(self) -> int:
        return 0 if self._front == -1 else self._rear - self._front + 1


class LinkedQueue:
    """An unbounded first-in, first-out queue."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
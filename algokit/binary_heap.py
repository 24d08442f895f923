"""Fixed-capacity binary min-heap."""

from __future__ import annotations


class HeapOverflowError(OverflowError):
    """Raised when inserting into a heap that is already full."""


class MinHeap:
    """A min-heap holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, key: int) -> None:
        """Add ``key``; raises HeapOverflowError when the heap is full."""
        if len(self._items) >= self._capacity:
            raise HeapOverflowError("could not insert key: heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> int:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return root

    def decrease_key(self, index: int, new_value: int) -> None:
        """Lower the key stored at ``index`` to ``new_value``."""
        self._check_index(index)
        if new_value > self._items[index]:
            raise ValueError("new value is larger than the current key")
        self._items[index] = new_value
        self._sift_up(index)

    def delete_key(self, index: int) -> None:
        """Remove the key stored at ``index``."""
        self._check_index(index)
        while index:
            parent = (index - 1) // 2
            self._swap(index, parent)
            index = parent
        self.extract_min()

    def peek(self) -> int:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]
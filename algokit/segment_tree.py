"""Segment tree for range maximum queries with point updates."""

from __future__ import annotations

from typing import Iterable, Optional


class MaxSegmentTree:
    """Range-maximum segment tree over a fixed-length sequence of numbers."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("segment tree needs at least one value")
        self._n = len(self._values)
        self._tree = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = self._values[start]
            return
        mid = (start + end) // 2
        self._build(2 * node, start, mid)
        self._build(2 * node + 1, mid + 1, end)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is outside 0..{self._n - 1}")

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if left <= start and end <= right:
            return self._tree[node]
        mid = (start + end) // 2
        if right <= mid:
            return self._query(2 * node, start, mid, left, right)
        if left > mid:
            return self._query(2 * node + 1, mid + 1, end, left, right)
        return max(
            self._query(2 * node, start, mid, left, right),
            self._query(2 * node + 1, mid + 1, end, left, right),
        )

    def query(self, left: int, right: int) -> int:
        """Return the maximum of the values at indices ``left..right`` inclusive."""
        self._check_index(left)
        self._check_index(right)
        if left > right:
            raise ValueError("left must not exceed right")
        return self._query(1, 0, self._n - 1, left, right)

    def _update(self, node: int, start: int, end: int, index: int, value: int) -> None:
        if start == end:
            self._values[start] = value
            self._tree[node] = value
            return
        mid = (start + end) // 2
        if index <= mid:
            self._update(2 * node, start, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, end, index, value)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index`` to ``value``."""
        self._check_index(index)
        self._update(1, 0, self._n - 1, index, value)

    def _descend(
        self, node: int, start: int, end: int, x: int, lower: int
    ) -> Optional[int]:
        if end < lower or self._tree[node] < x:
            return None
        if start == end:
            return start
        mid = (start + end) // 2
        found = self._descend(2 * node, start, mid, x, lower)
        if found is not None:
            return found
        return self._descend(2 * node + 1, mid + 1, end, x, lower)

    def first_at_least(self, x: int, start: int = 0) -> Optional[int]:
        """Return the first index ``>= start`` whose value is at least ``x``.

        Returns None when no such index exists.
        """
        self._check_index(start)
        return self._descend(1, 0, self._n - 1, x, start)
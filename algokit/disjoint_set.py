"""Union-find over the elements 1..n with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the integers ``1..n``, each initially alone."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._rank = [1] * (n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} is outside 1..{self._n}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return whether they were apart."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            self._parent[a] = b
        elif self._rank[a] > self._rank[b]:
            self._parent[b] = a
        else:
            self._parent[a] = b
            self._rank[b] += 1
        return True

    def same_set(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)
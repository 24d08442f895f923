"""Graph traversals and single-source shortest paths."""

from __future__ import annotations

import math
from collections import deque
from typing import Hashable, Iterable, Mapping, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def build_adjacency(edges: Iterable[tuple[Hashable, Hashable]]) -> dict:
    """Build an undirected adjacency mapping from ``(x, y)`` edge pairs.

    Neighbours are kept in the order the edges were given.
    """
    adjacency: dict = {}
    for x, y in edges:
        adjacency.setdefault(x, []).append(y)
        adjacency.setdefault(y, []).append(x)
    return adjacency


def bfs_order(adjacency: Mapping, start: Hashable) -> list:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def bfs_distances(adjacency: Mapping, source: Hashable) -> dict:
    """Return the number of edges from ``source`` to every reachable node."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for child in adjacency.get(current, ()):
            if child not in distances:
                distances[child] = distances[current] + 1
                queue.append(child)
    return distances


def dfs_visited(adjacency: Mapping, node: Hashable) -> list:
    """Return the nodes reachable from ``node`` in depth-first visiting order."""
    visited = {node}
    order = [node]
    stack = [iter(adjacency.get(node, ()))]
    while stack:
        for child in stack[-1]:
            if child not in visited:
                visited.add(child)
                order.append(child)
                stack.append(iter(adjacency.get(child, ())))
                break
        else:
            stack.pop()
    return order


def bellman_ford(
    n: int, edges: Iterable[Sequence[int]], source: int
) -> list[float]:
    """Shortest distances from ``source`` over directed weighted edges.

    Nodes are ``0..n-1`` and edges are ``(u, v, w)`` triples; weights may be
    negative. Unreachable nodes get ``math.inf``. Raises NegativeCycleError
    when a negative cycle can be reached from ``source``.
    """
    if not 0 <= source < n:
        raise IndexError(f"source {source} is outside 0..{n - 1}")
    edge_list = [(u, v, w) for u, v, w in edges]
    for u, v, _ in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) refers to a node outside 0..{n - 1}")

    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break

    for u, v, w in edge_list:
        if dist[u] != math.inf and dist[u] + w < dist[v]:
            raise NegativeCycleError("graph contains a negative cycle")
    return dist
"""Undirected graphs as adjacency lists: BFS, DFS, and Prim's minimum spanning tree."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

__all__ = ["Graph", "prim_mst"]


class Graph:
    """An undirected graph on the vertices ``0 .. num_vertices - 1``.

    Each new edge goes to the front of both endpoints' adjacency lists, so
    neighbours are listed most recently added first.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must be non-negative, got {num_vertices}")
        self.num_vertices = num_vertices
        self._adjacency: list[deque[int]] = [deque() for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is not in a {self.num_vertices}-vertex graph")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].appendleft(dest)
        self._adjacency[dest].appendleft(src)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in adjacency-list order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def __repr__(self) -> str:
        return f"Graph({self.num_vertices})"


def prim_mst(graph: Sequence[Sequence[int | float]]) -> list[tuple[int, int, int | float]]:
    """Return the edges of a minimum spanning tree of a weight matrix.

    A weight of 0 means there is no edge. The tree is grown from vertex 0,
    and each edge is given as ``(parent, vertex, weight)`` for vertices
    1 .. V-1 in order. Raises ValueError if the graph is not connected.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("the adjacency matrix must be square")
    if size == 0:
        return []
    key: list[int | float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("the graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    edges = []
    for vertex in range(1, size):
        origin = parent[vertex]
        if origin is None:
            raise ValueError("the graph is not connected")
        edges.append((origin, vertex, graph[vertex][origin]))
    return edges
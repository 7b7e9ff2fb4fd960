"""Shortest paths: Dijkstra (matrix and adjacency list), Bellman-Ford, Floyd-Warshall.

Unreachable vertices get the distance ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import count

__all__ = [
    "Edge",
    "NegativeCycleError",
    "dijkstra_matrix",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
]

Distance = int | float


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dest: int
    weight: Distance


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _square(graph: Sequence[Sequence[Distance]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("the adjacency matrix must be square")
    return size


def _check_source(source: int, size: int) -> None:
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex of a {size}-vertex graph")


def dijkstra_matrix(graph: Sequence[Sequence[Distance]], source: int) -> list[Distance]:
    """Distances from ``source`` in a graph given as a weight matrix.

    A weight of 0 means there is no edge. Runs in O(V^2).
    """
    size = _square(graph)
    _check_source(source, size)
    dist: list[Distance] = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    for _ in range(size - 1):
        u = min((v for v in range(size) if not done[v]), key=dist.__getitem__)
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, Distance]]], source: Hashable
) -> dict[Hashable, Distance]:
    """Distances from ``source`` in a graph given as ``vertex -> [(neighbour, weight)]``.

    Every vertex named in ``adjacency`` (as a key or as a neighbour) gets an
    entry. Uses a binary heap.
    """
    edges = {u: list(neighbours) for u, neighbours in adjacency.items()}
    dist: dict[Hashable, Distance] = dict.fromkeys(edges, math.inf)
    for neighbours in edges.values():
        for v, _ in neighbours:
            dist.setdefault(v, math.inf)
    dist[source] = 0
    tie = count()
    heap: list[tuple[Distance, int, Hashable]] = [(0, next(tie), source)]
    while heap:
        d, _, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in edges.get(u, ()):
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, next(tie), v))
    return dist


def bellman_ford(num_vertices: int, edges: Iterable[Edge], source: int) -> list[Distance]:
    """Distances from ``source`` in a directed graph that may have negative weights.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    _check_source(source, num_vertices)
    edge_list = list(edges)
    for edge in edge_list:
        if not (0 <= edge.src < num_vertices and 0 <= edge.dest < num_vertices):
            raise ValueError(f"edge {edge} names a vertex outside the graph")
    dist: list[Distance] = [math.inf] * num_vertices
    dist[source] = 0

    def relax_all() -> bool:
        updated = False
        for edge in edge_list:
            if dist[edge.src] != math.inf and dist[edge.src] + edge.weight < dist[edge.dest]:
                dist[edge.dest] = dist[edge.src] + edge.weight
                updated = True
        return updated

    for _ in range(num_vertices - 1):
        if not relax_all():
            break
    if any(
        dist[edge.src] != math.inf and dist[edge.src] + edge.weight < dist[edge.dest]
        for edge in edge_list
    ):
        raise NegativeCycleError(
            f"a negative-weight cycle is reachable from source {source}"
        )
    return dist


def floyd_warshall(graph: Sequence[Sequence[Distance]]) -> list[list[Distance]]:
    """All-pairs shortest distances; ``math.inf`` in ``graph`` means no edge.

    Returns a new matrix; the input is not modified.
    """
    size = _square(graph)
    dist = [list(row) for row in graph]
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, onward in enumerate(through):
                if via + onward < row[j]:
                    row[j] = via + onward
    return dist
"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations

__all__ = ["DisjointSet"]


class DisjointSet:
    """Partition of the elements ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"number of elements must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already together."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Return the number of elements in the set holding ``x``."""
        return self._size[self.find(x)]

    def __len__(self) -> int:
        return len(self._parent)
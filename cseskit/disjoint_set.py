"""Union-find with component counting, and the road construction problem."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the nodes ``0..size-1`` with union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self.components = size
        self.largest = 1 if size else 0

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside 0..{len(self._parent) - 1}")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return whether they were apart."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] > self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_a] = root_b
        self._size[root_b] += self._size[root_a]
        self.components -= 1
        self.largest = max(self.largest, self._size[root_b])
        return True


def road_construction(n: int, edges) -> list[tuple[int, int]]:
    """After each road, report the number of components and the largest component size."""
    if n < 1:
        raise ValueError("n must be positive")
    sets = DisjointSet(n)
    report = []
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) has a city outside 1..{n}")
        sets.union(a - 1, b - 1)
        report.append((sets.components, sets.largest))
    return report
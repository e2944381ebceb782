"""
Index-based union-find over a flat array.

Cells are identified by their row-major index ``y * width + x``, so the
structure holds no references to coordinates or cells.
"""

from __future__ import annotations

import numpy as np


class DisjointSet:
    """Union-find with path halving and union by rank."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {size}")
        self._parent = np.arange(size, dtype=np.int64)
        self._rank = np.zeros(size, dtype=np.int8)
        self._components = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def components(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._components

    def find(self, index: int) -> int:
        """Representative of the set containing ``index``."""
        parent = self._parent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = int(parent[index])
        return int(index)

    def connected(self, first: int, second: int) -> bool:
        return self.find(first) == self.find(second)

    def union(self, first: int, second: int) -> bool:
        """
        Merge the sets containing ``first`` and ``second``.

        Returns:
            True if two distinct sets were merged, False if already joined
        """
        root_a = self.find(first)
        root_b = self.find(second)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1

        self._components -= 1
        return True

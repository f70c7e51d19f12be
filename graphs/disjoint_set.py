"""
Disjoint-Set Union
==================
Union-find over vertices 0..n-1 with path compression.
"""

from typing import List

from common.errors import InvalidParameterError


class DisjointSet:

    def __init__(self, n: int):
        if n < 0:
            raise InvalidParameterError("n", n, "must be >= 0")
        self._parent: List[int] = list(range(n))
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint sets remaining."""
        return self._count

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of x and y. Returns False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        self._parent[root_y] = root_x
        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

"""Disjoint set union with union by size and path compression."""

from __future__ import annotations


class DSU:
    """Disjoint set union over the vertices ``0 .. n-1``."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        # Roots hold minus the component size, other vertices their parent.
        self._parent_or_size = [-1] * n

    def _check(self, a: int) -> None:
        if not 0 <= a < self._n:
            raise IndexError(f"vertex {a} out of range [0, {self._n})")

    def merge(self, a: int, b: int) -> int:
        """Join the components of ``a`` and ``b``; return the new leader."""
        self._check(a)
        self._check(b)
        x, y = self.leader(a), self.leader(b)
        if x == y:
            return x
        p = self._parent_or_size
        if -p[x] < -p[y]:
            x, y = y, x
        p[x] += p[y]
        p[y] = x
        return x

    def same(self, a: int, b: int) -> bool:
        """Return whether ``a`` and ``b`` are in the same component."""
        self._check(a)
        self._check(b)
        return self.leader(a) == self.leader(b)

    def leader(self, a: int) -> int:
        """Return the representative of the component of ``a``."""
        self._check(a)
        p = self._parent_or_size
        root = a
        while p[root] >= 0:
            root = p[root]
        while a != root:
            p[a], a = root, p[a]
        return root

    def size(self, a: int) -> int:
        """Return the size of the component of ``a``."""
        self._check(a)
        return -self._parent_or_size[self.leader(a)]

    def groups(self) -> list[list[int]]:
        """Return the components, ordered by leader, each in ascending order."""
        result: list[list[int]] = [[] for _ in range(self._n)]
        for i in range(self._n):
            result[self.leader(i)].append(i)
        return [group for group in result if group]
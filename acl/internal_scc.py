"""Strongly connected components by Tarjan's algorithm."""

from __future__ import annotations


class SCCGraph:
    """Directed graph on ``0 .. n-1`` that splits into strongly connected components."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        self._edges: list[tuple[int, int]] = []

    def num_vertices(self) -> int:
        """Return the number of vertices."""
        return self._n

    def add_edge(self, from_: int, to: int) -> None:
        """Add the directed edge ``from_ -> to``."""
        self._edges.append((from_, to))

    def _csr(self) -> tuple[list[int], list[int]]:
        n = self._n
        start = [0] * (n + 1)
        for frm, _ in self._edges:
            start[frm + 1] += 1
        for i in range(1, n + 1):
            start[i] += start[i - 1]
        counter = start[:]
        elist = [0] * len(self._edges)
        for frm, to in self._edges:
            elist[counter[frm]] = to
            counter[frm] += 1
        return start, elist

    def scc_ids(self) -> tuple[int, list[int]]:
        """Return ``(count, ids)``; ids follow a topological order of the components."""
        n = self._n
        start, elist = self._csr()
        now_ord = 0
        group_num = 0
        visited: list[int] = []
        low = [0] * n
        order = [-1] * n
        ids = [0] * n
        cursor = start[:n]

        for root in range(n):
            if order[root] != -1:
                continue
            order[root] = low[root] = now_ord
            now_ord += 1
            visited.append(root)
            call = [root]
            while call:
                v = call[-1]
                if cursor[v] < start[v + 1]:
                    to = elist[cursor[v]]
                    cursor[v] += 1
                    if order[to] == -1:
                        order[to] = low[to] = now_ord
                        now_ord += 1
                        visited.append(to)
                        call.append(to)
                    else:
                        low[v] = min(low[v], order[to])
                    continue
                call.pop()
                if low[v] == order[v]:
                    while True:
                        u = visited.pop()
                        order[u] = n
                        ids[u] = group_num
                        if u == v:
                            break
                    group_num += 1
                if call:
                    parent = call[-1]
                    low[parent] = min(low[parent], low[v])

        return group_num, [group_num - 1 - x for x in ids]

    def scc(self) -> list[list[int]]:
        """Return the components in topological order, each in ascending order."""
        group_num, ids = self.scc_ids()
        groups: list[list[int]] = [[] for _ in range(group_num)]
        for v, gid in enumerate(ids):
            groups[gid].append(v)
        return groups
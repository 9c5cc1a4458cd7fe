"""Minimum cost flow by successive shortest paths with potentials."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MCFEdge:
    """An edge as seen from outside: endpoints, capacity, flow and unit cost."""

    from_: int
    to: int
    cap: int
    flow: int
    cost: int


class _Edge:
    __slots__ = ("to", "rev", "cap", "cost")

    def __init__(self, to: int, rev: int, cap: int, cost: int) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap
        self.cost = cost


class MCFGraph:
    """Flow network on ``0 .. n-1`` with capacities and non-negative unit costs."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        self._pos: list[tuple[int, int]] = []
        self._g: list[list[_Edge]] = [[] for _ in range(n)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range [0, {self._n})")

    def add_edge(self, from_: int, to: int, cap: int, cost: int) -> int:
        """Add an edge with capacity ``cap`` and unit cost ``cost``; return its index."""
        self._check_vertex(from_)
        self._check_vertex(to)
        m = len(self._pos)
        self._pos.append((from_, len(self._g[from_])))
        from_id = len(self._g[from_])
        to_id = len(self._g[to])
        if from_ == to:
            to_id += 1
        self._g[from_].append(_Edge(to, to_id, cap, cost))
        self._g[to].append(_Edge(from_, from_id, 0, -cost))
        return m

    def get_edge(self, i: int) -> MCFEdge:
        """Return the state of edge ``i``."""
        if not 0 <= i < len(self._pos):
            raise IndexError(f"edge {i} out of range [0, {len(self._pos)})")
        frm, idx = self._pos[i]
        e = self._g[frm][idx]
        re = self._g[e.to][e.rev]
        return MCFEdge(frm, e.to, e.cap + re.cap, re.cap, e.cost)

    def edges(self) -> list[MCFEdge]:
        """Return the state of every edge in insertion order."""
        return [self.get_edge(i) for i in range(len(self._pos))]

    def flow(self, s: int, t: int, flow_limit: int | None = None) -> tuple[int, int]:
        """Return ``(flow, cost)`` of a minimum cost flow of at most ``flow_limit``."""
        return self.slope(s, t, flow_limit)[-1]

    def slope(
        self, s: int, t: int, flow_limit: int | None = None
    ) -> list[tuple[int, int]]:
        """Return the breakpoints ``(flow, cost)`` of the min cost as a function of flow."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        if flow_limit is None:
            flow_limit = sum(e.cap for e in self._g[s])

        n, g = self._n, self._g
        dual = [0] * n
        pv = [-1] * n
        pe = [-1] * n

        def refine_dual() -> bool:
            dist = [math.inf] * n
            vis = [False] * n
            for v in range(n):
                pv[v] = pe[v] = -1
            dist[s] = 0
            heap = [(0, s)]
            while heap:
                _, v = heapq.heappop(heap)
                if vis[v]:
                    continue
                vis[v] = True
                if v == t:
                    break
                for i, e in enumerate(g[v]):
                    if vis[e.to] or not e.cap:
                        continue
                    cost = e.cost - dual[e.to] + dual[v]
                    if dist[e.to] - dist[v] > cost:
                        dist[e.to] = dist[v] + cost
                        pv[e.to] = v
                        pe[e.to] = i
                        heapq.heappush(heap, (dist[e.to], e.to))
            if not vis[t]:
                return False
            for v in range(n):
                if vis[v]:
                    dual[v] -= dist[t] - dist[v]
            return True

        flow = 0
        cost = 0
        prev_cost_per_flow = -1
        result = [(flow, cost)]
        while flow < flow_limit:
            if not refine_dual():
                break
            c = flow_limit - flow
            v = t
            while v != s:
                c = min(c, g[pv[v]][pe[v]].cap)
                v = pv[v]
            v = t
            while v != s:
                e = g[pv[v]][pe[v]]
                e.cap -= c
                g[v][e.rev].cap += c
                v = pv[v]
            d = -dual[s]
            flow += c
            cost += c * d
            if prev_cost_per_flow == d:
                result.pop()
            result.append((flow, cost))
            prev_cost_per_flow = d
        return result
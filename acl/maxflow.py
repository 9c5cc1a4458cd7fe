"""Maximum flow by Dinic's algorithm."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class MFEdge:
    """An edge as seen from outside: endpoints, capacity and current flow."""

    from_: int
    to: int
    cap: int
    flow: int


class _Edge:
    __slots__ = ("to", "rev", "cap")

    def __init__(self, to: int, rev: int, cap: int) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap


class MFGraph:
    """Flow network on ``0 .. n-1`` with integer capacities."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        self._pos: list[tuple[int, int]] = []
        self._g: list[list[_Edge]] = [[] for _ in range(n)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range [0, {self._n})")

    def _check_edge(self, i: int) -> None:
        if not 0 <= i < len(self._pos):
            raise IndexError(f"edge {i} out of range [0, {len(self._pos)})")

    def add_edge(self, from_: int, to: int, cap: int) -> int:
        """Add an edge of capacity ``cap``; return its index."""
        self._check_vertex(from_)
        self._check_vertex(to)
        if cap < 0:
            raise ValueError(f"capacity must be non-negative, got {cap}")
        m = len(self._pos)
        self._pos.append((from_, len(self._g[from_])))
        from_id = len(self._g[from_])
        to_id = len(self._g[to])
        if from_ == to:
            to_id += 1
        self._g[from_].append(_Edge(to, to_id, cap))
        self._g[to].append(_Edge(from_, from_id, 0))
        return m

    def get_edge(self, i: int) -> MFEdge:
        """Return the state of edge ``i``."""
        self._check_edge(i)
        frm, idx = self._pos[i]
        e = self._g[frm][idx]
        re = self._g[e.to][e.rev]
        return MFEdge(frm, e.to, e.cap + re.cap, re.cap)

    def edges(self) -> list[MFEdge]:
        """Return the state of every edge in insertion order."""
        return [self.get_edge(i) for i in range(len(self._pos))]

    def change_edge(self, i: int, new_cap: int, new_flow: int) -> None:
        """Set the capacity and flow of edge ``i``."""
        self._check_edge(i)
        if not 0 <= new_flow <= new_cap:
            raise ValueError("need 0 <= new_flow <= new_cap")
        frm, idx = self._pos[i]
        e = self._g[frm][idx]
        re = self._g[e.to][e.rev]
        e.cap = new_cap - new_flow
        re.cap = new_flow

    def flow(self, s: int, t: int, flow_limit: int | None = None) -> int:
        """Push as much flow from ``s`` to ``t`` as possible, up to ``flow_limit``."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        if flow_limit is None:
            flow_limit = sum(e.cap for e in self._g[s])

        flow = 0
        while flow < flow_limit:
            level = self._levels(s, t)
            if level[t] == -1:
                break
            cursor = [0] * self._n
            while flow < flow_limit:
                f = self._augment(s, t, flow_limit - flow, level, cursor)
                if not f:
                    break
                flow += f
        return flow

    def _levels(self, s: int, t: int) -> list[int]:
        level = [-1] * self._n
        level[s] = 0
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for e in self._g[v]:
                if e.cap == 0 or level[e.to] >= 0:
                    continue
                level[e.to] = level[v] + 1
                if e.to == t:
                    return level
                queue.append(e.to)
        return level

    def _augment(
        self, s: int, t: int, up: int, level: list[int], cursor: list[int]
    ) -> int:
        """Blocking-flow search from ``t`` back to ``s`` with an explicit stack."""
        g = self._g
        stack = [[t, up, 0]]
        ret = None
        while stack:
            frame = stack[-1]
            v, limit, res = frame
            if v == s:
                stack.pop()
                ret = limit
                continue
            adj = g[v]
            if ret is not None:
                d, ret = ret, None
                e = adj[cursor[v]]
                if d > 0:
                    e.cap += d
                    g[e.to][e.rev].cap -= d
                    res += d
                    frame[2] = res
                    if res == limit:
                        stack.pop()
                        ret = res
                        continue
                cursor[v] += 1
            level_v = level[v]
            while cursor[v] < len(adj):
                e = adj[cursor[v]]
                rcap = g[e.to][e.rev].cap
                if level_v <= level[e.to] or rcap == 0:
                    cursor[v] += 1
                    continue
                stack.append([e.to, min(limit - res, rcap), 0])
                break
            else:
                stack.pop()
                ret = res
        return ret

    def min_cut(self, s: int) -> list[bool]:
        """Return which vertices are reachable from ``s`` in the residual graph."""
        self._check_vertex(s)
        visited = [False] * self._n
        visited[s] = True
        queue = deque([s])
        while queue:
            p = queue.popleft()
            for e in self._g[p]:
                if e.cap and not visited[e.to]:
                    visited[e.to] = True
                    queue.append(e.to)
        return visited
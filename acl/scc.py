"""Strongly connected components of a directed graph."""

from __future__ import annotations

from acl import internal_scc


class SCCGraph:
    """Directed graph on ``0 .. n-1`` that splits into strongly connected components."""

    def __init__(self, n: int = 0) -> None:
        self._internal = internal_scc.SCCGraph(n)

    def add_edge(self, from_: int, to: int) -> None:
        """Add the directed edge ``from_ -> to``."""
        n = self._internal.num_vertices()
        if not 0 <= from_ < n:
            raise IndexError(f"vertex {from_} out of range [0, {n})")
        if not 0 <= to < n:
            raise IndexError(f"vertex {to} out of range [0, {n})")
        self._internal.add_edge(from_, to)

    def scc(self) -> list[list[int]]:
        """Return the components in topological order, each in ascending order."""
        return self._internal.scc()
"""2-SAT solver based on strongly connected components."""

from __future__ import annotations

from acl.internal_scc import SCCGraph


class TwoSAT:
    """Satisfiability of conjunctions of two-literal clauses over ``n`` variables."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        self._answer = [False] * n
        self._scc = SCCGraph(2 * n)

    def _check(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"variable {i} out of range [0, {self._n})")

    def add_clause(self, i: int, f: bool, j: int, g: bool) -> None:
        """Add the clause ``(x_i == f) or (x_j == g)``."""
        self._check(i)
        self._check(j)
        self._scc.add_edge(2 * i + (0 if f else 1), 2 * j + (1 if g else 0))
        self._scc.add_edge(2 * j + (0 if g else 1), 2 * i + (1 if f else 0))

    def satisfiable(self) -> bool:
        """Return whether the clauses can all hold; record an assignment if so."""
        _, ids = self._scc.scc_ids()
        for i in range(self._n):
            if ids[2 * i] == ids[2 * i + 1]:
                return False
            self._answer[i] = ids[2 * i] < ids[2 * i + 1]
        return True

    def answer(self) -> list[bool]:
        """Return the assignment found by the last successful ``satisfiable`` call."""
        return list(self._answer)
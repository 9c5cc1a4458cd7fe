"""Algorithms and data structures: number theory, convolution, segment trees, DSU, SCC, 2-SAT, flows and strings."""

__version__ = "0.1.0"

__all__ = [
    "convolution",
    "dsu",
    "internal_math",
    "internal_scc",
    "lazysegtree",
    "maxflow",
    "mincostflow",
    "number_theory",
    "scc",
    "segtree",
    "strings",
    "twosat",
]
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from acl.maxflow import MFGraph
from acl.mincostflow import MCFEdge, MCFGraph


@st.composite
def _networks(draw):
    n = draw(st.integers(min_value=2, max_value=6))
    v = st.integers(0, n - 1)
    edges = draw(
        st.lists(
            st.tuples(v, v, st.integers(0, 6), st.integers(0, 9)), max_size=14
        )
    )
    return n, edges


def _build(n, edges):
    g = MCFGraph(n)
    for u, v, cap, cost in edges:
        g.add_edge(u, v, cap, cost)
    return g


def test_parallel_edges_slope():
    g = MCFGraph(2)
    g.add_edge(0, 1, 1, 1)
    g.add_edge(0, 1, 1, 3)
    assert g.slope(0, 1) == [(0, 0), (1, 1), (2, 4)]


def test_equal_slopes_are_merged():
    g = MCFGraph(2)
    g.add_edge(0, 1, 1, 2)
    g.add_edge(0, 1, 1, 2)
    assert g.slope(0, 1) == [(0, 0), (2, 4)]


def test_no_path_gives_zero():
    g = MCFGraph(3)
    g.add_edge(0, 1, 5, 1)
    assert g.slope(0, 2) == [(0, 0)]
    assert g.flow(0, 2) == (0, 0)


def test_edge_state_after_flow():
    g = MCFGraph(2)
    i = g.add_edge(0, 1, 3, 4)
    assert g.flow(0, 1, 2) == (2, 8)
    assert g.get_edge(i) == MCFEdge(0, 1, 3, 2, 4)
    assert g.edges() == [MCFEdge(0, 1, 3, 2, 4)]


def test_errors():
    g = MCFGraph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2, 1, 1)
    with pytest.raises(IndexError):
        g.get_edge(0)
    with pytest.raises(ValueError):
        g.flow(0, 0)
    with pytest.raises(IndexError):
        g.slope(0, 5)


@settings(max_examples=200)
@given(_networks())
def test_slope_is_convex_and_consistent(network):
    n, edges = network
    g = _build(n, edges)
    s, t = 0, n - 1
    points = g.slope(s, t)
    assert points[0] == (0, 0)
    for (f0, c0), (f1, c1) in zip(points, points[1:]):
        assert f1 > f0
        assert c1 >= c0
    rates = [
        (c1 - c0) / (f1 - f0) for (f0, c0), (f1, c1) in zip(points, points[1:])
    ]
    assert all(r0 < r1 for r0, r1 in zip(rates, rates[1:]))

    mf = MFGraph(n)
    for u, v, cap, _ in edges:
        mf.add_edge(u, v, cap)
    assert points[-1][0] == mf.flow(s, t)

    result = g.edges()
    assert sum(e.flow * e.cost for e in result) == points[-1][1]
    balance = [0] * n
    for e in result:
        assert 0 <= e.flow <= e.cap
        balance[e.from_] -= e.flow
        balance[e.to] += e.flow
    for v in range(n):
        if v not in (s, t):
            assert balance[v] == 0


@settings(max_examples=100)
@given(_networks())
def test_breakpoints_reproduced_by_limited_flow(network):
    n, edges = network
    points = _build(n, edges).slope(0, n - 1)
    for flow, cost in points:
        assert _build(n, edges).flow(0, n - 1, flow) == (flow, cost)
from collections import deque

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from acl.scc import SCCGraph


def _reachability(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    reach = []
    for s in range(n):
        seen = {s}
        queue = deque([s])
        while queue:
            x = queue.popleft()
            for y in adj[x]:
                if y not in seen:
                    seen.add(y)
                    queue.append(y)
        reach.append(seen)
    return reach


@st.composite
def _graphs(draw):
    n = draw(st.integers(min_value=1, max_value=8))
    edges = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=20
        )
    )
    return n, edges


def test_default_graph_is_empty():
    assert SCCGraph().scc() == []


def test_isolated_vertices_each_form_a_component():
    g = SCCGraph(4)
    assert sorted(g.scc()) == [[0], [1], [2], [3]]


def test_self_loop_keeps_single_vertex():
    g = SCCGraph(2)
    g.add_edge(0, 0)
    g.add_edge(0, 1)
    assert g.scc() == [[0], [1]]


@pytest.mark.parametrize("edge", [(-1, 0), (0, 3), (3, 0), (0, -1)])
def test_out_of_range_edge_raises(edge):
    g = SCCGraph(3)
    with pytest.raises(IndexError):
        g.add_edge(*edge)


@settings(max_examples=200)
@given(_graphs())
def test_components_are_mutually_reachable_and_ordered(graph):
    n, edges = graph
    g = SCCGraph(n)
    for u, v in edges:
        g.add_edge(u, v)
    groups = g.scc()
    reach = _reachability(n, edges)
    index = {v: gid for gid, group in enumerate(groups) for v in group}
    assert sorted(index) == list(range(n))
    for u in range(n):
        for v in range(n):
            mutual = v in reach[u] and u in reach[v]
            assert (index[u] == index[v]) == mutual
    for u, v in edges:
        assert index[u] <= index[v]
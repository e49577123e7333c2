import networkx as nx

from numtrail.graph.convert import to_digraph, to_graph
from numtrail.graph.matrix import Matrix


def test_to_graph_undirected_with_values(line1):
    nxg = to_graph(line1)

    assert isinstance(nxg, nx.Graph)
    assert not nxg.is_directed()
    assert sorted(nxg.edges()) == [(0, 1), (1, 2)]
    assert nxg.nodes[2]["value"] == 100


def test_to_digraph_orients_ascending(triangle1):
    nxg = to_digraph(triangle1.adjacency, triangle1)

    assert isinstance(nxg, nx.DiGraph)
    assert sorted(nxg.edges()) == [(0, 1), (0, 2), (1, 2)]
    assert all(u < v for u, v in nxg.edges())
    assert nx.is_directed_acyclic_graph(nxg)
    assert nxg.nodes[0]["value"] == 1


def test_to_digraph_ignores_lower_triangle():
    upper = Matrix.from_lists([[False, True], [False, False]])
    lower = Matrix.from_lists([[False, False], [True, False]])
    assert list(to_digraph(upper).edges()) == [(0, 1)]
    assert list(to_digraph(lower).edges()) == []


def test_isolated_vertices_are_kept(isolated1):
    nxg = to_graph(isolated1)
    assert nxg.number_of_nodes() == 3
    assert nxg.number_of_edges() == 0


def test_to_digraph_symmetric_keeps_both_directions(line1):
    nxg = to_digraph(line1.adjacency, symmetric=True)
    assert sorted(nxg.edges()) == [(0, 1), (1, 0), (1, 2), (2, 1)]
    assert not nx.is_directed_acyclic_graph(nxg)


def test_to_digraph_never_adds_self_loops():
    adj = Matrix.from_lists([[True, True], [True, True]])
    assert sorted(to_digraph(adj, symmetric=True).edges()) == [(0, 1), (1, 0)]

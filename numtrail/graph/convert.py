"""NetworkX views of a ``NumberGraph``.

``to_graph`` returns the undirected edit graph. ``to_digraph`` orients every
edge from the lower vertex id to the higher one, which is the edge set the
path engine relaxes over; ``symmetric=True`` keeps both directions. Nodes
are vertex ids; each node carries its original integer under the ``value``
attribute.
"""

from typing import Optional

import networkx as nx

from numtrail.graph.builder import AdjacencyMatrix, NumberGraph


def to_graph(graph: NumberGraph) -> nx.Graph:
    """Convert a NumberGraph to an undirected NetworkX Graph."""
    nx_graph = nx.Graph()
    for vertex, value in enumerate(graph.numbers):
        nx_graph.add_node(vertex, value=value)
    nx_graph.add_edges_from(graph.edges())
    return nx_graph


def to_digraph(
    adjacency: AdjacencyMatrix,
    graph: Optional[NumberGraph] = None,
    symmetric: bool = False,
) -> nx.DiGraph:
    """Convert an adjacency matrix to a NetworkX DiGraph.

    By default only cells with ``row < col`` produce arcs. Lower-triangle
    cells are ignored, so a symmetric matrix and its upper triangle give the
    same result. With ``symmetric=True`` every off-diagonal cell produces an
    arc, so each undirected edge becomes a two-arc cycle.

    Args:
        adjacency: Adjacency over vertex ids.
        graph: Optional owning NumberGraph; when given, nodes get a ``value``.
        symmetric: Emit arcs for both directions of every edge.

    Returns:
        A DiGraph over all vertex ids.
    """
    nx_graph = nx.DiGraph()
    for vertex in range(adjacency.size):
        if graph is not None:
            nx_graph.add_node(vertex, value=graph.numbers[vertex])
        else:
            nx_graph.add_node(vertex)
    for row, col, linked in adjacency.cells():
        if linked and row != col and (symmetric or row < col):
            nx_graph.add_edge(row, col)
    return nx_graph

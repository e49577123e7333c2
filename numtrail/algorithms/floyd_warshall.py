"""All-pairs longest-trail engine built on Floyd-Warshall relaxation.

Every edge weighs ``EDGE_WEIGHT`` (-1), so the relaxation's minimum distance
between two vertices is the negated edge count of the longest path between
them (see ``numtrail.types.base``). This only terminates meaningfully when the
relaxed arc set is acyclic: any cycle would have negative total weight. Edges
are therefore oriented from the lower vertex id to the higher one (ascending
value order), which always yields a DAG. The precondition is still validated
before relaxation and re-checked on the diagonal afterwards.

Notes:
    With ``symmetric_seeding=True`` both directions of every edge are seeded.
    Any edge then forms a two-arc negative cycle and ``CyclicGraphError`` is
    raised; the option exists to make that failure mode explicit.
"""

from __future__ import annotations

from time import perf_counter
from typing import Iterable, List, Tuple

import networkx as nx

from numtrail.errors import CyclicGraphError
from numtrail.graph.builder import AdjacencyMatrix
from numtrail.graph.convert import to_digraph
from numtrail.graph.matrix import Matrix
from numtrail.logging import get_logger
from numtrail.types.base import (
    EDGE_WEIGHT,
    UNREACHABLE,
    Distance,
    Predecessor,
    VertexID,
)

logger = get_logger(__name__)

DistanceMatrix = Matrix[Distance]
PredecessorMatrix = Matrix[Predecessor]


def seeded_arcs(digraph: nx.DiGraph) -> List[Tuple[VertexID, VertexID]]:
    """Return the arcs of ``digraph`` in row-major order.

    Each arc ``(i, j)`` receives an initial distance of ``EDGE_WEIGHT``.
    """
    return sorted(digraph.edges())


def ensure_acyclic(digraph: nx.DiGraph) -> None:
    """Raise ``CyclicGraphError`` if ``digraph`` has a directed cycle."""
    if nx.is_directed_acyclic_graph(digraph):
        return
    cycle = nx.find_cycle(digraph)
    arcs = ", ".join(f"{u}->{v}" for u, v in cycle)
    raise CyclicGraphError(
        f"Relaxation requires an acyclic arc set; found cycle: {arcs}"
    )


def initialize(
    size: int, arcs: Iterable[Tuple[VertexID, VertexID]]
) -> Tuple[DistanceMatrix, PredecessorMatrix]:
    """Create the seeded distance and predecessor matrices.

    ``dis[i, i] = 0`` and ``pre[i, i] = i`` for every vertex; each arc gets
    ``dis[i, j] = EDGE_WEIGHT`` and ``pre[i, j] = i``; everything else is
    ``UNREACHABLE`` / ``None``.
    """
    distance: DistanceMatrix = Matrix(size, UNREACHABLE)
    predecessor: PredecessorMatrix = Matrix(size, None)
    for i in range(size):
        distance[i, i] = 0
        predecessor[i, i] = i
    for i, j in arcs:
        distance[i, j] = EDGE_WEIGHT
        predecessor[i, j] = i
    return distance, predecessor


def relax(
    distance: DistanceMatrix, predecessor: PredecessorMatrix
) -> Tuple[DistanceMatrix, PredecessorMatrix]:
    """Run the Floyd-Warshall triple loop over seeded matrices.

    For each intermediate ``k``, source ``i`` and destination ``j`` with both
    ``dis[i, k]`` and ``dis[k, j]`` reachable, a strictly smaller sum replaces
    ``dis[i, j]`` and ``pre[i, j]`` takes ``pre[k, j]``.

    The inputs are not modified.

    Returns:
        New ``(distance, predecessor)`` matrices.

    Raises:
        ValueError: If the two matrices differ in size.
        CyclicGraphError: If a diagonal cell ends up negative.
    """
    if distance.size != predecessor.size:
        raise ValueError("Distance and predecessor matrices must have equal size")
    n = distance.size
    dis: List[List[Distance]] = distance.to_lists()
    pre: List[List[Predecessor]] = predecessor.to_lists()

    for k in range(n):
        dis_k = dis[k]
        pre_k = pre[k]
        for i in range(n):
            dis_ik = dis[i][k]
            if dis_ik == UNREACHABLE:
                continue
            dis_i = dis[i]
            pre_i = pre[i]
            for j in range(n):
                dis_kj = dis_k[j]
                if dis_kj == UNREACHABLE:
                    continue
                candidate = dis_ik + dis_kj
                if dis_i[j] > candidate:
                    dis_i[j] = candidate
                    pre_i[j] = pre_k[j]

    for i in range(n):
        if dis[i][i] < 0:
            raise CyclicGraphError(
                f"Vertex {i} lies on a negative cycle (distance {dis[i][i]})"
            )
    return Matrix.from_lists(dis), Matrix.from_lists(pre)


def floyd_warshall(
    adjacency: AdjacencyMatrix, symmetric_seeding: bool = False
) -> Tuple[DistanceMatrix, PredecessorMatrix]:
    """Compute all-pairs longest-trail distances and predecessors.

    Args:
        adjacency: Adjacency over vertex ids (symmetric or upper-triangular).
        symmetric_seeding: Seed both directions of each edge. Any edge then
            forms a cycle, so this raises ``CyclicGraphError``.

    Returns:
        A tuple ``(distance, predecessor)`` of ``n x n`` matrices, where
        ``distance[i, j]`` is the negated edge count of the longest ascending
        path from ``i`` to ``j`` and ``predecessor[i, j]`` is the vertex just
        before ``j`` on that path.

    Raises:
        CyclicGraphError: If the seeded arc set is not acyclic.
    """
    digraph = to_digraph(adjacency, symmetric=symmetric_seeding)
    ensure_acyclic(digraph)
    arcs = seeded_arcs(digraph)

    start = perf_counter()
    distance, predecessor = relax(*initialize(adjacency.size, arcs))
    logger.debug(
        f"Relaxed {adjacency.size} vertices and {len(arcs)} arcs "
        f"in {perf_counter() - start:.4f} s"
    )
    return distance, predecessor

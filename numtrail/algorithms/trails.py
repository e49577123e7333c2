"""Reconstruct and sort every longest trail from the engine's matrices.

The global minimum distance cell gives the longest trail; every cell holding
that value yields one trail, recovered by walking the predecessor row of its
source backwards from the destination.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from numtrail.algorithms.floyd_warshall import (
    DistanceMatrix,
    PredecessorMatrix,
    floyd_warshall,
)
from numtrail.graph.builder import build_graph
from numtrail.logging import get_logger
from numtrail.model.trail import Trail, TrailReport
from numtrail.types.base import (
    Distance,
    VertexID,
    from_negated_length,
    to_negated_length,
)

logger = get_logger(__name__)


def longest_distance(distance: DistanceMatrix) -> Distance:
    """Return the most negative cell of ``distance``.

    The search starts from ``to_negated_length(0)`` (``1``), so a matrix whose
    only finite cells are the zero diagonal yields ``0`` (single-vertex
    trails) and an empty matrix yields ``1`` (no trails at all).
    """
    longest: Distance = to_negated_length(0)
    for _, _, value in distance.cells():
        if value < longest:
            longest = value
    return longest


def reconstruct_path(
    predecessor: PredecessorMatrix, src: VertexID, dst: VertexID
) -> List[VertexID]:
    """Return the vertex ids from ``src`` to ``dst`` in forward order.

    Raises:
        ValueError: If ``dst`` is unreachable from ``src`` or the predecessor
            walk does not reach ``src`` within ``size`` steps.
    """
    if predecessor[src, dst] is None:
        raise ValueError(f"Vertex {dst} is not reachable from {src}")
    path = [dst]
    node = dst
    while node != src:
        prev = predecessor[src, node]
        if prev is None or len(path) > predecessor.size:
            raise ValueError(f"Broken predecessor chain from {src} to {dst}")
        path.append(prev)
        node = prev
    path.reverse()
    return path


def sort_paths(paths: Iterable[Sequence[VertexID]]) -> List[Tuple[VertexID, ...]]:
    """Sort vertex-id sequences lexicographically, position by position."""
    return sorted(tuple(path) for path in paths)


def longest_trails(
    distance: DistanceMatrix,
    predecessor: PredecessorMatrix,
    numbers: Sequence[int],
) -> Tuple[int, List[Trail]]:
    """Collect, reconstruct and sort every trail of maximal length.

    Args:
        distance: Distance matrix from ``floyd_warshall``.
        predecessor: Predecessor matrix from ``floyd_warshall``.
        numbers: Sorted values, indexed by vertex id.

    Returns:
        A tuple ``(max_length, trails)`` where ``max_length`` is the vertex
        count of the longest trail and ``trails`` is sorted by vertex ids.
    """
    longest = longest_distance(distance)
    path_length = from_negated_length(longest)

    paths = []
    for src, dst, value in distance.cells():
        if value == longest:
            path = reconstruct_path(predecessor, src, dst)
            if len(path) != path_length:
                raise ValueError(
                    f"Trail {src}->{dst} has {len(path)} vertices, "
                    f"expected {path_length}"
                )
            paths.append(path)

    trails = [
        Trail(vertices=path, values=tuple(numbers[v] for v in path))
        for path in sort_paths(paths)
    ]
    return path_length, trails


def find_longest_trails(values: Iterable[int]) -> TrailReport:
    """Run the whole pipeline on ``values``.

    Args:
        values: Integers in any order.

    Returns:
        A ``TrailReport`` with the sorted numbers, their edges, the maximum
        trail length, and every longest trail in sorted order.

    Raises:
        InvalidNumber: If a value is not an integer.
    """
    graph = build_graph(values)
    distance, predecessor = floyd_warshall(graph.adjacency)
    max_length, trails = longest_trails(distance, predecessor, graph.numbers)
    logger.debug(f"Found {len(trails)} trail(s) of length {max_length}")
    return TrailReport(
        numbers=graph.numbers,
        edges=tuple(graph.edges()),
        max_length=max_length,
        trails=tuple(trails),
    )

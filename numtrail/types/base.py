"""Base aliases and the negated-length encoding used by the path engine.

The all-pairs engine finds *longest* trails with a shortest-path relaxation by
giving every edge a weight of ``-1``. A distance cell therefore holds the
negated number of edges on the extremal path, and the most negative cell marks
the longest trail. The two transforms below are the only place where that sign
convention is spelled out; callers reason about vertex counts.
"""

from __future__ import annotations

import math
from typing import Optional, Union

#: Vertex identifier: index into the sorted number list.
VertexID = int

#: Distance cell value: a non-positive int, or ``UNREACHABLE``.
Distance = Union[int, float]

#: Predecessor cell value: a vertex id, or ``None`` where unreachable.
Predecessor = Optional[VertexID]

#: Sentinel for "no path"; compares greater than every finite distance.
UNREACHABLE: float = math.inf

#: Weight given to every edge during relaxation.
EDGE_WEIGHT = -1


def to_negated_length(vertex_count: int) -> int:
    """Encode a trail of ``vertex_count`` vertices as a distance cell value.

    A single vertex (zero edges) encodes to ``0``; each additional vertex
    subtracts one.

    Args:
        vertex_count: Number of vertices on the trail (>= 0).

    Returns:
        The negated edge count, ``1 - vertex_count``.

    Raises:
        ValueError: If ``vertex_count`` is negative.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
    return 1 - vertex_count


def from_negated_length(distance: Distance) -> int:
    """Decode a distance cell value into the trail's vertex count.

    Args:
        distance: A finite distance cell value.

    Returns:
        Number of vertices on the trail, ``1 - distance``.

    Raises:
        ValueError: If ``distance`` is ``UNREACHABLE``.
    """
    if distance == UNREACHABLE:
        raise ValueError("Cannot decode the length of an unreachable pair")
    return 1 - int(distance)

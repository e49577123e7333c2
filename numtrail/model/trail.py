"""Result types for longest-trail searches.

``Trail`` is one maximal-length path as vertex ids plus the original values at
those vertices. Trails order lexicographically by vertex ids, which for sorted
input is also ascending value order position by position. ``TrailReport``
bundles everything a renderer needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from numtrail.types.base import VertexID

ARROW = " -> "


@dataclass(frozen=True)
class Trail:
    """A single longest trail.

    Attributes:
        vertices: Vertex ids from source to destination.
        values: Original integers at ``vertices``.
    """

    vertices: Tuple[VertexID, ...]
    values: Tuple[int, ...] = field(compare=False)

    def __post_init__(self) -> None:
        if len(self.vertices) != len(self.values):
            raise ValueError("Trail vertices and values must have the same length")

    def __len__(self) -> int:
        return len(self.vertices)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Trail):
            return NotImplemented
        return self.vertices < other.vertices

    @property
    def edge_count(self) -> int:
        return max(len(self.vertices) - 1, 0)

    @property
    def src(self) -> int:
        """Value at the first vertex."""
        return self.values[0]

    @property
    def dst(self) -> int:
        """Value at the last vertex."""
        return self.values[-1]

    def render(self) -> str:
        """Return the trail as ``v1 -> v2 -> ... -> vk``."""
        return ARROW.join(str(value) for value in self.values)


@dataclass(frozen=True)
class TrailReport:
    """Full outcome of one run.

    Attributes:
        numbers: Sorted input values (vertex ``i`` is ``numbers[i]``).
        edges: Undirected edges as ``(i, j)`` with ``i < j``, row-major.
        max_length: Vertex count of the longest trail (0 for empty input).
        trails: All longest trails, sorted.
    """

    numbers: Tuple[int, ...]
    edges: Tuple[Tuple[VertexID, VertexID], ...]
    max_length: int
    trails: Tuple[Trail, ...]

    def higher_neighbor_values(self, vertex: VertexID) -> List[int]:
        """Values adjacent to ``vertex`` at strictly larger indices, ascending."""
        return [self.numbers[j] for i, j in self.edges if i == vertex]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "numbers": list(self.numbers),
            "edges": [[self.numbers[i], self.numbers[j]] for i, j in self.edges],
            "max_trail_length": self.max_length,
            "trails": [list(trail.values) for trail in self.trails],
        }

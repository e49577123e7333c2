"""Build the one-digit edit graph over a sorted list of integers.

``prepare_numbers`` fixes the vertex order (ascending value, stable), and
``build_graph`` evaluates the edge predicate once per unordered pair, storing
the result symmetrically in an ``AdjacencyMatrix``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from numtrail.errors import InvalidNumber
from numtrail.graph.edit import is_one_digit_edit
from numtrail.graph.matrix import Matrix
from numtrail.logging import get_logger
from numtrail.types.base import VertexID

logger = get_logger(__name__)

#: Symmetric boolean matrix; ``adj[i, j]`` is True iff ``i`` and ``j`` are adjacent.
AdjacencyMatrix = Matrix[bool]


def prepare_numbers(values: Iterable[int]) -> Tuple[int, ...]:
    """Return ``values`` sorted ascending as an immutable tuple.

    Indices into the returned tuple are the vertex ids for the rest of the
    pipeline. Duplicates are kept as distinct vertices.

    Raises:
        InvalidNumber: If any value is not an ``int`` (``bool`` is rejected too).
    """
    numbers: List[int] = []
    for position, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidNumber(
                f"Value at position {position} is not an integer: {value!r}"
            )
        numbers.append(value)
    return tuple(sorted(numbers))


@dataclass(frozen=True)
class NumberGraph:
    """Sorted numbers together with their symmetric adjacency matrix.

    Attributes:
        numbers: Values in ascending order; index ``i`` is vertex ``i``.
        adjacency: Symmetric adjacency over the vertex ids.
    """

    numbers: Tuple[int, ...]
    adjacency: AdjacencyMatrix = field(repr=False)

    def __post_init__(self) -> None:
        if self.adjacency.size != len(self.numbers):
            raise ValueError(
                f"Adjacency size {self.adjacency.size} does not match "
                f"{len(self.numbers)} numbers"
            )

    @property
    def size(self) -> int:
        """Number of vertices."""
        return len(self.numbers)

    def has_edge(self, i: VertexID, j: VertexID) -> bool:
        return self.adjacency[i, j]

    def neighbors(self, i: VertexID) -> List[VertexID]:
        """Return every vertex adjacent to ``i`` in ascending order."""
        return [j for j, linked in enumerate(self.adjacency.row(i)) if linked]

    def higher_neighbors(self, i: VertexID) -> List[VertexID]:
        """Return adjacent vertices with an id strictly greater than ``i``."""
        return [j for j in self.neighbors(i) if j > i]

    def edges(self) -> Iterator[Tuple[VertexID, VertexID]]:
        """Yield each undirected edge once as ``(i, j)`` with ``i < j``."""
        for i in range(self.size):
            for j in self.higher_neighbors(i):
                yield i, j

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())


def build_adjacency(numbers: Tuple[int, ...]) -> AdjacencyMatrix:
    """Evaluate the edge predicate for every pair ``i < j`` of ``numbers``.

    Both ``adj[i, j]`` and ``adj[j, i]`` are written, so the matrix is
    symmetric. The diagonal stays False.
    """
    n = len(numbers)
    adjacency: AdjacencyMatrix = Matrix(n, False)
    for i in range(n):
        for j in range(i + 1, n):
            if is_one_digit_edit(numbers[i], numbers[j]):
                adjacency[i, j] = True
                adjacency[j, i] = True
    return adjacency


def build_graph(values: Iterable[int]) -> NumberGraph:
    """Sort ``values`` and build their one-digit edit graph.

    Args:
        values: Integers in any order.

    Returns:
        A ``NumberGraph`` over the sorted values.
    """
    numbers = prepare_numbers(values)
    graph = NumberGraph(numbers=numbers, adjacency=build_adjacency(numbers))
    logger.debug(
        "Built edit graph: %d vertices, %d edges", graph.size, graph.edge_count
    )
    return graph

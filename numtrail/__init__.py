"""numtrail: longest trails through one-digit edit graphs of integers.

Two integers are adjacent when their decimal forms differ by a single digit
substitution, insertion or deletion. numtrail sorts the input, builds this
graph, runs a Floyd-Warshall relaxation with -1 edge weights to find the
longest ascending trails, and reports every trail of maximal length in sorted
order.

Primary API:
    find_longest_trails() - Run the whole pipeline on a list of integers
    build_graph() - Sort values and build their adjacency
    is_one_digit_edit() - Edge predicate on two integers
    floyd_warshall() - All-pairs distance and predecessor matrices
    longest_trails() - Reconstruct and sort trails from those matrices

Example:
    from numtrail import find_longest_trails

    report = find_longest_trails([10, 1, 100])
    report.max_length                    # 3
    [t.render() for t in report.trails]  # ['1 -> 10 -> 100']
"""

from __future__ import annotations

from numtrail import cli, logging
from numtrail._version import __version__
from numtrail.algorithms.floyd_warshall import floyd_warshall
from numtrail.algorithms.trails import find_longest_trails, longest_trails
from numtrail.config import TrailConfig
from numtrail.errors import (
    CyclicGraphError,
    InvalidCount,
    InvalidNumber,
    NumTrailError,
)
from numtrail.graph.builder import NumberGraph, build_graph, prepare_numbers
from numtrail.graph.edit import is_one_digit_edit
from numtrail.graph.matrix import Matrix
from numtrail.model.trail import Trail, TrailReport
from numtrail.types.base import (
    UNREACHABLE,
    from_negated_length,
    to_negated_length,
)

__all__ = [
    # Version
    "__version__",
    # Pipeline
    "find_longest_trails",
    "build_graph",
    "prepare_numbers",
    "is_one_digit_edit",
    "floyd_warshall",
    "longest_trails",
    # Types
    "Matrix",
    "NumberGraph",
    "Trail",
    "TrailReport",
    "TrailConfig",
    "UNREACHABLE",
    "to_negated_length",
    "from_negated_length",
    # Errors
    "NumTrailError",
    "InvalidCount",
    "InvalidNumber",
    "CyclicGraphError",
    # Utilities
    "cli",
    "logging",
]

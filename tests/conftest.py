"""Shared fixtures: small edit graphs with known structure."""

from __future__ import annotations

import pytest

from numtrail.graph.builder import NumberGraph, build_graph
from numtrail.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def triangle1() -> NumberGraph:
    # 1 ── 2
    #  \  /
    #   3
    return build_graph([1, 2, 3])


@pytest.fixture
def line1() -> NumberGraph:
    # 1 ── 10 ── 100
    return build_graph([10, 1, 100])


@pytest.fixture
def isolated1() -> NumberGraph:
    # No two values are one digit edit apart.
    return build_graph([333, 1, 22])


@pytest.fixture
def fork1() -> NumberGraph:
    #   ┌── 2
    # 1 ┤
    #   └── 13
    return build_graph([13, 2, 1])


@pytest.fixture
def square1() -> NumberGraph:
    # 1 ── 2
    # │    │
    # 10 ─ 20
    # Two ascending trails share source 1 and destination 20.
    return build_graph([20, 10, 2, 1])


@pytest.fixture
def dense1() -> NumberGraph:
    return build_graph(list(range(1, 25)) + [100, 101, 110, 111, 1011])

import pytest

from numtrail.types.base import (
    UNREACHABLE,
    from_negated_length,
    to_negated_length,
)


@pytest.mark.parametrize(
    "vertex_count, encoded",
    [(0, 1), (1, 0), (2, -1), (3, -2), (10, -9)],
)
def test_negated_length_encoding(vertex_count, encoded):
    assert to_negated_length(vertex_count) == encoded
    assert from_negated_length(encoded) == vertex_count


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        to_negated_length(-1)


def test_unreachable_cannot_be_decoded():
    with pytest.raises(ValueError, match="unreachable"):
        from_negated_length(UNREACHABLE)


def test_unreachable_exceeds_any_distance():
    assert UNREACHABLE > 0
    assert UNREACHABLE > 10**12

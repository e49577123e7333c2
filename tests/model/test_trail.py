import pytest

from numtrail.model.trail import Trail, TrailReport


def test_trail_render_and_lengths():
    trail = Trail(vertices=(0, 1, 2), values=(1, 10, 100))
    assert trail.render() == "1 -> 10 -> 100"
    assert len(trail) == 3
    assert trail.edge_count == 2
    assert (trail.src, trail.dst) == (1, 100)


def test_single_vertex_trail():
    trail = Trail(vertices=(4,), values=(7,))
    assert trail.render() == "7"
    assert trail.edge_count == 0


def test_trail_orders_by_vertex_ids():
    a = Trail(vertices=(0, 2), values=(1, 13))
    b = Trail(vertices=(0, 1), values=(1, 2))
    assert b < a
    assert sorted([a, b]) == [b, a]


def test_trail_length_mismatch_rejected():
    with pytest.raises(ValueError):
        Trail(vertices=(0, 1), values=(1,))


def test_report_to_dict():
    report = TrailReport(
        numbers=(1, 10, 100),
        edges=((0, 1), (1, 2)),
        max_length=3,
        trails=(Trail(vertices=(0, 1, 2), values=(1, 10, 100)),),
    )
    assert report.higher_neighbor_values(0) == [10]
    assert report.higher_neighbor_values(2) == []
    assert report.to_dict() == {
        "numbers": [1, 10, 100],
        "edges": [[1, 10], [10, 100]],
        "max_trail_length": 3,
        "trails": [[1, 10, 100]],
    }

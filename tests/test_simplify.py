"""Tests for Douglas-Peucker simplification."""

import random

import pytest
from polypath import Path, Point
from polypath.geometry import douglas_peucker, douglas_peucker_mask


def test_collinear_reduces_to_endpoints():
    """Exactly collinear points collapse to the two endpoints, even at zero."""
    path = Path(Point(0, 0), Point(1, 2), Point(2, 4), Point(3, 6), Point(4, 8))
    path.reduce(0)
    assert path.points == [Point(0, 0), Point(4, 8)]


def test_zero_threshold_keeps_bends():
    path = Path(Point(0, 0), Point(1, 0), Point(2, 1))
    path.reduce(0)
    assert len(path) == 3


def test_reduce_known_result():
    """A spike is kept and the near-flat wiggles around it are removed."""
    path = Path(
        Point(0, 0),
        Point(1, 0.05),
        Point(2, 0),
        Point(3, 5),
        Point(4, 0),
        Point(5, 0.05),
        Point(6, 0),
    )
    path.reduce(1.0)
    assert path.points == [Point(0, 0), Point(2, 0), Point(3, 5), Point(4, 0), Point(6, 0)]


def test_reduce_keeps_endpoints():
    """The first and last points always survive."""
    rng = random.Random(3)
    coords = [(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(200)]
    path = Path.from_coords(coords)
    first, last = path.get_at(0), path.get_at(199)

    path.reduce(1000)
    assert path.points == [first, last]


def test_reduce_result_is_within_threshold():
    """Every dropped point lies within the threshold of the result."""
    rng = random.Random(11)
    x, y = 0.0, 0.0
    coords = []
    for _ in range(500):
        x += rng.uniform(0, 1)
        y += rng.uniform(-1, 1)
        coords.append((x, y))

    original = Path.from_coords(coords)
    reduced = original.clone().reduce(0.75)

    assert len(reduced) < len(original)
    for p in original:
        assert reduced.distance_from(p) <= 0.75 + 1e-12


def test_reduce_preserves_order():
    path = Path.from_coords([(i, (i % 3) * 2) for i in range(30)])
    reduced = path.clone().reduce(0.5)
    original = path.points
    indices = [original.index(p) for p in reduced]
    assert indices == sorted(indices)


def test_reduce_small_paths():
    """Paths with fewer than two points are left alone."""
    assert Path().reduce(1).length() == 0
    assert Path(Point(1, 1)).reduce(1).points == [Point(1, 1)]
    assert Path(Point(1, 1), Point(2, 2)).reduce(1).length() == 2


def test_reduce_returns_self():
    path = Path(Point(0, 0), Point(1, 0), Point(2, 0))
    assert path.reduce(0.1) is path


def test_reduce_closed_loop():
    """Coincident endpoints measure distance to the shared point."""
    path = Path(Point(0, 0), Point(5, 0), Point(5, 5), Point(0, 0))
    path.reduce(1)
    assert path.points == [Point(0, 0), Point(5, 0), Point(5, 5), Point(0, 0)]


def test_reduce_negative_threshold():
    path = Path(Point(0, 0), Point(1, 1), Point(2, 0))
    with pytest.raises(ValueError):
        path.reduce(-1)
    assert len(path) == 3


def test_reduce_tie_splits_at_first_farthest_point():
    """Of two equally distant points, the earlier one is split on."""
    path = Path(Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0))
    path.reduce(0.5)
    assert path.points == [Point(0, 0), Point(1, 1), Point(3, 0)]


def test_reduce_tie_mask():
    points = [Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0)]
    assert douglas_peucker_mask(points, 0.5) == [True, True, False, True]


def test_reduce_drops_point_exactly_at_threshold():
    """Only points strictly farther than the threshold are kept."""
    path = Path(Point(0, 0), Point(1, 1), Point(2, 0))
    path.reduce(1.0)
    assert path.points == [Point(0, 0), Point(2, 0)]


def test_mask_and_list_helpers():
    points = [Point(0, 0), Point(1, 0), Point(2, 0)]
    assert douglas_peucker_mask(points, 0) == [True, False, True]
    assert douglas_peucker(points, 0) == [Point(0, 0), Point(2, 0)]
    assert douglas_peucker_mask([], 0) == []


def test_matches_shapely_simplify():
    """Agrees with the GEOS Douglas-Peucker implementation."""
    shapely_geometry = pytest.importorskip("shapely.geometry")

    rng = random.Random(5)
    x, y = 0.0, 0.0
    coords = []
    for _ in range(400):
        x += rng.gauss(0, 1)
        y += rng.gauss(0, 1)
        coords.append((x, y))

    for threshold in (0.5, 2.0, 5.0):
        ours = Path.from_coords(coords).reduce(threshold)
        line = shapely_geometry.LineString(coords)
        theirs = line.simplify(threshold, preserve_topology=False)
        assert [tuple(p) for p in ours] == list(theirs.coords)

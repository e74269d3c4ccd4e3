"""
Geometry Primitives Tests
=========================

Orientation, squared distance, leftmost search and PointSet snapshots.

Usage:
    pytest test_geometry.py
"""

import numpy as np
import pytest

from giftwrap_hull import (
    InsufficientPointsError,
    Orientation,
    Point,
    PointSet,
    leftmost_index,
    orientation,
    squared_distance,
)


def test_orientation_sign_convention():
    """Positive cross is CLOCKWISE, negative is COUNTER_CLOCKWISE."""
    p, q = Point(0, 0), Point(1, 0)

    # (q.y-p.y)*(r.x-q.x) - (q.x-p.x)*(r.y-q.y) = 0 - 1*(1-0) = -1
    assert orientation(p, q, Point(1, 1)) == Orientation.COUNTER_CLOCKWISE
    assert orientation(p, q, Point(1, -1)) == Orientation.CLOCKWISE
    assert orientation(p, q, Point(5, 0)) == Orientation.COLLINEAR
    assert orientation(p, q, Point(-3, 0)) == Orientation.COLLINEAR


def test_orientation_codes_and_reversal():
    """Reversing the triple flips the sense; codes match 0/1/2."""
    a, b, c = Point(0, 0), Point(4, 1), Point(2, 3)

    assert orientation(a, b, c) == Orientation.COUNTER_CLOCKWISE
    assert orientation(c, b, a) == Orientation.CLOCKWISE
    assert int(Orientation.COLLINEAR) == 0
    assert int(Orientation.CLOCKWISE) == 1
    assert int(Orientation.COUNTER_CLOCKWISE) == 2


def test_orientation_with_coincident_points_is_collinear():
    a = Point(2, 2)
    assert orientation(a, a, Point(7, -1)) == Orientation.COLLINEAR
    assert orientation(a, Point(7, -1), a) == Orientation.COLLINEAR


def test_squared_distance():
    assert squared_distance(Point(0, 0), Point(3, 4)) == 25
    assert squared_distance(Point(3, 4), Point(0, 0)) == 25
    assert squared_distance(Point(1.5, 1.5), Point(1.5, 1.5)) == 0


def test_leftmost_index_breaks_ties_by_lowest_y():
    points = [(3, 1), (0, 4), (0, -2), (1, -5)]
    assert leftmost_index(points) == 2


def test_leftmost_index_keeps_first_duplicate():
    points = [(1, 1), (0, 0), (5, 5), (0, 0)]
    assert leftmost_index(points) == 1


def test_leftmost_index_empty_raises():
    with pytest.raises(InsufficientPointsError):
        leftmost_index([])


def test_point_roundtrip_and_iteration():
    point = Point.from_tuple((1, 2))
    assert point == Point(1.0, 2.0)
    assert point.to_tuple() == (1.0, 2.0)
    x, y = point
    assert (x, y) == (1.0, 2.0)

    with pytest.raises(ValueError):
        Point.from_tuple((1, 2, 3))


def test_point_set_copies_input():
    """Editing the source list after construction does not leak in."""
    source = [[0, 0], [4, 0], [4, 4]]
    point_set = PointSet.from_points(source)

    source[0][0] = 99
    source.append([10, 10])

    assert len(point_set) == 3
    assert point_set[0] == Point(0, 0)
    assert point_set.to_list() == [Point(0, 0), Point(4, 0), Point(4, 4)]


def test_point_set_is_read_only():
    array = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
    point_set = PointSet.from_points(array)

    array[0, 0] = 42.0
    assert point_set[0] == Point(0, 0)

    with pytest.raises(ValueError):
        point_set.coords[0, 0] = 1.0


def test_point_set_accepts_points_and_empty_input():
    point_set = PointSet.from_points([Point(1, 2), (3, 4)])
    assert list(point_set) == [Point(1, 2), Point(3, 4)]
    assert PointSet.from_points(point_set) is point_set

    assert len(PointSet.from_points([])) == 0
    assert len(PointSet.from_points(np.empty((0, 2)))) == 0


def test_point_set_rejects_bad_shapes():
    with pytest.raises(TypeError):
        PointSet.from_points(["ab"])
    with pytest.raises(ValueError):
        PointSet.from_points([(1, 2, 3)])
    with pytest.raises(ValueError):
        PointSet(coords=np.zeros((3, 3)))
    with pytest.raises(TypeError):
        PointSet(coords=[[0, 0]])

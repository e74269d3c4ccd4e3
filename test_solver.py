"""
Batch Solver Tests
==================

Gift wrapping results on fixed scenarios, degenerate inputs and random
point clouds (cross-checked against a monotone-chain hull).

Usage:
    pytest test_solver.py
"""

import json
import logging

import numpy as np
import pytest

from giftwrap_hull import (
    InsufficientPointsError,
    Orientation,
    Point,
    jarvis_march,
    jarvis_march_indices,
    orientation,
)
from giftwrap_hull.logging import LogEvent, create_logger


SQUARE_WITH_CENTER = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]


def _monotone_chain(points):
    """Reference hull (strict, no collinear vertices) as a set of tuples."""
    pts = sorted(set(points))
    if len(pts) <= 1:
        return set(pts)

    def cross(o, a, b):
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

    lower, upper = [], []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return set(lower[:-1] + upper[:-1])


def _random_distinct_points(seed, count, grid=200):
    """Distinct integer-valued points (exact float arithmetic)."""
    rng = np.random.default_rng(seed)
    flat = rng.choice(grid * grid, size=count, replace=False)
    return [(float(i % grid), float(i // grid)) for i in flat]


def test_square_with_interior_point():
    """Four corners in walk order; the center never appears."""
    hull = jarvis_march(SQUARE_WITH_CENTER)

    assert hull == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
    assert Point(2, 2) not in hull
    assert jarvis_march_indices(SQUARE_WITH_CENTER) == [0, 1, 2, 3]


def test_triangle_returns_all_points():
    hull = jarvis_march([(0, 0), (2, 0), (1, 1)])

    assert hull == [Point(0, 0), Point(2, 0), Point(1, 1)]
    # Every turn has the same (counter-clockwise) sense
    assert orientation(*hull) == Orientation.COUNTER_CLOCKWISE


def test_collinear_tie_break_keeps_farthest_point():
    """A(0,0), B(1,0), C(2,0), D(1,1): hull is A, C, D; never B."""
    points = [(0, 0), (1, 0), (2, 0), (1, 1)]

    assert jarvis_march_indices(points) == [0, 2, 3]
    assert Point(1, 0) not in jarvis_march(points)


@pytest.mark.parametrize("points", [
    [],
    [(1, 1)],
    [(1, 1), (2, 2)],
])
def test_fewer_than_three_points_raise(points):
    with pytest.raises(InsufficientPointsError) as exc_info:
        jarvis_march(points)

    assert exc_info.value.count == len(points)
    assert isinstance(exc_info.value, ValueError)


def test_all_collinear_points_give_two_extremes():
    assert jarvis_march_indices([(1, 0), (0, 0), (3, 0), (2, 0)]) == [1, 2]
    assert jarvis_march([(0, 0), (0, 1), (0, 2)]) == [Point(0, 0), Point(0, 2)]


def test_all_identical_points_give_single_vertex():
    assert jarvis_march_indices([(5, 5)] * 4) == [0]


def test_duplicate_of_start_point_closes_the_walk():
    """A copy of the leftmost point closes the walk like the start itself."""
    points = [(0, 0), (2, 0), (1, 1), (0, 0)]
    hull = jarvis_march(points)

    assert jarvis_march_indices(points) == [0, 1, 2]
    assert hull == [Point(0, 0), Point(2, 0), Point(1, 1)]
    assert len(set(hull)) == len(hull)


def test_duplicate_interior_coordinates_are_ignored():
    points = SQUARE_WITH_CENTER + [(2, 2), (4, 4)]
    hull = jarvis_march(points)

    assert set(hull) == {Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)}
    assert len(hull) == 4


def test_accepts_numpy_array_and_is_deterministic():
    array = np.array(SQUARE_WITH_CENTER, dtype=float)

    first = jarvis_march(array)
    second = jarvis_march(array)
    assert first == second == jarvis_march(SQUARE_WITH_CENTER)


@pytest.mark.parametrize("seed", range(8))
def test_random_hull_encloses_every_point(seed):
    """No input point lies strictly outside any hull edge."""
    points = _random_distinct_points(seed, count=40)
    hull = jarvis_march(points)
    k = len(hull)

    assert k >= 3
    assert len(set(hull)) == k

    for i in range(k):
        a, b = hull[i], hull[(i + 1) % k]
        for x, y in points:
            assert orientation(a, b, Point(x, y)) != Orientation.CLOCKWISE


@pytest.mark.parametrize("seed", range(8))
def test_random_hull_is_strictly_convex_and_matches_reference(seed):
    points = _random_distinct_points(seed, count=60)
    hull = jarvis_march(points)
    k = len(hull)

    for i in range(k):
        turn = orientation(hull[i], hull[(i + 1) % k], hull[(i + 2) % k])
        assert turn == Orientation.COUNTER_CLOCKWISE

    assert {p.to_tuple() for p in hull} == _monotone_chain(points)


def test_solver_logs_structured_events(caplog):
    logger = create_logger("test_solver", level=logging.DEBUG)

    with caplog.at_level(logging.DEBUG, logger="giftwrap.test_solver"):
        jarvis_march([(0, 0), (1, 0), (2, 0)], logger=logger)

    entries = [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == "giftwrap.test_solver"
    ]
    events = [entry['event'] for entry in entries]

    assert LogEvent.HULL_SOLVE_STARTED.value in events
    assert LogEvent.HULL_DEGENERATE.value in events
    assert events[-1] == LogEvent.HULL_SOLVE_COMPLETED.value
    assert entries[-1]['metadata']['hull_size'] == 2
    assert entries[-1]['component'] == "test_solver"


def test_insufficient_points_logged_before_raising(caplog):
    logger = create_logger("test_solver_errors")

    with caplog.at_level(logging.INFO, logger="giftwrap.test_solver_errors"):
        with pytest.raises(InsufficientPointsError):
            jarvis_march([(0, 0)], logger=logger)

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['event'] == LogEvent.INSUFFICIENT_POINTS.value
    assert entry['level'] == "ERROR"
    assert entry['exception']['type'] == "InsufficientPointsError"


def test_default_logger_respects_caller_configuration(capsys):
    """Without an injected logger the solver neither resets levels nor prints."""
    solver_logger = logging.getLogger("giftwrap.solver")
    previous = solver_logger.level
    solver_logger.setLevel(logging.WARNING)
    try:
        jarvis_march(SQUARE_WITH_CENTER)
        jarvis_march([(0, 0), (1, 0), (2, 0)])

        assert solver_logger.level == logging.WARNING
    finally:
        solver_logger.setLevel(previous)

    assert capsys.readouterr().err == ""


def test_default_logger_defers_to_application_handlers(caplog):
    with caplog.at_level(logging.INFO, logger="giftwrap.solver"):
        jarvis_march(SQUARE_WITH_CENTER)

    events = [
        json.loads(record.getMessage())['event']
        for record in caplog.records
        if record.name == "giftwrap.solver"
    ]
    assert events[-1] == LogEvent.HULL_SOLVE_COMPLETED.value

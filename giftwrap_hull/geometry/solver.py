"""
Gift Wrapping Solver Module
===========================

Batch convex hull via gift wrapping (Jarvis March).

Design:
- Pure functions over a frozen PointSet snapshot
- Index-based bookkeeping (coordinates may repeat)
- Comparison and termination rules exported for HullStepper, so both
  modes take identical decisions
- O(n*h) time, h = hull size

Walk:
    anchor = leftmost point
    repeat:
        append anchor
        candidate = point after anchor
        for every other point i:
            take i if it is counter-clockwise of anchor->candidate,
            or collinear and farther from anchor
        anchor = candidate
    until the walk closes
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from giftwrap_hull.errors import InsufficientPointsError
from giftwrap_hull.geometry.primitives import (
    Orientation,
    Point,
    PointLike,
    PointSet,
    orientation,
    squared_distance,
    leftmost_index,
)
from giftwrap_hull.logging import LogEvent, StructuredLogger, library_logger


MIN_HULL_POINTS = InsufficientPointsError.MIN_POINTS

PointsInput = Union[PointSet, Iterable[PointLike], np.ndarray]

_default_logger = library_logger("solver")


class WalkEnd(str, Enum):
    """Why a gift-wrapping walk stopped."""
    CLOSED = "closed"              # Back at the start point
    REVISITED = "revisited"        # Next vertex already on the hull


def prefer_candidate(
    points: Sequence[Point],
    anchor: int,
    index: int,
    candidate: int
) -> Tuple[Orientation, bool]:
    """
    Compare point `index` against the current candidate from `anchor`.

    Args:
        points: Point sequence (indexable)
        anchor: Current hull vertex index
        index: Point under test
        candidate: Current best next-vertex index

    Returns:
        Tuple of:
        - orientation(anchor, index, candidate)
        - True if `index` should replace the candidate
    """
    a, p, c = points[anchor], points[index], points[candidate]
    turn = orientation(a, p, c)

    if turn == Orientation.COUNTER_CLOCKWISE:
        return turn, True
    if turn == Orientation.COLLINEAR:
        # Farthest collinear point extends the edge
        return turn, squared_distance(a, p) > squared_distance(a, c)
    return turn, False


def walk_end(
    points: Sequence[Point],
    on_hull: Set[int],
    start: int,
    next_index: int
) -> Optional[WalkEnd]:
    """
    Decide whether the walk stops instead of moving on to next_index.

    Returns:
        WalkEnd reason, or None if next_index becomes the new anchor
    """
    # A copy of the start point closes the walk as well
    if next_index == start or points[next_index] == points[start]:
        return WalkEnd.CLOSED
    if next_index in on_hull:
        return WalkEnd.REVISITED
    return None


def require_hull_points(point_set: PointSet, logger: StructuredLogger) -> None:
    """Raise InsufficientPointsError (and log it) if fewer than 3 points."""
    if len(point_set) < MIN_HULL_POINTS:
        error = InsufficientPointsError(len(point_set))
        logger.error(
            event=LogEvent.INSUFFICIENT_POINTS,
            message="Convex hull requested on too few points",
            metadata={'point_count': len(point_set), 'required': MIN_HULL_POINTS},
            exc_info=error,
        )
        raise error


def jarvis_march_indices(
    points: PointsInput,
    logger: Optional[StructuredLogger] = None
) -> List[int]:
    """
    Convex hull as indices into `points`, in walk order.

    The walk starts at the leftmost point (lowest y on ties) and runs
    counter-clockwise in a y-up frame.

    Args:
        points: Input points (copied into a PointSet)
        logger: Optional structured logger

    Returns:
        Hull vertex indices, no repeats

    Raises:
        InsufficientPointsError: If fewer than 3 points are given
    """
    logger = logger or _default_logger
    point_set = PointSet.from_points(points)
    require_hull_points(point_set, logger)

    pts = point_set.to_list()
    n = len(pts)
    start = leftmost_index(point_set)

    logger.debug(
        event=LogEvent.HULL_SOLVE_STARTED,
        message="Gift wrapping started",
        metadata={'point_count': n, 'start': start}
    )

    hull: List[int] = []
    on_hull: Set[int] = set()
    anchor = start

    while True:
        hull.append(anchor)
        on_hull.add(anchor)

        candidate = (anchor + 1) % n
        for index in range(n):
            if index == anchor:
                continue
            _, replace = prefer_candidate(pts, anchor, index, candidate)
            if replace:
                candidate = index

        reason = walk_end(pts, on_hull, start, candidate)
        if reason is not None:
            break
        anchor = candidate

    _log_result(logger, hull, n, reason)
    return hull


def jarvis_march(
    points: PointsInput,
    logger: Optional[StructuredLogger] = None
) -> List[Point]:
    """
    Convex hull of `points` via gift wrapping.

    Args:
        points: Input points (Points, (x, y) pairs, Nx2 array or PointSet)
        logger: Optional structured logger

    Returns:
        Hull vertices in walk order

    Raises:
        InsufficientPointsError: If fewer than 3 points are given

    Example:
        >>> jarvis_march([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
        [Point(x=0.0, y=0.0), Point(x=4.0, y=0.0), Point(x=4.0, y=4.0), Point(x=0.0, y=4.0)]
    """
    point_set = PointSet.from_points(points)
    return [point_set[index] for index in jarvis_march_indices(point_set, logger)]


def _log_result(
    logger: StructuredLogger,
    hull: List[int],
    point_count: int,
    reason: WalkEnd
) -> None:
    if reason == WalkEnd.REVISITED:
        logger.warning(
            event=LogEvent.HULL_WALK_GUARDED,
            message="Walk reached a vertex already on the hull; stopping",
            metadata={'hull': hull}
        )
    if len(hull) < MIN_HULL_POINTS:
        logger.info(
            event=LogEvent.HULL_DEGENERATE,
            message="Input is collinear or coincident",
            metadata={'point_count': point_count, 'hull_size': len(hull)}
        )

    logger.info(
        event=LogEvent.HULL_SOLVE_COMPLETED,
        message=f"Hull built with {len(hull)} vertices",
        metadata={'point_count': point_count, 'hull_size': len(hull), 'end': reason.value}
    )

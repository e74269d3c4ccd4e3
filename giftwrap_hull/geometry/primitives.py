"""
Geometric Primitives Module
===========================

Pure geometric building blocks - NO state, NO side effects.

Design:
- Immutable points and point sets (frozen dataclass pattern)
- Point sets snapshot their input into a read-only array
- Cross-product sign for orientation
- Squared distances for ranking (no sqrt)
"""

import numpy as np
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from giftwrap_hull.errors import InsufficientPointsError


class Orientation(IntEnum):
    """
    Rotational sense of an ordered triple (p, q, r).

    Values follow the sign of
    (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y):
    - COLLINEAR: zero
    - CLOCKWISE: positive
    - COUNTER_CLOCKWISE: negative

    Clockwise/counter-clockwise are named for a y-up frame; on a y-down
    screen the visual sense is mirrored.
    """

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


@dataclass(frozen=True)
class Point:
    """
    Immutable 2-D point, equal by value.

    Identity inside a hull run is the index in the PointSet, not the
    coordinates: two input points may share coordinates.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    @classmethod
    def from_tuple(cls, xy: Sequence[float]) -> "Point":
        """Build from an (x, y) pair."""
        if len(xy) != 2:
            raise ValueError(f"Point needs exactly 2 coordinates, got {len(xy)}")
        return cls(x=float(xy[0]), y=float(xy[1]))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


PointLike = Union[Point, Sequence[float]]


@dataclass(frozen=True)
class PointSet:
    """
    Frozen, ordered snapshot of a point sequence.

    Design:
    - Coordinates copied at construction (external edits never leak in)
    - Nx2 float64 array, made read-only
    - Indices 0..n-1 are stable for the lifetime of the set

    Attributes:
        coords: Nx2 array of (x, y) coordinates
    """

    coords: np.ndarray

    def __post_init__(self):
        """Validate shape and lock the array."""
        if not isinstance(self.coords, np.ndarray):
            raise TypeError(f"coords must be np.ndarray, got {type(self.coords)}")
        if self.coords.ndim != 2 or self.coords.shape[1] != 2:
            raise ValueError(f"coords must be Nx2 array, got shape {self.coords.shape}")

        self.coords.flags.writeable = False

    @classmethod
    def from_points(cls, points: Union["PointSet", Iterable[PointLike], np.ndarray]) -> "PointSet":
        """
        Snapshot any point sequence into a new PointSet.

        Args:
            points: PointSet, Nx2 array, or iterable of Points / (x, y) pairs

        Returns:
            PointSet owning its own copy of the coordinates

        Raises:
            TypeError: If an element is not a point or a pair
            ValueError: If the data is not Nx2
        """
        if isinstance(points, PointSet):
            return points

        if isinstance(points, np.ndarray):
            coords = np.array(points, dtype=np.float64, copy=True)
            if coords.size == 0:
                coords = coords.reshape((0, 2))
            return cls(coords=coords)

        rows: List[Tuple[float, float]] = []
        for item in points:
            if isinstance(item, Point):
                rows.append(item.to_tuple())
            elif isinstance(item, (tuple, list, np.ndarray)):
                rows.append(Point.from_tuple(item).to_tuple())
            else:
                raise TypeError(f"Expected Point or (x, y) pair, got {type(item).__name__}")

        coords = np.array(rows, dtype=np.float64).reshape((len(rows), 2))
        return cls(coords=coords)

    def __len__(self) -> int:
        return int(self.coords.shape[0])

    def __getitem__(self, index: int) -> Point:
        x, y = self.coords[index]
        return Point(x=float(x), y=float(y))

    def __iter__(self) -> Iterator[Point]:
        for index in range(len(self)):
            yield self[index]

    def to_list(self) -> List[Point]:
        return list(self)

    def leftmost_index(self) -> int:
        return leftmost_index(self)


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """
    Orientation of the ordered triple (p, q, r).

    Args:
        p, q, r: Points

    Returns:
        Orientation.COLLINEAR, CLOCKWISE (positive cross) or
        COUNTER_CLOCKWISE (negative cross)
    """
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)

    if val > 0:
        return Orientation.CLOCKWISE
    elif val < 0:
        return Orientation.COUNTER_CLOCKWISE
    else:
        return Orientation.COLLINEAR


def squared_distance(p1: Point, p2: Point) -> float:
    """Squared Euclidean distance; only used to rank, so no sqrt."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def leftmost_index(points: Union[PointSet, Sequence[PointLike]]) -> int:
    """
    Index of the point with minimum x, ties broken by minimum y.

    Exact duplicates keep the lowest index.

    Raises:
        InsufficientPointsError: If points is empty
    """
    point_set = PointSet.from_points(points)
    if len(point_set) == 0:
        raise InsufficientPointsError(0)

    # lexsort sorts by the last key first; stable, so duplicates keep index order
    order = np.lexsort((point_set.coords[:, 1], point_set.coords[:, 0]))
    return int(order[0])

"""
Geometry Layer
==============

Bounded Context: Pure geometry and the batch hull solver.

Responsibilities:
- Point / PointSet representation (immutable)
- Orientation and squared-distance tests
- Batch gift wrapping
- NO step state, NO drawing

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
"""

from giftwrap_hull.geometry.primitives import (
    Orientation,
    Point,
    PointSet,
    orientation,
    squared_distance,
    leftmost_index,
)
from giftwrap_hull.geometry.solver import (
    WalkEnd,
    jarvis_march,
    jarvis_march_indices,
    prefer_candidate,
    walk_end,
)

__all__ = [
    "Orientation",
    "Point",
    "PointSet",
    "orientation",
    "squared_distance",
    "leftmost_index",
    "WalkEnd",
    "jarvis_march",
    "jarvis_march_indices",
    "prefer_candidate",
    "walk_end",
]

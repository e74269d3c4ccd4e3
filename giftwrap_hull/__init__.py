"""
Giftwrap Hull Engine v1.0
=========================

Bounded Context: Convex hull construction by gift wrapping (Jarvis March).

Design Philosophy:
- Separation of Concerns: Geometry, Stepping, Session separated
- Batch and step-by-step modes take identical decisions
- Index-based bookkeeping (duplicate coordinates are distinct points)
- Drawing and point input live outside this package

Architecture:

    giftwrap_hull/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── primitives.py  # Point, PointSet, orientation, squared_distance
    │   └── solver.py      # jarvis_march (batch)
    │
    ├── stepping/          # Step-by-step state machine (stateful)
    │   ├── state.py       # Phase, StepperSnapshot
    │   └── stepper.py     # HullStepper
    │
    ├── session.py         # HullSession (interactive orchestration)
    ├── errors.py          # Error taxonomy
    └── logging/           # Structured JSON logs

Usage:

    # 1. Batch
    from giftwrap_hull import jarvis_march

    hull = jarvis_march([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])

    # 2. Step-by-step (drive an animation one comparison at a time)
    from giftwrap_hull import HullStepper

    stepper = HullStepper(points)
    while not stepper.is_done:
        snapshot = stepper.step()
        draw(snapshot)   # anchor, candidate, checked, hull so far

    # 3. Or use a session (points editing + both modes)
    from giftwrap_hull import HullSession

    session = HullSession(points)
    session.begin_stepping()
    while session.next_step() is not None:
        ...
"""

# Errors
from giftwrap_hull.errors import (
    HullError,
    InsufficientPointsError,
    StepAfterFinishedError,
    SessionBusyError,
    SessionIdleError,
)

# Geometry Layer (immutable, stateless)
from giftwrap_hull.geometry.primitives import (
    Orientation,
    Point,
    PointSet,
    orientation,
    squared_distance,
    leftmost_index,
)
from giftwrap_hull.geometry.solver import jarvis_march, jarvis_march_indices, WalkEnd

# Stepping Layer (stateful)
from giftwrap_hull.stepping.state import Phase, StepperSnapshot
from giftwrap_hull.stepping.stepper import HullStepper

# Session (orchestration)
from giftwrap_hull.session import HullSession

__all__ = [
    # Errors
    "HullError",
    "InsufficientPointsError",
    "StepAfterFinishedError",
    "SessionBusyError",
    "SessionIdleError",
    # Geometry
    "Orientation",
    "Point",
    "PointSet",
    "orientation",
    "squared_distance",
    "leftmost_index",
    "jarvis_march",
    "jarvis_march_indices",
    "WalkEnd",
    # Stepping
    "Phase",
    "StepperSnapshot",
    "HullStepper",
    # Session
    "HullSession",
]

__version__ = "1.0.0"

"""
Hull Session Module
===================

Bounded Context: Interactive orchestration of the hull engine.

Design:
- Owns the editable working point list and the last published hull
- Runs either the batch solver or a HullStepper over a snapshot
- Point edits are rejected while stepping (the stepper owns a frozen copy)
- No drawing: callers read `points`, `hull` and stepper snapshots

Usage:
    session = HullSession()
    session.add_points([(0, 0), (4, 0), (4, 4), (0, 4)])

    # Batch
    hull = session.run()

    # Step-by-step
    session.begin_stepping()
    while session.next_step() is not None:
        ...
    hull = session.hull
"""

from typing import Iterable, List, Optional

from giftwrap_hull.errors import SessionBusyError, SessionIdleError
from giftwrap_hull.geometry.primitives import Point, PointLike
from giftwrap_hull.geometry.solver import jarvis_march
from giftwrap_hull.logging import LogEvent, StructuredLogger, library_logger
from giftwrap_hull.stepping.state import StepperSnapshot
from giftwrap_hull.stepping.stepper import HullStepper


_default_logger = library_logger("session")


class HullSession:
    """
    Controller tying a point source, the engine and a renderer together.

    State:
        points: Working points (mutable while idle)
        hull: Last published hull (empty until a run finishes)
        stepper: Active HullStepper while stepping, else None
    """

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        logger: Optional[StructuredLogger] = None
    ):
        self._logger = logger or _default_logger
        self._points: List[Point] = []
        self._hull: List[Point] = []
        self._stepper: Optional[HullStepper] = None

        if points is not None:
            self.add_points(points)

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    @property
    def hull(self) -> List[Point]:
        return list(self._hull)

    @property
    def stepper(self) -> Optional[HullStepper]:
        return self._stepper

    @property
    def is_stepping(self) -> bool:
        return self._stepper is not None

    # ------------------------------------------------------------------
    # Point editing
    # ------------------------------------------------------------------

    def add_point(self, x: float, y: float) -> Point:
        """
        Append one point.

        Raises:
            SessionBusyError: While a step-by-step run is active
        """
        self._ensure_idle("add points")
        point = Point(x=float(x), y=float(y))
        self._points.append(point)
        self._log_points_changed("add")
        return point

    def add_points(self, points: Iterable[PointLike]) -> None:
        self._ensure_idle("add points")
        for item in points:
            self._points.append(item if isinstance(item, Point) else Point.from_tuple(item))
        self._log_points_changed("add")

    def clear_points(self) -> None:
        """Drop points, hull and any active stepper."""
        self._abort_stepping("clear_points")
        self._points = []
        self._hull = []
        self._log_points_changed("clear")

    def clear_hull(self) -> None:
        """Drop the hull and any active stepper, keep the points."""
        self._abort_stepping("clear_hull")
        self._hull = []

    # ------------------------------------------------------------------
    # Batch mode
    # ------------------------------------------------------------------

    def run(self) -> List[Point]:
        """
        Solve the current points in one call and publish the hull.

        Raises:
            SessionBusyError: While a step-by-step run is active
            InsufficientPointsError: If fewer than 3 points
        """
        self._ensure_idle("run the batch solver")
        self._hull = jarvis_march(self._points)
        return self.hull

    # ------------------------------------------------------------------
    # Step-by-step mode
    # ------------------------------------------------------------------

    def begin_stepping(self) -> StepperSnapshot:
        """
        Enter step-by-step mode over a snapshot of the current points.

        Returns:
            Initial snapshot (phase START)

        Raises:
            SessionBusyError: If already stepping
            InsufficientPointsError: If fewer than 3 points (session stays idle)
        """
        self._ensure_idle("start stepping")
        self._stepper = HullStepper(self._points)
        self._logger.info(
            event=LogEvent.SESSION_STEPPING_STARTED,
            message="Step-by-step mode started",
            metadata={'point_count': len(self._points)}
        )
        return self._stepper.snapshot()

    def next_step(self) -> Optional[StepperSnapshot]:
        """
        Advance the active stepper by one step.

        Returns:
            Snapshot after the step, or None when this step finalized the
            run (the hull is published and the session returns to idle)

        Raises:
            SessionIdleError: If not stepping
        """
        if self._stepper is None:
            error = SessionIdleError("No step-by-step run is active")
            self._logger.warning(
                event=LogEvent.SESSION_STATE_ERROR,
                message=str(error),
            )
            raise error

        snapshot = self._stepper.step()
        if self._stepper.is_done:
            self._hull = list(self._stepper.result)
            self._stepper = None
            return None
        return snapshot

    def reset_stepping(self) -> None:
        """Abort step-by-step mode and clear the hull."""
        self._abort_stepping("reset")
        self._hull = []

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_idle(self, action: str) -> None:
        if self._stepper is not None:
            error = SessionBusyError(f"Cannot {action} while step-by-step mode is active")
            self._logger.warning(
                event=LogEvent.SESSION_STATE_ERROR,
                message=str(error),
                metadata={'step': self._stepper.step_count}
            )
            raise error

    def _abort_stepping(self, reason: str) -> None:
        if self._stepper is None:
            return
        self._logger.info(
            event=LogEvent.SESSION_STEPPING_ABORTED,
            message="Step-by-step mode aborted",
            metadata={'reason': reason, 'step': self._stepper.step_count}
        )
        self._stepper = None

    def _log_points_changed(self, action: str) -> None:
        self._logger.debug(
            event=LogEvent.SESSION_POINTS_CHANGED,
            message=f"Points {action}",
            metadata={'point_count': len(self._points)}
        )

    def __repr__(self) -> str:
        mode = "stepping" if self.is_stepping else "idle"
        return f"HullSession(points={len(self._points)}, hull={len(self._hull)}, mode={mode})"

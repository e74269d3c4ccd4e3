"""
Hull Stepper Module
===================

Stateful, resumable gift wrapping: one atomic decision per step() call.

Design:
- Encapsulates mutable state (anchor, candidate, checked, hull)
- Owns a frozen copy of the points
- Same comparison/termination rules as the batch solver
- Publishes an immutable StepperSnapshot after every step
- Not thread-safe (caller must synchronize; prefer one stepper per caller)

Usage:
    stepper = HullStepper(points)

    while not stepper.is_done:
        snapshot = stepper.step()
        render(snapshot)

    hull = stepper.result
"""

from typing import Iterator, List, Optional, Set, Tuple

from giftwrap_hull.errors import StepAfterFinishedError
from giftwrap_hull.geometry.primitives import Point, PointSet
from giftwrap_hull.geometry.solver import (
    PointsInput,
    WalkEnd,
    prefer_candidate,
    require_hull_points,
    walk_end,
)
from giftwrap_hull.logging import LogEvent, StructuredLogger, library_logger
from giftwrap_hull.stepping.state import Phase, StepperSnapshot


_default_logger = library_logger("stepper")


class HullStepper:
    """
    Gift wrapping as an explicit state machine.

    Phases:
        START: anchor = leftmost point; first step puts it on the hull
        CHECKING: each step compares one more point against the candidate
        ADVANCE_ANCHOR: the candidate becomes the anchor, or the walk closes
        FINISHED: first step here publishes `result`; later steps raise

    Run to completion, `hull_indices` equals jarvis_march_indices() on the
    same points.
    """

    def __init__(
        self,
        points: PointsInput,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Snapshot the points and enter START.

        Args:
            points: Input points (copied; later edits to the caller's
                    collection are not seen)
            logger: Optional structured logger

        Raises:
            InsufficientPointsError: If fewer than 3 points are given
        """
        self._logger = logger or _default_logger
        point_set = PointSet.from_points(points)
        require_hull_points(point_set, self._logger)

        self._point_set = point_set
        self._points: List[Point] = point_set.to_list()
        n = len(self._points)

        self._start = point_set.leftmost_index()
        self._anchor = self._start
        self._candidate = (self._start + 1) % n
        self._checked: Set[int] = set()
        self._hull: List[int] = []
        self._on_hull: Set[int] = set()
        self._step = 0
        self._phase = Phase.START
        self._end: Optional[WalkEnd] = None
        self._result: Optional[Tuple[Point, ...]] = None

        self._logger.info(
            event=LogEvent.STEPPER_CREATED,
            message="Step-by-step hull run created",
            metadata={'point_count': n, 'start': self._start}
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def points(self) -> PointSet:
        return self._point_set

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def candidate(self) -> int:
        return self._candidate

    @property
    def checked(self) -> frozenset:
        return frozenset(self._checked)

    @property
    def hull_indices(self) -> Tuple[int, ...]:
        return tuple(self._hull)

    @property
    def hull_points(self) -> List[Point]:
        return [self._points[index] for index in self._hull]

    @property
    def step_count(self) -> int:
        return self._step

    @property
    def start_index(self) -> int:
        return self._start

    @property
    def end_reason(self) -> Optional[WalkEnd]:
        """Why the walk closed, once FINISHED is reached."""
        return self._end

    @property
    def is_done(self) -> bool:
        """True once the finalizing step has published the result."""
        return self._result is not None

    @property
    def result(self) -> Optional[Tuple[Point, ...]]:
        """Published hull, or None until the finalizing step."""
        return self._result

    def snapshot(self) -> StepperSnapshot:
        """Current state without stepping."""
        return StepperSnapshot(
            phase=self._phase,
            anchor=self._anchor,
            candidate=self._candidate,
            checked=frozenset(self._checked),
            hull=tuple(self._hull),
            step=self._step,
            start=self._start,
            finalized=self.is_done,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def step(self) -> StepperSnapshot:
        """
        Execute exactly one atomic unit of work.

        Returns:
            Snapshot after the step

        Raises:
            StepAfterFinishedError: If the run was already finalized
        """
        if self.is_done:
            error = StepAfterFinishedError(self._step)
            self._logger.error(
                event=LogEvent.STEP_AFTER_FINISHED,
                message="step() called on a finished stepper",
                metadata={'step': self._step},
                exc_info=error,
            )
            raise error

        self._step += 1
        phase_before = self._phase

        if self._phase == Phase.START:
            self._step_start()
        elif self._phase == Phase.CHECKING:
            self._step_checking()
        elif self._phase == Phase.ADVANCE_ANCHOR:
            self._step_advance_anchor()
        else:
            self._step_finalize()

        if self._phase != phase_before:
            self._logger.debug(
                event=LogEvent.STEPPER_PHASE_CHANGED,
                message=f"{phase_before.value} -> {self._phase.value}",
                metadata={'step': self._step, 'anchor': self._anchor}
            )

        return self.snapshot()

    def _step_start(self) -> None:
        self._append_to_hull(self._anchor)
        self._checked.clear()
        self._phase = Phase.CHECKING

    def _step_checking(self) -> None:
        # Points are checked in ascending order, skipping the anchor
        index = len(self._checked)
        if index >= self._anchor:
            index += 1

        self._checked.add(index)
        turn, replace = prefer_candidate(self._points, self._anchor, index, self._candidate)

        self._logger.debug(
            event=LogEvent.STEPPER_STEP,
            message="Compared point against candidate",
            metadata={
                'step': self._step,
                'anchor': self._anchor,
                'checked': index,
                'candidate': self._candidate,
                'orientation': turn.name,
                'replaced': replace,
            }
        )

        if replace:
            self._candidate = index

        if len(self._checked) == len(self._points) - 1:
            self._phase = Phase.ADVANCE_ANCHOR

    def _step_advance_anchor(self) -> None:
        self._end = walk_end(self._points, self._on_hull, self._start, self._candidate)
        self._anchor = self._candidate

        if self._end is not None:
            if self._end == WalkEnd.REVISITED:
                self._logger.warning(
                    event=LogEvent.HULL_WALK_GUARDED,
                    message="Walk reached a vertex already on the hull; stopping",
                    metadata={'hull': list(self._hull), 'anchor': self._anchor}
                )
            self._phase = Phase.FINISHED
            return

        self._append_to_hull(self._anchor)
        self._candidate = (self._anchor + 1) % len(self._points)
        self._checked.clear()
        self._phase = Phase.CHECKING

    def _step_finalize(self) -> None:
        self._result = tuple(self.hull_points)
        self._logger.info(
            event=LogEvent.STEPPER_FINISHED,
            message=f"Hull published with {len(self._hull)} vertices",
            metadata={
                'steps': self._step,
                'hull': list(self._hull),
                'end': self._end.value if self._end else None,
            }
        )

    def _append_to_hull(self, index: int) -> None:
        self._hull.append(index)
        self._on_hull.add(index)

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------

    def iter_steps(self) -> Iterator[StepperSnapshot]:
        """Yield one snapshot per step until the run is finalized."""
        while not self.is_done:
            yield self.step()

    def run(self) -> List[Point]:
        """
        Step until finalized.

        Returns:
            Published hull points (same as jarvis_march() on the points)
        """
        for _ in self.iter_steps():
            pass
        return list(self._result)

    def __len__(self) -> int:
        """Number of hull vertices accumulated so far."""
        return len(self._hull)

    def __repr__(self) -> str:
        return (
            f"HullStepper(points={len(self._points)}, phase={self._phase.value}, "
            f"step={self._step}, hull={len(self._hull)})"
        )

"""
Hull Engine Errors
==================

Exception taxonomy for the hull engine.

- InsufficientPointsError: fewer than 3 points where a hull is requested
- StepAfterFinishedError: stepper driven past its finalizing step
- SessionBusyError / SessionIdleError: session used in the wrong mode

Degenerate geometry (collinear or coincident points) is NOT an error.
"""


class HullError(Exception):
    """Base class for every error raised by the hull engine."""
    pass


class InsufficientPointsError(HullError, ValueError):
    """Raised when hull construction is requested on fewer than 3 points."""

    MIN_POINTS = 3

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"At least {self.MIN_POINTS} points are required to build a convex hull, "
            f"got {count}"
        )


class StepAfterFinishedError(HullError, RuntimeError):
    """Raised when step() is called on a stepper that already finalized."""

    def __init__(self, step: int):
        self.step = step
        super().__init__(
            f"Stepper already finished after {step} steps; create a new stepper to run again"
        )


class SessionBusyError(HullError):
    """Raised when the point set is edited while step-by-step mode is active."""
    pass


class SessionIdleError(HullError):
    """Raised when a step is requested but no step-by-step run is active."""
    pass

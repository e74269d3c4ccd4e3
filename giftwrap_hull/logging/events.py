"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the hull engine's structured logs.

Event Naming Convention:
    <component>.<category>.<action>

    component: hull, stepper, session, error
    category: solve, walk, step
    action: started, completed, guarded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.hull_size
    | filter event = "hull.solve.completed"
    | stats avg(metadata.hull_size) by bin(1h)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - hull.*: Batch solver
    - stepper.*: Step-by-step state machine
    - session.*: Interactive session controller
    - error.*: Error conditions
    """

    # ========== Batch Solver Events ==========
    HULL_SOLVE_STARTED = "hull.solve.started"
    """Batch gift wrapping started."""

    HULL_SOLVE_COMPLETED = "hull.solve.completed"
    """Batch gift wrapping produced a hull."""

    HULL_DEGENERATE = "hull.degenerate"
    """Hull collapsed to fewer than 3 vertices (collinear or coincident input)."""

    HULL_WALK_GUARDED = "hull.walk.guarded"
    """Walk stopped on a vertex already on the hull instead of the start index."""

    # ========== Stepper Events ==========
    STEPPER_CREATED = "stepper.created"
    """Step-by-step run created over a point snapshot."""

    STEPPER_STEP = "stepper.step"
    """One atomic step executed."""

    STEPPER_PHASE_CHANGED = "stepper.phase_changed"
    """State machine moved to another phase."""

    STEPPER_FINISHED = "stepper.finished"
    """Step-by-step run finalized and published its hull."""

    # ========== Session Events ==========
    SESSION_POINTS_CHANGED = "session.points_changed"
    """Working point set edited (added or cleared)."""

    SESSION_STEPPING_STARTED = "session.stepping_started"
    """Session entered step-by-step mode."""

    SESSION_STEPPING_ABORTED = "session.stepping_aborted"
    """Session left step-by-step mode without finishing."""

    # ========== Error Events ==========
    INSUFFICIENT_POINTS = "error.insufficient_points"
    """Hull requested on fewer than 3 points."""

    STEP_AFTER_FINISHED = "error.step_after_finished"
    """Step requested on a finalized stepper."""

    SESSION_STATE_ERROR = "error.session_state"
    """Session operation rejected in the current mode."""

    CONFIG_ERROR = "error.config"
    """Run configuration could not be loaded."""


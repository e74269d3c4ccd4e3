"""
Stepper State Module
====================

Phases and immutable snapshots of the step-by-step hull run.

Design:
- Phase: str enum (serializes as its value)
- StepperSnapshot: frozen value object published after every step
- to_dict()/from_dict() for rendering collaborators

Phase flow:
    START -> CHECKING <-> ADVANCE_ANCHOR -> FINISHED
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Tuple


class Phase(str, Enum):
    """Stepper phase."""
    START = "start"
    CHECKING = "checking"
    ADVANCE_ANCHOR = "advance_anchor"
    FINISHED = "finished"


@dataclass(frozen=True)
class StepperSnapshot:
    """
    Immutable view of a HullStepper after one step.

    A renderer needs nothing else to draw the current comparison: the
    anchor, the candidate ray, the already compared points and the hull
    polyline so far.

    Attributes:
        phase: Current phase
        anchor: Index of the current hull vertex
        candidate: Index of the best next vertex found so far
        checked: Indices compared against the candidate this round
        hull: Hull vertex indices accumulated so far, in walk order
        step: Number of step() calls executed
        start: Index the walk started from (leftmost point)
        finalized: True once the FINISHED step published the hull

    Example:
        >>> snap = stepper.step()
        >>> snap.phase, snap.anchor, snap.candidate
        (<Phase.CHECKING: 'checking'>, 0, 1)
    """

    phase: Phase
    anchor: int
    candidate: int
    checked: FrozenSet[int]
    hull: Tuple[int, ...]
    step: int
    start: int
    finalized: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict (checked sorted ascending)."""
        return {
            'phase': self.phase.value,
            'anchor': self.anchor,
            'candidate': self.candidate,
            'checked': sorted(self.checked),
            'hull': list(self.hull),
            'step': self.step,
            'start': self.start,
            'finalized': self.finalized,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StepperSnapshot':
        """
        Deserialize from dict.

        Raises:
            ValueError: If required keys are missing or the phase is unknown
        """
        try:
            return cls(
                phase=Phase(data['phase']),
                anchor=int(data['anchor']),
                candidate=int(data['candidate']),
                checked=frozenset(int(i) for i in data['checked']),
                hull=tuple(int(i) for i in data['hull']),
                step=int(data['step']),
                start=int(data['start']),
                finalized=bool(data.get('finalized', False)),
            )
        except KeyError as e:
            raise ValueError(f"Missing required snapshot field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid snapshot data: {e}")

    def __str__(self) -> str:
        return (
            f"step {self.step} [{self.phase.value}] anchor={self.anchor} "
            f"candidate={self.candidate} checked={len(self.checked)} hull={list(self.hull)}"
        )

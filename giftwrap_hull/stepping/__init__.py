"""
Stepping Layer
==============

Bounded Context: Step-by-step hull construction (stateful).

Responsibilities:
- Replay gift wrapping one comparison at a time (HullStepper)
- Publish immutable snapshots for observers (StepperSnapshot)

Design Philosophy:
- Mutable state owned by one stepper instance
- Immutable outputs (StepperSnapshot)
- Same decisions as the batch solver
"""

from giftwrap_hull.stepping.state import Phase, StepperSnapshot
from giftwrap_hull.stepping.stepper import HullStepper

__all__ = [
    "Phase",
    "StepperSnapshot",
    "HullStepper",
]

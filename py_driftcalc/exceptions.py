"""py_driftcalc exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── ValueError
│   └── InvalidInputError
└── RuntimeError
    └── SolverRuntimeError
        ├── ZeroFindingError
        └── RangeError

Exception Types
---------------

- InvalidInputError: Raised before any simulation when a trajectory input is unusable:
  a field is missing, non-numeric or non-finite, or muzzle velocity, bullet weight or
  ballistic coefficient is not strictly positive. Contains:
  - field: Name of the offending input field (wire name)
  - value: The rejected value
  - reason: Human-readable reason

- SolverRuntimeError: Base class for errors raised while stepping a trajectory.

- ZeroFindingError: Raised when the zero pass cannot reach the zero range.
  Contains:
  - zero_range: Requested zero range in meters
  - last_distance: Distance reached before the pass stopped
  - reason: Specific reason for failure

- RangeError: Raised when the trajectory table stops before the target distance. Contains:
  - reason: Specific reason for range limitation.  Enumerated reasons:
    - MinimumVelocityReached: Projectile velocity dropped to the configured floor
  - incomplete_trajectory: Samples computed before failure
  - last_distance: Last sampled distance before failure
"""
from __future__ import annotations

from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from py_driftcalc.trajectory_data import TrajectorySample

__all__ = (
    'InvalidInputError',
    'SolverRuntimeError',
    'ZeroFindingError',
    'RangeError',
)


class InvalidInputError(ValueError):
    """Trajectory input rejected before simulation."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field: str = field
        self.value: Any = value
        self.reason: str = reason
        super().__init__(f"Invalid input '{field}' = {value!r}: {reason}")


class SolverRuntimeError(RuntimeError):
    """Solver error."""


class ZeroFindingError(SolverRuntimeError):
    """Exception for zero passes that cannot reach the zero range."""

    def __init__(self, zero_range: float, last_distance: float, reason: str = ""):
        self.zero_range: float = zero_range
        self.last_distance: float = last_distance
        self.reason: str = reason
        msg = f'Zero range {zero_range} m not reached, stopped at {last_distance} m.'
        if reason:
            msg = f"{reason}. " + msg
        super().__init__(msg)


class RangeError(SolverRuntimeError):
    """Exception for trajectories that don't reach requested distance.

    Contains:
    - The error reason
    - The samples computed before the exception occurred
    - Last sampled distance before the exception occurred
    """

    reason: str
    incomplete_trajectory: List[TrajectorySample]
    last_distance: Optional[float]

    MinimumVelocityReached: str = "Minimum velocity reached"

    def __init__(self, reason: str, ranges: List[TrajectorySample]):
        self.reason: str = reason
        self.incomplete_trajectory = ranges

        message = f'Max range not reached: ({self.reason})'
        if len(ranges) > 0:
            self.last_distance = ranges[-1].distance
            message += f', last distance: {self.last_distance} m'
        else:
            self.last_distance = None
        super().__init__(message)

"""Engine protocol module for py_driftcalc.

This module defines the EngineProtocol type protocol that all drift ballistics
engines must implement: tabulating a trajectory and solving the zero angle.
The Calculator facade accepts any class conforming to it.
"""

# Standard library imports
from abc import abstractmethod
from typing import Optional, TypeVar

# Third-party imports
from typing_extensions import List, Protocol, runtime_checkable

# Local imports
from py_driftcalc.shot import TrajectoryInput
from py_driftcalc.trajectory_data import HitResult

__all__ = ['EngineProtocol', 'ConfigT']

# Type variable for engine configuration
ConfigT = TypeVar("ConfigT", covariant=True)


@runtime_checkable
class EngineProtocol(Protocol[ConfigT]):
    """Protocol defining the interface for drift ballistics engines.

    Type Parameters:
        ConfigT: The configuration type used by this engine implementation.

    Required Methods:
        - fire: Produce the trajectory table for a shot.
        - zero_angle: Bore elevation that puts the trajectory on the sight line at the zero range.
        - sample_distances: Distances the table is tabulated at.
    """

    def __init__(self, config: Optional[ConfigT] = None) -> None:
        ...

    @abstractmethod
    def fire(self, shot_info: TrajectoryInput) -> HitResult:
        """Compute the trajectory table from the muzzle to `shot_info.target_distance`.

        Args:
            shot_info: Trajectory input. It is validated before any stepping.

        Returns:
            HitResult: The table; `.error` holds a RangeError if it stopped early.

        Raises:
            InvalidInputError: If shot_info is rejected.
            ZeroFindingError: If the zero pass cannot reach the zero range.
        """
        ...

    @abstractmethod
    def zero_angle(self, shot_info: TrajectoryInput) -> float:
        """Calculate the bore elevation (radians) zeroing the sight at `shot_info.zero_range`.

        Raises:
            InvalidInputError: If shot_info is rejected.
            ZeroFindingError: If the zero pass cannot reach the zero range.
        """
        ...

    @abstractmethod
    def sample_distances(self, target_distance: float) -> List[int]:
        """Distances (m) tabulated for `target_distance`, starting at 0."""
        ...

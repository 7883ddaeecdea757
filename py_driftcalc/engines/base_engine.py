"""Base integration engine for drift trajectory tables.

The module serves as the core framework for the engine system, providing:
- Abstract base class BaseIntegrationEngine implementing the EngineProtocol
- The zero-angle solve and the trajectory table assembly shared by all engines

Classes:
    BaseIntegrationEngine: Abstract base class for integration engines
    StepState: State of a trajectory stepped out to a distance

Architecture:
    BaseIntegrationEngine provides the common algorithms (sampling, zeroing, table
    assembly) while concrete subclasses implement `_integrate`, the stepping of a
    single trajectory from the muzzle out to a whole number of meters.

    Every tabulated distance is stepped from the muzzle again rather than continued
    from the previous one, so each row depends only on its own distance.

See Also:
    py_driftcalc.generics.engine.EngineProtocol: Protocol interface
    py_driftcalc.engines.euler: Meter-step Euler implementation
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod

from typing_extensions import List, NamedTuple, Optional, TypeVar

from py_driftcalc.config import BaseEngineConfig, BaseEngineConfigDict, create_base_engine_config
from py_driftcalc.exceptions import RangeError, ZeroFindingError
from py_driftcalc.generics.engine import EngineProtocol
from py_driftcalc.logger import logger
from py_driftcalc.shot import ShotProps, TrajectoryInput
from py_driftcalc.trajectory_data import HitResult, TrajectorySample

__all__ = (
    'BaseIntegrationEngine',
    'StepState',
)


class StepState(NamedTuple):
    """Trajectory state after stepping from the muzzle.

    Attributes:
        velocity: Bullet speed, m/s.
        time: Flight time, s.
        drop: Accumulated gravity drop below the bore line, m.
        steps: Number of steps completed.
        termination_reason: RangeError reason if stepping stopped early.
    """

    velocity: float
    time: float
    drop: float
    steps: int
    termination_reason: Optional[str] = None


_BaseEngineConfigDictT = TypeVar("_BaseEngineConfigDictT", bound='BaseEngineConfigDict', covariant=True)


class BaseIntegrationEngine(ABC, EngineProtocol[_BaseEngineConfigDictT]):
    """All calculations are done in metric units (meters and m/s)."""

    def __init__(self, _config: Optional[_BaseEngineConfigDictT] = None):
        """Initialize the class.

        Args:
            _config: The configuration object.
        """
        self._config: BaseEngineConfig = create_base_engine_config(_config)

    @property
    def config(self) -> BaseEngineConfig:
        """Engine configuration in effect."""
        return self._config

    def _init_trajectory(self, shot: TrajectoryInput) -> ShotProps:
        """Validate the shot and convert it into engine scalars.

        Args:
            shot: Information about the shot.
        """
        return ShotProps.from_shot(shot)

    def sample_increment(self, target_distance: float) -> int:
        """Distance between tabulated rows for `target_distance` (m)."""
        if target_distance <= self._config.cShortRangeLimit:
            return self._config.cShortRangeStep
        return self._config.cLongRangeStep

    def sample_distances(self, target_distance: float) -> List[int]:
        """Tabulated distances: 0 and each increment not beyond `target_distance`.

        The last row is the largest multiple of the increment that does not exceed
        `target_distance`, e.g. 450 for 457.
        """
        increment = self.sample_increment(target_distance)
        distances: List[int] = []
        distance = 0
        while distance <= target_distance:
            distances.append(distance)
            distance += increment
        return distances

    def zero_angle(self, shot_info: TrajectoryInput) -> float:
        """Bore elevation in radians that puts the trajectory on the sight line at the zero range.

        Args:
            shot_info: The shot information.

        Returns:
            Zero angle in radians; 0 when the zero range is not positive.
        """
        return self._zero_angle(self._init_trajectory(shot_info))

    def _zero_angle(self, props: ShotProps) -> float:
        """Zero angle from a wind-free pass out to the zero range.

        The pass ignores the headwind: zeroing is a property of the bore-to-sight
        geometry, not of the wind on the day.
        """
        if props.zero_range <= 0:
            logger.warning(f"Zero range {props.zero_range} m is not positive; "
                           f"sight line taken as parallel to the bore")
            return 0.0
        # Steps at meters 0..zero_range inclusive
        steps = math.floor(props.zero_range) + 1
        state = self._integrate(props, steps, 0.0)
        if state.termination_reason is not None:
            raise ZeroFindingError(props.zero_range, state.steps, state.termination_reason)
        return math.atan((state.drop + props.sight_height_m) / props.zero_range)

    def fire(self, shot_info: TrajectoryInput) -> HitResult:
        """Compute the trajectory table for the given shot.

        Args:
            shot_info: The shot information.

        Returns:
            HitResult: Rows from 0 m up to the target distance; `.error` holds a
                RangeError if the velocity floor stopped the table early.
        """
        return self._fire(self._init_trajectory(shot_info))

    def _fire(self, props: ShotProps) -> HitResult:
        zero_angle = self._zero_angle(props)
        zero_tangent = math.tan(zero_angle)
        ranges: List[TrajectorySample] = []
        error: Optional[RangeError] = None
        step_count = 0
        for distance in self.sample_distances(props.target_distance):
            if distance == 0:
                ranges.append(TrajectorySample.at_muzzle(props))
                continue
            state = self._integrate(props, distance, props.headwind)
            step_count += state.steps
            if state.termination_reason is not None:
                error = RangeError(state.termination_reason, ranges)
                break
            ranges.append(TrajectorySample.from_props(
                props, distance, state.velocity, state.time, state.drop, zero_tangent
            ))
        logger.debug(f"{self.__class__.__name__} ran {step_count} steps for {len(ranges)} rows")
        return HitResult(props, ranges, zero_angle, error)

    @abstractmethod
    def _integrate(self, props: ShotProps, steps: int, headwind: float) -> StepState:
        """Step the trajectory from the muzzle for `steps` one-meter steps.

        Args:
            props: Information specific to the shot.
            steps: Number of one-meter steps to take.
            headwind: Headwind component added to the bullet speed for drag, m/s.

        Returns:
            StepState at the end of the last completed step.
        """
        raise NotImplementedError

"""Drift ballistics calculator interface.

This module provides the `Calculator` class, the primary interface for trajectory
tables, and `compute()`, the pure function behind the HTTP endpoint.

Key Classes:
    - Calculator: Trajectory calculator bound to an engine class and configuration

Key Functions:
    - compute: Input record -> list of TrajectorySample
"""
from dataclasses import dataclass, field
from typing import Any, Generic, Mapping

from deprecated import deprecated
from typing_extensions import List, Optional, Type, TypeVar, Union

from py_driftcalc.config import BaseEngineConfigDict
from py_driftcalc.engines import EulerIntegrationEngine
from py_driftcalc.generics.engine import EngineProtocol
from py_driftcalc.shot import TrajectoryInput
from py_driftcalc.trajectory_data import HitResult, TrajectorySample

ConfigT = TypeVar('ConfigT', covariant=True)

DEFAULT_ENGINE: Type[EngineProtocol] = EulerIntegrationEngine

ShotLike = Union[TrajectoryInput, Mapping[str, Any]]


def _as_input(shot: ShotLike) -> TrajectoryInput:
    if isinstance(shot, TrajectoryInput):
        return shot
    return TrajectoryInput.from_dict(shot)


@dataclass
class Calculator(Generic[ConfigT]):
    """Basic interface for the drift ballistics calculator."""

    config: Optional[ConfigT] = field(default=None)
    engine: Type[EngineProtocol] = field(default=DEFAULT_ENGINE)
    _engine_instance: EngineProtocol[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.engine, type):
            raise TypeError("Invalid engine type, expected an EngineProtocol class")
        self._engine_instance = self.engine(self.config)

    def __getattr__(self, item: str) -> Any:
        """Delegate attribute access to the underlying engine instance.

        Raises:
            AttributeError: If the attribute is not found on either the
                `Calculator` object or its `_engine_instance`.
        """
        if item == '_engine_instance':
            raise AttributeError(item)
        if hasattr(self._engine_instance, item):
            return getattr(self._engine_instance, item)
        raise AttributeError(
            f"'{self.__class__.__name__}' object or its underlying engine "
            f"'{self._engine_instance.__class__.__name__}' has no attribute '{item}'"
        )

    def zero_angle(self, shot: ShotLike) -> float:
        """Bore elevation (radians) that zeroes the sight at `shot.zero_range`.

        Args:
            shot: TrajectoryInput or JSON record.
        """
        return self._engine_instance.zero_angle(_as_input(shot))

    def fire(self, shot: ShotLike, *, raise_range_error: bool = True) -> HitResult:
        """Calculate the trajectory table for the given shot.

        Args:
            shot: TrajectoryInput or JSON record.
            raise_range_error: If True, raises RangeError if returned by integration.

        Returns:
            HitResult: Object containing the computed table.

        Raises:
            InvalidInputError: If the input is rejected.
            RangeError: If the table stopped early and `raise_range_error` is set.
        """
        result = self._engine_instance.fire(_as_input(shot))
        if result.error and raise_range_error:
            raise result.error
        return result


def compute(shot: ShotLike, config: Optional[BaseEngineConfigDict] = None) -> List[TrajectorySample]:
    """Compute the trajectory table for one input.

    Pure function: the same input always yields the same rows.

    Args:
        shot: TrajectoryInput or JSON record with the camelCase wire names.
        config: Optional engine configuration overrides.

    Returns:
        Samples by increasing distance, starting at 0 m.

    Raises:
        InvalidInputError: If the input is rejected; no rows are computed.
        RangeError: If the bullet slows to the velocity floor before the target distance.

    Examples:
        >>> rows = compute({'muzzleVelocity': 823, 'bulletWeight': 10.9, 'ballisticCoefficient': 0.462,
        ...                 'zeroRange': 91, 'targetDistance': 457, 'windSpeed': 4.5, 'windAngle': 90,
        ...                 'sightHeight': 38, 'temperature': 15, 'altitude': 0})
        >>> rows[0].velocity, rows[-1].distance
        (823, 450)
    """
    return list(Calculator(config=config).fire(shot))


@deprecated(reason="Use `py_driftcalc.compute` instead.", version="1.0.0")
def calculate_ballistics(shot: ShotLike) -> List[TrajectorySample]:
    """Synonym for compute()."""
    return compute(shot)


__all__ = ('Calculator', 'compute', 'calculate_ballistics', 'DEFAULT_ENGINE')

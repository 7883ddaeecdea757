"""Shot input and engine-ready shot properties.

- TrajectoryInput: the trajectory request (muzzle conditions, environment, geometry), all in
    metric units. Maps to and from the camelCase JSON record used on the wire.
- ShotProps: a TrajectoryInput translated into engine-ready scalars (kg, m, radians, corrected BC,
    wind components), built once per computation after validation.

Notes:
- End users work with TrajectoryInput objects; engines construct ShotProps internally.
- HitResult objects include the ShotProps instance used to calculate a trajectory.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Mapping

from typing_extensions import Any, Dict, Tuple

from py_driftcalc.conditions import Atmo, Wind
from py_driftcalc.exceptions import InvalidInputError

__all__ = ("TrajectoryInput", "ShotProps", "WIRE_NAMES")

#: Field name -> JSON wire name
WIRE_NAMES: Dict[str, str] = {
    'muzzle_velocity': 'muzzleVelocity',
    'bullet_weight': 'bulletWeight',
    'ballistic_coefficient': 'ballisticCoefficient',
    'zero_range': 'zeroRange',
    'target_distance': 'targetDistance',
    'wind_speed': 'windSpeed',
    'wind_angle': 'windAngle',
    'sight_height': 'sightHeight',
    'temperature': 'temperature',
    'altitude': 'altitude',
}

_STRICTLY_POSITIVE: Tuple[str, ...] = ('muzzle_velocity', 'bullet_weight', 'ballistic_coefficient')
_NON_NEGATIVE: Tuple[str, ...] = ('target_distance', 'wind_speed')


@dataclass(frozen=True)
class TrajectoryInput:
    """All information needed to compute a drift trajectory table.

    Attributes:
        muzzle_velocity: Muzzle velocity, m/s.
        bullet_weight: Bullet weight, grams.
        ballistic_coefficient: G1 ballistic coefficient.
        zero_range: Distance where line of sight and trajectory intersect, m.
        target_distance: Maximum distance to tabulate, m.
        wind_speed: Wind speed, m/s.
        wind_angle: Wind direction in degrees; 0 is a headwind, 90 a full-value crosswind.
        sight_height: Height of the sight above the bore axis, mm.
        temperature: Air temperature, °C.
        altitude: Altitude above sea level, m.
    """

    muzzle_velocity: float
    bullet_weight: float
    ballistic_coefficient: float
    zero_range: float
    target_distance: float
    wind_speed: float = 0.0
    wind_angle: float = 0.0
    sight_height: float = 0.0
    temperature: float = 15.0
    altitude: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrajectoryInput:
        """Build an input from the JSON record (camelCase wire names).

        Raises:
            InvalidInputError: If a field is missing, is not a number or is too large for a float.
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError('input', data, "expected a JSON object")
        values: Dict[str, float] = {}
        for name, wire in WIRE_NAMES.items():
            if wire not in data:
                raise InvalidInputError(wire, None, "field is required")
            value = data[wire]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(wire, value, "must be a number")
            try:
                values[name] = float(value)
            except OverflowError:
                raise InvalidInputError(wire, value, "must be finite") from None
        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        """Return the input as a JSON record (camelCase wire names)."""
        return {wire: getattr(self, name) for name, wire in WIRE_NAMES.items()}

    def validate(self) -> TrajectoryInput:
        """Check the input before any simulation.

        Returns:
            self, for chaining.

        Raises:
            InvalidInputError: On the first unusable field.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(WIRE_NAMES[f.name], value, "must be a number")
            try:
                finite = math.isfinite(value)
            except OverflowError:
                finite = False
            if not finite:
                raise InvalidInputError(WIRE_NAMES[f.name], value, "must be finite")
        for name in _STRICTLY_POSITIVE:
            if getattr(self, name) <= 0:
                raise InvalidInputError(WIRE_NAMES[name], getattr(self, name), "must be greater than 0")
        for name in _NON_NEGATIVE:
            if getattr(self, name) < 0:
                raise InvalidInputError(WIRE_NAMES[name], getattr(self, name), "must not be negative")
        return self

    @property
    def atmo(self) -> Atmo:
        """Atmosphere in effect during the shot."""
        return Atmo(self.altitude, self.temperature)

    @property
    def wind(self) -> Wind:
        """Wind in effect during the shot."""
        return Wind(self.wind_speed, self.wind_angle)


@dataclass(frozen=True)
class ShotProps:
    """Shot parameters converted for the trajectory engines.

    Attributes:
        shot: The validated TrajectoryInput.
        muzzle_velocity: m/s.
        mass_kg: Bullet mass, kg.
        density_ratio: Local to standard air density.
        corrected_bc: Ballistic coefficient corrected for air density.
        sight_height_m: Sight height, m.
        sight_height_mm: Sight height, mm.
        headwind: Headwind component, m/s (negative for a tailwind).
        crosswind: Crosswind component, m/s.
        zero_range: m.
        target_distance: m.
    """

    shot: TrajectoryInput
    muzzle_velocity: float
    mass_kg: float
    density_ratio: float
    corrected_bc: float
    sight_height_m: float
    sight_height_mm: float
    headwind: float
    crosswind: float
    zero_range: float
    target_distance: float

    @classmethod
    def from_shot(cls, shot: TrajectoryInput) -> ShotProps:
        """Validate `shot` and derive engine scalars.

        Raises:
            InvalidInputError: If the input is rejected.
        """
        shot.validate()
        atmo = shot.atmo
        wind = shot.wind
        return cls(
            shot=shot,
            muzzle_velocity=shot.muzzle_velocity,
            mass_kg=shot.bullet_weight / 1000,
            density_ratio=atmo.density_ratio,
            corrected_bc=atmo.corrected_bc(shot.ballistic_coefficient),
            sight_height_m=shot.sight_height / 1000,
            sight_height_mm=shot.sight_height,
            headwind=wind.headwind,
            crosswind=wind.crosswind,
            zero_range=shot.zero_range,
            target_distance=shot.target_distance,
        )

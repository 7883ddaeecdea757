"""Drift Trajectory Data Structures.

Core Components:
    - TrajectorySample: Rounded ballistic state at one tabulated distance
    - HitResult: Complete trajectory table with the values it was derived from

Typical Usage:
    ```python
    from py_driftcalc import Calculator, TrajectoryInput

    calc = Calculator()
    hit_result = calc.fire(TrajectoryInput(823, 10.9, 0.462, 91, 457, 4.5, 90, 38, 15, 0))

    for point in hit_result:
        print(f"{point.distance} m: drop {point.drop} mm, drift {point.wind_drift} mm, {point.mil} mil")

    payload = hit_result.to_list()  # JSON-ready rows
    ```

Rounding follows the calculator's published tables: integer fields round halves towards
positive infinity, fixed-decimal fields round halves away from zero on the exact binary value.
"""
from __future__ import annotations

import math
import typing
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

from typing_extensions import Dict, List, NamedTuple, Optional, Tuple, Union

from py_driftcalc.constants import cMilsPerRadian, cMinutesPerRadian
from py_driftcalc.exceptions import RangeError

if typing.TYPE_CHECKING:
    from pandas import DataFrame
    from py_driftcalc.shot import ShotProps

__all__ = (
    'TrajectorySample',
    'HitResult',
    'round_half_up',
    'round_fixed',
)

#: TrajectorySample field -> JSON wire name
SAMPLE_WIRE_NAMES: Dict[str, str] = {
    'distance': 'distance',
    'velocity': 'velocity',
    'energy': 'energy',
    'drop': 'drop',
    'wind_drift': 'windDrift',
    'time_of_flight': 'timeOfFlight',
    'moa': 'moa',
    'mil': 'mil',
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves go towards positive infinity."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def round_fixed(value: float, digits: int) -> float:
    """Round to `digits` decimals; halves go away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)) + 0.0


class TrajectorySample(NamedTuple):
    """Data for one tabulated distance.

    Attributes:
        distance: Down-range distance, m
        velocity: Bullet speed, m/s (rounded)
        energy: Kinetic energy, J (rounded)
        drop: Distance below the line of sight, mm (rounded; negative is above)
        wind_drift: Crosswind deflection, mm (rounded)
        time_of_flight: Seconds, 3 decimals
        moa: Elevation correction in minutes of angle, 1 decimal
        mil: Elevation correction in milliradians, 1 decimal
    """

    distance: Union[int, float]
    velocity: int
    energy: int
    drop: int
    wind_drift: int
    time_of_flight: float
    moa: float
    mil: float

    def to_dict(self) -> Dict[str, Union[int, float]]:
        """Return the sample as a JSON record (camelCase wire names)."""
        return {wire: getattr(self, name) for name, wire in SAMPLE_WIRE_NAMES.items()}

    def formatted(self) -> Tuple[str, ...]:
        """Return attributes as tuple of unit-suffixed strings."""
        return (
            f'{self.distance} m',
            f'{self.velocity} m/s',
            f'{self.energy} J',
            f'{self.drop} mm',
            f'{self.wind_drift} mm',
            f'{self.time_of_flight:.3f} s',
            f'{self.moa:.1f} MOA',
            f'{self.mil:.1f} mil',
        )

    @staticmethod
    def calculate_energy(mass_kg: float, velocity: float) -> float:
        """Kinetic energy in joules of `mass_kg` moving at `velocity` m/s."""
        return 0.5 * mass_kg * velocity * velocity

    @staticmethod
    def at_muzzle(props: ShotProps) -> TrajectorySample:
        """Sample at distance 0.

        The point of impact sits one sight height below the line of sight and no
        correction applies.
        """
        energy = TrajectorySample.calculate_energy(props.mass_kg, props.muzzle_velocity)
        return TrajectorySample(
            distance=0,
            velocity=round_half_up(props.muzzle_velocity),
            energy=round_half_up(energy),
            drop=round_half_up(-props.sight_height_mm),
            wind_drift=0,
            time_of_flight=0,
            moa=0,
            mil=0,
        )

    @staticmethod
    def from_props(props: ShotProps,
                   distance: Union[int, float],
                   velocity: float,
                   time: float,
                   drop: float,
                   zero_tangent: float) -> TrajectorySample:
        """Create a sample from the state stepped out to `distance` > 0.

        Args:
            props: Shot properties.
            distance: Down-range distance, m.
            velocity: Bullet speed at `distance`, m/s.
            time: Flight time to `distance`, s.
            drop: Accumulated gravity drop below the bore line, m.
            zero_tangent: Tangent of the zero angle.
        """
        # Lag method: extra flight time over a drag-free bullet
        lag = time - (distance / props.muzzle_velocity)
        drift = props.crosswind * lag
        trajectory_rise = zero_tangent * distance
        drop_from_sight = drop - trajectory_rise + props.sight_height_m
        energy = TrajectorySample.calculate_energy(props.mass_kg, velocity)
        angle = drop_from_sight / distance  # small-angle approximation
        return TrajectorySample(
            distance=distance,
            velocity=round_half_up(velocity),
            energy=round_half_up(energy),
            drop=round_half_up(drop_from_sight * 1000),
            wind_drift=round_half_up(drift * 1000),
            time_of_flight=round_fixed(time, 3),
            moa=round_fixed(angle * cMinutesPerRadian, 1),
            mil=round_fixed(angle * cMilsPerRadian, 1),
        )


@dataclass(frozen=True)
class HitResult:
    """Computed trajectory table of the shot.

    Attributes:
        props: The parameters of the shot calculation.
        trajectory: Computed TrajectorySample rows, by increasing distance.
        zero_angle: Bore elevation above the line of sight, radians.
        error: RangeError, if any.
    """

    props: ShotProps
    trajectory: List[TrajectorySample] = field(repr=False)
    zero_angle: float = 0.0
    error: Optional[RangeError] = None

    def __len__(self) -> int:
        return len(self.trajectory)

    def __iter__(self):
        yield from self.trajectory

    def __getitem__(self, item):
        return self.trajectory[item]

    @property
    def density_ratio(self) -> float:
        """Air density ratio used for the table."""
        return self.props.density_ratio

    @property
    def corrected_bc(self) -> float:
        """Ballistic coefficient after the air density correction."""
        return self.props.corrected_bc

    def to_list(self) -> List[Dict[str, Union[int, float]]]:
        """Return the table as JSON records."""
        return [p.to_dict() for p in self.trajectory]

    def get_at_distance(self, d: float) -> TrajectorySample:
        """Get the sample tabulated at distance `d`.

        Raises:
            KeyError: If `d` is not one of the tabulated distances.
        """
        for row in self.trajectory:
            if row.distance == d:
                return row
        raise KeyError(f"No sample at {d} m; tabulated distances are "
                       f"{[row.distance for row in self.trajectory]}")

    def dataframe(self, formatted: bool = False) -> DataFrame:
        """Return the trajectory table as a DataFrame.

        Args:
            formatted: False for values as numbers; True for unit-suffixed strings. Default is False.

        Raises:
            ImportError: If pandas is not installed.
        """
        try:
            from py_driftcalc.visualize.dataframe import hit_result_as_dataframe  # pylint: disable=import-outside-toplevel
            return hit_result_as_dataframe(self, formatted)
        except ImportError as err:
            raise ImportError(
                "Use `pip install py_driftcalc[charts]` to get trajectory as pandas.DataFrame"
            ) from err

"""Environmental conditions used by drift ballistics engines.

What this module provides
- Atmo: Air density model from temperature and altitude. Pressure follows the imperial
    barometric formula (altitude in feet, pressure in inHg) and density scales with
    pressure and inverse absolute temperature. The density ratio corrects the
    ballistic coefficient: thinner air means less drag, i.e. an effectively higher BC.
- Wind: Constant wind over the whole trajectory, decomposed into a headwind component
    (along the line of fire) and a crosswind component.

Design notes
- Units: all values are plain floats in metric units (m, m/s, °C).
- Wind.direction: 0° is a pure headwind blowing from the target towards the shooter;
    180° is a pure tailwind; 90° is a full-value crosswind.

Examples:
>>> atmo = Atmo()
>>> atmo.density_ratio
1.0
>>> Wind(4.5, 180).headwind
-4.5
"""

from __future__ import annotations

import math

from py_driftcalc.constants import (
    cDegreesCtoK,
    cFeetPerMeter,
    cPressureExponent,
    cPressureLapseCoefficient,
    cStandardDensityMetric,
    cStandardPressure,
    cStandardTemperatureC,
    cStandardTemperatureK,
)
from py_driftcalc.exceptions import InvalidInputError

__all__ = ("Atmo", "Wind")


class Atmo:
    """Atmospheric conditions and density calculations.

    Attributes:
        altitude (float): Altitude relative to sea level, meters.
        temperature (float): Ambient air temperature, °C.
        pressure (float): Barometric pressure from the altitude, inHg.
        density (float): Air density in kg/m^3.
        density_ratio (float): Ratio of local air density to standard density.
    """

    _altitude: float
    _temperature: float
    _pressure: float
    _density: float

    def __init__(self, altitude: float = 0.0, temperature: float = cStandardTemperatureC):
        """Initialize an `Atmo` instance.

        Args:
            altitude: Altitude relative to sea level in meters. Defaults to 0.
            temperature: Ambient temperature in °C. Defaults to 15.

        Raises:
            InvalidInputError: If the temperature is at or below absolute zero, or the
                altitude is beyond the validity of the barometric formula.
        """
        temp_k = temperature + cDegreesCtoK
        if temp_k <= 0:
            raise InvalidInputError('temperature', temperature, "must be above absolute zero (-273.15 °C)")
        self._altitude = altitude
        self._temperature = temperature
        self._pressure = Atmo.standard_pressure(altitude)
        self._density = cStandardDensityMetric * (self._pressure / cStandardPressure) * (cStandardTemperatureK / temp_k)

    def __str__(self) -> str:
        return (
            f"Atmo(altitude={self.altitude}, temperature={self.temperature}, "
            f"pressure={self.pressure}, density_ratio={self.density_ratio})"
        )

    @property
    def altitude(self) -> float:
        """Altitude relative to sea level (m)."""
        return self._altitude

    @property
    def temperature(self) -> float:
        """Air temperature (°C)."""
        return self._temperature

    @property
    def pressure(self) -> float:
        """Barometric pressure for the altitude (inHg)."""
        return self._pressure

    @property
    def density(self) -> float:
        """Air density (kg/m³)."""
        return self._density

    @property
    def density_ratio(self) -> float:
        """Ratio of local density to standard density (dimensionless)."""
        return self._density / cStandardDensityMetric

    def corrected_bc(self, ballistic_coefficient: float) -> float:
        """Ballistic coefficient adjusted for the local air density."""
        return ballistic_coefficient / self.density_ratio

    @staticmethod
    def standard_pressure(altitude: float) -> float:
        """Barometric pressure (inHg) at `altitude` meters above sea level.

        Raises:
            InvalidInputError: If the altitude is so high the formula has no real value.
        """
        altitude_ft = altitude * cFeetPerMeter
        base = 1 - (cPressureLapseCoefficient * altitude_ft)
        if base <= 0:
            raise InvalidInputError('altitude', altitude, "is beyond the range of the barometric formula")
        return cStandardPressure * math.pow(base, cPressureExponent)

    @staticmethod
    def standard() -> Atmo:
        """Standard conditions: sea level, 15 °C."""
        return Atmo(0.0, cStandardTemperatureC)


class Wind:
    """Wind in effect over the whole trajectory.

    Attributes:
        velocity: speed of wind (m/s)
        direction: 0 is blowing from the target towards the shooter (headwind).
            90 degrees is a full-value crosswind.
    """

    velocity: float
    direction: float

    def __init__(self, velocity: float = 0.0, direction: float = 0.0):
        self.velocity = velocity
        self.direction = direction

    def __repr__(self) -> str:
        return f"Wind(velocity={self.velocity}, direction={self.direction})"

    @property
    def direction_rad(self) -> float:
        """Wind direction in radians."""
        return (self.direction * math.pi) / 180

    @property
    def headwind(self) -> float:
        """Component along the line of fire; positive slows the bullet, negative assists it."""
        return self.velocity * math.cos(self.direction_rad)

    @property
    def crosswind(self) -> float:
        """Component across the line of fire; the sign is the drift direction."""
        return self.velocity * math.sin(self.direction_rad)

"""Global physical and atmospheric constants for drift ballistics calculations.

This module defines the constants used by the atmosphere model, the simplified
G1 retardation model and the sight-correction conversions.
All values are metric unless the name says otherwise.

Constant Categories:
    - Standard atmosphere: Sea-level reference conditions
    - Barometric formula: Coefficients of the imperial altitude/pressure formula
    - Trajectory model: Gravity and drag proportionality constant
    - Angular conversions: Radians to MOA / MIL
    - Runtime limits: Validation bounds
"""

# Third-party imports
from typing_extensions import Final

# =============================================================================
# Standard Atmosphere
# =============================================================================

cStandardDensityMetric: Final[float] = 1.225  # kg/m^3
"""Standard air density at sea level and 15°C (kg/m³)"""

cStandardTemperatureC: Final[float] = 15.0  # °C
"""Standard temperature at sea level in Celsius (°C)"""

cStandardTemperatureK: Final[float] = 288.15  # K
"""Standard temperature at sea level in Kelvin (K)"""

cDegreesCtoK: Final[float] = 273.15  # K = °C + 273.15
"""Celsius to Kelvin conversion constant (K)"""

# =============================================================================
# Barometric Formula
# =============================================================================

cStandardPressure: Final[float] = 29.92  # InHg
"""Standard atmospheric pressure at sea level (InHg)"""

cPressureLapseCoefficient: Final[float] = 0.0000068756  # 1/ft
"""Altitude coefficient of the barometric formula (per foot)"""

cPressureExponent: Final[float] = 5.2559
"""Pressure exponent of the barometric formula (dimensionless)"""

cFeetPerMeter: Final[float] = 3.28084
"""Meters to feet conversion factor"""

# =============================================================================
# Trajectory Model
# =============================================================================

cGravityMetric: Final[float] = 9.81  # m/s^2
"""Gravitational acceleration used by the stepper (m/s²)"""

cDragConstantMetric: Final[float] = 14000.0
"""Drag proportionality constant for metric units.

166000 (yards, fps) * 0.9144 * 0.3048² ≈ 14000.
"""

# =============================================================================
# Angular Conversions
# =============================================================================

cMinutesPerRadian: Final[float] = 3438.0
"""Minutes of angle in one radian (rounded)"""

cMilsPerRadian: Final[float] = 1000.0
"""Milliradians in one radian"""

# =============================================================================
# Runtime Limits
# =============================================================================

cShortRangeLimit: Final[float] = 300.0  # m
"""Target distances up to this value are sampled with the short step (m)"""

cShortRangeStep: Final[int] = 25  # m
"""Sampling step for short target distances (m)"""

cLongRangeStep: Final[int] = 50  # m
"""Sampling step for long target distances (m)"""

cMinimumVelocity: Final[float] = 0.0  # m/s
"""Stepper stops when velocity falls to this value (m/s)"""

__all__ = (
    # Standard atmosphere
    'cStandardDensityMetric',
    'cStandardTemperatureC',
    'cStandardTemperatureK',
    'cDegreesCtoK',
    # Barometric formula
    'cStandardPressure',
    'cPressureLapseCoefficient',
    'cPressureExponent',
    'cFeetPerMeter',
    # Trajectory model
    'cGravityMetric',
    'cDragConstantMetric',
    # Angular conversions
    'cMinutesPerRadian',
    'cMilsPerRadian',
    # Runtime limits
    'cShortRangeLimit',
    'cShortRangeStep',
    'cLongRangeStep',
    'cMinimumVelocity',
)

"""Integration engines for drift trajectory tables.

All engines implement the EngineProtocol interface and accept a
BaseEngineConfigDict for configuration.

Available Engines:
    - BaseIntegrationEngine: Abstract base class (zeroing and table assembly)
    - EulerIntegrationEngine: One-meter step Euler method (default)

Examples:
    >>> from py_driftcalc.engines import EulerIntegrationEngine
    >>> from py_driftcalc.config import BaseEngineConfigDict
    >>> engine = EulerIntegrationEngine(BaseEngineConfigDict(cMinimumVelocity=50.0))
"""

from .base_engine import *
from .euler import *

__all__ = (
    'BaseIntegrationEngine',
    'StepState',
    'EulerIntegrationEngine',
)

"""Metric drift ballistics calculator for small arms.

Computes a distance-indexed table of velocity, energy, drop, wind drift, time of flight
and MOA/MIL corrections for a shot, after solving the zero angle for the sight.
"""

import importlib.metadata

__version__ = importlib.metadata.version("py_driftcalc")

# Local imports
from .logger import logger, enable_file_logging, disable_file_logging
from .conditions import Atmo, Wind
from .config import (BaseEngineConfig, BaseEngineConfigDict, DEFAULT_BASE_ENGINE_CONFIG,
                     create_base_engine_config, load_config)
from .engines import BaseIntegrationEngine, EulerIntegrationEngine, StepState
from .exceptions import InvalidInputError, SolverRuntimeError, ZeroFindingError, RangeError
from .generics import EngineProtocol
from .interface import Calculator, compute, calculate_ballistics
from .shot import TrajectoryInput, ShotProps
from .trajectory_data import TrajectorySample, HitResult

__all__ = (
    'Atmo',
    'Wind',
    'BaseEngineConfig',
    'BaseEngineConfigDict',
    'DEFAULT_BASE_ENGINE_CONFIG',
    'create_base_engine_config',
    'load_config',
    'BaseIntegrationEngine',
    'EulerIntegrationEngine',
    'StepState',
    'EngineProtocol',
    'InvalidInputError',
    'SolverRuntimeError',
    'ZeroFindingError',
    'RangeError',
    'Calculator',
    'compute',
    'calculate_ballistics',
    'TrajectoryInput',
    'ShotProps',
    'TrajectorySample',
    'HitResult',
    'logger',
    'enable_file_logging',
    'disable_file_logging',
)

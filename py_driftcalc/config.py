"""Engine configuration for drift ballistics calculations.

Classes:
    BaseEngineConfig: Dataclass configuration for engine parameters
    BaseEngineConfigDict: TypedDict version for flexible configuration

Functions:
    create_base_engine_config: Merge a partial configuration dict with defaults
    load_config: Read a `[pydc]` table from a `.pydc.toml` / `pydc.toml` file

Configuration is always passed explicitly to the engine (for example
`Calculator(config=load_config())`); nothing here is stored at module level.

Example `.pydc.toml`:
    ```toml
    [pydc]
    cMinimumVelocity = 50.0
    cLongRangeStep = 100
    ```
"""
import os
import sys
from dataclasses import dataclass, asdict, fields

from typing_extensions import Optional, TypedDict

from py_driftcalc.constants import (
    cDragConstantMetric,
    cGravityMetric,
    cLongRangeStep,
    cMinimumVelocity,
    cShortRangeLimit,
    cShortRangeStep,
)
from py_driftcalc.logger import logger

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = (
    'BaseEngineConfig',
    'BaseEngineConfigDict',
    'DEFAULT_BASE_ENGINE_CONFIG',
    'create_base_engine_config',
    'find_pydc_toml',
    'load_config',
)


@dataclass(frozen=True)
class BaseEngineConfig:
    """Configuration dataclass for drift ballistics engines.

    All parameters use metric units (meters, m/s).

    Attributes:
        cGravityConstant: Gravitational acceleration in m/s². Defaults to 9.81.
        cDragConstant: Drag proportionality constant of the retardation model. Defaults to 14000.
        cMinimumVelocity: Stepping stops when velocity falls to this value (m/s). Defaults to 0.
        cShortRangeLimit: Largest target distance sampled with the short step (m). Defaults to 300.
        cShortRangeStep: Sampling step for short target distances (m). Defaults to 25.
        cLongRangeStep: Sampling step for long target distances (m). Defaults to 50.
    """

    cGravityConstant: float = cGravityMetric
    cDragConstant: float = cDragConstantMetric
    cMinimumVelocity: float = cMinimumVelocity
    cShortRangeLimit: float = cShortRangeLimit
    cShortRangeStep: int = cShortRangeStep
    cLongRangeStep: int = cLongRangeStep


#: Default configuration instance
DEFAULT_BASE_ENGINE_CONFIG: BaseEngineConfig = BaseEngineConfig()


class BaseEngineConfigDict(TypedDict, total=False):
    """TypedDict for flexible engine configuration from dictionaries.

    All fields are optional; unspecified fields fall back to DEFAULT_BASE_ENGINE_CONFIG
    when passed through create_base_engine_config().
    """

    cGravityConstant: Optional[float]
    cDragConstant: Optional[float]
    cMinimumVelocity: Optional[float]
    cShortRangeLimit: Optional[float]
    cShortRangeStep: Optional[int]
    cLongRangeStep: Optional[int]


def create_base_engine_config(interface_config: Optional[BaseEngineConfigDict] = None) -> BaseEngineConfig:
    """Create BaseEngineConfig from optional dictionary configuration.

    Args:
        interface_config: Optional dictionary containing configuration overrides.
            `None` values are ignored.

    Returns:
        BaseEngineConfig instance with merged configuration values.

    Raises:
        ValueError: If a sampling step is not a positive integer, the minimum velocity
            is negative or the drag constant is not positive.
    """
    config = asdict(DEFAULT_BASE_ENGINE_CONFIG)
    if interface_config is not None and isinstance(interface_config, dict):
        config.update({k: v for k, v in interface_config.items() if v is not None})
    for key in ('cShortRangeStep', 'cLongRangeStep'):
        step = config[key]
        if isinstance(step, bool) or not isinstance(step, int) or step <= 0:
            raise ValueError(f"{key} must be a positive integer number of meters, got {step!r}")
    if config['cMinimumVelocity'] < 0:
        raise ValueError(f"cMinimumVelocity must not be negative, got {config['cMinimumVelocity']!r}")
    if config['cDragConstant'] <= 0:
        raise ValueError(f"cDragConstant must be positive, got {config['cDragConstant']!r}")
    return BaseEngineConfig(**config)


def find_pydc_toml(start_dir: Optional[str] = None) -> Optional[str]:
    """Search for .pydc.toml or pydc.toml starting from `start_dir` and walking up.

    Args:
        start_dir: The directory to start searching from. Defaults to the current working directory.

    Returns:
        The absolute path to the config file if found, otherwise None.
    """
    current_dir = os.path.abspath(start_dir or os.getcwd())
    while True:
        for name in ('.pydc.toml', 'pydc.toml'):
            candidate = os.path.join(current_dir, name)
            if os.path.exists(candidate):
                return os.path.abspath(candidate)

        parent_dir = os.path.dirname(current_dir)
        if parent_dir == current_dir:
            return None
        current_dir = parent_dir


def load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> BaseEngineConfigDict:
    """Load engine configuration from a TOML file.

    Args:
        filepath: Path to configuration file. If None, searches for .pydc.toml or pydc.toml.
        suppress_warnings: If True, suppress warning messages.

    Returns:
        BaseEngineConfigDict with the values found in the `[pydc]` table (empty if none).
    """
    result: BaseEngineConfigDict = {}
    if filepath is None:
        filepath = find_pydc_toml()
    if filepath is None:
        logger.debug("No pydc config file found, using engine defaults")
        return result

    logger.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")
    with open(filepath, "rb") as fp:
        _config = tomllib.load(fp)

    _pydc = _config.get('pydc')
    if not _pydc:
        if not suppress_warnings:
            logger.warning("Config has no `pydc` section")
        return result

    known = {f.name for f in fields(BaseEngineConfig)}
    for key, value in _pydc.items():
        if key in known:
            result[key] = value  # type: ignore[literal-required]
        elif not suppress_warnings:
            logger.warning(f"Unknown config key `pydc.{key}` ignored")
    return result

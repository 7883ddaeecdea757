"""Generic type definitions for drift ballistics engines.

Protocol Definitions:
    EngineProtocol: Core interface for trajectory table engines

Type Variables:
    ConfigT: Generic configuration type for engine parameters

See Also:
    py_driftcalc.engines: Concrete engine implementations
    py_driftcalc.interface.Calculator: Main calculator interface
"""

# Local imports
from .engine import ConfigT, EngineProtocol

__all__ = (
    'ConfigT',
    'EngineProtocol',
)

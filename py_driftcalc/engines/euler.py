"""Meter-step Euler integration engine for drift trajectory tables.

The trajectory is advanced in fixed one-meter spatial steps. Each step takes
`dt = 1 / v` seconds, so the time step shrinks as the bullet is faster.

Classes:
    EulerIntegrationEngine: Concrete implementation using Euler's method

Examples:
    >>> from py_driftcalc import Calculator, EulerIntegrationEngine
    >>> calc = Calculator(engine=EulerIntegrationEngine)

Mathematical Background:
    For each one-meter step, with headwind `w` and corrected ballistic coefficient `C`:

    dt    = 1 / v
    decel = (v + w)^2 / (C * K)
    v    -= decel * dt
    t    += dt
    drop += g * dt^2 / 2 + g * t * dt

    where `K` is the drag constant and `g` the gravity constant of the engine config.
    The drop update is kept exactly as written above; zeroing and tabulation
    both rely on it.
"""

from typing_extensions import Optional, override

from py_driftcalc.config import BaseEngineConfigDict
from py_driftcalc.engines.base_engine import BaseIntegrationEngine, StepState
from py_driftcalc.exceptions import RangeError
from py_driftcalc.shot import ShotProps

__all__ = ('EulerIntegrationEngine',)


class EulerIntegrationEngine(BaseIntegrationEngine[BaseEngineConfigDict]):
    """Euler integration engine with one-meter steps.

    Examples:
        >>> config = BaseEngineConfigDict(cMinimumVelocity=100.0)
        >>> engine = EulerIntegrationEngine(config)
    """

    @override
    def _integrate(self, props: ShotProps, steps: int, headwind: float) -> StepState:
        _cMinimumVelocity = self._config.cMinimumVelocity
        _cGravity = self._config.cGravityConstant
        drag_denominator = props.corrected_bc * self._config.cDragConstant

        velocity = props.muzzle_velocity
        time: float = .0
        drop: float = .0
        termination_reason: Optional[str] = None

        completed = 0
        while completed < steps:
            delta_time = 1 / velocity
            # Headwind increases the speed relative to the air, tailwind decreases it
            relative_velocity = velocity + headwind
            drag = (relative_velocity * relative_velocity) / drag_denominator
            velocity -= drag * delta_time
            time += delta_time
            drop += 0.5 * _cGravity * delta_time * delta_time + _cGravity * time * delta_time
            completed += 1

            if velocity <= _cMinimumVelocity:
                termination_reason = RangeError.MinimumVelocityReached
                break

        return StepState(velocity, time, drop, completed, termination_reason)

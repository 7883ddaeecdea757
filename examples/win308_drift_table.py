"""Example of library usage"""

import dataclasses
import logging

from py_driftcalc import *
from py_driftcalc.logger import logger

logger.setLevel(logging.DEBUG)

# .308 Win, 168 gr match bullet, scope 38 mm over the bore
shot = TrajectoryInput(
    muzzle_velocity=823,
    bullet_weight=10.9,
    ballistic_coefficient=0.462,
    zero_range=91,
    target_distance=457,
    wind_speed=4.5,
    wind_angle=90,
    sight_height=38,
    temperature=15,
    altitude=0,
)

config: BaseEngineConfigDict = load_config()
calc = Calculator(config=config)
print(f"Zero angle: {calc.zero_angle(shot) * 1000:.3f} mil")

hit_result = calc.fire(shot)
for point in hit_result:
    print(point.formatted())

# same shot in thin, cold mountain air
mountain = dataclasses.replace(shot, altitude=2500, temperature=-5)
mountain_result = calc.fire(mountain)
print(f"Density ratio {mountain_result.density_ratio:.3f}, corrected BC {mountain_result.corrected_bc:.3f}")
print(mountain_result[-1].formatted())

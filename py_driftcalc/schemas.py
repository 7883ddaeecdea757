"""Request and response models of the HTTP API.

Wire names are camelCase; Python attributes are snake_case. Numbers must be JSON
numbers: strings and booleans are rejected before reaching the engine.
"""
from pydantic import BaseModel, ConfigDict, Field

from py_driftcalc.shot import TrajectoryInput

__all__ = ('CalculateRequest', 'TrajectorySampleModel', 'ErrorModel')


class CalculateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    muzzle_velocity: float = Field(alias='muzzleVelocity', description="m/s")
    bullet_weight: float = Field(alias='bulletWeight', description="grams")
    ballistic_coefficient: float = Field(alias='ballisticCoefficient', description="G1 BC")
    zero_range: float = Field(alias='zeroRange', description="m")
    target_distance: float = Field(alias='targetDistance', description="m")
    wind_speed: float = Field(alias='windSpeed', description="m/s")
    wind_angle: float = Field(alias='windAngle', description="degrees, 0 = headwind")
    sight_height: float = Field(alias='sightHeight', description="mm")
    temperature: float = Field(description="°C")
    altitude: float = Field(description="m")

    def to_input(self) -> TrajectoryInput:
        return TrajectoryInput(**self.model_dump())


class TrajectorySampleModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    distance: float
    velocity: int
    energy: int
    drop: int
    wind_drift: int = Field(alias='windDrift')
    time_of_flight: float = Field(alias='timeOfFlight')
    moa: float
    mil: float


class ErrorModel(BaseModel):
    error: str

"""
Application DTOs - Observations

Payloads describing the current conditions and the published alerts.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from solarcast.domain.entities.observation import (
    ActivityLevel,
    CurrentConditions,
    SpaceWeatherAlert,
)

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CurrentConditionsDTO(BaseModel):
    """Current solar wind conditions and the derived activity level."""

    model_config = _CAMEL_CONFIG

    timestamp: datetime
    solar_wind_speed: float
    solar_wind_density: Optional[float] = None
    magnetic_field_bz: float
    x_ray_flux: Optional[float] = None
    kp_index: float = Field(ge=0, le=9)
    activity_level: ActivityLevel
    source: str = Field(description="'noaa' for live data, 'synthetic' otherwise")

    @classmethod
    def from_domain(cls, conditions: CurrentConditions) -> "CurrentConditionsDTO":
        return cls(
            timestamp=conditions.timestamp,
            solar_wind_speed=conditions.solar_wind_speed,
            solar_wind_density=conditions.solar_wind_density,
            magnetic_field_bz=conditions.magnetic_field_bz,
            x_ray_flux=conditions.x_ray_flux,
            kp_index=conditions.kp_index,
            activity_level=conditions.activity_level,
            source=conditions.source,
        )


class SpaceWeatherAlertDTO(BaseModel):
    """A single alert, watch or warning bulletin."""

    model_config = _CAMEL_CONFIG

    product_id: str
    issued_at: datetime
    message: str

    @classmethod
    def from_domain(cls, alert: SpaceWeatherAlert) -> "SpaceWeatherAlertDTO":
        return cls(
            product_id=alert.product_id,
            issued_at=alert.issued_at,
            message=alert.message,
        )


class AlertsResponseDTO(BaseModel):
    """Most recent alerts, newest first."""

    model_config = _CAMEL_CONFIG

    total: int
    alerts: List[SpaceWeatherAlertDTO]

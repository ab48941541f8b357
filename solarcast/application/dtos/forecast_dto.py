"""
Application DTOs - Forecast

Request and response payloads of the forecasting endpoints. Field names
are serialized in camelCase, the shape the dashboard consumes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from solarcast.application.dtos.observation_dto import CurrentConditionsDTO
from solarcast.domain.entities.forecast import (
    ForecastOutcome,
    ForecastPoint,
    PredictionSource,
)
from solarcast.domain.entities.observation import ActivityLevel
from solarcast.domain.services.activity_level import (
    NotificationType,
    notification_type_for_level,
)

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastRequestDTO(BaseModel):
    """Current observation submitted for a prediction."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "kpIndex": 2.5,
                "solarWindSpeed": 450.0,
                "magneticFieldBz": -2.0,
            }
        },
    )

    kp_index: float = Field(description="Current planetary K index (0-9)")
    solar_wind_speed: float = Field(description="Solar wind speed in km/s")
    magnetic_field_bz: float = Field(description="IMF Bz component in nT")


class ForecastPointDTO(BaseModel):
    """Represents one point of the 24-hour forecast horizon."""

    model_config = _CAMEL_CONFIG

    time: datetime
    kp_index: float = Field(ge=0, le=9)
    confidence: float = Field(ge=0, le=1)
    solar_wind_speed: float = Field(ge=200)
    magnetic_field_bz: float
    geomagnetic_storm_probability: float = Field(ge=0, le=1)

    @classmethod
    def from_domain(cls, point: ForecastPoint) -> "ForecastPointDTO":
        return cls(
            time=point.time,
            kp_index=point.kp_index,
            confidence=point.confidence,
            solar_wind_speed=point.solar_wind_speed,
            magnetic_field_bz=point.magnetic_field_bz,
            geomagnetic_storm_probability=point.geomagnetic_storm_probability,
        )


class ForecastResponseDTO(BaseModel):
    """DTO returned by the forecast endpoints."""

    model_config = _CAMEL_CONFIG

    forecast: List[ForecastPointDTO]
    summarized_risk: ActivityLevel
    confidence: float = Field(ge=0, le=1)
    max_storm_probability: float = Field(ge=0, le=1)
    source: PredictionSource = Field(
        description="'fallback' when the inference engine could not answer"
    )
    degraded_reason: Optional[str] = None
    notification_type: NotificationType = Field(
        description="Notification severity dashboards should raise"
    )

    @classmethod
    def from_domain(cls, outcome: ForecastOutcome) -> "ForecastResponseDTO":
        return cls(
            forecast=[ForecastPointDTO.from_domain(p) for p in outcome.forecast],
            summarized_risk=outcome.summarized_risk,
            confidence=outcome.confidence,
            max_storm_probability=outcome.assessment.max_storm_probability,
            source=outcome.source,
            degraded_reason=outcome.degraded_reason,
            notification_type=notification_type_for_level(outcome.summarized_risk),
        )


class LiveForecastResponseDTO(BaseModel):
    """Forecast generated from the current conditions."""

    model_config = _CAMEL_CONFIG

    conditions: CurrentConditionsDTO
    prediction: ForecastResponseDTO

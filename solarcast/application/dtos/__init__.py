"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .forecast_dto import (
    ForecastPointDTO,
    ForecastRequestDTO,
    ForecastResponseDTO,
    LiveForecastResponseDTO,
)
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .observation_dto import (
    AlertsResponseDTO,
    CurrentConditionsDTO,
    SpaceWeatherAlertDTO,
)

__all__ = [
    "ForecastRequestDTO",
    "ForecastPointDTO",
    "ForecastResponseDTO",
    "LiveForecastResponseDTO",
    "CurrentConditionsDTO",
    "SpaceWeatherAlertDTO",
    "AlertsResponseDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]

"""
Use Cases Package - Application Layer

Use cases orchestrate the forecasting pipeline, the observation feed and
the system checks on behalf of the presentation layer.
"""

from .forecast_use_cases import (
    ExportForecastCsvUseCase,
    GenerateForecastUseCase,
    GenerateLiveForecastUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .observation_use_cases import (
    GetCurrentConditionsUseCase,
    GetSpaceWeatherAlertsUseCase,
)

__all__ = [
    "GenerateForecastUseCase",
    "GenerateLiveForecastUseCase",
    "ExportForecastCsvUseCase",
    "GetCurrentConditionsUseCase",
    "GetSpaceWeatherAlertsUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]

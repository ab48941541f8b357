"""
Application Use Cases - Forecast

Run the forecasting pipeline for a submitted observation or for the current
conditions, and export forecasts as CSV.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

import structlog

from solarcast.application.dtos.forecast_dto import (
    ForecastRequestDTO,
    ForecastResponseDTO,
    LiveForecastResponseDTO,
)
from solarcast.application.dtos.observation_dto import CurrentConditionsDTO
from solarcast.application.use_cases.observation_use_cases import (
    GetCurrentConditionsUseCase,
)
from solarcast.domain.services.forecaster import SpaceWeatherForecaster

logger = structlog.get_logger(__name__)

CSV_BASENAME = "space-weather-forecast"


class GenerateForecastUseCase:
    """Forecast for an observation supplied by the caller."""

    def __init__(self, forecaster: SpaceWeatherForecaster) -> None:
        self._forecaster = forecaster

    async def execute(self, request: ForecastRequestDTO) -> ForecastResponseDTO:
        logger.info(
            "forecast.requested",
            kp_index=request.kp_index,
            solar_wind_speed=request.solar_wind_speed,
            magnetic_field_bz=request.magnetic_field_bz,
        )
        outcome = await self._forecaster.predict(
            request.kp_index, request.solar_wind_speed, request.magnetic_field_bz
        )
        return ForecastResponseDTO.from_domain(outcome)


class GenerateLiveForecastUseCase:
    """Forecast for the current conditions reported by the feed."""

    def __init__(
        self,
        forecaster: SpaceWeatherForecaster,
        current_conditions_use_case: GetCurrentConditionsUseCase,
    ) -> None:
        self._forecaster = forecaster
        self._current_conditions = current_conditions_use_case

    async def execute(self) -> LiveForecastResponseDTO:
        conditions = await self._current_conditions.resolve()
        outcome = await self._forecaster.predict(
            conditions.kp_index,
            conditions.solar_wind_speed,
            conditions.magnetic_field_bz,
        )
        return LiveForecastResponseDTO(
            conditions=CurrentConditionsDTO.from_domain(conditions),
            prediction=ForecastResponseDTO.from_domain(outcome),
        )


@dataclass(frozen=True)
class ForecastCsvExport:
    filename: str
    content: str


def timestamped_filename(base_name: str, now: datetime) -> str:
    return f"{base_name}-{now.strftime('%Y-%m-%d-%H-%M-%S')}.csv"


def rows_to_csv(rows: List[Dict[str, Any]]) -> str:
    """Header from the first row's keys; text quoted, numbers left bare."""
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    headers = list(rows[0].keys())
    buffer.write(",".join(headers) + "\n")
    for row in rows:
        writer.writerow(
            [
                value.isoformat() if isinstance(value, datetime) else value
                for value in (row.get(header) for header in headers)
            ]
        )
    return buffer.getvalue().rstrip("\n")


class ExportForecastCsvUseCase:
    """Forecast for a submitted observation, rendered as a CSV attachment."""

    def __init__(
        self,
        forecaster: SpaceWeatherForecaster,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._forecast_use_case = GenerateForecastUseCase(forecaster)
        self._clock = clock

    async def execute(self, request: ForecastRequestDTO) -> ForecastCsvExport:
        response = await self._forecast_use_case.execute(request)
        rows = [
            point.model_dump(by_alias=True, mode="python")
            for point in response.forecast
        ]
        return ForecastCsvExport(
            filename=timestamped_filename(CSV_BASENAME, self._clock()),
            content=rows_to_csv(rows),
        )

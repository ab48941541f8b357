"""Use cases exposing the current conditions and published alerts."""

from __future__ import annotations

import structlog

from solarcast.application.dtos.observation_dto import (
    AlertsResponseDTO,
    CurrentConditionsDTO,
    SpaceWeatherAlertDTO,
)
from solarcast.domain.entities.errors import ObservationFeedError
from solarcast.domain.entities.observation import CurrentConditions
from solarcast.domain.gateways.solar_wind_gateway import ISolarWindGateway
from solarcast.domain.services.activity_level import (
    activity_level_for_kp,
    estimate_kp_index,
)
from solarcast.domain.services.synthetic_conditions import (
    BASE_X_RAY_FLUX,
    SyntheticConditionsSource,
)

logger = structlog.get_logger(__name__)

LIVE_SOURCE = "noaa"


class GetCurrentConditionsUseCase:
    """Latest feed sample, or simulated conditions when the feed is down."""

    def __init__(
        self,
        solar_wind_gateway: ISolarWindGateway,
        synthetic_source: SyntheticConditionsSource,
    ) -> None:
        self._gateway = solar_wind_gateway
        self._synthetic_source = synthetic_source

    async def resolve(self) -> CurrentConditions:
        try:
            samples = await self._gateway.fetch_solar_wind()
        except ObservationFeedError as exc:
            logger.warning("conditions.feed_unavailable", error=exc.message)
            return self._synthetic_source.current()

        if not samples:
            logger.warning("conditions.feed_empty")
            return self._synthetic_source.current()

        latest = samples[0]
        kp_index = estimate_kp_index(latest.speed, latest.magnetic_field_bz)
        return CurrentConditions(
            timestamp=latest.time_tag,
            solar_wind_speed=latest.speed,
            solar_wind_density=latest.density,
            magnetic_field_bz=latest.magnetic_field_bz,
            x_ray_flux=BASE_X_RAY_FLUX,
            kp_index=kp_index,
            activity_level=activity_level_for_kp(kp_index),
            source=LIVE_SOURCE,
        )

    async def execute(self) -> CurrentConditionsDTO:
        return CurrentConditionsDTO.from_domain(await self.resolve())


class GetSpaceWeatherAlertsUseCase:
    """Use case responsible for returning the most recent alerts."""

    def __init__(self, solar_wind_gateway: ISolarWindGateway) -> None:
        self._gateway = solar_wind_gateway

    async def execute(self, limit: int = 20) -> AlertsResponseDTO:
        alerts = await self._gateway.fetch_alerts()
        selected = alerts[:limit]
        return AlertsResponseDTO(
            total=len(alerts),
            alerts=[SpaceWeatherAlertDTO.from_domain(alert) for alert in selected],
        )

"""
Presentation Layer - Observations Controller

Current solar wind conditions and the alerts published by NOAA SWPC.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query

from solarcast.application.dtos.observation_dto import (
    AlertsResponseDTO,
    CurrentConditionsDTO,
)
from solarcast.application.use_cases.observation_use_cases import (
    GetCurrentConditionsUseCase,
    GetSpaceWeatherAlertsUseCase,
)
from solarcast.domain.entities.errors import ObservationFeedError
from solarcast.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/observations", tags=["Observations"])


@router.get(
    "/current",
    response_model=CurrentConditionsDTO,
    summary="Current solar wind conditions",
    description="""
    Latest real-time solar wind sample with an estimated Kp index. When the
    feed cannot be read, simulated conditions are returned with
    ``source: synthetic``.
    """,
)
@inject
async def get_current_conditions(
    conditions_use_case: GetCurrentConditionsUseCase = Depends(
        Provide[AppContainer.get_current_conditions_use_case]
    ),
) -> CurrentConditionsDTO:
    return await conditions_use_case.execute()


@router.get(
    "/alerts",
    response_model=AlertsResponseDTO,
    summary="Recent space weather alerts",
)
@inject
async def get_alerts(
    limit: int = Query(
        default=20, ge=1, le=200, description="Maximum number of alerts to return"
    ),
    alerts_use_case: GetSpaceWeatherAlertsUseCase = Depends(
        Provide[AppContainer.get_space_weather_alerts_use_case]
    ),
) -> AlertsResponseDTO:
    try:
        return await alerts_use_case.execute(limit=limit)
    except ObservationFeedError as exc:
        logger.warning("alerts.feed_unavailable", error=exc.message)
        raise HTTPException(status_code=502, detail=exc.message)

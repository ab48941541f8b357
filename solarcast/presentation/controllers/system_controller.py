"""System endpoints exposing health and info."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from solarcast.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from solarcast.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from solarcast.domain.entities.health import ServiceStatus
from solarcast.main.container import AppContainer
from solarcast.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide[AppContainer.get_health_status_use_case]
    ),
) -> SystemHealthDTO:
    """Health of the feed and the inference engine.

    Degraded dependencies still answer 200 since forecasts keep being served
    by the fallback path; only a down dependency answers 503.
    """
    try:
        health_status = await get_health_status_use_case.execute()
    except Exception as exc:  # pragma: no cover
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc

    if health_status.status == ServiceStatus.DOWN:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    logger.debug("health.check.success", status=health_status.status.value)
    return health_status


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide[AppContainer.get_application_info_use_case]
    ),
) -> ApplicationInfoDTO:
    """Version, uptime, feed endpoints and inference engine state."""
    started_at = getattr(request.app.state, "started_at", None)
    try:
        info_response = await get_application_info_use_case.execute(started_at)
    except Exception as exc:  # pragma: no cover
        logger.error("info.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve application info",
        ) from exc

    logger.debug("info.retrieved", status=info_response.status.value)
    return info_response

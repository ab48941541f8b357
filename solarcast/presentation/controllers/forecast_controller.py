"""
Presentation Layer - Forecast Controller

Exposes the forecasting pipeline. Pipeline failures never surface as
errors: the response is then produced by the fallback predictor and
flagged with ``source: fallback``.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response

from solarcast.application.dtos.forecast_dto import (
    ForecastRequestDTO,
    ForecastResponseDTO,
    LiveForecastResponseDTO,
)
from solarcast.application.use_cases.forecast_use_cases import (
    ExportForecastCsvUseCase,
    GenerateForecastUseCase,
    GenerateLiveForecastUseCase,
)
from solarcast.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecast", tags=["Forecast"])


@router.post(
    "",
    response_model=ForecastResponseDTO,
    summary="Forecast geomagnetic activity for an observation",
    description="""
    Project the submitted observation over the next 24 hours (6 points,
    4 hours apart) and classify the overall geomagnetic risk.
    """,
)
@inject
async def generate_forecast(
    payload: ForecastRequestDTO,
    forecast_use_case: GenerateForecastUseCase = Depends(
        Provide[AppContainer.generate_forecast_use_case]
    ),
) -> ForecastResponseDTO:
    return await forecast_use_case.execute(payload)


@router.get(
    "/live",
    response_model=LiveForecastResponseDTO,
    summary="Forecast from the current conditions",
)
@inject
async def generate_live_forecast(
    live_forecast_use_case: GenerateLiveForecastUseCase = Depends(
        Provide[AppContainer.generate_live_forecast_use_case]
    ),
) -> LiveForecastResponseDTO:
    try:
        return await live_forecast_use_case.execute()
    except Exception as exc:  # pragma: no cover
        logger.error("forecast.live.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "/export",
    response_class=Response,
    summary="Forecast for an observation as a CSV file",
    responses={200: {"content": {"text/csv": {}}}},
)
@inject
async def export_forecast(
    payload: ForecastRequestDTO,
    export_use_case: ExportForecastCsvUseCase = Depends(
        Provide[AppContainer.export_forecast_csv_use_case]
    ),
) -> Response:
    export = await export_use_case.execute(payload)
    return Response(
        content=export.content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )

"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

import random
from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from solarcast.application.models import SystemInfo
from solarcast.application.use_cases.forecast_use_cases import (
    ExportForecastCsvUseCase,
    GenerateForecastUseCase,
    GenerateLiveForecastUseCase,
)
from solarcast.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from solarcast.application.use_cases.observation_use_cases import (
    GetCurrentConditionsUseCase,
    GetSpaceWeatherAlertsUseCase,
)
from solarcast.domain.services.fallback_predictor import FallbackPredictor
from solarcast.domain.services.forecaster import SpaceWeatherForecaster
from solarcast.domain.services.inference_engine import InferenceEngine
from solarcast.domain.services.synthetic_conditions import SyntheticConditionsSource
from solarcast.infrastructure.gateways.noaa_swpc_gateway import NoaaSwpcGateway
from solarcast.infrastructure.models import create_model_loader
from solarcast.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from solarcast.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Domain services
    random_source = providers.Singleton(
        random.Random,
        config.forecast.random_seed,
    )

    model_loader = providers.Callable(
        create_model_loader,
        model_path=config.forecast.model_path,
    )

    inference_engine = providers.Singleton(
        InferenceEngine,
        model_loader=model_loader,
        retry_cooldown_seconds=config.forecast.retry_cooldown_seconds,
    )

    fallback_predictor = providers.Singleton(
        FallbackPredictor,
        random_source=random_source,
    )

    forecaster = providers.Singleton(
        SpaceWeatherForecaster,
        inference_engine=inference_engine,
        fallback_predictor=fallback_predictor,
    )

    synthetic_conditions = providers.Singleton(
        SyntheticConditionsSource,
        random_source=random_source,
    )

    # Gateways
    solar_wind_gateway = providers.Singleton(
        NoaaSwpcGateway,
        solar_wind_url=config.noaa.solar_wind_url,
        alerts_url=config.noaa.alerts_url,
        timeout=config.noaa.timeout,
    )

    # Application (use cases)
    generate_forecast_use_case = providers.Factory(
        GenerateForecastUseCase,
        forecaster=forecaster,
    )

    get_current_conditions_use_case = providers.Factory(
        GetCurrentConditionsUseCase,
        solar_wind_gateway=solar_wind_gateway,
        synthetic_source=synthetic_conditions,
    )

    generate_live_forecast_use_case = providers.Factory(
        GenerateLiveForecastUseCase,
        forecaster=forecaster,
        current_conditions_use_case=get_current_conditions_use_case,
    )

    export_forecast_csv_use_case = providers.Factory(
        ExportForecastCsvUseCase,
        forecaster=forecaster,
    )

    get_space_weather_alerts_use_case = providers.Factory(
        GetSpaceWeatherAlertsUseCase,
        solar_wind_gateway=solar_wind_gateway,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        inference_engine=inference_engine,
        solar_wind_url=config.noaa.solar_wind_url,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
        solar_wind_url=config.noaa.solar_wind_url,
        alerts_url=config.noaa.alerts_url,
        model_path=config.forecast.model_path,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the forecasting resources.

    The model is loaded at startup so the first request does not pay for
    it. A failed load is not fatal: requests are served by the fallback
    predictor until the engine's retry cooldown allows another attempt.
    """
    container = get_container()
    inference_engine = container.inference_engine()

    try:
        ready = await inference_engine.initialize()
        logger.info(
            "container.inference_engine.warmup",
            ready=ready,
            state=inference_engine.state.value,
        )
        yield container
    finally:
        logger.info("container.resources.shutdown")

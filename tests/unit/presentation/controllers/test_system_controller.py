from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi import Request, Response

from solarcast.application.models import SystemInfo
from solarcast.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from solarcast.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from solarcast.presentation.controllers.system_controller import health, info


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth(
            status=status,
            dependencies=[DependencyStatus(name="inference_engine", status=status)],
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    response = Response()

    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        ),
    )

    assert dto.status is ServiceStatus.UP
    assert dto.dependencies[0].name == "inference_engine"
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_degraded_health_still_answers_ok():
    response = Response()

    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.DEGRADED)
        ),
    )

    assert dto.status is ServiceStatus.DEGRADED
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_down_health_answers_service_unavailable():
    response = Response()

    await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.DOWN)
        ),
    )

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_info_endpoint_returns_application_info():
    system_info = SystemInfo(
        title="Solarcast",
        description="desc",
        version="1.0",
        environment="dev",
        git_commit="abc",
        build_time="now",
        solar_wind_url="https://noaa.test/wind",
        alerts_url="https://noaa.test/alerts",
    )
    info_use_case = GetApplicationInfoUseCase(
        _HealthService(ServiceStatus.UP), system_info
    )

    scope = {
        "type": "http",
        "method": "GET",
        "path": "/info",
        "headers": [],
        "query_string": b"",
        "server": ("test", 80),
        "app": SimpleNamespace(
            state=SimpleNamespace(started_at=datetime.now(timezone.utc))
        ),
    }
    request = Request(scope)

    dto = await info(request=request, get_application_info_use_case=info_use_case)

    assert dto.name == "Solarcast"
    assert dto.status is ServiceStatus.UP
    assert dto.extras["inference"]["model"] == "heuristic"

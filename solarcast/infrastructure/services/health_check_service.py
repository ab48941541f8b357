"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import List

import httpx

from solarcast.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from solarcast.domain.ports.health_check import IHealthCheckService
from solarcast.domain.services.inference_engine import EngineState, InferenceEngine

_ENGINE_STATUS = {
    EngineState.READY: ServiceStatus.UP,
    EngineState.UNINITIALIZED: ServiceStatus.UNKNOWN,
    EngineState.INITIALIZING: ServiceStatus.UNKNOWN,
    EngineState.UNAVAILABLE: ServiceStatus.DEGRADED,
}


class HealthCheckService(IHealthCheckService):
    """Collect health information for the feed and the inference engine.

    Neither dependency can take the service down: predictions fall back to
    the heuristic path and current conditions to simulated data, so
    failures are reported as degraded. Only a check that crashes reports
    its dependency down.
    """

    def __init__(
        self,
        inference_engine: InferenceEngine,
        solar_wind_url: str,
        *,
        http_timeout: float = 5.0,
    ) -> None:
        self._inference_engine = inference_engine
        self._solar_wind_url = solar_wind_url
        self._http_timeout = http_timeout

    async def evaluate(self) -> SystemHealth:
        """Run checks concurrently and aggregate system health."""

        checks = {
            "noaa_swpc": asyncio.create_task(self._check_solar_wind_feed()),
            "inference_engine": asyncio.create_task(self._check_inference_engine()),
        }

        dependency_statuses: List[DependencyStatus] = []
        for name, task in checks.items():
            try:
                dependency_statuses.append(await task)
            except Exception as exc:
                dependency_statuses.append(
                    DependencyStatus(
                        name=name,
                        status=ServiceStatus.DOWN,
                        message=str(exc),
                    )
                )

        return SystemHealth.from_dependencies(dependency_statuses)

    async def _check_inference_engine(self) -> DependencyStatus:
        engine = self._inference_engine
        status = _ENGINE_STATUS[engine.state]
        message = (
            f"Fallback predictor active: {engine.last_error}"
            if engine.state == EngineState.UNAVAILABLE
            else f"Inference engine {engine.state.value}"
        )
        return DependencyStatus(
            name="inference_engine",
            status=status,
            message=message,
            details={
                "state": engine.state.value,
                "load_attempts": engine.load_attempts,
            },
        )

    async def _check_solar_wind_feed(self) -> DependencyStatus:
        if not self._solar_wind_url:
            return DependencyStatus(
                name="noaa_swpc",
                status=ServiceStatus.UNKNOWN,
                message="Solar wind feed URL not configured.",
            )

        start = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.head(self._solar_wind_url)
            latency_ms = (perf_counter() - start) * 1000
        except httpx.HTTPError as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="noaa_swpc",
                status=ServiceStatus.DEGRADED,
                message=f"Solar wind feed unreachable: {exc}",
                latency_ms=latency_ms,
                details={"url": self._solar_wind_url},
            )

        if response.status_code < 400:
            status = ServiceStatus.UP
            message = "Solar wind feed reachable"
        else:
            status = ServiceStatus.DEGRADED
            message = f"Solar wind feed answered HTTP {response.status_code}"

        return DependencyStatus(
            name="noaa_swpc",
            status=status,
            message=message,
            latency_ms=latency_ms,
            details={
                "url": self._solar_wind_url,
                "status_code": response.status_code,
            },
        )

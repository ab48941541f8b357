"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from solarcast.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from solarcast.application.models import SystemInfo
from solarcast.domain.entities.health import ApplicationInfo
from solarcast.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    """Use case responsible for returning health status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        return SystemHealthDTO.from_domain(system_health)


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        engine_details: Dict[str, Any] = next(
            (
                dependency.details
                for dependency in system_health.dependencies
                if dependency.name == "inference_engine"
            ),
            {},
        )
        extras = {
            "environment": self._info.environment,
            "feeds": {
                "solar_wind_url": self._info.solar_wind_url,
                "alerts_url": self._info.alerts_url,
            },
            "inference": {
                "model": "keras" if self._info.model_path else "heuristic",
                "model_path": self._info.model_path,
                **engine_details,
            },
        }

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=uptime_seconds,
            status=system_health.status,
            dependencies=system_health.dependencies,
            extras=extras,
        )

        return ApplicationInfoDTO.from_domain(info)

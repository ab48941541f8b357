"""
Application DTOs - System

Payloads of /health and /info. Built straight from the domain dataclasses
through ``from_attributes``; serialized in camelCase like the forecast
payloads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from solarcast.domain.entities.health import (
    ApplicationInfo,
    ServiceStatus,
    SystemHealth,
)

_SYSTEM_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, from_attributes=True
)


class DependencyStatusDTO(BaseModel):
    """Outcome of one dependency check (feed or inference engine)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "name": "inference_engine",
                "status": "degraded",
                "message": "Fallback predictor active: Model artifact not found",
                "checkedAt": "2025-05-10T12:00:00Z",
                "latencyMs": None,
                "details": {"state": "unavailable", "load_attempts": 1},
            }
        },
    )

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = {}


class SystemHealthDTO(BaseModel):
    model_config = _SYSTEM_CONFIG

    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = []

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls.model_validate(health)


class ApplicationInfoDTO(BaseModel):
    """Build metadata, uptime and a health snapshot."""

    model_config = _SYSTEM_CONFIG

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = []
    extras: Dict[str, Any] = {}

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls.model_validate(info)

"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    solar_wind_url: str
    alerts_url: str
    model_path: Optional[str] = None

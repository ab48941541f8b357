"""Domain entities describing observed solar wind and geomagnetic conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class ActivityLevel(str, Enum):
    """Coarse geomagnetic activity classification."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"


@dataclass(frozen=True, slots=True)
class Observation:
    """Point-in-time reading fed into the forecasting pipeline."""

    kp_index: float
    solar_wind_speed: float
    magnetic_field_bz: float


@dataclass(frozen=True, slots=True)
class NormalizationParameters:
    """Historical mean and standard deviation for one observed quantity."""

    mean: float
    std_dev: float


@dataclass(frozen=True, slots=True)
class ObservationNormalization:
    """Normalization constants for every quantity the pipeline observes."""

    kp_index: NormalizationParameters = field(
        default_factory=lambda: NormalizationParameters(mean=2.5, std_dev=1.5)
    )
    solar_wind_speed: NormalizationParameters = field(
        default_factory=lambda: NormalizationParameters(mean=450.0, std_dev=100.0)
    )
    magnetic_field_bz: NormalizationParameters = field(
        default_factory=lambda: NormalizationParameters(mean=0.0, std_dev=5.0)
    )


@dataclass(frozen=True, slots=True)
class NormalizedObservation:
    """Observation expressed as z-scores."""

    kp_index: float
    solar_wind_speed: float
    magnetic_field_bz: float


@dataclass(frozen=True, slots=True)
class SolarWindSample:
    """Single row of the real-time solar wind feed."""

    time_tag: datetime
    speed: float
    magnetic_field_bz: float
    density: Optional[float] = None
    temperature: Optional[float] = None
    bt: Optional[float] = None


@dataclass(frozen=True, slots=True)
class SpaceWeatherAlert:
    """Alert or watch bulletin published by the space weather center."""

    product_id: str
    issued_at: datetime
    message: str


@dataclass(frozen=True, slots=True)
class CurrentConditions:
    """Current conditions derived from the feed (or simulated when it is down)."""

    timestamp: datetime
    solar_wind_speed: float
    magnetic_field_bz: float
    kp_index: float
    activity_level: ActivityLevel
    source: str
    solar_wind_density: Optional[float] = None
    x_ray_flux: Optional[float] = None

    def to_observation(self) -> Observation:
        return Observation(
            kp_index=self.kp_index,
            solar_wind_speed=self.solar_wind_speed,
            magnetic_field_bz=self.magnetic_field_bz,
        )

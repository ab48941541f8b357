"""Domain entities produced by the forecasting pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from .observation import ActivityLevel


class PredictionSource(str, Enum):
    """Which path of the pipeline produced a forecast."""

    MODEL = "model"
    FALLBACK = "fallback"


class FailureKind(str, Enum):
    """Reason the inference engine could not answer."""

    INITIALIZATION = "initialization_failure"
    INFERENCE = "inference_failure"


@dataclass(frozen=True, slots=True)
class FeatureWindow:
    """Synthetic feature history, shape ``(timesteps, features)``."""

    values: np.ndarray

    @property
    def timesteps(self) -> int:
        return int(self.values.shape[0])

    @property
    def feature_count(self) -> int:
        return int(self.values.shape[1])


@dataclass(frozen=True, slots=True)
class InferenceResult:
    """Denormalized model output for a single prediction request."""

    predicted_kp_index: float
    predicted_solar_wind_speed: float
    predicted_magnetic_field_bz: float
    storm_probability: float
    confidence: float


@dataclass(frozen=True, slots=True)
class InferenceSuccess:
    result: InferenceResult


@dataclass(frozen=True, slots=True)
class InferenceUnavailable:
    kind: FailureKind
    reason: str


InferenceOutcome = Union[InferenceSuccess, InferenceUnavailable]


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """Represents one point in the forecast horizon."""

    time: datetime
    kp_index: float
    confidence: float
    solar_wind_speed: float
    magnetic_field_bz: float
    geomagnetic_storm_probability: float


Forecast = Tuple[ForecastPoint, ...]


@dataclass(frozen=True, slots=True)
class RiskAssessment:
    """Summary of a forecast: activity level and aggregate confidence."""

    summarized_risk: ActivityLevel
    confidence: float
    max_storm_probability: float


@dataclass(frozen=True, slots=True)
class ForecastOutcome:
    """Everything a consumer needs from one prediction cycle."""

    forecast: Forecast
    assessment: RiskAssessment
    source: PredictionSource
    degraded_reason: Optional[str] = None

    @property
    def summarized_risk(self) -> ActivityLevel:
        return self.assessment.summarized_risk

    @property
    def confidence(self) -> float:
        return self.assessment.confidence

    @property
    def is_degraded(self) -> bool:
        return self.source == PredictionSource.FALLBACK

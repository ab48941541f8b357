"""
Domain Entities Package

Value objects exchanged between the stages of the forecasting pipeline,
plus the health entities surfaced by the system endpoints.
"""

from .errors import DomainError, ForecastPipelineError, ObservationFeedError
from .forecast import (
    FailureKind,
    FeatureWindow,
    Forecast,
    ForecastOutcome,
    ForecastPoint,
    InferenceOutcome,
    InferenceResult,
    InferenceSuccess,
    InferenceUnavailable,
    PredictionSource,
    RiskAssessment,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .observation import (
    ActivityLevel,
    CurrentConditions,
    NormalizationParameters,
    NormalizedObservation,
    Observation,
    ObservationNormalization,
    SolarWindSample,
    SpaceWeatherAlert,
)

__all__ = [
    "ActivityLevel",
    "Observation",
    "NormalizationParameters",
    "ObservationNormalization",
    "NormalizedObservation",
    "SolarWindSample",
    "SpaceWeatherAlert",
    "CurrentConditions",
    "FeatureWindow",
    "InferenceResult",
    "InferenceSuccess",
    "InferenceUnavailable",
    "InferenceOutcome",
    "FailureKind",
    "ForecastPoint",
    "Forecast",
    "RiskAssessment",
    "PredictionSource",
    "ForecastOutcome",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "ObservationFeedError",
    "ForecastPipelineError",
]

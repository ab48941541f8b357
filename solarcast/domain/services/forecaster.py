"""
Forecasting pipeline.

observation -> normalization -> feature window -> inference engine
(fallback predictor when unavailable) -> projection -> risk classification
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import structlog

from solarcast.domain.entities.forecast import (
    FailureKind,
    ForecastOutcome,
    InferenceOutcome,
    InferenceSuccess,
    InferenceUnavailable,
    PredictionSource,
)
from solarcast.domain.entities.observation import (
    Observation,
    ObservationNormalization,
)
from solarcast.domain.services.fallback_predictor import FallbackPredictor
from solarcast.domain.services.feature_synthesis import synthesize_feature_window
from solarcast.domain.services.forecast_projection import project_forecast
from solarcast.domain.services.inference_engine import InferenceEngine
from solarcast.domain.services.normalization import (
    DEFAULT_NORMALIZATION,
    normalize_observation,
)
from solarcast.domain.services.risk_classification import classify_risk

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SpaceWeatherForecaster:
    """Runs one prediction cycle; always resolves to a usable outcome."""

    def __init__(
        self,
        inference_engine: InferenceEngine,
        fallback_predictor: FallbackPredictor,
        normalization: ObservationNormalization = DEFAULT_NORMALIZATION,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._engine = inference_engine
        self._fallback = fallback_predictor
        self._normalization = normalization
        self._clock = clock

    async def predict(
        self,
        kp_index: float,
        solar_wind_speed: float,
        magnetic_field_bz: float,
    ) -> ForecastOutcome:
        reference_time = self._clock()
        observation = Observation(
            kp_index=kp_index,
            solar_wind_speed=solar_wind_speed,
            magnetic_field_bz=magnetic_field_bz,
        )

        outcome = await self._run_inference(observation)

        if isinstance(outcome, InferenceSuccess):
            try:
                forecast = project_forecast(reference_time, outcome.result)
                assessment = classify_risk(
                    forecast, outcome.result.predicted_kp_index
                )
            except Exception as exc:
                logger.warning("forecast.projection_failed", error=str(exc))
                outcome = InferenceUnavailable(
                    kind=FailureKind.INFERENCE, reason=str(exc)
                )
            else:
                logger.info(
                    "forecast.generated",
                    source=PredictionSource.MODEL.value,
                    risk=assessment.summarized_risk.value,
                    confidence=round(assessment.confidence, 3),
                )
                return ForecastOutcome(
                    forecast=forecast,
                    assessment=assessment,
                    source=PredictionSource.MODEL,
                )

        return self._fallback.predict(
            kp_index,
            solar_wind_speed,
            magnetic_field_bz,
            reference_time=reference_time,
            degraded_reason=f"{outcome.kind.value}: {outcome.reason}",
        )

    async def _run_inference(self, observation: Observation) -> InferenceOutcome:
        try:
            normalized = normalize_observation(observation, self._normalization)
            window = synthesize_feature_window(normalized)
        except Exception as exc:
            logger.warning("forecast.feature_synthesis_failed", error=str(exc))
            return InferenceUnavailable(kind=FailureKind.INFERENCE, reason=str(exc))
        return await self._engine.infer(window)

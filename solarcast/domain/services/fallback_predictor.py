"""
Fallback prediction path.

Produces a forecast from the current observation alone, with a random
perturbation per point, whenever the inference engine cannot answer. The
predictor must always return a usable outcome: if anything goes wrong while
building the forecast, the most conservative outcome is returned instead.
"""

from __future__ import annotations

import math
import random
from datetime import datetime, timezone
from typing import List, Optional

import structlog

from solarcast.domain.entities.forecast import (
    ForecastOutcome,
    ForecastPoint,
    PredictionSource,
    RiskAssessment,
)
from solarcast.domain.entities.observation import ActivityLevel
from solarcast.domain.ports.random_source import RandomSource
from solarcast.domain.services.bounds import (
    KP_INDEX_MAX,
    KP_INDEX_MIN,
    MIN_CONFIDENCE,
    MIN_SOLAR_WIND_SPEED,
    clamp,
)
from solarcast.domain.services.forecast_projection import forecast_times
from solarcast.domain.services.risk_classification import classify_risk
from solarcast.domain.services.storm_probability import storm_probability

logger = structlog.get_logger(__name__)

VARIATION_LOW = 0.8
VARIATION_HIGH = 1.2
INITIAL_CONFIDENCE = 0.9
CONFIDENCE_STEP = 0.1


class FallbackPredictor:
    """Heuristic forecaster independent of the inference engine."""

    def __init__(self, random_source: Optional[RandomSource] = None) -> None:
        self._random = random_source or random.Random()

    def predict(
        self,
        kp_index: float,
        solar_wind_speed: float,
        magnetic_field_bz: float,
        reference_time: Optional[datetime] = None,
        degraded_reason: Optional[str] = None,
    ) -> ForecastOutcome:
        reference_time = reference_time or datetime.now(timezone.utc)
        logger.warning(
            "forecast.fallback_used",
            kp_index=kp_index,
            solar_wind_speed=solar_wind_speed,
            magnetic_field_bz=magnetic_field_bz,
            reason=degraded_reason,
        )

        try:
            forecast = tuple(
                self._build_points(
                    kp_index, solar_wind_speed, magnetic_field_bz, reference_time
                )
            )
            assessment = classify_risk(forecast, kp_index)
        except Exception as exc:
            logger.error(
                "forecast.fallback_failed", error=str(exc), exc_info=exc
            )
            return self.conservative_outcome(
                reference_time, degraded_reason or f"fallback failed: {exc}"
            )

        return ForecastOutcome(
            forecast=forecast,
            assessment=assessment,
            source=PredictionSource.FALLBACK,
            degraded_reason=degraded_reason,
        )

    def _build_points(
        self,
        kp_index: float,
        solar_wind_speed: float,
        magnetic_field_bz: float,
        reference_time: datetime,
    ) -> List[ForecastPoint]:
        points: List[ForecastPoint] = []

        for index, time in enumerate(forecast_times(reference_time)):
            time_factor = math.sin(index / 2) * 0.5 + 0.5
            variation = self._random.uniform(VARIATION_LOW, VARIATION_HIGH)

            kp = clamp(
                kp_index + (time_factor - 0.5) * 3 * variation,
                KP_INDEX_MIN,
                KP_INDEX_MAX,
            )
            speed = max(
                MIN_SOLAR_WIND_SPEED,
                solar_wind_speed * (0.8 + 0.4 * time_factor) * variation,
            )
            bz = magnetic_field_bz * (0.7 + 0.6 * time_factor) * variation

            points.append(
                ForecastPoint(
                    time=time,
                    kp_index=kp,
                    confidence=INITIAL_CONFIDENCE - index * CONFIDENCE_STEP,
                    solar_wind_speed=speed,
                    magnetic_field_bz=bz,
                    geomagnetic_storm_probability=storm_probability(kp, speed, bz),
                )
            )

        return points

    @staticmethod
    def conservative_outcome(
        reference_time: datetime, reason: Optional[str] = None
    ) -> ForecastOutcome:
        """Quiet conditions at minimum confidence; used when nothing else works."""
        forecast = tuple(
            ForecastPoint(
                time=time,
                kp_index=KP_INDEX_MIN,
                confidence=MIN_CONFIDENCE,
                solar_wind_speed=MIN_SOLAR_WIND_SPEED,
                magnetic_field_bz=0.0,
                geomagnetic_storm_probability=0.0,
            )
            for time in forecast_times(reference_time)
        )
        return ForecastOutcome(
            forecast=forecast,
            assessment=RiskAssessment(
                summarized_risk=ActivityLevel.LOW,
                confidence=MIN_CONFIDENCE,
                max_storm_probability=0.0,
            ),
            source=PredictionSource.FALLBACK,
            degraded_reason=reason,
        )

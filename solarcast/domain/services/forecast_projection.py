"""Expansion of a single inference result into the 24-hour forecast horizon."""

from datetime import datetime, timedelta
from typing import List

from solarcast.domain.entities.forecast import Forecast, ForecastPoint, InferenceResult
from solarcast.domain.services.bounds import (
    KP_INDEX_MAX,
    KP_INDEX_MIN,
    MIN_CONFIDENCE,
    MIN_SOLAR_WIND_SPEED,
    clamp,
)

FORECAST_POINTS = 6
FORECAST_SPACING = timedelta(hours=4)


def forecast_times(
    reference_time: datetime, points: int = FORECAST_POINTS
) -> List[datetime]:
    return [reference_time + FORECAST_SPACING * index for index in range(points)]


def project_forecast(reference_time: datetime, result: InferenceResult) -> Forecast:
    """
    Project ``result`` over the horizon.

    The time factor runs from 0 at the first point to 1 at the last one.
    Quantities drift around the predicted value, storm probability grows
    and confidence decays towards MIN_CONFIDENCE.
    """
    points: List[ForecastPoint] = []
    last_index = FORECAST_POINTS - 1

    for index, time in enumerate(forecast_times(reference_time)):
        time_factor = index / last_index
        drift = time_factor - 0.5

        kp_index = result.predicted_kp_index * (1 + drift * 0.4)
        solar_wind_speed = result.predicted_solar_wind_speed * (1 + drift * 0.2)
        magnetic_field_bz = result.predicted_magnetic_field_bz * (1 + drift * 0.3)
        probability = result.storm_probability * (1 + time_factor * 0.2)
        confidence = result.confidence * (1 - time_factor * 0.4)

        points.append(
            ForecastPoint(
                time=time,
                kp_index=clamp(kp_index, KP_INDEX_MIN, KP_INDEX_MAX),
                confidence=max(MIN_CONFIDENCE, confidence),
                solar_wind_speed=max(MIN_SOLAR_WIND_SPEED, solar_wind_speed),
                magnetic_field_bz=magnetic_field_bz,
                geomagnetic_storm_probability=clamp(probability, 0.0, 1.0),
            )
        )

    return tuple(points)

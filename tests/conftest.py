from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solarcast.domain.entities.forecast import ForecastPoint, InferenceResult  # noqa: E402
from solarcast.domain.services.forecast_projection import forecast_times  # noqa: E402


class SequenceRandom:
    """RandomSource replaying fixed values; ``uniform`` ignores its bounds."""

    def __init__(self, values: Iterable[float]):
        self._values: List[float] = list(values)
        self.calls: List[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return self._values[(len(self.calls) - 1) % len(self._values)]


class ConstantModel:
    """SpaceWeatherModel returning the same raw outputs for every window."""

    def __init__(self, outputs: List[float]):
        self.outputs = outputs
        self.calls = 0

    def predict(self, features) -> List[float]:
        self.calls += 1
        return list(self.outputs)


class FailingModel:
    def predict(self, features) -> List[float]:
        raise RuntimeError("model exploded")


@pytest.fixture()
def reference_time() -> datetime:
    return datetime(2025, 5, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def sample_inference_result() -> InferenceResult:
    return InferenceResult(
        predicted_kp_index=5.0,
        predicted_solar_wind_speed=500.0,
        predicted_magnetic_field_bz=-10.0,
        storm_probability=0.5,
        confidence=0.8,
    )


def make_forecast(
    reference_time: datetime,
    probabilities: Iterable[float],
    confidence: float = 0.5,
) -> tuple[ForecastPoint, ...]:
    probabilities = list(probabilities)
    return tuple(
        ForecastPoint(
            time=time,
            kp_index=3.0,
            confidence=confidence,
            solar_wind_speed=400.0,
            magnetic_field_bz=-1.0,
            geomagnetic_storm_probability=probability,
        )
        for time, probability in zip(
            forecast_times(reference_time, len(probabilities)), probabilities
        )
    )

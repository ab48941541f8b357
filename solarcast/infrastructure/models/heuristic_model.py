"""
Deterministic stand-in for the CNN-LSTM network.

No trained weights ship with the service. Instead of an untrained network
the default model reads the feature window directly: recent timesteps weigh
more, and storm probability comes from the same formula as the fallback
path, so the model path stays consistent with the heuristic everywhere else.
"""

from __future__ import annotations

from typing import List

import numpy as np

from solarcast.domain.entities.observation import ObservationNormalization
from solarcast.domain.services.normalization import (
    DEFAULT_NORMALIZATION,
    denormalize_with,
)
from solarcast.domain.services.storm_probability import storm_probability

BASE_CONFIDENCE = 0.9
DISPERSION_PENALTY = 0.25
CONFIDENCE_FLOOR = 0.2


class HeuristicSpaceWeatherModel:
    """numpy implementation of the SpaceWeatherModel port."""

    def __init__(
        self, normalization: ObservationNormalization = DEFAULT_NORMALIZATION
    ) -> None:
        self._normalization = normalization

    def predict(self, features: np.ndarray) -> List[float]:
        window = np.asarray(features, dtype=np.float64)
        if window.ndim != 2 or window.shape[1] < 3:
            raise ValueError(f"Unexpected feature window shape {window.shape}")

        weights = np.linspace(1.0, 2.0, num=window.shape[0])
        observed = window[:, :3]
        kp_z, speed_z, bz_z = np.average(observed, axis=0, weights=weights)

        norm = self._normalization
        probability = storm_probability(
            denormalize_with(float(kp_z), norm.kp_index),
            denormalize_with(float(speed_z), norm.solar_wind_speed),
            denormalize_with(float(bz_z), norm.magnetic_field_bz),
        )

        dispersion = float(np.mean(np.std(observed, axis=0)))
        confidence = float(
            np.clip(
                BASE_CONFIDENCE - DISPERSION_PENALTY * dispersion,
                CONFIDENCE_FLOOR,
                BASE_CONFIDENCE,
            )
        )

        return [float(kp_z), float(speed_z), float(bz_z), probability, confidence]

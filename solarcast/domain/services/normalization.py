"""Standardization of raw observations against fixed historical statistics."""

from solarcast.domain.entities.observation import (
    NormalizationParameters,
    NormalizedObservation,
    Observation,
    ObservationNormalization,
)

DEFAULT_NORMALIZATION = ObservationNormalization()


def normalize(value: float, mean: float, std_dev: float) -> float:
    return (value - mean) / std_dev


def denormalize(z_score: float, mean: float, std_dev: float) -> float:
    return z_score * std_dev + mean


def normalize_with(value: float, params: NormalizationParameters) -> float:
    return normalize(value, params.mean, params.std_dev)


def denormalize_with(z_score: float, params: NormalizationParameters) -> float:
    return denormalize(z_score, params.mean, params.std_dev)


def normalize_observation(
    observation: Observation,
    normalization: ObservationNormalization = DEFAULT_NORMALIZATION,
) -> NormalizedObservation:
    """Express every observed quantity as a z-score."""
    return NormalizedObservation(
        kp_index=normalize_with(observation.kp_index, normalization.kp_index),
        solar_wind_speed=normalize_with(
            observation.solar_wind_speed, normalization.solar_wind_speed
        ),
        magnetic_field_bz=normalize_with(
            observation.magnetic_field_bz, normalization.magnetic_field_bz
        ),
    )

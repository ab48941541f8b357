import numpy as np
import pytest

from solarcast.domain.entities.observation import NormalizedObservation
from solarcast.domain.services.feature_synthesis import (
    WINDOW_FEATURES,
    WINDOW_TIMESTEPS,
    synthesize_feature_window,
)


def test_window_has_expected_shape():
    window = synthesize_feature_window(
        NormalizedObservation(kp_index=0.5, solar_wind_speed=-0.2, magnetic_field_bz=1.0)
    )

    assert window.values.shape == (WINDOW_TIMESTEPS, WINDOW_FEATURES)
    assert window.timesteps == 24
    assert window.feature_count == 5


def test_first_timestep_equals_observation_and_baselines():
    window = synthesize_feature_window(
        NormalizedObservation(kp_index=0.5, solar_wind_speed=-0.2, magnetic_field_bz=1.0)
    )

    np.testing.assert_allclose(window.values[0], [0.5, -0.2, 1.0, 0.5, 0.3])


def test_window_oscillates_with_sine_trend():
    window = synthesize_feature_window(
        NormalizedObservation(kp_index=1.0, solar_wind_speed=1.0, magnetic_field_bz=1.0),
        timesteps=10,
    )
    trend = np.sin(5 / 5.0) * 0.2

    assert window.values.shape == (10, 5)
    assert window.values[5, 0] == pytest.approx(1.0 + trend)
    assert window.values[5, 2] == pytest.approx(1.0 - 0.5 * trend)


def test_zero_observation_keeps_flux_proxies():
    window = synthesize_feature_window(
        NormalizedObservation(kp_index=0.0, solar_wind_speed=0.0, magnetic_field_bz=0.0)
    )

    assert np.all(window.values[:, :3] == 0.0)
    assert np.all(window.values[:, 3:] > 0.0)

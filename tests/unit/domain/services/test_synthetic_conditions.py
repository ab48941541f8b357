import pytest

from solarcast.domain.entities.observation import ActivityLevel
from solarcast.domain.services.synthetic_conditions import (
    SYNTHETIC_SOURCE,
    SyntheticConditionsSource,
)

from conftest import SequenceRandom


def test_current_conditions_apply_jitter_in_order(reference_time):
    random_source = SequenceRandom([4.0, 1.1, 0.9, 1.0, 1.15])
    source = SyntheticConditionsSource(
        random_source=random_source, clock=lambda: reference_time
    )

    conditions = source.current()

    assert conditions.timestamp == reference_time
    assert conditions.source == SYNTHETIC_SOURCE
    assert conditions.kp_index == pytest.approx(4.0)
    assert conditions.activity_level is ActivityLevel.MODERATE
    assert conditions.solar_wind_speed == pytest.approx(495.0)
    assert conditions.solar_wind_density == pytest.approx(4.5)
    assert conditions.magnetic_field_bz == pytest.approx(-5.0)
    assert conditions.x_ray_flux == pytest.approx(2.3e-6 * 1.15)
    assert random_source.calls[0] == (3.0, 5.0)
    assert random_source.calls[1:] == [(0.85, 1.15)] * 4


def test_conditions_convert_to_observation(reference_time):
    source = SyntheticConditionsSource(
        random_source=SequenceRandom([3.5, 1.0]), clock=lambda: reference_time
    )

    observation = source.current().to_observation()

    assert observation.kp_index == pytest.approx(3.5)
    assert observation.solar_wind_speed == pytest.approx(450.0)
    assert observation.magnetic_field_bz == pytest.approx(-5.0)

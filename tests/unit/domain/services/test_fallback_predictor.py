import pytest

from solarcast.domain.entities.forecast import PredictionSource
from solarcast.domain.entities.observation import ActivityLevel
from solarcast.domain.services.fallback_predictor import FallbackPredictor

from conftest import SequenceRandom


class _ExplodingRandom:
    def uniform(self, a, b):
        raise RuntimeError("entropy exhausted")


def test_moderate_observation_produces_six_decaying_points(reference_time):
    predictor = FallbackPredictor(random_source=SequenceRandom([1.0]))

    outcome = predictor.predict(2.5, 450.0, -2.0, reference_time=reference_time)

    assert outcome.source is PredictionSource.FALLBACK
    assert len(outcome.forecast) == 6
    assert [point.confidence for point in outcome.forecast] == pytest.approx(
        [0.9, 0.8, 0.7, 0.6, 0.5, 0.4]
    )
    first = outcome.forecast[0]
    assert first.kp_index == pytest.approx(2.5)
    assert first.solar_wind_speed == pytest.approx(450.0)
    assert first.magnetic_field_bz == pytest.approx(-2.0)
    assert first.geomagnetic_storm_probability == pytest.approx(
        2.5 / 18 + 0.1 + 2 / 30
    )
    # storm probability peaks above 0.4 around the third and fourth points
    assert outcome.summarized_risk is ActivityLevel.HIGH
    assert outcome.confidence == pytest.approx(0.65)


def test_draws_one_variation_per_point(reference_time):
    random_source = SequenceRandom([0.8, 1.2])
    predictor = FallbackPredictor(random_source=random_source)

    predictor.predict(3.0, 400.0, -1.0, reference_time=reference_time)

    assert random_source.calls == [(0.8, 1.2)] * 6


def test_out_of_range_kp_is_clamped(reference_time):
    predictor = FallbackPredictor(random_source=SequenceRandom([1.2]))

    outcome = predictor.predict(200.0, 50.0, 0.0, reference_time=reference_time)

    for point in outcome.forecast:
        assert 0.0 <= point.kp_index <= 9.0
        assert point.solar_wind_speed >= 200.0
        assert 0.0 <= point.geomagnetic_storm_probability <= 1.0
    assert outcome.summarized_risk is ActivityLevel.SEVERE


def test_failure_returns_conservative_outcome(reference_time):
    predictor = FallbackPredictor(random_source=_ExplodingRandom())

    outcome = predictor.predict(
        4.0, 500.0, -5.0, reference_time=reference_time, degraded_reason="boom"
    )

    assert outcome.source is PredictionSource.FALLBACK
    assert outcome.summarized_risk is ActivityLevel.LOW
    assert outcome.confidence == pytest.approx(0.2)
    assert outcome.degraded_reason == "boom"
    assert len(outcome.forecast) == 6
    assert all(point.kp_index == 0.0 for point in outcome.forecast)
    assert all(point.solar_wind_speed == 200.0 for point in outcome.forecast)


def test_degraded_reason_is_propagated(reference_time):
    predictor = FallbackPredictor(random_source=SequenceRandom([1.0]))

    outcome = predictor.predict(
        1.0, 350.0, 1.0, reference_time=reference_time, degraded_reason="offline"
    )

    assert outcome.is_degraded
    assert outcome.degraded_reason == "offline"

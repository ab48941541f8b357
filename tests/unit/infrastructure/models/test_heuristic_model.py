import numpy as np
import pytest

from solarcast.domain.entities.observation import NormalizedObservation
from solarcast.domain.services.feature_synthesis import synthesize_feature_window
from solarcast.infrastructure.models import (
    HeuristicSpaceWeatherModel,
    KerasSpaceWeatherModel,
    create_model_loader,
    load_keras_model,
)


def test_constant_window_is_read_back_with_full_confidence():
    model = HeuristicSpaceWeatherModel()
    window = np.tile([1.0, 0.5, -1.0, 0.5, 0.3], (24, 1))

    kp_z, speed_z, bz_z, probability, confidence = model.predict(window)

    assert kp_z == pytest.approx(1.0)
    assert speed_z == pytest.approx(0.5)
    assert bz_z == pytest.approx(-1.0)
    # kp 4.0, speed 500, bz -5
    assert probability == pytest.approx(4.0 / 18 + 200 / 1500 + 5 / 30)
    assert confidence == pytest.approx(0.9)


def test_synthetic_window_gives_bounded_outputs():
    window = synthesize_feature_window(
        NormalizedObservation(kp_index=2.0, solar_wind_speed=3.0, magnetic_field_bz=-4.0)
    )

    outputs = HeuristicSpaceWeatherModel().predict(window.values)

    assert len(outputs) == 5
    assert 0.0 <= outputs[3] <= 1.0
    assert 0.2 <= outputs[4] <= 0.9


def test_rejects_malformed_window():
    with pytest.raises(ValueError):
        HeuristicSpaceWeatherModel().predict(np.zeros(5))


def test_loader_defaults_to_heuristic_model():
    loader = create_model_loader(None)

    assert isinstance(loader(), HeuristicSpaceWeatherModel)


def test_loader_with_missing_artifact_fails(tmp_path):
    loader = create_model_loader(str(tmp_path / "missing.keras"))

    with pytest.raises(FileNotFoundError):
        loader()


def test_load_keras_model_checks_file_before_import(tmp_path):
    with pytest.raises(FileNotFoundError, match="missing.keras"):
        load_keras_model(str(tmp_path / "missing.keras"))


class _FakeKerasModel:
    def __init__(self):
        self.batches = []

    def predict(self, batch, verbose=1):
        self.batches.append((batch.shape, verbose))
        return np.array([[0.1, 0.2, 0.3, 0.4, 0.5]])


def test_keras_adapter_feeds_a_batch_of_one():
    fake = _FakeKerasModel()

    outputs = KerasSpaceWeatherModel(fake).predict(np.zeros((24, 5)))

    assert outputs == pytest.approx([0.1, 0.2, 0.3, 0.4, 0.5])
    assert fake.batches == [((1, 24, 5), 0)]

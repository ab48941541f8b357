import asyncio
import threading
import time

import numpy as np
import pytest

from solarcast.domain.entities.forecast import (
    FailureKind,
    FeatureWindow,
    InferenceSuccess,
    InferenceUnavailable,
)
from solarcast.domain.services.inference_engine import EngineState, InferenceEngine

from conftest import ConstantModel, FailingModel


def _window() -> FeatureWindow:
    return FeatureWindow(values=np.zeros((24, 5)))


class _FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class _FlakyModel:
    def __init__(self):
        self.calls = 0

    def predict(self, features):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("transient")
        return [0.0, 0.0, 0.0, 0.3, 0.7]


@pytest.mark.asyncio
async def test_infer_denormalizes_model_outputs():
    engine = InferenceEngine(lambda: ConstantModel([1.0, -1.0, 2.0, 0.5, 0.8]))

    outcome = await engine.infer(_window())

    assert isinstance(outcome, InferenceSuccess)
    assert outcome.result.predicted_kp_index == pytest.approx(4.0)
    assert outcome.result.predicted_solar_wind_speed == pytest.approx(350.0)
    assert outcome.result.predicted_magnetic_field_bz == pytest.approx(10.0)
    assert outcome.result.storm_probability == pytest.approx(0.5)
    assert outcome.result.confidence == pytest.approx(0.8)
    assert engine.state is EngineState.READY


@pytest.mark.asyncio
async def test_probability_and_confidence_are_clamped():
    engine = InferenceEngine(lambda: ConstantModel([0.0, 0.0, 0.0, 1.5, -0.2]))

    outcome = await engine.infer(_window())

    assert outcome.result.storm_probability == 1.0
    assert outcome.result.confidence == 0.0


@pytest.mark.asyncio
async def test_concurrent_first_calls_load_model_once():
    loads = 0
    guard = threading.Lock()

    def loader():
        nonlocal loads
        with guard:
            loads += 1
        time.sleep(0.05)
        return ConstantModel([0.0, 0.0, 0.0, 0.1, 0.9])

    engine = InferenceEngine(loader)

    results = await asyncio.gather(*(engine.initialize() for _ in range(5)))

    assert results == [True] * 5
    assert loads == 1
    assert engine.load_attempts == 1


@pytest.mark.asyncio
async def test_initialization_failure_respects_cooldown():
    clock = _FakeClock()

    def loader():
        raise FileNotFoundError("missing weights")

    engine = InferenceEngine(loader, retry_cooldown_seconds=60.0, clock=clock)

    outcome = await engine.infer(_window())

    assert isinstance(outcome, InferenceUnavailable)
    assert outcome.kind is FailureKind.INITIALIZATION
    assert "missing weights" in outcome.reason
    assert engine.state is EngineState.UNAVAILABLE

    clock.now += 30.0
    await engine.infer(_window())
    assert engine.load_attempts == 1

    clock.now += 31.0
    await engine.infer(_window())
    assert engine.load_attempts == 2


@pytest.mark.asyncio
async def test_recovers_after_cooldown():
    clock = _FakeClock()
    attempts = []

    def loader():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("not yet")
        return ConstantModel([0.0, 0.0, 0.0, 0.2, 0.9])

    engine = InferenceEngine(loader, retry_cooldown_seconds=10.0, clock=clock)

    assert await engine.initialize() is False
    clock.now += 11.0
    assert await engine.initialize() is True
    assert engine.state is EngineState.READY
    assert engine.last_error is None


@pytest.mark.asyncio
async def test_inference_failure_keeps_engine_ready():
    model = _FlakyModel()
    engine = InferenceEngine(lambda: model)

    first = await engine.infer(_window())
    second = await engine.infer(_window())

    assert isinstance(first, InferenceUnavailable)
    assert first.kind is FailureKind.INFERENCE
    assert isinstance(second, InferenceSuccess)
    assert engine.state is EngineState.READY
    assert engine.load_attempts == 1


@pytest.mark.asyncio
async def test_failing_model_reports_inference_failure():
    engine = InferenceEngine(FailingModel)

    outcome = await engine.infer(_window())

    assert isinstance(outcome, InferenceUnavailable)
    assert outcome.kind is FailureKind.INFERENCE
    assert "model exploded" in outcome.reason


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "outputs",
    [[0.1, 0.2, 0.3], [0.0, float("nan"), 0.0, 0.5, 0.5], [float("inf")] * 5],
)
async def test_malformed_outputs_are_inference_failures(outputs):
    engine = InferenceEngine(lambda: ConstantModel(outputs))

    outcome = await engine.infer(_window())

    assert isinstance(outcome, InferenceUnavailable)
    assert outcome.kind is FailureKind.INFERENCE


@pytest.mark.asyncio
async def test_concurrent_first_callers_share_one_failed_attempt():
    loads = 0
    guard = threading.Lock()

    def loader():
        nonlocal loads
        with guard:
            loads += 1
        time.sleep(0.05)
        raise RuntimeError("weights corrupted")

    engine = InferenceEngine(loader, retry_cooldown_seconds=0.001)

    results = await asyncio.gather(*(engine.initialize() for _ in range(5)))

    assert results == [False] * 5
    assert loads == 1
    assert engine.load_attempts == 1
    assert engine.state is EngineState.UNAVAILABLE


@pytest.mark.asyncio
async def test_sequential_calls_during_cooldown_do_not_reload():
    loads = []

    def loader():
        loads.append(1)
        raise RuntimeError("weights corrupted")

    engine = InferenceEngine(loader, retry_cooldown_seconds=60.0, clock=_FakeClock())

    for _ in range(4):
        await engine.infer(_window())

    assert len(loads) == 1


@pytest.mark.parametrize("cooldown", [0.0, -5.0])
def test_non_positive_cooldown_is_rejected(cooldown):
    with pytest.raises(ValueError):
        InferenceEngine(FailingModel, retry_cooldown_seconds=cooldown)

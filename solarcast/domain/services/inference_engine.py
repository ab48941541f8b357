"""
Inference engine.

Owns the model used by the primary prediction path. The model is loaded
lazily on first use; concurrent first callers wait on the same load
instead of loading it twice. Failures are reported as
``InferenceUnavailable`` values so callers can route to the fallback path
without exception handling across the boundary.
"""

from __future__ import annotations

import asyncio
import math
import time
from enum import Enum
from typing import Callable, Optional, Sequence

import numpy as np
import structlog

from solarcast.domain.entities.forecast import (
    FailureKind,
    FeatureWindow,
    InferenceOutcome,
    InferenceResult,
    InferenceSuccess,
    InferenceUnavailable,
)
from solarcast.domain.entities.observation import ObservationNormalization
from solarcast.domain.ports.inference_model import ModelLoader, SpaceWeatherModel
from solarcast.domain.services.bounds import clamp
from solarcast.domain.services.normalization import (
    DEFAULT_NORMALIZATION,
    denormalize_with,
)

logger = structlog.get_logger(__name__)

MODEL_OUTPUTS = 5


class EngineState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    UNAVAILABLE = "unavailable"


class InferenceEngine:
    """Lazily initialized wrapper around a SpaceWeatherModel."""

    def __init__(
        self,
        model_loader: ModelLoader,
        normalization: ObservationNormalization = DEFAULT_NORMALIZATION,
        retry_cooldown_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if retry_cooldown_seconds <= 0:
            raise ValueError("retry_cooldown_seconds must be positive")
        self._model_loader = model_loader
        self._normalization = normalization
        self._retry_cooldown_seconds = retry_cooldown_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._state = EngineState.UNINITIALIZED
        self._model: Optional[SpaceWeatherModel] = None
        self._failed_at: Optional[float] = None
        self._last_error: Optional[str] = None
        self._load_attempts = 0

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def load_attempts(self) -> int:
        return self._load_attempts

    def _cooling_down(self) -> bool:
        if self._state != EngineState.UNAVAILABLE or self._failed_at is None:
            return False
        return self._clock() - self._failed_at < self._retry_cooldown_seconds

    async def initialize(self) -> bool:
        """
        Load the model if needed.

        Returns:
            True when the engine is ready. False when loading failed, either
            now or recently enough that the retry cooldown has not expired.
        """
        if self._state == EngineState.READY:
            return True
        if self._cooling_down():
            return False

        seen_attempts = self._load_attempts
        async with self._lock:
            # An attempt made while we waited answers for us too.
            if self._load_attempts != seen_attempts:
                return self._state == EngineState.READY
            if self._state == EngineState.READY:
                return True
            if self._cooling_down():
                return False

            self._state = EngineState.INITIALIZING
            self._load_attempts += 1
            logger.info("inference.initializing", attempt=self._load_attempts)

            try:
                model = await asyncio.to_thread(self._model_loader)
            except Exception as exc:
                self._state = EngineState.UNAVAILABLE
                self._failed_at = self._clock()
                self._last_error = str(exc) or exc.__class__.__name__
                logger.warning(
                    "inference.initialization_failed",
                    error=self._last_error,
                    retry_in_seconds=self._retry_cooldown_seconds,
                )
                return False

            self._model = model
            self._state = EngineState.READY
            self._failed_at = None
            self._last_error = None
            logger.info("inference.ready", model=type(model).__name__)
            return True

    async def infer(self, window: FeatureWindow) -> InferenceOutcome:
        if not await self.initialize():
            return InferenceUnavailable(
                kind=FailureKind.INITIALIZATION,
                reason=self._last_error or "model unavailable",
            )

        try:
            raw = await asyncio.to_thread(self._predict, window.values)
            result = self._decode(raw)
        except Exception as exc:
            logger.warning("inference.failed", error=str(exc), exc_info=exc)
            return InferenceUnavailable(
                kind=FailureKind.INFERENCE,
                reason=str(exc) or exc.__class__.__name__,
            )

        return InferenceSuccess(result=result)

    def _predict(self, features: np.ndarray) -> Sequence[float]:
        if self._model is None:
            raise RuntimeError("Model is not loaded")
        return self._model.predict(features)

    def _decode(self, raw: Sequence[float]) -> InferenceResult:
        outputs = np.asarray(raw, dtype=np.float64).reshape(-1)
        if outputs.size < MODEL_OUTPUTS:
            raise ValueError(
                f"Model returned {outputs.size} outputs, expected {MODEL_OUTPUTS}"
            )
        values = [float(value) for value in outputs[:MODEL_OUTPUTS]]
        if not all(math.isfinite(value) for value in values):
            raise ValueError("Model returned non-finite outputs")

        norm = self._normalization
        return InferenceResult(
            predicted_kp_index=denormalize_with(values[0], norm.kp_index),
            predicted_solar_wind_speed=denormalize_with(
                values[1], norm.solar_wind_speed
            ),
            predicted_magnetic_field_bz=denormalize_with(
                values[2], norm.magnetic_field_bz
            ),
            storm_probability=clamp(values[3], 0.0, 1.0),
            confidence=clamp(values[4], 0.0, 1.0),
        )

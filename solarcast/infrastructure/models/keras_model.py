"""Adapter for trained Keras artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import numpy as np
import structlog

logger = structlog.get_logger(__name__)


class KerasSpaceWeatherModel:
    """Feeds the feature window to a Keras model as a batch of one."""

    def __init__(self, model: Any) -> None:
        self._model = model

    def predict(self, features: np.ndarray) -> List[float]:
        batch = np.expand_dims(np.asarray(features, dtype=np.float32), axis=0)
        output = self._model.predict(batch, verbose=0)
        return [float(value) for value in np.asarray(output).reshape(-1)]


def load_keras_model(model_path: str) -> KerasSpaceWeatherModel:
    """
    Load a ``.keras`` artifact.

    TensorFlow is imported here so that deployments running the heuristic
    model do not pay for it; a missing install surfaces as an
    initialization failure of the inference engine.
    """
    path = Path(model_path)
    if not path.is_file():
        raise FileNotFoundError(f"Model artifact not found: {model_path}")

    from tensorflow.keras.models import load_model  # type: ignore

    logger.info("inference.keras_model_loading", path=str(path))
    return KerasSpaceWeatherModel(load_model(str(path)))

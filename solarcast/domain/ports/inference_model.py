"""Port implemented by anything able to turn a feature window into predictions."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

import numpy as np


class SpaceWeatherModel(Protocol):
    """
    Model consumed by the inference engine.

    ``predict`` receives a ``(timesteps, features)`` array of normalized
    features and returns five raw scalars: normalized kp index, normalized
    solar wind speed, normalized Bz, storm probability and confidence.
    """

    def predict(self, features: np.ndarray) -> Sequence[float]:
        ...


ModelLoader = Callable[[], SpaceWeatherModel]

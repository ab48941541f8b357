"""Concrete SpaceWeatherModel implementations and the loader factory."""

from functools import partial
from typing import Optional

from solarcast.domain.ports.inference_model import ModelLoader

from .heuristic_model import HeuristicSpaceWeatherModel
from .keras_model import KerasSpaceWeatherModel, load_keras_model


def create_model_loader(model_path: Optional[str] = None) -> ModelLoader:
    """Keras artifact when a path is configured, heuristic model otherwise."""
    if model_path:
        return partial(load_keras_model, model_path)
    return HeuristicSpaceWeatherModel


__all__ = [
    "HeuristicSpaceWeatherModel",
    "KerasSpaceWeatherModel",
    "create_model_loader",
    "load_keras_model",
]

"""
Domain Services Package

Pure forecasting logic: normalization, feature synthesis, inference,
projection, risk classification and the fallback path.
"""

from .fallback_predictor import FallbackPredictor
from .forecaster import SpaceWeatherForecaster
from .inference_engine import EngineState, InferenceEngine
from .synthetic_conditions import SyntheticConditionsSource

__all__ = [
    "EngineState",
    "FallbackPredictor",
    "InferenceEngine",
    "SpaceWeatherForecaster",
    "SyntheticConditionsSource",
]

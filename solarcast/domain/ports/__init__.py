"""Domain ports package."""

from .health_check import IHealthCheckService
from .inference_model import ModelLoader, SpaceWeatherModel
from .random_source import RandomSource

__all__ = ["IHealthCheckService", "SpaceWeatherModel", "ModelLoader", "RandomSource"]

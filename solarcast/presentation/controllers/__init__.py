"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto the application use cases and
domain errors onto HTTP status codes.
"""

from .forecast_controller import router as forecast_router
from .observations_controller import router as observations_router
from .system_controller import router as system_router

__all__ = ["forecast_router", "observations_router", "system_router"]

"""
Infrastructure Layer Package

Implementations of the domain ports and gateways: the NOAA SWPC feed,
the concrete inference models and the health checks.
"""

from solarcast.infrastructure import gateways, models, services

__all__ = ["gateways", "models", "services"]

"""
Gateways Package - Domain Layer

Interfaces defining contracts for the external feeds the service reads.
Implementations live in the infrastructure layer.
"""

from .solar_wind_gateway import ISolarWindGateway

__all__ = ["ISolarWindGateway"]

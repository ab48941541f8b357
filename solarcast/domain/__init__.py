"""
Domain Layer Package

Core forecasting rules of the application: entities, ports, gateway
contracts and the pipeline services. Nothing in here knows about HTTP,
settings or the concrete models.
"""

from solarcast.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]

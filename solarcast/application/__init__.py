"""
Application Layer Package

Use cases and DTOs. The application layer drives the domain services and
gateways and hands serializable results to the presentation layer.
"""

# Re-export submodules
from solarcast.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]

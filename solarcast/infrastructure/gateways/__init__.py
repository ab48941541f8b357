"""
Gateways Package - Infrastructure Layer

HTTP implementations of the domain gateway interfaces.
"""

from .noaa_swpc_gateway import NoaaSwpcGateway

__all__ = ["NoaaSwpcGateway"]

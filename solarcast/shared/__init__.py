"""
Shared module - Cross-cutting concerns

Constants, enums and the structured logging setup used by every layer of
the forecasting service. Nothing in here may depend on the domain,
application or infrastructure packages.
"""

from .consts import SERVICE_NAME, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "SERVICE_NAME",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]

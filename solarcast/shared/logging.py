"""
Logging Configuration - Shared Layer

Structured logging for the forecasting service. structlog renders every
record (including the ones emitted through the standard library by
third-party packages) so the console and the optional log file share a
single format: human readable in development, JSON lines in production.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from solarcast.shared.consts import EnumEnvironment, EnumLogLevel


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get("LOG_LEVEL") or EnumLogLevel.INFO.value).upper()
    return getattr(logging, name, logging.INFO)


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
) -> None:
    """
    Configure stdlib logging and structlog.

    Called once with defaults at import time of the entry points, and again
    with the loaded settings through update_logging_from_settings.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        file_path: Optional log file; falls back to LOG_FILE_PATH.
        environment: Deployment environment, selects the renderer.
    """
    numeric_level = _resolve_level(level)
    log_file = file_path or os.environ.get("LOG_FILE_PATH")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).debug(
        "logging.configured level=%s file=%s",
        logging.getLevelName(numeric_level),
        log_file,
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: AppSettings-like object exposing ``logging`` and
            ``environment``.
    """
    try:
        log_settings = settings.logging
        level = getattr(log_settings.level, "value", log_settings.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=level,
            file_path=log_settings.file_path,
            environment=environment,
        )
    except (AttributeError, OSError) as exc:
        logging.getLogger(__name__).error(
            "logging.update_from_settings_failed error=%s", exc
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)

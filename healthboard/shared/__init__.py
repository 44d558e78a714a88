"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and the logging bootstrap used by every other layer.
This package must not import from the domain, application, infrastructure
or presentation layers.
"""

from .consts import (
    DEFAULT_HISTORY_CAPACITY,
    DEFAULT_READ_TIMEOUT_SECONDS,
    DEFAULT_SAMPLE_INTERVAL_SECONDS,
    HELP_ROUTE_PREFIX,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "DEFAULT_READ_TIMEOUT_SECONDS",
    "DEFAULT_SAMPLE_INTERVAL_SECONDS",
    "HELP_ROUTE_PREFIX",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]

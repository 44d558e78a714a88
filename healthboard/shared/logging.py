"""
Logging Configuration - Shared Layer

Bootstraps stdlib logging with a structlog processor chain. Logging is
configured twice: once from environment variables at import time, so the
settings loader itself can log, and again once the settings are known.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from healthboard.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log every request or connection attempt at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "pymongo", "uvicorn.access")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure the root logger and structlog.

    Args:
        level: Log level name, falls back to LOG_LEVEL.
        format_string: Accepted for settings compatibility; rendering is
            delegated to structlog.
        file_path: Optional log file, in addition to stdout.
        environment: Deployment environment; production logs as JSON.
    """
    env_config = _get_log_config_from_env()

    log_level = (level or env_config["level"] or "INFO").upper()
    log_file = file_path or env_config["file_path"]
    env_value = environment or env_config["environment"] or "development"
    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(env_value),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.format_exc_info,
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

    quiet_level = max(numeric_level, logging.WARNING)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).debug(
        "Logging configured with level %s (environment=%s)", log_level, env_value
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from the loaded application settings."""
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError, ValueError) as exc:
        logging.getLogger(__name__).error(
            "Failed to update logging from settings: %s", exc
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)

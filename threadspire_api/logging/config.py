# threadspire_api/logging/config.py

"""
structlog configuration for the Threadspire API.

Call ``configure_logging()`` once at process startup (``create_app`` does
this). Production emits one JSON object per line; setting
``LOG_FORMAT=console`` switches to coloured, human-readable output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog

from threadspire_api.config import Settings, get_config

from . import DEFAULT_LOGGER_NAME, get_logger


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.
    Unknown values fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> Any:
    """
    Configure structlog and the standard library root logger, and return
    the service logger.
    """
    settings = settings or get_config()
    level = _parse_level(settings.LOG_LEVEL)

    # 1. Processor chain
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,  # request_id, path, ...
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Output format
    if settings.LOG_FORMAT.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 3. Standard library logging (uvicorn, SQLAlchemy)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    return get_logger(DEFAULT_LOGGER_NAME)


__all__ = ["configure_logging"]

# threadspire_api/logging/__init__.py

"""
Logging helpers for the Threadspire API.

API code simply does:

    from threadspire_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("thread_created", thread_id=thread.id)

and stays decoupled from how structlog is configured
(see ``threadspire_api.logging.config``).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

DEFAULT_LOGGER_NAME = "threadspire_api"


def get_logger(name: Optional[str] = None) -> Any:
    """
    Return a structlog logger bound to ``name`` (defaults to the service name).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]

"""Logging for the reservation engine.

Every module logs under the ``hotel`` namespace, so ``hotel_backend.services.room_service``
becomes ``hotel.services.room_service``. The namespace level follows
``HOTEL_LOG_LEVEL`` without touching third-party loggers such as uvicorn's.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from hotel_backend.utils.config import get_settings


LOGGER_NAMESPACE = "hotel"
_PACKAGE_PREFIX = "hotel_backend"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach one stdout handler to the ``hotel`` namespace, once per process."""

    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    resolved_level = (level or get_settings().log_level).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(resolved_level)
    root.addHandler(handler)
    root.propagate = False
    _LOGGER_INITIALIZED = True


def logger_name(module_name: str) -> str:
    if module_name == _PACKAGE_PREFIX:
        return LOGGER_NAMESPACE
    if module_name.startswith(f"{_PACKAGE_PREFIX}."):
        return f"{LOGGER_NAMESPACE}.{module_name[len(_PACKAGE_PREFIX) + 1:]}"
    return f"{LOGGER_NAMESPACE}.{module_name}"


def get_logger(name: str) -> logging.Logger:
    """Return the ``hotel.*`` logger for the requested module."""
    configure_logging()
    return logging.getLogger(logger_name(name))

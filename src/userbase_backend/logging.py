"""Centralized logging configuration for the Userbase backend."""

from __future__ import annotations

import copy
import logging
from logging.config import dictConfig

_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    },
    "loggers": {
        "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "userbase_backend": {"level": "INFO"},
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging once."""

    config = copy.deepcopy(_LOGGING_CONFIG)
    config["loggers"]["userbase_backend"]["level"] = level.upper()
    config["root"] = {"level": level.upper(), "handlers": ["console"]}
    dictConfig(config)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger within the userbase_backend hierarchy."""

    full_name = f"userbase_backend.{name}" if name else "userbase_backend"
    return logging.getLogger(full_name)

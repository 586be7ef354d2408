"""Logging configuration for the FactuurPro backend."""

import logging
import logging.config
import sys
from typing import Any, Dict


def configure_logging(level: str = "INFO") -> None:
    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "simple",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "factuurpro": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
            },
        },
    }
    logging.config.dictConfig(logging_config)

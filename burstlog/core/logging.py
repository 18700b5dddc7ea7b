"""Logging configuration for burstlog.

This module builds a ``logging.config.dictConfig`` setup with the burst
filter attached to the console handler, plus a JSON formatter for
environments that ship logs to an aggregator.
"""

import json
import logging
import logging.config
import sys
import traceback
from datetime import datetime
from typing import Any, Dict, Optional

from burstlog.core.config import Settings, settings

# LogRecord attributes that are not user supplied extras
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Emits one JSON object per record with the level, logger, message, source
    location, any ``extra`` fields and the formatted exception if present.
    """

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.message,
            "source": {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            },
        }

        extra = {
            key: value for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }
        if extra:
            log_data["extra"] = extra

        if record.exc_info and record.exc_info != (None, None, None):
            log_data["exception"] = traceback.format_exception(*record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


def get_logging_config(config: Optional[Settings] = None) -> Dict[str, Any]:
    """Get logging configuration dictionary.

    Args:
        config: Settings to read from, defaults to the global settings

    Returns:
        Logging configuration dict compatible with logging.config.dictConfig
    """
    config = config or settings
    log_level = config.log_level

    formatters: Dict[str, Any] = {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        },
        "json": {
            "()": "burstlog.core.logging.JSONFormatter",
        },
    }
    default_formatter = "json" if config.log_format == "json" else "standard"

    filters: Dict[str, Any] = {}
    console: Dict[str, Any] = {
        "class": "logging.StreamHandler",
        "level": log_level,
        "formatter": default_formatter,
        "stream": sys.stdout,
    }
    if config.burst_enabled:
        filters["burst"] = {
            "()": "burstlog.filters.burst.BurstFilter",
            "level": config.burst_level,
            "recovery_amount": config.burst_recovery_amount,
            "recovery_interval": config.burst_recovery_interval,
            "max_burst": config.burst_max,
        }
        console["filters"] = ["burst"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": {"console": console},
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
    }


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure logging with the burst filter on the console handler."""
    logging.config.dictConfig(get_logging_config(config))


def get_logger(name: str = "burstlog") -> logging.Logger:
    """Get a logger instance with the specified name.

    Args:
        name: Logger name, defaults to "burstlog"

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)

"""Core utilities for burstlog."""

from burstlog.core.clock import Clock, ManualClock, system_clock
from burstlog.core.config import Settings, settings
from burstlog.core.logging import JSONFormatter, get_logger, get_logging_config, setup_logging

__all__ = [
    "Clock",
    "ManualClock",
    "system_clock",
    "Settings",
    "settings",
    "JSONFormatter",
    "get_logger",
    "get_logging_config",
    "setup_logging",
]

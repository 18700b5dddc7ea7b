"""Burst throttling for Python logging."""

from burstlog.exceptions import BurstLogException, ConfigurationError
from burstlog.filters.burst import BurstFilter, FilterReply, FilterState, TokenBucket

__all__ = [
    "BurstFilter",
    "BurstLogException",
    "ConfigurationError",
    "FilterReply",
    "FilterState",
    "TokenBucket",
]

"""Burst filter for standard library logging.

The burst filter limits how many log records at or below a configured level
get through in a burst. Once ``max_burst`` records have passed, further
records at or below the level are dropped until the bucket recovers:
``recovery_amount`` records are allowed again for every ``recovery_interval``
seconds that pass, never more than ``max_burst`` in total. Records above the
level always pass.

The filter can be attached in code::

    handler.addFilter(BurstFilter(level="INFO", recovery_amount=10,
                                  recovery_interval=6, max_burst=100))

or declaratively through ``logging.config.dictConfig``::

    "filters": {
        "burst": {
            "()": "burstlog.filters.burst.BurstFilter",
            "level": "INFO",
            "recovery_amount": 10,
            "recovery_interval": 6,
            "max_burst": 100,
        },
    },
"""

import logging
import threading
from typing import Optional

from burstlog.core.clock import Clock, system_clock
from burstlog.core.config import Settings, settings
from burstlog.core.logging import get_logger
from burstlog.exceptions import ConfigurationError

# Re-export models
from burstlog.filters.burst.models import FilterReply, FilterState
from burstlog.filters.burst.token_bucket import TokenBucket, require_int

logger = get_logger(__name__)

__all__ = [
    # Models
    "FilterReply",
    "FilterState",
    # Bucket
    "TokenBucket",
    # Main classes
    "BurstFilter",
    "resolve_level",
]


def resolve_level(value: int | str, field: str = "level") -> int:
    """Turn a level name or number into a registered level number.

    Args:
        value: Level name (case-insensitive) or level number
        field: Name reported in the error

    Raises:
        ConfigurationError: If the level is not registered with logging
    """
    levels = logging.getLevelNamesMapping()
    if isinstance(value, str):
        name = value.strip().upper()
        if name in levels:
            return levels[name]
        raise ConfigurationError(field, value, f"Unknown logging level: {value!r}")
    if isinstance(value, int) and not isinstance(value, bool) and value in levels.values():
        return value
    raise ConfigurationError(field, value, f"Unknown logging level: {value!r}")


class BurstFilter(logging.Filter):
    """Logging filter that regulates bursts of log traffic.

    The token bucket is built lazily, on the first record that needs it,
    because dictConfig may still be assigning attributes after the filter is
    constructed. Once the bucket exists the configuration is frozen.

    Attributes:
        admitted_count: Records let through so far
        denied_count: Records dropped so far
    """

    def __init__(
        self,
        name: str = "",
        level: Optional[int | str] = None,
        recovery_amount: Optional[int] = None,
        recovery_interval: Optional[int] = None,
        max_burst: Optional[int] = None,
        clock: Clock = system_clock,
    ):
        """Initialize burst filter.

        Parameters left as None fall back to the global settings.

        Args:
            name: Only records from this logger subtree are throttled
                (empty string throttles everything)
            level: Records at or below this level are throttled
            recovery_amount: Records allowed again every recovery interval
            recovery_interval: Seconds between recoveries
            max_burst: Largest burst allowed through at once
            clock: Time source handed to the token bucket

        Raises:
            ConfigurationError: If any value is invalid
        """
        super().__init__(name)
        self._bucket: Optional[TokenBucket] = None
        self._init_lock = threading.Lock()
        self._stats_lock = threading.Lock()
        self._admitted = 0
        self._denied = 0
        self.clock = clock

        self.level = level if level is not None else settings.burst_level
        self.recovery_amount = (
            recovery_amount if recovery_amount is not None else settings.burst_recovery_amount
        )
        self.recovery_interval = (
            recovery_interval if recovery_interval is not None else settings.burst_recovery_interval
        )
        self.max_burst = max_burst if max_burst is not None else settings.burst_max

        logger.debug(
            f"Burst filter configured: level={logging.getLevelName(self._level)} "
            f"recovery={self._recovery_amount}/{self._recovery_interval}s "
            f"max_burst={self._max_burst}"
        )

    @classmethod
    def from_settings(cls, config: Settings, **kwargs) -> "BurstFilter":
        """Build a filter from a Settings instance."""
        return cls(
            level=config.burst_level,
            recovery_amount=config.burst_recovery_amount,
            recovery_interval=config.burst_recovery_interval,
            max_burst=config.burst_max,
            **kwargs,
        )

    # Configuration

    def _ensure_configurable(self, field: str, value: object) -> None:
        if self._bucket is not None:
            raise ConfigurationError(
                field, value, f"Cannot change {field} after the burst filter is active"
            )

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int | str) -> None:
        resolved = resolve_level(value)
        with self._init_lock:
            self._ensure_configurable("level", value)
            self._level = resolved

    @property
    def recovery_amount(self) -> int:
        return self._recovery_amount

    @recovery_amount.setter
    def recovery_amount(self, value: int) -> None:
        require_int("recovery_amount", value, 0)
        with self._init_lock:
            self._ensure_configurable("recovery_amount", value)
            self._recovery_amount = value

    @property
    def recovery_interval(self) -> int:
        return self._recovery_interval

    @recovery_interval.setter
    def recovery_interval(self, value: int) -> None:
        require_int("recovery_interval", value, 1)
        with self._init_lock:
            self._ensure_configurable("recovery_interval", value)
            self._recovery_interval = value

    @property
    def max_burst(self) -> int:
        return self._max_burst

    @max_burst.setter
    def max_burst(self, value: int) -> None:
        require_int("max_burst", value, 0)
        with self._init_lock:
            self._ensure_configurable("max_burst", value)
            self._max_burst = value

    # State

    @property
    def state(self) -> FilterState:
        return FilterState.UNINITIALIZED if self._bucket is None else FilterState.ACTIVE

    @property
    def bucket(self) -> Optional[TokenBucket]:
        return self._bucket

    @property
    def admitted_count(self) -> int:
        return self._admitted

    @property
    def denied_count(self) -> int:
        return self._denied

    def _get_bucket(self) -> TokenBucket:
        """Return the token bucket, building it on first use."""
        bucket = self._bucket
        if bucket is None:
            with self._init_lock:
                if self._bucket is None:
                    self._bucket = TokenBucket(
                        fill_amount=self._recovery_amount,
                        fill_interval=self._recovery_interval,
                        max_tokens=self._max_burst,
                        clock=self.clock,
                    )
                bucket = self._bucket
        return bucket

    # Decisions

    def decide(self, severity: int | str) -> FilterReply:
        """Decide whether an event of the given severity may pass.

        Events strictly above the configured level always pass without
        touching the bucket. Everything else needs a token.

        Args:
            severity: Level number or registered level name of the event

        Returns:
            FilterReply.ADMIT or FilterReply.DENY
        """
        if isinstance(severity, str):
            severity = resolve_level(severity, field="severity")

        if severity > self._level or self._get_bucket().request_token():
            reply = FilterReply.ADMIT
        else:
            reply = FilterReply.DENY

        with self._stats_lock:
            if reply is FilterReply.ADMIT:
                self._admitted += 1
            else:
                self._denied += 1
        return reply

    def filter(self, record: logging.LogRecord) -> bool:
        """Return True if the record should be logged.

        Records from loggers outside ``name`` are not throttled.
        """
        if not super().filter(record):
            return True
        return self.decide(record.levelno) is FilterReply.ADMIT

    def __repr__(self) -> str:
        return (
            f"BurstFilter(level={logging.getLevelName(self._level)}, "
            f"recovery_amount={self._recovery_amount}, "
            f"recovery_interval={self._recovery_interval}, "
            f"max_burst={self._max_burst}, state={self.state.value})"
        )

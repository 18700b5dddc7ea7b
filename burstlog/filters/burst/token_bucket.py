"""Token bucket used by the burst filter.

Tokens are added in whole steps: every ``fill_interval`` seconds that pass,
``fill_amount`` tokens go back into the bucket, up to ``max_tokens``. There
are no fractional tokens and no continuous refill.
"""

import math
import threading

from burstlog.core.clock import Clock, system_clock
from burstlog.exceptions import ConfigurationError


def require_int(field: str, value: object, minimum: int) -> int:
    """Return ``value`` if it is an int no smaller than ``minimum``.

    Raises:
        ConfigurationError: If the value is not an int or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(field, value, f"{field} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(field, value, f"{field} must be at least {minimum}, got {value}")
    return value


class TokenBucket:
    """Thread-safe token bucket with whole-interval refill.

    Attributes:
        fill_amount: Tokens added per elapsed ``fill_interval``
        fill_interval: Seconds between refills
        max_tokens: Upper bound on stored tokens
    """

    def __init__(
        self,
        fill_amount: int,
        fill_interval: int,
        max_tokens: int,
        clock: Clock = system_clock,
    ):
        """Create a full bucket.

        Args:
            fill_amount: Tokens added every ``fill_interval`` seconds (>= 0)
            fill_interval: Refill period in seconds (> 0)
            max_tokens: Bucket capacity (>= 0)
            clock: Zero-argument callable returning the time in seconds

        Raises:
            ConfigurationError: If any value is out of range
        """
        self.fill_amount = require_int("fill_amount", fill_amount, 0)
        self.fill_interval = require_int("fill_interval", fill_interval, 1)
        self.max_tokens = require_int("max_tokens", max_tokens, 0)
        self._clock = clock
        self._current_tokens = max_tokens
        self._last_refill_time = clock()
        self._lock = threading.Lock()

    @property
    def available_tokens(self) -> int:
        """Tokens in the bucket as of the last request (no refill applied)."""
        return self._current_tokens

    @property
    def last_refill_time(self) -> float:
        return self._last_refill_time

    def request_token(self) -> bool:
        """Take one token from the bucket if there is one.

        Refill, check and decrement run as one step under the bucket lock.
        ``last_refill_time`` only moves when a token is granted, so refill is
        always counted from the last admitted event.

        Returns:
            True if a token was taken, False if the bucket is empty
        """
        with self._lock:
            now = self._clock()
            self._refill(now)
            if self._current_tokens <= 0:
                return False
            self._current_tokens -= 1
            self._last_refill_time = now
            return True

    def _refill(self, now: float) -> None:
        """Add ``fill_amount`` for every whole interval since the last grant."""
        elapsed = math.floor(now) - math.floor(self._last_refill_time)
        if elapsed < self.fill_interval:
            return
        cycles = elapsed // self.fill_interval
        self._current_tokens = min(
            self.max_tokens,
            self._current_tokens + cycles * self.fill_amount,
        )

    def __repr__(self) -> str:
        return (
            f"TokenBucket(fill_amount={self.fill_amount}, "
            f"fill_interval={self.fill_interval}, max_tokens={self.max_tokens}, "
            f"current_tokens={self._current_tokens})"
        )

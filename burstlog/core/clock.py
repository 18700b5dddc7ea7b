"""Time sources for the token bucket."""

import time
from typing import Callable

# Any zero-argument callable returning seconds since an arbitrary epoch.
Clock = Callable[[], float]

system_clock: Clock = time.time


class ManualClock:
    """Clock that only moves when told to.

    Used to drive the bucket through whole refill intervals without sleeping.
    """

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

"""
Walk a burst filter through the classic throttling scenario with a manual clock
"""
import logging
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from burstlog.core.clock import ManualClock
from burstlog.filters.burst import BurstFilter

def run_demo():
    """Log bursts of 110 records and report what got through"""
    clock = ManualClock()
    burst_filter = BurstFilter(
        recovery_amount=10,
        recovery_interval=6,
        max_burst=100,
        clock=clock,
    )

    logger = logging.getLogger("burstlog.demo")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(logging.NullHandler())
    logger.addFilter(burst_filter)

    steps = [
        (0, logging.INFO, "110 INFO records at t=0"),
        (12, logging.INFO, "110 INFO records after 12 seconds"),
        (0, logging.DEBUG, "110 DEBUG records right after"),
        (18, logging.WARNING, "110 WARNING records after 18 more seconds"),
    ]

    print("=== Burst filter demo ===\n")
    print(f"{burst_filter!r}\n")

    for wait, level, label in steps:
        clock.advance(wait)
        admitted_before = burst_filter.admitted_count
        denied_before = burst_filter.denied_count
        for i in range(110):
            logger.log(level, "demo record #%d", i + 1)
        print(f"{label}:")
        print(f"  admitted: {burst_filter.admitted_count - admitted_before}")
        print(f"  denied:   {burst_filter.denied_count - denied_before}\n")

    print(f"Totals: {burst_filter.admitted_count} admitted, {burst_filter.denied_count} denied")

if __name__ == "__main__":
    run_demo()

"""Logging filters provided by burstlog."""

from burstlog.filters.burst import BurstFilter, FilterReply, FilterState

__all__ = ["BurstFilter", "FilterReply", "FilterState"]

"""Burst filter data models.

This module contains the enums describing filter decisions and lifecycle.
"""

from enum import Enum


class FilterReply(str, Enum):
    """Outcome of a burst filter decision."""
    ADMIT = "admit"
    DENY = "deny"


class FilterState(str, Enum):
    """Lifecycle of a burst filter.

    A filter starts UNINITIALIZED and becomes ACTIVE once, when its token
    bucket is built on the first throttled decision. There is no way back.
    """
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"

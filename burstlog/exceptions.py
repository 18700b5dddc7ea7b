"""Custom exceptions for the burstlog package."""

from typing import Any


class BurstLogException(Exception):
    """Base class for burstlog exceptions.

    All custom exceptions should inherit from this class so callers can
    catch everything raised by the package with a single except clause.
    """

    def __init__(self, message: str = "burstlog error"):
        self.message = message
        super().__init__(message)


class ConfigurationError(BurstLogException):
    """Raised when a burst filter or token bucket is configured with a bad value.

    The filter cannot throttle safely with an invalid configuration, so this
    is raised as soon as the value is seen and is never replaced by a default.
    """

    def __init__(
        self,
        field: str,
        value: Any = None,
        detail: str | None = None,
    ):
        self.field = field
        self.value = value
        message = detail or f"Invalid value for {field}: {value!r}"
        super().__init__(message)

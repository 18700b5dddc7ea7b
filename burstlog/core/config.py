import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings loaded from environment variables.

    All settings can be configured via environment variables or .env file.
    Burst filter parameters are the defaults used when a filter is built
    without explicit values.
    """

    # Burst filter settings
    burst_enabled: bool = True  # Attach the burst filter in setup_logging()
    burst_level: str = "WARNING"  # Records at or below this level are throttled
    burst_recovery_amount: int = 10  # Tokens returned every recovery interval
    burst_recovery_interval: int = 6  # Seconds between recoveries
    burst_max: int = 100  # Largest burst let through at once

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "text"  # text | json

    @field_validator("burst_level", "log_level")
    @classmethod
    def validate_level_name(cls, v: str) -> str:
        """Validate that the level is registered with the logging module."""
        name = v.strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level: {v}")
        return name

    @field_validator("burst_recovery_interval")
    @classmethod
    def validate_recovery_interval(cls, v: int) -> int:
        """Validate recovery interval is positive."""
        if v < 1:
            raise ValueError("burst_recovery_interval must be at least 1 second")
        return v

    @field_validator("burst_recovery_amount", "burst_max")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate token counts are not negative."""
        if v < 0:
            raise ValueError("burst token counts must not be negative")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()

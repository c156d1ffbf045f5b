"""Settings for the runtimex logging stack.

Values come from environment variables (RUNTIMEX_LOG_LEVEL=DEBUG) or a
.env file. Only the logging output of fatal paths is configurable; exit
codes and abort behaviour are fixed.
"""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimexSettings(BaseSettings):
    """Logging settings used by configure_logging."""

    log_level: str = "INFO"
    """Minimum level emitted by the structlog pipeline."""

    json_output: bool = False
    """Render log lines as JSON instead of the console format."""

    model_config = SettingsConfigDict(
        env_prefix="RUNTIMEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


# Lazy initialization - no module-level instantiation
_settings: Optional[RuntimexSettings] = None


def get_settings() -> RuntimexSettings:
    """Get the global settings instance.

    Creates a new RuntimexSettings instance lazily if none exists.
    """
    global _settings
    if _settings is None:
        _settings = RuntimexSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    Forces re-reading the environment on the next get_settings() call.
    """
    global _settings
    _settings = None


__all__ = [
    "RuntimexSettings",
    "get_settings",
    "reset_settings",
]

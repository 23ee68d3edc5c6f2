"""Settings model for the loom-data library.

Values are read, in order of precedence, from:
    1. Environment variables prefixed with `LOOM_DATA_`
    2. A `.env` file in the current working directory
    3. Default values
"""

import logging
from functools import lru_cache
from typing import Any, Literal

from loom_data.exceptions import ConfigValidationError
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoomDataSettings(BaseSettings):
    """Frozen settings for the model layer.

    Attributes:
        log_level (Literal): The minimum level of logs to display. Options are 'debug',
            'info', 'warn', 'warning', 'error'.
        dev (bool): Development mode, forces the log level down to 'debug'.

    Examples:
        >>> settings = LoomDataSettings(log_level="warning")
        >>> settings.logging_level
        30

    Raises:
        loom_data.exceptions.ConfigValidationError: Custom error raised during configuration validation.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOOM_DATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_level: Literal["debug", "info", "warn", "warning", "error"] = Field(
        default="info",
        description="The minimum level of logs to display.",
    )
    dev: bool = Field(
        default=False,
        description="Development mode, logs everything down to debug level.",
    )

    def __init__(self, **values: Any) -> None:
        """Initialize the settings and handle validation errors."""
        try:
            super().__init__(**values)
        except ValidationError as e:
            raise ConfigValidationError("Error validating configuration.") from e

    @property
    def logging_level(self) -> int:
        """Return the `logging` module level matching the settings."""
        if self.dev:
            return logging.DEBUG
        return _LOG_LEVELS[self.log_level]


@lru_cache
def get_settings() -> LoomDataSettings:
    """Get cached settings instance."""
    return LoomDataSettings()

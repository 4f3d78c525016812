"""Configuration management using pydantic-settings.

Values come from the environment, then ``.env`` and ``.env.local`` (local
overrides shared). Command-line flags take precedence over these defaults.

Usage:
    from botswarm.config import settings
    print(settings.default_port)
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """A launch cannot be configured (missing flag, unreadable file)."""


class Settings(BaseSettings):
    """Launcher settings loaded from environment variables.

    Every setting uses the ``BOTSWARM_`` prefix through an explicit
    ``validation_alias``.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    # ==========================================================================
    # SERVER
    # ==========================================================================

    default_port: int = Field(
        default=25565,
        validation_alias="BOTSWARM_DEFAULT_PORT",
        description="Server port used when -p is not given",
    )

    auth: str | None = Field(
        default=None,
        validation_alias="BOTSWARM_AUTH",
        description="Authentication mode passed to the game client (e.g. microsoft)",
    )

    # ==========================================================================
    # CREDENTIALS
    # ==========================================================================

    credentials_encoding: str = Field(
        default="utf-8",
        validation_alias="BOTSWARM_CREDENTIALS_ENCODING",
        description="Text encoding of the credentials file",
    )

    # ==========================================================================
    # LOGGING
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        validation_alias="BOTSWARM_LOG_LEVEL",
        description="Root log level when --verbose is not given",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name, falling back to INFO for unknown names."""
        level = value.upper()
        if level not in LOG_LEVELS:
            logger.warning(
                "Unknown BOTSWARM_LOG_LEVEL %r, using INFO (expected one of %s)",
                value,
                ", ".join(LOG_LEVELS),
            )
            return "INFO"
        return level


# Singleton instance
settings = Settings.model_validate({})

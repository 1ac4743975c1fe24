"""Logging settings."""

from pydantic import Field

from cumulus.configuration.base import SdkSettings


class LoggingSettings(SdkSettings):
    """Logging configuration.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_JSON: Render log lines as JSON instead of console output
    """

    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    LOG_JSON: bool = Field(default=False, alias="LOG_JSON")

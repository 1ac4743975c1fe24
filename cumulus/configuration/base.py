"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SdkSettings(BaseSettings):
    """Base class for all SDK settings.

    All settings classes inherit from this class to ensure consistent
    configuration behavior (env file loading, case sensitivity, construction
    by field name as well as by environment alias).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

"""SDK configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from cumulus.configuration.client import ClientConfig
from cumulus.configuration.credentials import CredentialSettings
from cumulus.configuration.observability import LoggingSettings


class Settings(BaseSettings):
    """SDK configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object:

    - **client**: Default client configuration (region, retries, timeouts)
    - **credentials**: Static credentials from the environment
    - **logging**: Log level and rendering

    Example:
        ```python
        from cumulus.configuration import get_settings

        settings = get_settings()

        region = settings.client.region
        if settings.credentials.is_complete:
            ...
        ```
    """

    client: ClientConfig
    credentials: CredentialSettings
    logging: LoggingSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "client": ClientConfig,
            "credentials": CredentialSettings,
            "logging": LoggingSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per
    process. Tests that change the environment call
    `get_settings.cache_clear()`.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()

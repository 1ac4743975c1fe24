"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    ClientConfig: Per-client runtime configuration (region, retries, timeouts)
    CredentialSettings: Static credentials from the environment
    LoggingSettings: Log level and rendering
    Settings: Aggregate settings class
    get_settings: Cached Settings singleton

Example:
    ```python
    from cumulus.configuration import ClientConfig, get_settings

    config = ClientConfig(region="ca-central-1")
    log_level = get_settings().logging.LOG_LEVEL
    ```
"""

from cumulus.configuration.client import ClientConfig
from cumulus.configuration.credentials import CredentialSettings
from cumulus.configuration.observability import LoggingSettings
from cumulus.configuration.settings import Settings, get_settings

__all__ = [
    "ClientConfig",
    "CredentialSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]

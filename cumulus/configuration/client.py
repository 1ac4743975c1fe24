"""Per-client runtime configuration."""

from typing import Optional

from pydantic import Field, model_validator

from cumulus import __version__
from cumulus.configuration.base import SdkSettings

DEFAULT_USER_AGENT = f"cumulus-sdk/{__version__}"


class ClientConfig(SdkSettings):
    """Configuration shared by every service client.

    Service packages subclass this to change defaults (for example DynamoDB
    allows more retries). Values can be passed explicitly or picked up from
    the environment.

    Environment Variables:
        AWS_REGION: Region the client talks to
        AWS_ENDPOINT_URL: Explicit endpoint, overrides region resolution
        CUMULUS_USE_HTTP: Use http instead of https for resolved endpoints
        CUMULUS_MAX_ERROR_RETRY: Retries after the first attempt (default: 4)
        CUMULUS_RETRY_BASE_DELAY: Base exponential backoff delay in seconds
        CUMULUS_RETRY_MAX_BACKOFF: Maximum backoff delay in seconds
        CUMULUS_RETRY_JITTER: Randomize backoff delays (full jitter)
        CUMULUS_TIMEOUT: Overall HTTP timeout in seconds
        CUMULUS_CONNECT_TIMEOUT: Connection timeout in seconds
        CUMULUS_PROXY: Proxy URL for outgoing requests

    Exponential Backoff:
        Delay calculation: min(base_delay * (2 ^ retries), max_backoff)

        Example with defaults (base=0.1s, max=20s):
            Retry 1: 0.1s
            Retry 2: 0.2s
            Retry 3: 0.4s
            Retry 4: 0.8s

    Example:
        ```python
        from cumulus.configuration import ClientConfig

        config = ClientConfig(region="ca-central-1", max_error_retry=2)
        ```
    """

    region: Optional[str] = Field(default=None, alias="AWS_REGION")
    service_url: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    use_http: bool = Field(default=False, alias="CUMULUS_USE_HTTP")

    max_error_retry: int = Field(
        default=4,
        alias="CUMULUS_MAX_ERROR_RETRY",
        ge=0,
        description="Retries performed after the first attempt",
    )
    retry_base_delay: float = Field(
        default=0.1,
        alias="CUMULUS_RETRY_BASE_DELAY",
        ge=0,
        description="Base delay for exponential backoff (seconds)",
    )
    retry_max_backoff: float = Field(
        default=20.0,
        alias="CUMULUS_RETRY_MAX_BACKOFF",
        ge=0,
        description="Maximum delay between retries (seconds)",
    )
    retry_jitter: bool = Field(
        default=True,
        alias="CUMULUS_RETRY_JITTER",
        description="Pick a random delay between zero and the computed backoff",
    )

    timeout: float = Field(default=100.0, alias="CUMULUS_TIMEOUT", gt=0)
    connect_timeout: float = Field(default=10.0, alias="CUMULUS_CONNECT_TIMEOUT", gt=0)
    proxy: Optional[str] = Field(default=None, alias="CUMULUS_PROXY")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="CUMULUS_USER_AGENT")

    authentication_region: Optional[str] = Field(
        default=None,
        alias="CUMULUS_AUTHENTICATION_REGION",
        description="Region used for signing when it differs from the endpoint region",
    )
    authentication_service_name: Optional[str] = Field(
        default=None,
        alias="CUMULUS_AUTHENTICATION_SERVICE_NAME",
        description="Service name used for signing when it differs from the endpoint prefix",
    )
    correct_clock_skew: bool = Field(default=True, alias="CUMULUS_CORRECT_CLOCK_SKEW")
    log_response: bool = Field(default=False, alias="CUMULUS_LOG_RESPONSE")
    log_metrics: bool = Field(default=True, alias="CUMULUS_LOG_METRICS")

    @model_validator(mode="after")
    def _check_backoff(self) -> "ClientConfig":
        if self.retry_max_backoff < self.retry_base_delay:
            raise ValueError("retry_max_backoff must be >= retry_base_delay")
        return self

    @property
    def scheme(self) -> str:
        """URL scheme used for resolved endpoints."""
        return "http" if self.use_http else "https"

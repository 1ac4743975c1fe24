"""DynamoDB client configuration."""

from pydantic import Field

from cumulus.configuration.client import ClientConfig


class DynamoDBConfig(ClientConfig):
    """ClientConfig with DynamoDB's retry defaults.

    DynamoDB throttles aggressively under load, so the client retries up to
    10 times starting from a 25 ms delay.

    Environment Variables:
        CUMULUS_MAX_ERROR_RETRY: Retries after the first attempt (default: 10)
        CUMULUS_RETRY_BASE_DELAY: Base backoff delay in seconds (default: 0.025)
    """

    max_error_retry: int = Field(default=10, alias="CUMULUS_MAX_ERROR_RETRY", ge=0)
    retry_base_delay: float = Field(
        default=0.025, alias="CUMULUS_RETRY_BASE_DELAY", ge=0
    )

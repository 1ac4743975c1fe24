"""DynamoDB retry policy."""

from typing import TYPE_CHECKING

from cumulus.runtime.retry import DefaultRetryPolicy
from cumulus.services.dynamodb.errors import ProvisionedThroughputExceededException

if TYPE_CHECKING:
    from cumulus.runtime.context import ExecutionContext


class DynamoDBRetryPolicy(DefaultRetryPolicy):
    """Retry policy tuned for DynamoDB throttling.

    The first retry happens immediately; later retries back off
    exponentially from the base delay (25 ms by default). Exceeded
    provisioned throughput is always retried while the limit allows.
    """

    def __init__(
        self,
        max_error_retry: int = 10,
        base_delay: float = 0.025,
        max_backoff: float = 20.0,
        jitter: bool = True,
    ):
        super().__init__(max_error_retry, base_delay, max_backoff, jitter)

    def retry_for_exception(self, context: "ExecutionContext", exc: Exception) -> bool:
        if isinstance(exc, ProvisionedThroughputExceededException):
            return True
        return super().retry_for_exception(context, exc)

    def backoff(self, retries: int) -> float:
        if retries == 0:
            return 0.0
        return super().backoff(retries)

"""Retry policies used by the pipeline's RetryHandler.

Exponential Backoff:
    Delay calculation: min(max_backoff, base_delay * (2 ^ retries))

    With full jitter the actual delay is a random value between zero and the
    computed delay. A `Retry-After` response header wins when it asks for a
    longer wait.
"""

import random
import time
from datetime import timedelta
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import structlog

from cumulus.operations.classifiers import SIGNATURE_ERROR_CODES, classify_service_error
from cumulus.runtime.cancellation import sleep_or_cancel
from cumulus.runtime.clock import (
    adjust_for_server_time,
    corrected_utc_now,
    parse_server_time,
)
from cumulus.runtime.exceptions import RequestCancelledError, ServiceError

if TYPE_CHECKING:
    from cumulus.configuration.client import ClientConfig
    from cumulus.runtime.context import ExecutionContext

logger = structlog.get_logger()

CLOCK_SKEW_THRESHOLD = timedelta(minutes=5)


class RetryPolicy(ABC):
    """Decides whether a failed attempt is retried and how long to wait."""

    def __init__(self, max_error_retry: int):
        if max_error_retry < 0:
            raise ValueError("max_error_retry must be >= 0")
        self.max_error_retry = max_error_retry

    def retry(self, context: "ExecutionContext", exc: Exception) -> bool:
        """Whether the attempt that raised `exc` should be repeated."""
        if self.retry_limit_reached(context):
            return False
        if not self.can_retry(context):
            return False
        return self.retry_for_exception(context, exc)

    def can_retry(self, context: "ExecutionContext") -> bool:
        """Whether the request can be sent again at all."""
        request = context.request_context.request
        return request is None or request.is_replayable

    def retry_limit_reached(self, context: "ExecutionContext") -> bool:
        return context.request_context.retries >= self.max_error_retry

    @abstractmethod
    def retry_for_exception(self, context: "ExecutionContext", exc: Exception) -> bool:
        """Whether `exc` is an error worth retrying."""

    @abstractmethod
    def compute_delay(self, context: "ExecutionContext", exc: Exception) -> float:
        """Seconds to wait before the next attempt."""

    def wait_before_retry(self, context: "ExecutionContext", exc: Exception) -> float:
        delay = self.compute_delay(context, exc)
        if delay > 0:
            time.sleep(delay)
        return delay

    async def wait_before_retry_async(
        self, context: "ExecutionContext", exc: Exception
    ) -> float:
        delay = self.compute_delay(context, exc)
        await sleep_or_cancel(delay, context.request_context.cancellation)
        return delay


class DefaultRetryPolicy(RetryPolicy):
    """Retries throttling, 5xx, transport and checksum failures.

    Clock skew errors are retried once per request after the clock offset
    for the endpoint has been corrected from the server's Date header.
    Signature errors count as clock skew only when that Date is further
    than CLOCK_SKEW_THRESHOLD from the local clock.

    Args:
        max_error_retry: Retries after the first attempt
        base_delay: Base delay for exponential backoff (seconds)
        max_backoff: Maximum delay between retries (seconds)
        jitter: Pick a random delay between zero and the computed backoff

    Example:
        policy = DefaultRetryPolicy(max_error_retry=3, base_delay=0.2)
        client.pipeline.replace_handler(RetryHandler, RetryHandler(policy))
    """

    def __init__(
        self,
        max_error_retry: int = 4,
        base_delay: float = 0.1,
        max_backoff: float = 20.0,
        jitter: bool = True,
    ):
        super().__init__(max_error_retry)
        if base_delay < 0:
            raise ValueError("base_delay must be >= 0")
        if max_backoff < base_delay:
            raise ValueError("max_backoff must be >= base_delay")
        self.base_delay = base_delay
        self.max_backoff = max_backoff
        self.jitter = jitter

    @classmethod
    def from_config(cls, config: "ClientConfig") -> "DefaultRetryPolicy":
        return cls(
            max_error_retry=config.max_error_retry,
            base_delay=config.retry_base_delay,
            max_backoff=config.retry_max_backoff,
            jitter=config.retry_jitter,
        )

    def retry_for_exception(self, context: "ExecutionContext", exc: Exception) -> bool:
        if isinstance(exc, RequestCancelledError):
            return False
        if self._is_signature_error(exc):
            return self._correct_clock_skew(context, exc, require_skew=True)
        result = classify_service_error(exc)
        if result.error_code == "CLOCK_SKEW":
            return self._correct_clock_skew(context, exc)
        return result.is_retryable

    @staticmethod
    def _is_signature_error(exc: Exception) -> bool:
        return isinstance(exc, ServiceError) and exc.error_code in SIGNATURE_ERROR_CODES

    def _correct_clock_skew(
        self, context: "ExecutionContext", exc: Exception, require_skew: bool = False
    ) -> bool:
        """Store the server's clock offset and allow one more attempt.

        With `require_skew` the error may also mean a wrong secret key, so
        the attempt is only repeated when the server's Date is more than
        CLOCK_SKEW_THRESHOLD away from the corrected local clock.
        """
        request_context = context.request_context
        if request_context.clock_skew_corrected:
            return False
        if not request_context.client_config.correct_clock_skew:
            return False
        if not isinstance(exc, ServiceError) or request_context.request is None:
            return False

        server_time = parse_server_time(exc.headers.get("date"))
        if server_time is None:
            return False
        endpoint = request_context.request.endpoint
        if require_skew:
            skew = abs(server_time - corrected_utc_now(endpoint))
            if skew <= CLOCK_SKEW_THRESHOLD:
                return False
        adjust_for_server_time(endpoint, server_time)
        request_context.clock_skew_corrected = True
        return True

    def backoff(self, retries: int) -> float:
        """Exponential backoff for the given number of completed retries."""
        delay = min(self.max_backoff, self.base_delay * (2**retries))
        if self.jitter:
            delay = random.uniform(0, delay)
        return delay

    def compute_delay(self, context: "ExecutionContext", exc: Exception) -> float:
        if self._is_signature_error(exc):
            return 0.0
        result = classify_service_error(exc)
        if result.error_code == "CLOCK_SKEW":
            return 0.0
        delay = self.backoff(context.request_context.retries)
        if result.retry_after is not None and result.retry_after > delay:
            delay = float(result.retry_after)
        return delay

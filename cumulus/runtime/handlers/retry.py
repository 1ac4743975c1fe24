"""Repeats failed attempts as the retry policy allows."""

import structlog

from cumulus.runtime.cancellation import raise_if_cancelled
from cumulus.runtime.context import ExecutionContext, ResponseContext
from cumulus.runtime.pipeline import PipelineHandler
from cumulus.runtime.retry import RetryPolicy

logger = structlog.get_logger()


class RetryHandler(PipelineHandler):
    """Runs the inner handlers until they succeed or the policy gives up.

    Every attempt goes through credential retrieval and signing again.
    """

    def __init__(self, retry_policy: RetryPolicy):
        super().__init__()
        self.retry_policy = retry_policy

    def _log_retry(self, context: ExecutionContext, exc: Exception, delay: float) -> None:
        logger.warning(
            "request_retrying",
            attempt=context.request_context.retries,
            error=str(exc),
            error_class=type(exc).__name__,
            delay=round(delay, 3),
        )

    def invoke_sync(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        while True:
            try:
                super().invoke_sync(context)
                return
            except Exception as exc:
                if not self.retry_policy.retry(context, exc):
                    raise
                delay = self.retry_policy.wait_before_retry(context, exc)
                request_context.retries += 1
                context.response_context = ResponseContext()
                self._log_retry(context, exc, delay)

    async def invoke_async(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        while True:
            raise_if_cancelled(request_context.cancellation)
            try:
                await super().invoke_async(context)
                return
            except Exception as exc:
                if not self.retry_policy.retry(context, exc):
                    raise
                delay = await self.retry_policy.wait_before_retry_async(context, exc)
                request_context.retries += 1
                context.response_context = ResponseContext()
                self._log_retry(context, exc, delay)

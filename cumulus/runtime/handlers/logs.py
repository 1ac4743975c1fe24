"""Outermost handler: invocation context and call timing."""

import time

import structlog

from cumulus.logging.context import bind_invocation_context
from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import ServiceError
from cumulus.runtime.pipeline import PipelineHandler

logger = structlog.get_logger()


class LoggingHandler(PipelineHandler):
    """Binds invocation id, service and operation for every log entry of a call
    and logs its outcome."""

    def invoke_sync(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        with bind_invocation_context(
            request_context.invocation_id,
            request_context.service_name,
            request_context.operation.name,
        ):
            started = time.perf_counter()
            logger.debug("request_started")
            try:
                super().invoke_sync(context)
            except Exception as exc:
                self._log_failure(context, exc, started)
                raise
            self._log_success(context, started)

    async def invoke_async(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        with bind_invocation_context(
            request_context.invocation_id,
            request_context.service_name,
            request_context.operation.name,
        ):
            started = time.perf_counter()
            logger.debug("request_started", is_async=True)
            try:
                await super().invoke_async(context)
            except Exception as exc:
                self._log_failure(context, exc, started)
                raise
            self._log_success(context, started)

    @staticmethod
    def _duration_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)

    def _log_success(self, context: ExecutionContext, started: float) -> None:
        config = context.request_context.client_config
        http_response = context.response_context.http_response
        response = context.response_context.response
        fields = {}
        if config.log_metrics:
            fields["duration_ms"] = self._duration_ms(started)
            fields["retries"] = context.request_context.retries
        if http_response is not None:
            fields["status_code"] = http_response.status_code
            if config.log_response:
                fields["response_body"] = http_response.text
        if response is not None:
            fields["request_id"] = response.response_metadata.request_id
        logger.info("request_completed", **fields)

    def _log_failure(self, context: ExecutionContext, exc: Exception, started: float) -> None:
        fields = {
            "error": str(exc),
            "error_class": type(exc).__name__,
            "retries": context.request_context.retries,
            "duration_ms": self._duration_ms(started),
        }
        if isinstance(exc, ServiceError):
            fields["error_code"] = exc.error_code
            fields["status_code"] = exc.status_code
            fields["request_id"] = exc.request_id
        logger.error("request_failed", **fields)

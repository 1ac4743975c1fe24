"""Turns the request model into a wire request."""

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import ParamValidationError
from cumulus.runtime.pipeline import PipelineHandler


class Marshaller(PipelineHandler):
    """Validates required members, marshalls the request and sets User-Agent."""

    def _marshall(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        original = request_context.original_request

        missing = original.missing_required()
        if missing:
            raise ParamValidationError(request_context.operation.name, missing)

        request = request_context.marshaller.marshall(original)
        request.headers["User-Agent"] = request_context.client_config.user_agent
        request_context.request = request

    def invoke_sync(self, context: ExecutionContext) -> None:
        self._marshall(context)
        super().invoke_sync(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        self._marshall(context)
        await super().invoke_async(context)

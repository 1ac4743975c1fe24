"""Turns the HTTP response into the operation's response model."""

import xml.etree.ElementTree as ET

import structlog

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import ResponseParseError
from cumulus.runtime.pipeline import PipelineHandler

logger = structlog.get_logger()


class Unmarshaller(PipelineHandler):
    """Raises ResponseParseError when a success body is malformed."""

    def _unmarshall(self, context: ExecutionContext) -> None:
        http_response = context.response_context.http_response
        if http_response is None:
            return
        request_context = context.request_context
        try:
            response = request_context.unmarshaller.unmarshall(http_response)
        # pydantic's ValidationError and json's JSONDecodeError are ValueErrors
        except (ET.ParseError, ValueError) as exc:
            logger.warning(
                "response_parse_failed",
                service=request_context.service_name,
                operation=request_context.operation.name,
                status_code=http_response.status_code,
                error=str(exc),
            )
            raise ResponseParseError(
                request_context.operation.name, http_response.status_code, str(exc)
            ) from exc
        response.http_status_code = http_response.status_code
        response.content_length = http_response.content_length
        context.response_context.response = response

    def invoke_sync(self, context: ExecutionContext) -> None:
        super().invoke_sync(context)
        self._unmarshall(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        await super().invoke_async(context)
        self._unmarshall(context)

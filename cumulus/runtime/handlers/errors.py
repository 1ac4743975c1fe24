"""Turns HTTP error responses into typed service exceptions."""

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import HttpErrorResponse, ServiceError
from cumulus.runtime.pipeline import PipelineHandler
from cumulus.runtime.response import WebResponseData


class ErrorHandler(PipelineHandler):
    """Parses error bodies with the operation's unmarshaller and raises the
    exception class the client registered for the error code."""

    @staticmethod
    def to_service_error(context: ExecutionContext, response: WebResponseData) -> ServiceError:
        request_context = context.request_context
        details = request_context.unmarshaller.unmarshall_error(response)
        if request_context.error_factory is not None:
            return request_context.error_factory(details, response)
        return ServiceError(
            message=details.message,
            error_code=details.code,
            status_code=response.status_code,
            request_id=details.request_id,
            error_type=details.error_type,
            headers=response.headers,
        )

    def invoke_sync(self, context: ExecutionContext) -> None:
        try:
            super().invoke_sync(context)
        except HttpErrorResponse as exc:
            raise self.to_service_error(context, exc.response) from exc

    async def invoke_async(self, context: ExecutionContext) -> None:
        try:
            await super().invoke_async(context)
        except HttpErrorResponse as exc:
            raise self.to_service_error(context, exc.response) from exc

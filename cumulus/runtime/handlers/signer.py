"""Signs the wire request."""

from cumulus.runtime.clock import corrected_utc_now
from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.pipeline import PipelineHandler


class Signer(PipelineHandler):
    """Delegates to the client's signer. Anonymous requests are left unsigned."""

    @staticmethod
    def signing_region(context: ExecutionContext) -> str:
        request_context = context.request_context
        config = request_context.client_config
        if config.authentication_region:
            return config.authentication_region
        if request_context.region is not None:
            return request_context.region.system_name
        return "us-east-1"

    def _sign(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        credentials = request_context.immutable_credentials
        if credentials is None:
            return
        request = request_context.request
        config = request_context.client_config
        request_context.signer.sign(
            request,
            credentials,
            self.signing_region(context),
            config.authentication_service_name or request_context.signing_name,
            signing_time=corrected_utc_now(request.endpoint),
        )

    def invoke_sync(self, context: ExecutionContext) -> None:
        self._sign(context)
        super().invoke_sync(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        self._sign(context)
        await super().invoke_async(context)

"""Resolves the endpoint a request is sent to."""

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import UnknownRegionError
from cumulus.runtime.pipeline import PipelineHandler


class EndpointResolver(PipelineHandler):
    """An explicit `service_url` wins; otherwise the regional endpoint is used."""

    @staticmethod
    def determine_endpoint(context: ExecutionContext) -> str:
        request_context = context.request_context
        config = request_context.client_config
        if config.service_url:
            url = config.service_url.rstrip("/")
            if "://" not in url:
                url = f"{config.scheme}://{url}"
            return url
        if request_context.region is None:
            raise UnknownRegionError(
                f"No region or service_url configured for {request_context.service_name}"
            )
        hostname = request_context.region.get_hostname(request_context.endpoint_prefix)
        return f"{config.scheme}://{hostname}"

    def _resolve(self, context: ExecutionContext) -> None:
        context.request_context.request.endpoint = self.determine_endpoint(context)

    def invoke_sync(self, context: ExecutionContext) -> None:
        self._resolve(context)
        super().invoke_sync(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        self._resolve(context)
        await super().invoke_async(context)

"""Innermost handler: sends the request over HTTP with httpx."""

from typing import Optional

import httpx
import structlog

from cumulus.configuration.client import ClientConfig
from cumulus.runtime.cancellation import await_or_cancel
from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import HttpErrorResponse, HttpTransportError
from cumulus.runtime.pipeline import PipelineHandler
from cumulus.runtime.response import WebResponseData

logger = structlog.get_logger()


class HttpHandler(PipelineHandler):
    """Sends requests with `httpx.Client` / `httpx.AsyncClient`.

    Clients passed in are used as-is and never closed by the handler.
    Otherwise clients are created on first use from the client
    configuration's timeouts and proxy, and closed by `close` / `aclose`.

    Args:
        config: Client configuration
        http_client: Optional preconfigured sync client
        async_http_client: Optional preconfigured async client
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__()
        self.config = config
        self._http_client = http_client
        self._async_http_client = async_http_client
        self._owns_http_client = http_client is None
        self._owns_async_http_client = async_http_client is None

    def _client_options(self) -> dict:
        options = {
            "timeout": httpx.Timeout(self.config.timeout, connect=self.config.connect_timeout),
        }
        if self.config.proxy:
            options["proxy"] = self.config.proxy
        return options

    @property
    def http_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(**self._client_options())
        return self._http_client

    @property
    def async_http_client(self) -> httpx.AsyncClient:
        if self._async_http_client is None:
            self._async_http_client = httpx.AsyncClient(**self._client_options())
        return self._async_http_client

    @staticmethod
    def _build_response(context: ExecutionContext, response: httpx.Response) -> None:
        data = WebResponseData.from_httpx(response)
        context.response_context.http_response = data
        logger.debug(
            "http_response_received",
            status_code=data.status_code,
            content_length=data.content_length,
        )
        if data.status_code >= 400:
            raise HttpErrorResponse(data)

    def invoke_sync(self, context: ExecutionContext) -> None:
        request = context.request_context.request
        try:
            response = self.http_client.request(
                request.http_method,
                request.url(),
                headers=request.headers,
                content=request.payload(),
            )
        except httpx.TransportError as exc:
            raise HttpTransportError(f"{type(exc).__name__}: {exc}", original=exc) from exc
        self._build_response(context, response)

    async def invoke_async(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        request = request_context.request
        try:
            response = await await_or_cancel(
                self.async_http_client.request(
                    request.http_method,
                    request.url(),
                    headers=request.headers,
                    content=request.payload(),
                ),
                request_context.cancellation,
            )
        except httpx.TransportError as exc:
            raise HttpTransportError(f"{type(exc).__name__}: {exc}", original=exc) from exc
        self._build_response(context, response)

    def close(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    async def aclose(self) -> None:
        if self._owns_async_http_client and self._async_http_client is not None:
            await self._async_http_client.aclose()
            self._async_http_client = None

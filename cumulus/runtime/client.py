"""Base class of every service client."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type, Union

import httpx
import structlog

from cumulus.configuration.client import ClientConfig
from cumulus.runtime.auth.base import AbstractSigner
from cumulus.runtime.auth.sigv4 import AWS4Signer
from cumulus.runtime.context import ExecutionContext, RequestContext
from cumulus.runtime.credentials import (
    AWSCredentials,
    BasicAWSCredentials,
    FallbackCredentialsFactory,
    SessionAWSCredentials,
)
from cumulus.runtime.exceptions import ServiceError
from cumulus.runtime.handlers import (
    CredentialsRetriever,
    EndpointResolver,
    ErrorHandler,
    HttpHandler,
    LoggingHandler,
    Marshaller,
    RetryHandler,
    Signer,
    Unmarshaller,
)
from cumulus.runtime.model import SdkRequest, SdkResponse
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.paginator import Paginator, PaginatorModel
from cumulus.runtime.pipeline import RuntimePipeline
from cumulus.runtime.protocols.base import ErrorDetails, Protocol
from cumulus.runtime.regions import RegionEndpoint
from cumulus.runtime.response import WebResponseData
from cumulus.runtime.retry import DefaultRetryPolicy, RetryPolicy

logger = structlog.get_logger()


class ServiceClient(ABC):
    """Shared behaviour of service clients.

    Subclasses declare the service identity, protocol, error registry and
    paginators, and expose one sync and one async method per operation.

    Credentials are resolved in this order: the `credentials` object,
    the `aws_access_key_id` / `aws_secret_access_key` (and optional
    `aws_session_token`) keywords, then `FallbackCredentialsFactory`.

    Args:
        credentials: Credential source
        aws_access_key_id: Access key id for static credentials
        aws_secret_access_key: Secret key for static credentials
        aws_session_token: Session token for temporary credentials
        region: Region name or RegionEndpoint. Defaults to `config.region`.
        config: Client configuration. Defaults to the service's config class
            loaded from the environment.
        http_client: Preconfigured httpx.Client
        async_http_client: Preconfigured httpx.AsyncClient

    Example:
        ```python
        with DynamoDBClient(region="ca-central-1") as client:
            tables = client.list_tables(limit=10)
        ```
    """

    service_name: ClassVar[str] = ""
    endpoint_prefix: ClassVar[str] = ""
    signing_name: ClassVar[Optional[str]] = None
    config_class: ClassVar[Type[ClientConfig]] = ClientConfig
    service_error: ClassVar[Type[ServiceError]] = ServiceError
    error_classes: ClassVar[Dict[str, Type[ServiceError]]] = {}
    paginators: ClassVar[Dict[str, PaginatorModel]] = {}

    def __init__(
        self,
        credentials: Optional[AWSCredentials] = None,
        *,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        aws_session_token: Optional[str] = None,
        region: Union[str, RegionEndpoint, None] = None,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config if config is not None else self.config_class()
        self.region = self._resolve_region(region)
        self.credentials = self._resolve_credentials(
            credentials, aws_access_key_id, aws_secret_access_key, aws_session_token
        )
        self.protocol = self.create_protocol()
        self.signer = self.create_signer()
        self.pipeline = self.build_runtime_pipeline(http_client, async_http_client)
        self.customize_runtime_pipeline(self.pipeline)
        self._logger = logger.bind(component="service_client", service=self.service_name)
        self._logger.debug(
            "client_created",
            region=self.region.system_name if self.region else None,
            service_url=self.config.service_url,
        )

    def _resolve_region(
        self, region: Union[str, RegionEndpoint, None]
    ) -> Optional[RegionEndpoint]:
        if isinstance(region, RegionEndpoint):
            return region
        name = region or self.config.region
        if name:
            return RegionEndpoint.get_by_system_name(name)
        return None

    @staticmethod
    def _resolve_credentials(
        credentials: Optional[AWSCredentials],
        access_key: Optional[str],
        secret_key: Optional[str],
        session_token: Optional[str],
    ) -> AWSCredentials:
        if credentials is not None:
            return credentials
        if access_key or secret_key:
            if session_token:
                return SessionAWSCredentials(access_key, secret_key, session_token)
            return BasicAWSCredentials(access_key, secret_key)
        return FallbackCredentialsFactory.get_credentials()

    @abstractmethod
    def create_protocol(self) -> Protocol:
        """The wire protocol shared by this service's operations."""

    def create_signer(self) -> AbstractSigner:
        return AWS4Signer()

    def create_retry_policy(self) -> RetryPolicy:
        return DefaultRetryPolicy.from_config(self.config)

    def build_runtime_pipeline(
        self,
        http_client: Optional[httpx.Client],
        async_http_client: Optional[httpx.AsyncClient],
    ) -> RuntimePipeline:
        return RuntimePipeline(
            [
                LoggingHandler(),
                Marshaller(),
                EndpointResolver(),
                RetryHandler(self.create_retry_policy()),
                CredentialsRetriever(),
                Signer(),
                ErrorHandler(),
                Unmarshaller(),
                HttpHandler(self.config, http_client, async_http_client),
            ]
        )

    def customize_runtime_pipeline(self, pipeline: RuntimePipeline) -> None:
        """Hook for services that add, replace or remove handlers."""

    def create_service_error(
        self, details: ErrorDetails, response: WebResponseData
    ) -> ServiceError:
        """Instantiate the exception registered for the error code."""
        error_class = self.error_classes.get(details.code, self.service_error)
        return error_class(
            message=details.message,
            error_code=details.code,
            status_code=response.status_code,
            request_id=details.request_id,
            error_type=details.error_type,
            headers=response.headers,
        )

    @staticmethod
    def _build_request(
        operation: OperationModel, request: Optional[SdkRequest], kwargs: Dict[str, Any]
    ) -> SdkRequest:
        if request is None:
            return operation.input_shape(**kwargs)
        if kwargs:
            raise TypeError(
                f"{operation.name}: pass either a request object or keyword arguments"
            )
        if not isinstance(request, operation.input_shape):
            raise TypeError(
                f"{operation.name} expects {operation.input_shape.__name__}, "
                f"got {type(request).__name__}"
            )
        return request

    def _create_context(
        self,
        operation: OperationModel,
        request: SdkRequest,
        cancellation: Optional[asyncio.Event] = None,
        is_async: bool = False,
    ) -> ExecutionContext:
        return ExecutionContext(
            RequestContext(
                original_request=request,
                operation=operation,
                marshaller=self.protocol.marshaller(operation),
                unmarshaller=self.protocol.unmarshaller(operation),
                client_config=self.config,
                signer=self.signer,
                credentials=self.credentials,
                service_name=self.service_name,
                endpoint_prefix=self.endpoint_prefix,
                signing_name=self.signing_name or self.endpoint_prefix,
                region=self.region,
                error_factory=self.create_service_error,
                cancellation=cancellation,
                is_async=is_async,
            )
        )

    def invoke(
        self,
        operation: OperationModel,
        request: Optional[SdkRequest] = None,
        **kwargs: Any,
    ) -> SdkResponse:
        """Run `operation` through the pipeline and return its response."""
        request = self._build_request(operation, request, kwargs)
        return self.pipeline.invoke_sync(self._create_context(operation, request))

    async def invoke_async(
        self,
        operation: OperationModel,
        request: Optional[SdkRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> SdkResponse:
        """Async counterpart of `invoke`.

        Args:
            operation: Operation to run
            request: Request model; built from `kwargs` when omitted
            cancellation: Event that cancels the call when set

        Raises:
            RequestCancelledError: If `cancellation` is set before the call completes.
        """
        request = self._build_request(operation, request, kwargs)
        context = self._create_context(operation, request, cancellation, is_async=True)
        return await self.pipeline.invoke_async(context)

    def get_paginator(self, method_name: str) -> Paginator:
        """Paginator over a pageable operation method, e.g. "list_tables"."""
        model = self.paginators.get(method_name)
        if model is None:
            raise ValueError(f"{self.service_name} operation {method_name} cannot be paginated")
        return Paginator(
            getattr(self, method_name),
            model,
            async_method=getattr(self, f"{method_name}_async", None),
        )

    def can_paginate(self, method_name: str) -> bool:
        return method_name in self.paginators

    def _http_handlers(self):
        return [h for h in self.pipeline.handlers if isinstance(h, HttpHandler)]

    def close(self) -> None:
        for handler in self._http_handlers():
            handler.close()

    async def aclose(self) -> None:
        for handler in self._http_handlers():
            handler.close()
            await handler.aclose()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "ServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

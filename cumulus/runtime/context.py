"""State carried through the pipeline for one call."""

import asyncio
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from cumulus.configuration.client import ClientConfig
from cumulus.runtime.credentials import AWSCredentials, ImmutableCredentials
from cumulus.runtime.model import SdkRequest, SdkResponse
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.regions import RegionEndpoint
from cumulus.runtime.request import Request
from cumulus.runtime.response import WebResponseData

if TYPE_CHECKING:
    from cumulus.runtime.auth.base import AbstractSigner
    from cumulus.runtime.exceptions import ServiceError
    from cumulus.runtime.protocols.base import (
        ErrorDetails,
        RequestMarshaller,
        ResponseUnmarshaller,
    )


@dataclass
class RequestContext:
    """Request-side state of a call.

    Attributes:
        original_request: Request model passed by the caller
        operation: Operation being invoked
        marshaller: Turns `original_request` into a wire `Request`
        unmarshaller: Turns the HTTP response into the response model
        client_config: Configuration of the invoking client
        signer: Signer of the invoking client
        credentials: Credential source of the invoking client
        service_name: Service name used in logs and wire requests
        endpoint_prefix: Host prefix used for endpoint resolution
        signing_name: Service name used in signatures
        region: Region of the invoking client
        error_factory: Builds the typed service exception for an error
        request: Wire request, set by the Marshaller handler
        immutable_credentials: Credentials resolved for the current attempt
        retries: Retries performed so far
        invocation_id: Id shared by all attempts of this call
        cancellation: Event that cancels an async call when set
        is_async: True for calls made through `invoke_async`
        clock_skew_corrected: Whether a clock skew retry already happened
    """

    original_request: SdkRequest
    operation: OperationModel
    marshaller: "RequestMarshaller"
    unmarshaller: "ResponseUnmarshaller"
    client_config: ClientConfig
    signer: "AbstractSigner"
    credentials: Optional[AWSCredentials]
    service_name: str
    endpoint_prefix: str
    signing_name: str
    region: Optional[RegionEndpoint] = None
    error_factory: Optional[
        Callable[["ErrorDetails", WebResponseData], "ServiceError"]
    ] = None
    request: Optional[Request] = None
    immutable_credentials: Optional[ImmutableCredentials] = None
    retries: int = 0
    invocation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    cancellation: Optional[asyncio.Event] = None
    is_async: bool = False
    clock_skew_corrected: bool = False


@dataclass
class ResponseContext:
    """Response-side state of a call."""

    http_response: Optional[WebResponseData] = None
    response: Optional[SdkResponse] = None


@dataclass
class ExecutionContext:
    request_context: RequestContext
    response_context: ResponseContext = field(default_factory=ResponseContext)

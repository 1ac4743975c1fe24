"""Protocol interfaces shared by all wire formats."""

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from cumulus.runtime.exceptions import ErrorType
from cumulus.runtime.model import SdkRequest, SdkResponse
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.request import Request
from cumulus.runtime.response import WebResponseData


@dataclass
class ErrorDetails:
    """Error information parsed from an error response."""

    code: str
    message: Optional[str] = None
    error_type: ErrorType = ErrorType.UNKNOWN
    request_id: Optional[str] = None


def fallback_error_code(response: WebResponseData) -> str:
    """Error code for responses whose body carries none, e.g. "ServiceUnavailable"."""
    if response.reason_phrase:
        return response.reason_phrase.replace(" ", "")
    return f"Http{response.status_code}"


def error_type_for(response: WebResponseData, declared: Optional[str] = None) -> ErrorType:
    if declared in {member.value for member in ErrorType}:
        return ErrorType(declared)
    if response.status_code >= 500:
        return ErrorType.RECEIVER
    if response.status_code >= 400:
        return ErrorType.SENDER
    return ErrorType.UNKNOWN


def format_timestamp(value: datetime) -> str:
    """ISO 8601 with milliseconds, as query and XML protocols expect."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_scalar(value: Any) -> str:
    """Text form of a scalar member for query parameters, headers and XML."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class RequestMarshaller(ABC):
    """Builds the wire request of one operation."""

    @abstractmethod
    def marshall(self, request: SdkRequest) -> Request:
        ...


class ResponseUnmarshaller(ABC):
    """Reads the response or error of one operation."""

    @abstractmethod
    def unmarshall(self, response: WebResponseData) -> SdkResponse:
        ...

    @abstractmethod
    def unmarshall_error(self, response: WebResponseData) -> ErrorDetails:
        ...


class Protocol(ABC):
    """A wire format shared by the operations of a service."""

    def __init__(self, service_name: str):
        self.service_name = service_name

    @abstractmethod
    def marshall(self, operation: OperationModel, request: SdkRequest) -> Request:
        ...

    @abstractmethod
    def unmarshall(
        self, operation: OperationModel, response: WebResponseData
    ) -> SdkResponse:
        ...

    @abstractmethod
    def parse_error(self, response: WebResponseData) -> ErrorDetails:
        ...

    def marshaller(self, operation: OperationModel) -> RequestMarshaller:
        """The marshaller of `operation`; dedicated marshallers take precedence."""
        if operation.marshaller is not None:
            return operation.marshaller(self, operation)
        return OperationMarshaller(self, operation)

    def unmarshaller(self, operation: OperationModel) -> ResponseUnmarshaller:
        return OperationUnmarshaller(self, operation)


class OperationMarshaller(RequestMarshaller):
    def __init__(self, protocol: Protocol, operation: OperationModel):
        self.protocol = protocol
        self.operation = operation

    def marshall(self, request: SdkRequest) -> Request:
        return self.protocol.marshall(self.operation, request)


class OperationUnmarshaller(ResponseUnmarshaller):
    def __init__(self, protocol: Protocol, operation: OperationModel):
        self.protocol = protocol
        self.operation = operation

    def unmarshall(self, response: WebResponseData) -> SdkResponse:
        return self.protocol.unmarshall(self.operation, response)

    def unmarshall_error(self, response: WebResponseData) -> ErrorDetails:
        return self.protocol.parse_error(response)

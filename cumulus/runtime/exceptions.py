"""Exception hierarchy raised by SDK calls.

SdkError
 ├── SdkClientError            failures detected by the client itself
 │    ├── ParamValidationError
 │    ├── NoCredentialsError
 │    ├── ChecksumMismatchError
 │    ├── ResponseParseError
 │    ├── RequestCancelledError
 │    └── UnknownRegionError
 ├── HttpTransportError        connection failures and timeouts
 ├── ServiceError              error responses returned by a service
 └── HttpErrorResponse         internal, converted to ServiceError by the pipeline
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

if TYPE_CHECKING:
    from cumulus.runtime.response import WebResponseData


class ErrorType(str, Enum):
    """Which party a service blames for an error."""

    SENDER = "Sender"
    RECEIVER = "Receiver"
    UNKNOWN = "Unknown"


class SdkError(Exception):
    """Base class for every exception raised by the SDK."""


class SdkClientError(SdkError):
    """Raised for failures the client detects itself, not reported by a service."""


class ParamValidationError(SdkClientError):
    """Raised when request members are missing or cannot be sent.

    Args:
        operation_name: Operation the request was built for
        missing: Names of the offending members
        reason: Message to use instead of the missing-members message
    """

    def __init__(
        self, operation_name: str, missing: List[str], reason: Optional[str] = None
    ):
        self.operation_name = operation_name
        self.missing = list(missing)
        super().__init__(
            reason
            or f"{operation_name} is missing required members: {', '.join(self.missing)}"
        )


class NoCredentialsError(SdkClientError):
    """Raised when no credentials could be resolved."""

    def __init__(self, message: str = "Unable to locate credentials"):
        super().__init__(message)


class ChecksumMismatchError(SdkClientError):
    """Raised when a response body does not match its declared checksum."""

    def __init__(self, expected: Any, actual: Any, header: str = "x-amz-crc32"):
        self.expected = expected
        self.actual = actual
        self.header = header
        super().__init__(
            f"Response checksum mismatch ({header}): expected {expected}, computed {actual}"
        )


class ResponseParseError(SdkClientError):
    """Raised when a successful response body cannot be decoded."""

    def __init__(self, operation_name: str, status_code: int, reason: str):
        self.operation_name = operation_name
        self.status_code = status_code
        super().__init__(
            f"Unable to parse {operation_name} response (status {status_code}): {reason}"
        )


class RequestCancelledError(SdkClientError):
    """Raised when an async call is cancelled through its cancellation event."""

    def __init__(self, message: str = "Request was cancelled"):
        super().__init__(message)


class UnknownRegionError(SdkClientError):
    """Raised when a client has neither a region nor an explicit endpoint."""


class HttpTransportError(SdkError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        self.original = original
        super().__init__(message)


class ServiceError(SdkError):
    """An error response returned by a service.

    Each service package subclasses this once as its base exception and
    again for every modeled error code.

    Attributes:
        error_code: Service error code, e.g. "ResourceNotFoundException"
        message: Error message from the service
        status_code: HTTP status code of the response
        request_id: Service request id
        error_type: Sender, Receiver or Unknown
        headers: Response headers
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
        error_type: ErrorType = ErrorType.UNKNOWN,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.message = message
        self.error_code = error_code or self.code
        self.status_code = status_code
        self.request_id = request_id
        self.error_type = error_type
        self.headers = headers if headers is not None else {}
        super().__init__(self.__str__())

    def __str__(self) -> str:
        text = f"{self.error_code or type(self).__name__}"
        if self.message:
            text = f"{text}: {self.message}"
        if self.status_code is not None:
            text = f"{text} (status {self.status_code})"
        return text


class HttpErrorResponse(SdkError):
    """Raised by the HTTP handler for status codes >= 400."""

    def __init__(self, response: "WebResponseData"):
        self.response = response
        super().__init__(f"HTTP {response.status_code}")

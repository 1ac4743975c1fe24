"""Result type of classified SDK calls.

`execute_api_call` returns an `OperationResult` instead of raising, and
`classify_service_error` builds one from an exception. For failures the
exception itself is kept in `data`, so callers can still reach the service
error code and request id.
"""

from dataclasses import dataclass
from typing import Any, Optional

from cumulus.operations.status import OperationStatus
from cumulus.runtime.exceptions import SdkError, ServiceError


@dataclass
class OperationResult:
    """Outcome of one SDK call.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- response model, collected items, or the exception
        error_code: Optional[str] -- classification code (RATE_LIMITED, NOT_FOUND, ...)
        retry_after: Optional[int] -- seconds the service asked to wait
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        return self.status == OperationStatus.TRANSIENT_ERROR

    @property
    def exception(self) -> Optional[BaseException]:
        """The exception a failed call raised, if one was kept."""
        return self.data if isinstance(self.data, BaseException) else None

    @property
    def service_error_code(self) -> Optional[str]:
        """Error code as sent by the service, e.g. `ResourceNotFoundException`."""
        exc = self.exception
        return exc.error_code if isinstance(exc, ServiceError) else None

    @property
    def request_id(self) -> Optional[str]:
        """Request id of the response, successful or not."""
        exc = self.exception
        if isinstance(exc, ServiceError):
            return exc.request_id
        metadata = getattr(self.data, "response_metadata", None)
        return getattr(metadata, "request_id", None)

    def unwrap(self) -> Any:
        """Return `data` on success, otherwise raise the failure.

        The original exception is re-raised when one was kept; other
        failures raise `SdkError` with the result message.
        """
        if self.is_success:
            return self.data
        exc = self.exception
        if exc is not None:
            raise exc
        raise SdkError(self.message)

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional classification code
            retry_after: Optional seconds until retry (throttling, 5xx)
            data: The exception that caused the failure

        Returns:
            OperationResult with the given error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None, data: Optional[Any] = None
    ) -> "OperationResult":
        return cls.error(
            OperationStatus.PERMANENT_ERROR, message, error_code=error_code, data=data
        )

"""Error classifiers for SDK exceptions.

Converts exceptions raised by the request pipeline into standardized
OperationResult objects. The retry policy uses the classification to decide
whether an attempt is retried; `execute_api_call` returns it to callers.

Usage:
    from cumulus.operations.classifiers import classify_service_error

    try:
        client.get_item(table_name="users", key=key)
    except SdkError as exc:
        result = classify_service_error(exc)
"""

from typing import Optional

from cumulus.operations.result import OperationResult
from cumulus.operations.status import OperationStatus
from cumulus.runtime.exceptions import (
    ChecksumMismatchError,
    HttpTransportError,
    NoCredentialsError,
    ParamValidationError,
    RequestCancelledError,
    SdkClientError,
    ServiceError,
)

THROTTLING_ERROR_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "ThrottledException",
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
        "RequestThrottled",
        "RequestThrottledException",
        "TooManyRequestsException",
        "SlowDown",
        "PriorRequestNotComplete",
        "BandwidthLimitExceeded",
        "EC2ThrottledException",
    }
)

CLOCK_SKEW_ERROR_CODES = frozenset(
    {
        "RequestTimeTooSkewed",
        "RequestExpired",
        "RequestInTheFuture",
    }
)

# Also returned for a skewed clock; the retry policy checks the server Date.
SIGNATURE_ERROR_CODES = frozenset(
    {
        "InvalidSignatureException",
        "SignatureDoesNotMatch",
        "AuthFailure",
    }
)

ACCESS_DENIED_ERROR_CODES = SIGNATURE_ERROR_CODES | frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "AuthorizationError",
        "AuthorizationErrorException",
        "UnauthorizedOperation",
        "InsufficientPrivilegesException",
        "InvalidClientTokenId",
        "UnrecognizedClientException",
    }
)

NOT_FOUND_ERROR_CODES = frozenset(
    {
        "ResourceNotFoundException",
        "NotFound",
        "NotFoundException",
        "NoSuchDomain",
        "NoSuchBucket",
        "NoSuchKey",
    }
)

CONFLICT_ERROR_CODES = frozenset(
    {
        "AlreadyExistsException",
        "AlreadyExists",
        "ConditionalCheckFailedException",
        "ConflictException",
        "EntityAlreadyExists",
        "OperationInProgressFailure",
        "ResourceAlreadyExistsException",
        "ResourceInUseException",
    }
)

TRANSIENT_STATUS_CODES = frozenset({500, 502, 503, 504})


def _retry_after(exc: ServiceError) -> Optional[int]:
    value = exc.headers.get("retry-after") if exc.headers else None
    if value is None:
        return None
    try:
        return max(0, int(value))
    except ValueError:
        return None


def classify_service_error(exc: Exception) -> OperationResult:
    """Classify an exception raised by an SDK call into OperationResult.

    Error Code Mapping:
    - Throttling codes: TRANSIENT_ERROR with retry_after from Retry-After
    - Clock skew codes: TRANSIENT_ERROR (code CLOCK_SKEW)
    - 500/502/503/504: TRANSIENT_ERROR
    - Access denied and signature codes: UNAUTHORIZED
    - Not found codes or 404: NOT_FOUND
    - Conflict codes: PERMANENT_ERROR (code CONFLICT)
    - Other service errors: PERMANENT_ERROR
    - Transport failures and checksum mismatches: TRANSIENT_ERROR
    - Validation, missing credentials, cancellation: PERMANENT_ERROR

    Args:
        exc: Exception raised by a client call

    Returns:
        OperationResult with appropriate status, message, error_code and
        retry_after (if applicable). `data` holds the exception.
    """
    if isinstance(exc, ServiceError):
        return _classify_service_response(exc)

    if isinstance(exc, HttpTransportError):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            f"Connection error: {exc}",
            error_code="CONNECTION_ERROR",
            data=exc,
        )

    if isinstance(exc, ChecksumMismatchError):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            str(exc),
            error_code="CHECKSUM_MISMATCH",
            data=exc,
        )

    if isinstance(exc, RequestCancelledError):
        return OperationResult.error(
            OperationStatus.PERMANENT_ERROR,
            "Request cancelled",
            error_code="CANCELLED",
            data=exc,
        )

    if isinstance(exc, NoCredentialsError):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            str(exc),
            error_code="NO_CREDENTIALS",
            data=exc,
        )

    if isinstance(exc, ParamValidationError):
        return OperationResult.error(
            OperationStatus.PERMANENT_ERROR,
            str(exc),
            error_code="INVALID_REQUEST",
            data=exc,
        )

    if isinstance(exc, SdkClientError):
        return OperationResult.error(
            OperationStatus.PERMANENT_ERROR,
            str(exc),
            error_code="CLIENT_ERROR",
            data=exc,
        )

    return OperationResult.error(
        OperationStatus.PERMANENT_ERROR,
        f"Unexpected error: {type(exc).__name__}: {exc}",
        error_code="UNEXPECTED_ERROR",
        data=exc,
    )


def _classify_service_response(exc: ServiceError) -> OperationResult:
    code = exc.error_code or "Unknown"
    message = exc.message or code

    if code in THROTTLING_ERROR_CODES or exc.status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code="RATE_LIMITED",
            retry_after=_retry_after(exc),
            data=exc,
        )

    if code in CLOCK_SKEW_ERROR_CODES:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code="CLOCK_SKEW",
            data=exc,
        )

    if exc.status_code in TRANSIENT_STATUS_CODES:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code="SERVER_ERROR",
            retry_after=_retry_after(exc),
            data=exc,
        )

    if code in ACCESS_DENIED_ERROR_CODES or exc.status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code="FORBIDDEN", data=exc
        )

    if code in NOT_FOUND_ERROR_CODES or exc.status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message, error_code="NOT_FOUND", data=exc
        )

    if code in CONFLICT_ERROR_CODES:
        return OperationResult.error(
            OperationStatus.PERMANENT_ERROR, message, error_code="CONFLICT", data=exc
        )

    return OperationResult.error(
        OperationStatus.PERMANENT_ERROR, message, error_code=code, data=exc
    )

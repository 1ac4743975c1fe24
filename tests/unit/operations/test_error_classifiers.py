"""Unit tests for error classifiers.

Tests cover:
- Throttling, clock skew and server error classification
- Access denied, not found and conflict classification
- Retry-After header extraction
- Client-side SDK errors
- Unknown exceptions
"""

import httpx
import pytest

from cumulus.operations.classifiers import classify_service_error
from cumulus.operations.status import OperationStatus
from cumulus.runtime.exceptions import (
    ChecksumMismatchError,
    HttpTransportError,
    NoCredentialsError,
    ParamValidationError,
    RequestCancelledError,
    ServiceError,
    UnknownRegionError,
)


def service_error(code, status_code=400, headers=None, message="boom"):
    return ServiceError(
        message=message,
        error_code=code,
        status_code=status_code,
        headers=httpx.Headers(headers or {}),
    )


@pytest.mark.unit
class TestClassifyServiceResponses:
    """Tests for service error responses."""

    @pytest.mark.parametrize(
        "code",
        [
            "Throttling",
            "ThrottlingException",
            "ProvisionedThroughputExceededException",
            "RequestLimitExceeded",
            "SlowDown",
        ],
    )
    def test_throttling_codes_are_transient(self, code):
        """Test throttling codes map to RATE_LIMITED."""
        result = classify_service_error(service_error(code))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "RATE_LIMITED"

    def test_429_without_known_code_is_throttling(self):
        """Test HTTP 429 is throttling regardless of the code."""
        result = classify_service_error(service_error("SomethingNew", status_code=429))

        assert result.error_code == "RATE_LIMITED"

    def test_retry_after_header_extracted(self):
        """Test Retry-After is parsed into retry_after seconds."""
        exc = service_error("Throttling", headers={"Retry-After": "12"})

        result = classify_service_error(exc)

        assert result.retry_after == 12

    def test_malformed_retry_after_ignored(self):
        """Test a non-numeric Retry-After header is ignored."""
        exc = service_error("Throttling", headers={"Retry-After": "soon"})

        result = classify_service_error(exc)

        assert result.retry_after is None

    def test_clock_skew(self):
        """Test clock skew codes are transient with CLOCK_SKEW."""
        result = classify_service_error(
            service_error("RequestTimeTooSkewed", status_code=403)
        )

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CLOCK_SKEW"

    @pytest.mark.parametrize("status_code", [500, 502, 503, 504])
    def test_server_errors_are_transient(self, status_code):
        """Test 5xx responses are retryable."""
        result = classify_service_error(
            service_error("InternalFailure", status_code=status_code)
        )

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "SERVER_ERROR"

    @pytest.mark.parametrize(
        "code", ["AccessDeniedException", "AuthorizationError", "UnrecognizedClientException"]
    )
    def test_access_denied(self, code):
        """Test access denied codes map to UNAUTHORIZED."""
        result = classify_service_error(service_error(code))

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == "FORBIDDEN"

    @pytest.mark.parametrize(
        "code", ["SignatureDoesNotMatch", "InvalidSignatureException", "AuthFailure"]
    )
    def test_signature_errors_are_unauthorized(self, code):
        """Test signature rejections are not retryable on their own."""
        result = classify_service_error(service_error(code, status_code=403))

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == "FORBIDDEN"
        assert not result.is_retryable

    def test_403_is_unauthorized(self):
        """Test HTTP 403 maps to UNAUTHORIZED."""
        result = classify_service_error(service_error("Forbidden", status_code=403))

        assert result.status == OperationStatus.UNAUTHORIZED

    @pytest.mark.parametrize("code", ["ResourceNotFoundException", "NoSuchDomain", "NotFound"])
    def test_not_found(self, code):
        """Test not found codes map to NOT_FOUND."""
        result = classify_service_error(service_error(code))

        assert result.status == OperationStatus.NOT_FOUND

    @pytest.mark.parametrize(
        "code",
        [
            "ConditionalCheckFailedException",
            "AlreadyExistsException",
            "ResourceInUseException",
            "OperationInProgressFailure",
        ],
    )
    def test_conflicts(self, code):
        """Test conflict codes are permanent with CONFLICT."""
        result = classify_service_error(service_error(code))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "CONFLICT"

    def test_unknown_code_is_permanent(self):
        """Test other service errors keep their own code."""
        exc = service_error("ValidationException", message="bad key")

        result = classify_service_error(exc)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "ValidationException"
        assert result.message == "bad key"
        assert result.data is exc


@pytest.mark.unit
class TestClassifyClientErrors:
    """Tests for client-side SDK exceptions."""

    def test_transport_error_is_transient(self):
        """Test connection failures are retryable."""
        result = classify_service_error(HttpTransportError("ConnectError: refused"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"

    def test_checksum_mismatch_is_transient(self):
        """Test checksum mismatches are retryable."""
        result = classify_service_error(ChecksumMismatchError("1", 2))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CHECKSUM_MISMATCH"

    def test_cancellation_is_permanent(self):
        """Test cancelled requests are not retried."""
        result = classify_service_error(RequestCancelledError())

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "CANCELLED"

    def test_missing_credentials(self):
        """Test missing credentials map to UNAUTHORIZED."""
        result = classify_service_error(NoCredentialsError())

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == "NO_CREDENTIALS"

    def test_param_validation(self):
        """Test validation errors map to INVALID_REQUEST."""
        result = classify_service_error(ParamValidationError("GetItem", ["TableName"]))

        assert result.error_code == "INVALID_REQUEST"
        assert "TableName" in result.message

    def test_other_client_error(self):
        """Test remaining client errors map to CLIENT_ERROR."""
        result = classify_service_error(UnknownRegionError("no region"))

        assert result.error_code == "CLIENT_ERROR"

    def test_unexpected_exception(self):
        """Test arbitrary exceptions are permanent and unexpected."""
        result = classify_service_error(RuntimeError("kaboom"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "UNEXPECTED_ERROR"
        assert "kaboom" in result.message

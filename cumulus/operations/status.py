"""Operation status enumeration.

Status codes used to classify the outcome of SDK calls, both by the retry
policy and by `execute_api_call`.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, throttling, 5xx, clock skew)
        PERMANENT_ERROR: Non-retryable error (validation, conflict, cancellation)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Resource not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"

"""Operation results and error classification.

Exports:
    OperationStatus: Outcome categories
    OperationResult: Uniform result dataclass
    classify_service_error: Exception to OperationResult mapping
"""

from cumulus.operations.classifiers import classify_service_error
from cumulus.operations.result import OperationResult
from cumulus.operations.status import OperationStatus

__all__ = ["OperationResult", "OperationStatus", "classify_service_error"]

"""S3 exceptions."""

from cumulus.runtime.exceptions import ServiceError


class S3Error(ServiceError):
    """Exception raised for every S3 error response."""

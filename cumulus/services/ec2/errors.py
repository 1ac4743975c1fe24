"""EC2 exceptions."""

from cumulus.runtime.exceptions import ServiceError


class EC2Error(ServiceError):
    """Exception raised for every EC2 error response."""

"""CloudFormation exceptions."""

from cumulus.runtime.exceptions import ServiceError


class CloudFormationError(ServiceError):
    """Base exception for CloudFormation errors without a dedicated class."""


class AlreadyExistsException(CloudFormationError):
    code = "AlreadyExistsException"


class InsufficientCapabilitiesException(CloudFormationError):
    code = "InsufficientCapabilitiesException"


class LimitExceededException(CloudFormationError):
    code = "LimitExceededException"


ERROR_CLASSES = {
    error.code: error
    for error in (
        AlreadyExistsException,
        InsufficientCapabilitiesException,
        LimitExceededException,
    )
}

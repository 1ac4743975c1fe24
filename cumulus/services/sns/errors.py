"""SNS exceptions."""

from cumulus.runtime.exceptions import ServiceError


class SNSError(ServiceError):
    """Base exception for SNS errors without a dedicated class."""


class AuthorizationErrorException(SNSError):
    code = "AuthorizationError"


class InvalidParameterException(SNSError):
    code = "InvalidParameter"


class NotFoundException(SNSError):
    code = "NotFound"


ERROR_CLASSES = {
    error.code: error
    for error in (
        AuthorizationErrorException,
        InvalidParameterException,
        NotFoundException,
    )
}

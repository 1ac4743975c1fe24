"""SimpleDB exceptions."""

from cumulus.runtime.exceptions import ServiceError


class SimpleDBError(ServiceError):
    """Base exception for SimpleDB errors without a dedicated class."""


class NoSuchDomainException(SimpleDBError):
    code = "NoSuchDomain"


class NumberDomainsExceededException(SimpleDBError):
    code = "NumberDomainsExceeded"


class InvalidNextTokenException(SimpleDBError):
    code = "InvalidNextToken"


ERROR_CLASSES = {
    error.code: error
    for error in (
        NoSuchDomainException,
        NumberDomainsExceededException,
        InvalidNextTokenException,
    )
}

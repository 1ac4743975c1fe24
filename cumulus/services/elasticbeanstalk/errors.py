"""Elastic Beanstalk exceptions."""

from cumulus.runtime.exceptions import ServiceError


class ElasticBeanstalkError(ServiceError):
    """Base exception for Elastic Beanstalk errors without a dedicated class."""


class InsufficientPrivilegesException(ElasticBeanstalkError):
    code = "InsufficientPrivilegesException"


class OperationInProgressException(ElasticBeanstalkError):
    """Another operation is in progress on the environment."""

    code = "OperationInProgressFailure"


class TooManyApplicationsException(ElasticBeanstalkError):
    code = "TooManyApplicationsException"


ERROR_CLASSES = {
    error.code: error
    for error in (
        InsufficientPrivilegesException,
        OperationInProgressException,
        TooManyApplicationsException,
    )
}

"""AWS Elastic Beanstalk client, models and exceptions."""

from cumulus.services.elasticbeanstalk.client import ElasticBeanstalkClient
from cumulus.services.elasticbeanstalk.errors import (
    ElasticBeanstalkError,
    InsufficientPrivilegesException,
    OperationInProgressException,
    TooManyApplicationsException,
)

__all__ = [
    "ElasticBeanstalkClient",
    "ElasticBeanstalkError",
    "InsufficientPrivilegesException",
    "OperationInProgressException",
    "TooManyApplicationsException",
]

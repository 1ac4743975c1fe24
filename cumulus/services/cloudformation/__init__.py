"""AWS CloudFormation client, models and exceptions."""

from cumulus.services.cloudformation.client import CloudFormationClient
from cumulus.services.cloudformation.errors import (
    AlreadyExistsException,
    CloudFormationError,
    InsufficientCapabilitiesException,
    LimitExceededException,
)
from cumulus.services.cloudformation.handlers import ProcessRequestHandler

__all__ = [
    "AlreadyExistsException",
    "CloudFormationClient",
    "CloudFormationError",
    "InsufficientCapabilitiesException",
    "LimitExceededException",
    "ProcessRequestHandler",
]

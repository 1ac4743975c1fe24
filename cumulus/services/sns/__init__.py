"""Amazon SNS client, models and exceptions."""

from cumulus.services.sns.client import SNSClient
from cumulus.services.sns.errors import (
    AuthorizationErrorException,
    InvalidParameterException,
    NotFoundException,
    SNSError,
)

__all__ = [
    "AuthorizationErrorException",
    "InvalidParameterException",
    "NotFoundException",
    "SNSClient",
    "SNSError",
]

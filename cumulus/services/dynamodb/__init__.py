"""Amazon DynamoDB client, models and exceptions."""

from cumulus.services.dynamodb.client import DynamoDBClient
from cumulus.services.dynamodb.config import DynamoDBConfig
from cumulus.services.dynamodb.errors import (
    ConditionalCheckFailedException,
    DynamoDBError,
    InternalServerError,
    ItemCollectionSizeLimitExceededException,
    LimitExceededException,
    ProvisionedThroughputExceededException,
    ResourceInUseException,
    ResourceNotFoundException,
)
from cumulus.services.dynamodb.handlers import Crc32CheckHandler
from cumulus.services.dynamodb.models import AttributeValue
from cumulus.services.dynamodb.retry import DynamoDBRetryPolicy

__all__ = [
    "AttributeValue",
    "ConditionalCheckFailedException",
    "Crc32CheckHandler",
    "DynamoDBClient",
    "DynamoDBConfig",
    "DynamoDBError",
    "DynamoDBRetryPolicy",
    "InternalServerError",
    "ItemCollectionSizeLimitExceededException",
    "LimitExceededException",
    "ProvisionedThroughputExceededException",
    "ResourceInUseException",
    "ResourceNotFoundException",
]

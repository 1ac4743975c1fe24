"""DynamoDB exceptions."""

from cumulus.runtime.exceptions import ServiceError


class DynamoDBError(ServiceError):
    """Base exception for DynamoDB errors without a dedicated class."""


class ConditionalCheckFailedException(DynamoDBError):
    code = "ConditionalCheckFailedException"


class InternalServerError(DynamoDBError):
    code = "InternalServerError"


class ItemCollectionSizeLimitExceededException(DynamoDBError):
    code = "ItemCollectionSizeLimitExceededException"


class LimitExceededException(DynamoDBError):
    code = "LimitExceededException"


class ProvisionedThroughputExceededException(DynamoDBError):
    code = "ProvisionedThroughputExceededException"


class ResourceInUseException(DynamoDBError):
    code = "ResourceInUseException"


class ResourceNotFoundException(DynamoDBError):
    code = "ResourceNotFoundException"


ERROR_CLASSES = {
    error.code: error
    for error in (
        ConditionalCheckFailedException,
        InternalServerError,
        ItemCollectionSizeLimitExceededException,
        LimitExceededException,
        ProvisionedThroughputExceededException,
        ResourceInUseException,
        ResourceNotFoundException,
    )
}

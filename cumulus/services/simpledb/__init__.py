"""Amazon SimpleDB client, models and exceptions."""

from cumulus.services.simpledb.client import SimpleDBClient
from cumulus.services.simpledb.config import SimpleDBConfig
from cumulus.services.simpledb.errors import (
    InvalidNextTokenException,
    NoSuchDomainException,
    NumberDomainsExceededException,
    SimpleDBError,
)

__all__ = [
    "InvalidNextTokenException",
    "NoSuchDomainException",
    "NumberDomainsExceededException",
    "SimpleDBClient",
    "SimpleDBConfig",
    "SimpleDBError",
]

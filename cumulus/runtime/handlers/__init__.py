"""Pipeline handlers, listed outermost first in the default pipeline."""

from cumulus.runtime.handlers.credentials import CredentialsRetriever
from cumulus.runtime.handlers.endpoint import EndpointResolver
from cumulus.runtime.handlers.errors import ErrorHandler
from cumulus.runtime.handlers.logs import LoggingHandler
from cumulus.runtime.handlers.marshaller import Marshaller
from cumulus.runtime.handlers.retry import RetryHandler
from cumulus.runtime.handlers.signer import Signer
from cumulus.runtime.handlers.transport import HttpHandler
from cumulus.runtime.handlers.unmarshaller import Unmarshaller

__all__ = [
    "CredentialsRetriever",
    "EndpointResolver",
    "ErrorHandler",
    "HttpHandler",
    "LoggingHandler",
    "Marshaller",
    "RetryHandler",
    "Signer",
    "Unmarshaller",
]

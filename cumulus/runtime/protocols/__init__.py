"""Wire protocols: request marshalling, response and error unmarshalling."""

from cumulus.runtime.protocols.base import (
    ErrorDetails,
    Protocol,
    RequestMarshaller,
    ResponseUnmarshaller,
)
from cumulus.runtime.protocols.ec2 import Ec2Protocol
from cumulus.runtime.protocols.jsonrpc import JsonRpcProtocol
from cumulus.runtime.protocols.query import QueryProtocol
from cumulus.runtime.protocols.restxml import RestXmlProtocol
from cumulus.runtime.protocols.xmlshape import XmlShapeReader

__all__ = [
    "Ec2Protocol",
    "ErrorDetails",
    "JsonRpcProtocol",
    "Protocol",
    "QueryProtocol",
    "RequestMarshaller",
    "ResponseUnmarshaller",
    "RestXmlProtocol",
    "XmlShapeReader",
]

"""Marshallers for S3 operations with XML request bodies."""

from cumulus.runtime.hashing import md5_base64
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.protocols.base import RequestMarshaller
from cumulus.runtime.protocols.restxml import RestXmlProtocol
from cumulus.runtime.request import Request
from cumulus.services.s3.models import DeleteObjectsRequest


class DeleteObjectsMarshaller(RequestMarshaller):
    """`POST /{Bucket}?delete` with a `<Delete>` body and its Content-MD5."""

    def __init__(self, protocol: RestXmlProtocol, operation: OperationModel):
        self.protocol = protocol
        self.operation = operation

    def marshall(self, request: DeleteObjectsRequest) -> Request:
        wire = self.protocol.marshall(self.operation, request)
        body = self.protocol.build_xml("Delete", request.delete)
        wire.content = body
        wire.headers["Content-Type"] = "application/xml"
        wire.headers["Content-MD5"] = md5_base64(body)
        return wire

"""S3 client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.protocols.restxml import RestXmlProtocol
from cumulus.services.s3 import models
from cumulus.services.s3.errors import S3Error
from cumulus.services.s3.marshallers import DeleteObjectsMarshaller

API_VERSION = "2006-03-01"
XML_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"

DELETE_OBJECTS = OperationModel(
    name="DeleteObjects",
    input_shape=models.DeleteObjectsRequest,
    output_shape=models.DeleteObjectsResponse,
    http_method="POST",
    request_uri="/{Bucket}?delete",
    marshaller=DeleteObjectsMarshaller,
)


class S3Client(ServiceClient):
    """Client for Amazon S3 (multi-object delete).

    Buckets are addressed path-style (`https://s3.<region>.amazonaws.com/<bucket>`).

    Example:
        ```python
        client = S3Client(region="ca-central-1")
        result = client.delete_objects(
            bucket="reports",
            delete={"objects": [{"key": "2024/01.csv"}], "quiet": True},
        )
        for error in result.errors:
            print(error.key, error.code)
        ```
    """

    service_name = "S3"
    endpoint_prefix = "s3"
    signing_name = "s3"
    service_error = S3Error

    def create_protocol(self) -> RestXmlProtocol:
        return RestXmlProtocol(self.service_name, API_VERSION, namespace=XML_NAMESPACE)

    def delete_objects(
        self, request: Optional[models.DeleteObjectsRequest] = None, **kwargs: Any
    ) -> models.DeleteObjectsResponse:
        return self.invoke(DELETE_OBJECTS, request, **kwargs)

    async def delete_objects_async(
        self,
        request: Optional[models.DeleteObjectsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteObjectsResponse:
        return await self.invoke_async(DELETE_OBJECTS, request, cancellation, **kwargs)

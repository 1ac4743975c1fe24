"""EC2 client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.protocols.ec2 import Ec2Protocol
from cumulus.services.ec2 import models
from cumulus.services.ec2.errors import EC2Error

API_VERSION = "2014-06-15"


def _operation(name: str) -> OperationModel:
    return OperationModel(
        name=name,
        input_shape=getattr(models, f"{name}Request"),
        output_shape=getattr(models, f"{name}Response"),
    )


DESCRIBE_IMAGE_ATTRIBUTE = _operation("DescribeImageAttribute")
DELETE_NETWORK_ACL = _operation("DeleteNetworkAcl")
DESCRIBE_REGIONS = _operation("DescribeRegions")


class EC2Client(ServiceClient):
    """Client for Amazon EC2 (a subset of operations)."""

    service_name = "EC2"
    endpoint_prefix = "ec2"
    service_error = EC2Error

    def create_protocol(self) -> Ec2Protocol:
        return Ec2Protocol(self.service_name, API_VERSION)

    def describe_image_attribute(
        self, request: Optional[models.DescribeImageAttributeRequest] = None, **kwargs: Any
    ) -> models.DescribeImageAttributeResponse:
        return self.invoke(DESCRIBE_IMAGE_ATTRIBUTE, request, **kwargs)

    async def describe_image_attribute_async(
        self,
        request: Optional[models.DescribeImageAttributeRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeImageAttributeResponse:
        return await self.invoke_async(DESCRIBE_IMAGE_ATTRIBUTE, request, cancellation, **kwargs)

    def delete_network_acl(
        self, request: Optional[models.DeleteNetworkAclRequest] = None, **kwargs: Any
    ) -> models.DeleteNetworkAclResponse:
        return self.invoke(DELETE_NETWORK_ACL, request, **kwargs)

    async def delete_network_acl_async(
        self,
        request: Optional[models.DeleteNetworkAclRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteNetworkAclResponse:
        return await self.invoke_async(DELETE_NETWORK_ACL, request, cancellation, **kwargs)

    def describe_regions(
        self, request: Optional[models.DescribeRegionsRequest] = None, **kwargs: Any
    ) -> models.DescribeRegionsResponse:
        return self.invoke(DESCRIBE_REGIONS, request, **kwargs)

    async def describe_regions_async(
        self,
        request: Optional[models.DescribeRegionsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeRegionsResponse:
        return await self.invoke_async(DESCRIBE_REGIONS, request, cancellation, **kwargs)

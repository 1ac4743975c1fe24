"""EC2 request, response and structure models.

Response element names are the lower-camel form of the wire names unless
`location_name` says otherwise.
"""

from typing import ClassVar, FrozenSet, List, Optional

from cumulus.runtime.model import SdkRequest, SdkResponse, ServiceModel, member


class AttributeValue(ServiceModel):
    """A `<value>` wrapper used by image attributes."""

    value: Optional[str] = None


class LaunchPermission(ServiceModel):
    user_id: Optional[str] = None
    group: Optional[str] = None


class ProductCode(ServiceModel):
    product_code_id: Optional[str] = member(location_name="productCode")
    product_code_type: Optional[str] = member(location_name="type")


class Filter(ServiceModel):
    name: Optional[str] = None
    values: List[str] = member(alias="Value", default_factory=list)


class Region(ServiceModel):
    region_name: Optional[str] = None
    endpoint: Optional[str] = member(location_name="regionEndpoint")


# Operations


class DescribeImageAttributeRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"image_id", "attribute"})

    image_id: Optional[str] = None
    attribute: Optional[str] = None
    dry_run: Optional[bool] = None


class DescribeImageAttributeResponse(SdkResponse):
    image_id: Optional[str] = None
    launch_permissions: List[LaunchPermission] = member(
        location_name="launchPermission", default_factory=list
    )
    product_codes: List[ProductCode] = member(default_factory=list)
    kernel_id: Optional[AttributeValue] = member(location_name="kernel")
    ramdisk_id: Optional[AttributeValue] = member(location_name="ramdisk")
    description: Optional[AttributeValue] = None
    sriov_net_support: Optional[AttributeValue] = None


class DeleteNetworkAclRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"network_acl_id"})

    network_acl_id: Optional[str] = None
    dry_run: Optional[bool] = None


class DeleteNetworkAclResponse(SdkResponse):
    pass


class DescribeRegionsRequest(SdkRequest):
    region_names: List[str] = member(alias="RegionName", default_factory=list)
    filters: List[Filter] = member(alias="Filter", default_factory=list)
    dry_run: Optional[bool] = None


class DescribeRegionsResponse(SdkResponse):
    regions: List[Region] = member(location_name="regionInfo", default_factory=list)

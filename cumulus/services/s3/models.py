"""S3 request, response and structure models."""

from typing import ClassVar, FrozenSet, List, Optional

from cumulus.runtime.model import SdkRequest, SdkResponse, ServiceModel, member


class ObjectIdentifier(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"key"})

    key: Optional[str] = None
    version_id: Optional[str] = None


class Delete(ServiceModel):
    """Objects to delete. With `quiet` the response lists only failures."""

    required_members: ClassVar[FrozenSet[str]] = frozenset({"objects"})

    objects: List[ObjectIdentifier] = member(
        alias="Object", flattened=True, default_factory=list
    )
    quiet: Optional[bool] = None


class DeletedObject(ServiceModel):
    key: Optional[str] = None
    version_id: Optional[str] = None
    delete_marker: Optional[bool] = None
    delete_marker_version_id: Optional[str] = None


class DeleteError(ServiceModel):
    key: Optional[str] = None
    version_id: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None


class DeleteObjectsRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"bucket", "delete"})

    bucket: Optional[str] = member(location="uri")
    delete: Optional[Delete] = None
    mfa: Optional[str] = member(location="header", location_name="x-amz-mfa")


class DeleteObjectsResponse(SdkResponse):
    deleted: List[DeletedObject] = member(flattened=True, default_factory=list)
    errors: List[DeleteError] = member(alias="Error", flattened=True, default_factory=list)

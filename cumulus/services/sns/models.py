"""SNS request, response and structure models."""

from typing import ClassVar, Dict, FrozenSet, List, Optional

from cumulus.runtime.model import Blob, SdkRequest, SdkResponse, ServiceModel, member


class Topic(ServiceModel):
    topic_arn: Optional[str] = None


class MessageAttributeValue(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"data_type"})

    data_type: Optional[str] = None
    string_value: Optional[str] = None
    binary_value: Optional[Blob] = None


# Operations


class CreateTopicRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"name"})

    name: Optional[str] = None


class CreateTopicResponse(SdkResponse):
    topic_arn: Optional[str] = None


class DeleteTopicRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"topic_arn"})

    topic_arn: Optional[str] = None


class DeleteTopicResponse(SdkResponse):
    pass


class ListTopicsRequest(SdkRequest):
    next_token: Optional[str] = None


class ListTopicsResponse(SdkResponse):
    topics: List[Topic] = member(default_factory=list)
    next_token: Optional[str] = None


class PublishRequest(SdkRequest):
    """Publish to a topic (`topic_arn`) or directly to an endpoint (`target_arn`)."""

    required_members: ClassVar[FrozenSet[str]] = frozenset({"message"})

    topic_arn: Optional[str] = None
    target_arn: Optional[str] = None
    message: Optional[str] = None
    subject: Optional[str] = None
    message_structure: Optional[str] = None
    message_attributes: Dict[str, MessageAttributeValue] = member(
        default_factory=dict, map_key="Name", map_value="Value"
    )


class PublishResponse(SdkResponse):
    message_id: Optional[str] = None


class GetPlatformApplicationAttributesRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"platform_application_arn"})

    platform_application_arn: Optional[str] = None


class GetPlatformApplicationAttributesResponse(SdkResponse):
    attributes: Dict[str, str] = member(default_factory=dict)


class SetPlatformApplicationAttributesRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"platform_application_arn", "attributes"}
    )

    platform_application_arn: Optional[str] = None
    attributes: Dict[str, str] = member(default_factory=dict)


class SetPlatformApplicationAttributesResponse(SdkResponse):
    pass

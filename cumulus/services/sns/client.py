"""SNS client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.paginator import PaginatorModel
from cumulus.runtime.protocols.query import QueryProtocol
from cumulus.services.sns import models
from cumulus.services.sns.errors import ERROR_CLASSES, SNSError

API_VERSION = "2010-03-31"


def _operation(name: str) -> OperationModel:
    return OperationModel(
        name=name,
        input_shape=getattr(models, f"{name}Request"),
        output_shape=getattr(models, f"{name}Response"),
    )


CREATE_TOPIC = _operation("CreateTopic")
DELETE_TOPIC = _operation("DeleteTopic")
LIST_TOPICS = _operation("ListTopics")
PUBLISH = _operation("Publish")
GET_PLATFORM_APPLICATION_ATTRIBUTES = _operation("GetPlatformApplicationAttributes")
SET_PLATFORM_APPLICATION_ATTRIBUTES = _operation("SetPlatformApplicationAttributes")


class SNSClient(ServiceClient):
    """Client for Amazon Simple Notification Service.

    Example:
        ```python
        client = SNSClient(region="ca-central-1")
        topic = client.create_topic(name="alerts")
        client.publish(topic_arn=topic.topic_arn, message="disk full")
        ```
    """

    service_name = "SNS"
    endpoint_prefix = "sns"
    service_error = SNSError
    error_classes = ERROR_CLASSES
    paginators = {
        "list_topics": PaginatorModel(
            operation=LIST_TOPICS,
            input_token="next_token",
            output_token="next_token",
            result_key="topics",
        ),
    }

    def create_protocol(self) -> QueryProtocol:
        return QueryProtocol(self.service_name, API_VERSION)

    def create_topic(
        self,
        request: Optional[models.CreateTopicRequest] = None,
        **kwargs: Any,
    ) -> models.CreateTopicResponse:
        return self.invoke(CREATE_TOPIC, request, **kwargs)

    async def create_topic_async(
        self,
        request: Optional[models.CreateTopicRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CreateTopicResponse:
        return await self.invoke_async(CREATE_TOPIC, request, cancellation, **kwargs)

    def delete_topic(
        self,
        request: Optional[models.DeleteTopicRequest] = None,
        **kwargs: Any,
    ) -> models.DeleteTopicResponse:
        return self.invoke(DELETE_TOPIC, request, **kwargs)

    async def delete_topic_async(
        self,
        request: Optional[models.DeleteTopicRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteTopicResponse:
        return await self.invoke_async(DELETE_TOPIC, request, cancellation, **kwargs)

    def list_topics(
        self,
        request: Optional[models.ListTopicsRequest] = None,
        **kwargs: Any,
    ) -> models.ListTopicsResponse:
        return self.invoke(LIST_TOPICS, request, **kwargs)

    async def list_topics_async(
        self,
        request: Optional[models.ListTopicsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ListTopicsResponse:
        return await self.invoke_async(LIST_TOPICS, request, cancellation, **kwargs)

    def publish(
        self,
        request: Optional[models.PublishRequest] = None,
        **kwargs: Any,
    ) -> models.PublishResponse:
        return self.invoke(PUBLISH, request, **kwargs)

    async def publish_async(
        self,
        request: Optional[models.PublishRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.PublishResponse:
        return await self.invoke_async(PUBLISH, request, cancellation, **kwargs)

    def get_platform_application_attributes(
        self,
        request: Optional[models.GetPlatformApplicationAttributesRequest] = None,
        **kwargs: Any,
    ) -> models.GetPlatformApplicationAttributesResponse:
        return self.invoke(GET_PLATFORM_APPLICATION_ATTRIBUTES, request, **kwargs)

    async def get_platform_application_attributes_async(
        self,
        request: Optional[models.GetPlatformApplicationAttributesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.GetPlatformApplicationAttributesResponse:
        return await self.invoke_async(
            GET_PLATFORM_APPLICATION_ATTRIBUTES, request, cancellation, **kwargs
        )

    def set_platform_application_attributes(
        self,
        request: Optional[models.SetPlatformApplicationAttributesRequest] = None,
        **kwargs: Any,
    ) -> models.SetPlatformApplicationAttributesResponse:
        return self.invoke(SET_PLATFORM_APPLICATION_ATTRIBUTES, request, **kwargs)

    async def set_platform_application_attributes_async(
        self,
        request: Optional[models.SetPlatformApplicationAttributesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.SetPlatformApplicationAttributesResponse:
        return await self.invoke_async(
            SET_PLATFORM_APPLICATION_ATTRIBUTES, request, cancellation, **kwargs
        )

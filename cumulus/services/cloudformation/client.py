"""CloudFormation client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.handlers import Marshaller
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.paginator import PaginatorModel
from cumulus.runtime.pipeline import RuntimePipeline
from cumulus.runtime.protocols.query import QueryProtocol
from cumulus.services.cloudformation import models
from cumulus.services.cloudformation.errors import ERROR_CLASSES, CloudFormationError
from cumulus.services.cloudformation.handlers import ProcessRequestHandler

API_VERSION = "2010-05-15"


def _operation(name: str) -> OperationModel:
    return OperationModel(
        name=name,
        input_shape=getattr(models, f"{name}Request"),
        output_shape=getattr(models, f"{name}Response"),
    )


CANCEL_UPDATE_STACK = _operation("CancelUpdateStack")
CREATE_STACK = _operation("CreateStack")
DELETE_STACK = _operation("DeleteStack")
DESCRIBE_STACK_EVENTS = _operation("DescribeStackEvents")
DESCRIBE_STACK_RESOURCE = _operation("DescribeStackResource")
DESCRIBE_STACK_RESOURCES = _operation("DescribeStackResources")
DESCRIBE_STACKS = _operation("DescribeStacks")
ESTIMATE_TEMPLATE_COST = _operation("EstimateTemplateCost")
GET_STACK_POLICY = _operation("GetStackPolicy")
GET_TEMPLATE = _operation("GetTemplate")
LIST_STACK_RESOURCES = _operation("ListStackResources")
LIST_STACKS = _operation("ListStacks")
SET_STACK_POLICY = _operation("SetStackPolicy")
UPDATE_STACK = _operation("UpdateStack")
VALIDATE_TEMPLATE = _operation("ValidateTemplate")


def _next_token_paginator(operation: OperationModel, result_key: str) -> PaginatorModel:
    return PaginatorModel(
        operation=operation,
        input_token="next_token",
        output_token="next_token",
        result_key=result_key,
    )


class CloudFormationClient(ServiceClient):
    """Client for AWS CloudFormation.

    Example:
        ```python
        client = CloudFormationClient(region="ca-central-1")
        for stack in client.get_paginator("describe_stacks").iter_results():
            print(stack.stack_name, stack.stack_status)
        ```
    """

    service_name = "CloudFormation"
    endpoint_prefix = "cloudformation"
    service_error = CloudFormationError
    error_classes = ERROR_CLASSES
    paginators = {
        "describe_stack_events": _next_token_paginator(DESCRIBE_STACK_EVENTS, "stack_events"),
        "describe_stacks": _next_token_paginator(DESCRIBE_STACKS, "stacks"),
        "list_stack_resources": _next_token_paginator(
            LIST_STACK_RESOURCES, "stack_resource_summaries"
        ),
        "list_stacks": _next_token_paginator(LIST_STACKS, "stack_summaries"),
    }

    def create_protocol(self) -> QueryProtocol:
        return QueryProtocol(self.service_name, API_VERSION)

    def customize_runtime_pipeline(self, pipeline: RuntimePipeline) -> None:
        pipeline.add_handler_after(Marshaller, ProcessRequestHandler())

    def cancel_update_stack(
        self, request: Optional[models.CancelUpdateStackRequest] = None, **kwargs: Any
    ) -> models.CancelUpdateStackResponse:
        return self.invoke(CANCEL_UPDATE_STACK, request, **kwargs)

    async def cancel_update_stack_async(
        self,
        request: Optional[models.CancelUpdateStackRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CancelUpdateStackResponse:
        return await self.invoke_async(CANCEL_UPDATE_STACK, request, cancellation, **kwargs)

    def create_stack(
        self, request: Optional[models.CreateStackRequest] = None, **kwargs: Any
    ) -> models.CreateStackResponse:
        return self.invoke(CREATE_STACK, request, **kwargs)

    async def create_stack_async(
        self,
        request: Optional[models.CreateStackRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CreateStackResponse:
        return await self.invoke_async(CREATE_STACK, request, cancellation, **kwargs)

    def delete_stack(
        self, request: Optional[models.DeleteStackRequest] = None, **kwargs: Any
    ) -> models.DeleteStackResponse:
        return self.invoke(DELETE_STACK, request, **kwargs)

    async def delete_stack_async(
        self,
        request: Optional[models.DeleteStackRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteStackResponse:
        return await self.invoke_async(DELETE_STACK, request, cancellation, **kwargs)

    def describe_stack_events(
        self, request: Optional[models.DescribeStackEventsRequest] = None, **kwargs: Any
    ) -> models.DescribeStackEventsResponse:
        return self.invoke(DESCRIBE_STACK_EVENTS, request, **kwargs)

    async def describe_stack_events_async(
        self,
        request: Optional[models.DescribeStackEventsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeStackEventsResponse:
        return await self.invoke_async(DESCRIBE_STACK_EVENTS, request, cancellation, **kwargs)

    def describe_stack_resource(
        self, request: Optional[models.DescribeStackResourceRequest] = None, **kwargs: Any
    ) -> models.DescribeStackResourceResponse:
        return self.invoke(DESCRIBE_STACK_RESOURCE, request, **kwargs)

    async def describe_stack_resource_async(
        self,
        request: Optional[models.DescribeStackResourceRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeStackResourceResponse:
        return await self.invoke_async(DESCRIBE_STACK_RESOURCE, request, cancellation, **kwargs)

    def describe_stack_resources(
        self, request: Optional[models.DescribeStackResourcesRequest] = None, **kwargs: Any
    ) -> models.DescribeStackResourcesResponse:
        return self.invoke(DESCRIBE_STACK_RESOURCES, request, **kwargs)

    async def describe_stack_resources_async(
        self,
        request: Optional[models.DescribeStackResourcesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeStackResourcesResponse:
        return await self.invoke_async(DESCRIBE_STACK_RESOURCES, request, cancellation, **kwargs)

    def describe_stacks(
        self, request: Optional[models.DescribeStacksRequest] = None, **kwargs: Any
    ) -> models.DescribeStacksResponse:
        return self.invoke(DESCRIBE_STACKS, request, **kwargs)

    async def describe_stacks_async(
        self,
        request: Optional[models.DescribeStacksRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeStacksResponse:
        return await self.invoke_async(DESCRIBE_STACKS, request, cancellation, **kwargs)

    def estimate_template_cost(
        self, request: Optional[models.EstimateTemplateCostRequest] = None, **kwargs: Any
    ) -> models.EstimateTemplateCostResponse:
        return self.invoke(ESTIMATE_TEMPLATE_COST, request, **kwargs)

    async def estimate_template_cost_async(
        self,
        request: Optional[models.EstimateTemplateCostRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.EstimateTemplateCostResponse:
        return await self.invoke_async(ESTIMATE_TEMPLATE_COST, request, cancellation, **kwargs)

    def get_stack_policy(
        self, request: Optional[models.GetStackPolicyRequest] = None, **kwargs: Any
    ) -> models.GetStackPolicyResponse:
        return self.invoke(GET_STACK_POLICY, request, **kwargs)

    async def get_stack_policy_async(
        self,
        request: Optional[models.GetStackPolicyRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.GetStackPolicyResponse:
        return await self.invoke_async(GET_STACK_POLICY, request, cancellation, **kwargs)

    def get_template(
        self, request: Optional[models.GetTemplateRequest] = None, **kwargs: Any
    ) -> models.GetTemplateResponse:
        return self.invoke(GET_TEMPLATE, request, **kwargs)

    async def get_template_async(
        self,
        request: Optional[models.GetTemplateRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.GetTemplateResponse:
        return await self.invoke_async(GET_TEMPLATE, request, cancellation, **kwargs)

    def list_stack_resources(
        self, request: Optional[models.ListStackResourcesRequest] = None, **kwargs: Any
    ) -> models.ListStackResourcesResponse:
        return self.invoke(LIST_STACK_RESOURCES, request, **kwargs)

    async def list_stack_resources_async(
        self,
        request: Optional[models.ListStackResourcesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ListStackResourcesResponse:
        return await self.invoke_async(LIST_STACK_RESOURCES, request, cancellation, **kwargs)

    def list_stacks(
        self, request: Optional[models.ListStacksRequest] = None, **kwargs: Any
    ) -> models.ListStacksResponse:
        return self.invoke(LIST_STACKS, request, **kwargs)

    async def list_stacks_async(
        self,
        request: Optional[models.ListStacksRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ListStacksResponse:
        return await self.invoke_async(LIST_STACKS, request, cancellation, **kwargs)

    def set_stack_policy(
        self, request: Optional[models.SetStackPolicyRequest] = None, **kwargs: Any
    ) -> models.SetStackPolicyResponse:
        return self.invoke(SET_STACK_POLICY, request, **kwargs)

    async def set_stack_policy_async(
        self,
        request: Optional[models.SetStackPolicyRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.SetStackPolicyResponse:
        return await self.invoke_async(SET_STACK_POLICY, request, cancellation, **kwargs)

    def update_stack(
        self, request: Optional[models.UpdateStackRequest] = None, **kwargs: Any
    ) -> models.UpdateStackResponse:
        return self.invoke(UPDATE_STACK, request, **kwargs)

    async def update_stack_async(
        self,
        request: Optional[models.UpdateStackRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.UpdateStackResponse:
        return await self.invoke_async(UPDATE_STACK, request, cancellation, **kwargs)

    def validate_template(
        self, request: Optional[models.ValidateTemplateRequest] = None, **kwargs: Any
    ) -> models.ValidateTemplateResponse:
        return self.invoke(VALIDATE_TEMPLATE, request, **kwargs)

    async def validate_template_async(
        self,
        request: Optional[models.ValidateTemplateRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ValidateTemplateResponse:
        return await self.invoke_async(VALIDATE_TEMPLATE, request, cancellation, **kwargs)

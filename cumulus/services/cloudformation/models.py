"""CloudFormation request, response and structure models."""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from cumulus.runtime.model import SdkRequest, SdkResponse, ServiceModel, member


class Parameter(ServiceModel):
    parameter_key: Optional[str] = None
    parameter_value: Optional[str] = None
    use_previous_value: Optional[bool] = None


class Tag(ServiceModel):
    key: Optional[str] = None
    value: Optional[str] = None


class Output(ServiceModel):
    output_key: Optional[str] = None
    output_value: Optional[str] = None
    description: Optional[str] = None


class Stack(ServiceModel):
    stack_id: Optional[str] = None
    stack_name: Optional[str] = None
    description: Optional[str] = None
    parameters: List[Parameter] = member(default_factory=list)
    creation_time: Optional[datetime] = None
    last_updated_time: Optional[datetime] = None
    stack_status: Optional[str] = None
    stack_status_reason: Optional[str] = None
    disable_rollback: Optional[bool] = None
    notification_arns: List[str] = member(alias="NotificationARNs", default_factory=list)
    timeout_in_minutes: Optional[int] = None
    capabilities: List[str] = member(default_factory=list)
    outputs: List[Output] = member(default_factory=list)
    tags: List[Tag] = member(default_factory=list)


class StackEvent(ServiceModel):
    stack_id: Optional[str] = None
    event_id: Optional[str] = None
    stack_name: Optional[str] = None
    logical_resource_id: Optional[str] = None
    physical_resource_id: Optional[str] = None
    resource_type: Optional[str] = None
    timestamp: Optional[datetime] = None
    resource_status: Optional[str] = None
    resource_status_reason: Optional[str] = None
    resource_properties: Optional[str] = None


class StackResource(ServiceModel):
    stack_name: Optional[str] = None
    stack_id: Optional[str] = None
    logical_resource_id: Optional[str] = None
    physical_resource_id: Optional[str] = None
    resource_type: Optional[str] = None
    timestamp: Optional[datetime] = None
    resource_status: Optional[str] = None
    resource_status_reason: Optional[str] = None
    description: Optional[str] = None


class StackResourceDetail(ServiceModel):
    stack_name: Optional[str] = None
    stack_id: Optional[str] = None
    logical_resource_id: Optional[str] = None
    physical_resource_id: Optional[str] = None
    resource_type: Optional[str] = None
    last_updated_timestamp: Optional[datetime] = None
    resource_status: Optional[str] = None
    resource_status_reason: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[str] = None


class StackResourceSummary(ServiceModel):
    logical_resource_id: Optional[str] = None
    physical_resource_id: Optional[str] = None
    resource_type: Optional[str] = None
    last_updated_timestamp: Optional[datetime] = None
    resource_status: Optional[str] = None
    resource_status_reason: Optional[str] = None


class StackSummary(ServiceModel):
    stack_id: Optional[str] = None
    stack_name: Optional[str] = None
    template_description: Optional[str] = None
    creation_time: Optional[datetime] = None
    last_updated_time: Optional[datetime] = None
    deletion_time: Optional[datetime] = None
    stack_status: Optional[str] = None
    stack_status_reason: Optional[str] = None


class TemplateParameter(ServiceModel):
    parameter_key: Optional[str] = None
    default_value: Optional[str] = None
    no_echo: Optional[bool] = None
    description: Optional[str] = None


# Operations


class CancelUpdateStackRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None


class CancelUpdateStackResponse(SdkResponse):
    pass


class CreateStackRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None
    template_body: Optional[str] = None
    template_url: Optional[str] = member(alias="TemplateURL")
    parameters: List[Parameter] = member(default_factory=list)
    disable_rollback: Optional[bool] = None
    timeout_in_minutes: Optional[int] = None
    notification_arns: List[str] = member(alias="NotificationARNs", default_factory=list)
    capabilities: List[str] = member(default_factory=list)
    on_failure: Optional[str] = None
    stack_policy_body: Optional[str] = None
    stack_policy_url: Optional[str] = member(alias="StackPolicyURL")
    tags: List[Tag] = member(default_factory=list)


class CreateStackResponse(SdkResponse):
    stack_id: Optional[str] = None


class DeleteStackRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None


class DeleteStackResponse(SdkResponse):
    pass


class DescribeStackEventsRequest(SdkRequest):
    stack_name: Optional[str] = None
    next_token: Optional[str] = None


class DescribeStackEventsResponse(SdkResponse):
    stack_events: List[StackEvent] = member(default_factory=list)
    next_token: Optional[str] = None


class DescribeStackResourceRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"stack_name", "logical_resource_id"}
    )

    stack_name: Optional[str] = None
    logical_resource_id: Optional[str] = None


class DescribeStackResourceResponse(SdkResponse):
    stack_resource_detail: Optional[StackResourceDetail] = None


class DescribeStackResourcesRequest(SdkRequest):
    stack_name: Optional[str] = None
    logical_resource_id: Optional[str] = None
    physical_resource_id: Optional[str] = None


class DescribeStackResourcesResponse(SdkResponse):
    stack_resources: List[StackResource] = member(default_factory=list)


class DescribeStacksRequest(SdkRequest):
    stack_name: Optional[str] = None
    next_token: Optional[str] = None


class DescribeStacksResponse(SdkResponse):
    stacks: List[Stack] = member(default_factory=list)
    next_token: Optional[str] = None


class EstimateTemplateCostRequest(SdkRequest):
    template_body: Optional[str] = None
    template_url: Optional[str] = member(alias="TemplateURL")
    parameters: List[Parameter] = member(default_factory=list)


class EstimateTemplateCostResponse(SdkResponse):
    url: Optional[str] = None


class GetStackPolicyRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None


class GetStackPolicyResponse(SdkResponse):
    stack_policy_body: Optional[str] = None


class GetTemplateRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None


class GetTemplateResponse(SdkResponse):
    template_body: Optional[str] = None


class ListStackResourcesRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None
    next_token: Optional[str] = None


class ListStackResourcesResponse(SdkResponse):
    stack_resource_summaries: List[StackResourceSummary] = member(default_factory=list)
    next_token: Optional[str] = None


class ListStacksRequest(SdkRequest):
    next_token: Optional[str] = None
    stack_status_filter: List[str] = member(default_factory=list)


class ListStacksResponse(SdkResponse):
    stack_summaries: List[StackSummary] = member(default_factory=list)
    next_token: Optional[str] = None


class SetStackPolicyRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None
    stack_policy_body: Optional[str] = None
    stack_policy_url: Optional[str] = member(alias="StackPolicyURL")


class SetStackPolicyResponse(SdkResponse):
    pass


class UpdateStackRequest(SdkRequest):
    """Assigning an empty list to `notification_arns` removes every
    notification topic from the stack; leaving it unset keeps them."""

    required_members: ClassVar[FrozenSet[str]] = frozenset({"stack_name"})

    stack_name: Optional[str] = None
    template_body: Optional[str] = None
    template_url: Optional[str] = member(alias="TemplateURL")
    use_previous_template: Optional[bool] = None
    stack_policy_during_update_body: Optional[str] = None
    stack_policy_during_update_url: Optional[str] = member(
        alias="StackPolicyDuringUpdateURL"
    )
    parameters: List[Parameter] = member(default_factory=list)
    capabilities: List[str] = member(default_factory=list)
    stack_policy_body: Optional[str] = None
    stack_policy_url: Optional[str] = member(alias="StackPolicyURL")
    notification_arns: List[str] = member(alias="NotificationARNs", default_factory=list)


class UpdateStackResponse(SdkResponse):
    stack_id: Optional[str] = None


class ValidateTemplateRequest(SdkRequest):
    template_body: Optional[str] = None
    template_url: Optional[str] = member(alias="TemplateURL")


class ValidateTemplateResponse(SdkResponse):
    parameters: List[TemplateParameter] = member(default_factory=list)
    description: Optional[str] = None
    capabilities: List[str] = member(default_factory=list)
    capabilities_reason: Optional[str] = None

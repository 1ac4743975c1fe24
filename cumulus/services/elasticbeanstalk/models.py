"""Elastic Beanstalk request, response and structure models."""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from cumulus.runtime.model import SdkRequest, SdkResponse, ServiceModel, member


class ApplicationDescription(ServiceModel):
    application_name: Optional[str] = None
    description: Optional[str] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    versions: List[str] = member(default_factory=list)
    configuration_templates: List[str] = member(default_factory=list)


class EnvironmentTier(ServiceModel):
    name: Optional[str] = None
    type: Optional[str] = None
    version: Optional[str] = None


class EnvironmentDescription(ServiceModel):
    environment_name: Optional[str] = None
    environment_id: Optional[str] = None
    application_name: Optional[str] = None
    version_label: Optional[str] = None
    solution_stack_name: Optional[str] = None
    template_name: Optional[str] = None
    description: Optional[str] = None
    endpoint_url: Optional[str] = member(alias="EndpointURL")
    cname: Optional[str] = member(alias="CNAME")
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    status: Optional[str] = None
    health: Optional[str] = None
    tier: Optional[EnvironmentTier] = None


class EventDescription(ServiceModel):
    event_date: Optional[datetime] = None
    message: Optional[str] = None
    application_name: Optional[str] = None
    version_label: Optional[str] = None
    template_name: Optional[str] = None
    environment_name: Optional[str] = None
    request_id: Optional[str] = None
    severity: Optional[str] = None


class SolutionStackDescription(ServiceModel):
    solution_stack_name: Optional[str] = None
    permitted_file_types: List[str] = member(default_factory=list)


# Operations


class CheckDNSAvailabilityRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"cname_prefix"})

    cname_prefix: Optional[str] = member(alias="CNAMEPrefix")


class CheckDNSAvailabilityResponse(SdkResponse):
    available: Optional[bool] = None
    fully_qualified_cname: Optional[str] = member(alias="FullyQualifiedCNAME")


class CreateApplicationRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"application_name"})

    application_name: Optional[str] = None
    description: Optional[str] = None


class CreateApplicationResponse(SdkResponse):
    application: Optional[ApplicationDescription] = None


class DeleteApplicationRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"application_name"})

    application_name: Optional[str] = None
    terminate_env_by_force: Optional[bool] = None


class DeleteApplicationResponse(SdkResponse):
    pass


class DescribeApplicationsRequest(SdkRequest):
    application_names: List[str] = member(default_factory=list)


class DescribeApplicationsResponse(SdkResponse):
    applications: List[ApplicationDescription] = member(default_factory=list)


class DescribeEnvironmentsRequest(SdkRequest):
    application_name: Optional[str] = None
    version_label: Optional[str] = None
    environment_ids: List[str] = member(default_factory=list)
    environment_names: List[str] = member(default_factory=list)
    include_deleted: Optional[bool] = None
    included_deleted_back_to: Optional[datetime] = None


class DescribeEnvironmentsResponse(SdkResponse):
    environments: List[EnvironmentDescription] = member(default_factory=list)


class DescribeEventsRequest(SdkRequest):
    application_name: Optional[str] = None
    version_label: Optional[str] = None
    template_name: Optional[str] = None
    environment_id: Optional[str] = None
    environment_name: Optional[str] = None
    request_id: Optional[str] = None
    severity: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    max_records: Optional[int] = None
    next_token: Optional[str] = None


class DescribeEventsResponse(SdkResponse):
    events: List[EventDescription] = member(default_factory=list)
    next_token: Optional[str] = None


class ListAvailableSolutionStacksRequest(SdkRequest):
    pass


class ListAvailableSolutionStacksResponse(SdkResponse):
    solution_stacks: List[str] = member(default_factory=list)
    solution_stack_details: List[SolutionStackDescription] = member(default_factory=list)


class RestartAppServerRequest(SdkRequest):
    environment_id: Optional[str] = None
    environment_name: Optional[str] = None


class RestartAppServerResponse(SdkResponse):
    pass


class SwapEnvironmentCNAMEsRequest(SdkRequest):
    source_environment_id: Optional[str] = None
    source_environment_name: Optional[str] = None
    destination_environment_id: Optional[str] = None
    destination_environment_name: Optional[str] = None


class SwapEnvironmentCNAMEsResponse(SdkResponse):
    pass


class TerminateEnvironmentRequest(SdkRequest):
    environment_id: Optional[str] = None
    environment_name: Optional[str] = None
    terminate_resources: Optional[bool] = None


class TerminateEnvironmentResponse(SdkResponse, EnvironmentDescription):
    """The terminated environment's description."""

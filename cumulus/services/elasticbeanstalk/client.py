"""Elastic Beanstalk client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.paginator import PaginatorModel
from cumulus.runtime.protocols.query import QueryProtocol
from cumulus.services.elasticbeanstalk import models
from cumulus.services.elasticbeanstalk.errors import ERROR_CLASSES, ElasticBeanstalkError

API_VERSION = "2010-12-01"


def _operation(name: str) -> OperationModel:
    return OperationModel(
        name=name,
        input_shape=getattr(models, f"{name}Request"),
        output_shape=getattr(models, f"{name}Response"),
    )


CHECK_DNS_AVAILABILITY = _operation("CheckDNSAvailability")
CREATE_APPLICATION = _operation("CreateApplication")
DELETE_APPLICATION = _operation("DeleteApplication")
DESCRIBE_APPLICATIONS = _operation("DescribeApplications")
DESCRIBE_ENVIRONMENTS = _operation("DescribeEnvironments")
DESCRIBE_EVENTS = _operation("DescribeEvents")
LIST_AVAILABLE_SOLUTION_STACKS = _operation("ListAvailableSolutionStacks")
RESTART_APP_SERVER = _operation("RestartAppServer")
SWAP_ENVIRONMENT_CNAMES = _operation("SwapEnvironmentCNAMEs")
TERMINATE_ENVIRONMENT = _operation("TerminateEnvironment")


class ElasticBeanstalkClient(ServiceClient):
    """Client for AWS Elastic Beanstalk."""

    service_name = "ElasticBeanstalk"
    endpoint_prefix = "elasticbeanstalk"
    service_error = ElasticBeanstalkError
    error_classes = ERROR_CLASSES
    paginators = {
        "describe_events": PaginatorModel(
            operation=DESCRIBE_EVENTS,
            input_token="next_token",
            output_token="next_token",
            result_key="events",
            limit_key="max_records",
        ),
    }

    def create_protocol(self) -> QueryProtocol:
        return QueryProtocol(self.service_name, API_VERSION)

    def check_dns_availability(
        self, request: Optional[models.CheckDNSAvailabilityRequest] = None, **kwargs: Any
    ) -> models.CheckDNSAvailabilityResponse:
        return self.invoke(CHECK_DNS_AVAILABILITY, request, **kwargs)

    async def check_dns_availability_async(
        self,
        request: Optional[models.CheckDNSAvailabilityRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CheckDNSAvailabilityResponse:
        return await self.invoke_async(CHECK_DNS_AVAILABILITY, request, cancellation, **kwargs)

    def create_application(
        self, request: Optional[models.CreateApplicationRequest] = None, **kwargs: Any
    ) -> models.CreateApplicationResponse:
        return self.invoke(CREATE_APPLICATION, request, **kwargs)

    async def create_application_async(
        self,
        request: Optional[models.CreateApplicationRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CreateApplicationResponse:
        return await self.invoke_async(CREATE_APPLICATION, request, cancellation, **kwargs)

    def delete_application(
        self, request: Optional[models.DeleteApplicationRequest] = None, **kwargs: Any
    ) -> models.DeleteApplicationResponse:
        return self.invoke(DELETE_APPLICATION, request, **kwargs)

    async def delete_application_async(
        self,
        request: Optional[models.DeleteApplicationRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteApplicationResponse:
        return await self.invoke_async(DELETE_APPLICATION, request, cancellation, **kwargs)

    def describe_applications(
        self, request: Optional[models.DescribeApplicationsRequest] = None, **kwargs: Any
    ) -> models.DescribeApplicationsResponse:
        return self.invoke(DESCRIBE_APPLICATIONS, request, **kwargs)

    async def describe_applications_async(
        self,
        request: Optional[models.DescribeApplicationsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeApplicationsResponse:
        return await self.invoke_async(DESCRIBE_APPLICATIONS, request, cancellation, **kwargs)

    def describe_environments(
        self, request: Optional[models.DescribeEnvironmentsRequest] = None, **kwargs: Any
    ) -> models.DescribeEnvironmentsResponse:
        return self.invoke(DESCRIBE_ENVIRONMENTS, request, **kwargs)

    async def describe_environments_async(
        self,
        request: Optional[models.DescribeEnvironmentsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeEnvironmentsResponse:
        return await self.invoke_async(DESCRIBE_ENVIRONMENTS, request, cancellation, **kwargs)

    def describe_events(
        self, request: Optional[models.DescribeEventsRequest] = None, **kwargs: Any
    ) -> models.DescribeEventsResponse:
        return self.invoke(DESCRIBE_EVENTS, request, **kwargs)

    async def describe_events_async(
        self,
        request: Optional[models.DescribeEventsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeEventsResponse:
        return await self.invoke_async(DESCRIBE_EVENTS, request, cancellation, **kwargs)

    def list_available_solution_stacks(
        self, request: Optional[models.ListAvailableSolutionStacksRequest] = None, **kwargs: Any
    ) -> models.ListAvailableSolutionStacksResponse:
        return self.invoke(LIST_AVAILABLE_SOLUTION_STACKS, request, **kwargs)

    async def list_available_solution_stacks_async(
        self,
        request: Optional[models.ListAvailableSolutionStacksRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ListAvailableSolutionStacksResponse:
        return await self.invoke_async(
            LIST_AVAILABLE_SOLUTION_STACKS, request, cancellation, **kwargs
        )

    def restart_app_server(
        self, request: Optional[models.RestartAppServerRequest] = None, **kwargs: Any
    ) -> models.RestartAppServerResponse:
        return self.invoke(RESTART_APP_SERVER, request, **kwargs)

    async def restart_app_server_async(
        self,
        request: Optional[models.RestartAppServerRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.RestartAppServerResponse:
        return await self.invoke_async(RESTART_APP_SERVER, request, cancellation, **kwargs)

    def swap_environment_cnames(
        self, request: Optional[models.SwapEnvironmentCNAMEsRequest] = None, **kwargs: Any
    ) -> models.SwapEnvironmentCNAMEsResponse:
        return self.invoke(SWAP_ENVIRONMENT_CNAMES, request, **kwargs)

    async def swap_environment_cnames_async(
        self,
        request: Optional[models.SwapEnvironmentCNAMEsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.SwapEnvironmentCNAMEsResponse:
        return await self.invoke_async(SWAP_ENVIRONMENT_CNAMES, request, cancellation, **kwargs)

    def terminate_environment(
        self, request: Optional[models.TerminateEnvironmentRequest] = None, **kwargs: Any
    ) -> models.TerminateEnvironmentResponse:
        return self.invoke(TERMINATE_ENVIRONMENT, request, **kwargs)

    async def terminate_environment_async(
        self,
        request: Optional[models.TerminateEnvironmentRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.TerminateEnvironmentResponse:
        return await self.invoke_async(TERMINATE_ENVIRONMENT, request, cancellation, **kwargs)

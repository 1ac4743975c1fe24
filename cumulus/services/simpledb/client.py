"""SimpleDB client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.auth.base import AbstractSigner
from cumulus.runtime.auth.sigv2 import QueryStringSigner
from cumulus.runtime.client import ServiceClient
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.paginator import PaginatorModel
from cumulus.runtime.protocols.query import QueryProtocol
from cumulus.services.simpledb import models
from cumulus.services.simpledb.config import SimpleDBConfig
from cumulus.services.simpledb.errors import ERROR_CLASSES, SimpleDBError

API_VERSION = "2009-04-15"


def _operation(name: str) -> OperationModel:
    return OperationModel(
        name=name,
        input_shape=getattr(models, f"{name}Request"),
        output_shape=getattr(models, f"{name}Response"),
    )


CREATE_DOMAIN = _operation("CreateDomain")
DELETE_DOMAIN = _operation("DeleteDomain")
LIST_DOMAINS = _operation("ListDomains")
PUT_ATTRIBUTES = _operation("PutAttributes")
GET_ATTRIBUTES = _operation("GetAttributes")
BATCH_DELETE_ATTRIBUTES = _operation("BatchDeleteAttributes")
SELECT = _operation("Select")


class SimpleDBClient(ServiceClient):
    """Client for Amazon SimpleDB.

    Requests are signed with `QueryStringSigner` (signature version 2).
    The machine utilization of each call is reported as
    `response.response_metadata.metadata["BoxUsage"]`.
    """

    service_name = "SimpleDB"
    endpoint_prefix = "sdb"
    config_class = SimpleDBConfig
    service_error = SimpleDBError
    error_classes = ERROR_CLASSES
    paginators = {
        "list_domains": PaginatorModel(
            operation=LIST_DOMAINS,
            input_token="next_token",
            output_token="next_token",
            result_key="domain_names",
            limit_key="max_number_of_domains",
        ),
        "select": PaginatorModel(
            operation=SELECT,
            input_token="next_token",
            output_token="next_token",
            result_key="items",
        ),
    }

    def create_protocol(self) -> QueryProtocol:
        return QueryProtocol(self.service_name, API_VERSION)

    def create_signer(self) -> AbstractSigner:
        return QueryStringSigner()

    def create_domain(
        self, request: Optional[models.CreateDomainRequest] = None, **kwargs: Any
    ) -> models.CreateDomainResponse:
        return self.invoke(CREATE_DOMAIN, request, **kwargs)

    async def create_domain_async(
        self,
        request: Optional[models.CreateDomainRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CreateDomainResponse:
        return await self.invoke_async(CREATE_DOMAIN, request, cancellation, **kwargs)

    def delete_domain(
        self, request: Optional[models.DeleteDomainRequest] = None, **kwargs: Any
    ) -> models.DeleteDomainResponse:
        return self.invoke(DELETE_DOMAIN, request, **kwargs)

    async def delete_domain_async(
        self,
        request: Optional[models.DeleteDomainRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteDomainResponse:
        return await self.invoke_async(DELETE_DOMAIN, request, cancellation, **kwargs)

    def list_domains(
        self, request: Optional[models.ListDomainsRequest] = None, **kwargs: Any
    ) -> models.ListDomainsResponse:
        return self.invoke(LIST_DOMAINS, request, **kwargs)

    async def list_domains_async(
        self,
        request: Optional[models.ListDomainsRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ListDomainsResponse:
        return await self.invoke_async(LIST_DOMAINS, request, cancellation, **kwargs)

    def put_attributes(
        self, request: Optional[models.PutAttributesRequest] = None, **kwargs: Any
    ) -> models.PutAttributesResponse:
        return self.invoke(PUT_ATTRIBUTES, request, **kwargs)

    async def put_attributes_async(
        self,
        request: Optional[models.PutAttributesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.PutAttributesResponse:
        return await self.invoke_async(PUT_ATTRIBUTES, request, cancellation, **kwargs)

    def get_attributes(
        self, request: Optional[models.GetAttributesRequest] = None, **kwargs: Any
    ) -> models.GetAttributesResponse:
        return self.invoke(GET_ATTRIBUTES, request, **kwargs)

    async def get_attributes_async(
        self,
        request: Optional[models.GetAttributesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.GetAttributesResponse:
        return await self.invoke_async(GET_ATTRIBUTES, request, cancellation, **kwargs)

    def batch_delete_attributes(
        self, request: Optional[models.BatchDeleteAttributesRequest] = None, **kwargs: Any
    ) -> models.BatchDeleteAttributesResponse:
        return self.invoke(BATCH_DELETE_ATTRIBUTES, request, **kwargs)

    async def batch_delete_attributes_async(
        self,
        request: Optional[models.BatchDeleteAttributesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.BatchDeleteAttributesResponse:
        return await self.invoke_async(BATCH_DELETE_ATTRIBUTES, request, cancellation, **kwargs)

    def select(
        self, request: Optional[models.SelectRequest] = None, **kwargs: Any
    ) -> models.SelectResponse:
        return self.invoke(SELECT, request, **kwargs)

    async def select_async(
        self,
        request: Optional[models.SelectRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.SelectResponse:
        return await self.invoke_async(SELECT, request, cancellation, **kwargs)

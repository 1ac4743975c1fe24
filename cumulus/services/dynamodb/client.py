"""DynamoDB client."""

import asyncio
from typing import Any, Optional

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.handlers import RetryHandler, Unmarshaller
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.paginator import PaginatorModel
from cumulus.runtime.pipeline import RuntimePipeline
from cumulus.runtime.protocols.jsonrpc import JsonRpcProtocol
from cumulus.services.dynamodb import models
from cumulus.services.dynamodb.config import DynamoDBConfig
from cumulus.services.dynamodb.errors import ERROR_CLASSES, DynamoDBError
from cumulus.services.dynamodb.handlers import Crc32CheckHandler
from cumulus.services.dynamodb.retry import DynamoDBRetryPolicy

TARGET_PREFIX = "DynamoDB_20120810"


def _operation(name: str) -> OperationModel:
    return OperationModel(
        name=name,
        input_shape=getattr(models, f"{name}Request"),
        output_shape=getattr(models, f"{name}Response"),
    )


BATCH_GET_ITEM = _operation("BatchGetItem")
BATCH_WRITE_ITEM = _operation("BatchWriteItem")
CREATE_TABLE = _operation("CreateTable")
DELETE_ITEM = _operation("DeleteItem")
DELETE_TABLE = _operation("DeleteTable")
DESCRIBE_TABLE = _operation("DescribeTable")
GET_ITEM = _operation("GetItem")
LIST_TABLES = _operation("ListTables")
PUT_ITEM = _operation("PutItem")
QUERY = _operation("Query")
SCAN = _operation("Scan")
UPDATE_ITEM = _operation("UpdateItem")
UPDATE_TABLE = _operation("UpdateTable")


class DynamoDBClient(ServiceClient):
    """Client for Amazon DynamoDB.

    Retries use `DynamoDBRetryPolicy` and every response body is checked
    against its `x-amz-crc32` header.

    Example:
        ```python
        from cumulus.services.dynamodb import DynamoDBClient
        from cumulus.services.dynamodb.types import to_attribute_map

        client = DynamoDBClient(region="ca-central-1")
        client.put_item(table_name="users", item=to_attribute_map({"id": "42"}))
        ```
    """

    service_name = "DynamoDB"
    endpoint_prefix = "dynamodb"
    config_class = DynamoDBConfig
    service_error = DynamoDBError
    error_classes = ERROR_CLASSES
    paginators = {
        "list_tables": PaginatorModel(
            operation=LIST_TABLES,
            input_token="exclusive_start_table_name",
            output_token="last_evaluated_table_name",
            result_key="table_names",
            limit_key="limit",
        ),
        "query": PaginatorModel(
            operation=QUERY,
            input_token="exclusive_start_key",
            output_token="last_evaluated_key",
            result_key="items",
            limit_key="limit",
        ),
        "scan": PaginatorModel(
            operation=SCAN,
            input_token="exclusive_start_key",
            output_token="last_evaluated_key",
            result_key="items",
            limit_key="limit",
        ),
    }

    def create_protocol(self) -> JsonRpcProtocol:
        return JsonRpcProtocol(self.service_name, TARGET_PREFIX)

    def customize_runtime_pipeline(self, pipeline: RuntimePipeline) -> None:
        policy = DynamoDBRetryPolicy(
            max_error_retry=self.config.max_error_retry,
            base_delay=self.config.retry_base_delay,
            max_backoff=self.config.retry_max_backoff,
            jitter=self.config.retry_jitter,
        )
        pipeline.replace_handler(RetryHandler, RetryHandler(policy))
        pipeline.add_handler_after(Unmarshaller, Crc32CheckHandler())

    def batch_get_item(
        self, request: Optional[models.BatchGetItemRequest] = None, **kwargs: Any
    ) -> models.BatchGetItemResponse:
        return self.invoke(BATCH_GET_ITEM, request, **kwargs)

    async def batch_get_item_async(
        self,
        request: Optional[models.BatchGetItemRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.BatchGetItemResponse:
        return await self.invoke_async(BATCH_GET_ITEM, request, cancellation, **kwargs)

    def batch_write_item(
        self, request: Optional[models.BatchWriteItemRequest] = None, **kwargs: Any
    ) -> models.BatchWriteItemResponse:
        return self.invoke(BATCH_WRITE_ITEM, request, **kwargs)

    async def batch_write_item_async(
        self,
        request: Optional[models.BatchWriteItemRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.BatchWriteItemResponse:
        return await self.invoke_async(BATCH_WRITE_ITEM, request, cancellation, **kwargs)

    def create_table(
        self, request: Optional[models.CreateTableRequest] = None, **kwargs: Any
    ) -> models.CreateTableResponse:
        return self.invoke(CREATE_TABLE, request, **kwargs)

    async def create_table_async(
        self,
        request: Optional[models.CreateTableRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.CreateTableResponse:
        return await self.invoke_async(CREATE_TABLE, request, cancellation, **kwargs)

    def delete_item(
        self, request: Optional[models.DeleteItemRequest] = None, **kwargs: Any
    ) -> models.DeleteItemResponse:
        return self.invoke(DELETE_ITEM, request, **kwargs)

    async def delete_item_async(
        self,
        request: Optional[models.DeleteItemRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteItemResponse:
        return await self.invoke_async(DELETE_ITEM, request, cancellation, **kwargs)

    def delete_table(
        self, request: Optional[models.DeleteTableRequest] = None, **kwargs: Any
    ) -> models.DeleteTableResponse:
        return self.invoke(DELETE_TABLE, request, **kwargs)

    async def delete_table_async(
        self,
        request: Optional[models.DeleteTableRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DeleteTableResponse:
        return await self.invoke_async(DELETE_TABLE, request, cancellation, **kwargs)

    def describe_table(
        self, request: Optional[models.DescribeTableRequest] = None, **kwargs: Any
    ) -> models.DescribeTableResponse:
        return self.invoke(DESCRIBE_TABLE, request, **kwargs)

    async def describe_table_async(
        self,
        request: Optional[models.DescribeTableRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.DescribeTableResponse:
        return await self.invoke_async(DESCRIBE_TABLE, request, cancellation, **kwargs)

    def get_item(
        self, request: Optional[models.GetItemRequest] = None, **kwargs: Any
    ) -> models.GetItemResponse:
        return self.invoke(GET_ITEM, request, **kwargs)

    async def get_item_async(
        self,
        request: Optional[models.GetItemRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.GetItemResponse:
        return await self.invoke_async(GET_ITEM, request, cancellation, **kwargs)

    def list_tables(
        self, request: Optional[models.ListTablesRequest] = None, **kwargs: Any
    ) -> models.ListTablesResponse:
        return self.invoke(LIST_TABLES, request, **kwargs)

    async def list_tables_async(
        self,
        request: Optional[models.ListTablesRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ListTablesResponse:
        return await self.invoke_async(LIST_TABLES, request, cancellation, **kwargs)

    def put_item(
        self, request: Optional[models.PutItemRequest] = None, **kwargs: Any
    ) -> models.PutItemResponse:
        return self.invoke(PUT_ITEM, request, **kwargs)

    async def put_item_async(
        self,
        request: Optional[models.PutItemRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.PutItemResponse:
        return await self.invoke_async(PUT_ITEM, request, cancellation, **kwargs)

    def query(
        self, request: Optional[models.QueryRequest] = None, **kwargs: Any
    ) -> models.QueryResponse:
        return self.invoke(QUERY, request, **kwargs)

    async def query_async(
        self,
        request: Optional[models.QueryRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.QueryResponse:
        return await self.invoke_async(QUERY, request, cancellation, **kwargs)

    def scan(
        self, request: Optional[models.ScanRequest] = None, **kwargs: Any
    ) -> models.ScanResponse:
        return self.invoke(SCAN, request, **kwargs)

    async def scan_async(
        self,
        request: Optional[models.ScanRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.ScanResponse:
        return await self.invoke_async(SCAN, request, cancellation, **kwargs)

    def update_item(
        self, request: Optional[models.UpdateItemRequest] = None, **kwargs: Any
    ) -> models.UpdateItemResponse:
        return self.invoke(UPDATE_ITEM, request, **kwargs)

    async def update_item_async(
        self,
        request: Optional[models.UpdateItemRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.UpdateItemResponse:
        return await self.invoke_async(UPDATE_ITEM, request, cancellation, **kwargs)

    def update_table(
        self, request: Optional[models.UpdateTableRequest] = None, **kwargs: Any
    ) -> models.UpdateTableResponse:
        return self.invoke(UPDATE_TABLE, request, **kwargs)

    async def update_table_async(
        self,
        request: Optional[models.UpdateTableRequest] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> models.UpdateTableResponse:
        return await self.invoke_async(UPDATE_TABLE, request, cancellation, **kwargs)

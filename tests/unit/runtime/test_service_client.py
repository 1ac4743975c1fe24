"""Unit tests for the ServiceClient base class.

Tests cover:
- Region, config and credential resolution
- Request object versus keyword arguments
- Full pipeline: validation, User-Agent, signing, error mapping
- Paginator lookup
- Closing HTTP clients
"""

from unittest.mock import Mock, patch

import httpx
import pytest

from cumulus.runtime.client import ServiceClient
from cumulus.runtime.credentials import (
    AnonymousAWSCredentials,
    BasicAWSCredentials,
    SessionAWSCredentials,
)
from cumulus.runtime.exceptions import (
    HttpTransportError,
    ParamValidationError,
    ServiceError,
)
from cumulus.runtime.handlers import RetryHandler
from cumulus.runtime.regions import RegionEndpoint
from cumulus.services.dynamodb import models
from cumulus.services.dynamodb.client import DynamoDBClient
from cumulus.services.dynamodb.config import DynamoDBConfig
from cumulus.services.dynamodb.errors import DynamoDBError
from cumulus.services.dynamodb.retry import DynamoDBRetryPolicy
from tests.fixtures.transport import json_response


@pytest.mark.unit
class TestClientConstruction:
    """Test suite for client construction."""

    def test_region_from_string(self, credentials):
        """Test region names resolve to RegionEndpoint."""
        client = DynamoDBClient(credentials, region="ca-central-1")

        assert client.region is RegionEndpoint.CA_CENTRAL_1

    def test_region_from_config(self, credentials):
        """Test the config region is used when none is passed."""
        client = DynamoDBClient(credentials, config=DynamoDBConfig(region="eu-west-1"))

        assert client.region is RegionEndpoint.EU_WEST_1

    def test_service_config_class_is_default(self, credentials):
        """Test each service builds its own config type."""
        client = DynamoDBClient(credentials, region="us-east-1")

        assert isinstance(client.config, DynamoDBConfig)

    def test_service_retry_policy_installed(self, credentials):
        """Test DynamoDB swaps in its own retry policy."""
        client = DynamoDBClient(credentials, region="us-east-1")

        handler = client.pipeline.find_handler(RetryHandler)
        assert isinstance(handler.retry_policy, DynamoDBRetryPolicy)
        assert handler.retry_policy.max_error_retry == 10

    def test_static_key_arguments(self):
        """Test access keys passed as keywords build basic credentials."""
        client = DynamoDBClient(
            aws_access_key_id="AKID", aws_secret_access_key="secret", region="us-east-1"
        )

        assert isinstance(client.credentials, BasicAWSCredentials)

    def test_session_token_argument(self):
        """Test a session token builds session credentials."""
        client = DynamoDBClient(
            aws_access_key_id="AKID",
            aws_secret_access_key="secret",
            aws_session_token="token",
            region="us-east-1",
        )

        assert isinstance(client.credentials, SessionAWSCredentials)
        assert client.credentials.get_credentials().token == "token"

    def test_fallback_credentials(self):
        """Test the fallback factory runs when nothing is passed."""
        fallback = Mock()
        with patch(
            "cumulus.runtime.client.FallbackCredentialsFactory.get_credentials",
            return_value=fallback,
        ) as mock_factory:
            client = DynamoDBClient(region="us-east-1")

        assert client.credentials is fallback
        mock_factory.assert_called_once()

    def test_client_without_protocol_cannot_be_created(self, credentials):
        """Test subclasses must define create_protocol."""

        class IncompleteClient(ServiceClient):
            service_name = "Incomplete"
            endpoint_prefix = "incomplete"

        with pytest.raises(TypeError, match="create_protocol"):
            IncompleteClient(credentials, region="us-east-1")


@pytest.mark.unit
class TestClientInvocation:
    """Test suite for invoking operations through the pipeline."""

    def test_request_object_and_kwargs_rejected(self, make_client, make_transport):
        """Test passing both a request and kwargs fails."""
        client = make_client(DynamoDBClient, make_transport(json_response({})))

        with pytest.raises(TypeError):
            client.list_tables(models.ListTablesRequest(), limit=5)

    def test_wrong_request_type_rejected(self, make_client, make_transport):
        """Test a request model of another operation fails."""
        client = make_client(DynamoDBClient, make_transport(json_response({})))

        with pytest.raises(TypeError):
            client.list_tables(models.DescribeTableRequest(table_name="t"))

    def test_unknown_member_rejected(self, make_client, make_transport):
        """Test unknown keyword arguments are refused by the request model."""
        client = make_client(DynamoDBClient, make_transport(json_response({})))

        with pytest.raises(ValueError):
            client.list_tables(table="t")

    def test_missing_required_member(self, make_client, make_transport):
        """Test validation happens before anything is sent."""
        transport = make_transport(json_response({}))
        client = make_client(DynamoDBClient, transport)

        with pytest.raises(ParamValidationError) as exc_info:
            client.describe_table()

        assert exc_info.value.missing == ["TableName"]
        assert transport.requests == []

    def test_request_is_signed_and_tagged(self, make_client, make_transport):
        """Test the wire request carries User-Agent, date and signature."""
        transport = make_transport(json_response({"TableNames": ["users"]}))
        client = make_client(DynamoDBClient, transport)

        response = client.list_tables(limit=1)

        sent = transport.last_request
        assert response.table_names == ["users"]
        assert str(sent.url) == "https://dynamodb.us-east-1.amazonaws.com/"
        assert sent.headers["User-Agent"].startswith("cumulus-sdk/")
        assert "X-Amz-Date" in sent.headers
        assert sent.headers["Authorization"].startswith(
            "AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/"
        )
        assert "/us-east-1/dynamodb/aws4_request" in sent.headers["Authorization"]

    def test_session_token_header(self, make_client, make_transport, session_credentials):
        """Test temporary credentials send the security token."""
        transport = make_transport(json_response({}))
        client = make_client(DynamoDBClient, transport, credentials=session_credentials)

        client.list_tables()

        assert transport.last_request.headers["X-Amz-Security-Token"] == "session-token"

    def test_anonymous_requests_unsigned(self, make_client, make_transport):
        """Test anonymous credentials skip signing."""
        transport = make_transport(json_response({}))
        client = make_client(
            DynamoDBClient, transport, credentials=AnonymousAWSCredentials()
        )

        client.list_tables()

        assert "Authorization" not in transport.last_request.headers

    def test_service_url_override(self, make_client, make_transport):
        """Test service_url replaces the regional endpoint."""
        transport = make_transport(json_response({}))
        client = make_client(
            DynamoDBClient,
            transport,
            config=DynamoDBConfig(service_url="http://localhost:8000"),
        )

        client.list_tables()

        assert str(transport.last_request.url) == "http://localhost:8000/"

    def test_response_metadata(self, make_client, make_transport):
        """Test status code and request id are exposed on the response."""
        client = make_client(DynamoDBClient, make_transport(json_response({})))

        response = client.list_tables()

        assert response.http_status_code == 200
        assert response.response_metadata.request_id == "req-json"

    def test_unmodeled_error_uses_service_base(self, make_client, make_transport):
        """Test unknown codes raise the service's base exception."""
        body = {"__type": "com.amazonaws#SomethingNew", "message": "new"}
        transport = make_transport(json_response(body, status_code=400))
        client = make_client(
            DynamoDBClient, transport, config=DynamoDBConfig(max_error_retry=0)
        )

        with pytest.raises(ServiceError) as exc_info:
            client.list_tables()

        assert type(exc_info.value) is DynamoDBError
        assert exc_info.value.error_code == "SomethingNew"
        assert exc_info.value.request_id == "req-json"

    def test_transport_error_retried(self, make_client, make_transport, no_sleep):
        """Test connection failures are retried before succeeding."""
        transport = make_transport(
            httpx.ConnectError("connection refused"), json_response({"TableNames": []})
        )
        client = make_client(DynamoDBClient, transport)

        client.list_tables()

        assert len(transport.requests) == 2

    def test_transport_error_exhausts_retries(self, make_client, make_transport, no_sleep):
        """Test the transport error surfaces once retries are used up."""
        transport = make_transport(httpx.ConnectError("connection refused"))
        client = make_client(
            DynamoDBClient, transport, config=DynamoDBConfig(max_error_retry=2)
        )

        with pytest.raises(HttpTransportError):
            client.list_tables()

        assert len(transport.requests) == 3


@pytest.mark.unit
class TestClientPaginationAndLifecycle:
    """Test suite for paginator lookup and closing."""

    def test_get_paginator(self, make_client, make_transport):
        """Test paginated operations return a paginator bound to the client."""
        transport = make_transport(
            json_response({"TableNames": ["a"], "LastEvaluatedTableName": "a"}),
            json_response({"TableNames": ["b"]}),
        )
        client = make_client(DynamoDBClient, transport)

        tables = list(client.get_paginator("list_tables").iter_results())

        assert tables == ["a", "b"]
        assert len(transport.requests) == 2

    def test_get_paginator_unknown(self, make_client, make_transport):
        """Test non-pageable operations raise ValueError."""
        client = make_client(DynamoDBClient, make_transport(json_response({})))

        assert client.can_paginate("scan")
        assert not client.can_paginate("get_item")
        with pytest.raises(ValueError):
            client.get_paginator("get_item")

    def test_close_leaves_passed_clients_open(self, credentials, make_transport):
        """Test clients handed in by the caller are not closed."""
        transport = make_transport(json_response({}))
        http_client = transport.sync_client()

        with DynamoDBClient(credentials, region="us-east-1", http_client=http_client) as client:
            client.list_tables()

        assert not http_client.is_closed

    def test_close_owned_client(self, credentials):
        """Test clients created by the handler are closed."""
        client = DynamoDBClient(credentials, region="us-east-1")
        handler = client._http_handlers()[0]
        owned = handler.http_client

        client.close()

        assert owned.is_closed

    @pytest.mark.asyncio
    async def test_async_context_manager(self, make_client, make_transport):
        """Test async calls work inside `async with`."""
        transport = make_transport(json_response({"TableNames": ["a"]}))

        async with make_client(DynamoDBClient, transport) as client:
            response = await client.list_tables_async()

        assert response.table_names == ["a"]

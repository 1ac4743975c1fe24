"""Unit tests for the CloudFormation client.

Tests cover:
- Query parameters of CreateStack and UpdateStack
- Clearing notification topics with an explicitly empty list
- DescribeStacks parsing and pagination
- Typed exceptions
"""

import pytest

from cumulus.runtime.exceptions import ParamValidationError
from cumulus.services.cloudformation import CloudFormationClient, models
from cumulus.services.cloudformation.errors import (
    AlreadyExistsException,
    CloudFormationError,
)
from tests.fixtures.transport import form_params, query_error, query_response

NAMESPACE = "http://cloudformation.amazonaws.com/doc/2010-05-15/"


def result_xml(operation, result=""):
    return query_response(operation, result, NAMESPACE, "<RequestId>cfn-req</RequestId>")


@pytest.mark.unit
class TestCloudFormationRequests:
    """Test suite for CloudFormation request parameters."""

    def test_create_stack(self, make_client, make_transport):
        """Test action, version and nested parameters."""
        transport = make_transport(
            result_xml("CreateStack", "<StackId>arn:aws:cloudformation:stack/app</StackId>")
        )
        client = make_client(CloudFormationClient, transport)

        response = client.create_stack(
            stack_name="app",
            template_body="{}",
            parameters=[models.Parameter(parameter_key="Env", parameter_value="prod")],
            capabilities=["CAPABILITY_IAM"],
        )

        params = form_params(transport.last_request)
        assert str(transport.last_request.url) == (
            "https://cloudformation.us-east-1.amazonaws.com/"
        )
        assert params["Action"] == "CreateStack"
        assert params["Version"] == "2010-05-15"
        assert params["StackName"] == "app"
        assert params["Parameters.member.1.ParameterKey"] == "Env"
        assert params["Capabilities.member.1"] == "CAPABILITY_IAM"
        assert response.stack_id == "arn:aws:cloudformation:stack/app"
        assert response.response_metadata.request_id == "cfn-req"

    def test_update_stack_clears_notifications(self, make_client, make_transport):
        """Test an explicitly empty NotificationARNs is sent as an empty value."""
        transport = make_transport(result_xml("UpdateStack", "<StackId>id</StackId>"))
        client = make_client(CloudFormationClient, transport)

        client.update_stack(stack_name="app", use_previous_template=True, notification_arns=[])

        params = form_params(transport.last_request)
        assert params["NotificationARNs"] == ""

    def test_update_stack_keeps_notifications_when_unset(self, make_client, make_transport):
        """Test NotificationARNs is absent when never assigned."""
        transport = make_transport(result_xml("UpdateStack", "<StackId>id</StackId>"))
        client = make_client(CloudFormationClient, transport)

        client.update_stack(stack_name="app", use_previous_template=True)

        params = form_params(transport.last_request)
        assert not any(key.startswith("NotificationARNs") for key in params)

    def test_update_stack_with_topics(self, make_client, make_transport):
        """Test topics are sent as a member list."""
        transport = make_transport(result_xml("UpdateStack", "<StackId>id</StackId>"))
        client = make_client(CloudFormationClient, transport)

        client.update_stack(stack_name="app", notification_arns=["arn:topic"])

        params = form_params(transport.last_request)
        assert params["NotificationARNs.member.1"] == "arn:topic"
        assert "NotificationARNs" not in params

    def test_missing_stack_name(self, make_client, make_transport):
        """Test required members are validated."""
        client = make_client(CloudFormationClient, make_transport(result_xml("UpdateStack")))

        with pytest.raises(ParamValidationError, match="StackName"):
            client.update_stack()


@pytest.mark.unit
class TestCloudFormationResponses:
    """Test suite for CloudFormation responses and errors."""

    def test_describe_stacks(self, make_client, make_transport):
        """Test nested stacks, outputs and timestamps are parsed."""
        stacks = (
            "<Stacks><member>"
            "<StackName>app</StackName><StackStatus>UPDATE_COMPLETE</StackStatus>"
            "<CreationTime>2014-03-01T12:00:00Z</CreationTime>"
            "<Outputs><member><OutputKey>Url</OutputKey>"
            "<OutputValue>https://example.com</OutputValue></member></Outputs>"
            "<Tags><member><Key>team</Key><Value>sre</Value></member></Tags>"
            "</member></Stacks>"
        )
        transport = make_transport(result_xml("DescribeStacks", stacks))
        client = make_client(CloudFormationClient, transport)

        response = client.describe_stacks(stack_name="app")

        stack = response.stacks[0]
        assert stack.stack_status == "UPDATE_COMPLETE"
        assert stack.creation_time.year == 2014
        assert stack.outputs[0].output_value == "https://example.com"
        assert stack.tags[0].value == "sre"
        assert response.next_token is None

    def test_describe_stacks_pagination(self, make_client, make_transport):
        """Test NextToken is followed across pages."""
        transport = make_transport(
            result_xml(
                "DescribeStacks",
                "<Stacks><member><StackName>a</StackName></member></Stacks>"
                "<NextToken>t2</NextToken>",
            ),
            result_xml(
                "DescribeStacks", "<Stacks><member><StackName>b</StackName></member></Stacks>"
            ),
        )
        client = make_client(CloudFormationClient, transport)

        names = [s.stack_name for s in client.get_paginator("describe_stacks").iter_results()]

        assert names == ["a", "b"]
        assert form_params(transport.requests[1])["NextToken"] == "t2"

    def test_already_exists(self, make_client, make_transport):
        """Test modeled errors map to their exception class."""
        transport = make_transport(
            query_error("AlreadyExistsException", "Stack [app] already exists")
        )
        client = make_client(CloudFormationClient, transport)

        with pytest.raises(AlreadyExistsException) as exc_info:
            client.create_stack(stack_name="app", template_body="{}")

        assert exc_info.value.request_id == "req-error"
        assert exc_info.value.message == "Stack [app] already exists"

    def test_validation_error_uses_base_class(self, make_client, make_transport):
        """Test unmodeled errors raise CloudFormationError."""
        transport = make_transport(
            query_error("ValidationError", "Stack with id x does not exist")
        )
        client = make_client(CloudFormationClient, transport)

        with pytest.raises(CloudFormationError) as exc_info:
            client.describe_stacks(stack_name="x")

        assert type(exc_info.value) is CloudFormationError
        assert exc_info.value.error_code == "ValidationError"

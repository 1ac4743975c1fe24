"""Unit tests for service model presence semantics.

Tests cover:
- Snake_case and wire-name construction
- is_set for scalars and collections
- Explicitly assigned empty collections
- Required member validation, nested members included
- Blob members
"""

import pytest

from cumulus.runtime.model import SdkRequest, member
from cumulus.services.dynamodb.models import (
    AttributeValue,
    CreateTableRequest,
    GetItemRequest,
    KeySchemaElement,
)
from cumulus.services.cloudformation.models import UpdateStackRequest


@pytest.mark.unit
class TestConstruction:
    """Test suite for model construction."""

    def test_snake_case_and_wire_names_are_equivalent(self):
        """Test both spellings populate the same members."""
        by_name = GetItemRequest(table_name="users")
        by_alias = GetItemRequest(TableName="users")

        assert by_name.table_name == by_alias.table_name == "users"

    def test_wire_name_uses_alias(self):
        """Test wire names are PascalCase unless overridden."""
        assert GetItemRequest.wire_name("table_name") == "TableName"
        assert AttributeValue.wire_name("bool_") == "BOOL"
        assert UpdateStackRequest.wire_name("notification_arns") == "NotificationARNs"

    def test_unknown_request_member_rejected(self):
        """Test requests reject members they do not define."""
        with pytest.raises(ValueError):
            GetItemRequest(table_name="users", tablename="typo")

    def test_blob_decodes_base64_text(self):
        """Test a Blob member accepts raw bytes or base64 text."""
        assert AttributeValue(b=b"\x00\x01").b == b"\x00\x01"
        assert AttributeValue.model_validate({"B": "AAE="}).b == b"\x00\x01"


@pytest.mark.unit
class TestIsSet:
    """Test suite for is_set."""

    def test_scalar_set_when_not_none(self):
        """Test scalars are set when not None, falsy values included."""
        value = AttributeValue(bool_=False)

        assert value.is_set("bool_")
        assert not value.is_set("s")

    def test_collection_set_when_non_empty(self):
        """Test collections are set only when non-empty."""
        request = GetItemRequest(attributes_to_get=[])

        assert not request.is_set("attributes_to_get")

        request.attributes_to_get = ["id"]

        assert request.is_set("attributes_to_get")

    def test_assigned_empty_collection_is_set(self):
        """Test an explicitly assigned empty L or M is set."""
        assert AttributeValue(l=[]).is_set("l")
        assert AttributeValue(m={}).is_set("m")

    def test_untouched_empty_collection_is_not_set(self):
        """Test a defaulted empty L is not set."""
        value = AttributeValue(s="x")

        assert not value.is_set("l")
        assert not value.is_set("m")

    def test_assignment_after_construction_counts(self):
        """Test assigning an empty list later marks it as set."""
        value = AttributeValue()

        value.l = []

        assert value.is_set("l")

    def test_was_assigned_tracks_explicit_members(self):
        """Test was_assigned distinguishes defaults from assignments."""
        request = UpdateStackRequest(stack_name="app", notification_arns=[])

        assert request.was_assigned("notification_arns")
        assert not request.was_assigned("capabilities")
        assert not request.is_set("notification_arns")


@pytest.mark.unit
class TestMissingRequired:
    """Test suite for missing_required."""

    def test_reports_top_level_members(self):
        """Test unset required members are reported by wire name."""
        missing = GetItemRequest().missing_required()

        assert sorted(missing) == ["Key", "TableName"]

    def test_complete_request_has_nothing_missing(self):
        """Test a complete request passes."""
        request = GetItemRequest(table_name="users", key={"id": AttributeValue(s="1")})

        assert request.missing_required() == []

    def test_reports_nested_members_with_path(self):
        """Test nested structures report their path."""
        request = CreateTableRequest(
            table_name="users",
            attribute_definitions=[{"attribute_name": "id", "attribute_type": "S"}],
            key_schema=[KeySchemaElement(attribute_name="id")],
            provisioned_throughput={"read_capacity_units": 1, "write_capacity_units": 1},
        )

        assert request.missing_required() == ["KeySchema[0].KeyType"]

    def test_member_helper_metadata(self):
        """Test member() records wire metadata on the field."""

        class Sample(SdkRequest):
            values: list = member(alias="Value", flattened=True, default_factory=list)

        field = Sample.model_fields["values"]

        assert field.alias == "Value"
        assert field.json_schema_extra == {"flattened": True}

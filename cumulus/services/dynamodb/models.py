"""DynamoDB request, response and structure models."""

from datetime import datetime
from typing import ClassVar, Dict, FrozenSet, List, Optional

from cumulus.runtime.model import Blob, SdkRequest, SdkResponse, ServiceModel, member


class AttributeValue(ServiceModel):
    """A typed DynamoDB value. Exactly one member is expected to be set.

    An explicitly assigned empty `m` or `l` is sent as `{}` / `[]`;
    an untouched one is omitted.
    """

    assigned_members: ClassVar[FrozenSet[str]] = frozenset({"m", "l"})

    s: Optional[str] = member(alias="S")
    n: Optional[str] = member(alias="N")
    b: Optional[Blob] = member(alias="B")
    ss: List[str] = member(alias="SS", default_factory=list)
    ns: List[str] = member(alias="NS", default_factory=list)
    bs: List[Blob] = member(alias="BS", default_factory=list)
    m: Dict[str, "AttributeValue"] = member(alias="M", default_factory=dict)
    l: List["AttributeValue"] = member(alias="L", default_factory=list)
    null: Optional[bool] = member(alias="NULL")
    bool_: Optional[bool] = member(alias="BOOL")


AttributeValue.model_rebuild()

Key = Dict[str, AttributeValue]
AttributeMap = Dict[str, AttributeValue]


class KeySchemaElement(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"attribute_name", "key_type"})

    attribute_name: Optional[str] = None
    key_type: Optional[str] = None


class AttributeDefinition(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"attribute_name", "attribute_type"}
    )

    attribute_name: Optional[str] = None
    attribute_type: Optional[str] = None


class ProvisionedThroughput(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"read_capacity_units", "write_capacity_units"}
    )

    read_capacity_units: Optional[int] = None
    write_capacity_units: Optional[int] = None


class ProvisionedThroughputDescription(ServiceModel):
    last_increase_date_time: Optional[datetime] = None
    last_decrease_date_time: Optional[datetime] = None
    number_of_decreases_today: Optional[int] = None
    read_capacity_units: Optional[int] = None
    write_capacity_units: Optional[int] = None


class Projection(ServiceModel):
    projection_type: Optional[str] = None
    non_key_attributes: List[str] = member(default_factory=list)


class LocalSecondaryIndex(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"index_name", "key_schema", "projection"}
    )

    index_name: Optional[str] = None
    key_schema: List[KeySchemaElement] = member(default_factory=list)
    projection: Optional[Projection] = None


class GlobalSecondaryIndex(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"index_name", "key_schema", "projection", "provisioned_throughput"}
    )

    index_name: Optional[str] = None
    key_schema: List[KeySchemaElement] = member(default_factory=list)
    projection: Optional[Projection] = None
    provisioned_throughput: Optional[ProvisionedThroughput] = None


class LocalSecondaryIndexDescription(ServiceModel):
    index_name: Optional[str] = None
    key_schema: List[KeySchemaElement] = member(default_factory=list)
    projection: Optional[Projection] = None
    index_size_bytes: Optional[int] = None
    item_count: Optional[int] = None


class GlobalSecondaryIndexDescription(ServiceModel):
    index_name: Optional[str] = None
    key_schema: List[KeySchemaElement] = member(default_factory=list)
    projection: Optional[Projection] = None
    index_status: Optional[str] = None
    provisioned_throughput: Optional[ProvisionedThroughputDescription] = None
    index_size_bytes: Optional[int] = None
    item_count: Optional[int] = None


class TableDescription(ServiceModel):
    attribute_definitions: List[AttributeDefinition] = member(default_factory=list)
    table_name: Optional[str] = None
    key_schema: List[KeySchemaElement] = member(default_factory=list)
    table_status: Optional[str] = None
    creation_date_time: Optional[datetime] = None
    provisioned_throughput: Optional[ProvisionedThroughputDescription] = None
    table_size_bytes: Optional[int] = None
    item_count: Optional[int] = None
    local_secondary_indexes: List[LocalSecondaryIndexDescription] = member(
        default_factory=list
    )
    global_secondary_indexes: List[GlobalSecondaryIndexDescription] = member(
        default_factory=list
    )


class Condition(ServiceModel):
    """A comparison used by key conditions and query/scan filters."""

    required_members: ClassVar[FrozenSet[str]] = frozenset({"comparison_operator"})

    attribute_value_list: List[AttributeValue] = member(default_factory=list)
    comparison_operator: Optional[str] = None


class ExpectedAttributeValue(ServiceModel):
    value: Optional[AttributeValue] = None
    exists: Optional[bool] = None
    comparison_operator: Optional[str] = None
    attribute_value_list: List[AttributeValue] = member(default_factory=list)


class AttributeValueUpdate(ServiceModel):
    value: Optional[AttributeValue] = None
    action: Optional[str] = None


class ConsumedCapacity(ServiceModel):
    table_name: Optional[str] = None
    capacity_units: Optional[float] = None


class ItemCollectionMetrics(ServiceModel):
    item_collection_key: AttributeMap = member(default_factory=dict)
    size_estimate_range_gb: List[float] = member(
        alias="SizeEstimateRangeGB", default_factory=list
    )


class KeysAndAttributes(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"keys"})

    keys: List[Key] = member(default_factory=list)
    attributes_to_get: List[str] = member(default_factory=list)
    consistent_read: Optional[bool] = None
    projection_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)


class PutRequest(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"item"})

    item: AttributeMap = member(default_factory=dict)


class DeleteRequest(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"key"})

    key: Key = member(default_factory=dict)


class WriteRequest(ServiceModel):
    put_request: Optional[PutRequest] = None
    delete_request: Optional[DeleteRequest] = None


class UpdateGlobalSecondaryIndexAction(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"index_name", "provisioned_throughput"}
    )

    index_name: Optional[str] = None
    provisioned_throughput: Optional[ProvisionedThroughput] = None


class GlobalSecondaryIndexUpdate(ServiceModel):
    update: Optional[UpdateGlobalSecondaryIndexAction] = None


# Operations


class BatchGetItemRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"request_items"})

    request_items: Dict[str, KeysAndAttributes] = member(default_factory=dict)
    return_consumed_capacity: Optional[str] = None


class BatchGetItemResponse(SdkResponse):
    responses: Dict[str, List[AttributeMap]] = member(default_factory=dict)
    unprocessed_keys: Dict[str, KeysAndAttributes] = member(default_factory=dict)
    consumed_capacity: List[ConsumedCapacity] = member(default_factory=list)


class BatchWriteItemRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"request_items"})

    request_items: Dict[str, List[WriteRequest]] = member(default_factory=dict)
    return_consumed_capacity: Optional[str] = None
    return_item_collection_metrics: Optional[str] = None


class BatchWriteItemResponse(SdkResponse):
    unprocessed_items: Dict[str, List[WriteRequest]] = member(default_factory=dict)
    item_collection_metrics: Dict[str, List[ItemCollectionMetrics]] = member(
        default_factory=dict
    )
    consumed_capacity: List[ConsumedCapacity] = member(default_factory=list)


class CreateTableRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"attribute_definitions", "table_name", "key_schema", "provisioned_throughput"}
    )

    attribute_definitions: List[AttributeDefinition] = member(default_factory=list)
    table_name: Optional[str] = None
    key_schema: List[KeySchemaElement] = member(default_factory=list)
    local_secondary_indexes: List[LocalSecondaryIndex] = member(default_factory=list)
    global_secondary_indexes: List[GlobalSecondaryIndex] = member(default_factory=list)
    provisioned_throughput: Optional[ProvisionedThroughput] = None


class CreateTableResponse(SdkResponse):
    table_description: Optional[TableDescription] = None


class DeleteItemRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name", "key"})

    table_name: Optional[str] = None
    key: Key = member(default_factory=dict)
    expected: Dict[str, ExpectedAttributeValue] = member(default_factory=dict)
    conditional_operator: Optional[str] = None
    return_values: Optional[str] = None
    return_consumed_capacity: Optional[str] = None
    return_item_collection_metrics: Optional[str] = None
    condition_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)
    expression_attribute_values: AttributeMap = member(default_factory=dict)


class DeleteItemResponse(SdkResponse):
    attributes: AttributeMap = member(default_factory=dict)
    consumed_capacity: Optional[ConsumedCapacity] = None
    item_collection_metrics: Optional[ItemCollectionMetrics] = None


class DeleteTableRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name"})

    table_name: Optional[str] = None


class DeleteTableResponse(SdkResponse):
    table_description: Optional[TableDescription] = None


class DescribeTableRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name"})

    table_name: Optional[str] = None


class DescribeTableResponse(SdkResponse):
    table: Optional[TableDescription] = None


class GetItemRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name", "key"})

    table_name: Optional[str] = None
    key: Key = member(default_factory=dict)
    attributes_to_get: List[str] = member(default_factory=list)
    consistent_read: Optional[bool] = None
    return_consumed_capacity: Optional[str] = None
    projection_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)


class GetItemResponse(SdkResponse):
    item: AttributeMap = member(default_factory=dict)
    consumed_capacity: Optional[ConsumedCapacity] = None


class ListTablesRequest(SdkRequest):
    exclusive_start_table_name: Optional[str] = None
    limit: Optional[int] = None


class ListTablesResponse(SdkResponse):
    table_names: List[str] = member(default_factory=list)
    last_evaluated_table_name: Optional[str] = None


class PutItemRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name", "item"})

    table_name: Optional[str] = None
    item: AttributeMap = member(default_factory=dict)
    expected: Dict[str, ExpectedAttributeValue] = member(default_factory=dict)
    return_values: Optional[str] = None
    return_consumed_capacity: Optional[str] = None
    return_item_collection_metrics: Optional[str] = None
    conditional_operator: Optional[str] = None
    condition_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)
    expression_attribute_values: AttributeMap = member(default_factory=dict)


class PutItemResponse(SdkResponse):
    attributes: AttributeMap = member(default_factory=dict)
    consumed_capacity: Optional[ConsumedCapacity] = None
    item_collection_metrics: Optional[ItemCollectionMetrics] = None


class QueryRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name"})

    table_name: Optional[str] = None
    index_name: Optional[str] = None
    select: Optional[str] = None
    attributes_to_get: List[str] = member(default_factory=list)
    limit: Optional[int] = None
    consistent_read: Optional[bool] = None
    key_conditions: Dict[str, Condition] = member(default_factory=dict)
    query_filter: Dict[str, Condition] = member(default_factory=dict)
    conditional_operator: Optional[str] = None
    scan_index_forward: Optional[bool] = None
    exclusive_start_key: Key = member(default_factory=dict)
    return_consumed_capacity: Optional[str] = None
    projection_expression: Optional[str] = None
    filter_expression: Optional[str] = None
    key_condition_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)
    expression_attribute_values: AttributeMap = member(default_factory=dict)


class QueryResponse(SdkResponse):
    items: List[AttributeMap] = member(default_factory=list)
    count: Optional[int] = None
    scanned_count: Optional[int] = None
    last_evaluated_key: Key = member(default_factory=dict)
    consumed_capacity: Optional[ConsumedCapacity] = None


class ScanRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name"})

    table_name: Optional[str] = None
    index_name: Optional[str] = None
    attributes_to_get: List[str] = member(default_factory=list)
    limit: Optional[int] = None
    select: Optional[str] = None
    scan_filter: Dict[str, Condition] = member(default_factory=dict)
    conditional_operator: Optional[str] = None
    exclusive_start_key: Key = member(default_factory=dict)
    return_consumed_capacity: Optional[str] = None
    total_segments: Optional[int] = None
    segment: Optional[int] = None
    projection_expression: Optional[str] = None
    filter_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)
    expression_attribute_values: AttributeMap = member(default_factory=dict)


class ScanResponse(SdkResponse):
    items: List[AttributeMap] = member(default_factory=list)
    count: Optional[int] = None
    scanned_count: Optional[int] = None
    last_evaluated_key: Key = member(default_factory=dict)
    consumed_capacity: Optional[ConsumedCapacity] = None


class UpdateItemRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name", "key"})

    table_name: Optional[str] = None
    key: Key = member(default_factory=dict)
    attribute_updates: Dict[str, AttributeValueUpdate] = member(default_factory=dict)
    expected: Dict[str, ExpectedAttributeValue] = member(default_factory=dict)
    conditional_operator: Optional[str] = None
    return_values: Optional[str] = None
    return_consumed_capacity: Optional[str] = None
    return_item_collection_metrics: Optional[str] = None
    update_expression: Optional[str] = None
    condition_expression: Optional[str] = None
    expression_attribute_names: Dict[str, str] = member(default_factory=dict)
    expression_attribute_values: AttributeMap = member(default_factory=dict)


class UpdateItemResponse(SdkResponse):
    attributes: AttributeMap = member(default_factory=dict)
    consumed_capacity: Optional[ConsumedCapacity] = None
    item_collection_metrics: Optional[ItemCollectionMetrics] = None


class UpdateTableRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"table_name"})

    table_name: Optional[str] = None
    provisioned_throughput: Optional[ProvisionedThroughput] = None
    global_secondary_index_updates: List[GlobalSecondaryIndexUpdate] = member(
        default_factory=list
    )


class UpdateTableResponse(SdkResponse):
    table_description: Optional[TableDescription] = None

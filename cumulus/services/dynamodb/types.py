"""Conversion between plain Python values and DynamoDB attribute values.

Uses boto3's TypeSerializer/TypeDeserializer, so the Python side follows
boto3's conventions: numbers are `Decimal`, binary values come back as
`boto3.dynamodb.types.Binary` and string/number/binary sets are Python sets.

Usage:
    from cumulus.services.dynamodb.types import from_attribute_map, to_attribute_map

    client.put_item(table_name="users", item=to_attribute_map({"id": "42", "age": 7}))
    user = from_attribute_map(client.get_item(table_name="users", key=key).item)
"""

from typing import Any, Dict, Mapping

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from cumulus.services.dynamodb.models import AttributeValue

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def to_attribute_value(value: Any) -> AttributeValue:
    """Convert a Python value to an AttributeValue.

    Raises:
        TypeError: For unsupported types, floats included (use Decimal).
    """
    return AttributeValue.model_validate(_serializer.serialize(value))


def to_attribute_map(item: Mapping[str, Any]) -> Dict[str, AttributeValue]:
    return {name: to_attribute_value(value) for name, value in item.items()}


def _raw(value: AttributeValue) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for name, field, member in value.set_members():
        if name == "m":
            member = {key: _raw(item) for key, item in member.items()}
        elif name == "l":
            member = [_raw(item) for item in member]
        raw[field.alias or name] = member
    return raw


def from_attribute_value(value: AttributeValue) -> Any:
    """Convert an AttributeValue to a Python value."""
    return _deserializer.deserialize(_raw(value))


def from_attribute_map(item: Mapping[str, AttributeValue]) -> Dict[str, Any]:
    return {name: from_attribute_value(value) for name, value in item.items()}

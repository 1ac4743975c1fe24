"""Base models for service requests, responses and structures.

Every wire shape is a pydantic model. Attribute names are snake_case and
wire names are PascalCase aliases, so both spellings work at construction:

    GetItemRequest(table_name="users", key={...})
    GetItemRequest(TableName="users", Key={...})

Presence semantics decide what reaches the wire. A member is *set* when a
scalar is not None, or a collection is non-empty. Members listed in
`assigned_members` also count as set when an empty collection was assigned
explicitly.
"""

import base64
from types import UnionType
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
)

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_pascal
from pydantic.fields import FieldInfo


def _decode_blob(value: Any) -> Any:
    if isinstance(value, str):
        return base64.b64decode(value)
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    return value


def _encode_blob(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


# Bytes in Python, base64 text on the wire. Strings passed in are treated
# as base64 wire text and decoded.
Blob = Annotated[
    bytes,
    BeforeValidator(_decode_blob),
    PlainSerializer(_encode_blob, return_type=str, when_used="json"),
]


def member(
    default: Any = None,
    *,
    alias: Optional[str] = None,
    default_factory: Any = None,
    flattened: bool = False,
    location_name: Optional[str] = None,
    item_name: Optional[str] = None,
    map_key: Optional[str] = None,
    map_value: Optional[str] = None,
    location: Optional[str] = None,
    description: Optional[str] = None,
) -> Any:
    """Declare a model member that carries wire-format metadata.

    Args:
        default: Default value for scalar members.
        alias: Wire name when it is not the PascalCase form of the attribute.
        default_factory: Factory for collection members.
        flattened: Query/XML lists and maps without a wrapping element.
        location_name: Response element name when it differs from the alias.
        item_name: Element name of list items.
        map_key: Element or parameter name of map keys.
        map_value: Element or parameter name of map values.
        location: REST binding of the member: "uri", "header" or "querystring".
        description: Human readable description.
    """
    extra = {
        key: value
        for key, value in (
            ("flattened", flattened),
            ("location_name", location_name),
            ("item_name", item_name),
            ("map_key", map_key),
            ("map_value", map_value),
            ("location", location),
        )
        if value
    }
    kwargs: Dict[str, Any] = {"json_schema_extra": extra or None}
    if alias:
        kwargs["alias"] = alias
    if description:
        kwargs["description"] = description
    if default_factory is not None:
        return Field(default_factory=default_factory, **kwargs)
    return Field(default, **kwargs)


def member_metadata(field: FieldInfo) -> Dict[str, Any]:
    """Return the wire metadata declared with `member()`."""
    extra = field.json_schema_extra
    return extra if isinstance(extra, dict) else {}


def unwrap_type(annotation: Any) -> Any:
    """Strip Optional[...] and Annotated[...] from a type annotation."""
    origin = get_origin(annotation)
    if origin is Annotated:
        return unwrap_type(get_args(annotation)[0])
    if origin in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return unwrap_type(args[0])
    return annotation


def is_list_type(annotation: Any) -> bool:
    return get_origin(annotation) in (list, List)


def is_dict_type(annotation: Any) -> bool:
    return get_origin(annotation) in (dict, Dict)


def is_model_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, ServiceModel)


def item_type(annotation: Any) -> Any:
    """Element type of a List[...] or value type of a Dict[...] annotation."""
    args = get_args(annotation)
    if not args:
        return Any
    return unwrap_type(args[-1])


class ServiceModel(BaseModel):
    """Base for every request, response and nested structure."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    # Members for which an explicitly assigned empty collection is sent
    assigned_members: ClassVar[FrozenSet[str]] = frozenset()
    # Members that must be set before the request is marshalled
    required_members: ClassVar[FrozenSet[str]] = frozenset()
    # Members that never appear on the wire
    non_wire_members: ClassVar[FrozenSet[str]] = frozenset()

    def is_set(self, name: str) -> bool:
        """Whether the member `name` has a value that goes on the wire."""
        value = getattr(self, name)
        if value is None:
            return False
        if isinstance(value, (list, dict)):
            if value:
                return True
            return name in self.assigned_members and self.was_assigned(name)
        return True

    def was_assigned(self, name: str) -> bool:
        """Whether the caller assigned `name`, even to an empty value."""
        return name in self.model_fields_set

    @classmethod
    def wire_name(cls, name: str) -> str:
        field = cls.model_fields[name]
        return field.alias or name

    @classmethod
    def wire_members(cls) -> Iterator[Tuple[str, FieldInfo]]:
        """Yield (attribute name, field) for every member that has a wire form."""
        for name, field in cls.model_fields.items():
            if name not in cls.non_wire_members:
                yield name, field

    def set_members(self) -> Iterator[Tuple[str, FieldInfo, Any]]:
        """Yield (attribute name, field, value) for every set wire member."""
        for name, field in self.wire_members():
            if self.is_set(name):
                yield name, field, getattr(self, name)

    def missing_required(self, path: str = "") -> List[str]:
        """Wire paths of required members that are not set, nested ones included."""
        missing: List[str] = []
        for name, _ in self.wire_members():
            wire = f"{path}{self.wire_name(name)}"
            if name in self.required_members and not self.is_set(name):
                missing.append(wire)
                continue
            value = getattr(self, name)
            if isinstance(value, ServiceModel):
                missing.extend(value.missing_required(f"{wire}."))
            elif isinstance(value, list):
                for index, item in enumerate(value):
                    if isinstance(item, ServiceModel):
                        missing.extend(item.missing_required(f"{wire}[{index}]."))
            elif isinstance(value, dict):
                for key, item in value.items():
                    if isinstance(item, ServiceModel):
                        missing.extend(item.missing_required(f"{wire}[{key}]."))
        return missing


class SdkRequest(ServiceModel):
    """Base for operation requests. Unknown members are rejected."""

    model_config = ConfigDict(extra="forbid")


class ResponseMetadata(BaseModel):
    """Metadata returned alongside every response."""

    request_id: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)


class SdkResponse(ServiceModel):
    """Base for operation responses. Unknown wire members are ignored."""

    non_wire_members: ClassVar[FrozenSet[str]] = frozenset(
        {"response_metadata", "http_status_code", "content_length"}
    )

    response_metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
    http_status_code: Optional[int] = None
    content_length: Optional[int] = None

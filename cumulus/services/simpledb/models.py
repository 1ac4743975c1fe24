"""SimpleDB request, response and structure models.

SimpleDB lists are flattened: `Attribute.1.Name`, `Item.2.ItemName` on the
wire and repeated `<Attribute>` / `<Item>` elements in responses.
"""

from typing import ClassVar, FrozenSet, List, Optional

from cumulus.runtime.model import SdkRequest, SdkResponse, ServiceModel, member


class Attribute(ServiceModel):
    name: Optional[str] = None
    alternate_name_encoding: Optional[str] = None
    value: Optional[str] = None
    alternate_value_encoding: Optional[str] = None


class ReplaceableAttribute(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"name", "value"})

    name: Optional[str] = None
    value: Optional[str] = None
    replace: Optional[bool] = None


class UpdateCondition(ServiceModel):
    name: Optional[str] = None
    value: Optional[str] = None
    exists: Optional[bool] = None


class DeletableItem(ServiceModel):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"name"})

    name: Optional[str] = member(alias="ItemName")
    attributes: List[Attribute] = member(
        alias="Attribute", flattened=True, default_factory=list
    )


class Item(ServiceModel):
    name: Optional[str] = None
    alternate_name_encoding: Optional[str] = None
    attributes: List[Attribute] = member(
        alias="Attribute", flattened=True, default_factory=list
    )


# Operations


class CreateDomainRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"domain_name"})

    domain_name: Optional[str] = None


class CreateDomainResponse(SdkResponse):
    pass


class DeleteDomainRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"domain_name"})

    domain_name: Optional[str] = None


class DeleteDomainResponse(SdkResponse):
    pass


class ListDomainsRequest(SdkRequest):
    max_number_of_domains: Optional[int] = None
    next_token: Optional[str] = None


class ListDomainsResponse(SdkResponse):
    domain_names: List[str] = member(
        alias="DomainName", flattened=True, default_factory=list
    )
    next_token: Optional[str] = None


class PutAttributesRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset(
        {"domain_name", "item_name", "attributes"}
    )

    domain_name: Optional[str] = None
    item_name: Optional[str] = None
    attributes: List[ReplaceableAttribute] = member(
        alias="Attribute", flattened=True, default_factory=list
    )
    expected: Optional[UpdateCondition] = None


class PutAttributesResponse(SdkResponse):
    pass


class GetAttributesRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"domain_name", "item_name"})

    domain_name: Optional[str] = None
    item_name: Optional[str] = None
    attribute_names: List[str] = member(
        alias="AttributeName", flattened=True, default_factory=list
    )
    consistent_read: Optional[bool] = None


class GetAttributesResponse(SdkResponse):
    attributes: List[Attribute] = member(
        alias="Attribute", flattened=True, default_factory=list
    )


class BatchDeleteAttributesRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"domain_name", "items"})

    domain_name: Optional[str] = None
    items: List[DeletableItem] = member(alias="Item", flattened=True, default_factory=list)


class BatchDeleteAttributesResponse(SdkResponse):
    pass


class SelectRequest(SdkRequest):
    required_members: ClassVar[FrozenSet[str]] = frozenset({"select_expression"})

    select_expression: Optional[str] = None
    next_token: Optional[str] = None
    consistent_read: Optional[bool] = None


class SelectResponse(SdkResponse):
    items: List[Item] = member(alias="Item", flattened=True, default_factory=list)
    next_token: Optional[str] = None

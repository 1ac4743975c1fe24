"""AWS query protocol (CloudFormation, Elastic Beanstalk, SNS, SimpleDB)."""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

from cumulus.runtime.model import (
    ResponseMetadata,
    SdkRequest,
    SdkResponse,
    ServiceModel,
    member_metadata,
)
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.protocols.base import ErrorDetails, Protocol, format_scalar
from cumulus.runtime.protocols.xmlshape import (
    XmlShapeReader,
    find_child,
    local_name,
    parse_document,
    parse_xml_error,
)
from cumulus.runtime.request import FORM_CONTENT_TYPE, Request
from cumulus.runtime.response import WebResponseData


class QueryProtocol(Protocol):
    """Form-encoded `Action`/`Version` requests with XML responses.

    Request members become parameters: lists as `Name.member.N` (or
    `Name.N` when flattened), maps as `Name.entry.N.key` / `.value`,
    nested structures as `Name.Member`.
    """

    default_item_name = "member"

    def __init__(self, service_name: str, api_version: str):
        super().__init__(service_name)
        self.api_version = api_version
        self.reader = self.create_reader()

    def create_reader(self) -> XmlShapeReader:
        return XmlShapeReader(default_item_name=self.default_item_name)

    def marshall(self, operation: OperationModel, request: SdkRequest) -> Request:
        params: Dict[str, str] = {"Action": operation.name, "Version": self.api_version}
        self.serialize_structure(params, request, "")
        return Request(
            original_request=request,
            service_name=self.service_name,
            operation_name=operation.name,
            http_method="POST",
            resource_path="/",
            parameters=params,
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def parameter_name(self, name: str, field: Any) -> str:
        return field.alias or name

    def serialize_structure(
        self, params: Dict[str, str], model: ServiceModel, prefix: str
    ) -> None:
        for name, field, value in model.set_members():
            key = f"{prefix}{self.parameter_name(name, field)}"
            self.serialize_value(params, value, key, member_metadata(field))

    def serialize_value(
        self, params: Dict[str, str], value: Any, key: str, metadata: Dict[str, Any]
    ) -> None:
        if isinstance(value, ServiceModel):
            self.serialize_structure(params, value, f"{key}.")
        elif isinstance(value, list):
            self.serialize_list(params, value, key, metadata)
        elif isinstance(value, dict):
            self.serialize_map(params, value, key, metadata)
        elif value is not None:
            params[key] = format_scalar(value)

    def serialize_list(
        self, params: Dict[str, str], values: list, key: str, metadata: Dict[str, Any]
    ) -> None:
        if not values:
            params[key] = ""
            return
        if metadata.get("flattened"):
            prefix = key
        else:
            prefix = f"{key}.{metadata.get('item_name', self.default_item_name)}"
        for index, item in enumerate(values, 1):
            self.serialize_value(params, item, f"{prefix}.{index}", {})

    def serialize_map(
        self, params: Dict[str, str], values: dict, key: str, metadata: Dict[str, Any]
    ) -> None:
        key_name = metadata.get("map_key", "key")
        value_name = metadata.get("map_value", "value")
        prefix = key if metadata.get("flattened") else f"{key}.entry"
        for index, (entry_key, entry_value) in enumerate(values.items(), 1):
            params[f"{prefix}.{index}.{key_name}"] = str(entry_key)
            self.serialize_value(
                params, entry_value, f"{prefix}.{index}.{value_name}", {}
            )

    def result_element(
        self, root: ET.Element, operation: OperationModel
    ) -> Optional[ET.Element]:
        return find_child(root, operation.result_element)

    def read_metadata(
        self, root: Optional[ET.Element], response: WebResponseData
    ) -> ResponseMetadata:
        request_id = None
        metadata: Dict[str, str] = {}
        container = find_child(root, "ResponseMetadata") if root is not None else None
        if container is not None:
            for child in container:
                name = local_name(child.tag)
                if name == "RequestId":
                    request_id = child.text
                else:
                    metadata[name] = child.text or ""
        return ResponseMetadata(
            request_id=request_id or response.header("x-amzn-RequestId"),
            metadata=metadata,
        )

    def unmarshall(
        self, operation: OperationModel, response: WebResponseData
    ) -> SdkResponse:
        root = parse_document(response.content)
        result_element = self.result_element(root, operation) if root is not None else None
        data = (
            self.reader.read_structure(result_element, operation.output_shape)
            if result_element is not None
            else {}
        )
        result = operation.output_shape.model_validate(data)
        result.response_metadata = self.read_metadata(root, response)
        return result

    def parse_error(self, response: WebResponseData) -> ErrorDetails:
        return parse_xml_error(response)

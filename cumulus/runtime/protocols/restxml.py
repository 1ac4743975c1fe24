"""REST-XML protocol (S3)."""

import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

from cumulus.runtime.exceptions import ParamValidationError
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
    parse_document,
    parse_xml_error,
)
from cumulus.runtime.request import Request
from cumulus.runtime.response import WebResponseData

_LABEL = re.compile(r"\{([^}]+)\}")


class RestXmlProtocol(Protocol):
    """HTTP method and URI per operation, XML bodies.

    Generic marshalling binds members declared with `location="uri"`,
    `"header"` or `"querystring"`. Operations with an XML request body
    register a dedicated marshaller that builds on `marshall`.

    Args:
        service_name: Service name used in wire requests
        api_version: API version
        namespace: XML namespace of request bodies
    """

    def __init__(self, service_name: str, api_version: str, namespace: Optional[str] = None):
        super().__init__(service_name)
        self.api_version = api_version
        self.namespace = namespace
        self.reader = XmlShapeReader()

    def marshall(self, operation: OperationModel, request: SdkRequest) -> Request:
        path, _, query = operation.request_uri.partition("?")
        wire = Request(
            original_request=request,
            service_name=self.service_name,
            operation_name=operation.name,
            http_method=operation.http_method,
        )
        labels: Dict[str, str] = {}

        for name, field, value in request.set_members():
            metadata = member_metadata(field)
            location = metadata.get("location")
            wire_name = metadata.get("location_name") or field.alias or name
            if location == "uri":
                labels[wire_name] = format_scalar(value)
            elif location == "header":
                wire.headers[wire_name] = format_scalar(value)
            elif location == "querystring":
                wire.parameters[wire_name] = format_scalar(value)

        # Labels stay unencoded here; Request.encoded_path encodes the path once.
        def substitute(match: "re.Match[str]") -> str:
            label = match.group(1)
            greedy = label.endswith("+")
            value = labels.get(label.rstrip("+"))
            if value is None:
                raise ParamValidationError(operation.name, [label.rstrip("+")])
            if not greedy and "/" in value:
                raise ParamValidationError(
                    operation.name,
                    [label],
                    reason=f"{operation.name}: URI member {label} cannot contain '/'",
                )
            return value

        wire.resource_path = _LABEL.sub(substitute, path)
        for flag in filter(None, query.split("&")):
            key, sep, value = flag.partition("=")
            wire.subresources[key] = value if sep else None
        wire.use_query_string = True
        return wire

    def build_xml(self, root_name: str, model: ServiceModel) -> bytes:
        """Serialize the body members of `model` under `root_name`."""
        root = ET.Element(root_name)
        if self.namespace:
            root.set("xmlns", self.namespace)
        self._append_members(root, model)
        return ET.tostring(root, encoding="utf-8", xml_declaration=False)

    def _append_members(self, parent: ET.Element, model: ServiceModel) -> None:
        for name, field, value in model.set_members():
            metadata = member_metadata(field)
            if metadata.get("location"):
                continue
            tag = metadata.get("location_name") or field.alias or name
            self._append_value(parent, tag, value, metadata)

    def _append_value(
        self, parent: ET.Element, tag: str, value: Any, metadata: Dict[str, Any]
    ) -> None:
        if isinstance(value, list):
            container = parent if metadata.get("flattened") else ET.SubElement(parent, tag)
            item_tag = tag if metadata.get("flattened") else metadata.get("item_name", "member")
            for item in value:
                self._append_value(container, item_tag, item, {})
        elif isinstance(value, ServiceModel):
            self._append_members(ET.SubElement(parent, tag), value)
        else:
            ET.SubElement(parent, tag).text = format_scalar(value)

    def unmarshall(
        self, operation: OperationModel, response: WebResponseData
    ) -> SdkResponse:
        root = parse_document(response.content)
        data = (
            self.reader.read_structure(root, operation.output_shape)
            if root is not None
            else {}
        )
        for name, field in operation.output_shape.wire_members():
            metadata = member_metadata(field)
            if metadata.get("location") == "header":
                header = response.header(metadata.get("location_name") or field.alias or name)
                if header is not None:
                    data[name] = header
        result = operation.output_shape.model_validate(data)

        metadata_values = {}
        host_id = response.header("x-amz-id-2")
        if host_id:
            metadata_values["HostId"] = host_id
        result.response_metadata = ResponseMetadata(
            request_id=response.header("x-amz-request-id"),
            metadata=metadata_values,
        )
        return result

    def parse_error(self, response: WebResponseData) -> ErrorDetails:
        return parse_xml_error(response)

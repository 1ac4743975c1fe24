"""XML reading shared by the query, EC2 and REST-XML protocols.

`XmlShapeReader` converts an element into a dict keyed by model attribute
names, following the target model's annotations: nested structures,
wrapped and flattened lists, maps and scalars.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Type

from cumulus.runtime.model import (
    ServiceModel,
    is_dict_type,
    is_list_type,
    is_model_type,
    item_type,
    member_metadata,
    unwrap_type,
)
from cumulus.runtime.protocols.base import ErrorDetails, error_type_for, fallback_error_code
from cumulus.runtime.response import WebResponseData

REQUEST_ID_ELEMENTS = ("RequestId", "RequestID", "requestId")


def local_name(tag: Any) -> str:
    """Tag name without its `{namespace}` prefix."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def find_children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if local_name(child.tag) == name]


def child_text(element: ET.Element, name: str) -> Optional[str]:
    child = find_child(element, name)
    return child.text if child is not None else None


def parse_document(content: bytes) -> Optional[ET.Element]:
    if not content or not content.strip():
        return None
    return ET.fromstring(content)


class XmlShapeReader:
    """Reads XML elements into dicts shaped like a model.

    Args:
        default_item_name: Element name of items in wrapped lists
        lower_camel: Element names are the lower-camel form of wire names
    """

    def __init__(self, default_item_name: str = "member", lower_camel: bool = False):
        self.default_item_name = default_item_name
        self.lower_camel = lower_camel

    def element_name(self, name: str, field: Any) -> str:
        metadata = member_metadata(field)
        if metadata.get("location_name"):
            return metadata["location_name"]
        wire = field.alias or name
        if self.lower_camel:
            return wire[:1].lower() + wire[1:]
        return wire

    def read_structure(
        self, element: ET.Element, model_cls: Type[ServiceModel]
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for name, field in model_cls.wire_members():
            metadata = member_metadata(field)
            if metadata.get("location") in ("header", "uri", "querystring"):
                continue
            wire = self.element_name(name, field)
            annotation = unwrap_type(field.annotation)

            if is_list_type(annotation):
                value = self._read_list(element, wire, annotation, metadata)
            elif is_dict_type(annotation):
                value = self._read_map(element, wire, annotation, metadata)
            else:
                child = find_child(element, wire)
                value = None if child is None else self.read_value(child, annotation)

            if value is not None:
                data[name] = value
        return data

    def _read_list(
        self, element: ET.Element, wire: str, annotation: Any, metadata: Dict[str, Any]
    ) -> Optional[List[Any]]:
        if metadata.get("flattened"):
            items = find_children(element, wire)
        else:
            container = find_child(element, wire)
            if container is None:
                return None
            items = find_children(
                container, metadata.get("item_name", self.default_item_name)
            )
        value_type = item_type(annotation)
        return [self.read_value(item, value_type) for item in items]

    def _read_map(
        self, element: ET.Element, wire: str, annotation: Any, metadata: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        key_name = metadata.get("map_key", "key")
        value_name = metadata.get("map_value", "value")
        if metadata.get("flattened"):
            entries = find_children(element, wire)
        else:
            container = find_child(element, wire)
            if container is None:
                return None
            entries = find_children(container, "entry")

        value_type = item_type(annotation)
        result: Dict[str, Any] = {}
        for entry in entries:
            key = child_text(entry, key_name)
            if key is None:
                continue
            value_element = find_child(entry, value_name)
            result[key] = (
                self.read_value(value_element, value_type)
                if value_element is not None
                else None
            )
        return result

    def read_value(self, element: ET.Element, annotation: Any) -> Any:
        if is_model_type(annotation):
            return self.read_structure(element, annotation)
        if is_list_type(annotation):
            value_type = item_type(annotation)
            return [self.read_value(child, value_type) for child in element]
        text = element.text
        if annotation is str:
            return text or ""
        if text is None or not text.strip():
            return None
        return text.strip()


def parse_xml_error(response: WebResponseData) -> ErrorDetails:
    """Parse `<Error>` details from query, EC2, SimpleDB and S3 error bodies."""
    code = message = declared_type = request_id = None
    try:
        root = parse_document(response.content)
    except ET.ParseError:
        root = None

    if root is not None:
        error = root if local_name(root.tag) == "Error" else None
        if error is None:
            error = next(
                (el for el in root.iter() if local_name(el.tag) == "Error"), None
            )
        if error is not None:
            code = child_text(error, "Code")
            message = child_text(error, "Message")
            declared_type = child_text(error, "Type")
        request_id = next(
            (el.text for el in root.iter() if local_name(el.tag) in REQUEST_ID_ELEMENTS),
            None,
        )

    return ErrorDetails(
        code=code or fallback_error_code(response),
        message=message,
        error_type=error_type_for(response, declared_type),
        request_id=request_id
        or response.header("x-amz-request-id")
        or response.header("x-amzn-RequestId"),
    )

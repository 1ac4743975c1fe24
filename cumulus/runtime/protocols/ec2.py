"""EC2 protocol: query requests with EC2 list naming and lower-camel XML."""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

from cumulus.runtime.model import ResponseMetadata
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.protocols.query import QueryProtocol
from cumulus.runtime.protocols.xmlshape import XmlShapeReader, child_text
from cumulus.runtime.response import WebResponseData


class Ec2Protocol(QueryProtocol):
    """Lists are sent as `Name.N`; responses have no result wrapper and
    use lower-camel element names with `<item>` list entries."""

    default_item_name = "item"

    def create_reader(self) -> XmlShapeReader:
        return XmlShapeReader(default_item_name="item", lower_camel=True)

    def serialize_list(
        self, params: Dict[str, str], values: list, key: str, metadata: Dict[str, Any]
    ) -> None:
        for index, item in enumerate(values, 1):
            self.serialize_value(params, item, f"{key}.{index}", {})

    def result_element(
        self, root: ET.Element, operation: OperationModel
    ) -> Optional[ET.Element]:
        return root

    def read_metadata(
        self, root: Optional[ET.Element], response: WebResponseData
    ) -> ResponseMetadata:
        request_id = child_text(root, "requestId") if root is not None else None
        return ResponseMetadata(request_id=request_id or response.header("x-amzn-RequestId"))

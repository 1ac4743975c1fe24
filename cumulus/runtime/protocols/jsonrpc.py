"""AWS JSON-RPC protocol (DynamoDB and friends)."""

import base64
import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from cumulus.runtime.model import ResponseMetadata, SdkRequest, SdkResponse, ServiceModel
from cumulus.runtime.operation import OperationModel
from cumulus.runtime.protocols.base import (
    ErrorDetails,
    Protocol,
    error_type_for,
    fallback_error_code,
)
from cumulus.runtime.request import Request
from cumulus.runtime.response import WebResponseData


def to_json_value(value: Any) -> Any:
    """Convert a model or member value to its JSON wire form."""
    if isinstance(value, ServiceModel):
        return {
            field.alias or name: to_json_value(member)
            for name, field, member in value.set_members()
        }
    if isinstance(value, list):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_json_value(item) for key, item in value.items()}
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, Enum):
        return value.value
    return value


class JsonRpcProtocol(Protocol):
    """POST / with an `X-Amz-Target` header and a JSON body.

    Args:
        service_name: Service name used in wire requests
        target_prefix: Prefix of the X-Amz-Target header, e.g. "DynamoDB_20120810"
        json_version: Version in the content type, "1.0" or "1.1"
    """

    def __init__(self, service_name: str, target_prefix: str, json_version: str = "1.0"):
        super().__init__(service_name)
        self.target_prefix = target_prefix
        self.json_version = json_version

    @property
    def content_type(self) -> str:
        return f"application/x-amz-json-{self.json_version}"

    def marshall(self, operation: OperationModel, request: SdkRequest) -> Request:
        body = json.dumps(to_json_value(request), separators=(",", ":"))
        return Request(
            original_request=request,
            service_name=self.service_name,
            operation_name=operation.name,
            http_method="POST",
            resource_path="/",
            headers={
                "X-Amz-Target": f"{self.target_prefix}.{operation.name}",
                "Content-Type": self.content_type,
            },
            content=body.encode("utf-8"),
        )

    def unmarshall(
        self, operation: OperationModel, response: WebResponseData
    ) -> SdkResponse:
        data = json.loads(response.content) if response.content.strip() else {}
        result = operation.output_shape.model_validate(data)
        result.response_metadata = ResponseMetadata(
            request_id=response.header("x-amzn-RequestId")
        )
        return result

    def parse_error(self, response: WebResponseData) -> ErrorDetails:
        data: Any = {}
        if response.content.strip():
            try:
                data = json.loads(response.content)
            except ValueError:
                data = {}
        if not isinstance(data, dict):
            data = {}

        raw_type = data.get("__type") or response.header("x-amzn-ErrorType") or ""
        code = raw_type.split(":", 1)[0].rsplit("#", 1)[-1]
        return ErrorDetails(
            code=code or fallback_error_code(response),
            message=data.get("message") or data.get("Message"),
            error_type=error_type_for(response),
            request_id=response.header("x-amzn-RequestId"),
        )

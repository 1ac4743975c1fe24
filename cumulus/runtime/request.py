"""Wire-level request produced by marshallers and consumed by signers."""

from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union
from urllib.parse import quote, urlsplit

import httpx

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


def aws_quote(value: Any, safe: str = "-_.~") -> str:
    """Percent-encode a value the way AWS canonicalization expects (RFC 3986)."""
    return quote(str(value), safe=safe)


def encode_parameters(parameters: Dict[str, str]) -> str:
    """Encode parameters as a sorted `key=value&...` string."""
    return "&".join(
        f"{aws_quote(key)}={aws_quote(value)}"
        for key, value in sorted(parameters.items())
    )


class Request:
    """An HTTP request ready to be signed and sent.

    Attributes:
        original_request: Request model the wire request was built from
        service_name: Service name, e.g. "DynamoDB"
        operation_name: Operation name, e.g. "GetItem"
        http_method: HTTP method
        endpoint: Scheme and host, set by the endpoint resolver
        resource_path: Path part of the URL
        parameters: Query-protocol parameters. Sent as the form body of a
            POST with no content, otherwise in the query string
        subresources: Query-string flags such as S3's `?delete`
        headers: Case-insensitive request headers
        content: Raw body, as bytes or a binary file object
        use_query_string: Force parameters into the query string
    """

    def __init__(
        self,
        original_request: Any,
        service_name: str,
        operation_name: str = "",
        http_method: str = "POST",
        resource_path: str = "/",
        parameters: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
        content: Union[bytes, BinaryIO, None] = None,
        endpoint: Optional[str] = None,
        use_query_string: bool = False,
    ):
        self.original_request = original_request
        self.service_name = service_name
        self.operation_name = operation_name
        self.http_method = http_method.upper()
        self.resource_path = resource_path or "/"
        self.parameters: Dict[str, str] = dict(parameters or {})
        self.subresources: Dict[str, Optional[str]] = {}
        self.headers = httpx.Headers(headers or {})
        self.content = content
        self.endpoint = endpoint
        self.use_query_string = use_query_string

    @property
    def parameters_in_body(self) -> bool:
        return (
            self.http_method == "POST"
            and self.content is None
            and not self.use_query_string
        )

    @property
    def is_replayable(self) -> bool:
        """Whether the body can be sent again on retry."""
        if self.content is None or isinstance(self.content, (bytes, bytearray)):
            return True
        seekable = getattr(self.content, "seekable", None)
        return bool(seekable and seekable())

    @property
    def host(self) -> str:
        if not self.endpoint:
            raise ValueError("Request endpoint has not been resolved")
        return urlsplit(self.endpoint).netloc

    def payload(self) -> bytes:
        """The request body exactly as it is signed and sent."""
        if self.content is not None:
            if isinstance(self.content, (bytes, bytearray)):
                return bytes(self.content)
            if self.is_replayable:
                self.content.seek(0)
            return self.content.read()
        if self.parameters_in_body:
            return encode_parameters(self.parameters).encode("utf-8")
        return b""

    def query_items(self) -> List[Tuple[str, Optional[str]]]:
        """Query-string items; a None value is a bare subresource flag."""
        items: List[Tuple[str, Optional[str]]] = list(self.subresources.items())
        if not self.parameters_in_body:
            items.extend(self.parameters.items())
        return items

    def query_string(self) -> str:
        parts = []
        for key, value in sorted(self.query_items(), key=lambda item: item[0]):
            if value is None:
                parts.append(aws_quote(key))
            else:
                parts.append(f"{aws_quote(key)}={aws_quote(value)}")
        return "&".join(parts)

    def encoded_path(self) -> str:
        """URL path, endpoint path prefix included, percent-encoded once."""
        base_path = urlsplit(self.endpoint).path if self.endpoint else ""
        path = base_path.rstrip("/") + "/" + self.resource_path.lstrip("/")
        return aws_quote(path, safe="/~-_.")

    def url(self) -> str:
        """Full URL the request is sent to."""
        if not self.endpoint:
            raise ValueError("Request endpoint has not been resolved")
        base = urlsplit(self.endpoint)
        url = f"{base.scheme}://{base.netloc}{self.encoded_path()}"
        query = self.query_string()
        return f"{url}?{query}" if query else url

    def __repr__(self) -> str:
        return (
            f"Request(service={self.service_name!r}, operation={self.operation_name!r}, "
            f"method={self.http_method!r}, endpoint={self.endpoint!r}, "
            f"path={self.resource_path!r})"
        )

"""Wire-level HTTP response handed to unmarshallers."""

from dataclasses import dataclass, field
from typing import Optional

import httpx


@dataclass
class WebResponseData:
    """Status, headers and body of an HTTP response.

    Headers are case-insensitive.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes = b""
    reason_phrase: str = ""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "WebResponseData":
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
            reason_phrase=response.reason_phrase,
        )

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_length(self) -> int:
        value = self.headers.get("content-length")
        if value is not None and value.isdigit():
            return int(value)
        return len(self.content)

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name, default)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

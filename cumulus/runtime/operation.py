"""Static description of service operations."""

from dataclasses import dataclass
from typing import Optional, Type

from cumulus.runtime.model import SdkRequest, SdkResponse


@dataclass(frozen=True)
class OperationModel:
    """One API operation of a service.

    Attributes:
        name: Wire operation name, e.g. "DescribeStacks"
        input_shape: Request model class
        output_shape: Response model class
        http_method: HTTP method used by REST protocols
        request_uri: URI template used by REST protocols
        result_wrapper: XML element holding the result of query-style
            operations. Defaults to "<name>Result".
        marshaller: Dedicated request marshaller class, for operations the
            protocol cannot marshall generically.
    """

    name: str
    input_shape: Type[SdkRequest]
    output_shape: Type[SdkResponse]
    http_method: str = "POST"
    request_uri: str = "/"
    result_wrapper: Optional[str] = None
    marshaller: Optional[type] = None

    @property
    def result_element(self) -> str:
        return self.result_wrapper or f"{self.name}Result"

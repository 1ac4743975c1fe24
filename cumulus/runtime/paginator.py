"""Pagination over token-based list operations."""

import asyncio
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable, Iterator, List, Optional

from cumulus.runtime.model import SdkRequest, SdkResponse
from cumulus.runtime.operation import OperationModel


@dataclass(frozen=True)
class PaginatorModel:
    """How an operation pages.

    Attributes:
        operation: The pageable operation
        input_token: Request attribute that receives the continuation token
        output_token: Response attribute holding the continuation token
        result_key: Response attribute holding the page items
        limit_key: Request attribute that sets the page size
    """

    operation: OperationModel
    input_token: str
    output_token: str
    result_key: str
    limit_key: Optional[str] = None


class Paginator:
    """Follows continuation tokens until a response has none.

    Example:
        ```python
        paginator = client.get_paginator("scan")
        for item in paginator.iter_results(table_name="users", page_size=100):
            ...
        ```
    """

    def __init__(
        self,
        method: Callable[..., SdkResponse],
        model: PaginatorModel,
        async_method: Optional[Callable[..., Any]] = None,
    ):
        self.method = method
        self.async_method = async_method
        self.model = model

    def _first_request(
        self,
        request: Optional[SdkRequest],
        page_size: Optional[int],
        kwargs: dict,
    ) -> SdkRequest:
        if request is not None and kwargs:
            raise TypeError("pass either a request object or keyword arguments")
        if request is None:
            request = self.model.operation.input_shape(**kwargs)
        else:
            request = request.model_copy()
        if page_size is not None:
            if not self.model.limit_key:
                raise ValueError(f"{self.model.operation.name} does not support a page size")
            setattr(request, self.model.limit_key, page_size)
        return request

    def _items(self, response: SdkResponse) -> List[Any]:
        return getattr(response, self.model.result_key) or []

    def _next_token(self, response: SdkResponse) -> Any:
        return getattr(response, self.model.output_token, None) or None

    def _next_request(self, request: SdkRequest, token: Any) -> SdkRequest:
        request = request.model_copy()
        setattr(request, self.model.input_token, token)
        return request

    def paginate(
        self,
        request: Optional[SdkRequest] = None,
        *,
        page_size: Optional[int] = None,
        max_items: Optional[int] = None,
        **kwargs: Any,
    ) -> Iterator[SdkResponse]:
        """Yield response pages until the last page or until `max_items` items were seen."""
        request = self._first_request(request, page_size, kwargs)
        seen = 0
        while True:
            response = self.method(request)
            yield response
            seen += len(self._items(response))
            token = self._next_token(response)
            if token is None or (max_items is not None and seen >= max_items):
                return
            request = self._next_request(request, token)

    def iter_results(
        self,
        request: Optional[SdkRequest] = None,
        *,
        page_size: Optional[int] = None,
        max_items: Optional[int] = None,
        **kwargs: Any,
    ) -> Iterator[Any]:
        """Yield the items of every page, at most `max_items` of them."""
        count = 0
        for page in self.paginate(request, page_size=page_size, max_items=max_items, **kwargs):
            for item in self._items(page):
                if max_items is not None and count >= max_items:
                    return
                yield item
                count += 1

    async def paginate_async(
        self,
        request: Optional[SdkRequest] = None,
        *,
        page_size: Optional[int] = None,
        max_items: Optional[int] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> AsyncIterator[SdkResponse]:
        """Async counterpart of `paginate`."""
        if self.async_method is None:
            raise TypeError(f"{self.model.operation.name} has no async variant")
        request = self._first_request(request, page_size, kwargs)
        seen = 0
        while True:
            response = await self.async_method(request, cancellation=cancellation)
            yield response
            seen += len(self._items(response))
            token = self._next_token(response)
            if token is None or (max_items is not None and seen >= max_items):
                return
            request = self._next_request(request, token)

    async def iter_results_async(
        self,
        request: Optional[SdkRequest] = None,
        *,
        page_size: Optional[int] = None,
        max_items: Optional[int] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> AsyncIterator[Any]:
        """Async counterpart of `iter_results`."""
        count = 0
        async for page in self.paginate_async(
            request,
            page_size=page_size,
            max_items=max_items,
            cancellation=cancellation,
            **kwargs,
        ):
            for item in self._items(page):
                if max_items is not None and count >= max_items:
                    return
                yield item
                count += 1

"""Handler-chain request pipeline.

A pipeline is a doubly linked chain of handlers. A call enters at the
outermost handler; each handler does its work, calls its inner handler and
post-processes on the way back out. The innermost handler sends the HTTP
request.

Clients customize their pipeline through `customize_runtime_pipeline`:

    def customize_runtime_pipeline(self, pipeline):
        pipeline.add_handler_after(Marshaller, ProcessRequestHandler())
        pipeline.replace_handler(RetryHandler, RetryHandler(MyRetryPolicy()))
"""

from typing import List, Optional, Sequence, Type, cast

import structlog

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.model import SdkResponse

logger = structlog.get_logger()


class PipelineHandler:
    """A stage of the pipeline. The default behaviour delegates inward."""

    def __init__(self) -> None:
        self.inner_handler: Optional["PipelineHandler"] = None
        self.outer_handler: Optional["PipelineHandler"] = None

    def invoke_sync(self, context: ExecutionContext) -> None:
        if self.inner_handler is not None:
            self.inner_handler.invoke_sync(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        if self.inner_handler is not None:
            await self.inner_handler.invoke_async(context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RuntimePipeline:
    """An ordered chain of handlers.

    Args:
        handlers: Handlers ordered outermost first.

    Raises:
        ValueError: If no handlers are given.
    """

    def __init__(self, handlers: Sequence[PipelineHandler]):
        if not handlers:
            raise ValueError("A pipeline requires at least one handler")
        self._handler: Optional[PipelineHandler] = None
        for handler in reversed(list(handlers)):
            self.add_handler(handler)

    @property
    def handler(self) -> PipelineHandler:
        """The outermost handler."""
        return cast(PipelineHandler, self._handler)

    @property
    def handlers(self) -> List[PipelineHandler]:
        """Handlers ordered outermost first."""
        result = []
        current = self._handler
        while current is not None:
            result.append(current)
            current = current.inner_handler
        return result

    def _find(self, handler_type: Type[PipelineHandler]) -> PipelineHandler:
        current = self._handler
        while current is not None:
            if isinstance(current, handler_type):
                return current
            current = current.inner_handler
        raise ValueError(f"Pipeline has no handler of type {handler_type.__name__}")

    @staticmethod
    def _check_detached(handler: PipelineHandler) -> None:
        if handler is None:
            raise ValueError("handler is required")
        if handler.inner_handler is not None or handler.outer_handler is not None:
            raise ValueError(f"{handler!r} already belongs to a pipeline")

    def add_handler(self, handler: PipelineHandler) -> None:
        """Add `handler` as the new outermost handler."""
        self._check_detached(handler)
        if self._handler is not None:
            handler.inner_handler = self._handler
            self._handler.outer_handler = handler
        self._handler = handler
        logger.debug("pipeline_handler_added", handler=type(handler).__name__)

    def add_handler_after(
        self, handler_type: Type[PipelineHandler], handler: PipelineHandler
    ) -> None:
        """Insert `handler` immediately inside the first handler of `handler_type`."""
        self._check_detached(handler)
        current = self._find(handler_type)
        inner = current.inner_handler

        handler.outer_handler = current
        handler.inner_handler = inner
        current.inner_handler = handler
        if inner is not None:
            inner.outer_handler = handler

    def add_handler_before(
        self, handler_type: Type[PipelineHandler], handler: PipelineHandler
    ) -> None:
        """Insert `handler` immediately outside the first handler of `handler_type`."""
        self._check_detached(handler)
        current = self._find(handler_type)
        outer = current.outer_handler

        handler.inner_handler = current
        handler.outer_handler = outer
        current.outer_handler = handler
        if outer is not None:
            outer.inner_handler = handler
        else:
            self._handler = handler

    def replace_handler(
        self, handler_type: Type[PipelineHandler], handler: PipelineHandler
    ) -> None:
        """Swap the first handler of `handler_type` for `handler`."""
        self._check_detached(handler)
        current = self._find(handler_type)
        inner, outer = current.inner_handler, current.outer_handler

        handler.inner_handler = inner
        handler.outer_handler = outer
        if inner is not None:
            inner.outer_handler = handler
        if outer is not None:
            outer.inner_handler = handler
        else:
            self._handler = handler
        current.inner_handler = current.outer_handler = None

    def remove_handler(self, handler_type: Type[PipelineHandler]) -> PipelineHandler:
        """Remove and return the first handler of `handler_type`.

        Raises:
            ValueError: If the handler is missing or is the only handler.
        """
        current = self._find(handler_type)
        inner, outer = current.inner_handler, current.outer_handler
        if inner is None and outer is None:
            raise ValueError("Cannot remove the only handler of a pipeline")

        if inner is not None:
            inner.outer_handler = outer
        if outer is not None:
            outer.inner_handler = inner
        else:
            self._handler = inner
        current.inner_handler = current.outer_handler = None
        return current

    def find_handler(self, handler_type: Type[PipelineHandler]) -> Optional[PipelineHandler]:
        try:
            return self._find(handler_type)
        except ValueError:
            return None

    def invoke_sync(self, context: ExecutionContext) -> Optional[SdkResponse]:
        self.handler.invoke_sync(context)
        return context.response_context.response

    async def invoke_async(self, context: ExecutionContext) -> Optional[SdkResponse]:
        await self.handler.invoke_async(context)
        return context.response_context.response

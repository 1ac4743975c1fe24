"""Resolves the credentials used to sign the current attempt."""

import asyncio

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.pipeline import PipelineHandler


class CredentialsRetriever(PipelineHandler):
    """Snapshots the client's credentials; refreshing providers run off the event loop."""

    def invoke_sync(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        if request_context.credentials is not None:
            request_context.immutable_credentials = request_context.credentials.get_credentials()
        super().invoke_sync(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        request_context = context.request_context
        if request_context.credentials is not None:
            request_context.immutable_credentials = await asyncio.to_thread(
                request_context.credentials.get_credentials
            )
        await super().invoke_async(context)

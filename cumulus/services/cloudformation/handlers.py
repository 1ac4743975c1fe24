"""CloudFormation pipeline customizations."""

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.pipeline import PipelineHandler
from cumulus.services.cloudformation.models import UpdateStackRequest


class ProcessRequestHandler(PipelineHandler):
    """Sends `NotificationARNs=""` for UpdateStack when the caller explicitly
    assigned an empty `notification_arns`, which clears the stack's topics."""

    @staticmethod
    def _process(context: ExecutionContext) -> None:
        request_context = context.request_context
        original = request_context.original_request
        if not isinstance(original, UpdateStackRequest):
            return
        if original.was_assigned("notification_arns") and not original.notification_arns:
            request_context.request.parameters["NotificationARNs"] = ""

    def invoke_sync(self, context: ExecutionContext) -> None:
        self._process(context)
        super().invoke_sync(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        self._process(context)
        await super().invoke_async(context)

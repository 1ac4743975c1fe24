"""Invocation context binding for structured logging.

Every SDK call runs inside `bind_invocation_context`, so log entries emitted
by the pipeline handlers carry the invocation id, service and operation.
Applications can wrap their own work in `bind_request_context` to add a
correlation id that flows into SDK log entries too.

Usage:
    from cumulus.logging import bind_request_context

    with bind_request_context(correlation_id="job-42"):
        client.put_item(table_name="users", item=item)
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind caller-scoped context to all logs within the block.

    Args:
        correlation_id: Unique identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


@contextmanager
def bind_invocation_context(
    invocation_id: str,
    service: str,
    operation: str,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind the identity of one SDK call to all logs within the block.

    Context that was already bound by an enclosing call (for example a
    paginator issuing several requests) is restored on exit.

    Args:
        invocation_id: Unique id of this call, shared by all its retries.
        service: Service name, e.g. "DynamoDB".
        operation: Operation name, e.g. "GetItem".
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {
        "invocation_id": invocation_id,
        "service": service,
        "operation": operation,
    }
    context.update(extra_context)

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        restored = {key: previous[key] for key in context if key in previous}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_request_context() -> None:
    """Clear all bound context from the logging context."""
    structlog.contextvars.clear_contextvars()

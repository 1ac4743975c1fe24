"""Structured logging for the SDK.

The SDK logs through structlog with snake_case event names. Nothing is
configured on import; call `configure_logging()` to opt in to the SDK's
rendering.

Public API:
    - configure_logging(): Configure structlog and stdlib logging
    - get_logger(): Get a logger bound to a name
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager adding a correlation id
    - bind_invocation_context(): Context manager used around each SDK call
    - get_correlation_id() / set_correlation_id() / clear_request_context()

Formatters:
    - add_app_info(): Processor adding library name/version
    - mask_sensitive_data(): Processor redacting credentials and signatures
    - truncate_large_values(): Processor limiting string lengths
"""

from cumulus.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from cumulus.logging.context import (
    bind_invocation_context,
    bind_request_context,
    get_correlation_id,
    set_correlation_id,
    clear_request_context,
)

from cumulus.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_invocation_context",
    "bind_request_context",
    "get_correlation_id",
    "set_correlation_id",
    "clear_request_context",
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]

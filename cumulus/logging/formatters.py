"""Structlog processors used by `configure_logging`.

Usage:
    from cumulus.logging.formatters import add_app_info, mask_sensitive_data
"""

from typing import Any, Mapping

from cumulus import __version__

# Key fragments whose values never reach log output
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "authorization",
        "credential",
        "signature",
        "access_key",
        "session_token",
        "x-amz-security-token",
        "private_key",
        "cookie",
    }
)


def _is_sensitive(key: str, patterns: frozenset) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in patterns)


def _mask(value: Any, patterns: frozenset, mask_value: str) -> Any:
    if isinstance(value, Mapping):
        return {
            k: (
                mask_value
                if _is_sensitive(str(k), patterns) and v is not None
                else _mask(v, patterns, mask_value)
            )
            for k, v in value.items()
        }
    return value


def add_app_info(app_name: str = "cumulus-sdk", app_version: str = __version__):
    """Create a processor that adds library name and version to log entries.

    Args:
        app_name: Name to report.
        app_version: Version string to report.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Keys are matched case-insensitively against `SENSITIVE_PATTERNS`.
    Nested mappings such as logged header dicts are masked too, so an
    `Authorization` or `X-Amz-Security-Token` header never leaks.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        masked_dict = {}
        for key, value in event_dict.items():
            if _is_sensitive(key, patterns) and value is not None:
                masked_dict[key] = mask_value
            else:
                masked_dict[key] = _mask(value, patterns, mask_value)
        return masked_dict

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Response bodies logged with `log_response` can be large.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor

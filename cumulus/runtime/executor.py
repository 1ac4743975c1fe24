"""Execute client operations with the OperationResult pattern.

`execute_api_call` never raises for service or client errors; it returns an
`OperationResult` classified by `classify_service_error`. Retries have
already happened inside the client's pipeline by the time it returns.

Usage:
    from cumulus.runtime.executor import execute_api_call

    result = execute_api_call(dynamodb, "scan", paginated=True, table_name="users")
    if result.is_success:
        for item in result.data:
            ...
"""

from typing import Any, Callable, List, Optional

import structlog

from cumulus.operations.classifiers import classify_service_error
from cumulus.operations.result import OperationResult
from cumulus.runtime.exceptions import SdkError
from cumulus.runtime.model import SdkRequest

logger = structlog.get_logger()


def _collect_pages(
    client: Any,
    method: str,
    request: Optional[SdkRequest],
    keys: Optional[List[str]],
    kwargs: dict,
) -> List[Any]:
    paginator = client.get_paginator(method)
    results: List[Any] = []
    for page in paginator.paginate(request, **kwargs):
        for key in keys or [paginator.model.result_key]:
            value = getattr(page, key, None)
            if isinstance(value, list):
                results.extend(value)
            elif value is not None:
                results.append(value)
    return results


def execute_api_call(
    client: Any,
    method: str,
    request: Optional[SdkRequest] = None,
    *,
    paginated: bool = False,
    keys: Optional[List[str]] = None,
    treat_conflict_as_success: bool = False,
    conflict_callback: Optional[Callable[[Exception], None]] = None,
    **kwargs: Any,
) -> OperationResult:
    """Call `client.<method>` and wrap the outcome in an OperationResult.

    Args:
        client: A service client
        method: Operation method name, e.g. "put_item"
        request: Request model; built from `kwargs` when omitted
        paginated: Follow continuation tokens and collect the items of `keys`
        keys: Response attributes collected across pages. Defaults to the
            paginator's result key.
        treat_conflict_as_success: Report conflicts (already exists,
            conditional check failed, resource in use) as SUCCESS
        conflict_callback: Called with the exception when a conflict occurs
        **kwargs: Request members, or paginator options (`page_size`,
            `max_items`) when paginated

    Returns:
        OperationResult whose `data` is the response model, or the list of
        collected items for paginated calls.
    """
    service_name = getattr(client, "service_name", type(client).__name__)

    try:
        if paginated:
            data = _collect_pages(client, method, request, keys, kwargs)
        elif request is not None:
            data = getattr(client, method)(request, **kwargs)
        else:
            data = getattr(client, method)(**kwargs)
        return OperationResult.success(
            data=data, message=f"{service_name}.{method} succeeded"
        )

    except SdkError as e:
        result = classify_service_error(e)

        if result.error_code == "CONFLICT":
            logger.info(
                "api_conflict",
                service=service_name,
                method=method,
                code=getattr(e, "error_code", None),
                message=result.message,
            )
            if conflict_callback:
                try:
                    conflict_callback(e)
                except Exception:  # pylint: disable=broad-except
                    logger.exception("conflict_callback_failed", error=str(e))

            if treat_conflict_as_success:
                return OperationResult.success(data=None, message=result.message)

        logger.error(
            "api_error_final",
            service=service_name,
            method=method,
            error=str(e),
            status=result.status.value,
        )
        return result

    except Exception as e:  # pylint: disable=broad-except
        logger.error(
            "api_unexpected_error",
            service=service_name,
            method=method,
            error=str(e),
        )
        return OperationResult.permanent_error(
            message=str(e), error_code="UNEXPECTED_ERROR", data=e
        )

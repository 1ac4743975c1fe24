"""Cancellation support for async calls.

Async client methods accept an `asyncio.Event`. Setting it cancels the call
between attempts, during retry back-off and while the HTTP request is in
flight; the call then raises `RequestCancelledError`.
"""

import asyncio
import contextlib
from typing import Awaitable, Optional, TypeVar

from cumulus.runtime.exceptions import RequestCancelledError

T = TypeVar("T")


def raise_if_cancelled(cancellation: Optional[asyncio.Event]) -> None:
    if cancellation is not None and cancellation.is_set():
        raise RequestCancelledError()


async def await_or_cancel(
    awaitable: Awaitable[T], cancellation: Optional[asyncio.Event]
) -> T:
    """Await `awaitable` unless `cancellation` is set first."""
    if cancellation is None:
        return await awaitable
    raise_if_cancelled(cancellation)

    work = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(cancellation.wait())
    try:
        await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        work.cancel()
        raise
    finally:
        waiter.cancel()

    if not work.done():
        work.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await work
        raise RequestCancelledError()
    return work.result()


async def sleep_or_cancel(delay: float, cancellation: Optional[asyncio.Event]) -> None:
    """Sleep for `delay` seconds, raising early if `cancellation` is set."""
    if delay <= 0:
        raise_if_cancelled(cancellation)
        return
    if cancellation is None:
        await asyncio.sleep(delay)
        return
    try:
        await asyncio.wait_for(cancellation.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return
    raise RequestCancelledError()

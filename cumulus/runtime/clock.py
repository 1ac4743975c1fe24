"""Clock skew correction.

When a service rejects a request because the local clock is off, the
difference to the server's Date header is stored per endpoint and used for
every later signature against that endpoint.
"""

import threading
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Dict, Optional

import structlog

logger = structlog.get_logger()

_offsets: Dict[str, timedelta] = {}
_lock = threading.Lock()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_clock_offset(endpoint: Optional[str]) -> timedelta:
    if not endpoint:
        return timedelta(0)
    with _lock:
        return _offsets.get(endpoint, timedelta(0))


def set_clock_offset(endpoint: str, offset: timedelta) -> None:
    with _lock:
        _offsets[endpoint] = offset
    logger.info(
        "clock_offset_updated",
        endpoint=endpoint,
        offset_seconds=offset.total_seconds(),
    )


def reset_clock_offsets() -> None:
    with _lock:
        _offsets.clear()


def corrected_utc_now(endpoint: Optional[str] = None) -> datetime:
    """Current UTC time adjusted by the offset recorded for `endpoint`."""
    return utc_now() + get_clock_offset(endpoint)


def parse_server_time(value: Optional[str]) -> Optional[datetime]:
    """Parse an RFC 1123 `Date` header or an ISO 8601 basic timestamp."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        parsed = None
    if parsed is None:
        try:
            parsed = datetime.strptime(value, "%Y%m%dT%H%M%SZ")
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def adjust_for_server_time(endpoint: str, server_time: datetime) -> timedelta:
    """Record the offset between `server_time` and the local clock."""
    offset = server_time - utc_now()
    set_clock_offset(endpoint, offset)
    return offset

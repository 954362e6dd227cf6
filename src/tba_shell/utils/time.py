from __future__ import annotations
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime


def http_date(ts: float) -> str:
    """RFC 1123 date for an If-Modified-Since header (epoch seconds, UTC)."""
    return format_datetime(datetime.fromtimestamp(ts, timezone.utc), usegmt=True)


def parse_http_date(value: str | None) -> float:
    """Epoch seconds of a Last-Modified header; 0.0 when missing or unparsable."""
    if not value:
        return 0.0
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return 0.0
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()

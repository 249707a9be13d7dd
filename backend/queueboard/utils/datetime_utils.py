"""Datetime utility functions."""

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

from dateutil.parser import parse as parse_datetime

from queueboard.config import settings

# Timezone the queue operates in (from config)
QUEUE_TIMEZONE = ZoneInfo(settings.timezone)


def now_in(tz: tzinfo = QUEUE_TIMEZONE) -> datetime:
    """Current time as an aware datetime in the given timezone."""
    return datetime.now(tz)


def format_ledger_timestamp(dt: datetime) -> str:
    """Format a timestamp for the issued_at column (ISO-8601 with offset, no microseconds)."""
    return dt.replace(microsecond=0).isoformat()


def parse_ledger_timestamp(value: str | None, tz: tzinfo = QUEUE_TIMEZONE) -> datetime | None:
    """Parse an issued_at cell.

    Accepts ISO instants as well as display strings such as
    "10/19/2026, 3:04:05 PM". Naive values are taken to be in ``tz``.

    Returns:
        Aware datetime in ``tz``, or None if the cell is blank or unparseable
    """
    if not value or not value.strip():
        return None
    try:
        dt = parse_datetime(value)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def local_date(value: str | None, tz: tzinfo = QUEUE_TIMEZONE) -> date | None:
    """Calendar day of an issued_at cell in ``tz``, or None if it has no usable timestamp."""
    dt = parse_ledger_timestamp(value, tz)
    return dt.date() if dt else None

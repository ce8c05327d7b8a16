"""Shared helpers for timestamps in storage and in user-facing text."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..logging_config import logger

UTC = timezone.utc


def utc_now() -> datetime:
    """Return the current time in UTC."""

    return datetime.now(UTC)


def to_storage_timestamp(moment: datetime) -> str:
    """Normalize timestamps before writing to SQLite."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")


def parse_iso(timestamp: str) -> datetime:
    """Parse an ISO timestamp, defaulting to UTC when timezone is absent."""

    dt = date_parser.isoparse(timestamp)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def resolve_timezone(timezone_name: Optional[str]) -> tzinfo:
    """Resolve *timezone_name* to a tzinfo, falling back to UTC on error."""

    if not timezone_name or timezone_name.strip().upper() in {"UTC", "Z"}:
        return UTC
    try:
        return ZoneInfo(timezone_name.strip())
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "unknown timezone; defaulting to UTC",
            extra={"timezone": timezone_name},
        )
    return UTC


def format_display_date(moment: datetime, timezone_name: str = "UTC") -> str:
    """Render *moment* as an en-US short date (``M/D/YYYY``) in the given timezone."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    local = moment.astimezone(resolve_timezone(timezone_name))
    return f"{local.month}/{local.day}/{local.year}"


__all__ = [
    "UTC",
    "format_display_date",
    "parse_iso",
    "resolve_timezone",
    "to_storage_timestamp",
    "utc_now",
]

from .responses import error_response
from .timezones import (
    UTC,
    format_display_date,
    parse_iso,
    resolve_timezone,
    to_storage_timestamp,
    utc_now,
)

__all__ = [
    "error_response",
    "UTC",
    "format_display_date",
    "parse_iso",
    "resolve_timezone",
    "to_storage_timestamp",
    "utc_now",
]

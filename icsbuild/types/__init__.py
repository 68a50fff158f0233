"""Library for rfc5545 Property Value Data Types used by components."""

from .const import Classification, EventStatus, TodoStatus
from .date_perhaps_time import (
    DateOnly,
    DatePerhapsTime,
    FloatingDateTime,
    UtcDateTime,
    ZonedDateTime,
    as_date_perhaps_time,
    from_property,
)
from .date_time import format_utc_date_time, parse_utc_date_time
from .priority import Priority

__all__ = [
    "Classification",
    "DateOnly",
    "DatePerhapsTime",
    "EventStatus",
    "FloatingDateTime",
    "Priority",
    "TodoStatus",
    "UtcDateTime",
    "ZonedDateTime",
    "as_date_perhaps_time",
    "format_utc_date_time",
    "from_property",
    "parse_utc_date_time",
]

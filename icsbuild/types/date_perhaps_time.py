"""Library for the date or date-time values used by DTSTART, DTEND, etc.

rfc5545 has three forms of DATE-TIME (floating local time, UTC time, and
local time with a timezone reference) in addition to a plain DATE. Each
form is modeled as its own immutable value so that the form survives a
round trip through a property unchanged:

```python
import datetime
from icsbuild.types import UtcDateTime, from_property

start = UtcDateTime(date_time=datetime.datetime(2024, 1, 1, 10, tzinfo=datetime.UTC))
prop = start.to_property("DTSTART")
assert prop.ics() == "DTSTART:20240101T100000Z"
assert from_property(prop) == start
```

Values have a precision of one second. Timezone identifiers are carried as
opaque strings and are never resolved against a timezone database.
"""

from __future__ import annotations

import abc
import datetime
import logging
from typing import Any
import zoneinfo

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..const import ATTR_TZID, ATTR_VALUE
from ..property import Parameter, Property
from .date import DATE_REGEX, DateEncoder
from .date_time import DateTimeEncoder

__all__ = [
    "DateOnly",
    "FloatingDateTime",
    "UtcDateTime",
    "ZonedDateTime",
    "DatePerhapsTime",
    "as_date_perhaps_time",
    "from_property",
]

_LOGGER = logging.getLogger(__name__)

VALUE_DATE = "DATE"
VALUE_DATE_TIME = "DATE-TIME"
_UTC_ZONE_KEYS = {"UTC", "Etc/UTC", "Etc/UCT", "Etc/Zulu", "Zulu", "UCT"}


def _require_naive(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is not None:
        raise ValueError(f"Expected a datetime without tzinfo, got {value}")
    return value.replace(microsecond=0)


class _DateValue(BaseModel):
    """Common behavior for values that encode as a property."""

    model_config = ConfigDict(frozen=True)

    @abc.abstractmethod
    def encode_value(self) -> str:
        """Encode the value portion of the property."""

    def encode_params(self) -> list[Parameter]:
        """Encode the parameters that qualify the value."""
        return []

    def to_property(self, key: str) -> Property:
        """Create a property with the specified name holding this value."""
        prop = Property(key, self.encode_value())
        for param in self.encode_params():
            prop.append_parameter(param)
        return prop


class DateOnly(_DateValue):
    """A calendar date with no time, e.g. for an all day event."""

    date: datetime.date

    @field_validator("date", mode="before")
    @classmethod
    def truncate_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime.datetime):
            return value.date()
        return value

    def encode_value(self) -> str:
        return DateEncoder.__encode_property_value__(self.date)

    def encode_params(self) -> list[Parameter]:
        return [Parameter(ATTR_VALUE, VALUE_DATE)]


class FloatingDateTime(_DateValue):
    """A local date and time interpreted in the viewer's timezone."""

    date_time: datetime.datetime

    @field_validator("date_time")
    @classmethod
    def validate_floating(cls, value: datetime.datetime) -> datetime.datetime:
        return _require_naive(value)

    def encode_value(self) -> str:
        return DateTimeEncoder.__encode_property_value__(self.date_time)


class UtcDateTime(_DateValue):
    """An absolute instant, always stored in UTC."""

    date_time: datetime.datetime

    @field_validator("date_time")
    @classmethod
    def validate_utc(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            raise ValueError(f"Expected a datetime with tzinfo, got {value}")
        return value.astimezone(datetime.timezone.utc).replace(microsecond=0)

    def encode_value(self) -> str:
        return DateTimeEncoder.__encode_property_value__(self.date_time)


class ZonedDateTime(_DateValue):
    """A local date and time in the timezone named by a TZID."""

    date_time: datetime.datetime
    tzid: str = Field(min_length=1)

    @field_validator("date_time")
    @classmethod
    def validate_local(cls, value: datetime.datetime) -> datetime.datetime:
        return _require_naive(value)

    def encode_value(self) -> str:
        return DateTimeEncoder.__encode_property_value__(self.date_time)

    def encode_params(self) -> list[Parameter]:
        return [Parameter(ATTR_TZID, self.tzid)]


DatePerhapsTime = DateOnly | FloatingDateTime | UtcDateTime | ZonedDateTime


def from_property(prop: Property) -> DatePerhapsTime | None:
    """Decode a date or date-time property.

    Values that are not recognized are ignored and return None.
    """
    value_type = prop.get_parameter_value(ATTR_VALUE)
    if value_type is not None:
        value_type = value_type.upper()
        if value_type not in (VALUE_DATE, VALUE_DATE_TIME):
            _LOGGER.debug("Ignoring %s with VALUE=%s", prop.key, value_type)
            return None
    try:
        if value_type == VALUE_DATE or (
            value_type is None and DATE_REGEX.fullmatch(prop.value)
        ):
            return DateOnly(date=DateEncoder.__parse_property_value__(prop.value))
        date_time = DateTimeEncoder.__parse_property_value__(prop.value)
    except ValueError as err:
        _LOGGER.debug("Ignoring invalid %s value: %s", prop.key, err)
        return None
    if date_time.tzinfo is not None:
        return UtcDateTime(date_time=date_time)
    if tzid := prop.get_parameter_value(ATTR_TZID):
        return ZonedDateTime(date_time=date_time, tzid=tzid)
    return FloatingDateTime(date_time=date_time)


def as_date_perhaps_time(value: Any) -> DatePerhapsTime:
    """Convert a python date or datetime into the matching value form.

    A naive datetime is floating, a datetime with a keyed `zoneinfo.ZoneInfo`
    keeps its zone key as the TZID, and any other aware datetime is converted
    to UTC. That includes a `ZoneInfo` loaded from a file, which has no key.
    A `(datetime, tzid)` tuple names the zone explicitly.
    """
    if isinstance(value, _DateValue):
        return value  # type: ignore[return-value]
    if isinstance(value, tuple) and len(value) == 2:
        date_time, tzid = value
        return ZonedDateTime(date_time=date_time, tzid=tzid)
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return FloatingDateTime(date_time=value)
        if (
            isinstance(value.tzinfo, zoneinfo.ZoneInfo)
            and value.tzinfo.key is not None
            and value.tzinfo.key not in _UTC_ZONE_KEYS
        ):
            return ZonedDateTime(
                date_time=value.replace(tzinfo=None), tzid=value.tzinfo.key
            )
        return UtcDateTime(date_time=value)
    if isinstance(value, datetime.date):
        return DateOnly(date=value)
    raise TypeError(f"Expected a date or datetime value, got {type(value).__name__}")

"""Library for parsing and encoding DATE-TIME types."""

from __future__ import annotations

import datetime
import logging
import re

from .date import DateEncoder

_LOGGER = logging.getLogger(__name__)


DATETIME_REGEX = re.compile(r"^([0-9]{8})T([0-9]{6})(Z)?$")


class DateTimeEncoder:
    """Class to handle encoding for a datetime.datetime.

    Values with a trailing 'Z' are UTC and parsed as aware datetimes, and
    all other values are returned as naive datetimes. Any TZID parameter
    is handled by the caller.
    """

    @classmethod
    def __parse_property_value__(cls, value: str) -> datetime.datetime:
        """Parse a rfc5545 into a datetime.datetime."""
        if not (match := DATETIME_REGEX.fullmatch(value)):
            raise ValueError(f"Expected value to match DATE-TIME pattern: {value}")

        timezone: datetime.tzinfo | None = None
        if match.group(3):  # Example: 19980119T070000Z
            timezone = datetime.timezone.utc

        # Example: 19980118T230000
        date_value = DateEncoder.__parse_property_value__(match.group(1))
        time_value = match.group(2)
        hour = int(time_value[0:2])
        minute = int(time_value[2:4])
        second = int(time_value[4:6])

        result = datetime.datetime(
            date_value.year,
            date_value.month,
            date_value.day,
            hour,
            minute,
            second,
            tzinfo=timezone,
        )
        _LOGGER.debug("DateTimeEncoder returned %s", result)
        return result

    @classmethod
    def __encode_property_value__(cls, value: datetime.datetime) -> str:
        """Serialize as an ICS value, in UTC when the value is aware."""
        suffix = ""
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
            suffix = "Z"
        date_value = DateEncoder.__encode_property_value__(value)
        return (
            f"{date_value}T{value.hour:02d}{value.minute:02d}{value.second:02d}"
            f"{suffix}"
        )


def format_utc_date_time(value: datetime.datetime) -> str:
    """Format an aware datetime as a UTC DATE-TIME value."""
    if value.tzinfo is None:
        raise ValueError(f"Expected an aware datetime, got {value}")
    return DateTimeEncoder.__encode_property_value__(value)


def parse_utc_date_time(value: str) -> datetime.datetime | None:
    """Parse a UTC DATE-TIME value, returning None for any other form."""
    try:
        result = DateTimeEncoder.__parse_property_value__(value)
    except ValueError as err:
        _LOGGER.debug("Ignoring invalid UTC DATE-TIME: %s", err)
        return None
    if result.tzinfo is None:
        return None
    return result

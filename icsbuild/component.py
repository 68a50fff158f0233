"""Library for building rfc5545 components.

A component is a grouping of properties that describe a calendar object
such as an event or a to-do, written as a BEGIN/END block. Every kind of
component shares the same storage and the same set of builder methods,
implemented once here in terms of two primitives: `append_property` for
properties that appear at most once, and `append_multi_property` for
properties that may repeat, like EXDATE.

Components are built with chained calls and finalized with `done()`:

```python
import datetime
from icsbuild.event import Event

event = (
    Event()
    .summary("Launch")
    .starts(datetime.datetime(2024, 1, 1, 10, tzinfo=datetime.UTC))
    .ends(datetime.datetime(2024, 1, 1, 11, tzinfo=datetime.UTC))
    .done()
)
print(event.ics())
```

When written, a DTSTAMP and UID are generated for components that don't
set them explicitly.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import copy
import datetime
import enum
import io
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from .const import ATTR_BEGIN, ATTR_END
from .encoders import TextEncoder
from .exceptions import CalendarFormatError, ComponentFinishedError
from .property import Parameter, Property, TextSink, write_line
from .types import (
    Classification,
    DateOnly,
    DatePerhapsTime,
    Priority,
    UtcDateTime,
    as_date_perhaps_time,
    from_property,
    parse_utc_date_time,
)
from .util import dtstamp_factory, uid_factory

__all__ = [
    "Component",
    "ComponentKind",
    "InnerComponent",
]

_LOGGER = logging.getLogger(__name__)

DTSTAMP = "DTSTAMP"
UID = "UID"
DTSTART = "DTSTART"
DTEND = "DTEND"
RECURRENCE_ID = "RECURRENCE-ID"
EXDATE = "EXDATE"
PRIORITY = "PRIORITY"
SUMMARY = "SUMMARY"
DESCRIPTION = "DESCRIPTION"
LOCATION = "LOCATION"
CLASS = "CLASS"
URL = "URL"
CATEGORIES = "CATEGORIES"
PARAM_VVENUE = "VVENUE"

Clock = Callable[[], datetime.datetime]
UidGenerator = Callable[[], str]


class ComponentKind(str, enum.Enum):
    """The kinds of components that may be built."""

    EVENT = "VEVENT"
    TODO = "VTODO"
    VENUE = "VVENUE"


@dataclass
class InnerComponent:
    """Property storage backing a component.

    Properties are kept ordered by key. Multi properties keep insertion
    order and may repeat a key. Stored properties are copies, so callers
    can't change them through a property they still hold.
    """

    properties: dict[str, Property] = field(default_factory=dict)
    multi_properties: list[Property] = field(default_factory=list)

    def insert(self, prop: Property) -> None:
        """Store a property, replacing any existing property with the same key."""
        self.properties[prop.key] = prop.copy()
        self.properties = dict(sorted(self.properties.items()))

    def push(self, prop: Property) -> None:
        """Append a property that may appear more than once."""
        self.multi_properties.append(prop.copy())

    def done(self) -> InnerComponent:
        """Move the accumulated properties out, leaving this empty."""
        result = InnerComponent(self.properties, self.multi_properties)
        self.properties = {}
        self.multi_properties = []
        return result


class Component:
    """A calendar component with the builder methods shared by all kinds."""

    def __init__(self, kind: ComponentKind) -> None:
        """Initialize an empty component of the specified kind."""
        self._kind = ComponentKind(kind)
        self._inner = InnerComponent()
        self._finished = False

    def component_kind(self) -> str:
        """Return the name used in the BEGIN and END lines, e.g. VEVENT."""
        return self._kind.value

    @property
    def finished(self) -> bool:
        """Return True if this is the read-only result of `done()`."""
        return self._finished

    def properties(self) -> Mapping[str, Property]:
        """Copies of the single valued properties, ordered by key."""
        return MappingProxyType(
            {key: prop.copy() for key, prop in self._inner.properties.items()}
        )

    def multi_properties(self) -> Sequence[Property]:
        """Copies of the multi valued properties."""
        return tuple(prop.copy() for prop in self._inner.multi_properties)

    def property_value(self, key: str) -> str | None:
        """Return the value of a single valued property."""
        if (prop := self._inner.properties.get(key)) is None:
            return None
        return prop.value

    def done(self) -> Self:
        """End of the builder chain.

        Returns a finished component that holds everything set so far. This
        builder is reset to an empty state and may be used to build another
        component.
        """
        self._check_mutable()
        finished = copy.copy(self)
        finished._inner = self._inner.done()
        finished._finished = True
        return finished

    def _check_mutable(self) -> None:
        if self._finished:
            raise ComponentFinishedError(
                f"Can't modify a finished {self.component_kind()} component"
            )

    #
    # Primitives
    #

    def append_property(self, prop: Property) -> Self:
        """Set a property, replacing any existing property with the same key."""
        self._check_mutable()
        self._inner.insert(prop)
        return self

    def append_multi_property(self, prop: Property) -> Self:
        """Add a property of which there may be many."""
        self._check_mutable()
        self._inner.push(prop)
        return self

    def add_property(self, key: str, value: str) -> Self:
        """Construct and set a property."""
        return self.append_property(Property(key, value))

    def add_multi_property(self, key: str, value: str) -> Self:
        """Construct and add a property of which there may be many."""
        return self.append_multi_property(Property(key, value))

    #
    # Dates and times
    #

    def timestamp(self, dtstamp: datetime.datetime) -> Self:
        """Set the DTSTAMP, which must be an aware datetime.

        The value is stored in UTC.
        """
        return self.append_property(
            UtcDateTime(date_time=dtstamp).to_property(DTSTAMP)
        )

    def get_timestamp(self) -> datetime.datetime | None:
        """Return the DTSTAMP in UTC."""
        if (value := self.property_value(DTSTAMP)) is None:
            return None
        return parse_utc_date_time(value)

    def starts(self, value: Any) -> Self:
        """Set the DTSTART.

        See `icsbuild.types.as_date_perhaps_time` for how python date and
        datetime values are converted.
        """
        return self.append_property(as_date_perhaps_time(value).to_property(DTSTART))

    def get_start(self) -> DatePerhapsTime | None:
        """Return the DTSTART."""
        return self._get_date_perhaps_time(DTSTART)

    def ends(self, value: Any) -> Self:
        """Set the DTEND."""
        return self.append_property(as_date_perhaps_time(value).to_property(DTEND))

    def get_end(self) -> DatePerhapsTime | None:
        """Return the DTEND."""
        return self._get_date_perhaps_time(DTEND)

    def recurrence_id(self, value: Any) -> Self:
        """Set the RECURRENCE-ID of a modified recurring instance."""
        return self.append_property(
            as_date_perhaps_time(value).to_property(RECURRENCE_ID)
        )

    def get_recurrence_id(self) -> DatePerhapsTime | None:
        """Return the RECURRENCE-ID."""
        return self._get_date_perhaps_time(RECURRENCE_ID)

    def exdate(self, value: Any) -> Self:
        """Add an EXDATE, which may be called multiple times."""
        return self.append_multi_property(
            as_date_perhaps_time(value).to_property(EXDATE)
        )

    def get_exdates(self) -> list[DatePerhapsTime]:
        """Return all valid EXDATE values in the order they were added."""
        return [
            value
            for prop in self._inner.multi_properties
            if prop.key == EXDATE and (value := from_property(prop)) is not None
        ]

    def all_day(self, date: datetime.date) -> Self:
        """Set both DTSTART and DTEND to the date."""
        value = DateOnly(date=date)
        return self.append_property(value.to_property(DTSTART)).append_property(
            value.to_property(DTEND)
        )

    def _get_date_perhaps_time(self, key: str) -> DatePerhapsTime | None:
        if (prop := self._inner.properties.get(key)) is None:
            return None
        return from_property(prop)

    #
    # Descriptive properties
    #

    def priority(self, priority: int) -> Self:
        """Set the relative priority, truncated into the range 0 to 10."""
        return self.add_property(PRIORITY, str(int(Priority.clamp(priority))))

    def get_priority(self) -> int | None:
        """Return the relative priority, from 0 to 10."""
        if (value := self.property_value(PRIORITY)) is None:
            return None
        return Priority.parse_priority(value)

    def summary(self, summary: str) -> Self:
        """Set the SUMMARY."""
        return self.add_property(SUMMARY, summary)

    def get_summary(self) -> str | None:
        """Return the SUMMARY."""
        return self.property_value(SUMMARY)

    def description(self, description: str) -> Self:
        """Set the DESCRIPTION."""
        return self.add_property(DESCRIPTION, description)

    def get_description(self) -> str | None:
        """Return the DESCRIPTION."""
        return self.property_value(DESCRIPTION)

    def location(self, location: str) -> Self:
        """Set the LOCATION."""
        return self.add_property(LOCATION, location)

    def get_location(self) -> str | None:
        """Return the LOCATION."""
        return self.property_value(LOCATION)

    def venue(self, location: str, venue_uid: str) -> Self:
        """Set the LOCATION with a reference to the UID of a VVENUE."""
        return self.append_property(
            Property(LOCATION, location).append_parameter(
                Parameter(PARAM_VVENUE, venue_uid)
            )
        )

    def uid(self, uid: str) -> Self:
        """Set the UID."""
        return self.add_property(UID, uid)

    def get_uid(self) -> str | None:
        """Return the UID."""
        return self.property_value(UID)

    def classification(self, classification: Classification) -> Self:
        """Set the access classification (CLASS)."""
        return self.add_property(CLASS, Classification(classification).value)

    def get_classification(self) -> Classification | None:
        """Return the access classification."""
        if (value := self.property_value(CLASS)) is None:
            return None
        return Classification.__parse_property_value__(value)

    def url(self, url: str) -> Self:
        """Set the URL."""
        return self.add_property(URL, url)

    def get_url(self) -> str | None:
        """Return the URL."""
        return self.property_value(URL)

    def categories(self, *categories: str) -> Self:
        """Add a CATEGORIES list, which may be called multiple times.

        Each category is escaped on its own so that a comma inside one
        category doesn't split it in two.
        """
        return self.add_multi_property(
            CATEGORIES, TextEncoder.encode_list(categories)
        )


    #
    # Encoding
    #

    def fmt_write(
        self,
        out: TextSink,
        *,
        clock: Clock | None = None,
        uid_generator: UidGenerator | None = None,
    ) -> None:
        """Write the component as rfc5545 text.

        The clock and uid generator are used to fill in DTSTAMP and UID
        when they are not set, and default to the factories in
        `icsbuild.util`. Raises a CalendarFormatError if the sink
        rejects a write.
        """
        kind = self.component_kind()
        properties = self._inner.properties
        _LOGGER.debug("Encoding component %s", kind)
        write_line(out, f"{ATTR_BEGIN}:{kind}")
        if DTSTAMP not in properties:
            now = (clock or dtstamp_factory)()
            UtcDateTime(date_time=now).to_property(DTSTAMP).fmt_write(out)
        for prop in properties.values():
            prop.fmt_write(out)
        if UID not in properties:
            Property(UID, (uid_generator or uid_factory)()).fmt_write(out)
        for prop in self._inner.multi_properties:
            prop.fmt_write(out)
        write_line(out, f"{ATTR_END}:{kind}")

    def ics(
        self,
        *,
        clock: Clock | None = None,
        uid_generator: UidGenerator | None = None,
    ) -> str:
        """Encode the component as rfc5545 text.

        Raises a CalendarFormatError if encoding fails.
        """
        out = io.StringIO()
        self.fmt_write(out, clock=clock, uid_generator=uid_generator)
        return out.getvalue()

    def to_string(self) -> str:
        """Encode the component as rfc5545 text for callers that can't recover.

        Use `ics()` to handle a CalendarFormatError instead.
        """
        try:
            return self.ics()
        except CalendarFormatError as err:
            raise RuntimeError(
                f"Failed to encode {self.component_kind()} component"
            ) from err

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.component_kind()!r}, "
            f"properties={list(self._inner.properties.values())!r}, "
            f"multi_properties={self._inner.multi_properties!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self._kind == other._kind and self._inner == other._inner

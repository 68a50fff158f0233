"""The Calendar component.

A calendar is the top level VCALENDAR object that groups components
together with the calendar properties describing the producer:

```python
from icsbuild.calendar import Calendar
from icsbuild.event import Event

calendar = Calendar().name("Launches")
calendar.push(Event().summary("Launch").done())
with open("/tmp/launches.ics", mode="w", newline="") as ics_file:
    calendar.fmt_write(ics_file)
```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
import datetime
import io
import logging
from types import MappingProxyType
from typing import Self

from .component import Clock, Component, InnerComponent, UidGenerator
from .const import ATTR_BEGIN, ATTR_END
from .exceptions import CalendarFormatError
from .property import Property, TextSink, write_line
from .util import prodid_factory

_LOGGER = logging.getLogger(__name__)

_VERSION = "2.0"
_KIND = "VCALENDAR"

VERSION = "VERSION"
PRODID = "PRODID"
CALSCALE = "CALSCALE"
METHOD = "METHOD"
NAME = "X-WR-CALNAME"
DESCRIPTION = "X-WR-CALDESC"
TIMEZONE = "X-WR-TIMEZONE"
REFRESH_INTERVAL = "REFRESH-INTERVAL"
PUBLISHED_TTL = "X-PUBLISHED-TTL"


def _encode_duration(value: datetime.timedelta) -> str:
    """Encode a positive timedelta as a DURATION value."""
    if value < datetime.timedelta(0):
        raise ValueError(f"Expected a positive duration, got {value}")
    seconds = int(value.total_seconds())
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    result = ["P"]
    if days:
        result.append(f"{days}D")
    if hours or minutes or seconds or not days:
        result.append("T")
        if hours:
            result.append(f"{hours}H")
        if minutes:
            result.append(f"{minutes}M")
        if seconds or not (hours or minutes):
            result.append(f"{seconds}S")
    return "".join(result)


def _require_finished(component: Component) -> Component:
    if not component.finished:
        raise ValueError(
            f"Can't add an unfinished {component.component_kind()} component, "
            "call done() first"
        )
    return component


class Calendar:
    """A sequence of calendar properties and calendar components."""

    def __init__(self) -> None:
        """Initialize an empty calendar."""
        self._inner = InnerComponent()
        self._components: list[Component] = []

    def properties(self) -> Mapping[str, Property]:
        """Copies of the calendar properties, ordered by key."""
        return MappingProxyType(
            {key: prop.copy() for key, prop in self._inner.properties.items()}
        )

    def components(self) -> Sequence[Component]:
        """Read-only access to the calendar components."""
        return tuple(self._components)

    def property_value(self, key: str) -> str | None:
        """Return the value of a calendar property."""
        if (prop := self._inner.properties.get(key)) is None:
            return None
        return prop.value

    def append_property(self, prop: Property) -> Self:
        """Set a calendar property, replacing any with the same key."""
        self._inner.insert(prop)
        return self

    def add_property(self, key: str, value: str) -> Self:
        """Construct and set a calendar property."""
        return self.append_property(Property(key, value))

    def push(self, component: Component) -> Self:
        """Add a finished component to the calendar.

        Raises a ValueError for a builder that hasn't been finished with
        `done()`, since its state moves out when it is finished.
        """
        self._components.append(_require_finished(component))
        return self

    def extend(self, components: Iterable[Component]) -> Self:
        """Add all the finished components to the calendar."""
        self._components.extend([_require_finished(c) for c in components])
        return self

    def prodid(self, prodid: str) -> Self:
        """Set the PRODID identifying the product that created the calendar."""
        return self.add_property(PRODID, prodid)

    def name(self, name: str) -> Self:
        """Set the display name of the calendar."""
        return self.add_property(NAME, name)

    def get_name(self) -> str | None:
        return self.property_value(NAME)

    def description(self, description: str) -> Self:
        """Set the description of the calendar."""
        return self.add_property(DESCRIPTION, description)

    def get_description(self) -> str | None:
        return self.property_value(DESCRIPTION)

    def timezone(self, tzid: str) -> Self:
        """Set the default timezone of the calendar."""
        return self.add_property(TIMEZONE, tzid)

    def get_timezone(self) -> str | None:
        return self.property_value(TIMEZONE)

    def calscale(self, calscale: str) -> Self:
        """Set the CALSCALE, e.g. GREGORIAN."""
        return self.add_property(CALSCALE, calscale)

    def method(self, method: str) -> Self:
        """Set the iTIP METHOD, e.g. PUBLISH."""
        return self.add_property(METHOD, method)

    def ttl(self, duration: datetime.timedelta) -> Self:
        """Set how often subscribers should refresh the calendar."""
        value = _encode_duration(duration)
        return self.append_property(
            Property(REFRESH_INTERVAL, value).add_parameter("VALUE", "DURATION")
        ).add_property(PUBLISHED_TTL, value)

    def fmt_write(
        self,
        out: TextSink,
        *,
        clock: Clock | None = None,
        uid_generator: UidGenerator | None = None,
    ) -> None:
        """Write the calendar and all of its components as rfc5545 text.

        The clock and uid generator are passed to each component. Raises a
        CalendarFormatError if the sink rejects a write.
        """
        properties = self._inner.properties
        _LOGGER.debug(
            "Encoding calendar with %s components", len(self._components)
        )
        write_line(out, f"{ATTR_BEGIN}:{_KIND}")
        if VERSION not in properties:
            Property(VERSION, _VERSION).fmt_write(out)
        if PRODID not in properties:
            Property(PRODID, prodid_factory()).fmt_write(out)
        for prop in properties.values():
            prop.fmt_write(out)
        for component in self._components:
            component.fmt_write(out, clock=clock, uid_generator=uid_generator)
        write_line(out, f"{ATTR_END}:{_KIND}")

    def ics(
        self,
        *,
        clock: Clock | None = None,
        uid_generator: UidGenerator | None = None,
    ) -> str:
        """Encode the calendar as rfc5545 text.

        Raises a CalendarFormatError if encoding fails.
        """
        out = io.StringIO()
        self.fmt_write(out, clock=clock, uid_generator=uid_generator)
        return out.getvalue()

    def to_string(self) -> str:
        """Encode the calendar as rfc5545 text for callers that can't recover."""
        try:
            return self.ics()
        except CalendarFormatError as err:
            raise RuntimeError("Failed to encode calendar") from err

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

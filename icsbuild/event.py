"""A grouping of component properties that describe a calendar event.

An event can be an activity (e.g. a meeting from 8am to 9am tomorrow)
grouping of properties such as a summary or a description. An event start
and end time may either be a date and time or just a day alone.

Example:
```python
import datetime
from icsbuild.event import Event

event = (
    Event()
    .summary("Morning exercise")
    .starts(datetime.datetime(2022, 8, 31, 7, 00, 00))
    .ends(datetime.datetime(2022, 8, 31, 7, 30, 00))
    .done()
)
```
"""

from __future__ import annotations

from typing import Self

from .component import Component, ComponentKind
from .types import EventStatus

STATUS = "STATUS"


class Event(Component):
    """A single event on a calendar."""

    def __init__(self) -> None:
        """Initialize an empty VEVENT."""
        super().__init__(ComponentKind.EVENT)

    def status(self, status: EventStatus) -> Self:
        """Set the STATUS, i.e. if the event is confirmed by the organizer."""
        return self.add_property(STATUS, EventStatus(status).value)

    def get_status(self) -> EventStatus | None:
        """Return the STATUS."""
        if (value := self.property_value(STATUS)) is None:
            return None
        return EventStatus.__parse_property_value__(value)

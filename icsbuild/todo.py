"""A grouping of component properties that describe a to-do.

A to-do is an action item or assignment, such as an item on a checklist.
It may have a due date and keeps track of how far along it is.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Self

from .component import Component, ComponentKind
from .types import (
    DatePerhapsTime,
    TodoStatus,
    UtcDateTime,
    as_date_perhaps_time,
    parse_utc_date_time,
)

_LOGGER = logging.getLogger(__name__)

STATUS = "STATUS"
DUE = "DUE"
COMPLETED = "COMPLETED"
PERCENT_COMPLETE = "PERCENT-COMPLETE"


class Todo(Component):
    """A calendar todo component."""

    def __init__(self) -> None:
        """Initialize an empty VTODO."""
        super().__init__(ComponentKind.TODO)

    def status(self, status: TodoStatus) -> Self:
        """Set the STATUS of the to-do."""
        return self.add_property(STATUS, TodoStatus(status).value)

    def get_status(self) -> TodoStatus | None:
        """Return the STATUS."""
        if (value := self.property_value(STATUS)) is None:
            return None
        return TodoStatus.__parse_property_value__(value)

    def due(self, value: Any) -> Self:
        """Set the date or date and time the to-do is expected to be completed."""
        return self.append_property(as_date_perhaps_time(value).to_property(DUE))

    def get_due(self) -> DatePerhapsTime | None:
        """Return the DUE date."""
        return self._get_date_perhaps_time(DUE)

    def completed(self, completed: datetime.datetime) -> Self:
        """Set the time the to-do was completed, which is stored in UTC."""
        return self.append_property(
            UtcDateTime(date_time=completed).to_property(COMPLETED)
        )

    def get_completed(self) -> datetime.datetime | None:
        """Return the COMPLETED time."""
        if (value := self.property_value(COMPLETED)) is None:
            return None
        return parse_utc_date_time(value)

    def percent_complete(self, percent: int) -> Self:
        """Set the PERCENT-COMPLETE, truncated into the range 0 to 100."""
        percent = min(max(percent, 0), 100)
        return self.add_property(PERCENT_COMPLETE, str(percent))

    def get_percent_complete(self) -> int | None:
        """Return the PERCENT-COMPLETE."""
        if (value := self.property_value(PERCENT_COMPLETE)) is None:
            return None
        try:
            percent = int(value)
        except ValueError:
            _LOGGER.debug("Ignoring non-numeric percent complete '%s'", value)
            return None
        if percent < 0 or percent > 100:
            return None
        return percent

"""Parser for the PRIORITY type."""

from __future__ import annotations

import logging

_LOGGER = logging.getLogger(__name__)

MIN_PRIORITY = 0
MAX_PRIORITY = 10


class Priority(int):
    """Defines relative priority for a calendar component.

    Values range from 0 (undefined) to 10. Larger values are truncated
    when set, and stored values outside the range are ignored when read.
    """

    @classmethod
    def clamp(cls, value: int) -> Priority:
        """Truncate a value into the allowed range."""
        return cls(min(max(value, MIN_PRIORITY), MAX_PRIORITY))

    @classmethod
    def parse_priority(cls, value: str) -> Priority | None:
        """Parse a rfc5545 value, returning None when it's not a valid priority."""
        try:
            priority = int(value)
        except ValueError:
            _LOGGER.debug("Ignoring non-numeric priority '%s'", value)
            return None
        if priority < MIN_PRIORITY or priority > MAX_PRIORITY:
            _LOGGER.debug("Ignoring priority %s outside of range", priority)
            return None
        return cls(priority)

"""Constants and enums representing rfc5545 values."""

import enum
import logging
from typing import Self

_LOGGER = logging.getLogger(__name__)


class _PropertyEnum(str, enum.Enum):
    """An enum with a fixed vocabulary of property values."""

    @classmethod
    def __parse_property_value__(cls, value: str) -> Self | None:
        """Parse value into enum."""
        try:
            return cls(value)
        except ValueError:
            _LOGGER.debug("Ignoring unrecognized %s '%s'", cls.__name__, value)
            return None


class Classification(_PropertyEnum):
    """Defines the access classification for a calendar component."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    CONFIDENTIAL = "CONFIDENTIAL"


class EventStatus(_PropertyEnum):
    """Status or confirmation of the event set by the organizer."""

    CONFIRMED = "CONFIRMED"
    """Indicates event is definite."""

    TENTATIVE = "TENTATIVE"
    """Indicates event is tentative."""

    CANCELLED = "CANCELLED"
    """Indicates event was cancelled."""


class TodoStatus(_PropertyEnum):
    """Status or confirmation of the to-do."""

    NEEDS_ACTION = "NEEDS-ACTION"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"
    CANCELLED = "CANCELLED"

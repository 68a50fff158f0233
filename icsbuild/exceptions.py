"""Exceptions for icsbuild library."""


class CalendarError(Exception):
    """Base exception for all icsbuild errors."""


class CalendarFormatError(CalendarError):
    """Exception raised when a component can't be written as rfc5545 text.

    Encoding itself never fails; this is raised when the text sink rejects
    a write, such as a closed stream or a full disk. The original error is
    chained as the cause.
    """


class ComponentFinishedError(CalendarError):
    """Exception raised when mutating a component after `done()`.

    A finished component is a read-only value. Keep building on the
    builder it came from instead, which was reset to an empty state.
    """

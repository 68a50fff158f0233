"""A library for building rfc5545 iCalendar components.

Components are built with chained calls and written as iCalendar text with
CRLF line endings, required DTSTAMP and UID properties filled in, and dates
encoded in the rfc5545 DATE and DATE-TIME forms.
"""

__all__ = [
    "calendar",
    "component",
    "event",
    "todo",
    "venue",
    "property",
    "types",
    "compat",
    "exceptions",
    "util",
]

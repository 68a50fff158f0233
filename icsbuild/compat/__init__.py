"""Compatibility layer for consumers of non-conforming iCalendar output.

This module provides switches that relax the encoding rules for calendar
clients that expect the output of older producers.
"""

from .escape_compat import enable_verbatim_values

__all__ = [
    "enable_verbatim_values",
]

"""Compatibility layer for writing TEXT values without escaping.

Some consumers were built against producers that wrote property values
verbatim, for example a DESCRIPTION containing a raw comma. This allows
reproducing that output when needed.
"""

from collections.abc import Generator
import contextlib
import contextvars


_verbatim_values = contextvars.ContextVar("verbatim_values", default=False)


@contextlib.contextmanager
def enable_verbatim_values() -> Generator[None]:
    """Context manager to write TEXT property values without escaping."""
    token = _verbatim_values.set(True)
    try:
        yield
    finally:
        _verbatim_values.reset(token)


def is_verbatim_values_enabled() -> bool:
    """Check if writing verbatim values is enabled."""
    return _verbatim_values.get()

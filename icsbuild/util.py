"""Utility methods used by multiple components."""

from __future__ import annotations

import datetime
from importlib import metadata
import uuid

__all__ = [
    "dtstamp_factory",
    "uid_factory",
    "prodid_factory",
]


PRODID = "github.com/icsbuild/icsbuild"


def dtstamp_factory() -> datetime.datetime:
    """Factory method for new component timestamps to facilitate mocking."""
    return datetime.datetime.now(tz=datetime.UTC)


def uid_factory() -> str:
    """Factory method for new uids to facilitate mocking."""
    return str(uuid.uuid4())


def prodid_factory() -> str:
    """Return the icsbuild version to facilitate mocking."""
    try:
        version = metadata.version("icsbuild")
    except metadata.PackageNotFoundError:
        version = "0.0.0"
    return f"-//{PRODID}//{version}//EN"

"""Test fixtures."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

PRODID = "-//example//1.2.3"
UID = "mock-uid-1"


@pytest.fixture(autouse=True)
def mock_prodid() -> Generator[None, None, None]:
    """Mock out the prodid used in tests."""
    with patch("icsbuild.calendar.prodid_factory", return_value=PRODID):
        yield


@pytest.fixture
def mock_uid() -> Generator[str, None, None]:
    """Mock out the uid generated for components without one."""
    with patch("icsbuild.component.uid_factory", return_value=UID):
        yield UID

"""Tests for Calendar component."""

from __future__ import annotations

import datetime
from unittest.mock import patch

import pytest

from icsbuild.calendar import Calendar
from icsbuild.event import Event
from icsbuild.exceptions import CalendarFormatError
from icsbuild.todo import Todo

PRODID = "-//example//1.2.3"
DTSTAMP = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)


def fixed_clock() -> datetime.datetime:
    return DTSTAMP


def test_empty_calendar() -> None:
    """Test encoding a calendar without components."""
    calendar = Calendar()
    assert len(calendar) == 0
    assert calendar.ics() == (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        f"PRODID:{PRODID}\r\n"
        "END:VCALENDAR\r\n"
    )


def test_calendar_components() -> None:
    """Test a calendar with components and calendar properties."""
    uids = iter(["uid-1", "uid-2"])
    calendar = (
        Calendar()
        .name("Launches")
        .description("Product launches")
        .timezone("Europe/Berlin")
        .push(Event().summary("Launch").done())
        .extend([Todo().summary("Prepare").done()])
    )
    assert len(calendar) == 2
    assert [c.component_kind() for c in calendar] == ["VEVENT", "VTODO"]
    assert calendar.get_name() == "Launches"
    assert calendar.get_description() == "Product launches"
    assert calendar.get_timezone() == "Europe/Berlin"

    ics = calendar.ics(clock=fixed_clock, uid_generator=lambda: next(uids))
    assert ics == (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        f"PRODID:{PRODID}\r\n"
        "X-WR-CALDESC:Product launches\r\n"
        "X-WR-CALNAME:Launches\r\n"
        "X-WR-TIMEZONE:Europe/Berlin\r\n"
        "BEGIN:VEVENT\r\n"
        "DTSTAMP:20240102T030405Z\r\n"
        "SUMMARY:Launch\r\n"
        "UID:uid-1\r\n"
        "END:VEVENT\r\n"
        "BEGIN:VTODO\r\n"
        "DTSTAMP:20240102T030405Z\r\n"
        "SUMMARY:Prepare\r\n"
        "UID:uid-2\r\n"
        "END:VTODO\r\n"
        "END:VCALENDAR\r\n"
    )


def test_explicit_prodid() -> None:
    """Test overriding the PRODID."""
    calendar = Calendar().prodid("-//Acme//Planner 2.1//EN").method("PUBLISH")
    assert calendar.to_string() == (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "METHOD:PUBLISH\r\n"
        "PRODID:-//Acme//Planner 2.1//EN\r\n"
        "END:VCALENDAR\r\n"
    )
    assert str(calendar) == calendar.to_string()


@pytest.mark.parametrize(
    ("ttl", "expected"),
    [
        (datetime.timedelta(hours=1), "PT1H"),
        (datetime.timedelta(minutes=90), "PT1H30M"),
        (datetime.timedelta(days=1), "P1D"),
        (datetime.timedelta(days=1, seconds=5), "P1DT5S"),
        (datetime.timedelta(0), "PT0S"),
    ],
)
def test_ttl(ttl: datetime.timedelta, expected: str) -> None:
    """Test the refresh interval properties."""
    calendar = Calendar().ttl(ttl)
    assert calendar.property_value("X-PUBLISHED-TTL") == expected
    assert f"REFRESH-INTERVAL;VALUE=DURATION:{expected}\r\n" in calendar.ics()


def test_negative_ttl() -> None:
    """Test a negative refresh interval is rejected."""
    with pytest.raises(ValueError):
        Calendar().ttl(datetime.timedelta(hours=-1))


def test_calscale() -> None:
    """Test setting the calendar scale."""
    calendar = Calendar().calscale("GREGORIAN")
    assert "CALSCALE:GREGORIAN\r\n" in calendar.ics()
    assert list(calendar.properties()) == ["CALSCALE"]
    assert calendar.components() == ()


def test_fmt_write_failure() -> None:
    """Test a failing sink is reported as a format error."""

    class ClosedSink:
        def write(self, text: str) -> int:
            raise ValueError("I/O operation on closed file.")

    with pytest.raises(CalendarFormatError):
        Calendar().fmt_write(ClosedSink())


def test_unfinished_components_rejected() -> None:
    """Test only finished components can be added to a calendar."""
    builder = Event().summary("Launch")
    calendar = Calendar()
    with pytest.raises(ValueError, match="done"):
        calendar.push(builder)
    with pytest.raises(ValueError):
        calendar.extend([Todo().summary("Prepare").done(), builder])
    assert len(calendar) == 0

    calendar.push(builder.done())
    assert [c.get_summary() for c in calendar] == ["Launch"]
    builder.summary("Other").done()
    assert "SUMMARY:Launch\r\n" in calendar.ics(clock=fixed_clock)


def test_to_string_failure() -> None:
    """Test an encoding failure is raised as a RuntimeError from to_string."""
    with patch.object(
        Calendar, "ics", side_effect=CalendarFormatError("Failed to write")
    ), pytest.raises(RuntimeError):
        Calendar().to_string()

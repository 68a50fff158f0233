"""Tests for Venue component."""

import datetime

from icsbuild.event import Event
from icsbuild.venue import Venue

DTSTAMP = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)


def test_venue() -> None:
    """Test the venue address properties."""
    venue = (
        Venue()
        .uid("venue-1")
        .name("Town Hall")
        .street_address("1 Main Street")
        .extended_address("Suite 2")
        .locality("Springfield")
        .region("OR")
        .country("USA")
        .postal_code("97477")
        .done()
    )
    assert venue.get_name() == "Town Hall"
    assert venue.get_street_address() == "1 Main Street"
    assert venue.get_extended_address() == "Suite 2"
    assert venue.get_locality() == "Springfield"
    assert venue.get_region() == "OR"
    assert venue.get_country() == "USA"
    assert venue.get_postal_code() == "97477"

    assert venue.ics(clock=lambda: DTSTAMP) == (
        "BEGIN:VVENUE\r\n"
        "DTSTAMP:20240102T030405Z\r\n"
        "COUNTRY:USA\r\n"
        "EXTENDED-ADDRESS:Suite 2\r\n"
        "LOCALITY:Springfield\r\n"
        "NAME:Town Hall\r\n"
        "POSTAL-CODE:97477\r\n"
        "REGION:OR\r\n"
        "STREET-ADDRESS:1 Main Street\r\n"
        "UID:venue-1\r\n"
        "END:VVENUE\r\n"
    )


def test_event_at_venue() -> None:
    """Test an event referring to a venue by uid."""
    venue = Venue().name("Town Hall").done()
    event = Event().summary("Meeting").venue("Town Hall", "venue-1").done()
    assert event.get_location() == venue.get_name()
    assert "LOCATION;VVENUE=venue-1:Town Hall\r\n" in event.ics()

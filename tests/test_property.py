"""Tests for handling rfc5545 properties and parameters."""

import io

import pytest

from icsbuild.exceptions import CalendarFormatError
from icsbuild.property import Parameter, Property


def test_property_ics() -> None:
    """Test encoding a simple property."""
    prop = Property("SUMMARY", "Launch")
    assert prop.key == "SUMMARY"
    assert prop.value == "Launch"
    assert prop.ics() == "SUMMARY:Launch"


def test_key_is_verbatim() -> None:
    """Test that the property key is not normalized."""
    assert Property("x-Custom", "value").ics() == "x-Custom:value"


def test_parameters_keep_order_and_duplicates() -> None:
    """Test that parameters are written in the order they were added."""
    prop = (
        Property("ATTENDEE", "mailto:jane@example.com")
        .add_parameter("ROLE", "CHAIR")
        .append_parameter(Parameter("ROLE", "REQ-PARTICIPANT"))
    )
    assert len(prop.parameters) == 2
    assert prop.ics() == (
        "ATTENDEE;ROLE=CHAIR;ROLE=REQ-PARTICIPANT:mailto:jane@example.com"
    )


def test_get_parameter() -> None:
    """Test looking up a parameter by name."""
    prop = Property("DTSTART", "20240101T100000").add_parameter(
        "TZID", "Europe/Berlin"
    )
    assert prop.get_parameter("tzid") == Parameter("TZID", "Europe/Berlin")
    assert prop.get_parameter_value("TZID") == "Europe/Berlin"
    assert prop.get_parameter("VALUE") is None
    assert prop.get_parameter_value("VALUE") is None


def test_equality() -> None:
    """Test properties are equal only with the same parameters."""
    assert Property("SUMMARY", "a") == Property("SUMMARY", "a")
    assert Property("SUMMARY", "a") != Property("SUMMARY", "b")
    assert Property("SUMMARY", "a") != Property("SUMMARY", "a").add_parameter(
        "LANGUAGE", "en"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Meeting, with lunch", "SUMMARY:Meeting\\, with lunch"),
        ("Room 1; Room 2", "SUMMARY:Room 1\\; Room 2"),
        ("C:\\Users", "SUMMARY:C:\\\\Users"),
        ("line one\nline two", "SUMMARY:line one\\nline two"),
        ("line one\r\nline two", "SUMMARY:line one\\nline two"),
        ("a\\,b", "SUMMARY:a\\\\\\,b"),
    ],
)
def test_text_escaping(value: str, expected: str) -> None:
    """Test TEXT values are escaped when written."""
    prop = Property("SUMMARY", value)
    assert prop.ics() == expected
    assert prop.value == value


@pytest.mark.parametrize(
    ("prop", "expected"),
    [
        (Property("RRULE", "FREQ=DAILY;COUNT=5"), "RRULE:FREQ=DAILY;COUNT=5"),
        (Property("GEO", "37.386013;-122.082932"), "GEO:37.386013;-122.082932"),
        (
            Property("CATEGORIES", "WORK,TRAVEL"),
            "CATEGORIES:WORK,TRAVEL",
        ),
        (
            Property("X-LINK", "https://example.com/a,b").add_parameter(
                "VALUE", "URI"
            ),
            "X-LINK;VALUE=URI:https://example.com/a,b",
        ),
        (
            Property("X-NOTE", "a,b").add_parameter("VALUE", "TEXT"),
            "X-NOTE;VALUE=TEXT:a\\,b",
        ),
    ],
)
def test_structured_values_not_escaped(prop: Property, expected: str) -> None:
    """Test values that are not TEXT are written as is."""
    assert prop.ics() == expected


@pytest.mark.parametrize(
    ("param", "expected"),
    [
        (Parameter("TZID", "America/New_York"), "TZID=America/New_York"),
        (Parameter("CN", "Doe, Jane"), 'CN="Doe, Jane"'),
        (Parameter("DELEGATED-TO", "mailto:a@example.com"), 'DELEGATED-TO="mailto:a@example.com"'),
        (Parameter("CN", 'George Herman "Babe" Ruth'), "CN=George Herman ^'Babe^' Ruth"),
        (Parameter("X-NOTE", "a^b"), "X-NOTE=a^^b"),
        (Parameter("X-ADDR", "Line 1\nLine 2"), "X-ADDR=Line 1^nLine 2"),
    ],
)
def test_parameter_encoding(param: Parameter, expected: str) -> None:
    """Test parameter values are quoted and caret encoded."""
    assert param.ics() == expected


def test_fmt_write() -> None:
    """Test a property is written with a CRLF line terminator."""
    out = io.StringIO()
    Property("SUMMARY", "Launch").fmt_write(out)
    Property("URL", "https://example.com").fmt_write(out)
    assert out.getvalue() == "SUMMARY:Launch\r\nURL:https://example.com\r\n"


def test_fmt_write_failure() -> None:
    """Test a failing sink is reported as a format error."""
    out = io.StringIO()
    out.close()
    with pytest.raises(CalendarFormatError):
        Property("SUMMARY", "Launch").fmt_write(out)

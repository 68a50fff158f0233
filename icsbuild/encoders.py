"""Library for encoding TEXT values and property parameter values."""

from collections.abc import Iterable
import re

UNESCAPE_CHAR = {"\\\\": "\\", "\\;": ";", "\\,": ",", "\\N": "\n", "\\n": "\n"}
ESCAPE_CHAR = {v: k for k, v in UNESCAPE_CHAR.items()}

# rfc6868 encoding for characters not allowed in parameter values
PARAM_ESCAPE_CHAR = {"^": "^^", "\n": "^n", '"': "^'"}

# Characters that should be encoded in quotes
_UNSAFE_CHAR_RE = re.compile(r"[,:;]")
_NEWLINE_RE = re.compile(r"\r\n?")

# Properties whose value type is not TEXT, or that hold a structured value
# that must be written as is. CATEGORIES and RESOURCES hold a list where a
# comma separates values, so each value is escaped with `TextEncoder.encode_list`
# before the list is stored.
NON_TEXT_PROPERTIES = frozenset(
    {
        "ATTACH",
        "ATTENDEE",
        "CATEGORIES",
        "COMPLETED",
        "CREATED",
        "DTEND",
        "DTSTAMP",
        "DTSTART",
        "DUE",
        "DURATION",
        "EXDATE",
        "EXRULE",
        "FREEBUSY",
        "GEO",
        "LAST-MODIFIED",
        "ORGANIZER",
        "PERCENT-COMPLETE",
        "PRIORITY",
        "RDATE",
        "RECURRENCE-ID",
        "REFRESH-INTERVAL",
        "REPEAT",
        "REQUEST-STATUS",
        "RESOURCES",
        "RRULE",
        "SEQUENCE",
        "TRIGGER",
        "TZOFFSETFROM",
        "TZOFFSETTO",
        "TZURL",
        "URL",
        "X-PUBLISHED-TTL",
    }
)


def is_text_property(key: str, value_type: str | None = None) -> bool:
    """Return True if the property value should be escaped as TEXT."""
    if value_type is not None:
        return value_type.upper() == "TEXT"
    return key.upper() not in NON_TEXT_PROPERTIES


class TextEncoder:
    """Encode an rfc5545 TEXT value."""

    @classmethod
    def __encode_property_value__(cls, value: str) -> str:
        """Serialize text as an ICS value."""
        value = _NEWLINE_RE.sub("\n", value)
        for key, vin in ESCAPE_CHAR.items():
            if key not in value:
                continue
            value = value.replace(key, vin)
        return value

    @classmethod
    def encode_list(cls, values: Iterable[str]) -> str:
        """Serialize a comma separated list of TEXT, like CATEGORIES."""
        return ",".join(cls.__encode_property_value__(value) for value in values)


def encode_parameter_value(value: str) -> str:
    """Serialize a property parameter value.

    Characters that can't appear in a parameter value use the rfc6868 caret
    encoding, and values containing a colon, semicolon, or a comma character
    are placed in quoted text.
    """
    value = _NEWLINE_RE.sub("\n", value)
    for key, vin in PARAM_ESCAPE_CHAR.items():
        if key not in value:
            continue
        value = value.replace(key, vin)
    if _UNSAFE_CHAR_RE.search(value):
        return f'"{value}"'
    return value

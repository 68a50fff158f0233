"""Constants for rfc5545 text encoding."""

CRLF = "\r\n"
ATTR_BEGIN = "BEGIN"
ATTR_END = "END"

ATTR_VALUE = "VALUE"
ATTR_TZID = "TZID"

"""Library for handling rfc5545 properties and parameters.

A property is the definition of an individual attribute describing a
calendar component, written as a single "contentline". A property has a
name, a value, and an ordered list of parameters that carry metadata about
the value.

For example, the contentline:

  DUE;VALUE=DATE:20070501

Is represented as:

  Property(
    key='DUE',
    value='20070501',
    parameters=[
        Parameter(name='VALUE', value='DATE')
    ]
  )

Values are stored exactly as given and are only escaped when the property
is written out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from .compat import escape_compat
from .const import ATTR_VALUE, CRLF
from .encoders import TextEncoder, encode_parameter_value, is_text_property
from .exceptions import CalendarFormatError


class TextSink(Protocol):
    """A destination for encoded text such as `io.StringIO` or an open file."""

    def write(self, text: str, /) -> Any:
        """Write the text to the sink."""


def write_line(out: TextSink, line: str) -> None:
    """Write a single contentline terminated with CRLF.

    Raises a CalendarFormatError when the sink rejects the write.
    """
    try:
        out.write(line + CRLF)
    except (OSError, ValueError) as err:
        raise CalendarFormatError(
            f"Failed to write contentline: {err}"
        ) from err


@dataclass
class Parameter:
    """An rfc5545 property parameter."""

    name: str
    value: str

    def ics(self) -> str:
        """Encode the parameter as NAME=VALUE."""
        return f"{self.name}={encode_parameter_value(self.value)}"


@dataclass
class Property:
    """An rfc5545 property."""

    key: str
    value: str
    parameters: list[Parameter] = field(default_factory=list)

    def append_parameter(self, parameter: Parameter) -> Property:
        """Append a parameter, keeping any existing one with the same name."""
        self.parameters.append(parameter)
        return self

    def add_parameter(self, name: str, value: str) -> Property:
        """Construct and append a parameter."""
        return self.append_parameter(Parameter(name, value))

    def copy(self) -> Property:
        """Return a copy that shares no parameter objects with this property."""
        return Property(
            self.key,
            self.value,
            [Parameter(param.name, param.value) for param in self.parameters],
        )

    def get_parameter(self, name: str) -> Parameter | None:

        """Return the first parameter with the specified name."""
        for param in self.parameters:
            if param.name.lower() != name.lower():
                continue
            return param
        return None

    def get_parameter_value(self, name: str) -> str | None:
        """Return the property parameter value."""
        if not (param := self.get_parameter(name)):
            return None
        return param.value

    def ics(self) -> str:
        """Encode the property as a contentline, without the line terminator."""
        result = [self.key]
        for parameter in self.parameters:
            result.append(";")
            result.append(parameter.ics())
        result.append(":")
        value = self.value
        if not escape_compat.is_verbatim_values_enabled() and is_text_property(
            self.key, self.get_parameter_value(ATTR_VALUE)
        ):
            value = TextEncoder.__encode_property_value__(value)
        result.append(value)
        return "".join(result)

    def fmt_write(self, out: TextSink) -> None:
        """Write the property to the sink as a CRLF terminated contentline."""
        write_line(out, self.ics())

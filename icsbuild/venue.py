"""A venue component from the iCalendar venue draft.

A VVENUE describes a location in detail, and other components refer to it
by UID from their LOCATION property (see `Component.venue`).
"""

from __future__ import annotations

from typing import Self

from .component import Component, ComponentKind

NAME = "NAME"
STREET_ADDRESS = "STREET-ADDRESS"
EXTENDED_ADDRESS = "EXTENDED-ADDRESS"
LOCALITY = "LOCALITY"
REGION = "REGION"
COUNTRY = "COUNTRY"
POSTAL_CODE = "POSTAL-CODE"


class Venue(Component):
    """A calendar venue component."""

    def __init__(self) -> None:
        """Initialize an empty VVENUE."""
        super().__init__(ComponentKind.VENUE)

    def name(self, name: str) -> Self:
        """Set the NAME of the venue."""
        return self.add_property(NAME, name)

    def get_name(self) -> str | None:
        return self.property_value(NAME)

    def street_address(self, address: str) -> Self:
        """Set the STREET-ADDRESS."""
        return self.add_property(STREET_ADDRESS, address)

    def get_street_address(self) -> str | None:
        return self.property_value(STREET_ADDRESS)

    def extended_address(self, address: str) -> Self:
        """Set the EXTENDED-ADDRESS, e.g. a suite or apartment number."""
        return self.add_property(EXTENDED_ADDRESS, address)

    def get_extended_address(self) -> str | None:
        return self.property_value(EXTENDED_ADDRESS)

    def locality(self, locality: str) -> Self:
        """Set the LOCALITY, e.g. the city."""
        return self.add_property(LOCALITY, locality)

    def get_locality(self) -> str | None:
        return self.property_value(LOCALITY)

    def region(self, region: str) -> Self:
        """Set the REGION, e.g. the state or province."""
        return self.add_property(REGION, region)

    def get_region(self) -> str | None:
        return self.property_value(REGION)

    def country(self, country: str) -> Self:
        """Set the COUNTRY."""
        return self.add_property(COUNTRY, country)

    def get_country(self) -> str | None:
        return self.property_value(COUNTRY)

    def postal_code(self, postal_code: str) -> Self:
        """Set the POSTAL-CODE."""
        return self.add_property(POSTAL_CODE, postal_code)

    def get_postal_code(self) -> str | None:
        return self.property_value(POSTAL_CODE)

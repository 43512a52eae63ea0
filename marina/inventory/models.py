"""Mini README: Boat records and their location variants.

Structure:
    * LocationType - enum of the four places a boat can be kept.
    * SlipLocation / LandLocation / TrailorLocation / StorageLocation - one
      dataclass per location kind, each carrying only its own identifier.
    * Boat - dataclass describing a vessel, its location and its balance.

A boat always holds exactly one location object and the location object is
the single source of truth for ``Boat.location_type``. Identifier ranges
(slips 1-85, storage spaces 1-50, bays A-Z) are documented but deliberately
not enforced, matching how existing data files have been written.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from ..errors import LocationTypeError


class LocationType(str, Enum):
    """Enumerate the supported location kinds using their file keywords."""

    SLIP = "slip"
    LAND = "land"
    TRAILOR = "trailor"
    STORAGE = "storage"

    @classmethod
    def from_str(cls, value: str) -> "LocationType":
        """Coerce arbitrary casing into a valid location type."""

        try:
            normalised = value.lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise LocationTypeError(f"Unsupported location type: {value}") from error


@dataclass(frozen=True, slots=True)
class SlipLocation:
    """Boat moored in a numbered slip."""

    location_type: ClassVar[LocationType] = LocationType.SLIP

    slip_number: int

    def as_field(self) -> str:
        return str(self.slip_number)

    def describe(self) -> str:
        return f"{self.location_type.value:>8}   # {self.slip_number:2d}"


@dataclass(frozen=True, slots=True)
class LandLocation:
    """Boat on land for work, identified by a bay letter."""

    location_type: ClassVar[LocationType] = LocationType.LAND

    bay_letter: str

    def as_field(self) -> str:
        return self.bay_letter

    def describe(self) -> str:
        return f"{self.location_type.value:>8}      {self.bay_letter}"


@dataclass(frozen=True, slots=True)
class TrailorLocation:
    """Boat kept on a trailor, identified by its licence tag."""

    location_type: ClassVar[LocationType] = LocationType.TRAILOR

    tag: str

    def as_field(self) -> str:
        return self.tag

    def describe(self) -> str:
        return f"{self.location_type.value:>8} {self.tag:>6}"


@dataclass(frozen=True, slots=True)
class StorageLocation:
    """Boat in a numbered storage space."""

    location_type: ClassVar[LocationType] = LocationType.STORAGE

    space_number: int

    def as_field(self) -> str:
        return str(self.space_number)

    def describe(self) -> str:
        return f"{self.location_type.value:>8}   # {self.space_number:2d}"


Location = Union[SlipLocation, LandLocation, TrailorLocation, StorageLocation]


@dataclass(slots=True)
class Boat:
    """Represent one vessel in the marina inventory."""

    name: str
    length: float
    location: Location
    amount_owed: float = 0.0

    @property
    def location_type(self) -> LocationType:
        """Location kind derived from the attached location payload."""

        return self.location.location_type

    def matches(self, name: str) -> bool:
        """Return True when ``name`` equals this boat's name ignoring case."""

        return self.name.lower() == name.lower()

    def sort_key(self) -> tuple:
        """Key ordering boats by case-insensitive name, ties by raw name."""

        return (self.name.lower(), self.name)

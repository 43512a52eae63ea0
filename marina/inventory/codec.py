"""Mini README: CSV codec converting boat records to and from text lines.

Structure:
    * decode_boat - parse ``name,length,type,location,owed`` into a Boat.
    * encode_boat - serialise a Boat back into the same line format.
    * parse_lenient_float / parse_lenient_int - prefix based numeric parsing.

Numbers are parsed leniently: the longest numeric prefix of a field is used
and text without one reads as zero, so ``"12ft"`` is 12 and ``"n/a"`` is 0.
Lengths are written without decimals, which means a decoded fractional
length is rounded the first time it is saved.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from ..errors import BoatFormatError
from .models import (
    Boat,
    LandLocation,
    Location,
    LocationType,
    SlipLocation,
    StorageLocation,
    TrailorLocation,
)

FIELD_SEPARATOR = ","
FIELD_COUNT = 5
MAX_NAME_LENGTH = 127
TRAILOR_TAG_LENGTH = 9

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def parse_lenient_float(text: str) -> float:
    """Return the leading decimal number in ``text`` or 0.0 when there is none."""

    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def parse_lenient_int(text: str) -> int:
    """Return the leading integer in ``text`` or 0 when there is none."""

    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


_LOCATION_PARSERS: Dict[LocationType, Callable[[str], Location]] = {
    LocationType.SLIP: lambda raw: SlipLocation(slip_number=parse_lenient_int(raw)),
    LocationType.LAND: lambda raw: LandLocation(bay_letter=raw[0]),
    LocationType.TRAILOR: lambda raw: TrailorLocation(tag=raw[:TRAILOR_TAG_LENGTH]),
    LocationType.STORAGE: lambda raw: StorageLocation(space_number=parse_lenient_int(raw)),
}


def _field(fields: List[str], index: int, label: str) -> str:
    """Return a required field, raising when it is missing or empty."""

    if index >= len(fields) or not fields[index]:
        raise BoatFormatError(f"Missing {label} field")
    return fields[index]


def decode_boat(line: str) -> Boat:
    """Parse a single CSV line into a Boat.

    Fields are consumed left to right, so a bad location keyword is reported
    as a ``LocationTypeError`` even when later fields are also missing.
    """

    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    name = _field(fields, 0, "name")[:MAX_NAME_LENGTH]
    length = parse_lenient_float(_field(fields, 1, "length"))
    location_type = LocationType.from_str(_field(fields, 2, "location type"))
    location = _LOCATION_PARSERS[location_type](_field(fields, 3, "location"))
    amount_owed = parse_lenient_float(_field(fields, 4, "amount owed"))
    if len(fields) > FIELD_COUNT:
        raise BoatFormatError(
            f"Expected {FIELD_COUNT} fields but found {len(fields)}"
        )
    return Boat(name=name, length=length, location=location, amount_owed=amount_owed)


def encode_boat(boat: Boat) -> str:
    """Serialise a Boat into a newline-terminated CSV line."""

    return (
        f"{boat.name},{boat.length:.0f},{boat.location_type.value},"
        f"{boat.location.as_field()},{boat.amount_owed:.2f}\n"
    )

"""Mini README: Boat records, their CSV codec and the sorted inventory.

This package groups the record model, the line-oriented codec used for the
data file and the in-memory store the interactive shell works against.
"""

from .codec import decode_boat, encode_boat, parse_lenient_float, parse_lenient_int
from .models import (
    Boat,
    LandLocation,
    Location,
    LocationType,
    SlipLocation,
    StorageLocation,
    TrailorLocation,
)
from .store import BoatInventory

__all__ = [
    "Boat",
    "BoatInventory",
    "LandLocation",
    "Location",
    "LocationType",
    "SlipLocation",
    "StorageLocation",
    "TrailorLocation",
    "decode_boat",
    "encode_boat",
    "parse_lenient_float",
    "parse_lenient_int",
]

"""Mini README: Sorted, capacity-bounded inventory of boats.

Structure:
    * BoatInventory - owns the boat records and their file round trip.

The inventory keeps boats ordered by case-insensitive name after every load
and insertion. Names are not required to be unique; lookups return the first
match in the current order. Loading tolerates a missing file and silently
drops malformed lines, whereas interactive additions surface errors so the
operator can correct the record. Bytes that are not valid UTF-8 are carried
through as surrogate escapes so a load and save leaves them untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from ..configuration import get_settings
from ..errors import (
    BoatFormatError,
    BoatNotFoundError,
    InventoryFullError,
    InventoryPersistenceError,
)
from ..logging_utils import get_logger
from .codec import decode_boat, encode_boat
from .models import Boat

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


class BoatInventory:
    """Manage the ordered collection of boats kept at the marina."""

    def __init__(
        self,
        boats: Optional[Iterable[Boat]] = None,
        *,
        capacity: Optional[int] = None,
    ) -> None:
        self._capacity = capacity if capacity is not None else get_settings().max_boats
        self._boats: List[Boat] = list(boats or [])[: self._capacity]
        self._sort()
        LOGGER.debug(
            "Boat inventory initialised with %s boats (capacity %s)",
            len(self._boats),
            self._capacity,
        )

    @classmethod
    def load(cls, source: PathLike, *, capacity: Optional[int] = None) -> "BoatInventory":
        """Build an inventory from a CSV file, skipping lines that do not parse."""

        inventory = cls(capacity=capacity)
        path = Path(source)
        try:
            with path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
                for line_number, line in enumerate(handle, start=1):
                    if inventory.is_full:
                        LOGGER.debug("Capacity reached; ignoring lines from %s onwards", line_number)
                        break
                    try:
                        inventory._boats.append(decode_boat(line))
                    except BoatFormatError as error:
                        LOGGER.debug("Skipping line %s of %s: %s", line_number, path, error)
        except OSError as error:
            LOGGER.warning("Could not open file %s for reading: %s", path, error)
            return inventory

        inventory._sort()
        LOGGER.info("Loaded %s boats from %s", len(inventory), path)
        return inventory

    def save(self, destination: PathLike) -> None:
        """Overwrite ``destination`` with every boat in the current order."""

        path = Path(destination)
        try:
            with path.open("w", encoding="utf-8", errors="surrogateescape") as handle:
                handle.writelines(encode_boat(boat) for boat in self._boats)
        except OSError as error:
            raise InventoryPersistenceError(
                f"Could not open file {path} for writing"
            ) from error
        LOGGER.info("Saved %s boats to %s", len(self._boats), path)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self._capacity

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(self._boats)

    def list_boats(self) -> List[Boat]:
        """Return a snapshot of the boats in inventory order."""

        return list(self._boats)

    def add(self, raw_line: str) -> Boat:
        """Decode ``raw_line`` and insert the boat, keeping the order sorted."""

        if self.is_full:
            raise InventoryFullError("Maximum number of boats reached")
        boat = decode_boat(raw_line)
        self._boats.append(boat)
        self._sort()
        LOGGER.info("Added boat %s (%s)", boat.name, boat.location_type.value)
        return boat

    def find(self, name: str) -> Optional[int]:
        """Return the index of the first boat named ``name`` ignoring case."""

        for index, boat in enumerate(self._boats):
            if boat.matches(name):
                return index
        return None

    def get(self, name: str) -> Boat:
        """Retrieve a boat, raising informative errors when missing."""

        index = self.find(name)
        if index is None:
            raise BoatNotFoundError(name)
        return self._boats[index]

    def remove(self, name: str) -> Boat:
        """Delete the first boat named ``name``; remaining order is kept."""

        index = self.find(name)
        if index is None:
            raise BoatNotFoundError(name)
        removed = self._boats.pop(index)
        LOGGER.info("Removed boat %s", removed.name)
        return removed

    def _sort(self) -> None:
        self._boats.sort(key=Boat.sort_key)

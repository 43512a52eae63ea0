"""Mini README: Exception hierarchy shared by the marina modules.

The core modules raise these; the interactive shell and the CLI catch
``MarinaError`` subclasses and turn them into operator-facing messages.
Where it fits, a class also derives from the closest built-in so callers that know
only ``ValueError``, ``KeyError`` or ``OSError`` still behave sensibly.
"""

from __future__ import annotations


class MarinaError(Exception):
    """Base class for every recoverable marina error."""


class BoatFormatError(MarinaError, ValueError):
    """A CSV record does not have the expected five non-empty fields."""


class LocationTypeError(BoatFormatError):
    """A CSV record names a location keyword that is not recognised."""


class InventoryFullError(MarinaError):
    """The inventory already holds its maximum number of boats."""


class BoatNotFoundError(MarinaError, KeyError):
    """No boat matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No boat named '{self.name}'"


class PaymentExceedsBalanceError(MarinaError, ValueError):
    """A payment is larger than the amount currently owed."""

    def __init__(self, name: str, amount: float, balance: float) -> None:
        super().__init__(f"Payment of {amount:.2f} for {name} exceeds balance {balance:.2f}")
        self.name = name
        self.amount = amount
        self.balance = balance


class InventoryPersistenceError(MarinaError, OSError):
    """The inventory file could not be written."""

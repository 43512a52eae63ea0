"""Mini README: Interactive single-key menu for managing the inventory.

Structure:
    * format_boat - render one inventory line for the (I)nventory listing.
    * MarinaShell - read commands, dispatch to store/billing, print results.

The shell owns no state besides the inventory it was given. Every recoverable
``MarinaError`` is reported to the operator and control returns to the menu.
Input and output streams are injectable so sessions can be scripted in tests;
running out of input ends the session the same way as ``X``.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO

from ..billing import accept_payment, apply_monthly_charges
from ..errors import (
    BoatFormatError,
    BoatNotFoundError,
    InventoryFullError,
    LocationTypeError,
    PaymentExceedsBalanceError,
)
from ..inventory import Boat, BoatInventory, parse_lenient_float
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MENU_PROMPT = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
ADD_PROMPT = "Please enter the boat data in CSV format                 : "
NAME_PROMPT = "Please enter the boat name                               : "
AMOUNT_PROMPT = "Please enter the amount to be paid                       : "
EXIT_COMMAND = "X"


def format_boat(boat: Boat) -> str:
    """Return the fixed-width inventory line for ``boat``.

    Names holding bytes that were not valid UTF-8 in the data file are shown
    with replacement characters; the stored name is left as loaded.
    """

    name = boat.name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return (
        f"{name:<20} {boat.length:3.0f}' {boat.location.describe()}"
        f"   Owes ${boat.amount_owed:7.2f}"
    )


class MarinaShell:
    """Drive an interactive session against a ``BoatInventory``."""

    def __init__(
        self,
        inventory: BoatInventory,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.inventory = inventory
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._commands: Dict[str, Callable[[], None]] = {
            "I": self.show_inventory,
            "A": self.add_boat,
            "R": self.remove_boat,
            "P": self.take_payment,
            "M": self.bill_month,
        }

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _read_line(self, prompt: str) -> Optional[str]:
        """Prompt and read one line without its terminator; None at end of input."""

        self._write(prompt)
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def run(self) -> None:
        """Show the welcome banner and process commands until exit."""

        self._write("\nWelcome to the Boat Management System\n")
        self._write("-------------------------------------\n\n")
        while True:
            line = self._read_line(MENU_PROMPT)
            if line is None:
                LOGGER.debug("End of input reached; leaving the session")
                break
            choice = line[:1].upper()
            if choice == EXIT_COMMAND:
                break
            handler = self._commands.get(choice)
            if handler is None:
                self._write(f"Invalid option {choice}\n\n")
                continue
            handler()

    def show_inventory(self) -> None:
        for boat in self.inventory:
            self._write(format_boat(boat) + "\n")
        self._write("\n")

    def add_boat(self) -> None:
        raw_line = self._read_line(ADD_PROMPT)
        if raw_line is None:
            return
        try:
            self.inventory.add(raw_line)
        except InventoryFullError:
            self._write("Error: Maximum number of boats reached.\n\n")
        except LocationTypeError:
            self._write("Error: Invalid location type.\n\n")
        except BoatFormatError:
            self._write("Error: Invalid boat data format.\n\n")

    def remove_boat(self) -> None:
        name = self._read_line(NAME_PROMPT)
        if name is None:
            return
        try:
            self.inventory.remove(name)
        except BoatNotFoundError:
            self._write("No boat with that name\n\n")

    def take_payment(self) -> None:
        name = self._read_line(NAME_PROMPT)
        if name is None:
            return
        if self.inventory.find(name) is None:
            self._write("No boat with that name\n\n")
            return
        raw_amount = self._read_line(AMOUNT_PROMPT)
        if raw_amount is None:
            return
        try:
            accept_payment(self.inventory, name, parse_lenient_float(raw_amount))
        except PaymentExceedsBalanceError as error:
            self._write(f"That is more than the amount owed, ${error.balance:.2f}\n\n")

    def bill_month(self) -> None:
        apply_monthly_charges(self.inventory)
        self._write("\n")

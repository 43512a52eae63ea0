"""Mini README: Monthly billing and payment handling for marina boats.

Structure:
    * MONTHLY_RATES - per-foot monthly rate for each location type.
    * monthly_charge - charge a single boat accrues in one month.
    * apply_monthly_charges - add one month of charges to every boat.
    * accept_payment - reduce a boat's balance, refusing overpayments.

Charges accumulate without capping or proration. Balances are plain floats;
a payment equal to the balance leaves exactly what the subtraction yields.
"""

from __future__ import annotations

from typing import Dict, Iterable

from ..errors import PaymentExceedsBalanceError
from ..inventory.models import Boat, LocationType
from ..inventory.store import BoatInventory
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MONTHLY_RATES: Dict[LocationType, float] = {
    LocationType.SLIP: 12.50,
    LocationType.LAND: 14.00,
    LocationType.TRAILOR: 25.00,
    LocationType.STORAGE: 11.20,
}


def monthly_charge(boat: Boat) -> float:
    """Return the monthly charge for ``boat`` based on length and location."""

    return boat.length * MONTHLY_RATES[boat.location_type]


def apply_monthly_charges(boats: Iterable[Boat]) -> float:
    """Add one month of charges to every boat and return the total billed."""

    total = 0.0
    count = 0
    for boat in boats:
        charge = monthly_charge(boat)
        boat.amount_owed += charge
        total += charge
        count += 1
    LOGGER.info("Applied monthly charges to %s boats totalling %.2f", count, total)
    return total


def accept_payment(inventory: BoatInventory, name: str, amount: float) -> Boat:
    """Apply a payment against the named boat's balance.

    Raises ``BoatNotFoundError`` when no boat matches and
    ``PaymentExceedsBalanceError`` when ``amount`` is more than is owed; in
    both cases no balance changes.
    """

    boat = inventory.get(name)
    if amount > boat.amount_owed:
        raise PaymentExceedsBalanceError(boat.name, amount, boat.amount_owed)
    boat.amount_owed -= amount
    LOGGER.info("Accepted payment of %.2f for %s; balance %.2f", amount, boat.name, boat.amount_owed)
    return boat

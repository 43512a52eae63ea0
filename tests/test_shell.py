"""Mini README: Scripted sessions against the interactive menu.

Each test feeds a canned command stream through ``io.StringIO`` and checks
the resulting inventory and what the operator would have seen.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from marina.interface import MarinaShell, format_boat
from marina.inventory import BoatInventory


def _session(inventory: BoatInventory, commands: str) -> str:
    output = io.StringIO()
    MarinaShell(inventory, stdin=io.StringIO(commands), stdout=output).run()
    return output.getvalue()


@pytest.fixture()
def inventory(tmp_path: Path) -> BoatInventory:
    data_file = tmp_path / "boats.csv"
    data_file.write_text("Alice,20,slip,5,100.00\nBob,15,land,B,50.00\n", encoding="utf-8")
    return BoatInventory.load(data_file)


def test_format_boat_matches_listing_layout(inventory: BoatInventory) -> None:
    """Slip and land boats should render in the fixed-width listing layout."""

    alice, bob = inventory.list_boats()

    assert format_boat(alice) == "Alice".ljust(20) + "  20'     slip   #  5   Owes $ 100.00"
    assert format_boat(bob) == "Bob".ljust(20) + "  15'     land      B   Owes $  50.00"


def test_inventory_payment_and_month_scenario(inventory: BoatInventory) -> None:
    """Listing, paying and billing should leave the expected balances."""

    output = _session(inventory, "I\nP\nAlice\n100.00\nM\nI\nX\n")

    alice, bob = inventory.list_boats()
    assert alice.amount_owed == pytest.approx(250.0)
    assert bob.amount_owed == pytest.approx(260.0)
    assert "Welcome to the Boat Management System" in output
    assert "Owes $ 250.00" in output
    assert "Owes $ 260.00" in output


def test_commands_are_case_insensitive(inventory: BoatInventory) -> None:
    """Lower-case command keys should work like upper-case ones."""

    _session(inventory, "a\nCarol,10,storage,3,0\nr\nbob\nx\n")

    assert [boat.name for boat in inventory] == ["Alice", "Carol"]


def test_invalid_option_is_reported(inventory: BoatInventory) -> None:
    """Unknown keys should be reported and the menu shown again."""

    output = _session(inventory, "Z\nX\n")

    assert "Invalid option Z" in output
    assert output.count("(I)nventory, (A)dd") == 2


def test_add_errors_are_reported(inventory: BoatInventory) -> None:
    """Format and location type errors should be reported on add."""

    output = _session(inventory, "A\nDory,8,dock,2,0\nA\nDory,8,slip\nX\n")

    assert "Error: Invalid location type." in output
    assert "Error: Invalid boat data format." in output
    assert len(inventory) == 2


def test_add_when_full_is_reported() -> None:
    """Adding to a full inventory should report the maximum."""

    full = BoatInventory(capacity=1)
    full.add("Alice,20,slip,5,100.00")

    output = _session(full, "A\nBob,15,land,B,50.00\nX\n")

    assert "Error: Maximum number of boats reached." in output
    assert len(full) == 1


def test_remove_unknown_boat_is_reported(inventory: BoatInventory) -> None:
    """Removing an unknown boat should report it is missing."""

    output = _session(inventory, "R\nNobody\nX\n")

    assert "No boat with that name" in output
    assert len(inventory) == 2


def test_payment_over_balance_is_refused(inventory: BoatInventory) -> None:
    """Overpayments should be refused with the current balance shown."""

    output = _session(inventory, "P\nbob\n75\nX\n")

    assert "That is more than the amount owed, $50.00" in output
    assert inventory.get("Bob").amount_owed == pytest.approx(50.0)


def test_payment_for_unknown_boat_skips_amount_prompt(inventory: BoatInventory) -> None:
    """Unknown boats should be reported before asking for an amount."""

    output = _session(inventory, "P\nGhost\nX\n")

    assert "No boat with that name" in output
    assert "amount to be paid" not in output


def test_end_of_input_ends_session(inventory: BoatInventory) -> None:
    """Running out of input should end the session like exit."""

    output = _session(inventory, "M\n")

    assert inventory.get("Alice").amount_owed == pytest.approx(350.0)
    assert output.count("(I)nventory, (A)dd") == 2


def test_format_boat_trailor_and_storage_layouts() -> None:
    """Trailor and storage boats should render in the fixed-width listing layout."""

    inventory = BoatInventory(capacity=5)
    horizon = inventory.add("Horizon,14,trailor,TX1234,0")
    dory = inventory.add("Dory,8,storage,17,99.99")

    assert format_boat(horizon) == "Horizon".ljust(20) + "  14'  trailor TX1234   Owes $   0.00"
    assert format_boat(dory) == "Dory".ljust(20) + "   8'  storage   # 17   Owes $  99.99"


def test_format_boat_shows_undecodable_name_bytes_as_replacement(tmp_path: Path) -> None:
    """Names with bytes that are not UTF-8 should display with a replacement character."""

    data_file = tmp_path / "boats.csv"
    data_file.write_bytes(b"Ren\xe9e,20,slip,5,100.00\n")
    (boat,) = BoatInventory.load(data_file).list_boats()

    assert format_boat(boat).startswith("Ren\ufffde ")

"""Mini README: Entry point CLI for the marina boat inventory manager.

This script exposes a Typer CLI that loads the boat data file, hands control
to the interactive menu and writes the inventory back when the operator
exits. Capacity and log level come from ``MARINA_`` settings when present.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from marina.configuration import get_settings
from marina.errors import InventoryPersistenceError
from marina.interface import MarinaShell
from marina.inventory import BoatInventory
from marina.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(
    help="Track boats, balances and monthly charges for the marina.",
    add_completion=False,
)


@cli.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Argument(None, help="CSV file holding the boat inventory."),
) -> None:
    """Load DATA_FILE, run the interactive menu, then save DATA_FILE."""

    # Exactly one positional argument; anything else is a usage error with exit code 1.
    if data_file is None or ctx.args:
        typer.echo(f"Usage: {ctx.find_root().info_name} <filename.csv>")
        raise typer.Exit(code=1)

    settings = get_settings()
    configure_root_logger(settings.log_level)

    inventory = BoatInventory.load(data_file, capacity=settings.max_boats)
    MarinaShell(inventory).run()

    try:
        inventory.save(data_file)
    except InventoryPersistenceError as error:
        LOGGER.error("%s: %s", error, error.__cause__)
        typer.echo(f"Error: Could not open file {data_file} for writing.")

    typer.echo("\nExiting the Boat Management System")


if __name__ == "__main__":
    cli()

"""bidsort menu — interactive load / display / sort loop."""

from __future__ import annotations

import click


@click.command()
@click.argument("csv_path", required=False)
@click.pass_obj
def menu(config, csv_path: str | None) -> None:
    """Start the interactive menu for a CSV file of bids."""
    from bidsort.app.menu import MenuDriver
    from bidsort.core.cli.common import build_state

    state = build_state(config, csv_path)
    MenuDriver(state).run()

"""bidsort sort — load a file, sort it once, report the timing."""

from __future__ import annotations

import click

from bidsort.app.state import SortAlgorithm


@click.command()
@click.argument("csv_path", required=False)
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice([a.value for a in SortAlgorithm]),
    default=SortAlgorithm.QUICK.value,
    show_default=True,
    help="Sorting algorithm to run.",
)
@click.option("--show/--no-show", default=False, help="Print the sorted bids.")
@click.pass_obj
def sort(config, csv_path: str | None, algorithm: str, show: bool) -> None:
    """Load bids from CSV_PATH and sort them by title."""
    from bidsort.app.state import load, sort_bids
    from bidsort.core.cli.common import build_state
    from bidsort.core.exceptions import FileIOError

    state = build_state(config, csv_path)
    load_timing = load(state)
    result = state.last_load

    try:
        result.raise_for_failure()
    except FileIOError as e:
        raise click.ClickException(str(e)) from e
    if result.errors:
        click.echo(f"Skipped {len(result.errors)} malformed rows.", err=True)

    click.echo(f"{len(state.bids)} bids read in {load_timing.seconds} seconds")

    chosen = SortAlgorithm(algorithm)
    timing = sort_bids(state, chosen)
    click.echo(f"{chosen.label} completed in {timing.ticks} clock ticks.")
    click.echo(f"{chosen.label} completed in {timing.seconds} seconds.")

    if show:
        for bid in state.bids:
            click.echo(bid.format_line())

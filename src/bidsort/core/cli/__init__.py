"""bidsort CLI — entry point for the menu and sort commands."""

import click

from bidsort import __version__


@click.group()
@click.version_option(version=__version__, package_name="bidsort")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML or JSON configuration file.",
)
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING, ERROR).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """bidsort — load eBid records and sort them by title."""
    from bidsort.core.cli.common import configure

    ctx.obj = configure(config_file, log_level)


# Register subcommands
from .menu_cmd import menu
from .sort_cmd import sort

main.add_command(menu)
main.add_command(sort)

"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click

from bidsort.app.state import AppState
from bidsort.core.config import Config
from bidsort.core.exceptions import ConfigurationError
from bidsort.core.utils.logging import setup_logging


def configure(config_file: str | None, log_level: str | None) -> Config:
    """Load configuration and set up logging from it."""
    try:
        config = Config(config_file=config_file)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(config, level=log_level)
    return config


def build_state(config: Config, csv_path: str | None) -> AppState:
    """Create the driver state, turning bad loader settings into a CLI error."""
    try:
        return AppState.from_config(config, csv_path=csv_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

"""Application state and the driver operations that act on it.

The state is owned by whoever drives the program (menu loop, CLI
command) and passed explicitly to ``load`` and ``sort_bids``. Neither
operation prints; both return the Timing of the work they did.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from bidsort.bids.loader import DEFAULT_COLUMNS, LoadResult, load_bids
from bidsort.bids.models import Bid
from bidsort.core.config import Config
from bidsort.sorting import quick_sort, quick_sort_iterative, selection_sort

from .timing import Timing, stopwatch


class SortAlgorithm(Enum):
    SELECTION = "selection"
    QUICK = "quick"
    QUICK_ITERATIVE = "quick-iterative"

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Quick sort"``."""
        return _LABELS[self]


_LABELS = {
    SortAlgorithm.SELECTION: "Selection sort",
    SortAlgorithm.QUICK: "Quick sort",
    SortAlgorithm.QUICK_ITERATIVE: "Iterative quick sort",
}

_SORTERS: dict[SortAlgorithm, Callable[[MutableSequence[Bid]], None]] = {
    SortAlgorithm.SELECTION: selection_sort,
    SortAlgorithm.QUICK: quick_sort,
    SortAlgorithm.QUICK_ITERATIVE: quick_sort_iterative,
}


@dataclass
class AppState:
    """Everything the driver keeps between menu choices."""

    csv_path: str
    bids: list[Bid] = field(default_factory=list)
    last_load: LoadResult | None = None
    columns: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_COLUMNS))
    currency_symbol: str = "$"
    delimiter: str = ","
    encoding: str = "utf-8"

    @classmethod
    def from_config(cls, config: Config, csv_path: str | None = None) -> AppState:
        """Build state from configuration; ``csv_path`` overrides ``paths.csv_path``."""
        return cls(
            csv_path=csv_path or config.get("paths.csv_path"),
            columns=config.get_columns(),
            currency_symbol=config.get("loader.currency_symbol", "$"),
            delimiter=config.get("loader.delimiter", ","),
            encoding=config.get("loader.encoding", "utf-8"),
        )


def load(state: AppState) -> Timing:
    """Replace ``state.bids`` with a fresh load of ``state.csv_path``."""
    with stopwatch() as timing:
        result = load_bids(
            state.csv_path,
            columns=state.columns,
            currency_symbol=state.currency_symbol,
            delimiter=state.delimiter,
            encoding=state.encoding,
        )
    state.last_load = result
    state.bids = result.bids
    return timing


def sort_bids(state: AppState, algorithm: SortAlgorithm) -> Timing:
    """Sort all of ``state.bids`` by title with the chosen algorithm."""
    sorter = _SORTERS[algorithm]
    logger.debug(f"{algorithm.label} over {len(state.bids)} bids")
    with stopwatch() as timing:
        sorter(state.bids)
    logger.debug(f"{algorithm.label} took {timing.ticks} ticks")
    return timing

"""Driver layer around the sorting core."""

from .state import AppState, SortAlgorithm, load, sort_bids
from .timing import Timing, stopwatch

__all__ = [
    "AppState",
    "SortAlgorithm",
    "Timing",
    "load",
    "sort_bids",
    "stopwatch",
]

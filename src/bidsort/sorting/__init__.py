"""In-place sorts that order bids by title."""

from .quick import partition, quick_sort, quick_sort_iterative
from .selection import selection_sort

__all__ = [
    "partition",
    "quick_sort",
    "quick_sort_iterative",
    "selection_sort",
]

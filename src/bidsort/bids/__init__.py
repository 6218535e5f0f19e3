"""Bid records and their CSV loader."""

from .currency import parse_amount
from .loader import DEFAULT_COLUMNS, LoadError, LoadErrorKind, LoadResult, load_bids
from .models import Bid

__all__ = [
    "DEFAULT_COLUMNS",
    "Bid",
    "LoadError",
    "LoadErrorKind",
    "LoadResult",
    "load_bids",
    "parse_amount",
]

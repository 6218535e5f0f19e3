"""Bid record model.

A bid is one row of the eBid monthly sales export. The title is the
sort key used throughout :mod:`bidsort.sorting`.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Bid:
    """A single auction bid.

    Attributes:
        bid_id: Auction identifier (unique, but not enforced).
        title: Auction title; the key bids are sorted by.
        fund: Fund / category label.
        amount: Winning bid amount.
    """

    bid_id: str
    title: str
    fund: str
    amount: Decimal = Decimal("0")

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))
        if self.amount < 0:
            raise ValueError(f"Bid {self.bid_id} has negative amount: {self.amount}")

    def format_line(self) -> str:
        """One-line display form: ``id: title | amount | fund``."""
        return f"{self.bid_id}: {self.title} | {self.amount} | {self.fund}"

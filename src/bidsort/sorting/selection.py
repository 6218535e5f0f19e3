"""Selection sort over bid titles.

Always O(n^2) comparisons and at most n - 1 exchanges.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from bidsort.bids.models import Bid


def selection_sort(bids: MutableSequence[Bid]) -> None:
    """Sort ``bids`` ascending by title, in place.

    Each pass finds the earliest bid with the smallest title in the
    unsorted tail and exchanges it into position. Not stable.
    """
    size = len(bids)
    for pos in range(size - 1):
        min_index = pos
        for i in range(pos + 1, size):
            if bids[i].title < bids[min_index].title:
                min_index = i
        if min_index != pos:
            bids[pos], bids[min_index] = bids[min_index], bids[pos]

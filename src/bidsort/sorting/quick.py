"""Quicksort over bid titles.

Average O(n log n), worst case O(n^2). The pivot is the title at the
middle of the range; the partition scan is two-pointer (Hoare style), so
the split point returned belongs to the left half.

``quick_sort`` recurses; ``quick_sort_iterative`` keeps an explicit stack
of ranges and produces the same ordering without growing the call stack.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from bidsort.bids.models import Bid
from bidsort.core.exceptions import SortRangeError


def partition(bids: MutableSequence[Bid], begin: int, end: int) -> int:
    """Partition ``bids[begin:end + 1]`` around the middle title.

    Bids with titles below the pivot end up at or before the returned
    index, titles above it after. Titles equal to the pivot may land on
    either side. Requires ``0 <= begin <= end < len(bids)``; bounds are
    not checked here.

    Returns:
        The split index ``p``, with ``begin <= p < end`` whenever
        ``begin < end``.
    """
    low = begin
    high = end
    pivot = bids[(begin + end) // 2].title

    while True:
        while bids[low].title < pivot:
            low += 1
        while bids[high].title > pivot:
            high -= 1
        if low >= high:
            return high
        bids[low], bids[high] = bids[high], bids[low]
        low += 1
        high -= 1


def _resolve_range(bids: MutableSequence[Bid], begin: int, end: int | None) -> int:
    """Default ``end`` to the last index and reject out-of-bounds ranges."""
    if end is None:
        end = len(bids) - 1
    if begin < end and (begin < 0 or end >= len(bids)):
        raise SortRangeError(f"Range [{begin}, {end}] is outside a sequence of {len(bids)} bids")
    return end


def quick_sort(bids: MutableSequence[Bid], begin: int = 0, end: int | None = None) -> None:
    """Sort the inclusive range ``[begin, end]`` of ``bids`` by title, in place.

    Args:
        bids: The bids to sort.
        begin: First index of the range.
        end: Last index of the range. Defaults to the last bid, so
            ``quick_sort(bids)`` sorts everything (an empty list included).

    Raises:
        SortRangeError: If the range holds two or more positions and is
            not inside ``bids``. Negative indices are not wrapped.
    """
    end = _resolve_range(bids, begin, end)
    _quick_sort(bids, begin, end)


def _quick_sort(bids: MutableSequence[Bid], begin: int, end: int) -> None:
    if begin >= end:
        return
    split = partition(bids, begin, end)
    _quick_sort(bids, begin, split)
    _quick_sort(bids, split + 1, end)


def quick_sort_iterative(bids: MutableSequence[Bid], begin: int = 0, end: int | None = None) -> None:
    """Same as :func:`quick_sort`, using an explicit stack of ranges.

    Suited to large or adversarial inputs where recursion depth could
    reach the interpreter's limit.
    """
    end = _resolve_range(bids, begin, end)

    pending = [(begin, end)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = partition(bids, low, high)
        # Right half pushed first so the left half is handled first, as in quick_sort
        pending.append((split + 1, high))
        pending.append((low, split))

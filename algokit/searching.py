"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None.

    The middle of the current range is probed first, so with duplicates the
    index found is whichever copy the halving reaches first.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next(
        (index for index, value in enumerate(items) if value == target),
        None,
    )
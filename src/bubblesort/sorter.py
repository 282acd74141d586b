"""In-place bubble sort over mutable integer sequences."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass
from itertools import pairwise

LOGGER = logging.getLogger(__name__)


class InvalidSequenceError(ValueError):
    pass


@dataclass(slots=True)
class SortStats:
    passes: int = 0
    comparisons: int = 0
    swaps: int = 0


def validate_sequence(values: object) -> None:
    """Raise :class:`InvalidSequenceError` unless *values* is a mutable sequence of ints."""

    if not isinstance(values, MutableSequence):
        raise InvalidSequenceError(
            f"expected a mutable sequence of integers, got {type(values).__name__}"
        )
    for index, value in enumerate(values):
        # bool is an int subclass but not a meaningful sort key here.
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSequenceError(
                f"element {index} is not an integer: {value!r} ({type(value).__name__})"
            )


def bubble_sort_with_stats(values: MutableSequence[int], *, early_exit: bool = False) -> SortStats:
    """Sort *values* in place and return pass, comparison and swap counts.

    Each pass walks the unsorted prefix swapping adjacent pairs that are out
    of order, so after pass ``i`` the last ``i + 1`` slots are final. Without
    ``early_exit`` all ``n - 1`` passes run even when the input is already
    sorted; with it the loop stops after the first pass that swaps nothing.
    """

    validate_sequence(values)
    stats = SortStats()
    n = len(values)
    for i in range(n - 1):
        swapped = 0
        for j in range(n - i - 1):
            stats.comparisons += 1
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped += 1
        stats.passes += 1
        stats.swaps += swapped
        LOGGER.debug("Pass %s: %s swap(s)", i + 1, swapped)
        if early_exit and not swapped:
            LOGGER.debug("Pass %s made no swaps; stopping early", i + 1)
            break
    LOGGER.debug(
        "Sorted %s value(s): passes=%s comparisons=%s swaps=%s",
        n,
        stats.passes,
        stats.comparisons,
        stats.swaps,
    )
    return stats


def bubble_sort(values: MutableSequence[int], *, early_exit: bool = False) -> None:
    """Sort *values* in place into non-decreasing order."""

    bubble_sort_with_stats(values, early_exit=early_exit)


def is_sorted(values: Iterable[int]) -> bool:
    """Return ``True`` when *values* is in non-decreasing order.

    Accepts any iterable, so a one-shot iterator is consumed. Empty and
    single-element inputs count as sorted.
    """

    return all(left <= right for left, right in pairwise(values))

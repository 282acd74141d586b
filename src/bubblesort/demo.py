"""Print, sort and print again: the bubble sort walkthrough."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from .printer import print_sequence
from .sorter import bubble_sort_with_stats, validate_sequence

LOGGER = logging.getLogger(__name__)

DEFAULT_VALUES: tuple[int, ...] = (64, 34, 25, 12, 22, 11, 90)
BEFORE_LABEL = "array before sorting:"
AFTER_LABEL = "array after sorting:"


def run_demo(
    values: Iterable[int] | None = None,
    *,
    early_exit: bool = False,
    before_label: str = BEFORE_LABEL,
    after_label: str = AFTER_LABEL,
    stream: TextIO | None = None,
) -> list[int]:
    """Print *values*, bubble sort them in place, print the result and return it."""

    arr = list(DEFAULT_VALUES if values is None else values)
    validate_sequence(arr)

    print_sequence(arr, before_label, stream)
    stats = bubble_sort_with_stats(arr, early_exit=early_exit)
    print_sequence(arr, after_label, stream)

    LOGGER.debug(
        "Sorted %s value(s) in %s pass(es): %s comparison(s), %s swap(s)",
        len(arr),
        stats.passes,
        stats.comparisons,
        stats.swaps,
    )
    return arr

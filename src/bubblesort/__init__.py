"""bubblesort public package exports."""

from .config import load_config, load_settings
from .demo import run_demo
from .printer import format_sequence, print_sequence
from .properties import check_properties, is_permutation
from .sorter import InvalidSequenceError, SortStats, bubble_sort, bubble_sort_with_stats, is_sorted, validate_sequence

__all__ = [
    "InvalidSequenceError",
    "SortStats",
    "bubble_sort",
    "bubble_sort_with_stats",
    "check_properties",
    "format_sequence",
    "is_permutation",
    "is_sorted",
    "load_config",
    "load_settings",
    "print_sequence",
    "run_demo",
    "validate_sequence",
]

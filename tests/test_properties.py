"""Tests for the sort property checker."""

from __future__ import annotations

import logging

from bubblesort.properties import DATASETS, PROPERTIES, check_properties, is_permutation
from bubblesort.sorter import bubble_sort


def test_bubble_sort_satisfies_all_properties() -> None:
    metrics = check_properties(bubble_sort)
    for name in PROPERTIES:
        assert metrics[name] == 1.0
    assert metrics["time_ms"] >= 0.0


def test_datasets_cover_boundaries() -> None:
    assert () in DATASETS
    assert (42,) in DATASETS
    assert (5, 3, 5, 1) in DATASETS
    assert (64, 34, 25, 12, 22, 11, 90) in DATASETS


def test_dropping_duplicates_breaks_permutation() -> None:
    def dedupe_sort(values):
        unique = sorted(set(values))
        values[:] = unique

    metrics = check_properties(dedupe_sort, [(5, 3, 5, 1), (2, 1)])
    assert metrics["sortedness"] == 1.0
    assert metrics["permutation"] == 0.5
    assert metrics["matches_builtin"] == 0.5


def test_noop_sort_fails_sortedness() -> None:
    metrics = check_properties(lambda values: None, [(1, 2), (2, 1)])
    assert metrics["sortedness"] == 0.5
    assert metrics["permutation"] == 1.0
    assert metrics["idempotence"] == 1.0


def test_raising_sort_counts_as_failure(caplog) -> None:
    def broken(values):
        if len(values) > 1:
            raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG, logger="bubblesort.properties"):
        metrics = check_properties(broken, [(1,), (3, 2)])

    assert metrics["sortedness"] == 0.5
    assert "boom" in caplog.text


def test_is_permutation_respects_multiplicity() -> None:
    assert is_permutation([5, 3, 5, 1], [1, 3, 5, 5])
    assert not is_permutation([5, 3, 5, 1], [1, 3, 5])
    assert not is_permutation([1, 1, 2], [1, 2, 2])
